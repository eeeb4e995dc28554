# src/xml_kit/observability/names.py

"""Standard metric names for xml-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Document Metrics
# ============================================================================

# Duration
XML_PARSE_DURATION = "xml_parse_duration"

# Counters
XML_DOCUMENTS_PARSED_TOTAL = "xml_documents_parsed_total"
XML_PARSE_ERRORS_TOTAL = "xml_parse_errors_total"


# ============================================================================
# Row Stream Metrics
# ============================================================================

# Counters
XML_STREAM_CHUNKS_TOTAL = "xml_stream_chunks_total"
XML_STREAM_ROWS_EMITTED = "xml_stream_rows_emitted"

# Counters (characters left in the carry buffer when a stream ends)
XML_STREAM_CARRY_DISCARDED = "xml_stream_carry_discarded"


# ============================================================================
# Zip Metrics
# ============================================================================

# Counters
ZIP_ENTRIES_PARSED_TOTAL = "zip_entries_parsed_total"
ZIP_ENTRIES_SKIPPED_TOTAL = "zip_entries_skipped_total"
