# Archives
from .archives import ZipEntry, ZipEntryStream, iter_zip_entry_streams, read_zip_entries

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    ArrayPolicy,
    EmissionBatch,
    MalformedDocumentError,
    ParsedDocument,
    ParsedZipEntry,
    RowStream,
    RowStreamEntry,
    RowStreamExtractor,
    StructuralParser,
    XmlParser,
    XmlParserConfig,
    XmltodictParser,
    XmlZipParser,
    load_config,
    normalize_attribute_value,
    repair_markup,
)

# Streams
from .streams import ByteSource, iter_chunks

__all__ = [
    # Archives
    "ZipEntry",
    "ZipEntryStream",
    "iter_zip_entry_streams",
    "read_zip_entries",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "ArrayPolicy",
    "EmissionBatch",
    "MalformedDocumentError",
    "ParsedDocument",
    "ParsedZipEntry",
    "RowStream",
    "RowStreamEntry",
    "RowStreamExtractor",
    "StructuralParser",
    "XmlParser",
    "XmlParserConfig",
    "XmltodictParser",
    "XmlZipParser",
    "load_config",
    "normalize_attribute_value",
    "repair_markup",
    # Streams
    "ByteSource",
    "iter_chunks",
]
