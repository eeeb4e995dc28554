# src/xml_kit/parsers/__init__.py

"""XML parsing layer for xml-kit.

Turns XML (plain or zipped) into nested dicts with uppercased tag names
and ``$``-prefixed string attributes.

Example:
    >>> from xml_kit.parsers import XmlParser, XmlParserConfig
    >>>
    >>> parser = XmlParser(XmlParserConfig(always_array=True))
    >>> parser.parse(b'<data><row id="1"/></data>')
    {'DATA': {'ROW': [{'$id': '1'}]}}
    >>>
    >>> with open("export.xml", "rb") as f:
    ...     async for row in parser.parse_stream(f, "row").rows():
    ...         print(row["$id"])
"""

from .array_policy import ArrayPolicy
from .base import StructuralParser
from .config import XmlParserConfig, load_config
from .models import (
    EmissionBatch,
    MalformedDocumentError,
    ParsedDocument,
    ParsedZipEntry,
    RowStreamEntry,
)
from .normalize import normalize_attribute_value
from .repair import repair_markup
from .row_stream import RowStream, RowStreamExtractor
from .structural import XmltodictParser
from .xml_parser import XmlParser
from .xml_zip_parser import XmlZipParser

__all__ = [
    # Parsers
    "XmlParser",
    "XmlZipParser",
    # Streaming
    "RowStream",
    "RowStreamExtractor",
    # Structural parsing
    "StructuralParser",
    "XmltodictParser",
    "ArrayPolicy",
    # Config
    "XmlParserConfig",
    "load_config",
    # Text helpers
    "normalize_attribute_value",
    "repair_markup",
    # Types
    "EmissionBatch",
    "MalformedDocumentError",
    "ParsedDocument",
    "ParsedZipEntry",
    "RowStreamEntry",
]
