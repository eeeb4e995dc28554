# src/xml_kit/parsers/models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from .row_stream import RowStream

# Nested mapping keyed by uppercased tag name. Attribute keys carry the
# ``$`` prefix and always hold strings.
ParsedDocument: TypeAlias = dict[str, Any]

# ``None`` when a chunk held no complete row, otherwise the rows in
# document order.
EmissionBatch: TypeAlias = list[ParsedDocument] | None

ATTRIBUTE_PREFIX = "$"
TEXT_KEY = "#text"


class MalformedDocumentError(ValueError):
    """Raised when repaired XML still can't be parsed."""


@dataclass(frozen=True)
class ParsedZipEntry:
    name: str
    parsed_data: ParsedDocument


@dataclass(frozen=True)
class RowStreamEntry:
    name: str
    stream: RowStream
