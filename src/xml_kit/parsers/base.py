# src/xml_kit/parsers/base.py

from collections.abc import Callable
from typing import Protocol

from .array_policy import ArrayPolicy
from .models import ParsedDocument

AttributeValueProcessor = Callable[[str, str], str]


class StructuralParser(Protocol):
    """Turns well-formed XML text into a ParsedDocument.

    Requirements for implementations:
    - Tag names are uppercased
    - Attribute keys are prefixed with ``$`` and their values stay strings
    - Repeated siblings become lists; ``array_policy`` may force more
    - Errors surface as MalformedDocumentError
    """

    def parse(
        self,
        text: str,
        *,
        array_policy: ArrayPolicy,
        validate: bool = False,
    ) -> ParsedDocument: ...
