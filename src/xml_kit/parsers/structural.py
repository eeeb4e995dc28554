# src/xml_kit/parsers/structural.py

import logging
import re
from collections.abc import Callable
from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from .array_policy import ArrayPolicy
from .base import AttributeValueProcessor, StructuralParser
from .models import ATTRIBUTE_PREFIX, TEXT_KEY, MalformedDocumentError, ParsedDocument
from .normalize import normalize_attribute

logger = logging.getLogger(__name__)

# "&" that doesn't start one of the five predefined entities or a
# character reference
_UNRESOLVABLE_AMPERSAND = re.compile(
    r"&(?!(?:lt|gt|amp|quot|apos|#[0-9]+|#[xX][0-9a-fA-F]+);)"
)

# Control characters that are illegal in XML 1.0 (tab, LF and CR are legal)
_ILLEGAL_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")

# Capturing, so re.split keeps the sections at odd indexes
_CDATA_SECTION = re.compile(r"(<!\[CDATA\[.*?\]\]>)", re.DOTALL)


class XmltodictParser(StructuralParser):
    """
    StructuralParser backed by xmltodict (expat underneath).

    - Tag names are uppercased, attribute names are kept as written
    - Attribute values go through ``attribute_value_processor``
    - Empty elements without attributes become ``""``
    - Without validation, unknown entities such as ``&nbsp;`` and bare
      ``&`` are kept as literal text and control characters illegal in
      XML 1.0 are dropped, instead of failing the parse. CDATA sections
      are passed through as written
    """

    def __init__(
        self,
        attribute_value_processor: AttributeValueProcessor = normalize_attribute,
    ) -> None:
        self._attribute_value_processor = attribute_value_processor

    def parse(
        self,
        text: str,
        *,
        array_policy: ArrayPolicy,
        validate: bool = False,
    ) -> ParsedDocument:
        if not validate:
            text = _tolerate_markup(text)

        try:
            result = xmltodict.parse(
                text,
                attr_prefix=ATTRIBUTE_PREFIX,
                cdata_key=TEXT_KEY,
                postprocessor=self._postprocess,
                force_list=_force_list_hook(array_policy),
            )
        except (ExpatError, ValueError) as exc:
            logger.error("Failed to parse XML: %s", exc)
            raise MalformedDocumentError(f"Malformed XML: {exc}") from exc

        return result or {}

    def _postprocess(self, path: list, key: str, value: Any) -> tuple[str, Any]:
        if key.startswith(ATTRIBUTE_PREFIX):
            name = key[len(ATTRIBUTE_PREFIX) :]
            return key, self._attribute_value_processor(name, value)
        if key == TEXT_KEY:
            return key, value
        return key.upper(), "" if value is None else value


def _force_list_hook(array_policy: ArrayPolicy) -> Callable[[list, str, Any], bool]:
    def force_list(path: list, key: str, value: Any) -> bool:
        if key == TEXT_KEY:
            return False
        tags = [name.upper() for name, _ in path]
        tags.append(key)
        return array_policy.should_wrap(
            tags,
            is_leaf=not isinstance(value, dict),
            is_attribute=key.startswith(ATTRIBUTE_PREFIX),
        )

    return force_list


def _tolerate_markup(text: str) -> str:
    # CDATA content is literal, escaping "&" there would change it
    parts = _CDATA_SECTION.split(_ILLEGAL_XML_CHARS.sub("", text))
    for i in range(0, len(parts), 2):
        parts[i] = _UNRESOLVABLE_AMPERSAND.sub("&amp;", parts[i])
    return "".join(parts)
