# src/xml_kit/parsers/normalize.py

import re

NULL_LITERAL = "null"

_INVISIBLE_CHARACTERS = re.compile("[\u0002\u0003\u200b\u202a\u202b]")
_SPACE_RUNS = re.compile(r"(?:\s|&nbsp;)+")
_TABS_AND_LINE_BREAKS = re.compile(r"[\t\n\r]")


def normalize_attribute_value(value: str) -> str:
    """Clean up a raw attribute value.

    - ``"null"`` becomes ``""``
    - invisible control / bidi characters are deleted
    - runs of whitespace and ``&nbsp;`` collapse to one space
    - the result is trimmed

    Never raises. The value is never coerced to a number.
    """
    if value == NULL_LITERAL:
        return ""

    # Deleting first so a removed character can't leave a double space behind
    cleaned = _INVISIBLE_CHARACTERS.sub("", value)
    cleaned = _SPACE_RUNS.sub(" ", cleaned)
    cleaned = _TABS_AND_LINE_BREAKS.sub(" ", cleaned)
    return cleaned.strip()


def normalize_attribute(name: str, value: str) -> str:  # noqa: ARG001
    """Attribute value hook for structural parsers."""
    return normalize_attribute_value(value)
