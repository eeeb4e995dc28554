# src/xml_kit/parsers/repair.py

"""Repair of the two corruption patterns seen in upstream XML exports.

Only these exact sequences are touched. Escaping every bare ``<`` or ``&``
would break markup that is already well formed.
"""

_REPAIRS = (
    # stray "<" glued to the previous tag
    ("><<", ">&lt;<"),
    # stray "&" between two tags
    (">&<", ">&#38;<"),
)


def repair_markup(content: str) -> str:
    for broken, fixed in _REPAIRS:
        content = content.replace(broken, fixed)
    return content
