# src/xml_kit/parsers/array_policy.py

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ArrayPolicy:
    """Decides whether a single element must still be wrapped in a list.

    With ``always_array`` off, nothing is forced: repeated siblings become
    lists on their own and singletons stay bare. With it on, every element
    below the root is a list. The root and attribute values are never
    wrapped.
    """

    always_array: bool = False

    def should_wrap(
        self,
        path: Sequence[str],
        is_leaf: bool,  # noqa: ARG002
        is_attribute: bool,
    ) -> bool:
        """
        Args:
            path: Tag names from the document root down to the value,
                the value's own tag included.
            is_leaf: Whether the value has no child elements or attributes.
            is_attribute: Whether the value is an attribute value.
        """
        if is_attribute or not self.always_array:
            return False
        return len(path) > 1


DEFAULT_ARRAY_POLICY = ArrayPolicy()
