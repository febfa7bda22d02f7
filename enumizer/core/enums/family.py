"""Alias families (canonical shapes) the generator can emit."""

from enum import Enum


class Family(str, Enum):
    """Canonical shape an alias is equivalent to.

    - OPTION: nullable shape, one empty and one payload variant.
    - RESULT: fallible shape, success and failure payload variants.
    - EITHER: two payload variants with no privileged side.
    """

    OPTION = "option"
    RESULT = "result"
    EITHER = "either"

    @property
    def supports_short_circuit(self) -> bool:
        """Whether the shape has a forward and a stop variant."""
        return self is not Family.EITHER
