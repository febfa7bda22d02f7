"""Derivable capabilities attached to generated aliases.

Each capability maps to one independent emission step in the feature
composer. The baseline set is applied when a specification omits the list.
"""

from enum import Enum


class Capability(str, Enum):
    """Capability names accepted in a specification's capability list."""

    EQ = "eq"
    ORD = "ord"
    HASH = "hash"
    COPY = "copy"
    DEBUG = "debug"
    DISPLAY = "display"
    SERIALIZE = "serialize"


DEFAULT_CAPABILITIES: tuple[Capability, ...] = (
    Capability.EQ,
    Capability.ORD,
    Capability.HASH,
    Capability.COPY,
    Capability.DEBUG,
)

# Capabilities that are meaningless without structural equality.
REQUIRES_EQ: frozenset[Capability] = frozenset({Capability.ORD, Capability.HASH})
