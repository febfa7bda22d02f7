"""Generation-time error codes (machine-readable).

Error codes follow SUBJECT_REASON naming convention.
Used with Result types returned by the specification normalizer.

Categories:
- Identifier errors (INVALID_IDENTIFIER, DUPLICATE_VARIANT, NAME_COLLISION)
- Capability errors (*_CAPABILITY, INCONSISTENT_CAPABILITIES)
- Shape errors (INVALID_ARITY, UNSUPPORTED_FEATURE)
- Input errors (MALFORMED_SPECIFICATION)
"""

from enum import Enum


class ErrorCode(Enum):
    """Generation-time error codes (machine-readable)."""

    # Identifier errors
    INVALID_IDENTIFIER = "invalid_identifier"
    DUPLICATE_VARIANT = "duplicate_variant"
    NAME_COLLISION = "name_collision"

    # Capability errors
    UNKNOWN_CAPABILITY = "unknown_capability"
    DUPLICATE_CAPABILITY = "duplicate_capability"
    INCONSISTENT_CAPABILITIES = "inconsistent_capabilities"

    # Shape errors
    INVALID_ARITY = "invalid_arity"
    UNSUPPORTED_FEATURE = "unsupported_feature"

    # Input errors
    MALFORMED_SPECIFICATION = "malformed_specification"
