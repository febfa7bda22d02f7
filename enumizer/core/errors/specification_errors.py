"""Errors describing a malformed alias specification.

Error Types:
- SpecificationError: any rejected specification (identifiers, arity, flags)
- CapabilityError: rejected capability list entries or combinations

Usage:
    from enumizer.core.errors import SpecificationError
    from enumizer.core.enums import ErrorCode
    from enumizer.core.canonical import Failure

    return Failure(error=SpecificationError(
        code=ErrorCode.DUPLICATE_VARIANT,
        message="Variant 'Found' is declared twice",
        type_name="Lookup",
    ))
"""

from dataclasses import dataclass

from enumizer.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SpecificationError(DomainError):
    """Specification rejected by the normalizer.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        type_name: Alias the specification was for, when known.
        identifier: Offending identifier, when there is one.
        details: Additional context.
    """

    type_name: str | None = None
    identifier: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CapabilityError(SpecificationError):
    """Capability list rejected by the normalizer.

    Attributes:
        capability: Offending capability entry as supplied.
    """

    capability: str | None = None
