"""Specification normalizer.

Canonicalizes a RawSpecification into a GenerationSpec. Every rejection is
returned as a Failure so the caller can stop generation before anything is
emitted; nothing is ever partially generated.

Usage:
    from enumizer.application.normalizer import normalize
    from enumizer.core.canonical import Failure, Success

    match normalize(raw, namespace=globals()):
        case Success(value=spec):
            ...
        case Failure(error=error):
            raise GenerationError(error)
"""

import builtins
import keyword
from collections.abc import Iterable, Mapping
from typing import Any

from enumizer.core.canonical import Failure, Result, Success
from enumizer.core.enums import (
    DEFAULT_CAPABILITIES,
    REQUIRES_EQ,
    Capability,
    ErrorCode,
    Family,
)
from enumizer.core.errors import CapabilityError, SpecificationError
from enumizer.domain.spec import GenerationSpec, VariantSpec
from enumizer.schemas.spec_schemas import RawSpecification

# Payload arity per variant position, in canonical order.
_ARITIES: dict[Family, tuple[int, int]] = {
    Family.OPTION: (0, 1),
    Family.RESULT: (1, 1),
    Family.EITHER: (1, 1),
}


def validate_identifier(
    identifier: str, *, role: str, type_name: str | None = None
) -> Result[str, SpecificationError]:
    """Validate a type or variant identifier.

    Identifiers must be Python identifiers, not keywords, and not private
    or dunder names (those are reserved for generated internals).

    Args:
        identifier: Candidate identifier.
        role: What the identifier names ("type name", "variant").
        type_name: Alias being specified, for error context.

    Returns:
        Success with the identifier, Failure with INVALID_IDENTIFIER.
    """
    if (
        not isinstance(identifier, str)
        or not identifier.isidentifier()
        or keyword.iskeyword(identifier)
        or keyword.issoftkeyword(identifier)
        or identifier.startswith("_")
    ):
        return Failure(
            error=SpecificationError(
                code=ErrorCode.INVALID_IDENTIFIER,
                message=f"{role} {identifier!r} is not a valid public identifier",
                type_name=type_name,
                identifier=str(identifier),
            )
        )
    return Success(value=identifier)


def normalize_capabilities(
    capabilities: Iterable[Capability | str] | None,
    *,
    type_name: str | None = None,
) -> Result[tuple[Capability, ...], SpecificationError]:
    """Resolve a capability list, defaulting when omitted.

    Entries may be Capability members or names in any case. Order is kept.

    Args:
        capabilities: Raw capability entries, or None for the baseline.
        type_name: Alias being specified, for error context.

    Returns:
        Success with the ordered capability tuple, Failure with a
        CapabilityError for unknown, duplicated or inconsistent entries.
    """
    if capabilities is None:
        return Success(value=DEFAULT_CAPABILITIES)

    resolved: list[Capability] = []
    for entry in capabilities:
        raw = entry.value if isinstance(entry, Capability) else entry
        if not isinstance(raw, str):
            return Failure(
                error=CapabilityError(
                    code=ErrorCode.UNKNOWN_CAPABILITY,
                    message=f"Capability entry {entry!r} is not a name",
                    type_name=type_name,
                    capability=repr(entry),
                )
            )
        try:
            capability = Capability(raw.strip().lower())
        except ValueError:
            return Failure(
                error=CapabilityError(
                    code=ErrorCode.UNKNOWN_CAPABILITY,
                    message=(
                        f"Unknown capability {raw!r}; expected one of "
                        f"{', '.join(c.value for c in Capability)}"
                    ),
                    type_name=type_name,
                    capability=raw,
                )
            )
        if capability in resolved:
            return Failure(
                error=CapabilityError(
                    code=ErrorCode.DUPLICATE_CAPABILITY,
                    message=f"Capability {capability.value!r} is listed twice",
                    type_name=type_name,
                    capability=raw,
                )
            )
        resolved.append(capability)

    if Capability.EQ not in resolved:
        for capability in resolved:
            if capability in REQUIRES_EQ:
                return Failure(
                    error=CapabilityError(
                        code=ErrorCode.INCONSISTENT_CAPABILITIES,
                        message=(
                            f"Capability {capability.value!r} requires 'eq' "
                            "in the same list"
                        ),
                        type_name=type_name,
                        capability=capability.value,
                    )
                )

    return Success(value=tuple(resolved))


def normalize(
    raw: RawSpecification,
    *,
    namespace: Mapping[str, Any] | None = None,
) -> Result[GenerationSpec, SpecificationError]:
    """Validate and canonicalize a raw specification.

    Args:
        raw: User-supplied specification.
        namespace: Scope the alias will be installed into; an existing
            binding for the type name is a collision.

    Returns:
        Success with a GenerationSpec, Failure with the first problem found.
    """
    type_name = raw.type_name

    match validate_identifier(type_name, role="Type name"):
        case Failure() as failure:
            return failure

    # The type name becomes a module global of the generated code, which
    # calls builtins such as TypeError, isinstance and super by name.
    if hasattr(builtins, type_name):
        return Failure(
            error=SpecificationError(
                code=ErrorCode.NAME_COLLISION,
                message=f"Type name {type_name!r} shadows a Python builtin",
                type_name=type_name,
                identifier=type_name,
            )
        )

    arities = _ARITIES[raw.family]
    if len(raw.variants) != len(arities):
        return Failure(
            error=SpecificationError(
                code=ErrorCode.INVALID_ARITY,
                message=(
                    f"{raw.family.value} aliases take exactly {len(arities)} "
                    f"variants, got {len(raw.variants)}"
                ),
                type_name=type_name,
            )
        )

    seen: set[str] = set()
    for identifier in raw.variants:
        match validate_identifier(identifier, role="Variant", type_name=type_name):
            case Failure() as failure:
                return failure
        if identifier == type_name:
            return Failure(
                error=SpecificationError(
                    code=ErrorCode.NAME_COLLISION,
                    message=f"Variant {identifier!r} has the same name as its type",
                    type_name=type_name,
                    identifier=identifier,
                )
            )
        if identifier in seen:
            return Failure(
                error=SpecificationError(
                    code=ErrorCode.DUPLICATE_VARIANT,
                    message=f"Variant {identifier!r} is declared twice",
                    type_name=type_name,
                    identifier=identifier,
                )
            )
        seen.add(identifier)

    match normalize_capabilities(raw.capabilities, type_name=type_name):
        case Failure() as failure:
            return failure
        case Success(value=capabilities):
            pass

    if raw.short_circuit and not raw.family.supports_short_circuit:
        return Failure(
            error=SpecificationError(
                code=ErrorCode.UNSUPPORTED_FEATURE,
                message=(
                    f"{raw.family.value} aliases have no forward/stop variant, "
                    "so short-circuit cannot be enabled"
                ),
                type_name=type_name,
            )
        )

    if namespace is not None and type_name in namespace:
        return Failure(
            error=SpecificationError(
                code=ErrorCode.NAME_COLLISION,
                message=f"{type_name!r} is already defined in the target scope",
                type_name=type_name,
                identifier=type_name,
            )
        )

    first, second = (
        VariantSpec(identifier=identifier, payload_arity=arity)
        for identifier, arity in zip(raw.variants, arities, strict=True)
    )
    return Success(
        value=GenerationSpec(
            type_name=type_name,
            family=raw.family,
            variants=(first, second),
            capabilities=capabilities,
            short_circuit_enabled=raw.short_circuit,
        )
    )
