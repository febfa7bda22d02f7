"""Identifier synthesis.

Derives every generated member name from a variant identifier by
lower-casing it and attaching fixed prefixes and suffixes. Synthesis is
purely textual: the same identifier always yields the same names.

    >>> synthesize("Found").accessor
    'as_found'
    >>> synthesize("NotFound").unwrap
    'unwrap_notfound'
"""

from collections import Counter
from dataclasses import dataclass

from enumizer.core.canonical import Failure, Result, Success
from enumizer.core.enums import ErrorCode, Family
from enumizer.core.errors import SpecificationError
from enumizer.domain.spec import GenerationSpec

# Members emitted with fixed names, independent of variant identifiers.
FIXED_MEMBERS: frozenset[str] = frozenset(
    {
        "value",
        "map",
        "map_err",
        "unwrap",
        "unwrap_or",
        "unwrap_or_else",
        "from_optional",
        "to_optional",
        "from_result",
        "to_result",
        "from_either",
        "to_either",
        "clone",
        "serialize",
        "deserialize",
        "branch",
        "from_residual",
        "propagate",
        "short_circuit",
    }
)


@dataclass(frozen=True, slots=True, kw_only=True)
class VariantNames:
    """Derived member names for one variant identifier.

    Attributes:
        identifier: Variant identifier as declared.
        stem: Lower-cased identifier.
        predicate: ``is_<v>``.
        predicate_and: ``is_<v>_and``.
        predicate_or: ``is_<v>_or``.
        accessor: ``as_<v>``.
        mutable_accessor: ``as_<v>_mut``.
        transform: ``map_<v>``.
        unwrap: ``unwrap_<v>``.
    """

    identifier: str
    stem: str
    predicate: str
    predicate_and: str
    predicate_or: str
    accessor: str
    mutable_accessor: str
    transform: str
    unwrap: str

    def all(self) -> tuple[str, ...]:
        """All derived names, in a fixed order."""
        return (
            self.predicate,
            self.predicate_and,
            self.predicate_or,
            self.accessor,
            self.mutable_accessor,
            self.transform,
            self.unwrap,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class NameSet:
    """Derived names for every variant of one alias.

    Attributes:
        type_name: Alias type name.
        first: Names for the first variant in canonical order.
        second: Names for the second variant in canonical order.
    """

    type_name: str
    first: VariantNames
    second: VariantNames


def synthesize(identifier: str) -> VariantNames:
    """Derive the member names for a variant identifier.

    Args:
        identifier: Variant identifier (e.g. ``Found``).

    Returns:
        VariantNames: The derived name set.
    """
    stem = identifier.lower()
    return VariantNames(
        identifier=identifier,
        stem=stem,
        predicate=f"is_{stem}",
        predicate_and=f"is_{stem}_and",
        predicate_or=f"is_{stem}_or",
        accessor=f"as_{stem}",
        mutable_accessor=f"as_{stem}_mut",
        transform=f"map_{stem}",
        unwrap=f"unwrap_{stem}",
    )


def emitted_names(
    family: Family, first: VariantNames, second: VariantNames
) -> tuple[str, ...]:
    """Variant-derived member names a family actually emits.

    Args:
        family: Shape of the alias.
        first: Names of the first variant in canonical order.
        second: Names of the second variant in canonical order.

    Returns:
        tuple[str, ...]: Emitted names, duplicates included.
    """
    predicates = (first.predicate, second.predicate)
    match family:
        case Family.OPTION:
            # the empty variant has no payload, so no accessors
            return (
                *predicates,
                first.predicate_or,
                second.predicate_and,
                second.accessor,
                second.mutable_accessor,
            )
        case Family.RESULT:
            return (
                *predicates,
                first.predicate_and,
                second.predicate_and,
                first.accessor,
                first.mutable_accessor,
                second.accessor,
                second.mutable_accessor,
                second.unwrap,
            )
        case Family.EITHER:
            return (
                *predicates,
                first.accessor,
                first.mutable_accessor,
                second.accessor,
                second.mutable_accessor,
                first.transform,
                second.transform,
                first.unwrap,
                second.unwrap,
            )


def build_name_set(spec: GenerationSpec) -> Result[NameSet, SpecificationError]:
    """Synthesize names for a spec and reject collisions.

    Only names the family emits are checked. Two variants whose identifiers
    differ only by case (``Foo``/``FOO``), or whose derived names overlap
    (``A``/``A_mut`` both yield ``as_a_mut``), would emit clashing members.
    A derived name must not replace a fixed member (a result failure
    variant ``Or`` would turn ``unwrap_<err>`` into ``unwrap_or``), and a
    variant identifier must not shadow any emitted member, since variants
    are attributes of the alias class.

    Args:
        spec: Normalized specification.

    Returns:
        Success with the NameSet, Failure with a NAME_COLLISION error.
    """
    first = synthesize(spec.first.identifier)
    second = synthesize(spec.second.identifier)
    emitted = emitted_names(spec.family, first, second)

    counts = Counter(emitted)
    clashes = sorted(name for name, count in counts.items() if count > 1)
    if clashes:
        return Failure(
            error=SpecificationError(
                code=ErrorCode.NAME_COLLISION,
                message=(
                    f"Variants {first.identifier!r} and {second.identifier!r} "
                    f"synthesize the same member names: {', '.join(clashes)}"
                ),
                type_name=spec.type_name,
                identifier=second.identifier,
            )
        )

    fixed = sorted(FIXED_MEMBERS.intersection(emitted))
    if fixed:
        owner = second if any(name in second.all() for name in fixed) else first
        return Failure(
            error=SpecificationError(
                code=ErrorCode.NAME_COLLISION,
                message=(
                    f"Variant {owner.identifier!r} synthesizes names that replace "
                    f"fixed members of {spec.type_name}: {', '.join(fixed)}"
                ),
                type_name=spec.type_name,
                identifier=owner.identifier,
            )
        )

    reserved = FIXED_MEMBERS | set(emitted)
    for variant in (first, second):
        if variant.identifier in reserved:
            return Failure(
                error=SpecificationError(
                    code=ErrorCode.NAME_COLLISION,
                    message=(
                        f"Variant {variant.identifier!r} shadows a generated "
                        f"member of {spec.type_name}"
                    ),
                    type_name=spec.type_name,
                    identifier=variant.identifier,
                )
            )

    return Success(value=NameSet(type_name=spec.type_name, first=first, second=second))
