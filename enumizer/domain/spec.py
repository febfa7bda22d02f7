"""Normalized alias specification.

GenerationSpec is the generator's sole input after normalization: every
field is validated and defaulted, so emitters never re-check it. It exists
only while a generation runs and is consumed in one pass.
"""

from dataclasses import dataclass

from enumizer.core.enums import Capability, Family


@dataclass(frozen=True, slots=True, kw_only=True)
class VariantSpec:
    """One variant of the alias.

    Attributes:
        identifier: Tag name and stem for synthesized method names.
        payload_arity: 0 for the empty variant of the option shape, else 1.
    """

    identifier: str
    payload_arity: int

    @property
    def has_payload(self) -> bool:
        """Whether the variant carries a value."""
        return self.payload_arity == 1


@dataclass(frozen=True, slots=True, kw_only=True)
class GenerationSpec:
    """Validated specification for one alias.

    Variants are stored in canonical order:
    option (none, some), result (ok, err), either (left, right).

    Attributes:
        type_name: Name of the emitted type.
        family: Canonical shape being aliased.
        variants: Exactly two variant descriptors.
        capabilities: Ordered, duplicate-free capability set.
        short_circuit_enabled: Emit the short-circuit protocol.
    """

    type_name: str
    family: Family
    variants: tuple[VariantSpec, VariantSpec]
    capabilities: tuple[Capability, ...]
    short_circuit_enabled: bool = False

    def has(self, capability: Capability) -> bool:
        """Check whether a capability was requested.

        Args:
            capability: Capability to look up.

        Returns:
            bool: True if present in the capability list.
        """
        return capability in self.capabilities

    @property
    def first(self) -> VariantSpec:
        """First variant in canonical order (option none, result ok, either left)."""
        return self.variants[0]

    @property
    def second(self) -> VariantSpec:
        """Second variant in canonical order (option some, result err, either right)."""
        return self.variants[1]
