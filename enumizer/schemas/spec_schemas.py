"""Specification input schemas.

Pydantic models for the raw, user-supplied form of an alias specification.
Kept separate from the normalized GenerationSpec - these only check surface
shape (types, field presence). Semantic validation (identifiers, capability
consistency, collisions) belongs to the normalizer.

Surfaces:
    alias_option / alias_result / alias_either  - build RawSpecification
    python -m enumizer render SPEC_FILE         - reads SpecificationDocument
"""

from pydantic import BaseModel, ConfigDict, Field

from enumizer.core.enums import Capability, Family


# =============================================================================
# Single alias
# =============================================================================


class RawSpecification(BaseModel):
    """Raw alias specification, positionally mirroring the invocation form.

    ``type_name, variants..., [capabilities], [short_circuit]``
    """

    family: Family = Field(
        ...,
        description="Canonical shape the alias is equivalent to",
        examples=["option"],
    )
    type_name: str = Field(
        ...,
        description="Name of the generated type",
        examples=["Lookup"],
    )
    variants: list[str] = Field(
        ...,
        description="Variant identifiers in canonical order "
        "(option: none, some; result: ok, err; either: left, right)",
        examples=[["Missing", "Found"]],
    )
    capabilities: list[Capability | str] | None = Field(
        default=None,
        description="Capability names; the baseline set is used when omitted",
        examples=[["eq", "hash", "debug"]],
    )
    short_circuit: bool = Field(
        default=False,
        description="Also emit the short-circuit protocol",
    )

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "family": "result",
                "type_name": "Response",
                "variants": ["Success", "Failure"],
                "capabilities": ["eq", "debug"],
                "short_circuit": True,
            }
        },
    )


# =============================================================================
# Render document
# =============================================================================


class SpecificationDocument(BaseModel):
    """A module's worth of aliases for the build-phase renderer."""

    docstring: str | None = Field(
        default=None,
        description="Docstring for the rendered module",
    )
    aliases: list[RawSpecification] = Field(
        ...,
        min_length=1,
        description="Aliases to render, in output order",
    )

    model_config = ConfigDict(extra="forbid")
