"""enumizer - generate sum types equivalent to Option, Result and Either.

Each generated alias behaves exactly like its canonical shape and converts
losslessly to and from it, but uses domain-specific variant names and a
method surface derived from them.

Usage:
    from enumizer import alias_option, alias_result, alias_either

    Lookup = alias_option("Lookup", "Missing", "Found")
    hit = Lookup.Found(42)
    hit.is_found()          # True
    hit.as_found()          # 42
    Lookup.Missing().unwrap_or(0)  # 0
"""

from enumizer.application.generator import (
    alias_either,
    alias_option,
    alias_result,
    generate,
    render_source,
    render_specifications,
)
from enumizer.core.canonical import Either, Failure, Left, Result, Right, Success
from enumizer.core.enums import DEFAULT_CAPABILITIES, Capability, Family
from enumizer.core.errors import GenerationError, SpecificationError, UnwrapPanic
from enumizer.core.runtime import Break, Continue, PayloadRef, ShortCircuit
from enumizer.schemas.spec_schemas import RawSpecification

__version__ = "0.1.0"

__all__ = [
    "alias_option",
    "alias_result",
    "alias_either",
    "generate",
    "render_source",
    "render_specifications",
    "RawSpecification",
    "Capability",
    "DEFAULT_CAPABILITIES",
    "Family",
    "GenerationError",
    "SpecificationError",
    "UnwrapPanic",
    "PayloadRef",
    "Continue",
    "Break",
    "ShortCircuit",
    "Success",
    "Failure",
    "Result",
    "Left",
    "Right",
    "Either",
]
