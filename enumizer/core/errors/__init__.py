"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from enumizer.core.errors import GenerationError, SpecificationError
"""

from enumizer.core.errors.domain_error import DomainError
from enumizer.core.errors.exceptions import GenerationError, UnwrapPanic
from enumizer.core.errors.specification_errors import (
    CapabilityError,
    SpecificationError,
)

__all__ = [
    "DomainError",
    "SpecificationError",
    "CapabilityError",
    "GenerationError",
    "UnwrapPanic",
]
