"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from enumizer.core.enums import Capability, ErrorCode, Family
"""

from enumizer.core.enums.capability import (
    DEFAULT_CAPABILITIES,
    REQUIRES_EQ,
    Capability,
)
from enumizer.core.enums.environment import Environment
from enumizer.core.enums.error_code import ErrorCode
from enumizer.core.enums.family import Family

__all__ = [
    "Capability",
    "DEFAULT_CAPABILITIES",
    "REQUIRES_EQ",
    "Environment",
    "ErrorCode",
    "Family",
]
