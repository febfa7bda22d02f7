"""Base class for validation errors reported as data.

The normalizer and name synthesizer return ``Failure(error=...)`` holding a
DomainError subclass. Nothing is raised until a public entry point turns the
failure into a GenerationError, so a rejected specification never leaves
half-emitted output behind.

Subclass with the same dataclass options to add fields:

    @dataclass(frozen=True, slots=True, kw_only=True)
    class SpecificationError(DomainError):
        type_name: str | None = None
"""

from dataclasses import dataclass

from enumizer.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Validation failure carried in a Result (not an Exception).

    Attributes:
        code: ErrorCode identifying the rule that failed.
        message: Explanation naming the offending input.
        details: Extra string context, if any.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
