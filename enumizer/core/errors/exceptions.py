"""Raised errors.

Only two conditions escape as exceptions:

- GenerationError: a specification failed validation at a public entry
  point. Nothing is emitted and the import or build stops.
- UnwrapPanic: an unwrap-style extractor was called on the wrong variant.
  It derives from BaseException so `except Exception` handlers do not
  recover from it; callers that need recovery use is_*/as_* instead.
"""

from enumizer.core.enums import ErrorCode
from enumizer.core.errors.specification_errors import SpecificationError


class GenerationError(Exception):
    """Raised when an alias specification cannot be generated.

    Attributes:
        error: The SpecificationError reported by the normalizer.
    """

    def __init__(self, error: SpecificationError) -> None:
        """Initialize generation error.

        Args:
            error: Validation failure that blocked generation.
        """
        super().__init__(str(error))
        self.error = error

    @property
    def code(self) -> ErrorCode:
        """ErrorCode of the underlying specification error."""
        return self.error.code


class UnwrapPanic(BaseException):
    """Fatal extraction from a value tagged with another variant.

    Attributes:
        method: Extractor that was called (e.g. ``unwrap_left``).
        expected: Variant identifier the extractor requires.
        actual: Variant identifier the value carries.
    """

    def __init__(self, method: str, expected: str, actual: str) -> None:
        """Initialize unwrap panic.

        Args:
            method: Extractor name.
            expected: Required variant identifier.
            actual: Present variant identifier.
        """
        super().__init__(
            f"called `{method}()` on a `{actual}` value, expected `{expected}`"
        )
        self.method = method
        self.expected = expected
        self.actual = actual
