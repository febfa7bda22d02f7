"""Runtime support imported by generated alias modules.

Generated code stays small by delegating the pieces that do not depend on
variant names to this module:

- PayloadRef: mutable view returned by ``as_<v>_mut``
- Continue / Break: the two states returned by ``branch()``
- ShortCircuit: signal raised by ``propagate()`` on a stop variant
- short_circuit(): wrapper that turns the signal back into a return value

Usage:
    Response = alias_result("Response", "Ok", "Err", short_circuit=True)

    @Response.short_circuit
    def total(a, b):
        return Response.Ok(a.propagate() + b.propagate())
"""

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, ParamSpec, TypeVar

from enumizer.core.errors import UnwrapPanic

T = TypeVar("T")
B = TypeVar("B")
C = TypeVar("C")
P = ParamSpec("P")

__all__ = [
    "Break",
    "Continue",
    "ControlFlow",
    "PayloadRef",
    "ShortCircuit",
    "UnwrapPanic",
    "short_circuit",
]


class PayloadRef(Generic[T]):
    """Write-through handle on the payload of a generated value.

    Holds the owning value, not the payload, so ``set`` replaces the payload
    in place. Only valid while the owner keeps its variant.
    """

    __slots__ = ("_owner",)

    def __init__(self, owner: Any) -> None:
        self._owner = owner

    def get(self) -> T:
        """Return the current payload."""
        return self._owner.value

    def set(self, value: T) -> None:
        """Replace the payload."""
        self._owner.value = value

    def update(self, func: Callable[[T], T]) -> T:
        """Replace the payload with ``func(payload)`` and return it."""
        self._owner.value = func(self._owner.value)
        return self._owner.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PayloadRef):
            return self.get() == other.get()
        return self.get() == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PayloadRef({self.get()!r})"


@dataclass(frozen=True, slots=True, kw_only=True)
class Continue(Generic[C]):
    """Forward payload; the computation carries on with ``value``.

    Attributes:
        value: Payload of the forward variant.
    """

    value: C


@dataclass(frozen=True, slots=True, kw_only=True)
class Break(Generic[B]):
    """Stop state; the enclosing computation returns ``residual``.

    Attributes:
        residual: The stop-tagged value, unchanged.
    """

    residual: B


# Type alias for the two-state control-flow contract
type ControlFlow[B, C] = Continue[C] | Break[B]


class ShortCircuit(BaseException):
    """Signal carrying a stop-tagged value out of a short_circuit function.

    Derives from BaseException so intermediate ``except Exception`` blocks
    in user code do not intercept it.

    Attributes:
        residual: The stop-tagged value that ended the computation.
    """

    def __init__(self, residual: Any) -> None:
        super().__init__(
            f"{type(residual).__qualname__} propagated outside a short_circuit function"
        )
        self.residual = residual


def short_circuit(alias: type, func: Callable[P, T]) -> Callable[P, T]:
    """Wrap ``func`` so stop values of ``alias`` become its return value.

    Stop values of other aliases keep propagating to an outer wrapper.

    Args:
        alias: Generated alias class whose residuals are caught.
        func: Function that calls ``propagate()`` on alias values.

    Returns:
        The wrapped function.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except ShortCircuit as signal:
            if not isinstance(signal.residual, alias):
                raise
            return alias.from_residual(signal.residual)  # type: ignore[attr-defined]

    return wrapper
