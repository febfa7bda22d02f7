"""Result-shaped alias emitter.

Variants in canonical order: success payload, then failure payload.
Converts to and from ``Result[T, E]`` (``Success`` / ``Failure``).
"""

from enumizer.application.emitters.base import FamilyEmitter, member
from enumizer.core.enums import Family


class FallibleEmitter(FamilyEmitter):
    """Emits an alias equivalent to ``Result[T, E]``."""

    family = Family.RESULT
    type_vars = ("_T", "_E")
    payload_vars = ("_T", "_E")
    forward_index = 0

    def docstring(self) -> str:
        ok, err = self.variant(0).identifier, self.variant(1).identifier
        return f"Result-shaped alias: `{ok}` (success) or `{err}` (failure)."

    def family_members(self) -> list[str]:
        ok, err = self.names.first, self.names.second
        return [
            member(f"""
                def {ok.predicate_and}(self, predicate: _Callable[[_T], bool]) -> bool:
                    return self._tag == 0 and bool(predicate(self.value))
            """),
            member(f"""
                def {err.predicate_and}(self, predicate: _Callable[[_E], bool]) -> bool:
                    return self._tag == 1 and bool(predicate(self.value))
            """),
            member(f"""
                def map(self, func: _Callable[[_T], _U]) -> "{self.t}[_U, _E]":
                    if self._tag == 0:
                        return {self.ref(0)}(func(self.value))
                    return {self.ref(1)}(self.value)
            """),
            member(f"""
                def map_err(self, op: _Callable[[_E], _F]) -> "{self.t}[_T, _F]":
                    if self._tag == 1:
                        return {self.ref(1)}(op(self.value))
                    return {self.ref(0)}(self.value)
            """),
            member(f"""
                def unwrap(self) -> _T:
                    if self._tag == 0:
                        return self.value
                    {self.panic("unwrap", 0)}
            """),
            member(f"""
                def {err.unwrap}(self) -> _E:
                    if self._tag == 1:
                        return self.value
                    {self.panic(err.unwrap, 1)}
            """),
            member("""
                def unwrap_or(self, default: _T) -> _T:
                    return self.value if self._tag == 0 else default
            """),
            member("""
                def unwrap_or_else(self, op: _Callable[[_E], _T]) -> _T:
                    return self.value if self._tag == 0 else op(self.value)
            """),
        ]

    def conversions(self) -> list[str]:
        return [
            member(f"""
                @classmethod
                def from_result(cls, result: "_Result[_T, _E]") -> "{self.t}[_T, _E]":
                    match result:
                        case _Success(value=value):
                            return {self.ref(0)}(value)
                        case _Failure(error=error):
                            return {self.ref(1)}(error)
                    raise TypeError(
                        "{self.t}.from_result expects Success or Failure, "
                        f"got {{type(result).__name__}}"
                    )
            """),
            member("""
                def to_result(self) -> "_Result[_T, _E]":
                    if self._tag == 0:
                        return _Success(value=self.value)
                    return _Failure(error=self.value)
            """),
        ]
