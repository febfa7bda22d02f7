"""Option-shaped alias emitter.

Variants in canonical order: the empty variant (no payload), then the
populated variant. Mirrors ``T | None`` with domain-specific names.
"""

from enumizer.application.emitters.base import FamilyEmitter, member
from enumizer.core.enums import Family


class NullableEmitter(FamilyEmitter):
    """Emits an alias equivalent to ``T | None``."""

    family = Family.OPTION
    type_vars = ("_T",)
    payload_vars = (None, "_T")
    forward_index = 1

    def docstring(self) -> str:
        none, some = self.variant(0).identifier, self.variant(1).identifier
        return f"Option-shaped alias: `{none}` (empty) or `{some}` (value)."

    def family_members(self) -> list[str]:
        none, some = self.names.first, self.names.second
        return [
            member(f"""
                def {some.predicate_and}(self, predicate: _Callable[[_T], bool]) -> bool:
                    return self._tag == 1 and bool(predicate(self.value))
            """),
            member(f"""
                def {none.predicate_or}(self, predicate: _Callable[[_T], bool]) -> bool:
                    return self._tag == 0 or bool(predicate(self.value))
            """),
            member(f"""
                def map(self, func: _Callable[[_T], _U]) -> "{self.t}[_U]":
                    if self._tag == 1:
                        return {self.ref(1)}(func(self.value))
                    return {self.ref(0)}()
            """),
            member(f"""
                def unwrap(self) -> _T:
                    if self._tag == 1:
                        return self.value
                    {self.panic("unwrap", 1)}
            """),
            member("""
                def unwrap_or(self, default: _T) -> _T:
                    return self.value if self._tag == 1 else default
            """),
            member("""
                def unwrap_or_else(self, producer: _Callable[[], _T]) -> _T:
                    return self.value if self._tag == 1 else producer()
            """),
        ]

    def conversions(self) -> list[str]:
        return [
            member(f"""
                @classmethod
                def from_optional(cls, value: _T | None) -> "{self.t}[_T]":
                    if value is None:
                        return {self.ref(0)}()
                    return {self.ref(1)}(value)
            """),
            member("""
                def to_optional(self) -> _T | None:
                    return self.value if self._tag == 1 else None
            """),
        ]
