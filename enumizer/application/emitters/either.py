"""Either-shaped alias emitter.

Two payload variants with no privileged side: transforms and extractors
are symmetric and no fallback extraction is generated.
"""

from enumizer.application.emitters.base import FamilyEmitter, member
from enumizer.core.enums import Family


class EitherEmitter(FamilyEmitter):
    """Emits an alias equivalent to ``Either[L, R]``."""

    family = Family.EITHER
    type_vars = ("_L", "_R")
    payload_vars = ("_L", "_R")

    def docstring(self) -> str:
        left, right = self.variant(0).identifier, self.variant(1).identifier
        return f"Either-shaped alias: `{left}` or `{right}`."

    def family_members(self) -> list[str]:
        left, right = self.names.first, self.names.second
        return [
            member(f"""
                def {left.transform}(self, func: _Callable[[_L], _U]) -> "{self.t}[_U, _R]":
                    if self._tag == 0:
                        return {self.ref(0)}(func(self.value))
                    return {self.ref(1)}(self.value)
            """),
            member(f"""
                def {right.transform}(self, func: _Callable[[_R], _U]) -> "{self.t}[_L, _U]":
                    if self._tag == 1:
                        return {self.ref(1)}(func(self.value))
                    return {self.ref(0)}(self.value)
            """),
            member(f"""
                def {left.unwrap}(self) -> _L:
                    if self._tag == 0:
                        return self.value
                    {self.panic(left.unwrap, 0)}
            """),
            member(f"""
                def {right.unwrap}(self) -> _R:
                    if self._tag == 1:
                        return self.value
                    {self.panic(right.unwrap, 1)}
            """),
        ]

    def conversions(self) -> list[str]:
        return [
            member(f"""
                @classmethod
                def from_either(cls, either: "_Either[_L, _R]") -> "{self.t}[_L, _R]":
                    match either:
                        case _Left(value=value):
                            return {self.ref(0)}(value)
                        case _Right(value=value):
                            return {self.ref(1)}(value)
                    raise TypeError(
                        "{self.t}.from_either expects Left or Right, "
                        f"got {{type(either).__name__}}"
                    )
            """),
            member("""
                def to_either(self) -> "_Either[_L, _R]":
                    if self._tag == 0:
                        return _Left(value=self.value)
                    return _Right(value=self.value)
            """),
        ]
