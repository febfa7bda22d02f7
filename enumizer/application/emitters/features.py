"""Feature composer.

Final augmentation step of every family emitter. Each capability in the
alias's capability list is an independent emission step keyed by name;
the short-circuit protocol is added when the alias enables it.

Base-class steps run in capability-list order, variant steps likewise, so
the same GenerationSpec always renders the same source.
"""

import textwrap
from collections.abc import Callable
from typing import TYPE_CHECKING

from enumizer.application.emitters.base import member
from enumizer.core.enums import Capability

if TYPE_CHECKING:
    from enumizer.application.emitters.base import FamilyEmitter

_ORDERING = (("__lt__", "<"), ("__le__", "<="), ("__gt__", ">"), ("__ge__", ">="))


class FeatureComposer:
    """Renders capability and short-circuit members for one emitter."""

    def __init__(self, emitter: "FamilyEmitter") -> None:
        self.emitter = emitter
        self.spec = emitter.spec
        self.t = emitter.t

        self._base_steps: dict[Capability, Callable[[], list[str]]] = {
            Capability.EQ: self._eq,
            Capability.ORD: self._ord,
            Capability.HASH: self._hash,
            Capability.COPY: self._clone,
            Capability.SERIALIZE: self._deserialize,
        }
        self._variant_steps: dict[Capability, Callable[[int], list[str]]] = {
            Capability.COPY: self._copy,
            Capability.DEBUG: self._repr,
            Capability.DISPLAY: self._str,
            Capability.SERIALIZE: self._serialize,
        }

    # ------------------------------------------------------------------
    # Entry points used by FamilyEmitter
    # ------------------------------------------------------------------

    def annotation(self) -> str:
        """Capability tuple recorded on the base class."""
        return repr(tuple(capability.value for capability in self.spec.capabilities))

    def imports(self) -> frozenset[str]:
        """Optional prelude sections the composed members use."""
        needed = set()
        if self.spec.has(Capability.COPY):
            needed.add("copy")
        if self.spec.has(Capability.SERIALIZE):
            needed.add("pydantic")
        if self.spec.short_circuit_enabled:
            needed.add("short_circuit")
        return frozenset(needed)

    def base_members(self) -> list[str]:
        """Capability members of the base class, then short-circuit members."""
        members: list[str] = []
        for capability in self.spec.capabilities:
            step = self._base_steps.get(capability)
            if step is not None:
                members.extend(step())
        if self.spec.short_circuit_enabled:
            members.extend(self._short_circuit())
        return members

    def variant_members(self, index: int) -> list[str]:
        """Capability members of one variant subclass."""
        members: list[str] = []
        if self._needs_key():
            members.extend(self._key(index))
        for capability in self.spec.capabilities:
            step = self._variant_steps.get(capability)
            if step is not None:
                members.extend(step(index))
        return members

    # ------------------------------------------------------------------
    # Comparison key
    # ------------------------------------------------------------------

    def _needs_key(self) -> bool:
        return any(
            self.spec.has(capability)
            for capability in (Capability.EQ, Capability.ORD, Capability.HASH)
        )

    def _key(self, index: int) -> list[str]:
        if self.emitter.variant(index).has_payload:
            body = f"return ({index}, self.value)"
        else:
            body = f"return ({index},)"
        return [
            member(f"""
                def _key(self) -> tuple[_Any, ...]:
                    {body}
            """)
        ]

    # ------------------------------------------------------------------
    # Base-class capability steps
    # ------------------------------------------------------------------

    def _eq(self) -> list[str]:
        return [
            member(f"""
                def __eq__(self, other: object) -> bool:
                    if not isinstance(other, {self.t}):
                        return NotImplemented
                    return self._key() == other._key()
            """)
        ]

    def _ord(self) -> list[str]:
        return [
            member(f"""
                def {name}(self, other: object) -> bool:
                    if not isinstance(other, {self.t}):
                        return NotImplemented
                    return self._key() {op} other._key()
            """)
            for name, op in _ORDERING
        ]

    def _hash(self) -> list[str]:
        return [
            member("""
                def __hash__(self) -> int:
                    return hash(self._key())
            """)
        ]

    def _clone(self) -> list[str]:
        return [
            member(f"""
                def clone(self) -> "{self.t}[{self.emitter.params}]":
                    return _copy.deepcopy(self)
            """)
        ]

    def _deserialize(self) -> list[str]:
        cases = []
        for index in (0, 1):
            variant = self.emitter.variant(index)
            ref = self.emitter.ref(index)
            if variant.has_payload:
                cases.append(
                    f'        case {{"{variant.identifier}": value}} if len(data) == 1:\n'
                    f"            return {ref}(value)"
                )
            else:
                cases.append(
                    f'        case "{variant.identifier}":\n'
                    f"            return {ref}()"
                )
        match_block = "\n".join(cases)
        deserialize = (
            "    @classmethod\n"
            f'    def deserialize(cls, data: _Any) -> "{self.t}[{self.emitter.params}]":\n'
            "        match data:\n"
            + textwrap.indent(match_block, "    ")
            + "\n"
            f'        raise ValueError(f"cannot deserialize {{data!r}} as {self.t}")'
        )
        return [
            deserialize,
            member(f"""
                @classmethod
                def __get_pydantic_core_schema__(cls, source_type: _Any, handler: _Any) -> _Any:
                    return _core_schema.no_info_plain_validator_function(
                        lambda data: data if isinstance(data, {self.t}) else {self.t}.deserialize(data),
                        serialization=_core_schema.plain_serializer_function_ser_schema(
                            lambda value: value.serialize()
                        ),
                    )
            """),
        ]

    # ------------------------------------------------------------------
    # Variant capability steps
    # ------------------------------------------------------------------

    def _copy(self, index: int) -> list[str]:
        if not self.emitter.variant(index).has_payload:
            return [
                member("""
                    def __copy__(self) -> _Any:
                        return self

                    def __deepcopy__(self, memo: dict[int, _Any]) -> _Any:
                        return self
                """)
            ]
        return [
            member("""
                def __copy__(self) -> _Any:
                    return type(self)(self.value)

                def __deepcopy__(self, memo: dict[int, _Any]) -> _Any:
                    return type(self)(_copy.deepcopy(self.value, memo))
            """)
        ]

    def _repr(self, index: int) -> list[str]:
        ref = self.emitter.ref(index)
        if self.emitter.variant(index).has_payload:
            body = f'return f"{ref}({{self.value!r}})"'
        else:
            body = f'return "{ref}"'
        return [
            member(f"""
                def __repr__(self) -> str:
                    {body}
            """)
        ]

    def _str(self, index: int) -> list[str]:
        variant = self.emitter.variant(index)
        if variant.has_payload:
            body = "return str(self.value)"
        else:
            body = f'return "{variant.identifier}"'
        return [
            member(f"""
                def __str__(self) -> str:
                    {body}
            """)
        ]

    def _serialize(self, index: int) -> list[str]:
        variant = self.emitter.variant(index)
        if variant.has_payload:
            body = f'return {{"{variant.identifier}": self.value}}'
        else:
            body = f'return "{variant.identifier}"'
        return [
            member(f"""
                def serialize(self) -> _Any:
                    {body}
            """)
        ]

    # ------------------------------------------------------------------
    # Short-circuit protocol
    # ------------------------------------------------------------------

    def _short_circuit(self) -> list[str]:
        forward = self.emitter.forward_index
        if forward is None:
            # normalization rejects short_circuit for shapes without a forward side
            raise ValueError(f"{self.spec.family.value} aliases have no forward variant")
        stop = 1 - forward
        payload = self.emitter.payload_vars[forward]
        forward_id = self.emitter.variant(forward).identifier
        alias = f"{self.t}[{self.emitter.params}]"
        if self.emitter.variant(stop).has_payload:
            rebuild = f"return {self.emitter.ref(stop)}(residual.value)"
        else:
            rebuild = f"return {self.emitter.ref(stop)}()"
        return [
            member(f"""
                def branch(self) -> "_ControlFlow[{alias}, {payload}]":
                    if self._tag == {forward}:
                        return _Continue(value=self.value)
                    return _Break(residual=self)
            """),
            member(f"""
                @classmethod
                def from_residual(cls, residual: _Any) -> "{alias}":
                    if not isinstance(residual, {self.t}):
                        raise TypeError(
                            "{self.t}.from_residual expects a {self.t} value, "
                            f"got {{type(residual).__name__}}"
                        )
                    if residual._tag == {forward}:
                        raise AssertionError(
                            "unreachable: residual carries the forward variant `{forward_id}`"
                        )
                    {rebuild}
            """),
            member(f"""
                def propagate(self) -> {payload}:
                    if self._tag == {forward}:
                        return self.value
                    raise _ShortCircuit(self)
            """),
            member(f"""
                @classmethod
                def short_circuit(cls, func: _Callable[..., _V]) -> _Callable[..., _V]:
                    return _short_circuit({self.t}, func)
            """),
        ]
