"""Shared emission machinery for the alias families.

A family emitter turns a GenerationSpec and its NameSet into Python source
for one alias: a base class carrying the method surface, plus one subclass
per variant attached to the base as ``TypeName.Variant``.

Rendered source relies on a module prelude (see ``render.prelude``) that
binds every helper under an underscore name, so user-chosen type and
variant identifiers never collide with it.
"""

import textwrap
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from enumizer.core.enums import Family
from enumizer.domain.names import NameSet, VariantNames
from enumizer.domain.spec import GenerationSpec, VariantSpec


@dataclass(frozen=True, slots=True, kw_only=True)
class EmittedAlias:
    """Rendered declaration of one alias.

    Attributes:
        type_name: Name of the emitted type.
        family: Canonical shape of the alias.
        source: Class declarations (without module prelude).
        imports: Optional prelude sections the source needs.
    """

    type_name: str
    family: Family
    source: str
    imports: frozenset[str]


def member(template: str) -> str:
    """Dedent a member template and indent it into a class body."""
    return textwrap.indent(textwrap.dedent(template).strip("\n"), "    ")


class FamilyEmitter(ABC):
    """Base for the option, result and either emitters.

    Subclasses declare their type parameters and which variant, if any, is
    the forward side of the short-circuit protocol, and contribute the
    family-specific members and conversions.
    """

    family: ClassVar[Family]
    type_vars: ClassVar[tuple[str, ...]]
    # Type variable of each variant's payload, None for the empty variant.
    payload_vars: ClassVar[tuple[str | None, str | None]]
    forward_index: ClassVar[int | None] = None

    def __init__(self, spec: GenerationSpec, names: NameSet) -> None:
        from enumizer.application.emitters.features import FeatureComposer

        self.spec = spec
        self.names = names
        self.t = spec.type_name
        self.composer = FeatureComposer(self)

    # ------------------------------------------------------------------
    # Accessors used by templates
    # ------------------------------------------------------------------

    @property
    def params(self) -> str:
        """Type parameter list, e.g. ``_T, _E``."""
        return ", ".join(self.type_vars)

    def variant(self, index: int) -> VariantSpec:
        """Variant descriptor at a canonical position."""
        return self.spec.variants[index]

    def variant_names(self, index: int) -> VariantNames:
        """Synthesized names at a canonical position."""
        return (self.names.first, self.names.second)[index]

    def ref(self, index: int) -> str:
        """Expression naming a variant class, e.g. ``Lookup.Found``."""
        return f"{self.t}.{self.variant(index).identifier}"

    def panic(self, method: str, expected: int) -> str:
        """Statement raising UnwrapPanic from a value of the other variant."""
        identifier = self.variant(expected).identifier
        return f'raise _UnwrapPanic("{method}", "{identifier}", self._variant)'

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def emit(self) -> EmittedAlias:
        """Render the alias declaration.

        Returns:
            EmittedAlias: Source and prelude requirements.
        """
        blocks = [self.render_base()]
        blocks.extend(self.render_variant(index) for index in (0, 1))
        return EmittedAlias(
            type_name=self.t,
            family=self.family,
            source="\n\n\n".join(blocks) + "\n",
            imports=self.composer.imports(),
        )

    def render_base(self) -> str:
        """Render the base class holding the method surface."""
        body = [
            member(f'''
                """{self.docstring()}"""
            '''),
            member(f"""
                __slots__ = ()
                __capabilities__ = {self.composer.annotation()}
                __family__ = "{self.family.value}"
            """),
            member(f"""
                def __new__(cls, *args: _Any, **kwargs: _Any) -> "{self.t}":
                    if cls is {self.t}:
                        raise TypeError(
                            "{self.t} cannot be instantiated directly; use "
                            "{self.ref(0)} or {self.ref(1)}"
                        )
                    return super().__new__(cls)
            """),
        ]
        body.extend(self.predicates())
        body.extend(self.accessors())
        body.extend(self.family_members())
        body.extend(self.conversions())
        body.extend(self.composer.base_members())
        header = f"class {self.t}(_Generic[{self.params}]):"
        return header + "\n" + "\n\n".join(body)

    def render_variant(self, index: int) -> str:
        """Render one variant subclass and attach it to the base."""
        variant = self.variant(index)
        private = f"_{self.t}_{variant.identifier}"
        if variant.has_payload:
            payload = self.payload_vars[index]
            layout = member(f"""
                __slots__ = ("value",)
                __match_args__ = ("value",)
                _tag = {index}
                _variant = "{variant.identifier}"

                def __init__(self, value: {payload}) -> None:
                    self.value = value
            """)
        else:
            layout = member(f"""
                __slots__ = ()
                __match_args__ = ()
                _tag = {index}
                _variant = "{variant.identifier}"
                _instance = None

                def __new__(cls) -> "{private}":
                    if cls._instance is None:
                        cls._instance = super().__new__(cls)
                    return cls._instance
            """)
        body = [layout, *self.composer.variant_members(index)]
        declaration = (
            f"class {private}({self.t}[{self.params}]):\n" + "\n\n".join(body)
        )
        attach = textwrap.dedent(f"""
            {private}.__name__ = "{variant.identifier}"
            {private}.__qualname__ = "{self.t}.{variant.identifier}"
            {self.t}.{variant.identifier} = {private}
            del {private}
        """).strip("\n")
        return declaration + "\n\n\n" + attach

    # ------------------------------------------------------------------
    # Members shared by every family
    # ------------------------------------------------------------------

    def predicates(self) -> list[str]:
        """``is_<v>`` for both variants."""
        return [
            member(f"""
                def {self.variant_names(index).predicate}(self) -> bool:
                    return self._tag == {index}
            """)
            for index in (0, 1)
        ]

    def accessors(self) -> list[str]:
        """``as_<v>`` and ``as_<v>_mut`` for every payload variant."""
        members = []
        for index in (0, 1):
            if not self.variant(index).has_payload:
                continue
            names = self.variant_names(index)
            payload = self.payload_vars[index]
            members.append(
                member(f"""
                    def {names.accessor}(self) -> {payload} | None:
                        return self.value if self._tag == {index} else None
                """)
            )
            members.append(
                member(f"""
                    def {names.mutable_accessor}(self) -> _PayloadRef[{payload}] | None:
                        return _PayloadRef(self) if self._tag == {index} else None
                """)
            )
        return members

    # ------------------------------------------------------------------
    # Family hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def docstring(self) -> str:
        """One-line docstring for the base class."""

    @abstractmethod
    def family_members(self) -> list[str]:
        """Transforms, extractors and combinators specific to the shape."""

    @abstractmethod
    def conversions(self) -> list[str]:
        """Conversions to and from the canonical shape."""
