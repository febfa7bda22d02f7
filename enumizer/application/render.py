"""Module rendering and materialization.

Wraps emitted alias declarations in a module prelude, then either returns
the text (build-phase rendering) or compiles and executes it in a fresh
namespace (import-time generation), the same way ``namedtuple`` builds
its classes.
"""

from collections.abc import Sequence
from typing import Any

from enumizer.application.emitters.base import EmittedAlias

_PRELUDE = """\
from __future__ import annotations

from collections.abc import Callable as _Callable
from typing import Any as _Any, Generic as _Generic, TypeVar as _TypeVar

from enumizer.core.canonical import (
    Either as _Either,
    Failure as _Failure,
    Left as _Left,
    Result as _Result,
    Right as _Right,
    Success as _Success,
)
from enumizer.core.runtime import PayloadRef as _PayloadRef, UnwrapPanic as _UnwrapPanic"""

_OPTIONAL_IMPORTS: dict[str, str] = {
    "copy": "import copy as _copy",
    "pydantic": "from pydantic_core import core_schema as _core_schema",
    "short_circuit": (
        "from enumizer.core.runtime import (\n"
        "    Break as _Break,\n"
        "    Continue as _Continue,\n"
        "    ControlFlow as _ControlFlow,\n"
        "    ShortCircuit as _ShortCircuit,\n"
        "    short_circuit as _short_circuit,\n"
        ")"
    ),
}

_TYPE_VARS = ("_T", "_E", "_L", "_R", "_U", "_F", "_V")


def prelude(imports: frozenset[str]) -> str:
    """Build the import and type-variable block for a module.

    Args:
        imports: Optional sections requested by the emitted aliases.

    Returns:
        str: Prelude source.
    """
    lines = [_PRELUDE]
    lines.extend(_OPTIONAL_IMPORTS[key] for key in sorted(imports))
    type_vars = "\n".join(f'{name} = _TypeVar("{name}")' for name in _TYPE_VARS)
    return "\n".join(lines) + "\n\n" + type_vars


def render_module(
    aliases: Sequence[EmittedAlias],
    *,
    docstring: str | None = None,
    header: str | None = None,
) -> str:
    """Assemble a complete module from emitted aliases.

    Args:
        aliases: Emitted declarations, in output order.
        docstring: Module docstring.
        header: Comment line placed above everything else.

    Returns:
        str: Module source.
    """
    imports = frozenset().union(*(alias.imports for alias in aliases))
    parts = []
    if header:
        parts.append(f"# {header}")
    if docstring:
        parts.append('"""' + docstring.replace('"""', '\\"\\"\\"') + '"""')
    head = "\n".join(parts)
    exported = ", ".join(f'"{alias.type_name}"' for alias in aliases)
    sections = [
        prelude(imports),
        *(alias.source.rstrip("\n") for alias in aliases),
        f"__all__ = [{exported}]",
    ]
    body = "\n\n\n".join(sections) + "\n"
    return f"{head}\n\n{body}" if head else body


def materialize(alias: EmittedAlias, *, module_name: str) -> type:
    """Compile and execute an alias, returning the generated class.

    Args:
        alias: Emitted declaration.
        module_name: Value for the generated class's ``__module__``.

    Returns:
        type: The alias class.
    """
    source = render_module([alias])
    code = compile(source, f"<enumizer {alias.type_name}>", "exec")
    namespace: dict[str, Any] = {"__name__": module_name}
    exec(code, namespace)
    return namespace[alias.type_name]
