"""Generation pipeline and public entry points.

Data flows one way: raw specification -> normalization -> name synthesis
-> family emission (with feature composition) -> materialize or render.
A Failure at any stage stops the pipeline before anything is emitted and
surfaces as a raised GenerationError.

Usage:
    from enumizer import alias_option, alias_result

    Lookup = alias_option("Lookup", "Missing", "Found")
    Response = alias_result("Response", "Ok", "Err", short_circuit=True)

    alias_option("Slot", "Empty", "Filled", namespace=globals())
"""

from collections.abc import Iterable, Mapping, MutableMapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from enumizer.application.emitters.base import EmittedAlias, FamilyEmitter
from enumizer.application.emitters.either import EitherEmitter
from enumizer.application.emitters.fallible import FallibleEmitter
from enumizer.application.emitters.nullable import NullableEmitter
from enumizer.application.normalizer import normalize
from enumizer.application.render import materialize, render_module
from enumizer.core.canonical import Failure, Result, Success
from enumizer.core.config import get_settings
from enumizer.core.container import get_logger
from enumizer.core.enums import Capability, ErrorCode, Family
from enumizer.core.errors import GenerationError, SpecificationError
from enumizer.domain.names import build_name_set
from enumizer.schemas.spec_schemas import RawSpecification

_EMITTERS: dict[Family, type[FamilyEmitter]] = {
    Family.OPTION: NullableEmitter,
    Family.RESULT: FallibleEmitter,
    Family.EITHER: EitherEmitter,
}

_DEFAULT_MODULE = "enumizer.generated"


def build_raw_specification(**fields: Any) -> Result[RawSpecification, SpecificationError]:
    """Validate the surface shape of a specification.

    Args:
        **fields: RawSpecification fields.

    Returns:
        Success with the RawSpecification, Failure with
        MALFORMED_SPECIFICATION when pydantic rejects the input.
    """
    try:
        return Success(value=RawSpecification(**fields))
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "specification"
        return Failure(
            error=SpecificationError(
                code=ErrorCode.MALFORMED_SPECIFICATION,
                message=f"{location}: {first['msg']}",
                type_name=fields.get("type_name")
                if isinstance(fields.get("type_name"), str)
                else None,
                details={"errors": str(exc.error_count())},
            )
        )


def emit(
    raw: RawSpecification,
    *,
    namespace: Mapping[str, Any] | None = None,
) -> Result[EmittedAlias, SpecificationError]:
    """Run normalization, name synthesis and emission for one alias.

    Args:
        raw: Raw specification.
        namespace: Target scope, checked for an existing type name.

    Returns:
        Success with the EmittedAlias, Failure with the first problem found.
    """
    match normalize(raw, namespace=namespace):
        case Failure() as failure:
            return failure
        case Success(value=spec):
            pass

    match build_name_set(spec):
        case Failure() as failure:
            return failure
        case Success(value=names):
            pass

    return Success(value=_EMITTERS[spec.family](spec, names).emit())


def _raise_for(error: SpecificationError) -> GenerationError:
    get_logger().warning(
        "alias_generation_failed",
        type_name=error.type_name,
        code=error.code.value,
        message=error.message,
    )
    return GenerationError(error)


def generate(
    raw: RawSpecification,
    *,
    namespace: MutableMapping[str, Any] | None = None,
) -> type:
    """Generate and materialize one alias.

    Args:
        raw: Raw specification.
        namespace: Scope to install the alias into (e.g. ``globals()``).
            The generated class's ``__module__`` is taken from its
            ``__name__`` entry.

    Returns:
        type: The generated alias class.

    Raises:
        GenerationError: If the specification is rejected.
    """
    match emit(raw, namespace=namespace):
        case Failure(error=error):
            raise _raise_for(error)
        case Success(value=emitted):
            pass

    module_name = _DEFAULT_MODULE
    if namespace is not None:
        module_name = str(namespace.get("__name__", _DEFAULT_MODULE))

    alias = materialize(emitted, module_name=module_name)
    if namespace is not None:
        namespace[emitted.type_name] = alias

    logger = get_logger().bind(type_name=emitted.type_name)
    logger.info(
        "alias_generated",
        family=emitted.family.value,
        capabilities=list(alias.__capabilities__),
        short_circuit=raw.short_circuit,
        module=module_name,
    )
    if get_settings().log_generated_source:
        logger.debug("alias_source", source=emitted.source)
    return alias


def _generate_from_fields(
    namespace: MutableMapping[str, Any] | None, **fields: Any
) -> type:
    match build_raw_specification(**fields):
        case Failure(error=error):
            raise _raise_for(error)
        case Success(value=raw):
            return generate(raw, namespace=namespace)


def alias_option(
    type_name: str,
    none_variant: str,
    some_variant: str,
    *,
    capabilities: Iterable[Capability | str] | None = None,
    short_circuit: bool = False,
    namespace: MutableMapping[str, Any] | None = None,
) -> type:
    """Generate an alias equivalent to ``T | None``.

    Args:
        type_name: Name of the generated type.
        none_variant: Identifier of the empty variant.
        some_variant: Identifier of the populated variant.
        capabilities: Capability list; the baseline set when omitted.
        short_circuit: Also emit the short-circuit protocol.
        namespace: Scope to install the alias into.

    Returns:
        type: The generated alias class.

    Raises:
        GenerationError: If the specification is rejected.

    Example:
        >>> Sampler = alias_option("Sampler", "Leader", "Receiver")
        >>> Sampler.Receiver(42).as_receiver()
        42
        >>> Sampler.Leader().is_leader()
        True
    """
    return _generate_from_fields(
        namespace,
        family=Family.OPTION,
        type_name=type_name,
        variants=[none_variant, some_variant],
        capabilities=None if capabilities is None else list(capabilities),
        short_circuit=short_circuit,
    )


def alias_result(
    type_name: str,
    ok_variant: str,
    err_variant: str,
    *,
    capabilities: Iterable[Capability | str] | None = None,
    short_circuit: bool = False,
    namespace: MutableMapping[str, Any] | None = None,
) -> type:
    """Generate an alias equivalent to ``Result[T, E]``.

    Args:
        type_name: Name of the generated type.
        ok_variant: Identifier of the success variant.
        err_variant: Identifier of the failure variant.
        capabilities: Capability list; the baseline set when omitted.
        short_circuit: Also emit the short-circuit protocol.
        namespace: Scope to install the alias into.

    Returns:
        type: The generated alias class.

    Raises:
        GenerationError: If the specification is rejected.
    """
    return _generate_from_fields(
        namespace,
        family=Family.RESULT,
        type_name=type_name,
        variants=[ok_variant, err_variant],
        capabilities=None if capabilities is None else list(capabilities),
        short_circuit=short_circuit,
    )


def alias_either(
    type_name: str,
    left_variant: str,
    right_variant: str,
    *,
    capabilities: Iterable[Capability | str] | None = None,
    namespace: MutableMapping[str, Any] | None = None,
) -> type:
    """Generate a two-sided alias with no privileged variant.

    Args:
        type_name: Name of the generated type.
        left_variant: Identifier of the first variant.
        right_variant: Identifier of the second variant.
        capabilities: Capability list; the baseline set when omitted.
        namespace: Scope to install the alias into.

    Returns:
        type: The generated alias class.

    Raises:
        GenerationError: If the specification is rejected.
    """
    return _generate_from_fields(
        namespace,
        family=Family.EITHER,
        type_name=type_name,
        variants=[left_variant, right_variant],
        capabilities=None if capabilities is None else list(capabilities),
    )


def render_source(raw: RawSpecification) -> str:
    """Render a standalone module declaring one alias.

    Raises:
        GenerationError: If the specification is rejected.
    """
    return render_specifications([raw])


def render_specifications(
    raws: Sequence[RawSpecification],
    *,
    docstring: str | None = None,
) -> str:
    """Render a module declaring several aliases.

    Type names must be unique within the module. Either every alias is
    rendered or none is.

    Args:
        raws: Specifications, in output order.
        docstring: Module docstring.

    Returns:
        str: Module source.

    Raises:
        GenerationError: If any specification is rejected.
    """
    declared: dict[str, Any] = {}
    emitted: list[EmittedAlias] = []
    for raw in raws:
        match emit(raw, namespace=declared):
            case Failure(error=error):
                raise _raise_for(error)
            case Success(value=alias):
                declared[alias.type_name] = alias
                emitted.append(alias)

    source = render_module(
        emitted, docstring=docstring, header=get_settings().module_header
    )
    get_logger().info(
        "module_rendered",
        aliases=[alias.type_name for alias in emitted],
        lines=source.count("\n"),
    )
    return source
