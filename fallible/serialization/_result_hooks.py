import types
import typing
from collections.abc import Callable
from typing import Any, Optional, get_origin, get_args

import cattrs

from .._result import Success, Failure, Result

SUCCESS_TAG = "Success"
FAILURE_TAG = "Failure"


def configure_result_hooks(converter: cattrs.BaseConverter) -> None:
    """Register hooks on a converter to (un)structure successes and failures.

    Success[T] is unstructured as {"Success": <T unstructured>} and Failure[E] as
    {"Failure": <E unstructured>}.
    Structuring a bare Success or Failure without type argument leaves the payload
    as is.

    Hooks are also registered for Result[T, E] and for unions of a Success and a
    Failure, such that results declared as fields of attrs classes can be read
    back.
    """

    def unstructure_success(val: Success) -> dict:
        return {SUCCESS_TAG: converter.unstructure(val.value)}

    def unstructure_failure(val: Failure) -> dict:
        return {FAILURE_TAG: converter.unstructure(val.error)}

    def unstructure_union(val: Success | Failure) -> dict:
        return converter.unstructure(val, unstructure_as=val.__class__)

    def structure_success(val: Any, typ: Any) -> Success:
        payload = _untag(val, SUCCESS_TAG)
        return Success(converter.structure(payload, _payload_type(typ)))

    def structure_failure(val: Any, typ: Any) -> Failure:
        payload = _untag(val, FAILURE_TAG)
        return Failure(converter.structure(payload, _payload_type(typ)))

    def structure_union(val: Any, typ: Any) -> Result[Any, Any]:
        payload_types = _result_payload_types(typ)
        assert payload_types is not None
        value_type, error_type = payload_types
        return structure_result(val, value_type, error_type, converter)

    converter.register_unstructure_hook(Success, unstructure_success)
    converter.register_unstructure_hook(Failure, unstructure_failure)
    converter.register_unstructure_hook_func(_is_result_union, unstructure_union)
    converter.register_structure_hook_func(
        _is_parametrized(Success), structure_success
    )
    converter.register_structure_hook_func(
        _is_parametrized(Failure), structure_failure
    )
    converter.register_structure_hook_func(_is_result_union, structure_union)


def unstructure_result(
    result: Result[Any, Any], converter: Optional[cattrs.BaseConverter] = None
) -> dict:
    """Unstructure a result into an externally tagged dictionary.

    The converter must have been set up with :func:`configure_result_hooks`.
    """

    if converter is None:
        converter = default_converter
    return converter.unstructure(result, unstructure_as=result.__class__)


def structure_result[T, E](
    data: Any,
    value_type: type[T],
    error_type: type[E],
    converter: Optional[cattrs.BaseConverter] = None,
) -> Result[T, E]:
    """Structure an externally tagged dictionary into a result.

    Raises:
        ValueError: If the data is not a dictionary with a single known tag.
    """

    if converter is None:
        converter = default_converter
    tag, payload = _split_tag(data)
    if tag == SUCCESS_TAG:
        return Success(converter.structure(payload, value_type))
    else:
        return Failure(converter.structure(payload, error_type))


def _is_parametrized(cls: type) -> Callable[[Any], bool]:
    def predicate(typ: Any) -> bool:
        return typ is cls or get_origin(typ) is cls

    return predicate


def _is_result_union(typ: Any) -> bool:
    return _result_payload_types(typ) is not None


def _result_payload_types(typ: Any) -> Optional[tuple[Any, Any]]:
    """Return the value and error types of a result type.

    Returns None if the type is neither Result[T, E] nor a union of exactly one
    Success and one Failure.
    """

    if typ is Result:
        return Any, Any
    origin = get_origin(typ)
    if origin is Result:
        value_type, error_type = get_args(typ)
        return value_type, error_type
    if origin is not types.UnionType and origin is not typing.Union:
        return None
    value_types = []
    error_types = []
    for member in get_args(typ):
        member_origin = get_origin(member) or member
        if member_origin is Success:
            value_types.append(_payload_type(member))
        elif member_origin is Failure:
            error_types.append(_payload_type(member))
        else:
            return None
    if len(value_types) != 1 or len(error_types) != 1:
        return None
    return value_types[0], error_types[0]


def _payload_type(typ: Any) -> Any:
    args = get_args(typ)
    return args[0] if args else Any


def _untag(val: Any, expected: str) -> Any:
    tag, payload = _split_tag(val)
    if tag != expected:
        raise ValueError(f"Expected tag '{expected}', got '{tag}'.")
    return payload


def _split_tag(val: Any) -> tuple[str, Any]:
    if not isinstance(val, dict) or len(val) != 1:
        raise ValueError("Expected a single key in the dictionary for result type.")
    tag = next(iter(val))
    if tag not in (SUCCESS_TAG, FAILURE_TAG):
        raise ValueError(f"Unknown tag '{tag}' for result type.")
    return tag, val[tag]


default_converter = cattrs.Converter()
configure_result_hooks(default_converter)
