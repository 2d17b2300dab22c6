"""Binding named parameters to the formal parameters of a signature."""
from __future__ import annotations

import inspect
from typing import Any, Callable, Final, Mapping, Sequence

import attrs

ABSENT: Final = None

POSITIONAL_KINDS: Final = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@attrs.frozen
class ParameterDescriptor:
    name: str
    position: int
    has_default: bool
    default_value: Any = None
    kind: inspect._ParameterKind = inspect.Parameter.POSITIONAL_OR_KEYWORD

    @classmethod
    def from_parameter(cls, param: inspect.Parameter, position: int) -> ParameterDescriptor:
        has_default = param.default is not inspect.Parameter.empty
        return cls(
            name=param.name,
            position=position,
            has_default=has_default,
            default_value=param.default if has_default else None,
            kind=param.kind,
        )


Signature = tuple[ParameterDescriptor, ...]


def bind_params(signature: Signature, params: Mapping[str, Any]) -> list[Any]:
    """Produce the argument list for ``signature``, one value per parameter.

    A parameter takes the value mapped to its name when the name is a key of
    ``params``, otherwise its default, otherwise ``ABSENT``. Keys that match no
    parameter are ignored.

    :param signature: Formal parameters in declaration order.
    :param params: Named values supplied by the caller.
    :return: Values in signature order, ``len(signature)`` entries long.
    """
    result = []
    for param in signature:
        if param.name in params:
            result.append(params[param.name])
        elif param.has_default:
            result.append(param.default_value)
        else:
            result.append(ABSENT)
    return result


def call_with_bound_args(fn: Callable, signature: Signature, args: Sequence[Any]) -> Any:
    positional = []
    keyword = {}
    for param, value in zip(signature, args):
        if param.kind in POSITIONAL_KINDS:
            positional.append(value)
        else:
            keyword[param.name] = value
    return fn(*positional, **keyword)
