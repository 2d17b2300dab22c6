"""Invoking methods and callables with named parameters."""
from __future__ import annotations

from typing import Any, Callable, Mapping

from typeguard import typechecked

from named_invoker import log

from .binding import bind_params, call_with_bound_args
from .exceptions import MethodNotAccessible, MethodNotDefined
from .inspection import (
    MethodDescription,
    ReflectionInspector,
    SignatureInspector,
    Visibility,
)

logger = log.get_logger("named_invoker")

DEFAULT_INSPECTOR: SignatureInspector = ReflectionInspector()


def get_qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def is_accessible(caller: type, obj: Any, description: MethodDescription) -> bool:
    level = description.visibility.level
    if level is Visibility.PROTECTED:
        return isinstance(obj, caller)
    if level is Visibility.PRIVATE:
        return description.visibility.declaring_type is caller
    return True


@typechecked
def invoke_method(
    caller: type,
    obj: Any,
    method: str,
    params: Mapping[str, Any] | None = None,
    inspector: SignatureInspector | None = None,
) -> Any:
    """Invoke ``obj.<method>`` binding ``params`` to its parameters by name.

    Protected and private methods are honored relative to ``caller``: a protected
    method requires ``obj`` to be an instance of ``caller``, a private one requires
    ``caller`` to be exactly the type declaring it.

    :param caller: Type of the calling context.
    :param obj: The object to invoke the method on.
    :param method: Name of the method, as written at a call-site inside its class.
    :param params: Values keyed by parameter name. Missing parameters take their
        default, or ``None`` when there is none. Unknown keys are ignored.
    :param inspector: Introspection backend; defaults to :class:`ReflectionInspector`.
    :return: Whatever the method returns.

    """
    if obj is None:
        raise ValueError("`obj` must not be None.")
    if inspector is None:
        inspector = DEFAULT_INSPECTOR

    target = f"{get_qualified_name(type(obj))}::{method}"
    description = inspector.describe_method(type(obj), method)
    if description is None:
        raise MethodNotDefined(target)

    if not is_accessible(caller, obj, description):
        access = description.visibility.level.value
        logger.debug("Rejected call to %s from %s: %s", target, get_qualified_name(caller), access)
        raise MethodNotAccessible(f"{target} is {access}")

    args = bind_params(description.signature, params or {})
    logger.debug("Invoking %s with %s", target, args)
    return call_with_bound_args(
        getattr(obj, description.attr_name), description.signature, args
    )


@typechecked
def invoke_closure(
    closure: Callable,
    params: Mapping[str, Any] | None = None,
    inspector: SignatureInspector | None = None,
) -> Any:
    """Invoke ``closure`` binding ``params`` to its parameters by name.

    :param closure: Any callable with an introspectable signature.
    :param params: Values keyed by parameter name. Missing parameters take their
        default, or ``None`` when there is none. Unknown keys are ignored.
    :param inspector: Introspection backend; defaults to :class:`ReflectionInspector`.
    :return: Whatever the callable returns.

    """
    if inspector is None:
        inspector = DEFAULT_INSPECTOR

    signature = inspector.describe_callable(closure)
    args = bind_params(signature, params or {})
    logger.debug("Invoking %s with %s", getattr(closure, "__qualname__", closure), args)
    return call_with_bound_args(closure, signature, args)
