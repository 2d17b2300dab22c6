"""Signature and visibility introspection of invocation targets."""
from __future__ import annotations

import inspect
from enum import Enum
from typing import Any, Callable, Protocol

import attrs

from .binding import ParameterDescriptor, Signature

VARIADIC_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class Visibility(Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


@attrs.frozen
class VisibilityInfo:
    level: Visibility
    declaring_type: type


@attrs.frozen
class MethodDescription:
    attr_name: str
    signature: Signature
    visibility: VisibilityInfo


class SignatureInspector(Protocol):
    def describe_method(self, cls: type, name: str) -> MethodDescription | None:
        ...

    def describe_callable(self, fn: Callable) -> Signature:
        ...


def get_visibility_level(name: str) -> Visibility:
    is_dunder = name.startswith("__") and name.endswith("__")
    if is_dunder or not name.startswith("_"):
        return Visibility.PUBLIC
    if name.startswith("__"):
        return Visibility.PRIVATE
    return Visibility.PROTECTED


def get_stored_name(cls: type, name: str) -> str:
    """Returns the name under which ``cls`` stores the member ``name``,
    applying private name mangling."""
    if get_visibility_level(name) is Visibility.PRIVATE:
        return f"_{cls.__name__.lstrip('_')}{name}"
    return name


def get_mangled_owner(cls: type, name: str) -> type | None:
    """Returns the class in ``cls.__mro__`` whose private member ``name`` is
    spelled in mangled form, or None when ``name`` is no such spelling."""
    for owner in cls.__mro__:
        owner_name = owner.__name__.lstrip("_")
        if not owner_name:
            continue
        prefix = f"_{owner_name}__"
        rest = name[len(prefix) :]
        if name.startswith(prefix) and rest and not rest.endswith("__") and name in vars(owner):
            return owner
    return None


def is_bound(fn: Any) -> bool:
    return getattr(fn, "__self__", None) is not None


def is_method(member: Any) -> bool:
    return isinstance(member, (staticmethod, classmethod)) or inspect.isroutine(member)


def signature_from_parameters(params: list[inspect.Parameter]) -> Signature:
    formal = [e for e in params if e.kind not in VARIADIC_KINDS]
    return tuple(ParameterDescriptor.from_parameter(e, i) for i, e in enumerate(formal))


class ReflectionInspector:
    """
    Introspects targets with :mod:`inspect`. Nothing is cached, every call
    reads the target afresh.

    A member is looked up along ``cls.__mro__`` and the first class storing its
    name declares it. When that stored member is not a routine the lookup ends
    there, so a data attribute shadows any method of the same name further up
    the MRO, private ones included.

    Names spelled in their mangled form (``_A__secret``) are resolved to the
    private member of ``A`` they denote.
    """

    def describe_method(self, cls: type, name: str) -> MethodDescription | None:
        mangled_owner = get_mangled_owner(cls, name)
        if mangled_owner is not None:
            return self._describe(mangled_owner, name, Visibility.PRIVATE)

        level = get_visibility_level(name)
        for declaring_type in cls.__mro__:
            stored_name = get_stored_name(declaring_type, name)
            if stored_name in vars(declaring_type):
                return self._describe(declaring_type, stored_name, level)
        return None

    def describe_callable(self, fn: Callable) -> Signature:
        return signature_from_parameters(list(inspect.signature(fn).parameters.values()))

    @staticmethod
    def _describe(
        declaring_type: type, stored_name: str, level: Visibility
    ) -> MethodDescription | None:
        member = vars(declaring_type)[stored_name]
        if not is_method(member):
            return None
        fetched = getattr(declaring_type, stored_name)
        params = list(inspect.signature(fetched).parameters.values())
        # unbound functions and method descriptors still carry the receiver
        if not (isinstance(member, staticmethod) or is_bound(fetched)):
            params = params[1:]
        return MethodDescription(
            attr_name=stored_name,
            signature=signature_from_parameters(params),
            visibility=VisibilityInfo(level=level, declaring_type=declaring_type),
        )
