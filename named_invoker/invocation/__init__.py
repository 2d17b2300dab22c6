"""Invoking methods and callables with named parameters"""
from . import exceptions
from .binding import ABSENT, ParameterDescriptor, Signature, bind_params
from .exceptions import InvokerException, MethodNotAccessible, MethodNotDefined
from .inspection import (
    MethodDescription,
    ReflectionInspector,
    SignatureInspector,
    Visibility,
    VisibilityInfo,
)
from .invoker import Invoker, InvokerMixin
from .invoking import invoke_closure, invoke_method
