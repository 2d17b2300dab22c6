from __future__ import annotations

from typing import Any, Callable, Mapping

import attrs

from .inspection import ReflectionInspector, SignatureInspector
from .invoking import invoke_closure, invoke_method


@attrs.frozen
class Invoker:
    """
    Named-parameter calling on behalf of the calling context ``caller``.
    Protected and private methods of invoked objects are honored as if the call
    was written inside ``caller``.
    """

    caller: type
    inspector: SignatureInspector = attrs.field(factory=ReflectionInspector)

    def invoke_method(self, obj: Any, method: str, params: Mapping[str, Any] | None = None) -> Any:
        return invoke_method(self.caller, obj, method, params, inspector=self.inspector)

    def invoke_closure(self, closure: Callable, params: Mapping[str, Any] | None = None) -> Any:
        return invoke_closure(closure, params, inspector=self.inspector)


class InvokerMixin:
    """Adds named-parameter invocation to a class, using the class itself as
    the calling context."""

    def _invoke_method(self, obj: Any, method: str, params: Mapping[str, Any] | None = None):
        return Invoker(caller=type(self)).invoke_method(obj, method, params)

    def _invoke_closure(self, closure: Callable, params: Mapping[str, Any] | None = None):
        return Invoker(caller=type(self)).invoke_closure(closure, params)
