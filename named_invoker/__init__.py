# pylint: disable=unused-import
"""Named-parameter invocation of methods and callables."""
from . import constants, log
from .log import get_logger

from . import invocation
from .invocation import (
    Invoker,
    InvokerMixin,
    MethodNotAccessible,
    MethodNotDefined,
    invoke_closure,
    invoke_method,
)

logger = get_logger("named_invoker")
log.add_supress_traceback_module(invocation)
