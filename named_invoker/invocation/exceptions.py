class InvokerException(Exception):
    ...


class MethodNotDefined(InvokerException, AttributeError):
    """Raised when the requested method does not exist on the target's type."""


class MethodNotAccessible(InvokerException, PermissionError):
    """Raised when the calling context may not invoke a protected or private method."""
