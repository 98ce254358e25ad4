"""
Custom exception classes for the hydramodel package.

Registration problems are the only fatal errors: malformed hydration input is
normalized rather than rejected, and exceptions raised by user hooks or
callbacks are left to propagate untouched.
"""

from typing import Any, Optional, Sequence


def _type_name(model_type: Any) -> str:
    return getattr(model_type, "__qualname__", None) or getattr(model_type, "__name__", None) or repr(model_type)


class HydraModelException(Exception):
    """Base exception class for all hydramodel exceptions."""

    pass


class CircularConfigurationError(HydraModelException):
    """
    Raised by ``register`` when data configurations reference each other in a cycle.

    The check runs before the type is recorded, so no instance of a type in
    the cycle can be hydrated through the faulty configuration.

    Example:
        >>> class A: ...
        >>> class B: ...
        >>> A.data_configuration = {"b": B}
        >>> B.data_configuration = {"a": A}
        >>> register(A)
        Traceback (most recent call last):
        ...
        CircularConfigurationError: detected circular constructor reference for B - path: B -> A -> B
    """

    def __init__(self, model_type: Any, path: Optional[Sequence[Any]] = None):
        self.model_type = model_type
        self.path = tuple(path or ())
        message = f"detected circular constructor reference for {_type_name(model_type)}"
        if self.path:
            message += " - path: " + " -> ".join(_type_name(t) for t in self.path)
        super().__init__(message)


class ModelNotRegisteredError(HydraModelException):
    """Raised when an engine operation runs on an instance of a type that was never registered."""

    def __init__(self, model_type: Any):
        self.model_type = model_type
        super().__init__(
            f"No data configuration registered for {_type_name(model_type)}; call register() first"
        )
