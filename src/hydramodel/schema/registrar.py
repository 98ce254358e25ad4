from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping, Optional, Type

from hydramodel.core.exceptions import CircularConfigurationError
from hydramodel.core.logger import get_logger
from hydramodel.schema.circular import validate_acyclic
from hydramodel.schema.registry import ModelRegistry

logger = get_logger(__name__)

_UNUSABLE = (str, bytes, bytearray, int, float, complex, bool)


def _resolve_model_type(model: Any) -> Optional[Type[Any]]:
    if model is None or isinstance(model, _UNUSABLE):
        return None
    if inspect.isroutine(model):
        return None
    model_type = model if isinstance(model, type) else type(model)
    return None if model_type is object else model_type


def register(model: Any, configuration: Optional[Mapping[str, Any]] = None) -> None:
    """
    Register a model type so its instances can be hydrated.

    Args:
        model: The model class, or an instance whose class should be registered.
               Unusable values (None, scalars, plain functions) are ignored.
        configuration: Optional data configuration. When given it replaces the
               class's ``data_configuration`` by reference.

    Raises:
        CircularConfigurationError: If the configuration graph contains a cycle.

    Example:
        >>> class Address:
        ...     def __init__(self, data=None):
        ...         self.data = data
        >>> class Person(HydratableModel):
        ...     pass
        >>> register(Person, {"name": "String", "addresses": [Address]})
        >>> Person({"name": "Ada", "addresses": ["Main St"]}).addresses[0].data
        'Main St'
    """
    model_type = _resolve_model_type(model)
    if model_type is None:
        logger.debug(f"Ignoring registration of unusable model {model!r}")
        return

    if isinstance(configuration, Mapping):
        model_type.data_configuration = configuration

    try:
        validate_acyclic(model_type)
    except CircularConfigurationError as exc:
        logger.error(f"Registration of {model_type.__name__} failed: {exc}")
        raise

    schema = ModelRegistry.register(model_type)
    logger.debug(
        f"Registered model {model_type.__name__} with {len(schema.raw_configuration())} configuration keys"
    )


def model(configuration: Optional[Mapping[str, Any]] = None) -> Callable[[Type[Any]], Type[Any]]:
    """Class decorator form of ``register``."""

    def decorator(model_type: Type[Any]) -> Type[Any]:
        register(model_type, configuration)
        return model_type

    return decorator
