from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class Hydratable(Protocol):
    def fill_data(self, data: Any = None) -> Any:
        ...


@runtime_checkable
class Resettable(Protocol):
    def empty_data(self, data: Any = None) -> None:
        ...


def _is_registered_instance(value: Any) -> bool:
    from hydramodel.schema.registry import ModelRegistry

    return ModelRegistry.try_lookup(type(value)) is not None


def hydrator_for(value: Any) -> Optional[Callable[[Any], Any]]:
    """Return a callable that hydrates ``value`` in place, or None when it cannot be."""
    # Classes themselves are never property values that hydrate in place.
    if value is None or isinstance(value, type):
        return None
    if isinstance(value, Hydratable):
        return value.fill_data
    if _is_registered_instance(value):
        from hydramodel.engine.hydration import fill_data

        return lambda data: fill_data(value, data)
    return None


def resetter_for(value: Any) -> Optional[Callable[[], Any]]:
    """Return a callable that empties ``value`` in place, or None when it cannot be."""
    if value is None or isinstance(value, type):
        return None
    if isinstance(value, Resettable):
        return value.empty_data
    if _is_registered_instance(value):
        from hydramodel.engine.reset import empty_data

        return lambda: empty_data(value)
    return None
