"""The ``fill_data`` pipeline.

One call runs, in order: id assignment, before-fill hooks, reset of
configured properties missing from the data, population from the data,
defaults for configured properties still unset, after-fill hooks, dependent
object updates, after-fill callbacks and the last-update timestamp.

Nested typed properties are hydrated by plain recursive calls, so an inner
hydration always completes before the outer one moves on. Recursion depth is
bounded by the configuration graph, which registration keeps acyclic.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, TypeVar

from hydramodel.core.capabilities import Resettable
from hydramodel.core.logger import get_logger, push_model, reset_model
from hydramodel.engine import reset
from hydramodel.engine.dependents import after_fill_callbacks, dependent_updaters
from hydramodel.engine.identity import generate_unique_object_id, update_fill_flag
from hydramodel.engine.properties import construct, refresh
from hydramodel.models.property_rule import DataConfiguration
from hydramodel.schema.registry import ModelRegistry, ModelSchema

logger = get_logger(__name__)

M = TypeVar("M")


def _run_before_fill(schema: ModelSchema, instance: Any, data: Any) -> Any:
    for hook in schema.before_fill_hooks():
        data = hook(instance, data)
    return data


def _normalize(instance: Any, data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        logger.warning(
            f"Ignoring {type(data).__name__} data for {type(instance).__name__}; expected a mapping"
        )
        return {}
    return data


def _empty(instance: Any, data: Mapping[str, Any]) -> None:
    if isinstance(instance, Resettable):
        instance.empty_data(data)
    else:
        reset.empty_data(instance, data)


def _populate(instance: Any, configuration: DataConfiguration, data: Mapping[str, Any]) -> None:
    if configuration.dynamic_properties:
        keys = list(data)
    else:
        keys = [key for key in configuration.rules if key in data]

    owned: Dict[str, Any] = vars(instance)
    for key in keys:
        if not isinstance(key, str):
            logger.warning(
                f"Ignoring non-string key {key!r} in data for {type(instance).__name__}"
            )
            continue
        rule = configuration.rule_for(key)
        if key in owned:
            value = refresh(rule, owned[key], data[key])
        else:
            value = construct(rule, data[key])
        setattr(instance, key, value)


def _fill_unset(instance: Any, configuration: DataConfiguration) -> None:
    owned = vars(instance)
    for key, rule in configuration.rules.items():
        if key not in owned:
            setattr(instance, key, construct(rule, None))


def fill_data(instance: M, data: Optional[Any] = None) -> M:
    """
    Hydrate ``instance`` from ``data`` according to its type's data configuration.

    Args:
        instance: Instance of a registered model type.
        data: Raw mapping (parsed JSON or similar). ``None`` skips the
              before-fill hooks and fills every configured property with its
              default.

    Returns:
        The same instance.

    Raises:
        ModelNotRegisteredError: If the instance's type was never registered.
    """
    schema = ModelRegistry.lookup(type(instance))
    token = push_model(type(instance).__name__)
    try:
        generate_unique_object_id(instance)

        if data is not None:
            data = _run_before_fill(schema, instance, data)
        data = _normalize(instance, data)

        configuration = schema.configuration()
        logger.debug(
            f"Filling {type(instance).__name__} with {len(data)} keys "
            f"({'dynamic' if configuration.dynamic_properties else 'static'} mode)"
        )

        _empty(instance, data)
        _populate(instance, configuration, data)
        _fill_unset(instance, configuration)

        for hook in schema.after_fill_hooks():
            hook(instance)

        for update_dependent in dependent_updaters(instance):
            update_dependent()

        for callback in after_fill_callbacks(instance):
            callback(instance)

        update_fill_flag(instance)
    finally:
        reset_model(token)

    return instance
