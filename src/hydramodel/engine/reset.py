from __future__ import annotations

from typing import Any, Mapping, Optional

from hydramodel.engine.properties import reset_one
from hydramodel.schema.registry import ModelRegistry


def empty_data(instance: Any, data: Optional[Mapping[str, Any]] = None) -> None:
    """
    Reset the configured properties of ``instance``.

    Properties with an in-place reset and lists keep their identity; other
    configured properties get a fresh default. Properties named in ``data``
    and properties missing from the configuration are left untouched.
    """
    configuration = ModelRegistry.lookup(type(instance)).configuration()
    keep = data if isinstance(data, Mapping) else {}

    for key in list(vars(instance)):
        if key in configuration and key not in keep:
            setattr(instance, key, reset_one(vars(instance)[key], configuration.rule_for(key)))
