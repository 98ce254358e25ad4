from __future__ import annotations

from typing import Any, List, Mapping

from hydramodel.core.exceptions import CircularConfigurationError
from hydramodel.models.property_rule import is_reserved_key, parse_rule
from hydramodel.schema.registry import declared_configuration


def validate_acyclic(model_type: Any) -> None:
    """Raise CircularConfigurationError if the configuration graph below ``model_type`` has a cycle.

    Only referenced types that declare a configuration of their own are
    followed; plain constructors are leaves.
    """
    _walk(declared_configuration(model_type) or {}, [])


def _walk(configuration: Mapping[str, Any], ancestors: List[Any]) -> None:
    for key, marker in configuration.items():
        if is_reserved_key(key):
            continue

        referenced = parse_rule(marker).referenced_type
        if referenced is None:
            continue

        nested = declared_configuration(referenced)
        if nested is None:
            continue

        if any(referenced is ancestor for ancestor in ancestors):
            raise CircularConfigurationError(referenced, path=[*ancestors, referenced])

        ancestors.append(referenced)
        try:
            _walk(nested, ancestors)
        finally:
            ancestors.pop()
