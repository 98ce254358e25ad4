from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Dict, Iterator, List, Mapping, Optional, Tuple, Type

from hydramodel.core.exceptions import ModelNotRegisteredError
from hydramodel.models.property_rule import DataConfiguration
from hydramodel.models.settings import get_settings


def declared_configuration(model_type: Any) -> Optional[Mapping[str, Any]]:
    """Return the raw ``data_configuration`` mapping of a type, or None if it has none."""
    raw = getattr(model_type, "data_configuration", None)
    return raw if isinstance(raw, Mapping) else None


_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _snapshot(raw: Mapping[str, Any]) -> Tuple[Tuple[Any, Any], ...]:
    return tuple(
        (key, tuple(value) if isinstance(value, (list, tuple)) else value)
        for key, value in raw.items()
    )


def _hooks(model_type: Any, attribute: str) -> List[Callable[..., Any]]:
    hooks = getattr(model_type, attribute, None)
    if not isinstance(hooks, (list, tuple)):
        return []
    return [hook for hook in hooks if callable(hook)]


@dataclass
class ModelSchema:
    """Per-type operation table created by each ``register`` call.

    The raw configuration stays on the class (by reference); the typed
    ``DataConfiguration`` is parsed once and re-parsed only when the raw
    mapping is replaced or edited.
    """

    model_type: Type[Any]
    _ids: Iterator[int] = field(default_factory=lambda: itertools.count(1), repr=False)
    _parsed: Optional[DataConfiguration] = field(default=None, init=False, repr=False)
    _parsed_snapshot: Optional[Tuple[Tuple[Any, Any], ...]] = field(default=None, init=False, repr=False)
    _parsed_dynamic_default: Optional[bool] = field(default=None, init=False, repr=False)

    def raw_configuration(self) -> Mapping[str, Any]:
        return declared_configuration(self.model_type) or _EMPTY

    def configuration(self) -> DataConfiguration:
        raw = self.raw_configuration()
        dynamic_default = get_settings().dynamic_properties
        snapshot = _snapshot(raw)
        if (
            self._parsed is None
            or self._parsed_dynamic_default != dynamic_default
            or self._parsed_snapshot != snapshot
        ):
            self._parsed = DataConfiguration.from_mapping(raw, dynamic_default=dynamic_default)
            self._parsed_snapshot = snapshot
            self._parsed_dynamic_default = dynamic_default
        return self._parsed

    def before_fill_hooks(self) -> List[Callable[..., Any]]:
        return _hooks(self.model_type, "on_before_fill")

    def after_fill_hooks(self) -> List[Callable[..., Any]]:
        return _hooks(self.model_type, "on_after_fill")

    def next_object_id(self) -> int:
        return next(self._ids)


class ModelRegistry:
    _registry: ClassVar[Dict[Type[Any], ModelSchema]] = {}

    @classmethod
    def register(cls, model_type: Type[Any]) -> ModelSchema:
        # Re-registering replaces the schema, which restarts the id counter.
        schema = ModelSchema(model_type=model_type)
        cls._registry[model_type] = schema
        return schema

    @classmethod
    def get(cls, model_type: Type[Any]) -> ModelSchema:
        try:
            return cls._registry[model_type]
        except KeyError as exc:
            raise ModelNotRegisteredError(model_type) from exc

    @classmethod
    def try_lookup(cls, model_type: Type[Any]) -> Optional[ModelSchema]:
        """Find the schema of ``model_type`` or of its nearest registered base class."""
        for klass in getattr(model_type, "__mro__", (model_type,)):
            schema = cls._registry.get(klass)
            if schema is not None:
                return schema
        return None

    @classmethod
    def lookup(cls, model_type: Type[Any]) -> ModelSchema:
        schema = cls.try_lookup(model_type)
        if schema is None:
            raise ModelNotRegisteredError(model_type)
        return schema

    @classmethod
    def is_registered(cls, model_type: Type[Any]) -> bool:
        return model_type in cls._registry

    @classmethod
    def unregister(cls, model_type: Type[Any]) -> None:
        cls._registry.pop(model_type, None)

    @classmethod
    def clear(cls) -> None:
        cls._registry.clear()
