from __future__ import annotations

from typing import Annotated, Any, Callable, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Configuration keys that switch dynamic property creation on or off.
DYNAMIC_PROPERTIES_KEYS = ("_dynamic_properties", "_dynamicProperties")


class PassthroughRule(BaseModel):
    """The raw value is stored as-is. ``marker`` keeps documentation markers such as ``"String"``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["passthrough"] = "passthrough"
    marker: Any = None

    @property
    def referenced_type(self) -> Optional[Callable[..., Any]]:
        return None


class SingleTypeRule(BaseModel):
    """The raw value is handed to ``target`` to build one object."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["single"] = "single"
    target: Callable[..., Any]

    @property
    def referenced_type(self) -> Optional[Callable[..., Any]]:
        return self.target


class ArrayOfRule(BaseModel):
    """The raw value becomes a list; elements are built with ``item_type`` when one is given."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    item_type: Optional[Callable[..., Any]] = None

    @property
    def referenced_type(self) -> Optional[Callable[..., Any]]:
        return self.item_type


PropertyRule = Annotated[
    Union[
        PassthroughRule,
        SingleTypeRule,
        ArrayOfRule,
    ],
    Field(discriminator="kind"),
]

PASSTHROUGH = PassthroughRule()


def parse_rule(marker: Any) -> Union[PassthroughRule, SingleTypeRule, ArrayOfRule]:
    """Translate one configuration marker into its rule.

    - ``[]`` / ``[T]``: array rule (``T`` only counts when callable)
    - a callable, normally a class: single object rule
    - anything else, including ``None`` and ``"String"``: passthrough
    """
    if isinstance(marker, (list, tuple)):
        item_type = marker[0] if marker and callable(marker[0]) else None
        return ArrayOfRule(item_type=item_type)
    if callable(marker):
        return SingleTypeRule(target=marker)
    if marker is None:
        return PASSTHROUGH
    return PassthroughRule(marker=marker)


def is_reserved_key(key: Any) -> bool:
    return key in DYNAMIC_PROPERTIES_KEYS


class DataConfiguration(BaseModel):
    """Typed form of a model's ``data_configuration`` mapping."""

    model_config = ConfigDict(frozen=True)

    rules: Dict[str, PropertyRule] = Field(default_factory=dict)
    dynamic_properties: bool = True

    @classmethod
    def from_mapping(
        cls,
        raw: Optional[Mapping[str, Any]],
        *,
        dynamic_default: bool = True,
    ) -> "DataConfiguration":
        raw = raw or {}
        dynamic = dynamic_default
        rules: Dict[str, Any] = {}
        for key, marker in raw.items():
            if is_reserved_key(key):
                if marker is not None:
                    dynamic = bool(marker)
                continue
            rules[key] = parse_rule(marker)
        return cls(rules=rules, dynamic_properties=dynamic)

    def rule_for(self, key: str) -> Union[PassthroughRule, SingleTypeRule, ArrayOfRule]:
        return self.rules.get(key, PASSTHROUGH)

    def __contains__(self, key: object) -> bool:
        return key in self.rules
