"""Property-level conversion and reset rules.

``construct`` builds a fresh value for one property, ``refresh`` updates an
existing value while keeping its identity where possible, and ``reset_one``
empties a single value. Identity is kept for values that hydrate (or empty)
in place and for lists; everything else is rebuilt.
"""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, Union

from hydramodel.core.capabilities import hydrator_for, resetter_for
from hydramodel.models.property_rule import ArrayOfRule, PassthroughRule, SingleTypeRule

Rule = Union[PassthroughRule, SingleTypeRule, ArrayOfRule]


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_blank(value: Any) -> bool:
    # Empty mappings still count as data; they hydrate into a default object.
    if value is None:
        return True
    if isinstance(value, (Mapping, list, tuple)):
        return False
    return not value


def build_sequence(item_type: Optional[Callable[..., Any]], data: Any) -> List[Any]:
    """Turn raw data into a list, building one ``item_type`` per element when given.

    A list without an item type is adopted as-is; a scalar becomes a
    one-element list and blank data an empty one.
    """
    if is_sequence(data):
        if item_type is None:
            return data if isinstance(data, list) else list(data)
        return [item_type(element) for element in data]
    if _is_blank(data):
        return []
    return build_sequence(item_type, [data])


def construct(rule: Rule, data: Any = None) -> Any:
    if isinstance(rule, SingleTypeRule):
        return rule.target(data)
    if isinstance(rule, ArrayOfRule):
        return build_sequence(rule.item_type, data)
    return data


def reset_in_place(value: Any) -> bool:
    """Empty ``value`` without replacing it. Returns False when it cannot be emptied in place."""
    resetter = resetter_for(value)
    if resetter is not None:
        resetter()
        return True
    if isinstance(value, list):
        del value[:]
        return True
    return False


def reset_one(value: Any, rule: Rule) -> Any:
    if reset_in_place(value):
        return value
    return construct(rule, None)


def refresh(rule: Rule, current: Any, data: Any) -> Any:
    # A value that cannot be emptied in place is about to be replaced, so no
    # throwaway default is built for it here.
    reset_in_place(current)

    hydrate = hydrator_for(current)
    if hydrate is not None:
        hydrate(data)
        return current

    if isinstance(current, list) and isinstance(rule, ArrayOfRule):
        current.extend(build_sequence(rule.item_type, data))
        return current

    return construct(rule, data)
