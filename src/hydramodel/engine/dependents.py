from __future__ import annotations

from typing import Any, Callable, List, TypeVar

AFTER_FILL_CALLBACKS_FIELD = "_after_fill_callbacks"
DEPENDENT_UPDATERS_FIELD = "_dependent_object_updaters"

T = TypeVar("T")


def _instance_list(instance: Any, field_name: str) -> List[Any]:
    values = vars(instance).get(field_name)
    if values is None:
        values = []
        setattr(instance, field_name, values)
    return values


def dependent_updaters(instance: Any) -> List[Callable[[], Any]]:
    return list(vars(instance).get(DEPENDENT_UPDATERS_FIELD) or ())


def after_fill_callbacks(instance: Any) -> List[Callable[[Any], Any]]:
    return list(vars(instance).get(AFTER_FILL_CALLBACKS_FIELD) or ())


def create_dependent_object(
    instance: Any,
    dependent: T,
    updater: Callable[..., Any],
    args: Any = None,
) -> T:
    """
    Keep ``dependent`` in sync with ``instance``.

    ``updater(instance, dependent, *args)`` runs right away and again after
    every hydration of ``instance``. ``args`` may be a list/tuple of extra
    arguments or a single extra argument.

    Returns:
        ``dependent``, so the call can be used inline.
    """
    if args is None:
        extra = ()
    elif isinstance(args, (list, tuple)):
        extra = tuple(args)
    else:
        extra = (args,)

    def update_dependent() -> None:
        updater(instance, dependent, *extra)

    update_dependent()
    _instance_list(instance, DEPENDENT_UPDATERS_FIELD).append(update_dependent)
    return dependent


def after_fill(instance: Any, callback: Callable[[Any], Any]) -> Callable[[], None]:
    """Call ``callback(instance)`` after every hydration; returns a function that removes it again."""
    callbacks = _instance_list(instance, AFTER_FILL_CALLBACKS_FIELD)
    callbacks.append(callback)
    removed = False

    def remove_after_fill_callback() -> None:
        nonlocal removed
        if removed:
            return
        removed = True
        current = vars(instance).get(AFTER_FILL_CALLBACKS_FIELD) or []
        if callback in current:
            current.remove(callback)

    return remove_after_fill_callback
