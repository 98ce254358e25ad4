from __future__ import annotations

import time
from typing import Any

from hydramodel.models.settings import get_settings
from hydramodel.schema.registry import ModelRegistry

OBJECT_ID_FIELD = "_object_id"
LAST_UPDATE_FIELD = "_last_data_update"


def _now_ms() -> int:
    return int(time.time() * 1000)


def generate_unique_object_id(instance: Any) -> None:
    """
    Give ``instance`` an ``_object_id`` of the form ``<prefix><n>``.

    ``n`` comes from the counter of the instance's registered type, starting
    at 1. The prefix is that registered type's ``unique_object_id_prefix`` when
    it is a string, otherwise the configured default (``"object"``).

    Existing ids are never replaced: an object keeps its id for life.
    """
    if OBJECT_ID_FIELD in vars(instance):
        return

    schema = ModelRegistry.lookup(type(instance))
    prefix = getattr(schema.model_type, "unique_object_id_prefix", None)
    if not isinstance(prefix, str):
        prefix = get_settings().default_object_id_prefix

    setattr(instance, OBJECT_ID_FIELD, f"{prefix}{schema.next_object_id()}")


def update_fill_flag(instance: Any) -> None:
    """Record the time (epoch milliseconds) of the latest hydration."""
    setattr(instance, LAST_UPDATE_FIELD, _now_ms())
