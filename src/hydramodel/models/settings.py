from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

ENV_PREFIX = "HYDRAMODEL_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EngineSettings(BaseModel):
    """Process-wide defaults for the hydration engine.

    Per-type class attributes always win over these values:
    ``unique_object_id_prefix`` over ``default_object_id_prefix`` and the
    ``_dynamic_properties`` configuration key over ``dynamic_properties``.
    """

    default_object_id_prefix: str = "object"
    dynamic_properties: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineSettings":
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw
        return cls.model_validate(values)


_SETTINGS: Optional[EngineSettings] = None


def get_settings() -> EngineSettings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = EngineSettings.from_env()
    return _SETTINGS


def set_settings(settings: Optional[EngineSettings]) -> None:
    """Install settings for the process; ``None`` re-reads the environment on next access."""
    global _SETTINGS
    _SETTINGS = settings
