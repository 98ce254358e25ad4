"""hydramodel.

Configuration-driven object hydration.

A model type declares how each of its properties is built from raw,
already-parsed data (mappings, lists, scalars). Hydrating an instance fills
it from such data, recursively builds nested typed objects and lists, keeps
the identity of nested objects and lists across repeated hydrations, and runs
before/after hooks, dependent object updates and callbacks.

Public API for application code defining model types.
"""

from hydramodel.core.capabilities import Hydratable, Resettable
from hydramodel.core.exceptions import (
    CircularConfigurationError,
    HydraModelException,
    ModelNotRegisteredError,
)
from hydramodel.engine.dependents import after_fill, create_dependent_object
from hydramodel.engine.hydration import fill_data
from hydramodel.engine.identity import generate_unique_object_id, update_fill_flag
from hydramodel.engine.reset import empty_data
from hydramodel.model import HydratableModel
from hydramodel.models.property_rule import (
    ArrayOfRule,
    DataConfiguration,
    PassthroughRule,
    SingleTypeRule,
    parse_rule,
)
from hydramodel.models.settings import EngineSettings, get_settings, set_settings
from hydramodel.schema.registrar import model, register
from hydramodel.schema.registry import ModelRegistry

__version__ = "0.1.0"

__all__ = [
    "ArrayOfRule",
    "CircularConfigurationError",
    "DataConfiguration",
    "EngineSettings",
    "HydraModelException",
    "Hydratable",
    "HydratableModel",
    "ModelNotRegisteredError",
    "ModelRegistry",
    "PassthroughRule",
    "Resettable",
    "SingleTypeRule",
    "after_fill",
    "create_dependent_object",
    "empty_data",
    "fill_data",
    "generate_unique_object_id",
    "get_settings",
    "model",
    "parse_rule",
    "register",
    "set_settings",
    "update_fill_flag",
]
