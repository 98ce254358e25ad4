from types import SimpleNamespace

import pytest

from hydramodel import HydratableModel, ModelRegistry, register, set_settings


@pytest.fixture(autouse=True)
def _isolated_registry():
    ModelRegistry.clear()
    set_settings(None)
    yield
    ModelRegistry.clear()
    set_settings(None)


@pytest.fixture
def models():
    """Fresh model classes per test, so configuration edits never leak between tests."""

    class Simple:
        def __init__(self, data=None):
            self.data = data

    class Inner(HydratableModel):
        pass

    class Enhanced(HydratableModel):
        pass

    Inner.data_configuration = {
        "simple_property": Simple,
        "obj_property2": None,
    }
    Enhanced.data_configuration = {
        "simple_property": None,
        "obj_property1": Inner,
        "obj_property2": Simple,
        "array_property1": [],
        "array_property2": [Simple],
        "array_property3": [],
        "array_property4": [Simple],
        "simple_number": "Number",
        "simple_boolean": "Boolean",
        "simple_string": "String",
    }

    register(Inner)
    register(Enhanced)
    return SimpleNamespace(Simple=Simple, Inner=Inner, Enhanced=Enhanced)


@pytest.fixture
def sample_data():
    return {
        "simple_property": "simpleProperty",
        "obj_property1": {
            "simple_property": "innerSimpleProperty",
            "obj_property2": "innerObjProperty2",
        },
        "obj_property2": "objProperty2",
        "array_property1": ["arrayProperty1.1", "arrayProperty1.2"],
        "array_property2": ["arrayProperty2.1", "arrayProperty2.2"],
        "array_property3": "arrayProperty3",
        "array_property4": "arrayProperty4",
        "array_property5": [1, 2, 3, 4, 5],
        "list_property": {"c1": "item1", "c2": "item2"},
        "simple_number": 1,
        "simple_boolean": True,
        "simple_string": "abc",
    }
