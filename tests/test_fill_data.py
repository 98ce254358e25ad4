from unittest.mock import MagicMock

import pytest

from hydramodel import HydratableModel, ModelNotRegisteredError, register


def test_instantiating_without_data_creates_every_configured_property(models):
    obj = models.Enhanced()

    assert "simple_property" in vars(obj)
    assert obj.simple_property is None
    assert isinstance(obj.obj_property1, models.Inner)
    assert obj.obj_property1.simple_property.data is None
    assert isinstance(obj.obj_property2, models.Simple)
    assert obj.array_property1 == []
    assert obj.array_property2 == []
    assert obj.simple_number is None


def test_keeps_simple_properties_as_is(models, sample_data):
    obj = models.Enhanced(sample_data)

    assert obj.simple_property == "simpleProperty"
    assert obj.simple_number == 1
    assert obj.simple_boolean is True
    assert obj.simple_string == "abc"
    assert obj.list_property == {"c1": "item1", "c2": "item2"}


def test_recursively_hydrates_nested_models(models, sample_data):
    obj = models.Enhanced(sample_data)

    assert isinstance(obj.obj_property1, models.Inner)
    assert isinstance(obj.obj_property1.simple_property, models.Simple)
    assert obj.obj_property1.simple_property.data == "innerSimpleProperty"
    assert obj.obj_property1.obj_property2 == "innerObjProperty2"


def test_single_type_property_is_built_from_raw_value(models):
    obj = models.Enhanced({"obj_property2": "x"})

    assert isinstance(obj.obj_property2, models.Simple)
    assert obj.obj_property2.data == "x"


def test_arrays_without_item_type_keep_their_elements(models, sample_data):
    obj = models.Enhanced(sample_data)

    assert obj.array_property1 == ["arrayProperty1.1", "arrayProperty1.2"]


def test_typed_arrays_build_one_object_per_element(models):
    obj = models.Enhanced({"array_property2": ["a", "b"]})

    assert len(obj.array_property2) == 2
    assert all(isinstance(item, models.Simple) for item in obj.array_property2)
    assert [item.data for item in obj.array_property2] == ["a", "b"]


def test_scalar_data_for_array_property_becomes_single_element_list(models):
    obj = models.Enhanced({"array_property3": "plain", "array_property4": "x"})

    assert obj.array_property3 == ["plain"]
    assert len(obj.array_property4) == 1
    assert isinstance(obj.array_property4[0], models.Simple)
    assert obj.array_property4[0].data == "x"


def test_overwrites_simple_properties(models, sample_data):
    obj = models.Enhanced(sample_data)
    obj.fill_data({"simple_property": "new simple property"})

    assert obj.simple_property == "new simple property"


def test_empties_configured_properties_that_get_no_new_data(models, sample_data):
    obj = models.Enhanced(sample_data)
    obj.fill_data({})

    assert obj.simple_property is None
    assert obj.obj_property2.data is None
    assert obj.array_property2 == []


def test_keeps_identity_of_nested_models(models, sample_data):
    obj = models.Enhanced(sample_data)
    old = obj.obj_property1

    obj.fill_data({"obj_property1": {"simple_property": "new inner simple property"}})

    assert obj.obj_property1 is old
    assert obj.obj_property1.simple_property.data == "new inner simple property"
    assert obj.obj_property1.obj_property2 is None


def test_replaces_objects_that_cannot_hydrate_in_place(models, sample_data):
    obj = models.Enhanced(sample_data)
    old = obj.obj_property2

    obj.fill_data({"obj_property2": "new objProperty2"})

    assert obj.obj_property2 is not old
    assert isinstance(obj.obj_property2, models.Simple)
    assert obj.obj_property2.data == "new objProperty2"


def test_keeps_identity_of_arrays(models, sample_data):
    obj = models.Enhanced(sample_data)
    old = [obj.array_property1, obj.array_property2, obj.array_property3, obj.array_property4]

    obj.fill_data(
        {
            "array_property1": ["a"],
            "array_property2": ["b"],
            "array_property3": "c",
            "array_property4": "d",
        }
    )

    assert obj.array_property1 is old[0]
    assert obj.array_property2 is old[1]
    assert obj.array_property3 is old[2]
    assert obj.array_property4 is old[3]
    assert obj.array_property1 == ["a"]
    assert obj.array_property2[0].data == "b"
    assert obj.array_property3 == ["c"]
    assert obj.array_property4[0].data == "d"


def test_fill_data_returns_the_instance(models):
    obj = models.Enhanced()

    assert obj.fill_data({"simple_property": 1}) is obj


def test_dynamic_properties_are_created_from_data(models):
    obj = models.Enhanced({"unconfigured": [1, 2]})

    assert obj.unconfigured == [1, 2]


@pytest.mark.parametrize("flag_key", ["_dynamic_properties", "_dynamicProperties"])
def test_static_mode_only_fills_configured_properties(flag_key):
    class TestModel(HydratableModel):
        data_configuration = {flag_key: False, "id": "String"}

    register(TestModel)

    obj = TestModel({"id": "123", "not_existing_property": "value"})
    assert obj.id == "123"
    assert not hasattr(obj, "not_existing_property")
    assert not hasattr(obj, flag_key)

    obj.fill_data({"id": "345", "another_not_existing_property": "value"})
    assert obj.id == "345"
    assert not hasattr(obj, "another_not_existing_property")


def test_configuration_replaced_after_registration_is_used():
    class Item(HydratableModel):
        pass

    class ItemsList(HydratableModel):
        pass

    register(ItemsList)
    register(Item)
    ItemsList.data_configuration = {"items": [Item]}
    Item.data_configuration = {"name": "String"}

    obj = ItemsList({"items": [{"name": "a"}, {"name": "b"}]})

    assert [item.name for item in obj.items] == ["a", "b"]


def test_configuration_edited_in_place_is_picked_up():
    class Thing(HydratableModel):
        data_configuration = {}

    register(Thing)
    Thing({})
    Thing.data_configuration["tags"] = []

    assert Thing({"tags": "one"}).tags == ["one"]


def test_non_mixin_classes_hydrate_through_module_functions():
    from hydramodel import fill_data

    class Plain:
        data_configuration = {"values": [], "name": None}

    register(Plain)
    obj = fill_data(Plain(), {"name": "p", "values": "v"})

    assert obj.name == "p"
    assert obj.values == ["v"]


def test_nested_plain_registered_instances_keep_identity():
    from hydramodel import fill_data

    class Child:
        data_configuration = {"label": None}

        def __init__(self, data=None):
            fill_data(self, data)

    class Parent(HydratableModel):
        data_configuration = {"child": Child}

    register(Child)
    register(Parent)

    parent = Parent({"child": {"label": "first"}})
    child = parent.child
    parent.fill_data({"child": {"label": "second"}})

    assert parent.child is child
    assert child.label == "second"


def test_unregistered_type_raises():
    class Orphan(HydratableModel):
        data_configuration = {}

    with pytest.raises(ModelNotRegisteredError, match="Orphan"):
        Orphan()


def test_subclass_of_registered_model_uses_parent_configuration(models):
    class Special(models.Enhanced):
        pass

    obj = Special({"obj_property2": "x"})

    assert isinstance(obj.obj_property2, models.Simple)
    assert obj.array_property1 == []


def test_hook_exception_aborts_remaining_steps(models):
    callback = MagicMock()
    obj = models.Enhanced()
    obj.after_fill(callback)
    stamp = obj._last_data_update

    def explode(instance):
        raise RuntimeError("boom")

    models.Enhanced.on_after_fill = [explode]

    with pytest.raises(RuntimeError, match="boom"):
        obj.fill_data({"simple_property": "x"})

    callback.assert_not_called()
    assert obj._last_data_update == stamp
