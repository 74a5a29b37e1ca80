"""
Unit tests for the type-erased value holders.

This suite covers:
- Type identity captured at construction
- Deep-copy cloning and its independence from the source
- Exact-type reads and type mismatch reporting
- Copy accounting when values pass through a property store
"""

import pytest

from propkit import AbstractValue, GeometryProperties, TypeMismatchError, Value


class GloballyCounted:
    """Counts deep copies made of any instance."""

    num_copies = 0

    def __deepcopy__(self, memo):
        GloballyCounted.num_copies += 1
        return GloballyCounted()

    @classmethod
    def get_and_reset(cls) -> int:
        count = cls.num_copies
        cls.num_copies = 0
        return count


@pytest.fixture(autouse=True)
def reset_counter():
    GloballyCounted.num_copies = 0
    yield


def test_type_identity():
    """The holder reports the payload's concrete class."""
    value = Value(2.5)
    assert value.type_id is float
    assert value.type_name == "float"
    assert isinstance(value, AbstractValue)


def test_abstract_value_cannot_be_instantiated():
    """AbstractValue is an interface only."""
    with pytest.raises(TypeError):
        AbstractValue()


def test_clone_is_independent():
    """Cloning deep-copies the payload."""
    value = Value({"a": [1, 2]})
    clone = value.clone()
    clone.get_value()["a"].append(3)
    assert value.get_value() == {"a": [1, 2]}
    assert clone.type_id is dict


def test_get_value_does_not_copy():
    """Reads hand back the owned payload."""
    payload = GloballyCounted()
    value = Value(payload)
    assert value.get_value() is payload
    assert value.try_get_value(GloballyCounted) is payload
    assert GloballyCounted.get_and_reset() == 0


def test_try_get_value_mismatch():
    """Reading as an unrelated type names both types."""
    value = Value("text")
    with pytest.raises(TypeMismatchError, match="Requested 'float', but found 'str'") as excinfo:
        value.try_get_value(float)
    assert excinfo.value.requested == "float"
    assert excinfo.value.found == "str"


def test_qualified_type_names():
    """Non-builtin classes are reported with their module."""
    value = Value(GloballyCounted())
    assert value.type_name.endswith("test_value.GloballyCounted")
    assert "Value[" in repr(value)


def test_copy_count_check():
    """Adding copies the payload once; reading never copies."""
    properties = GeometryProperties()
    payload = GloballyCounted()

    properties.add_property_abstract("some_group", "name_1", Value(payload))
    assert GloballyCounted.get_and_reset() == 1

    properties.add_property("some_group", "name_2", payload)
    assert GloballyCounted.get_and_reset() == 1

    stored = properties.get_property("some_group", "name_1", GloballyCounted)
    assert GloballyCounted.get_and_reset() == 0
    assert stored is not payload

    properties.copy()
    assert GloballyCounted.get_and_reset() == 2

    properties.move()
    assert GloballyCounted.get_and_reset() == 0
