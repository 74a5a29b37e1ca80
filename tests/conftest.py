"""Shared fixtures for property store tests."""

import pytest

from propkit import GeometryProperties

DEFAULT_GROUP = GeometryProperties.default_group_name()


def _make_properties(cls=GeometryProperties):
    """Build a store with int-valued properties spread over three groups."""
    props = cls()
    props.add_property(DEFAULT_GROUP, "prop1", 1)
    props.add_property(DEFAULT_GROUP, "prop2", 2)

    # duplicate property name differentiated by group
    props.add_property("group1", "prop1", 3)
    props.add_property("group1", "prop3", 4)
    props.add_property("group1", "prop4", 5)

    props.add_property("group2", "prop5", 6)
    return props


def _properties_equal(reference, test) -> bool:
    """Compare two int-valued stores group by group and property by property."""
    if reference.num_groups() != test.num_groups():
        return False
    for group_name in reference.get_group_names():
        if not test.has_group(group_name):
            return False
        for name, value in reference.get_properties_in_group(group_name).items():
            if not test.has_property(group_name, name):
                return False
            if test.get_property(group_name, name, int) != value.try_get_value(int):
                return False
    return True


@pytest.fixture
def properties():
    """Empty store."""
    return GeometryProperties()


@pytest.fixture
def populated():
    """Store populated by `make_properties`."""
    return _make_properties()


@pytest.fixture
def make_properties():
    """Factory building a fresh populated store of the given class."""
    return _make_properties


@pytest.fixture
def properties_equal():
    """Comparison helper for int-valued stores."""
    return _properties_equal
