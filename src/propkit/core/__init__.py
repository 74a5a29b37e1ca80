"""Property containers and their type-erasure machinery."""

from propkit.core.bridge import BRIDGE, CompatibilityBridge
from propkit.core.group import PropertyGroup
from propkit.core.properties import (
    GeometryProperties,
    IllustrationProperties,
    PerceptionProperties,
    ProximityProperties,
    make_phong_illustration_properties,
)
from propkit.core.value import AbstractValue, Value

__all__ = [
    "BRIDGE",
    "AbstractValue",
    "CompatibilityBridge",
    "GeometryProperties",
    "IllustrationProperties",
    "PerceptionProperties",
    "PropertyGroup",
    "ProximityProperties",
    "Value",
    "make_phong_illustration_properties",
]
