"""propkit package."""

from propkit._version import __version__
from propkit.core import (
    AbstractValue,
    GeometryProperties,
    IllustrationProperties,
    PerceptionProperties,
    PropertyGroup,
    ProximityProperties,
    Value,
    make_phong_illustration_properties,
)
from propkit.exceptions import (
    DuplicatePropertyError,
    GroupNotFoundError,
    PropertyError,
    PropertyNotFoundError,
    TypeMismatchError,
)
from propkit.schema import Rgba

__all__ = [
    "AbstractValue",
    "DuplicatePropertyError",
    "GeometryProperties",
    "GroupNotFoundError",
    "IllustrationProperties",
    "PerceptionProperties",
    "PropertyError",
    "PropertyGroup",
    "PropertyNotFoundError",
    "ProximityProperties",
    "Rgba",
    "TypeMismatchError",
    "Value",
    "__version__",
    "make_phong_illustration_properties",
]
