"""
Contains generic input validation utilities used across propkit modules.

These functions are stateless and reusable, designed to enforce type constraints on
names and requested types without introducing container-specific logic.
"""


def validate_name(name: str, kind: str = "property") -> str:
    # group and property names are plain strings; empty names are allowed
    if not isinstance(name, str):
        raise TypeError(f"Expected a string {kind} name, got {type(name).__name__}: {name!r}")
    return name


def validate_type(requested: type) -> type:
    """Ensure a requested value type is an actual class."""
    if not isinstance(requested, type):
        raise TypeError(f"Requested value type must be a class, got {type(requested).__name__}: {requested!r}")
    return requested
