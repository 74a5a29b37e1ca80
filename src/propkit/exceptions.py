"""
Error taxonomy for property containers.

Each error also derives from the builtin exception a caller would naturally catch
(`KeyError` for missing entries, `ValueError` for duplicates, `TypeError` for type
mismatches), so existing handlers keep working.
"""


class PropertyError(Exception):
    """Base class for all property container failures."""

    # KeyError quotes its message in str(); keep messages readable for every subclass
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class GroupNotFoundError(PropertyError, KeyError):
    """Raised when reading from a group that was never created."""

    def __init__(self, message: str, group: str) -> None:
        super().__init__(message)
        self.group = group


class PropertyNotFoundError(PropertyError, KeyError):
    """Raised when a group exists but does not contain the named property."""

    def __init__(self, message: str, group: str, name: str) -> None:
        super().__init__(message)
        self.group = group
        self.name = name


class DuplicatePropertyError(PropertyError, ValueError):
    """Raised when adding a property whose name already exists in the group."""

    def __init__(self, message: str, group: str, name: str) -> None:
        super().__init__(message)
        self.group = group
        self.name = name


class TypeMismatchError(PropertyError, TypeError):
    """
    Raised when a stored value cannot be read as the requested type.

    Attributes
    ----------
    requested : str
        Name of the type the caller asked for.
    found : str
        Name of the type actually stored.
    """

    def __init__(self, message: str, requested: str, found: str) -> None:
        super().__init__(message)
        self.requested = requested
        self.found = found
