"""A flat namespace of uniquely named, type-erased property values."""

from collections.abc import Iterator

from natsort import natsorted

from propkit.core.value import AbstractValue
from propkit.exceptions import DuplicatePropertyError, PropertyNotFoundError
from propkit.utils.validation import validate_name


class PropertyGroup:
    """
    Mapping from property name to `AbstractValue`.

    The group owns its values exclusively; copying a group clones every value.
    Entries can be added but never removed or replaced.

    Parameters
    ----------
    name : str
        Name of the group, used in error messages.
    """

    def __init__(self, name: str) -> None:
        self.name = validate_name(name, kind="group")
        self._values: dict[str, AbstractValue] = {}

    def insert(self, name: str, value: AbstractValue) -> None:
        """Store `value` under `name`; raises DuplicatePropertyError if the name is taken."""
        validate_name(name)
        if name in self._values:
            raise DuplicatePropertyError(
                f"Trying to add property '{name}' to group '{self.name}'; "
                "a property with that name already exists",
                self.name,
                name,
            )
        self._values[name] = value

    def get(self, name: str) -> AbstractValue:
        """Get the stored value holder by name."""
        try:
            return self._values[name]
        except KeyError as e:
            raise PropertyNotFoundError(
                f"There is no property '{name}' in group '{self.name}'.", self.name, name
            ) from e

    def names(self) -> list[str]:
        """Get property names in natural sort order."""
        return natsorted(self._values)

    def items(self) -> Iterator[tuple[str, AbstractValue]]:
        """Yield (name, value) pairs; order carries no meaning."""
        return iter(self._values.items())

    def clone(self) -> "PropertyGroup":
        """Return an independent group with every value cloned."""
        group = PropertyGroup(self.name)
        group._values = {name: value.clone() for name, value in self._values.items()}
        return group

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __getitem__(self, name: str) -> AbstractValue:
        return self.get(name)

    def __iter__(self) -> Iterator[str]:
        """Allows you to loop over property names directly.

        Examples
        --------
        >>> group = properties.get_properties_in_group("phong")
        >>> for name in group:
        ...     print(name, group[name].type_name)
        """
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PropertyGroup(name={self.name!r}, properties={self.names()!r})"
