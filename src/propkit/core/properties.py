"""
Namespaced, type-safe property store attached to a geometry.

`GeometryProperties` organizes arbitrarily typed values into named groups. Groups
are created implicitly on first write, a reserved default group always exists, and
values are read back by exact type, with the color <-> vector bridge as the only
sanctioned conversion. The role-specific subclasses share all of this behavior and
only differ in name.
"""

from operator import itemgetter
from typing import Any, TypeVar

from natsort import natsorted
from tree_format import format_tree

from propkit.config import DEFAULT_GROUP_NAME
from propkit.core.bridge import CompatibilityBridge
from propkit.core.group import PropertyGroup
from propkit.core.value import AbstractValue, Value
from propkit.exceptions import (
    DuplicatePropertyError,
    GroupNotFoundError,
    PropertyNotFoundError,
    TypeMismatchError,
)
from propkit.schema.rgba import Rgba
from propkit.utils.format import short_repr
from propkit.utils.logging import get_logger
from propkit.utils.validation import validate_name, validate_type

T = TypeVar("T")
P = TypeVar("P", bound="GeometryProperties")


class GeometryProperties:
    """
    Container of named property groups.

    Parameters
    ----------
    verbose : bool, optional
        If True, enables detailed logging output.

    Notes
    -----
    - A freshly constructed store holds only the default group, with no properties.
    - Copying (`copy()`, `copy.copy`, `copy.deepcopy`) clones every stored value.
    - `move()` hands all groups to a new store and resets this one.
    - There is no internal locking; mutate from a single owner only.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)
        self._bridge = CompatibilityBridge(verbose=verbose)
        self._groups: dict[str, PropertyGroup] = {}
        self._reset()

    def _reset(self) -> None:
        self._groups = {DEFAULT_GROUP_NAME: PropertyGroup(DEFAULT_GROUP_NAME)}

    @classmethod
    def default_group_name(cls) -> str:
        """Name of the group that exists from construction."""
        return DEFAULT_GROUP_NAME

    def num_groups(self) -> int:
        """Number of groups, always at least 1."""
        return len(self._groups)

    def has_group(self, group_name: str) -> bool:
        return group_name in self._groups

    def has_property(self, group_name: str, name: str) -> bool:
        group = self._groups.get(group_name)
        return group is not None and name in group

    def get_group_names(self) -> list[str]:
        """Get all group names in natural sort order."""
        return natsorted(self._groups)

    def get_properties_in_group(self, group_name: str) -> PropertyGroup:
        """
        Retrieve the full contents of one group.

        Parameters
        ----------
        group_name : str
            Group to retrieve.

        Returns
        -------
        PropertyGroup
            The group itself (not a copy); iterate it with `items()`.
        """
        try:
            return self._groups[group_name]
        except KeyError as e:
            self.logger.error(f"Group '{group_name}' not found")
            raise GroupNotFoundError(
                f"Can't retrieve properties for a group that doesn't exist: '{group_name}'", group_name
            ) from e

    def add_property(self, group_name: str, name: str, value: Any) -> None:
        """
        Add a property, creating the group if necessary.

        The store keeps a deep copy of `value`; later changes to the caller's object
        are not seen by the store.

        Raises
        ------
        DuplicatePropertyError
            If `name` already exists in `group_name`. Nothing is modified.
        """
        self._insert(group_name, name, Value.copy_of(value))

    def add_property_abstract(self, group_name: str, name: str, value: AbstractValue) -> None:
        """Add an already type-erased value; the store keeps a clone of it."""
        if not isinstance(value, AbstractValue):
            raise TypeError(f"Expected an AbstractValue, got {type(value).__name__}: {value!r}")
        self._insert(group_name, name, value.clone())

    def _insert(self, group_name: str, name: str, value: AbstractValue) -> None:
        validate_name(group_name, kind="group")
        validate_name(name)
        group = self._groups.get(group_name)
        if group is None:
            # build the group aside so a failed insert leaves no trace
            group = PropertyGroup(group_name)
            group.insert(name, value)
            self._groups[group_name] = group
            self.logger.debug(f"Created group '{group_name}'")
        else:
            try:
                group.insert(name, value)
            except DuplicatePropertyError as e:
                self.logger.error(str(e))
                raise
        self.logger.debug(f"Added property '{group_name}':'{name}' of type '{value.type_name}'")

    def _get_value(self, group_name: str, name: str) -> AbstractValue:
        group = self._groups.get(group_name)
        if group is None:
            self.logger.error(f"Group '{group_name}' not found while reading '{name}'")
            raise GroupNotFoundError(
                f"Trying to read property '{name}' from group '{group_name}'. But the group does not exist.",
                group_name,
            )
        try:
            return group.get(name)
        except PropertyNotFoundError:
            self.logger.error(f"Property '{group_name}':'{name}' not found")
            raise

    def _extract(self, group_name: str, name: str, value: AbstractValue, requested: type[T]) -> T:
        try:
            return value.try_get_value(requested, bridge=self._bridge)
        except TypeMismatchError as e:
            message = (
                f"The property '{name}' in group '{group_name}' exists, but is of a different type. "
                f"Requested '{e.requested}', but found '{e.found}'"
            )
            self.logger.error(message)
            raise TypeMismatchError(message, e.requested, e.found) from e

    def get_property(self, group_name: str, name: str, requested: type[T] | None = None) -> T:
        """
        Read a property as `requested`.

        Parameters
        ----------
        group_name : str
            Group holding the property.
        name : str
            Property name.
        requested : type, optional
            Exact class expected. If omitted, the stored payload is returned as-is.

        Returns
        -------
        T
            The stored payload (not a copy) or, for a bridged pair, a converted value.

        Raises
        ------
        GroupNotFoundError
            If the group does not exist.
        PropertyNotFoundError
            If the group exists but has no such property.
        TypeMismatchError
            If the stored type is neither `requested` nor bridge-compatible with it.
        """
        value = self._get_value(group_name, name)
        if requested is None:
            return value.get_value()
        return self._extract(group_name, name, value, requested)

    def get_property_or_default(
        self, group_name: str, name: str, default: T, requested: type[T] | None = None
    ) -> T:
        """
        Read a property, falling back to `default` when it is absent.

        A missing group and a missing property are both treated as absent. A property
        that exists with an incompatible type still raises `TypeMismatchError`.

        Parameters
        ----------
        requested : type, optional
            Exact class expected; defaults to ``type(default)``.
        """
        requested = validate_type(requested) if requested is not None else type(default)
        if not self.has_property(group_name, name):
            return default
        value = self._groups[group_name].get(name)
        return self._extract(group_name, name, value, requested)

    def copy(self: P) -> P:
        """Return a deep clone: every value is cloned independently."""
        other = self.__class__.__new__(self.__class__)
        other.verbose = self.verbose
        other.logger = self.logger
        other._bridge = self._bridge
        other._groups = {group_name: group.clone() for group_name, group in self._groups.items()}
        return other

    def move(self: P) -> P:
        """
        Transfer every group to a new store of the same class.

        This store is reset to its freshly constructed state (default group only).
        """
        other = self.__class__.__new__(self.__class__)
        other.verbose = self.verbose
        other.logger = self.logger
        other._bridge = self._bridge
        other._groups = self._groups
        self._reset()
        return other

    def __copy__(self: P) -> P:
        return self.copy()

    def __deepcopy__(self: P, memo: dict) -> P:
        return self.copy()

    def _tree(self) -> tuple[str, list]:
        children = []
        for group_name in self.get_group_names():
            group = self._groups[group_name]
            leaves = [
                (f"{name}: {group[name].type_name} = {short_repr(group[name].get_value())}", [])
                for name in group.names()
            ]
            children.append((group_name, leaves))
        return (self.__class__.__name__, children)

    def __str__(self) -> str:
        return format_tree(self._tree(), format_node=itemgetter(0), get_children=itemgetter(1))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(groups={self.get_group_names()!r})"


class IllustrationProperties(GeometryProperties):
    """Properties consumed by visualization of a geometry."""


class PerceptionProperties(GeometryProperties):
    """Properties consumed by rendering for simulated sensors."""


class ProximityProperties(GeometryProperties):
    """Properties consumed by contact and distance queries."""


def make_phong_illustration_properties(diffuse: Rgba, verbose: bool = False) -> IllustrationProperties:
    """
    Build illustration properties with a Phong diffuse color.

    Parameters
    ----------
    diffuse : Rgba
        Color stored as ``("phong", "diffuse")``.

    Returns
    -------
    IllustrationProperties
        Store holding the single diffuse property.
    """
    if not isinstance(diffuse, Rgba):
        raise TypeError(f"Expected an Rgba diffuse color, got {type(diffuse).__name__}")
    properties = IllustrationProperties(verbose=verbose)
    properties.add_property("phong", "diffuse", diffuse)
    return properties
