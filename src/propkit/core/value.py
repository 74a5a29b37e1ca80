"""
Type-erased, cloneable holders for a single property payload.

`AbstractValue` is the interface property groups store; `Value` is the generic
implementation that wraps any payload and remembers its concrete class.
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

import numpy as np

from propkit.core.bridge import BRIDGE, CompatibilityBridge
from propkit.exceptions import TypeMismatchError
from propkit.utils.format import short_repr, type_name
from propkit.utils.validation import validate_type

T = TypeVar("T")


def _freeze(payload: T) -> T:
    # owned arrays are read-only so exact-type reads cannot modify the store
    if isinstance(payload, np.ndarray):
        payload.flags.writeable = False
    return payload


class AbstractValue(ABC):
    """Interface for a payload whose static type is hidden from its container."""

    @property
    @abstractmethod
    def type_id(self) -> type:
        """type: Concrete class of the held payload."""

    @property
    def type_name(self) -> str:
        """str: Readable name of the held payload's class."""
        return type_name(self.type_id)

    @abstractmethod
    def clone(self) -> "AbstractValue":
        """Return an independent holder with a deep copy of the payload."""

    @abstractmethod
    def get_value(self) -> Any:
        """Return the held payload without copying it."""

    def try_get_value(self, requested: type[T], bridge: CompatibilityBridge = BRIDGE) -> T:
        """
        Return the payload viewed as `requested`.

        Parameters
        ----------
        requested : type
            Exact class the caller expects.
        bridge : CompatibilityBridge, optional
            Conversion table consulted when the classes differ.

        Returns
        -------
        T
            The payload itself on an exact match, or a converted copy when the
            pair is declared compatible.

        Raises
        ------
        TypeMismatchError
            If the stored class is neither `requested` nor bridge-compatible with it.
        """
        validate_type(requested)
        stored = self.type_id
        if stored is requested:
            return self.get_value()

        found = type_name(stored)
        wanted = type_name(requested)
        if bridge.is_compatible(stored, requested):
            try:
                return bridge.convert(self.get_value(), requested)
            except ValueError as e:
                raise TypeMismatchError(f"Requested '{wanted}', but found '{found}': {e}", wanted, found) from e
        raise TypeMismatchError(f"Requested '{wanted}', but found '{found}'", wanted, found)


class Value(AbstractValue, Generic[T]):
    """
    Holder for one payload of any type.

    Parameters
    ----------
    payload : T
        Object to hold. The holder takes it as-is; callers that need isolation
        should pass a copy (see `Value.copy_of`).
    """

    __slots__ = ("_payload", "_type")

    def __init__(self, payload: T) -> None:
        self._payload = payload
        self._type = type(payload)

    @classmethod
    def copy_of(cls, payload: T) -> "Value[T]":
        """Create a holder owning a deep copy of `payload`; numpy arrays are made read-only."""
        return cls(_freeze(copy.deepcopy(payload)))

    @property
    def type_id(self) -> type:
        return self._type

    def clone(self) -> "Value[T]":
        return Value(_freeze(copy.deepcopy(self._payload)))

    def get_value(self) -> T:
        return self._payload

    def __copy__(self) -> "Value[T]":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "Value[T]":
        return self.clone()

    def __repr__(self) -> str:
        return f"Value[{self.type_name}]({short_repr(self._payload)})"
