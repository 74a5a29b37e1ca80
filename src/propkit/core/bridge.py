"""
Conversions between structurally equivalent value types.

A stored value is normally read back only as its exact type. The bridge declares a
small, closed set of type pairs that carry the same numbers in the same order and
may be read as one another. Currently the only pair is `Rgba` <-> 4-element
`numpy.ndarray`.
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

import numpy as np

from propkit.config import RGBA_VECTOR_SIZE
from propkit.schema.rgba import Rgba
from propkit.utils.format import type_name
from propkit.utils.logging import get_logger


def _rgba_to_vector(color: Rgba) -> np.ndarray:
    return color.rgba


def _vector_to_rgba(vector: np.ndarray) -> Rgba:
    if vector.shape != (RGBA_VECTOR_SIZE,):
        raise ValueError(f"Only vectors of shape ({RGBA_VECTOR_SIZE},) convert to Rgba, got shape {vector.shape}")
    return Rgba.from_vector(vector)


class CompatibilityBridge:
    """
    Closed table of lossless conversions between declared type pairs.

    Parameters
    ----------
    verbose : bool, optional
        If True, conversions are logged at DEBUG level.
    """

    # (stored type, requested type) -> conversion
    CONVERSIONS: MappingProxyType = MappingProxyType(
        {
            (Rgba, np.ndarray): _rgba_to_vector,
            (np.ndarray, Rgba): _vector_to_rgba,
        }
    )

    def __init__(self, verbose: bool = False) -> None:
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)

    def is_compatible(self, stored: type, requested: type) -> bool:
        """Return True if values of type `stored` may be read as `requested`."""
        return (stored, requested) in self.CONVERSIONS

    def pairs(self) -> list[tuple[type, type]]:
        """Get all declared (stored, requested) pairs."""
        return list(self.CONVERSIONS.keys())

    def convert(self, value: Any, requested: type) -> Any:
        """
        Convert `value` to the `requested` type.

        Parameters
        ----------
        value : Any
            Stored payload.
        requested : type
            Type the caller wants.

        Returns
        -------
        Any
            A new object of type `requested` holding the same numeric content.

        Raises
        ------
        KeyError
            If the pair is not declared.
        ValueError
            If the pair is declared but this particular value has no equivalent
            (e.g. an ndarray of the wrong shape).
        """
        stored = type(value)
        converter: Callable[[Any], Any] | None = self.CONVERSIONS.get((stored, requested))
        if converter is None:
            raise KeyError(f"No conversion declared from '{type_name(stored)}' to '{type_name(requested)}'")
        self.logger.debug(f"Converting '{type_name(stored)}' => '{type_name(requested)}'")
        return converter(value)


# shared instance used by every value holder
BRIDGE = CompatibilityBridge()
