"""
Structured representation of an RGBA color.

Defines the Rgba dataclass, a four-channel color with every channel in [0, 1].
It is the color half of the color <-> vector compatibility bridge: its channels
carry the same numbers, in the same order, as a 4-element numeric vector.
"""

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Rgba:
    """
    Immutable color with red, green, blue and alpha channels.

    Attributes
    ----------
    r, g, b : float
        Color channels in the closed interval [0, 1].
    a : float
        Alpha channel in [0, 1]; defaults to fully opaque.

    Notes
    -----
    - Channels are validated on construction; out-of-range or non-finite values
      raise `ValueError` rather than being clamped.
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for channel in ("r", "g", "b", "a"):
            value = getattr(self, channel)
            try:
                value = float(value)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Rgba channel '{channel}' must be numeric, got {value!r}") from e
            if not math.isfinite(value) or not 0.0 <= value <= 1.0:
                raise ValueError(f"All values must be within the range [0, 1]. Values provided: {self._channels_str()}")
            # frozen dataclass: normalize numpy scalars and ints to float
            object.__setattr__(self, channel, value)

    def _channels_str(self) -> str:
        return f"(r={self.r}, g={self.g}, b={self.b}, a={self.a})"

    @property
    def rgba(self) -> NDArray[np.float64]:
        """NDArray[np.float64]: The four channels as a vector, in (r, g, b, a) order."""
        return np.array([self.r, self.g, self.b, self.a], dtype=np.float64)

    @classmethod
    def from_vector(cls, vector: NDArray[np.float64]) -> "Rgba":
        """
        Build a color from a 4-element numeric vector.

        Parameters
        ----------
        vector : NDArray[np.float64]
            Array of shape (4,) holding (r, g, b, a).

        Returns
        -------
        Rgba
            Color with the same channel values.
        """
        arr = np.asarray(vector, dtype=np.float64)
        if arr.shape != (4,):
            raise ValueError(f"Expected a vector of shape (4,), got shape {arr.shape}")
        return cls(*arr.tolist())

    def with_alpha(self, a: float) -> "Rgba":
        """Return a copy of this color with a new alpha channel."""
        return Rgba(self.r, self.g, self.b, a)

    def scale_rgb(self, scale: float) -> "Rgba":
        """Multiply the RGB channels by `scale`; alpha is untouched."""
        if scale < 0:
            raise ValueError(f"Scale factor must be non-negative, got {scale}")
        return Rgba(self.r * scale, self.g * scale, self.b * scale, self.a)
