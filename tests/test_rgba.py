"""Unit tests for the Rgba color type."""

import math

import numpy as np
import pytest

from propkit import Rgba


def test_defaults_and_channels():
    """Alpha defaults to opaque and channels are stored as floats."""
    color = Rgba(1, 0, 0)
    assert color.a == 1.0
    assert isinstance(color.r, float)
    np.testing.assert_array_equal(color.rgba, [1.0, 0.0, 0.0, 1.0])


@pytest.mark.parametrize("channels", [(1.5, 0, 0), (0, -0.1, 0), (0, 0, 0, 2), (0, 0, math.nan)])
def test_out_of_range(channels):
    with pytest.raises(ValueError, match=r"within the range \[0, 1\]"):
        Rgba(*channels)


def test_non_numeric_channel():
    with pytest.raises(ValueError, match="must be numeric"):
        Rgba("red", 0, 0)


def test_equality_and_immutability():
    """Colors compare by value and cannot be modified in place."""
    assert Rgba(0.5, 0.5, 0.5) == Rgba(0.5, 0.5, 0.5, 1.0)
    assert Rgba(0.5, 0.5, 0.5) != Rgba(0.5, 0.5, 0.5, 0.5)
    with pytest.raises(AttributeError):
        Rgba(0.5, 0.5, 0.5).r = 0.1


def test_from_vector():
    color = Rgba.from_vector(np.array([0.1, 0.2, 0.3, 0.4]))
    assert color == Rgba(0.1, 0.2, 0.3, 0.4)
    with pytest.raises(ValueError, match="shape"):
        Rgba.from_vector(np.zeros(3))


def test_with_alpha_and_scale_rgb():
    color = Rgba(0.4, 0.2, 0.1, 0.5)
    assert color.with_alpha(1.0) == Rgba(0.4, 0.2, 0.1, 1.0)
    assert color.scale_rgb(2.0) == Rgba(0.8, 0.4, 0.2, 0.5)
    with pytest.raises(ValueError):
        color.scale_rgb(3.0)
    with pytest.raises(ValueError, match="non-negative"):
        color.scale_rgb(-1.0)
