"""
Color Array Bridge
==================

Conversions between HexColor values and ``numpy.uint8`` arrays.

A single color maps to a 1D array of 3 or 4 channels, a sequence of colors to
a 2D ``(N, channels)`` array. The channel count carries the alpha presence,
so every color in a sequence must agree on it.

Features
--------
- ``np.asarray(color)`` works directly on a HexColor
- Integer arrays of any width are accepted as long as values fit in a byte
- Float arrays are truncated toward zero (a RuntimeWarning reports
  fractional values)

Functions
---------
to_array:          HexColor -> (3,) or (4,) uint8 array
from_array:        (3,) or (4,) array -> HexColor
colors_to_array:   sequence of HexColor -> (N, 3) or (N, 4) uint8 array
colors_from_array: (N, 3) or (N, 4) array -> list of HexColor
"""

import warnings
from typing import List, Optional, Sequence

import numpy as np
from numpy import ndarray as NDArray

from .colors.hex_color import HexColor
from .types.color_types import CHANNEL_MAX, CHANNEL_MIN

_VALID_CHANNEL_COUNTS = (3, 4)


def _as_channel_array(arr, ndim: int) -> NDArray:
    """Validate an array of channels and return it as uint8."""
    arr = np.asarray(arr)

    if arr.ndim != ndim:
        raise ValueError(f"Expected a {ndim}D channel array, got shape {arr.shape}")
    if arr.shape[-1] not in _VALID_CHANNEL_COUNTS:
        raise ValueError(
            f"Expected last dimension to be 3 or 4, got shape {arr.shape}"
        )

    if arr.dtype.kind in ('u', 'i'):
        pass
    elif arr.dtype.kind == 'f':
        if np.isnan(arr).any():
            raise ValueError("Channel array contains NaN")
        truncated = np.trunc(arr)
        if np.any(truncated != arr):
            warnings.warn(
                "Channel array has fractional values; truncating toward zero",
                RuntimeWarning,
                stacklevel=3,
            )
        arr = truncated
    else:
        raise TypeError(f"Channel array must have an integer or float dtype, got {arr.dtype}")

    if arr.size and (arr.min() < CHANNEL_MIN or arr.max() > CHANNEL_MAX):
        raise ValueError(
            f"Channel values must be in [{CHANNEL_MIN}, {CHANNEL_MAX}], "
            f"got range [{arr.min()}, {arr.max()}]"
        )
    return arr.astype(np.uint8)


def to_array(color: HexColor) -> NDArray:
    return np.array(color.value, dtype=np.uint8)


def from_array(arr) -> HexColor:
    """Build a color from a ``(3,)`` or ``(4,)`` array; 4 channels means alpha is present."""
    channels = _as_channel_array(arr, ndim=1)
    return HexColor(*(int(c) for c in channels))


def colors_to_array(colors: Sequence[HexColor]) -> NDArray:
    """
    Stack colors into an ``(N, channels)`` uint8 array.

    An empty sequence gives an ``(0, 3)`` array.

    Raises:
        ValueError: if some colors have alpha and others do not.
    """
    if not colors:
        return np.empty((0, 3), dtype=np.uint8)

    with_alpha = {color.has_alpha for color in colors}
    if len(with_alpha) > 1:
        raise ValueError("Cannot stack colors with and without alpha into one array")

    return np.array([color.value for color in colors], dtype=np.uint8)


def colors_from_array(arr) -> List[HexColor]:
    channels = _as_channel_array(arr, ndim=2)
    return [HexColor(*(int(c) for c in row)) for row in channels]


def _color_array(self: HexColor, dtype: Optional[np.dtype] = None, copy: Optional[bool] = None) -> NDArray:
    """Enable numpy array interface."""
    arr = to_array(self)
    if dtype is not None:
        arr = arr.astype(dtype)
    return arr


HexColor.__array__ = _color_array  # type: ignore[attr-defined]
