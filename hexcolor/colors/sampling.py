from __future__ import annotations
from numbers import Integral
from typing import List, Optional

import numpy as np

from ..types.color_types import CHANNEL_MAX
from .hex_color import HexColor


def _channel_count(alpha: bool) -> int:
    return 4 if alpha else 3


def random_color(rng: Optional[np.random.Generator] = None, *, alpha: bool = False) -> HexColor:
    """
    Draw a uniformly random color.

    Args:
        rng: Source of random bytes. A fresh ``np.random.default_rng()`` is
             used when omitted.
        alpha: Also draw an alpha byte. Without it the color has no alpha.

    Returns:
        A color whose channels are independent uniform bytes.
    """
    rng = rng if rng is not None else np.random.default_rng()
    channels = rng.integers(0, CHANNEL_MAX + 1, size=_channel_count(alpha), dtype=np.uint8)
    return HexColor(*(int(c) for c in channels))


def random_colors(n: int, rng: Optional[np.random.Generator] = None, *, alpha: bool = False) -> List[HexColor]:
    """Draw ``n`` independent random colors; see :func:`random_color`."""
    if isinstance(n, bool) or not isinstance(n, Integral) or n < 0:
        raise ValueError(f"n must be a non-negative integer, got {n!r}")
    rng = rng if rng is not None else np.random.default_rng()
    rows = rng.integers(0, CHANNEL_MAX + 1, size=(int(n), _channel_count(alpha)), dtype=np.uint8)
    return [HexColor(*(int(c) for c in row)) for row in rows]
