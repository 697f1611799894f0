# No dependencies
from __future__ import annotations
from numbers import Real
from typing import Optional, Tuple, Union

Alpha = Optional[int]
ChannelTuple = Tuple[int, int, int, Optional[int]]
ColorValue = Union[Tuple[int, int, int], Tuple[int, int, int, int]]
Scalar = Union[int, float, Real]

CHANNEL_MIN = 0
CHANNEL_MAX = 255

HEX_MARKER = "#"
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# body lengths (marker excluded) accepted by the parser
SHORTHAND_LENGTHS = (3, 4)
FULL_LENGTHS = (6, 8)
ALPHA_LENGTHS = (4, 8)
