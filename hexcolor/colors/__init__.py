"""
hexcolor Color Classes
======================

The immutable ``HexColor`` value plus the modules that give it behaviour.
Importing this package installs ``HexColor.parse``, ``str(HexColor)`` and the
arithmetic operators.

Usage
-----
>>> from hexcolor.colors import HexColor
>>>
>>> red = HexColor.parse("#F00")
>>> blue = HexColor.parse("#00f")
>>> purple = red + blue          # saturating, per channel
>>> str(purple / 2)
'#7F007F'
>>> str(HexColor.rgba(0, 2, 7, 6) + 3)
'#03050A09'

Notes
-----
- ``a is None`` means "no alpha information", not "opaque".
- Results are clamped to [0, 255]; only division by zero raises.
"""

from .hex_color import HexColor
from .codec import parse_hex, format_hex
from .arithmetic import add, subtract, multiply, divide, alpha_op, saturate
from .sampling import random_color, random_colors


__all__ = [
    'HexColor',
    'parse_hex',
    'format_hex',
    'add',
    'subtract',
    'multiply',
    'divide',
    'alpha_op',
    'saturate',
    'random_color',
    'random_colors',
]
