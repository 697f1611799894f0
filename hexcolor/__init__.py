"""hexcolor: RGB(A) hexadecimal colors with saturating arithmetic."""

from .errors import HexColorError, ParseHexColorError, HexColorDomainError
from .colors import (
    HexColor,
    parse_hex,
    format_hex,
    add,
    subtract,
    multiply,
    divide,
    alpha_op,
    saturate,
    random_color,
    random_colors,
)
from .color_arr import to_array, from_array, colors_to_array, colors_from_array

__version__ = "1.0.0"

__all__ = [
    # core color type
    "HexColor",
    # text codec
    "parse_hex",
    "format_hex",
    # arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "alpha_op",
    "saturate",
    # sampling
    "random_color",
    "random_colors",
    # arrays
    "to_array",
    "from_array",
    "colors_to_array",
    "colors_from_array",
    # errors
    "HexColorError",
    "ParseHexColorError",
    "HexColorDomainError",
    # version
    "__version__",
]
