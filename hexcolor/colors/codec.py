"""
Hexadecimal text codec for HexColor.

Parsing is lenient: surrounding whitespace is trimmed, the leading ``#`` is
optional, digits are case-insensitive and the 3, 4, 6 and 8 digit notations
are all accepted. Formatting is canonical: ``#`` followed by six or eight
uppercase digits.

>>> parse_hex(" #f0f ")
HexColor(r=255, g=0, b=255, a=None)
>>> format_hex(parse_hex("000f"))
'#000000FF'
"""
from __future__ import annotations
from typing import Callable, Dict, List, Tuple

from ..errors import ParseHexColorError
from ..types.color_types import ALPHA_LENGTHS, FULL_LENGTHS, HEX_DIGITS, HEX_MARKER, SHORTHAND_LENGTHS
from .hex_color import HexColor


def _decode_shorthand(body: str) -> List[int]:
    # one digit per channel, doubled: "f" -> 0xff
    return [int(digit * 2, 16) for digit in body]


def _decode_full(body: str) -> List[int]:
    return [int(body[i:i + 2], 16) for i in range(0, len(body), 2)]


_DECODERS: Dict[int, Tuple[Callable[[str], List[int]], bool]] = {
    **{length: (_decode_shorthand, length in ALPHA_LENGTHS) for length in SHORTHAND_LENGTHS},
    **{length: (_decode_full, length in ALPHA_LENGTHS) for length in FULL_LENGTHS},
}


def parse_hex(text: str) -> HexColor:
    """
    Parse a hexadecimal color string.

    Args:
        text: ``rgb``, ``rgba``, ``rrggbb`` or ``rrggbbaa`` in hex digits,
              optionally prefixed with ``#`` and surrounded by whitespace.

    Returns:
        The parsed color. The 4 and 8 digit forms yield a color with alpha;
        the 3 and 6 digit forms yield one without.

    Raises:
        ParseHexColorError: if the string is not one of the accepted forms.
            The error keeps the trimmed input.
        TypeError: if ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"parse_hex expects a str, got {type(text).__name__}")

    trimmed = text.strip()
    body = trimmed[len(HEX_MARKER):] if trimmed.startswith(HEX_MARKER) else trimmed

    entry = _DECODERS.get(len(body))
    if entry is None or not all(char in HEX_DIGITS for char in body):
        raise ParseHexColorError(trimmed)

    decode, has_alpha = entry
    channels = decode(body)
    if has_alpha:
        return HexColor.rgba(*channels)
    return HexColor.rgb(*channels)


def format_hex(color: HexColor) -> str:
    """Return the canonical ``#RRGGBB`` or ``#RRGGBBAA`` form of a color."""
    return HEX_MARKER + "".join(f"{channel:02X}" for channel in color.value)


HexColor.parse = staticmethod(parse_hex)  # type: ignore[assignment]
HexColor.__str__ = format_hex  # type: ignore[assignment]
