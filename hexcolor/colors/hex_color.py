from __future__ import annotations
from functools import total_ordering
from numbers import Integral
from typing import Any, Callable, Tuple

from ..types.color_types import CHANNEL_MAX, CHANNEL_MIN, Alpha, ChannelTuple, ColorValue


def _validate_channel(name: str, value: Any) -> int:
    # bool is an Integral, but True/False are not channel values
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(
            f"HexColor channel {name!r} must be an integer, got {type(value).__name__}"
        )
    value = int(value)
    if not CHANNEL_MIN <= value <= CHANNEL_MAX:
        raise ValueError(
            f"HexColor channel {name!r} must be in [{CHANNEL_MIN}, {CHANNEL_MAX}], got {value}"
        )
    return value


@total_ordering
class HexColor:
    """
    An RGB color with an optional alpha channel, every channel one byte.

    ``a`` is ``None`` when the color carries no alpha information, which is
    not the same thing as fully opaque (``a == 255``).

    Instances are immutable and hashable. Ordering is lexicographic over
    ``(r, g, b, a)`` with an absent alpha sorting before any present one.

    >>> HexColor.rgb(127, 127, 127)
    HexColor(r=127, g=127, b=127, a=None)
    >>> str(HexColor.rgba(255, 0, 0, 128))
    '#FF000080'
    """

    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    # numpy scalars defer to the reflected operators instead of broadcasting
    __array_ufunc__ = None

    # installed by hexcolor.colors.codec
    parse: Callable[[str], HexColor]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: int = 0, g: int = 0, b: int = 0, a: Alpha = None) -> None:
        value: ChannelTuple = (
            _validate_channel('r', r),
            _validate_channel('g', g),
            _validate_channel('b', b),
            None if a is None else _validate_channel('a', a),
        )
        self._value = value

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> HexColor:
        """Build a color without alpha information."""
        return cls(r, g, b)

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> HexColor:
        """Build a color whose alpha channel is always present."""
        if a is None:
            raise TypeError("HexColor.rgba requires an alpha value; use HexColor.rgb instead")
        return cls(r, g, b, a)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @property
    def a(self) -> Alpha:
        return self._value[3]

    @property
    def has_alpha(self) -> bool:
        return self._value[3] is not None

    @property
    def value(self) -> ColorValue:
        """The channels as a tuple of three ints, or four when alpha is present."""
        if self._value[3] is None:
            return self._value[:3]  # type: ignore[return-value]
        return self._value  # type: ignore[return-value]

    def with_alpha(self, a: Alpha) -> HexColor:
        """Return a copy of this color with its alpha replaced."""
        return self.__class__(self.r, self.g, self.b, a)

    def without_alpha(self) -> HexColor:
        if not self.has_alpha:
            return self
        return self.__class__(self.r, self.g, self.b)

    # ------------------ STRUCTURAL PROTOCOLS ------------------
    def _sort_key(self) -> Tuple[int, int, int, int]:
        r, g, b, a = self._value
        return (r, g, b, -1 if a is None else a)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexColor):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HexColor):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._value)

    def __iter__(self):
        return iter(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"{self.__class__.__name__}(r={r}, g={g}, b={b}, a={a})"

    def __reduce__(self):
        return (self.__class__, self._value)

    def __copy__(self) -> HexColor:
        return self

    def __deepcopy__(self, memo: dict) -> HexColor:
        return self

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any):
        # pydantic is an optional extra, only imported when a model asks for it
        from ..serde import hex_color_schema
        return hex_color_schema(source, handler)

