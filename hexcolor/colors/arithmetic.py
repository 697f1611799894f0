"""
Saturating arithmetic for HexColor.

Every operation works per channel and clamps its result to [0, 255] instead
of wrapping. Importing this module installs the operators on HexColor:

- ``color + color`` and ``color - color``
- ``color + n``, ``color - n``, ``color * n``, ``color / n`` for any real ``n``
- ``n + color``, ``n * color`` (same as the color-first forms) and
  ``n - color`` (``n`` minus each channel)

Compound assignment (``+=`` and friends) falls back on the binary operators,
so it always rebinds to a fresh color.

Alpha follows :func:`alpha_op` for color/color operations. Scalar operations
touch alpha only when it is present.
"""
from __future__ import annotations
import operator
from numbers import Integral, Real
from typing import Any, Callable, Optional, Union

from boundednumbers import clamp

from ..errors import HexColorDomainError
from ..types.color_types import CHANNEL_MAX, CHANNEL_MIN, Alpha, Scalar
from .hex_color import HexColor

ChannelOp = Callable[[Any, Any], Any]


def alpha_op(left: Alpha, right: Alpha, op: Callable[[int, int], int]) -> Alpha:
    """
    Combine the alpha channels of two colors.

    ======== ========= ============
    left     right     result
    ======== ========= ============
    x        y         op(x, y)
    x        None      x
    None     anything  None
    ======== ========= ============

    The left operand decides whether the result has alpha at all.
    """
    if left is None:
        return None
    if right is None:
        return left
    return op(left, right)


def saturate(value: Any) -> int:
    """Clamp a number to [0, 255] and truncate it to a byte. NaN maps to 0."""
    if value != value:
        return CHANNEL_MIN
    return int(clamp(value, CHANNEL_MIN, CHANNEL_MAX))


def _promote_scalar(other: Any) -> Optional[Scalar]:
    """
    Return ``other`` in the numeric domain the channels are promoted to,
    or None if it is not a usable scalar.

    Integral scalars (numpy integers included) become exact Python ints so
    fixed-width types cannot wrap. Other reals are kept as they are.
    """
    if isinstance(other, bool) or not isinstance(other, Real):
        return None
    if isinstance(other, Integral):
        return operator.index(other)
    return other


def _map_channels(color: HexColor, fn: Callable[[int], int]) -> HexColor:
    a = color.a
    return HexColor(fn(color.r), fn(color.g), fn(color.b), None if a is None else fn(a))


def _color_op(left: HexColor, right: HexColor, op: ChannelOp) -> HexColor:
    def combine(x: int, y: int) -> int:
        return saturate(op(x, y))

    return HexColor(
        combine(left.r, right.r),
        combine(left.g, right.g),
        combine(left.b, right.b),
        alpha_op(left.a, right.a, combine),
    )


def _scalar_op(color: HexColor, scalar: Scalar, op: ChannelOp) -> HexColor:
    return _map_channels(color, lambda channel: saturate(op(channel, scalar)))


def _mirror_sub(channel: Any, scalar: Any) -> Any:
    return scalar - channel


# -----------------------
# Operator implementations
# -----------------------
def _add(self: HexColor, other: Any) -> Union[HexColor, Any]:
    if isinstance(other, HexColor):
        return _color_op(self, other, operator.add)
    scalar = _promote_scalar(other)
    if scalar is None:
        return NotImplemented
    return _scalar_op(self, scalar, operator.add)


def _sub(self: HexColor, other: Any) -> Union[HexColor, Any]:
    if isinstance(other, HexColor):
        return _color_op(self, other, operator.sub)
    scalar = _promote_scalar(other)
    if scalar is None:
        return NotImplemented
    return _scalar_op(self, scalar, operator.sub)


def _rsub(self: HexColor, other: Any) -> Union[HexColor, Any]:
    scalar = _promote_scalar(other)
    if scalar is None:
        return NotImplemented
    return _scalar_op(self, scalar, _mirror_sub)


def _mul(self: HexColor, other: Any) -> Union[HexColor, Any]:
    scalar = _promote_scalar(other)
    if scalar is None:
        return NotImplemented
    return _scalar_op(self, scalar, operator.mul)


def _truediv(self: HexColor, other: Any) -> Union[HexColor, Any]:
    scalar = _promote_scalar(other)
    if scalar is None:
        return NotImplemented
    if scalar == 0:
        raise HexColorDomainError(f"cannot divide {self!r} by zero")
    # integer scalars divide in the integers, like the channels they scale
    op = operator.floordiv if isinstance(scalar, int) else operator.truediv
    return _scalar_op(self, scalar, op)


def _checked(result: Any, symbol: str, other: Any) -> HexColor:
    if result is NotImplemented:
        raise TypeError(
            f"unsupported operand type(s) for {symbol}: 'HexColor' and '{type(other).__name__}'"
        )
    return result


# -----------------------
# Named operations
# -----------------------
def add(color: HexColor, other: Union[HexColor, Scalar]) -> HexColor:
    """Saturating ``color + other``; ``other`` is a color or a real scalar."""
    return _checked(_add(color, other), "+", other)


def subtract(color: HexColor, other: Union[HexColor, Scalar]) -> HexColor:
    """Saturating ``color - other``; ``other`` is a color or a real scalar."""
    return _checked(_sub(color, other), "-", other)


def multiply(color: HexColor, scalar: Scalar) -> HexColor:
    return _checked(_mul(color, scalar), "*", scalar)


def divide(color: HexColor, scalar: Scalar) -> HexColor:
    """
    Saturating ``color / scalar``.

    Raises:
        HexColorDomainError: if ``scalar`` is zero.
    """
    return _checked(_truediv(color, scalar), "/", scalar)


# Inject arithmetic operators into HexColor
HexColor.__add__ = _add  # type: ignore[attr-defined]
HexColor.__radd__ = _add  # type: ignore[attr-defined]
HexColor.__sub__ = _sub  # type: ignore[attr-defined]
HexColor.__rsub__ = _rsub  # type: ignore[attr-defined]
HexColor.__mul__ = _mul  # type: ignore[attr-defined]
HexColor.__rmul__ = _mul  # type: ignore[attr-defined]
HexColor.__truediv__ = _truediv  # type: ignore[attr-defined]
