"""Arithmetic, comparison and 16-bit word operations on scalar arguments."""

from __future__ import annotations

import math

__all__ = [
    "add",
    "sub",
    "mul",
    "div",
    "fmod",
    "mod",
    "bit_not",
    "bit_and",
    "bit_or",
    "bit_xor",
    "shift",
    "equals",
    "identity",
]

_WORD_MASK = 0xFFFF
_SHORT_MIN = -(1 << 15)
_SHORT_MAX = (1 << 15) - 1


def _word(value: int) -> int:
    if not 0 <= value <= _WORD_MASK:
        raise ValueError(f"{value} is not an unsigned 16-bit word")
    return value


def add(x1: float, x2: float) -> float:
    """Return x1 + x2."""
    return x1 + x2


def sub(x1: float, x2: float) -> float:
    """Return x1 - x2."""
    return x1 - x2


def mul(x1: float, x2: float) -> float:
    """Return x1 * x2."""
    return x1 * x2


def div(x1: float, x2: float) -> float:
    """Return x1 / x2 with IEEE results for a zero divisor."""
    try:
        return x1 / x2
    except ZeroDivisionError:
        if math.isnan(x1) or x1 == 0:
            return math.nan
        return math.copysign(math.inf, x1) * math.copysign(1.0, x2)


def fmod(x1: float, x2: float) -> float:
    """Return the C fmod of x1 and x2, or NaN when x2 is zero."""
    if x2 == 0:
        return math.nan
    try:
        return math.fmod(x1, x2)
    except ValueError:
        return math.nan


def mod(x1: int, x2: int) -> int:
    """Return the truncating remainder x1 % x2, whose sign follows x1.

    Unlike Python's ``%`` (and a spreadsheet MOD), the result has the sign of
    the dividend. A zero divisor raises ValueError.
    """
    if x2 == 0:
        raise ValueError("modulus by zero")
    remainder = abs(x1) % abs(x2)
    return -remainder if x1 < 0 else remainder


def bit_not(x: int) -> int:
    """Return the 16-bit complement of x."""
    return ~_word(x) & _WORD_MASK


def bit_and(x1: int, x2: int) -> int:
    """Return x1 & x2 for 16-bit words."""
    return _word(x1) & _word(x2)


def bit_or(x1: int, x2: int) -> int:
    """Return x1 | x2 for 16-bit words."""
    return _word(x1) | _word(x2)


def bit_xor(x1: int, x2: int) -> int:
    """Return x1 ^ x2 for 16-bit words."""
    return _word(x1) ^ _word(x2)


def shift(x: int, n: int) -> int:
    """Shift the word x left by n bits if n > 0, right by -n bits if n < 0."""
    _word(x)
    if not _SHORT_MIN <= n <= _SHORT_MAX:
        raise ValueError(f"{n} is not a signed 16-bit shift count")
    if n > 0:
        return (x << n) & _WORD_MASK
    if n < 0:
        return x >> -n
    return x


def equals(x1: float, x2: float) -> bool:
    """True if x1 equals x2."""
    return x1 == x2


def identity(x: float) -> float:
    """Return x as a float, with its value unchanged."""
    return float(x)