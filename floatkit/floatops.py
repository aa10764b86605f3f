"""IEEE floating point helpers: sign handling, classification, bits and neighbours."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable, Sequence
from fractions import Fraction

from floatkit.limits import FPClass

__all__ = [
    "chgsign",
    "copysign",
    "finite",
    "isnan",
    "nan",
    "fpclass",
    "frexp",
    "ldexp",
    "logb",
    "nextafter",
    "float_bits",
    "bits_float",
    "popcount_int",
    "popcount",
    "ulp",
    "fabs",
    "remquo",
    "arcosh",
]

_BITS = 64
_SIGN_BIT = 1 << 63
_QUIET_BIT = 1 << 51
_INT64_MIN = -(1 << 63)
_QUO_MASK = 0x7FFFFFFF


def _to_unsigned(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def _to_signed(x: float) -> int:
    return struct.unpack("<q", struct.pack("<d", x))[0]


def _from_unsigned(u: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", u))[0]


def chgsign(x: float) -> float:
    """Return x with its sign reversed."""
    return _from_unsigned(_to_unsigned(x) ^ _SIGN_BIT)


def copysign(x: float, y: float) -> float:
    """Return the magnitude of x with the sign of y."""
    return math.copysign(x, y)


def finite(x: float) -> bool:
    """True if x is a normal or subnormal finite value."""
    return math.isfinite(x)


def isnan(x: float) -> bool:
    """True if x is Not a Number."""
    return math.isnan(x)


def nan() -> float:
    """Return a quiet NaN."""
    return float("nan")


def fpclass(x: float) -> FPClass:
    """Classify x as NaN, infinity, normal, denormal or zero, with its sign."""
    bits = _to_unsigned(x)
    negative = bool(bits & _SIGN_BIT)
    if math.isnan(x):
        return FPClass.QNAN if bits & _QUIET_BIT else FPClass.SNAN
    if math.isinf(x):
        return FPClass.NINF if negative else FPClass.PINF
    if x == 0:
        return FPClass.NZ if negative else FPClass.PZ
    if abs(x) < 2.0**-1022:
        return FPClass.ND if negative else FPClass.PD
    return FPClass.NN if negative else FPClass.PN


def frexp(x: float) -> tuple[float, int]:
    """Return (sig, exp) with 0.5 <= |sig| < 1 and x == sig * 2**exp."""
    return math.frexp(x)


def ldexp(sig: float, exp: int) -> float:
    """Return sig * 2**exp, overflowing to a signed infinity."""
    try:
        return math.ldexp(sig, exp)
    except OverflowError:
        return math.copysign(math.inf, sig)


def logb(x: float) -> float:
    """Return the unbiased binary exponent of x as a float."""
    if math.isnan(x):
        return x
    if math.isinf(x):
        return math.inf
    if x == 0:
        return -math.inf
    return float(math.frexp(x)[1] - 1)


def nextafter(x: float, n: int) -> float:
    """Step n representable neighbours up (n > 0) or down (n < 0) from x."""
    if n > 0:
        for _ in range(n):
            x = math.nextafter(x, x + 1)
    elif n < 0:
        for _ in range(-n):
            x = math.nextafter(x, x - 1)
    return x


def float_bits(x: float) -> list[int]:
    """Return the 64 bits of x, most significant (the sign bit) first."""
    bits = _to_unsigned(x)
    return [(bits >> (_BITS - 1 - i)) & 1 for i in range(_BITS)]


def bits_float(bits: Iterable[float]) -> float:
    """Build a float from 64 bits, most significant first; nonzero entries are ones."""
    values: Sequence[float] = list(bits)
    if len(values) != _BITS:
        raise ValueError(f"expected {_BITS} bits, got {len(values)}")
    u = 0
    for bit in values:
        u = (u << 1) | (1 if bit != 0 else 0)
    return _from_unsigned(u)


def popcount_int(i: int) -> int:
    """Return the Hamming weight of the non-negative integer i."""
    if i < 0:
        raise ValueError("popcount_int requires a non-negative integer")
    return i.bit_count()


def popcount(x: float) -> int:
    """Return the number of one bits in the 64-bit representation of x."""
    return popcount_int(_to_unsigned(x))


def _ordered(x: float) -> int:
    value = _to_signed(x)
    if value < 0:
        value = _INT64_MIN - value
    return value


def ulp(x: float, y: float) -> int:
    """Count the representable steps from y to x; ulp(nextafter(x, n), x) == n."""
    return _ordered(x) - _ordered(y)


def fabs(x: float) -> float:
    """Return the absolute value of x."""
    return math.fabs(x)


def remquo(numer: float, denom: float) -> tuple[float, int]:
    """Return the IEEE remainder and the low bits of the rounded quotient, signed."""
    if math.isnan(numer) or math.isnan(denom) or math.isinf(numer) or denom == 0:
        return math.nan, 0
    if math.isinf(denom):
        return numer, 0
    remainder = math.remainder(numer, denom)
    quotient = round(Fraction(numer) / Fraction(denom))
    low = abs(quotient) & _QUO_MASK
    negative = (numer < 0) != (denom < 0)
    return remainder, -low if negative else low


def arcosh(x: float) -> float:
    """Return the inverse hyperbolic cosine of x, or NaN when x < 1."""
    if math.isnan(x) or x < 1:
        return math.nan
    return math.acosh(x)