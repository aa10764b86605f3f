"""Numeric limits of the C integer and floating point types, and float classes."""

from __future__ import annotations

import enum
import struct
import sys
from typing import Union

__all__ = ["FPClass", "constants"]


class FPClass(enum.IntEnum):
    """Floating point classification codes reported by :func:`floatkit.floatops.fpclass`."""

    SNAN = 0x0001
    QNAN = 0x0002
    NINF = 0x0004
    NN = 0x0008
    ND = 0x0010
    NZ = 0x0020
    PZ = 0x0040
    PD = 0x0080
    PN = 0x0100
    PINF = 0x0200


Number = Union[int, float]

_SIGNALING_NAN: float = struct.unpack("<d", struct.pack("<Q", 0x7FF4000000000000))[0]

_FLOAT_INFO = sys.float_info

_CONSTANTS: dict[str, Number] = {
    # Integer types
    "CHAR_BIT": 8,
    "CHAR_MAX": 127,
    "CHAR_MIN": -128,
    "INT_MAX": 2147483647,
    "INT_MIN": -2147483648,
    "LONG_MAX": 2147483647,
    "LONG_MIN": -2147483648,
    "SCHAR_MAX": 127,
    "SCHAR_MIN": -128,
    "SHRT_MAX": 32767,
    "SHRT_MIN": -32768,
    "UCHAR_MAX": 255,
    "USHRT_MAX": 65535,
    # Double precision
    "DBL_DIG": _FLOAT_INFO.dig,
    "DBL_EPSILON": _FLOAT_INFO.epsilon,
    "DBL_MANT_DIG": _FLOAT_INFO.mant_dig,
    "DBL_MAX": _FLOAT_INFO.max,
    "DBL_MAX_10_EXP": _FLOAT_INFO.max_10_exp,
    "DBL_MAX_EXP": _FLOAT_INFO.max_exp,
    "DBL_MIN": _FLOAT_INFO.min,
    "DBL_MIN_10_EXP": _FLOAT_INFO.min_10_exp,
    "DBL_MIN_EXP": _FLOAT_INFO.min_exp,
    # Single precision
    "FLT_DIG": 6,
    "FLT_EPSILON": 2.0**-23,
    "FLT_MANT_DIG": 24,
    "FLT_MAX": (2.0 - 2.0**-23) * 2.0**127,
    "FLT_MAX_10_EXP": 38,
    "FLT_MAX_EXP": 128,
    "FLT_MIN": 2.0**-126,
    "FLT_MIN_10_EXP": -37,
    "FLT_MIN_EXP": -125,
    # Float classes
    **{f"FPCLASS_{member.name}": member for member in FPClass},
    # Special values
    "SNAN": _SIGNALING_NAN,
    "QNAN": float("nan"),
    "PINF": float("inf"),
}


def constants() -> dict[str, Number]:
    """Return a fresh mapping from limit names to their values."""
    return dict(_CONSTANTS)