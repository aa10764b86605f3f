"""Floating point helpers, numeric limits, array utilities and root bracketing."""

__version__ = "0.1.0"
__all__ = ["arrays", "floatops", "functional", "limits", "root1d"]