"""Numeric literal formatting shared by the renderers."""

from __future__ import annotations

import math

import numpy as np

# C literal suffixes for bounded kinds, keyed by (signed, width)
C_SUFFIXES = {
    (False, 16): "U",
    (False, 32): "UL",
    (False, 64): "ULL",
    (True, 32): "L",
    (True, 64): "LL",
}


def hex_digits(width: int) -> int:
    """Number of hex digits needed for ``width`` bits."""
    return (width + 3) // 4


def bounded_hex(value: int, width: int, suffix: str = "") -> str:
    """
    Hexadecimal literal zero padded to the kind's width, sign-aware.

    >>> bounded_hex(5, 8)
    '0x05'
    >>> bounded_hex(-3, 16)
    '-0x0003'
    """
    digits = format(abs(value), "x").rjust(hex_digits(width), "0")
    sign = "-" if value < 0 else ""
    return f"{sign}0x{digits}{suffix}"


def integer_hex(value: int) -> str:
    """Unpadded hexadecimal literal for unbounded integers."""
    sign = "-" if value < 0 else ""
    return f"{sign}0x{abs(value):x}"


def hex_float(value: float) -> str:
    """
    Round-trip-safe hexadecimal floating point literal.

    Produces the compact form ``0x1.8p0``: trailing zero nibbles and the
    exponent's plus sign are dropped. Zero renders as ``0x0p+0``.
    """
    if math.isnan(value):
        return "(0/0)"
    if math.isinf(value):
        return "(-1/0)" if value < 0 else "(1/0)"

    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return f"{sign}0x0p+0"

    mantissa, exponent = abs(value).hex().split("p")
    mantissa = mantissa.rstrip("0").rstrip(".")
    return f"{sign}{mantissa}p{int(exponent)}"


def _c_special(value: float, ctype: str) -> str | None:
    if math.isnan(value):
        return f"(({ctype}) NAN)"
    if math.isinf(value):
        return f"(({ctype}) (-INFINITY))" if value < 0 else f"(({ctype}) INFINITY)"
    return None


def c_float(value: float) -> str:
    """Shortest single-precision decimal literal with an ``F`` suffix."""
    special = _c_special(value, "float")
    if special is not None:
        return special
    return str(np.float32(value)) + "F"


def c_double(value: float) -> str:
    """Shortest double-precision decimal literal."""
    special = _c_special(value, "double")
    if special is not None:
        return special
    return repr(float(value))
