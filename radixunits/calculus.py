"""
Numeric settings and helpers shared by the converters and the mixed radix engine.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_EVEN
from numbers import Number
from typing import Union

import numpy as np


# Working precision for decimal fallbacks (34 digits, like IEEE 754 decimal128)
DEFAULT_MATH_CONTEXT = Context(prec=34, rounding=ROUND_HALF_EVEN)

# Amounts within this distance of an integer are treated as that integer
EXTRACTION_TOLERANCE = 1e-9

_math_context = DEFAULT_MATH_CONTEXT


def get_math_context() -> Context:
    """Return the decimal context used when exact arithmetic is not possible."""
    return _math_context


def set_math_context(context: Context) -> None:
    """
    Replace the working decimal context.

    Parameters
    ----------
    context : decimal.Context
        Context used by integer conversions that fall back to decimal division,
        and by decimal conversions called without an explicit context
    """
    global _math_context
    if not isinstance(context, Context):
        raise TypeError(f"Expected decimal.Context, got {type(context).__name__}")
    _math_context = context


def normalize_number(value: Number) -> Union[int, float, Decimal]:
    """Map numpy scalars onto the matching Python number type."""
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        return float(value)
    return value


def integer_part(value: Union[int, float, Decimal], tolerance: float = EXTRACTION_TOLERANCE) -> int:
    """
    Integer part of ``value``, truncated toward zero.

    Values within ``tolerance`` of an integer snap to it, so that float noise
    such as ``1.9999999999999998`` counts as 2.
    """
    if isinstance(value, int):
        return value
    nearest = round(value)
    if math.isclose(value, nearest, rel_tol=0.0, abs_tol=tolerance):
        return int(nearest)
    return int(math.trunc(value))


def is_negligible(value: Union[int, float, Decimal], tolerance: float = EXTRACTION_TOLERANCE) -> bool:
    """True when ``value`` is zero within ``tolerance``."""
    return abs(value) <= tolerance
