"""Angle conversion and random helpers.

These are usable on their own and are also what Vector uses internally
for degree arguments and randomized components.
"""

from __future__ import annotations

import math
from numbers import Number
from typing import Optional

import numpy as np

from vector2d.config import get_rng


RAD_TO_DEG = 57.29577951308232
DEG_TO_RAD = 0.017453292519943295


def rad_to_deg(radians: float) -> float:
    """Convert radians to degrees."""
    return RAD_TO_DEG * radians


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return DEG_TO_RAD * degrees


def random(low: float, high: float) -> int:
    """Random integer in [low, high], both ends inclusive.

    Returns 0 without touching the RNG when both bounds are falsy.
    """
    if not low and not high:
        return 0
    return math.floor(get_rng().random() * (high - low + 1) + low)


def ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics.

    Zero denominators give inf, -inf or nan instead of raising.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(numerator, denominator, dtype=np.float64))


def is_nan(value: Optional[float]) -> bool:
    """True for any numeric nan (float, numpy scalar, Decimal), False otherwise."""
    return isinstance(value, Number) and value != value
