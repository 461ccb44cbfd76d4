"""Mutable 2D vector.

Every mutating method changes the vector in place and returns it, so calls
chain:

    >>> Vector(3, 4).mul(2).sub(1).to_array()
    [5, 7]

Anything with numeric ``x`` and ``y`` (another Vector, a namedtuple, a
pydantic model) or a mapping with ``"x"``/``"y"`` keys is accepted wherever
a point is expected. Arithmetic methods also take a single number,
which is applied to both components.

No input is validated. Degenerate arithmetic (division by zero, setting the
length of a zero vector) yields inf/nan components instead of raising. The
one exception is unit(), which leaves a zero-length vector untouched.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from numbers import Number
from typing import Any, Optional, Sequence, Union

from vector2d import utils
from vector2d.config import get_config

logger = logging.getLogger(__name__)

# Anything exposing numeric x/y, or a mapping with "x"/"y" keys
PointLike = Any
ScalarOrPoint = Union[float, PointLike]


def _get(point: PointLike, axis: str) -> float:
    if isinstance(point, Mapping):
        return point[axis]
    return getattr(point, axis)


def _set(point: PointLike, axis: str, value: float) -> None:
    if isinstance(point, MutableMapping):
        point[axis] = value
    else:
        setattr(point, axis, value)


def _or_zero(value: Optional[float]) -> float:
    # Missing, falsy and nan components all collapse to 0
    if not value or utils.is_nan(value):
        return 0
    return value


@dataclass
class Vector:
    """2D vector with in-place, chainable operations.

    Construct from two numbers or from a single point:

        >>> Vector(1, 2)
        Vector(x=1, y=2)
        >>> Vector({"x": 1, "y": 2})
        Vector(x=1, y=2)

    Equality is exact component-wise comparison, with no tolerance.
    """
    x: float = 0
    y: float = 0

    def __post_init__(self) -> None:
        if not isinstance(self.x, Number):
            point = self.x
            if isinstance(point, Mapping):
                x, y = point.get("x"), point.get("y")
            else:
                x, y = getattr(point, "x", None), getattr(point, "y", None)
            self.x = _or_zero(x)
            self.y = _or_zero(y)

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def create(cls, x: float, y: float) -> Vector:
        """Create a new vector from components."""
        return cls(x, y)

    @classmethod
    def zero(cls) -> Vector:
        """Return zero vector (0, 0)."""
        return cls(0, 0)

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> Vector:
        """Create from an (x, y) pair."""
        x, y = t
        return cls(x, y)

    @classmethod
    def from_point(cls, point: PointLike) -> Vector:
        """Create from any point-like value.

        Missing or falsy components (including nan) become 0.
        """
        return cls(point)

    @classmethod
    def random(cls, low: Optional[float] = None, high: Optional[float] = None) -> Vector:
        """Create a vector with integer components drawn from [low, high].

        Bounds default to the configured random range (0..100).
        """
        return cls.zero().randomize(low, high)

    # =========================================================================
    # Arithmetic (in place)
    # =========================================================================

    def add(self, value: ScalarOrPoint) -> Vector:
        """Add a scalar to both components, or another point component-wise."""
        if isinstance(value, Number):
            self.x += value
            self.y += value
        else:
            self.x += _get(value, "x")
            self.y += _get(value, "y")
        return self

    def add_x(self, value: float) -> Vector:
        self.x += value
        return self

    def add_y(self, value: float) -> Vector:
        self.y += value
        return self

    def sub(self, value: ScalarOrPoint) -> Vector:
        """Subtract a scalar from both components, or another point component-wise."""
        if isinstance(value, Number):
            self.x -= value
            self.y -= value
        else:
            self.x -= _get(value, "x")
            self.y -= _get(value, "y")
        return self

    def sub_x(self, value: float) -> Vector:
        self.x -= value
        return self

    def sub_y(self, value: float) -> Vector:
        self.y -= value
        return self

    def mul(self, value: ScalarOrPoint) -> Vector:
        """Multiply both components by a scalar, or by another point component-wise."""
        if isinstance(value, Number):
            self.x *= value
            self.y *= value
        else:
            self.x *= _get(value, "x")
            self.y *= _get(value, "y")
        return self

    def mul_x(self, value: float) -> Vector:
        self.x *= value
        return self

    def mul_y(self, value: float) -> Vector:
        self.y *= value
        return self

    def div(self, value: ScalarOrPoint) -> Vector:
        """Divide both components by a scalar, or by another point component-wise.

        Division by zero follows IEEE-754 and never raises.
        """
        if isinstance(value, Number):
            self.x = utils.ieee_div(self.x, value)
            self.y = utils.ieee_div(self.y, value)
        else:
            self.x = utils.ieee_div(self.x, _get(value, "x"))
            self.y = utils.ieee_div(self.y, _get(value, "y"))
        return self

    def div_x(self, value: float) -> Vector:
        self.x = utils.ieee_div(self.x, value)
        return self

    def div_y(self, value: float) -> Vector:
        self.y = utils.ieee_div(self.y, value)
        return self

    def set_x(self, x: float) -> Vector:
        self.x = x
        return self

    def set_y(self, y: float) -> Vector:
        self.y = y
        return self

    def reset(self) -> Vector:
        """Set both components to 0."""
        self.x = 0
        self.y = 0
        return self

    # =========================================================================
    # Magnitude Operations
    # =========================================================================

    def length(self) -> float:
        """Get the magnitude (length) of the vector."""
        return math.sqrt(self.length_sq())

    def length_sq(self) -> float:
        """Get the squared magnitude (avoids sqrt for comparisons)."""
        return self.x * self.x + self.y * self.y

    def set_length(self, new_length: float) -> Vector:
        """Rescale to the given magnitude.

        A zero-length vector becomes (nan, nan).
        """
        length = self.length()
        self.x = utils.ieee_div(self.x, length) * new_length
        self.y = utils.ieee_div(self.y, length) * new_length
        return self

    def limit(self, max_length: float) -> Vector:
        """Clamp the magnitude to max_length, keeping the direction."""
        length_sq = self.length_sq()
        if length_sq > max_length * max_length:
            self.div(math.sqrt(length_sq)).mul(max_length)
        return self

    def limit_x(self, max_value: float) -> Vector:
        """Cap x at max_value. Values below it are left alone."""
        if self.x > max_value:
            self.x = max_value
        return self

    def limit_y(self, max_value: float) -> Vector:
        """Cap y at max_value. Values below it are left alone."""
        if self.y > max_value:
            self.y = max_value
        return self

    def unit(self) -> Vector:
        """Scale to length 1. A zero-length vector is left unchanged."""
        length = self.length()
        if length != 0:
            self.mul(1 / length)
        return self

    normalize = unit

    # =========================================================================
    # Angle Operations
    # =========================================================================

    def angle(self, degrees: bool = False) -> float:
        """Angle from the positive x-axis, in range [-pi, pi] (or degrees)."""
        angle = math.atan2(self.y, self.x)
        return utils.rad_to_deg(angle) if degrees else angle

    def set_angle(self, angle: float, degrees: bool = False) -> Vector:
        """Point the vector at angle, keeping its length."""
        if degrees:
            angle = utils.deg_to_rad(angle)
        length = self.length()
        self.x = length * math.cos(angle)
        self.y = length * math.sin(angle)
        return self

    def angle_between(self, point: PointLike, degrees: bool = False) -> float:
        """Angle of the line from this vector to point."""
        angle = math.atan2(_get(point, "y") - self.y, _get(point, "x") - self.x)
        return utils.rad_to_deg(angle) if degrees else angle

    def rotate(self, angle: float, degrees: bool = False) -> Vector:
        """Rotate counter-clockwise about the origin.

        Args:
            angle: Rotation angle, in radians unless degrees is set.
            degrees: Interpret angle as degrees.
        """
        if degrees:
            angle = utils.deg_to_rad(angle)
        x, y = self.x, self.y
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.x = x * cos_a - y * sin_a
        self.y = x * sin_a + y * cos_a
        return self

    # =========================================================================
    # Dot and Cross Products
    # =========================================================================

    def dot(self, point: PointLike) -> float:
        """Dot product with another point."""
        return self.x * _get(point, "x") + self.y * _get(point, "y")

    def cross(self, point: PointLike) -> float:
        """2D cross product (returns scalar z-component).

        Returns:
            Positive if point is counter-clockwise from self.
            Negative if point is clockwise from self.
            Zero if they are parallel.
        """
        return self.x * _get(point, "y") - self.y * _get(point, "x")

    # =========================================================================
    # Distance Operations
    # =========================================================================

    def dist(self, point: PointLike) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.dist_sq(point))

    def dist_sq(self, point: PointLike) -> float:
        """Squared distance to another point (avoids sqrt)."""
        dx = self.x - _get(point, "x")
        dy = self.y - _get(point, "y")
        return dx * dx + dy * dy

    # =========================================================================
    # Comparison
    # =========================================================================

    def eq(self, point: PointLike) -> bool:
        """Exact component equality with any point."""
        return self.x == _get(point, "x") and self.y == _get(point, "y")

    def not_eq(self, point: PointLike) -> bool:
        return not self.eq(point)

    # =========================================================================
    # Swapping
    #
    # These mutate the argument as well as self. The point must be a mutable
    # object or mapping; passing a copy makes the swap one-sided.
    # =========================================================================

    def swap(self, point: PointLike) -> Vector:
        """Exchange both components with point."""
        self.swap_x(point)
        return self.swap_y(point)

    def swap_x(self, point: PointLike) -> Vector:
        """Exchange the x component with point."""
        other_x = _get(point, "x")
        _set(point, "x", self.x)
        self.x = other_x
        return self

    def swap_y(self, point: PointLike) -> Vector:
        """Exchange the y component with point."""
        other_y = _get(point, "y")
        _set(point, "y", self.y)
        self.y = other_y
        return self

    # =========================================================================
    # Randomization
    # =========================================================================

    def randomize(self, low: Optional[float] = None, high: Optional[float] = None) -> Vector:
        """Replace both components with random integers from [low, high]."""
        self.randomize_x(low, high)
        return self.randomize_y(low, high)

    def randomize_x(self, low: Optional[float] = None, high: Optional[float] = None) -> Vector:
        low, high = _random_bounds(low, high)
        self.x = utils.random(low, high)
        return self

    def randomize_y(self, low: Optional[float] = None, high: Optional[float] = None) -> Vector:
        low, high = _random_bounds(low, high)
        self.y = utils.random(low, high)
        return self

    # =========================================================================
    # Conversion
    # =========================================================================

    def clone(self) -> Vector:
        """Create an independent copy of this vector."""
        return Vector(self.x, self.y)

    copy = clone

    def to_array(self) -> list[float]:
        """Convert to [x, y]."""
        return [self.x, self.y]

    def to_object(self) -> dict[str, float]:
        """Convert to {"x": x, "y": y}."""
        return {"x": self.x, "y": self.y}

    def to_json(self) -> dict[str, float]:
        """JSON-ready form; same as to_object()."""
        return self.to_object()

    def to_string(self) -> str:
        """Render as "x: {x}, y: {y}".

        Components print as-is: ints stay "x: 1, y: 2", while any float
        component (for example after a division) keeps its decimal point,
        "x: 1.0, y: 2.0".
        """
        return f"x: {self.x}, y: {self.y}"

    def log(self, level: int = logging.INFO) -> Vector:
        """Write to_string() to the package logger."""
        logger.log(level, self.to_string())
        return self

    def __str__(self) -> str:
        return self.to_string()


def _random_bounds(low: Optional[float], high: Optional[float]) -> tuple[float, float]:
    if low is None or high is None:
        config = get_config()
        low = config.random_low if low is None else low
        high = config.random_high if high is None else high
    return low, high
