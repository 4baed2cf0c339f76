"""Planar geometry primitives: vectors, circumcircle tests and bisector edges."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


def _fdiv(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: zero divisors yield infinities or NaN."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


class Containment(Enum):
    """Where a point lies relative to a shape."""

    OUTSIDE = "outside"
    INSIDE = "inside"
    INTERSECT = "intersect"


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float
    y: float

    @classmethod
    def from_coord(cls, a: Vec2, b: Vec2) -> Vec2:
        """Vector pointing from ``b`` to ``a``."""
        return cls(a.x - b.x, a.y - b.y)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    def magnitude2(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.magnitude2())

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; NaN components for the zero vector."""
        length = self.length()
        return Vec2(_fdiv(self.x, length), _fdiv(self.y, length))

    def is_nan(self) -> bool:
        """True if any component is NaN."""
        return math.isnan(self.x) or math.isnan(self.y)


def _det3(rows: list[tuple[float, float, float]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = rows
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


@dataclass(frozen=True)
class Circle:
    """The circle passing through three points."""

    a: Vec2
    b: Vec2
    c: Vec2
    _a_squared: float = field(init=False, repr=False, compare=False)
    _b_squared: float = field(init=False, repr=False, compare=False)
    _c_squared: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_a_squared", self.a.magnitude2())
        object.__setattr__(self, "_b_squared", self.b.magnitude2())
        object.__setattr__(self, "_c_squared", self.c.magnitude2())

    def classify(self, point: Vec2) -> Containment:
        """Classify ``point`` with the in-circle determinant."""
        rows = [
            (self.a.x, self.a.y, self._a_squared),
            (self.b.x, self.b.y, self._b_squared),
            (self.c.x, self.c.y, self._c_squared),
            (point.x, point.y, point.magnitude2()),
        ]
        # Laplace expansion along the fourth column, which is all ones.
        determinant = 0.0
        for index in range(4):
            minor = _det3(rows[:index] + rows[index + 1:])
            sign = 1.0 if (index + 3) % 2 == 0 else -1.0
            determinant += sign * minor

        if determinant > 0:
            return Containment.INSIDE
        if determinant == 0:
            return Containment.INTERSECT
        return Containment.OUTSIDE


@dataclass(frozen=True)
class Edge:
    """A line ``a*x + b*y + c``, typically the bisector of two sites."""

    a: float
    b: float
    c: float

    @classmethod
    def from_points(cls, point_a: Vec2, point_b: Vec2) -> Edge:
        """Build the perpendicular bisector of the segment between two points."""
        delta = Vec2.from_coord(point_b, point_a)
        bisecting_constant = (
            point_a.x * delta.x
            + point_a.y * delta.y
            + 0.5 * (delta.x**2 + delta.y**2)
        )
        if abs(delta.x) < abs(delta.y):
            return cls(
                1.0,
                _fdiv(delta.x, delta.y),
                _fdiv(bisecting_constant, delta.y),
            )
        return cls(
            1.0,
            _fdiv(delta.y, delta.x),
            _fdiv(bisecting_constant, delta.x),
        )

    def evaluate(self, x: float, y: float) -> bool:
        """True if ``(x, y)`` satisfies the line equation exactly."""
        return self.a * x + self.b * y + self.c == 0

    def evaluate_y(self, x: float) -> float:
        return _fdiv(-(self.a * x - self.c), self.b)

    def evaluate_x(self, y: float) -> float:
        return _fdiv(-(self.b * y - self.c), self.a)