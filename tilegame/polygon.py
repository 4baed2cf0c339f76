"""Polygons and the regions of a Voronoi diagram."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Optional

from tilegame.geometry import Vec2

AABB = tuple[Vec2, Vec2]


def _fdiv(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


def point_in_bounds(point: Vec2, aabb: AABB) -> bool:
    """True if ``point`` lies within the axis-aligned box ``(min, max)``."""
    low, high = aabb
    return low.x <= point.x <= high.x and low.y <= point.y <= high.y


class Polygon:
    """A simple polygon given by its vertices in order."""

    def __init__(self, vertices: list[Vec2]) -> None:
        if len(vertices) < 3:
            raise ValueError("a polygon needs at least 3 vertices")
        self.vertices: list[Vec2] = list(vertices)

    def __repr__(self) -> str:
        return f"Polygon({self.vertices!r})"

    def __len__(self) -> int:
        return len(self.vertices)

    def _edges(self):
        return zip(self.vertices, self.vertices[1:] + self.vertices[:1])

    def add_vertex(self, vertex: Vec2) -> None:
        self.vertices.append(vertex)

    def remove_vertex(self, vertex: Vec2) -> None:
        """Remove every vertex equal to ``vertex``."""
        self.vertices = [v for v in self.vertices if v != vertex]

    def vertex(self, index: int) -> Optional[Vec2]:
        """The vertex at ``index``, or None if there is none."""
        if 0 <= index < len(self.vertices):
            return self.vertices[index]
        return None

    def double_area(self) -> float:
        """Twice the signed area (shoelace formula)."""
        return sum(p.cross(q) for p, q in self._edges())

    def area(self) -> float:
        return self.double_area() * 0.5

    def perimeter(self) -> float:
        return sum((p - q).length() for p, q in self._edges())

    def centroid(self) -> Vec2:
        """Area centroid; NaN components for a degenerate polygon."""
        scale = _fdiv(1.0, 6.0 * self.area())
        sx = sy = 0.0
        for p, q in self._edges():
            weight = p.cross(q)
            sx += (p.x + q.x) * weight
            sy += (p.y + q.y) * weight
        return Vec2(sx * scale, sy * scale)

    def bounding_box(self) -> AABB:
        big = sys.float_info.max
        min_x = min_y = big
        max_x = max_y = -big
        for v in self.vertices:
            min_x, min_y = min(min_x, v.x), min(min_y, v.y)
            max_x, max_y = max(max_x, v.x), max(max_y, v.y)
        return Vec2(min_x, min_y), Vec2(max_x, max_y)

    def contains_point(self, point: Vec2) -> bool:
        """Even-odd ray casting test."""
        if not point_in_bounds(point, self.bounding_box()):
            return False
        inside = False
        for p, q in self._edges():
            if (p.y > point.y) != (q.y > point.y) and point.x < (q.x - p.x) * (
                point.y - p.y
            ) / (q.y - p.y) + p.x:
                inside = not inside
        return inside


@dataclass
class Region:
    """One cell of a Voronoi diagram."""

    polygon: Polygon

    @property
    def vertices(self) -> list[Vec2]:
        return self.polygon.vertices

    def area(self) -> float:
        return self.polygon.area()


@dataclass
class Diagram:
    """A Voronoi diagram: its sites and the region around each."""

    sites: list[tuple[int, int]] = field(default_factory=list)
    regions: list[Region] = field(default_factory=list)