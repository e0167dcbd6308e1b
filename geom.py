"""Geometry primitives for polygon centroid computation."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple


class ParallelLinesError(ValueError):
    """Raised when two lines have no single intersection point."""


@dataclass(frozen=True)
class Point:
    """Represents a 2D point."""

    x: float
    y: float

    def isclose(self, other: Point, tolerance: float = 1e-9) -> bool:
        """Return True when both coordinates are within an absolute tolerance."""

        return math.isclose(self.x, other.x, abs_tol=tolerance) and math.isclose(
            self.y, other.y, abs_tol=tolerance
        )

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


Line = Tuple[Point, Point]


@dataclass
class Polygon:
    """Represents a polygon defined by a sequence of vertices.

    Vertices are kept in traversal order and the last one connects back to
    the first. One or two vertices are accepted so the recursive centroid can
    bottom out on them, but only three or more describe an actual area.
    """

    vertices: Sequence[Point]

    def __post_init__(self) -> None:
        if len(self.vertices) == 0:
            raise ValueError("A polygon requires at least one vertex.")
        # Convert to tuple to avoid accidental mutation of the original sequence.
        self.vertices = tuple(self.vertices)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]]) -> Polygon:
        """Build a polygon from plain ``(x, y)`` pairs."""

        return cls([Point(float(x), float(y)) for x, y in pairs])

    def __iter__(self) -> Iterator[Point]:
        """Iterate over points that belong to the polygon."""

        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def as_pairs(self) -> list[tuple[float, float]]:
        return [(point.x, point.y) for point in self.vertices]

    def rotated(self, shift: int) -> Polygon:
        """Return the polygon with its vertex list shifted left by ``shift``."""

        k = shift % len(self.vertices)
        return Polygon(self.vertices[k:] + self.vertices[:k])

    def translated(self, dx: float, dy: float) -> Polygon:
        return Polygon([Point(p.x + dx, p.y + dy) for p in self.vertices])

    def scaled(self, factor: float) -> Polygon:
        """Scale every vertex about the origin."""

        return Polygon([Point(p.x * factor, p.y * factor) for p in self.vertices])


def line_intersection(line1: Line, line2: Line) -> Point:
    """Return the intersection of two infinite lines, each given by two points.

    Uses the 2x2 determinant form. Parallel or coincident lines (and lines
    given by two identical points) have a zero denominator and raise
    ParallelLinesError, as does any result that is not finite.
    """

    (a, b), (c, d) = line1, line2
    dx1, dy1 = a.x - b.x, a.y - b.y
    dx2, dy2 = c.x - d.x, c.y - d.y
    c1 = a.x * b.y - a.y * b.x
    c2 = c.x * d.y - c.y * d.x

    denominator = dx1 * dy2 - dy1 * dx2
    if denominator == 0:
        raise ParallelLinesError(f"Lines {line1} and {line2} do not intersect in a single point.")

    result = Point(
        (c1 * dx2 - dx1 * c2) / denominator,
        (c1 * dy2 - dy1 * c2) / denominator,
    )
    if not result.is_finite():
        raise ParallelLinesError(f"Intersection of {line1} and {line2} is not finite: {result}.")
    return result


def signed_area(polygon: Polygon) -> float:
    """Return the shoelace area, positive for counter-clockwise winding."""

    vertices = polygon.vertices
    n = len(vertices)
    total = 0.0
    for i in range(n):
        j = (i + 1) % n
        total += vertices[i].x * vertices[j].y - vertices[j].x * vertices[i].y
    return total / 2.0


def area_centroid(polygon: Polygon) -> Point:
    """Return the area-weighted centroid from the shoelace formula.

    This is the reference the recursive construction is checked against.
    """

    area = signed_area(polygon)
    if area == 0:
        raise ValueError("Area-weighted centroid is undefined for a polygon with zero area.")

    vertices = polygon.vertices
    n = len(vertices)
    cx = cy = 0.0
    for i in range(n):
        xi, yi = vertices[i].x, vertices[i].y
        xj, yj = vertices[(i + 1) % n].x, vertices[(i + 1) % n].y
        cross = xi * yj - xj * yi
        cx += (xi + xj) * cross
        cy += (yi + yj) * cross

    return Point(cx / (6.0 * area), cy / (6.0 * area))
