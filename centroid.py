"""Centroid engine: vertex averaging and recursive split-and-intersect."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Final, Optional, Tuple

from geom import Point, Polygon, area_centroid, line_intersection

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE: Final[float] = 1e-9
"""Absolute tolerance used when comparing centroids from different methods."""

CentroidCache = Dict[Tuple[Point, ...], Point]


def center_location(polygon: Polygon) -> Point:
    """Return the arithmetic mean of the vertices.

    Exact for triangles. For one or two vertices this gives the point itself
    or the segment midpoint, which is only a base-case convention.
    """

    count = len(polygon)
    sum_x = sum(point.x for point in polygon)
    sum_y = sum(point.y for point in polygon)
    return Point(sum_x / count, sum_y / count)


def split_polygon(polygon: Polygon, rotation: int) -> Tuple[Polygon, Polygon]:
    """Cut the polygon in two along the bridge from vertex 0 to vertex n // 2.

    The vertex list is first rotated left by ``rotation``. Both halves share
    the bridge edge: ``left`` is ``v0..v_half`` and ``right`` is
    ``v0, v_half..v_{n-1}``.
    """

    n = len(polygon)
    if n < 4:
        raise ValueError(f"Only polygons with four or more vertices can be split, got {n}.")

    half = n // 2
    vertices = polygon.rotated(rotation).vertices
    bridged = vertices[:half] + (vertices[half], vertices[0]) + vertices[half:]
    return Polygon(bridged[: half + 1]), Polygon(bridged[half + 1 :])


def centroid_by_triangulation(polygon: Polygon, cache: Optional[CentroidCache] = None) -> Point:
    """Return the centroid by recursive balanced splitting.

    Each split divides the polygon into two pieces whose centroids lie on a
    line through the centroid of the whole. Two splits offset by one vertex
    give two such lines, and their intersection is the result. Polygons of
    three or fewer vertices use ``center_location``.

    Pass a dict as ``cache`` to reuse sub-results shared between the two
    splits; the result does not change.

    Exact in real arithmetic. In floating point the two lines become nearly
    parallel as the vertex count grows, so precision degrades for large
    polygons.

    Raises ParallelLinesError when the two connecting lines do not intersect
    in a single point.
    """

    if len(polygon) <= 3:
        return center_location(polygon)

    key = polygon.vertices
    if cache is not None and key in cache:
        return cache[key]

    left0, right0 = split_polygon(polygon, 0)
    left1, right1 = split_polygon(polygon, 1)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Splitting %d vertices into (%d, %d) and (%d, %d)",
            len(polygon),
            len(left0),
            len(right0),
            len(left1),
            len(right1),
        )

    first_line = (
        centroid_by_triangulation(left0, cache),
        centroid_by_triangulation(right0, cache),
    )
    second_line = (
        centroid_by_triangulation(left1, cache),
        centroid_by_triangulation(right1, cache),
    )
    result = line_intersection(first_line, second_line)

    if cache is not None:
        cache[key] = result
    return result


def quadrilateral_centroid(polygon: Polygon) -> Point:
    """Return the exact centroid of a quadrilateral.

    Fan-triangulate from vertex 0 and from vertex 1; the centroids of each
    pair of triangles define a line through the quadrilateral's centroid.
    """

    if len(polygon) != 4:
        raise ValueError(f"A quadrilateral requires exactly four vertices, got {len(polygon)}.")

    lines = []
    for shift in (0, 1):
        first, *rest = polygon.rotated(shift).vertices
        centers = [
            center_location(Polygon([first, a, b])) for a, b in zip(rest, rest[1:])
        ]
        lines.append((centers[0], centers[1]))

    return line_intersection(lines[0], lines[1])


@dataclass(frozen=True)
class CentroidComparison:
    """Centroids of one polygon computed by every available method."""

    vertex_mean: Point
    triangulated: Point
    area_weighted: Optional[Point]
    tolerance: float = DEFAULT_TOLERANCE

    @property
    def matches_vertex_mean(self) -> bool:
        return self.triangulated.isclose(self.vertex_mean, self.tolerance)

    @property
    def matches_area(self) -> bool:
        """True when the shoelace centroid exists and agrees with the recursive one."""

        if self.area_weighted is None:
            return False
        return self.triangulated.isclose(self.area_weighted, self.tolerance)


def compare_centroids(polygon: Polygon, tolerance: float = DEFAULT_TOLERANCE) -> CentroidComparison:
    """Compute all centroids of the polygon for cross-checking."""

    cache: CentroidCache = {}
    triangulated = centroid_by_triangulation(polygon, cache)
    logger.debug("Cached %d sub-polygon centroids for %d vertices", len(cache), len(polygon))

    try:
        reference: Optional[Point] = area_centroid(polygon)
    except ValueError:
        logger.info("Polygon with %d vertices has zero area; no area-weighted centroid", len(polygon))
        reference = None

    return CentroidComparison(
        vertex_mean=center_location(polygon),
        triangulated=triangulated,
        area_weighted=reference,
        tolerance=tolerance,
    )
