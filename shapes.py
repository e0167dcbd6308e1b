"""Named sample polygons used by the app and the test suite."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final, List, Sequence

from geom import Point, Polygon

SHAPE_NAMES: Final[tuple[str, ...]] = (
    "TRIANGLE",
    "RECTANGLE",
    "PENTAGON",
    "HEXAGON",
    "OCTAGON",
)
"""Sample shape labels in display order."""


@dataclass(frozen=True)
class SampleShape:
    """Named polygon with a known centroid."""

    name: str
    polygon: Polygon


def _polygon(vertices: Sequence[tuple[float, float]]) -> Polygon:
    return Polygon.from_pairs(vertices)


def regular_polygon(n: int, radius: float = 1.0, center: Point = Point(0.0, 0.0)) -> Polygon:
    """Return a counter-clockwise regular n-gon inscribed in a circle."""

    if n < 3:
        raise ValueError(f"A regular polygon requires at least three vertices, got {n}.")
    if radius <= 0:
        raise ValueError("Radius must be positive.")

    return Polygon(
        [
            Point(
                center.x + radius * math.cos(2 * math.pi * i / n),
                center.y + radius * math.sin(2 * math.pi * i / n),
            )
            for i in range(n)
        ]
    )


def load_sample_shapes() -> List[SampleShape]:
    """Create the fixed sample polygons."""

    triangle = _polygon(((0.0, 0.0), (6.0, 0.0), (1.0, 3.0)))

    rectangle = _polygon(((-3.0, 1.0), (3.0, 1.0), (3.0, 4.0), (-3.0, 4.0)))

    # Not point-symmetric: vertex mean and area centroid differ.
    pentagon = _polygon(
        (
            (0.0, 0.0),
            (4.0, 0.0),
            (5.0, 3.0),
            (2.0, 5.0),
            (-1.0, 2.0),
        )
    )

    hexagon = _polygon(
        (
            (1.0, 2.0),
            (2.0, 0.0),
            (1.0, -2.0),
            (-1.0, -2.0),
            (-2.0, 0.0),
            (-1.0, 2.0),
        )
    )

    octagon = _polygon(
        (
            (3.0, 0.0),
            (5.0, 2.0),
            (5.0, 5.0),
            (3.0, 7.0),
            (0.0, 7.0),
            (-2.0, 5.0),
            (-2.0, 2.0),
            (0.0, 0.0),
        )
    )

    return [
        SampleShape("TRIANGLE", triangle),
        SampleShape("RECTANGLE", rectangle),
        SampleShape("PENTAGON", pentagon),
        SampleShape("HEXAGON", hexagon),
        SampleShape("OCTAGON", octagon),
    ]


def get_sample_shape(name: str) -> SampleShape:
    """Return the sample shape with the given label."""

    for shape in load_sample_shapes():
        if shape.name == name:
            return shape
    raise KeyError(f"Unknown sample shape '{name}'. Choose one of: {', '.join(SHAPE_NAMES)}.")
