import pytest

from geom import ParallelLinesError, Point, Polygon, area_centroid, line_intersection, signed_area


def test_diagonals_of_square_meet_in_middle():
    result = line_intersection(
        (Point(0.0, 0.0), Point(2.0, 2.0)),
        (Point(0.0, 2.0), Point(2.0, 0.0)),
    )
    assert result == Point(1.0, 1.0)


def test_lines_are_infinite_not_segments():
    # the segments do not touch, their lines meet at (3, 0)
    result = line_intersection(
        (Point(0.0, 0.0), Point(1.0, 0.0)),
        (Point(3.0, -1.0), Point(3.0, 5.0)),
    )
    assert result == Point(3.0, 0.0)


def test_parallel_lines_raise():
    with pytest.raises(ParallelLinesError):
        line_intersection(
            (Point(0.0, 0.0), Point(1.0, 1.0)),
            (Point(0.0, 1.0), Point(1.0, 2.0)),
        )


def test_coincident_lines_raise():
    with pytest.raises(ParallelLinesError):
        line_intersection(
            (Point(0.0, 0.0), Point(1.0, 1.0)),
            (Point(2.0, 2.0), Point(3.0, 3.0)),
        )


def test_line_through_a_single_point_raises():
    with pytest.raises(ParallelLinesError):
        line_intersection(
            (Point(1.0, 1.0), Point(1.0, 1.0)),
            (Point(0.0, 1.0), Point(1.0, 2.0)),
        )


def test_parallel_lines_error_is_a_value_error():
    assert issubclass(ParallelLinesError, ValueError)


def test_empty_polygon_is_rejected():
    with pytest.raises(ValueError):
        Polygon([])


def test_polygon_copies_vertices_into_tuple():
    source = [Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)]
    polygon = Polygon(source)
    source.append(Point(5.0, 5.0))
    assert len(polygon) == 3
    assert isinstance(polygon.vertices, tuple)


def test_from_pairs_and_as_pairs():
    polygon = Polygon.from_pairs([(0, 0), (2, 0), (2, 1)])
    assert polygon.vertices[1] == Point(2.0, 0.0)
    assert polygon.as_pairs() == [(0.0, 0.0), (2.0, 0.0), (2.0, 1.0)]


def test_rotated_shifts_left_and_wraps():
    polygon = Polygon.from_pairs([(0, 0), (1, 0), (1, 1), (0, 1)])
    assert polygon.rotated(1).as_pairs() == [(1, 0), (1, 1), (0, 1), (0, 0)]
    assert polygon.rotated(5) == polygon.rotated(1)
    assert polygon.rotated(0) == polygon


def test_translated_and_scaled():
    polygon = Polygon.from_pairs([(1, 2), (3, 4)])
    assert polygon.translated(1, -1).as_pairs() == [(2, 1), (4, 3)]
    assert polygon.scaled(2).as_pairs() == [(2, 4), (6, 8)]


def test_points_are_immutable_and_hashable():
    point = Point(1.0, 2.0)
    with pytest.raises(AttributeError):
        point.x = 3.0
    assert {point: "a"}[Point(1.0, 2.0)] == "a"


def test_point_isclose():
    assert Point(1.0, 1.0).isclose(Point(1.0 + 1e-12, 1.0 - 1e-12))
    assert not Point(1.0, 1.0).isclose(Point(1.001, 1.0))
    assert Point(1.0, 1.0).isclose(Point(1.001, 1.0), tolerance=1e-2)


def test_signed_area_follows_winding():
    square = Polygon.from_pairs([(0, 0), (1, 0), (1, 1), (0, 1)])
    assert signed_area(square) == pytest.approx(1.0)
    assert signed_area(Polygon(tuple(reversed(square.vertices)))) == pytest.approx(-1.0)


def test_area_centroid_of_pentagon():
    pentagon = Polygon.from_pairs([(0, 0), (4, 0), (5, 3), (2, 5), (-1, 2)])
    result = area_centroid(pentagon)
    assert (result.x, result.y) == pytest.approx((250 / 120, 251 / 120))


def test_area_centroid_rejects_zero_area():
    with pytest.raises(ValueError):
        area_centroid(Polygon.from_pairs([(0, 0), (1, 1)]))
