import pandas as pd
import pytest

from centroid import compare_centroids
from geom import Point, Polygon
from storage import comparison_frame, normalize_columns, polygon_from_frame, polygon_to_frame


def test_polygon_from_frame_keeps_row_order():
    df = pd.DataFrame({"x": [0, 4, 4], "y": [0, 0, 3]})
    polygon = polygon_from_frame(df)
    assert polygon.vertices == (Point(0.0, 0.0), Point(4.0, 0.0), Point(4.0, 3.0))


def test_polygon_from_frame_with_mapping():
    df = pd.DataFrame({"px": ["1", "2"], "py": ["3.5", "4"], "label": ["a", "b"]})
    polygon = polygon_from_frame(df, {"x": "px", "y": "py"})
    assert polygon.as_pairs() == [(1.0, 3.5), (2.0, 4.0)]


def test_missing_mapping_target_raises():
    df = pd.DataFrame({"x": [1.0]})
    with pytest.raises(ValueError, match="Missing mappings"):
        normalize_columns(df, {"x": "x"})


def test_missing_source_column_raises():
    df = pd.DataFrame({"x": [1.0]})
    with pytest.raises(ValueError, match="not found"):
        polygon_from_frame(df)


def test_non_numeric_values_raise():
    df = pd.DataFrame({"x": [1.0, "left"], "y": [2.0, 3.0]})
    with pytest.raises(ValueError, match="non-numeric"):
        polygon_from_frame(df)


def test_empty_table_raises():
    df = pd.DataFrame({"x": [], "y": []})
    with pytest.raises(ValueError, match="empty"):
        polygon_from_frame(df)


def test_polygon_to_frame_round_trip():
    polygon = Polygon.from_pairs([(-3, 1), (3, 1), (3, 4), (-3, 4)])
    df = polygon_to_frame(polygon)
    assert list(df.columns) == ["x", "y"]
    assert polygon_from_frame(df) == polygon


def test_comparison_frame_lists_every_method():
    polygon = Polygon.from_pairs([(0, 0), (4, 0), (5, 3), (2, 5), (-1, 2)])
    df = comparison_frame(compare_centroids(polygon))
    assert df["method"].tolist() == ["triangulation", "vertex_mean", "area_weighted"]
    assert df.loc[0, "distance"] == 0.0
    assert df.loc[2, "distance"] == pytest.approx(0.0, abs=1e-9)
    assert df.loc[1, "distance"] > 0.1


def test_comparison_frame_without_area():
    df = comparison_frame(compare_centroids(Polygon.from_pairs([(0, 0), (2, 2)])))
    assert df.loc[2, ["x", "y", "distance"]].isna().all()
