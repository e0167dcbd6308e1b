"""Conversion helpers between pandas tables and polygons."""
from __future__ import annotations

from typing import Dict, Final, Mapping, Optional

import pandas as pd

from centroid import CentroidComparison
from geom import Point, Polygon

REQUIRED_COLUMNS: Final[tuple[str, str]] = ("x", "y")


def normalize_columns(df: pd.DataFrame, mapping: Mapping[str, str]) -> pd.DataFrame:
    """Rename source columns onto x/y and coerce them to floats."""

    missing_targets = set(REQUIRED_COLUMNS).difference(mapping.keys())
    if missing_targets:
        raise ValueError(f"Missing mappings for: {', '.join(sorted(missing_targets))}.")

    rename_map: Dict[str, str] = {}
    for target, source in mapping.items():
        if source not in df.columns:
            raise ValueError(f"Source column '{source}' not found in the vertex table.")
        rename_map[source] = target

    normalized = df.rename(columns=rename_map)[list(REQUIRED_COLUMNS)].copy()

    for coordinate in REQUIRED_COLUMNS:
        normalized[coordinate] = pd.to_numeric(normalized[coordinate], errors="coerce")
        if normalized[coordinate].isna().any():
            raise ValueError(
                f"Column '{coordinate}' contains non-numeric values after conversion."
            )

    return normalized.astype(float)


def polygon_from_frame(
    df: pd.DataFrame, mapping: Optional[Mapping[str, str]] = None
) -> Polygon:
    """Build a polygon from the rows of a vertex table, in row order."""

    if mapping is None:
        mapping = {column: column for column in REQUIRED_COLUMNS}
    normalized = normalize_columns(df, mapping)
    if normalized.empty:
        raise ValueError("Vertex table is empty. Add at least one vertex.")

    return Polygon(
        [Point(float(row.x), float(row.y)) for row in normalized.itertuples(index=False)]
    )


def polygon_to_frame(polygon: Polygon) -> pd.DataFrame:
    return pd.DataFrame(polygon.as_pairs(), columns=list(REQUIRED_COLUMNS))


def comparison_frame(comparison: CentroidComparison) -> pd.DataFrame:
    """Tabulate every centroid method with its distance from the recursive result."""

    rows = [
        ("triangulation", comparison.triangulated),
        ("vertex_mean", comparison.vertex_mean),
        ("area_weighted", comparison.area_weighted),
    ]
    records = []
    for method, point in rows:
        if point is None:
            records.append({"method": method, "x": None, "y": None, "distance": None})
            continue
        distance = (
            (point.x - comparison.triangulated.x) ** 2
            + (point.y - comparison.triangulated.y) ** 2
        ) ** 0.5
        records.append({"method": method, "x": point.x, "y": point.y, "distance": distance})

    return pd.DataFrame.from_records(records, columns=["method", "x", "y", "distance"])
