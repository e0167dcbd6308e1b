"""Reusable Streamlit UI components."""
from __future__ import annotations

import math
from typing import Sequence, Tuple

import streamlit as st

from centroid import DEFAULT_TOLERANCE, CentroidComparison
from shapes import SampleShape


def sidebar_controls(shapes: Sequence[SampleShape]) -> Tuple[SampleShape, float]:
    """Render sidebar widgets and return the chosen shape and tolerance."""

    st.sidebar.header("設定")
    names = [shape.name for shape in shapes]
    selected = st.sidebar.selectbox("サンプル多角形", names, index=0)
    exponent = st.sidebar.slider(
        "許容誤差 (10^x)",
        min_value=-15,
        max_value=-1,
        value=int(round(math.log10(DEFAULT_TOLERANCE))),
    )
    shape = shapes[names.index(selected)]
    return shape, 10.0 ** exponent


def render_comparison_metrics(comparison: CentroidComparison) -> None:
    """Display one metric card per centroid method."""

    col_tri, col_mean, col_area = st.columns(3)
    col_tri.metric("分割再帰法", _format_point(comparison.triangulated))
    col_mean.metric(
        "頂点平均",
        _format_point(comparison.vertex_mean),
        delta="一致" if comparison.matches_vertex_mean else "不一致",
        delta_color="normal" if comparison.matches_vertex_mean else "inverse",
    )
    if comparison.area_weighted is None:
        col_area.metric("面積重心", "N/A")
        return
    col_area.metric(
        "面積重心",
        _format_point(comparison.area_weighted),
        delta="一致" if comparison.matches_area else "不一致",
        delta_color="normal" if comparison.matches_area else "inverse",
    )


def _format_point(point) -> str:
    return f"({point.x:.6g}, {point.y:.6g})"
