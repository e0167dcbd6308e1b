"""Streamlit app for comparing polygon centroid methods."""
from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

try:
    import matplotlib.pyplot as plt
except ModuleNotFoundError as exc:
    st.error(
        "matplotlib が必要です。環境にインストールされていない場合は `pip install matplotlib` を実行してください。"
    )
    st.stop()

from centroid import CentroidComparison, compare_centroids, split_polygon
from components import render_comparison_metrics, sidebar_controls
from geom import Polygon
from shapes import SampleShape, load_sample_shapes
from storage import comparison_frame, polygon_from_frame, polygon_to_frame

logger = logging.getLogger(__name__)

st.set_page_config(page_title="多角形の重心", layout="wide")
st.title("📐 多角形の重心計算")


def init_session_state(shape: SampleShape) -> None:
    """Reset the editable vertex table whenever another sample is chosen."""

    if st.session_state.get("shape_name") != shape.name:
        st.session_state["shape_name"] = shape.name
        st.session_state["vertices"] = polygon_to_frame(shape.polygon)


def render_plot(polygon: Polygon, comparison: CentroidComparison) -> None:
    """Draw the polygon, its two top-level splits and every centroid."""

    xs, ys = zip(*polygon.as_pairs())
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.fill(xs, ys, color="tab:blue", alpha=0.15)
    ax.plot(xs + xs[:1], ys + ys[:1], color="tab:blue")

    if len(polygon) >= 4:
        for rotation, style in ((0, "--"), (1, ":")):
            _, right = split_polygon(polygon, rotation)
            bridge = (right.vertices[0], right.vertices[1])
            ax.plot(
                [bridge[0].x, bridge[1].x],
                [bridge[0].y, bridge[1].y],
                color="tab:gray",
                linestyle=style,
                label=f"bridge (rotation {rotation})",
            )

    ax.scatter(
        [comparison.triangulated.x],
        [comparison.triangulated.y],
        c="tab:red",
        marker="x",
        s=80,
        label="triangulation",
    )
    ax.scatter(
        [comparison.vertex_mean.x],
        [comparison.vertex_mean.y],
        c="tab:green",
        marker="o",
        label="vertex mean",
    )
    if comparison.area_weighted is not None:
        ax.scatter(
            [comparison.area_weighted.x],
            [comparison.area_weighted.y],
            facecolors="none",
            edgecolors="tab:purple",
            marker="s",
            s=80,
            label="area weighted",
        )

    ax.set_aspect("equal")
    ax.legend()
    ax.set_title("Centroids")

    st.pyplot(fig)
    plt.close(fig)


def main() -> None:
    """Application entry point."""

    logging.basicConfig(level=logging.INFO)

    shape, tolerance = sidebar_controls(load_sample_shapes())
    init_session_state(shape)

    st.subheader("頂点")
    st.write("頂点を順番に編集できます。最後の頂点は最初の頂点につながります。")
    edited: pd.DataFrame = st.data_editor(
        st.session_state["vertices"],
        num_rows="dynamic",
        key=f"editor_{shape.name}",
    )

    try:
        polygon = polygon_from_frame(edited.dropna(how="all"))
        comparison = compare_centroids(polygon, tolerance)
    except ValueError as exc:
        logger.info("Rejected polygon: %s", exc)
        st.error(f"計算エラー: {exc}")
        return

    st.subheader("重心")
    render_comparison_metrics(comparison)
    st.dataframe(comparison_frame(comparison))

    if len(polygon) >= 3:
        render_plot(polygon, comparison)
    else:
        st.info("3頂点未満の場合、結果は頂点の平均です。")


if __name__ == "__main__":
    main()
