"""
Altair network chart for a filtered graph view.

Encodings
- Links: rules from source to target position, colored with the edge's experiment color;
  tooltip shows relationship and experiment.
- Nodes: circles colored by ``palette[len(model) % len(palette)]``; tooltip ``"model: label"``.

An empty view renders a text placeholder instead of an empty plot.
"""

from __future__ import annotations

from collections.abc import Sequence

import altair as alt
import polars as pl

from relgraph.core.constants import PALETTE
from relgraph.core.schema import FilteredGraph

from .layout import attach_positions, compute_circular_layout, graph_frames

__all__ = ["node_color", "placeholder_chart", "network_chart"]


def node_color(model: str, palette: Sequence[str] = PALETTE) -> str:
    """Color for a node of ``model``.

    Examples:
        >>> node_color("m1")
        '#45B7D1'
    """
    return palette[len(model) % len(palette)]


def placeholder_chart(message: str) -> alt.Chart:
    return alt.Chart(alt.Data(values=[{}])).mark_text(size=14).encode(text=alt.value(message))


def network_chart(
    view: FilteredGraph,
    *,
    palette: Sequence[str] = PALETTE,
    node_size: int = 60,
    show_labels: bool = False,
    width: int = 700,
    height: int = 700,
) -> alt.TopLevelMixin:
    """Build a layered rule + point chart for ``view``.

    Args:
        view (FilteredGraph): Nodes and links to draw.
        palette (Sequence[str]): Palette used for node colors.
        node_size (int): Circle area for nodes.
        show_labels (bool): Draw node labels next to points.
        width (int): Chart width in pixels.
        height (int): Chart height in pixels.

    Returns:
        alt.TopLevelMixin: Layer chart, or a text placeholder when the view is empty.
    """
    if view.is_empty:
        return placeholder_chart("No visible nodes").properties(width=width, height=height)

    nodes, links = graph_frames(view)
    layout = compute_circular_layout(nodes.get_column("id").to_list())
    nodes_xy, links_xy = attach_positions(nodes, links, layout)
    nodes_xy = nodes_xy.with_columns(
        pl.col("model")
        .map_elements(lambda m: node_color(m, palette), return_dtype=pl.Utf8)
        .alias("node_color"),
        pl.concat_str([pl.col("model"), pl.col("label")], separator=": ").alias("title"),
    )

    axis_x = alt.X("x1:Q", axis=None)
    axis_y = alt.Y("y1:Q", axis=None)
    edges_layer = (
        alt.Chart(alt.Data(values=links_xy.to_dicts()))
        .mark_rule(opacity=0.8)
        .encode(
            x=axis_x,
            y=axis_y,
            x2="x2:Q",
            y2="y2:Q",
            color=alt.Color("color:N", scale=None),
            tooltip=[
                alt.Tooltip("label:N", title="relationship"),
                alt.Tooltip("experiment:N"),
            ],
        )
    )
    nodes_layer = (
        alt.Chart(alt.Data(values=nodes_xy.to_dicts()))
        .mark_circle(size=node_size, opacity=1.0)
        .encode(
            x=alt.X("x:Q", axis=None),
            y=alt.Y("y:Q", axis=None),
            color=alt.Color("node_color:N", scale=None),
            tooltip=[alt.Tooltip("title:N", title="node")],
        )
    )
    layers: list[alt.Chart] = [edges_layer, nodes_layer]
    if show_labels:
        layers.append(
            alt.Chart(alt.Data(values=nodes_xy.to_dicts()))
            .mark_text(align="left", dx=6, fontSize=10)
            .encode(x="x:Q", y="y:Q", text="label:N")
        )
    return alt.layer(*layers).properties(width=width, height=height)
