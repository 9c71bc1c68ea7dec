from __future__ import annotations

from collections.abc import Mapping, Sequence

import altair as alt
import polars as pl

from relgraph.core.constants import PALETTE
from relgraph.core.schema import FilteredGraph, FullGraph
from relgraph.viz.layout import graph_frames
from relgraph.viz.network import network_chart, placeholder_chart


# Uniform chart defaults for a professional look
def _apply_chart_defaults(ch: alt.TopLevelMixin) -> alt.TopLevelMixin:
    try:
        return ch.configure_view(strokeOpacity=0).configure_title(fontSize=14)
    except Exception:
        # If configuration fails (e.g., non-top-level), return chart as-is
        return ch


# ----------------------------
# Graph view
# ----------------------------


def graph_chart(
    view: FilteredGraph,
    *,
    palette: Sequence[str] = PALETTE,
    show_labels: bool = False,
    node_size: int = 60,
    height: int = 700,
) -> alt.TopLevelMixin:
    """Network chart for the filtered view (delegates to relgraph.viz.network)."""
    return _apply_chart_defaults(
        network_chart(
            view,
            palette=palette,
            show_labels=show_labels,
            node_size=node_size,
            height=height,
        )
    )


def empty_graph_chart(message: str) -> alt.TopLevelMixin:
    return _apply_chart_defaults(placeholder_chart(message))


# ----------------------------
# Legend
# ----------------------------


def legend_entries(
    graph: FullGraph, selection: Mapping[str, bool]
) -> list[dict[str, object]]:
    """Return one legend row per experiment, in color-assignment order.

    Each row has: experiment, color, visible (strictly True in the selection), edges (count
    of edges tagged with the experiment in the full graph).
    """
    _, links = graph_frames(FilteredGraph(nodes=graph.nodes, links=graph.edges))
    counts: dict[str, int] = {}
    if links.height > 0:
        agg = links.group_by("experiment").agg(pl.len().alias("n"))
        counts = dict(zip(agg.get_column("experiment").to_list(), agg.get_column("n").to_list()))
    return [
        {
            "experiment": exp,
            "color": color,
            "visible": selection.get(exp) is True,
            "edges": int(counts.get(exp, 0)),
        }
        for exp, color in graph.experiment_color_map.items()
    ]
