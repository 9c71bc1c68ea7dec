"""
Polars frames and node layout for filtered graph views.

Overview
- graph_frames(): FilteredGraph -> (nodes, links) DataFrames with stable, explicit schemas
  (empty views still carry their columns).
- compute_circular_layout(): evenly spaced positions on a circle, in the given node order.
- attach_positions(): join layout coordinates onto nodes and link endpoints.

Read-only by contract: these helpers never mutate the graph models.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import polars as pl

from relgraph.core.schema import FilteredGraph

__all__ = [
    "NODE_SCHEMA",
    "LINK_SCHEMA",
    "graph_frames",
    "compute_circular_layout",
    "attach_positions",
]

NODE_SCHEMA: dict[str, pl.DataType] = {
    "id": pl.Utf8(),
    "label": pl.Utf8(),
    "model": pl.Utf8(),
}

LINK_SCHEMA: dict[str, pl.DataType] = {
    "id": pl.Utf8(),
    "source": pl.Utf8(),
    "target": pl.Utf8(),
    "label": pl.Utf8(),
    "experiment": pl.Utf8(),
    "color": pl.Utf8(),
}


def graph_frames(view: FilteredGraph) -> tuple[pl.DataFrame, pl.DataFrame]:
    """Return (nodes, links) DataFrames for a filtered view."""
    payload = view.to_payload()
    nodes = pl.DataFrame(payload["nodes"], schema=NODE_SCHEMA)
    links = pl.DataFrame(payload["links"], schema=LINK_SCHEMA)
    return nodes, links


def compute_circular_layout(node_ids: Sequence[str], *, radius: float = 1.0) -> pl.DataFrame:
    """Place nodes evenly on a circle.

    Args:
        node_ids (Sequence[str]): Node ids in placement order (duplicates are kept once).
        radius (float): Circle radius.

    Returns:
        pl.DataFrame: Columns ``id`` (str), ``x`` (f64), ``y`` (f64).
    """
    ids = list(dict.fromkeys(node_ids))
    n = len(ids)
    if n == 0:
        return pl.DataFrame(schema={"id": pl.Utf8, "x": pl.Float64, "y": pl.Float64})
    step = 2.0 * math.pi / n
    return (
        pl.DataFrame({"id": ids}, schema={"id": pl.Utf8})
        .with_row_index(name="_k")
        .with_columns((pl.col("_k").cast(pl.Float64) * step).alias("_theta"))
        .with_columns(
            (pl.col("_theta").cos() * radius).alias("x"),
            (pl.col("_theta").sin() * radius).alias("y"),
        )
        .select(["id", "x", "y"])
    )


def attach_positions(
    nodes: pl.DataFrame, links: pl.DataFrame, layout: pl.DataFrame
) -> tuple[pl.DataFrame, pl.DataFrame]:
    """Join layout coordinates onto nodes (x, y) and links (x1, y1, x2, y2)."""
    nodes_xy = nodes.join(layout, on="id", how="left")
    pos = layout.rename({"id": "_nid"})
    links_xy = links.join(
        pos.rename({"x": "x1", "y": "y1"}), left_on="source", right_on="_nid", how="left"
    ).join(pos.rename({"x": "x2", "y": "y2"}), left_on="target", right_on="_nid", how="left")
    return nodes_xy, links_xy
