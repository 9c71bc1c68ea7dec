"""
relgraph.viz — Read-only layout and chart helpers for filtered graph views.

## Responsibilities
- Convert FilteredGraph views into Polars frames with stable schemas.
- Compute a simple circular layout and join positions onto nodes and links.
- Build Altair network charts (links colored by experiment, nodes colored by model).

## Import DAG discipline
- Depends on: relgraph.core, polars, altair (and stdlib).
- Must not fetch data or touch session state.
"""

from __future__ import annotations

from .layout import attach_positions, compute_circular_layout, graph_frames
from .network import network_chart, node_color, placeholder_chart

__all__ = [
    "graph_frames",
    "compute_circular_layout",
    "attach_positions",
    "network_chart",
    "node_color",
    "placeholder_chart",
]
