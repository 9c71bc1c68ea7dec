"""
Shared UI helper utilities for the relgraph Streamlit application.

This module centralizes small cross-cutting helpers (status messages, chip styling,
quick summary counts) used by multiple UI components. Keeping these here avoids
circular imports and makes the page modules leaner.

Notes:
    - All functions include Google-style docstrings.
    - This module contains no Streamlit state manipulation itself.
"""

from __future__ import annotations

from relgraph.core.schema import FilteredGraph, FullGraph

NO_GRAPH_MESSAGE = 'Please click "Visualize" to load data.'
ALL_FILTERED_MESSAGE = "All nodes are filtered out. Please select at least one experiment."


def status_message(full: FullGraph, view: FilteredGraph, *, is_loading: bool) -> str | None:
    """Return the placeholder message for the graph area, if any.

    An empty view has two causes that must read differently: nothing loaded yet, or every
    experiment hidden. The full graph tells them apart.

    Args:
        full (FullGraph): Current full graph (empty when nothing is loaded).
        view (FilteredGraph): Current filtered view.
        is_loading (bool): Whether a load is in flight.

    Returns:
        str | None: Message to show, or None when the chart should be drawn.
    """
    if is_loading:
        return None
    if full.is_empty:
        return NO_GRAPH_MESSAGE
    if not view.nodes:
        return ALL_FILTERED_MESSAGE
    return None


def chip_style(color: str, visible: bool) -> str:
    """Inline CSS for a legend chip; hidden experiments are dimmed and outlined.

    Args:
        color (str): Experiment color.
        visible (bool): Whether the experiment is currently shown.

    Returns:
        str: CSS declarations for a ``<span>`` chip.
    """
    opacity = 1.0 if visible else 0.4
    border = "none" if visible else "1px solid #aaa"
    return (
        f"background-color:{color};color:white;opacity:{opacity};border:{border};"
        "border-radius:12px;padding:2px 10px;margin:2px;display:inline-block;font-size:0.85em"
    )


def compute_graph_summary(full: FullGraph, view: FilteredGraph) -> dict[str, int]:
    """Count nodes/edges in the full graph and the visible view.

    Returns:
        dict[str, int]: Keys "nodes", "edges", "experiments", "visible_nodes", "visible_links".
    """
    return {
        "nodes": len(full.nodes),
        "edges": len(full.edges),
        "experiments": len(full.experiment_color_map),
        "visible_nodes": len(view.nodes),
        "visible_links": len(view.links),
    }
