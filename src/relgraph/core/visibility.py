"""
Visibility filtering: derive the view induced by a per-experiment selection.

Policy
- An edge is visible iff ``selection.get(edge.experiment) is True``. Missing or False entries
  hide the edge (explicit opt-in, not default-visible).
- A node is visible iff it is an endpoint of at least one visible edge; isolated nodes never
  appear in the view.
- Output keeps the full graph's node and edge order, so the same inputs produce the same view.

filter_graph is a pure function of (graph, selection). FilterCache memoizes the most recent
call for UIs that ask for the view repeatedly between toggles.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .schema import FilteredGraph, FullGraph

__all__ = [
    "VisibilitySelection",
    "FilterCache",
    "filter_graph",
    "selection_from_colors",
]

VisibilitySelection = Mapping[str, bool]


def selection_from_colors(color_map: Mapping[str, str]) -> VisibilitySelection:
    """Initial selection: every experiment of a fresh load is visible."""
    return MappingProxyType({exp: True for exp in color_map})


def filter_graph(graph: FullGraph, selection: VisibilitySelection) -> FilteredGraph:
    """Return the nodes and links visible under ``selection``.

    Args:
        graph (FullGraph): Full graph from the last load.
        selection (VisibilitySelection): Experiment tag to visibility flag.

    Returns:
        FilteredGraph: ``{nodes, links}``; empty when every flag is False.

    Examples:
        >>> from relgraph.core.schema import Edge, Node
        >>> g = FullGraph(
        ...     nodes=(Node(id="m:a", label="a", model="m"), Node(id="m:b", label="b", model="m")),
        ...     edges=(Edge(id="e-1", source="m:a", target="m:b", label="r",
        ...                 experiment="e1", color="#FF6B6B"),),
        ...     experiment_color_map={"e1": "#FF6B6B"},
        ... )
        >>> len(filter_graph(g, {"e1": True}).links)
        1
        >>> filter_graph(g, {}).is_empty
        True
    """
    links = tuple(e for e in graph.edges if selection.get(e.experiment) is True)
    visible_ids: set[str] = set()
    for e in links:
        visible_ids.add(e.source)
        visible_ids.add(e.target)
    nodes = tuple(n for n in graph.nodes if n.id in visible_ids)
    return FilteredGraph(nodes=nodes, links=links)


class FilterCache:
    """Memoize filter_graph for the most recent (graph, selection) pair.

    The graph is compared by identity (a loaded graph is never mutated). The selection is
    reduced to the set of experiments flagged exactly True, the only thing filter_graph reads.
    """

    def __init__(self) -> None:
        self._graph: FullGraph | None = None
        self._visible: frozenset[str] | None = None
        self._view: FilteredGraph | None = None

    def get(self, graph: FullGraph, selection: VisibilitySelection) -> FilteredGraph:
        visible = frozenset(k for k, v in selection.items() if v is True)
        if self._view is not None and self._graph is graph and self._visible == visible:
            return self._view
        view = filter_graph(graph, selection)
        self._graph, self._visible, self._view = graph, visible, view
        return view

    def clear(self) -> None:
        self._graph = None
        self._visible = None
        self._view = None
