"""
Core package for relgraph: row normalization, graph building, visibility filtering and the
session state machine.

## Contracts
- Schema — pydantic models (HeaderConfig, EdgeCandidate, Node, Edge, FullGraph, FilteredGraph).
- Normalize — raw row -> EdgeCandidate or rejection (logged, never raised).
- Builder — candidates -> FullGraph with first-seen, round-robin experiment colors.
- Visibility — (FullGraph, selection) -> FilteredGraph, pure and deterministic.
- Pipeline — load/toggle plus GraphSession (Empty/Loaded, last-writer-wins loads).

## Notes
- Zero-IO policy: stdlib + pydantic only; fetching/parsing live in relgraph.io.
- Node ids are ``model:node_name``; labels split on the first separator only.

## Examples
```python
from relgraph.core import GraphSession

session = GraphSession()
ticket = session.begin_load()
session.complete_load(ticket, [
    {"model": "m1", "from_node": "a", "to_node": "b", "relationship": "r1", "experiment": "e1"},
])
session.view().to_payload()["links"][0]["source"]  # 'm1:a'
```
"""

from __future__ import annotations

from .builder import assign_colors, build_graph
from .constants import NODE_ID_SEPARATOR, PALETTE, UNDEFINED_EXPERIMENT
from .errors import GraphError, SchemaError, StateError
from .normalize import normalize_row, normalize_rows
from .pipeline import EmptyState, GraphSession, GraphState, LoadedState, LoadResult, load, toggle
from .schema import Edge, EdgeCandidate, FilteredGraph, FullGraph, HeaderConfig, Node
from .visibility import FilterCache, VisibilitySelection, filter_graph, selection_from_colors

__all__ = [
    "NODE_ID_SEPARATOR",
    "PALETTE",
    "UNDEFINED_EXPERIMENT",
    "GraphError",
    "SchemaError",
    "StateError",
    "HeaderConfig",
    "EdgeCandidate",
    "Node",
    "Edge",
    "FullGraph",
    "FilteredGraph",
    "normalize_row",
    "normalize_rows",
    "assign_colors",
    "build_graph",
    "VisibilitySelection",
    "FilterCache",
    "filter_graph",
    "selection_from_colors",
    "LoadResult",
    "EmptyState",
    "LoadedState",
    "GraphState",
    "GraphSession",
    "load",
    "toggle",
]
