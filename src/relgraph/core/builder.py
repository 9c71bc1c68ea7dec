"""
Graph building from normalized edge candidates.

Steps
1. One pass over candidates collecting distinct node ids and distinct experiments, both in
   first-seen order (dict keys, not sets, so color assignment is reproducible).
2. Assign ``palette[i % len(palette)]`` to the i-th distinct experiment.
3. Materialize nodes by splitting each id on the first separator.
4. Materialize edges with a fresh ``e-<uuid4>`` id and the experiment color.

Edges are never deduplicated; identical candidates become distinct edges. Empty input yields an
empty graph.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Sequence

from .constants import EDGE_ID_PREFIX, PALETTE
from .errors import GraphError
from .schema import Edge, EdgeCandidate, FullGraph, Node, split_node_id

__all__ = ["assign_colors", "build_graph", "new_edge_id"]


def new_edge_id() -> str:
    return f"{EDGE_ID_PREFIX}{uuid.uuid4()}"


def assign_colors(experiments: Iterable[str], palette: Sequence[str] = PALETTE) -> dict[str, str]:
    """Map experiments (already in first-seen order) to palette colors round-robin.

    Raises:
        GraphError: If the palette is empty.

    Examples:
        >>> assign_colors(["e1", "e2"], ["#000", "#fff"])
        {'e1': '#000', 'e2': '#fff'}
        >>> assign_colors(["a", "b", "c"], ["#000", "#fff"])["c"]
        '#000'
    """
    if not palette:
        raise GraphError("palette must contain at least one color")
    colors: dict[str, str] = {}
    for exp in experiments:
        if exp not in colors:
            colors[exp] = palette[len(colors) % len(palette)]
    return colors


def build_graph(
    candidates: Iterable[EdgeCandidate], palette: Sequence[str] = PALETTE
) -> FullGraph:
    """Build the full graph (nodes, edges, experiment colors) from candidates.

    Args:
        candidates (Iterable[EdgeCandidate]): Accepted rows in source order.
        palette (Sequence[str]): Colors reused round-robin across experiments.

    Returns:
        FullGraph: Graph whose edge endpoints all exist in its node set.

    Raises:
        GraphError: If the palette is empty.
    """
    if not palette:
        raise GraphError("palette must contain at least one color")

    cands = list(candidates)
    seen_nodes: dict[str, None] = {}
    seen_experiments: dict[str, None] = {}
    for c in cands:
        seen_nodes.setdefault(c.source, None)
        seen_nodes.setdefault(c.target, None)
        seen_experiments.setdefault(c.experiment, None)

    color_map = assign_colors(seen_experiments, palette)

    nodes = []
    for nid in seen_nodes:
        model, label = split_node_id(nid)
        nodes.append(Node(id=nid, label=label, model=model))

    edges = [
        Edge(
            id=new_edge_id(),
            source=c.source,
            target=c.target,
            label=c.relationship,
            experiment=c.experiment,
            color=color_map[c.experiment],
        )
        for c in cands
    ]

    return FullGraph(nodes=tuple(nodes), edges=tuple(edges), experiment_color_map=color_map)
