"""
Pydantic v2 models for header configuration, edge candidates, nodes, edges and graph views.

Responsibilities
- Define the canonical models exchanged between the normalizer, builder, filter and renderer.
- Keep field names aligned with the rendering contract: nodes expose ``id, label, model`` and
  links expose ``id, source, target, label, color, experiment``.
- Provide small read-only helpers (emptiness, experiment order, JSON payloads).

Style
- Zero-IO (stdlib + pydantic only).
- All models are frozen with ``extra="forbid"``; graphs hold tuples so a loaded graph can be
  shared between views without copying.

References
- constants: src/relgraph/core/constants.py (separator, default headers, palette)
- errors: src/relgraph/core/errors.py (SchemaError)
- tests: tests/core/*
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_HEADERS, NODE_ID_SEPARATOR
from .errors import SchemaError

__all__ = [
    "HeaderConfig",
    "EdgeCandidate",
    "Node",
    "Edge",
    "FullGraph",
    "FilteredGraph",
    "node_id",
    "split_node_id",
]


def node_id(model: str, node_name: str) -> str:
    """
    Build the node id for a (model, node name) pair.

    Examples:
        >>> node_id("m1", "a")
        'm1:a'
        >>> node_id("m1", "ns:a")
        'm1:ns:a'
    """
    return f"{model}{NODE_ID_SEPARATOR}{node_name}"


def split_node_id(nid: str) -> tuple[str, str]:
    """
    Split a node id on the first separator into (model, label).

    Any further separators stay embedded in the label. An id without a separator yields an
    empty label.

    Examples:
        >>> split_node_id("m1:ns:a")
        ('m1', 'ns:a')
    """
    model, _, label = nid.partition(NODE_ID_SEPARATOR)
    return model, label


class HeaderConfig(BaseModel):
    """
    Column names used to read each field of a raw row.

    Attributes:
        model (str): Header of the model column.
        from_node (str): Header of the source node column.
        relationship (str): Header of the relationship column.
        to_node (str): Header of the target node column.
        experiment (str): Header of the experiment column.

    Raises:
        pydantic.ValidationError: If a header name is empty or whitespace.

    Examples:
        >>> HeaderConfig().from_node
        'from_node'
        >>> HeaderConfig(model="Model").model
        'Model'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    model: str = DEFAULT_HEADERS["model"]
    from_node: str = DEFAULT_HEADERS["from_node"]
    relationship: str = DEFAULT_HEADERS["relationship"]
    to_node: str = DEFAULT_HEADERS["to_node"]
    experiment: str = DEFAULT_HEADERS["experiment"]

    @field_validator("model", "from_node", "relationship", "to_node", "experiment")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        if not v.strip():
            raise SchemaError("header names must be non-empty")
        return v


class EdgeCandidate(BaseModel):
    """
    Normalized row ready for graph building.

    Attributes:
        source (str): Source node id (``model:from_node``).
        target (str): Target node id (``model:to_node``).
        relationship (str): Relationship label.
        experiment (str): Experiment tag (``"undefined"`` when the row had none).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    source: str
    target: str
    relationship: str
    experiment: str


class Node(BaseModel):
    """Graph node identified by ``model:label``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    label: str
    model: str


class Edge(BaseModel):
    """
    Directed edge between two node ids.

    Notes:
        Edges reference nodes by id only. ``label`` carries the relationship string and
        ``color`` the experiment color resolved at build time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    source: str
    target: str
    label: str
    experiment: str
    color: str


class FullGraph(BaseModel):
    """
    Complete, unfiltered graph produced by one load.

    Attributes:
        nodes (tuple[Node, ...]): Distinct nodes in first-seen order.
        edges (tuple[Edge, ...]): All accepted edges in row order (multi-edges kept).
        experiment_color_map (Mapping[str, str]): Read-only experiment tag to color, in
            first-seen order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()
    experiment_color_map: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("experiment_color_map")
    @classmethod
    def _read_only_colors(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    @property
    def experiments(self) -> list[str]:
        """Experiment tags in color-assignment order (legend order)."""
        return list(self.experiment_color_map)

    @property
    def node_ids(self) -> set[str]:
        return {n.id for n in self.nodes}


class FilteredGraph(BaseModel):
    """
    Subgraph induced by a visibility selection.

    The ``links`` field name is what the renderer binds to; do not rename it to ``edges``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    nodes: tuple[Node, ...] = ()
    links: tuple[Edge, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.nodes and not self.links

    def to_payload(self) -> dict[str, list[dict[str, Any]]]:
        """Return ``{"nodes": [...], "links": [...]}`` as plain JSON-ready dicts."""
        return {
            "nodes": [n.model_dump() for n in self.nodes],
            "links": [e.model_dump() for e in self.links],
        }
