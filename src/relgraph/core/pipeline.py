"""
Pipeline orchestration and the Empty/Loaded session state machine.

Overview
- load(): raw rows -> normalize_rows -> build_graph -> (full graph, all-true selection).
- toggle(): returns a new selection with one experiment flag inverted.
- EmptyState / LoadedState: frozen state values; transitions replace the whole value.
- GraphSession: holds the current state, guards against stale loads with monotonically
  increasing tickets (last writer wins), and serves the cached filtered view.

Import DAG discipline
- Zero-IO. Fetching and parsing live in relgraph.io.read, which calls into GraphSession.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

from .builder import build_graph
from .constants import PALETTE
from .errors import GraphError, StateError
from .normalize import normalize_rows
from .schema import FilteredGraph, FullGraph, HeaderConfig
from .visibility import FilterCache, VisibilitySelection, selection_from_colors

__all__ = [
    "LoadResult",
    "EmptyState",
    "LoadedState",
    "GraphState",
    "GraphSession",
    "load",
    "toggle",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one successful load."""

    full_graph: FullGraph
    initial_selection: VisibilitySelection
    rejected_rows: int = 0


@dataclass(frozen=True)
class EmptyState:
    """No graph loaded yet."""


@dataclass(frozen=True)
class LoadedState:
    """A loaded graph with its current visibility selection.

    Attributes:
        full_graph (FullGraph): Graph of the load that produced this state.
        selection (VisibilitySelection): Read-only selection; toggles replace it.
        load_id (int): Ticket of the load that produced ``full_graph``.
    """

    full_graph: FullGraph
    selection: VisibilitySelection
    load_id: int


GraphState = Union[EmptyState, LoadedState]


def load(
    raw_rows: Iterable[Mapping[str, Any]],
    headers: HeaderConfig | None = None,
    *,
    palette: Sequence[str] = PALETTE,
) -> LoadResult:
    """Run the normalizer and builder over parsed rows.

    Rows with missing required fields are dropped; a batch where every row is dropped yields
    an empty graph, not an error.

    Examples:
        >>> res = load([{"model": "m1", "from_node": "a", "to_node": "b",
        ...              "relationship": "r1", "experiment": "e1"}])
        >>> [n.id for n in res.full_graph.nodes]
        ['m1:a', 'm1:b']
        >>> dict(res.initial_selection)
        {'e1': True}
    """
    candidates, rejected = normalize_rows(raw_rows, headers)
    graph = build_graph(candidates, palette)
    logger.info(
        "Built graph: %d nodes, %d edges, %d experiments",
        len(graph.nodes),
        len(graph.edges),
        len(graph.experiment_color_map),
    )
    return LoadResult(
        full_graph=graph,
        initial_selection=selection_from_colors(graph.experiment_color_map),
        rejected_rows=rejected,
    )


def toggle(selection: VisibilitySelection, experiment: str) -> VisibilitySelection:
    """Return a new selection with ``experiment`` inverted.

    An experiment absent from the selection counts as hidden, so toggling it makes it visible.
    This case is logged because the legend only offers experiments of the loaded graph.

    Examples:
        >>> dict(toggle({"e1": True, "e2": True}, "e2"))
        {'e1': True, 'e2': False}
        >>> dict(toggle({}, "e9"))
        {'e9': True}
    """
    if experiment not in selection:
        logger.warning("Toggling experiment %r that is not in the selection", experiment)
    updated = dict(selection)
    updated[experiment] = not selection.get(experiment, False)
    return MappingProxyType(updated)


class GraphSession:
    """Session holder for the graph state machine.

    Typical flow:
        >>> s = GraphSession()
        >>> t = s.begin_load()
        >>> s.complete_load(t, [{"model": "m", "from_node": "a", "to_node": "b",
        ...                      "relationship": "r", "experiment": "x"}])
        True
        >>> len(s.view().links)
        1
        >>> _ = s.toggle("x")
        >>> s.view().is_empty
        True
    """

    def __init__(self, palette: Sequence[str] = PALETTE) -> None:
        if not palette:
            raise GraphError("palette must contain at least one color")
        self._state: GraphState = EmptyState()
        self._palette = tuple(palette)
        self._latest_ticket = 0
        self._pending: int | None = None
        self._cache = FilterCache()

    @property
    def state(self) -> GraphState:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return isinstance(self._state, LoadedState)

    @property
    def is_loading(self) -> bool:
        return self._pending is not None

    @property
    def full_graph(self) -> FullGraph:
        """Graph of the current state; an empty graph when nothing is loaded."""
        if isinstance(self._state, LoadedState):
            return self._state.full_graph
        return FullGraph()

    @property
    def selection(self) -> VisibilitySelection:
        if isinstance(self._state, LoadedState):
            return self._state.selection
        return MappingProxyType({})

    def begin_load(self) -> int:
        """Start a load and return its ticket. Older tickets become stale."""
        self._latest_ticket += 1
        self._pending = self._latest_ticket
        return self._latest_ticket

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest_ticket

    def complete_load(
        self,
        ticket: int,
        raw_rows: Iterable[Mapping[str, Any]],
        headers: HeaderConfig | None = None,
    ) -> bool:
        """Apply a finished load if ``ticket`` is still the newest one.

        Returns:
            bool: True if the state was replaced, False if the load was stale.
        """
        if not self.is_current(ticket):
            logger.info("Discarding stale load %d (latest is %d)", ticket, self._latest_ticket)
            return False
        result = load(raw_rows, headers, palette=self._palette)
        self._state = LoadedState(
            full_graph=result.full_graph,
            selection=result.initial_selection,
            load_id=ticket,
        )
        self._pending = None
        self._cache.clear()
        return True

    def fail_load(self, ticket: int, error: BaseException) -> None:
        """Record a failed load. The previous state is kept as is."""
        logger.error("Load %d failed: %s", ticket, error)
        if self.is_current(ticket):
            self._pending = None

    def toggle(self, experiment: str) -> VisibilitySelection:
        """Invert one experiment's visibility and return the new selection.

        Raises:
            StateError: If no graph is loaded.
        """
        if not isinstance(self._state, LoadedState):
            raise StateError("cannot toggle visibility before a graph is loaded")
        new_sel = toggle(self._state.selection, experiment)
        self._state = LoadedState(
            full_graph=self._state.full_graph,
            selection=new_sel,
            load_id=self._state.load_id,
        )
        return new_sel

    def view(self) -> FilteredGraph:
        """Filtered view of the current state (empty when nothing is loaded)."""
        if not isinstance(self._state, LoadedState):
            return FilteredGraph()
        return self._cache.get(self._state.full_graph, self._state.selection)
