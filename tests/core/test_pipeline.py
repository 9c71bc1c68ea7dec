from __future__ import annotations

import logging

import pytest

from relgraph.core.constants import PALETTE
from relgraph.core.errors import GraphError, StateError
from relgraph.core.pipeline import EmptyState, GraphSession, LoadedState, load, toggle
from relgraph.core.schema import HeaderConfig

ROWS = [
    {"model": "m1", "from_node": "a", "to_node": "b", "relationship": "r1", "experiment": "e1"},
    {"model": "m1", "from_node": "c", "to_node": "d", "relationship": "r2", "experiment": "e2"},
    {"model": "m1", "from_node": "a", "to_node": "", "relationship": "r3", "experiment": "e3"},
]


def test_load_builds_graph_and_all_true_selection() -> None:
    res = load(ROWS)
    assert res.rejected_rows == 1
    assert [n.id for n in res.full_graph.nodes] == ["m1:a", "m1:b", "m1:c", "m1:d"]
    # e3 only appears on the dropped row, so it never reaches the legend
    assert res.full_graph.experiment_color_map == {"e1": PALETTE[0], "e2": PALETTE[1]}
    assert dict(res.initial_selection) == {"e1": True, "e2": True}


def test_load_only_missing_field_row_gives_empty_graph() -> None:
    res = load([{"model": "m1", "from_node": "a", "relationship": "r1", "experiment": "e1"}])
    assert res.full_graph.nodes == () and res.full_graph.edges == ()
    assert dict(res.initial_selection) == {}


def test_load_uses_headers() -> None:
    rows = [{"M": "m", "F": "a", "R": "r", "T": "b", "E": ""}]
    headers = HeaderConfig(
        model="M", from_node="F", relationship="R", to_node="T", experiment="E"
    )
    res = load(rows, headers)
    assert res.full_graph.experiments == ["undefined"]


def test_toggle_returns_new_selection_and_leaves_input_untouched() -> None:
    sel = {"e1": True, "e2": True}
    new = toggle(sel, "e2")
    assert dict(new) == {"e1": True, "e2": False}
    assert sel == {"e1": True, "e2": True}
    assert dict(toggle(new, "e2")) == {"e1": True, "e2": True}


def test_toggle_absent_key_makes_it_visible_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="relgraph.core.pipeline"):
        new = toggle({"e1": True}, "zz")
    assert dict(new) == {"e1": True, "zz": True}
    assert "not in the selection" in caplog.text


def test_toggle_result_is_read_only() -> None:
    new = toggle({"e1": True}, "e1")
    with pytest.raises(TypeError):
        new["e1"] = True  # type: ignore[index]


def test_session_starts_empty() -> None:
    s = GraphSession()
    assert isinstance(s.state, EmptyState)
    assert not s.is_loaded and not s.is_loading
    assert s.full_graph.is_empty
    assert s.view().is_empty
    assert dict(s.selection) == {}


def test_session_load_then_toggle_round_trip() -> None:
    s = GraphSession()
    t = s.begin_load()
    assert s.is_loading
    assert s.complete_load(t, ROWS)
    assert isinstance(s.state, LoadedState)
    assert s.state.load_id == t
    assert not s.is_loading
    full = s.full_graph
    assert len(s.view().links) == 2

    s.toggle("e2")
    view = s.view()
    assert {e.experiment for e in view.links} == {"e1"}
    assert {n.id for n in view.nodes} == {"m1:a", "m1:b"}
    assert s.full_graph is full  # toggles never rebuild the graph

    s.toggle("e1")
    assert s.view().is_empty
    assert not s.full_graph.is_empty


def test_session_stale_load_is_discarded() -> None:
    s = GraphSession()
    old = s.begin_load()
    new = s.begin_load()
    assert s.complete_load(new, ROWS[:1])
    assert not s.complete_load(old, ROWS)
    assert [e.experiment for e in s.full_graph.edges] == ["e1"]
    assert s.state.load_id == new  # type: ignore[union-attr]


def test_session_failed_load_keeps_previous_state() -> None:
    s = GraphSession()
    t1 = s.begin_load()
    s.complete_load(t1, ROWS)
    before = s.state
    t2 = s.begin_load()
    s.fail_load(t2, RuntimeError("boom"))
    assert s.state is before
    assert not s.is_loading


def test_session_new_load_resets_selection() -> None:
    s = GraphSession()
    s.complete_load(s.begin_load(), ROWS)
    s.toggle("e1")
    s.complete_load(s.begin_load(), ROWS)
    assert dict(s.selection) == {"e1": True, "e2": True}


def test_session_toggle_before_load_raises() -> None:
    with pytest.raises(StateError):
        GraphSession().toggle("e1")


def test_session_rejects_empty_palette() -> None:
    with pytest.raises(GraphError):
        GraphSession(palette=())
