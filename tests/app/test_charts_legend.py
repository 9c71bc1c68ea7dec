from __future__ import annotations

import altair as alt

from app import charts as app_charts
from relgraph.core.constants import PALETTE
from relgraph.core.pipeline import load
from relgraph.core.schema import FilteredGraph, FullGraph
from relgraph.core.visibility import filter_graph

ROWS = [
    {"model": "m", "from_node": "a", "relationship": "r", "to_node": "b", "experiment": "e2"},
    {"model": "m", "from_node": "b", "relationship": "r", "to_node": "c", "experiment": "e1"},
    {"model": "m", "from_node": "c", "relationship": "r", "to_node": "a", "experiment": "e2"},
]


def test_legend_entries_order_colors_and_counts() -> None:
    res = load(ROWS)
    entries = app_charts.legend_entries(res.full_graph, {"e2": True, "e1": False})
    assert [e["experiment"] for e in entries] == ["e2", "e1"]
    assert [e["color"] for e in entries] == [PALETTE[0], PALETTE[1]]
    assert [e["visible"] for e in entries] == [True, False]
    assert [e["edges"] for e in entries] == [2, 1]


def test_legend_entries_non_true_values_are_hidden() -> None:
    res = load(ROWS)
    selection = {"e2": 1, "e1": None}
    entries = app_charts.legend_entries(res.full_graph, selection)  # type: ignore[arg-type]
    assert all(e["visible"] is False for e in entries)


def test_legend_entries_empty_graph() -> None:
    assert app_charts.legend_entries(FullGraph(), {}) == []


def test_graph_chart_applies_defaults() -> None:
    res = load(ROWS)
    view = filter_graph(res.full_graph, res.initial_selection)
    ch = app_charts.graph_chart(view)
    assert isinstance(ch, alt.LayerChart)
    spec = ch.to_dict()
    assert spec["config"]["view"]["strokeOpacity"] == 0


def test_empty_graph_chart_is_text_mark() -> None:
    spec = app_charts.empty_graph_chart("nothing here").to_dict()
    assert spec["mark"]["type"] == "text"
    assert app_charts.graph_chart(FilteredGraph()).to_dict()["mark"]["type"] == "text"
