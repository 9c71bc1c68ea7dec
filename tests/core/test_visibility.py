from __future__ import annotations

from types import MappingProxyType

from relgraph.core.builder import build_graph
from relgraph.core.schema import EdgeCandidate, FullGraph
from relgraph.core.visibility import FilterCache, filter_graph, selection_from_colors


def _graph() -> FullGraph:
    # e1: a->b, e2: c->d (disjoint), e3: b->c (shares nodes with both)
    cands = [
        EdgeCandidate(source="m:a", target="m:b", relationship="r", experiment="e1"),
        EdgeCandidate(source="m:c", target="m:d", relationship="r", experiment="e2"),
        EdgeCandidate(source="m:b", target="m:c", relationship="r", experiment="e3"),
    ]
    return build_graph(cands)


def _ids(view) -> tuple[set[str], set[str]]:
    return {n.id for n in view.nodes}, {(e.source, e.target) for e in view.links}


def test_only_selected_experiments_and_incident_nodes_are_visible() -> None:
    g = _graph()
    nodes, links = _ids(filter_graph(g, {"e1": True, "e2": False, "e3": False}))
    assert nodes == {"m:a", "m:b"}
    assert links == {("m:a", "m:b")}


def test_toggling_second_experiment_on_yields_union() -> None:
    g = _graph()
    v1 = filter_graph(g, {"e1": True, "e2": False, "e3": False})
    v2 = filter_graph(g, {"e1": True, "e2": True, "e3": False})
    nodes, links = _ids(v2)
    assert nodes == {"m:a", "m:b", "m:c", "m:d"}
    assert links == {("m:a", "m:b"), ("m:c", "m:d")}
    assert _ids(v1)[0] <= nodes


def test_missing_entries_hide_edges() -> None:
    g = _graph()
    view = filter_graph(g, {"e1": True})
    assert {e.experiment for e in view.links} == {"e1"}
    assert filter_graph(g, {}).is_empty


def test_only_strict_true_counts_as_visible() -> None:
    g = _graph()
    view = filter_graph(g, {"e1": 1, "e2": "yes", "e3": True})  # type: ignore[dict-item]
    assert {e.experiment for e in view.links} == {"e3"}


def test_all_false_selection_gives_empty_view_but_full_graph_is_not_empty() -> None:
    g = _graph()
    view = filter_graph(g, {"e1": False, "e2": False, "e3": False})
    assert view.nodes == () and view.links == ()
    assert not g.is_empty


def test_filter_is_pure_and_deterministic() -> None:
    g = _graph()
    sel = {"e1": True, "e3": True}
    assert filter_graph(g, sel) == filter_graph(g, sel)
    assert sel == {"e1": True, "e3": True}


def test_filter_is_monotonic_in_selection() -> None:
    g = _graph()
    exps = g.experiments
    # Every subset s2 of true keys versus its superset s1 = s2 + one more experiment
    for i in range(1 << len(exps)):
        s2 = {e: bool(i >> k & 1) for k, e in enumerate(exps)}
        for extra in exps:
            s1 = dict(s2, **{extra: True})
            n1, l1 = _ids(filter_graph(g, s1))
            n2, l2 = _ids(filter_graph(g, s2))
            assert l2 <= l1
            assert n2 <= n1


def test_view_preserves_full_graph_order() -> None:
    g = _graph()
    view = filter_graph(g, selection_from_colors(g.experiment_color_map))
    assert view.nodes == g.nodes
    assert view.links == g.edges


def test_selection_from_colors_is_read_only_and_all_true() -> None:
    sel = selection_from_colors({"e1": "#000", "e2": "#fff"})
    assert isinstance(sel, MappingProxyType)
    assert dict(sel) == {"e1": True, "e2": True}


def test_filter_cache_reuses_result_for_equal_inputs() -> None:
    g = _graph()
    cache = FilterCache()
    v1 = cache.get(g, {"e1": True})
    assert cache.get(g, {"e1": True}) is v1
    v2 = cache.get(g, {"e1": True, "e2": True})
    assert v2 is not v1
    assert v2 == filter_graph(g, {"e1": True, "e2": True})
    # A different graph object with equal content is recomputed, not reused
    g2 = _graph()
    assert cache.get(g2, {"e1": True, "e2": True}) is not v2


def test_filter_cache_does_not_treat_truthy_values_as_true() -> None:
    g = _graph()
    cache = FilterCache()
    shown = cache.get(g, {"e1": True})
    assert len(shown.links) == 1
    truthy = cache.get(g, {"e1": 1})  # type: ignore[dict-item]
    assert truthy == filter_graph(g, {"e1": 1})  # type: ignore[dict-item]
    assert truthy.is_empty
