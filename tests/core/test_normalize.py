from __future__ import annotations

import logging

import pytest

from relgraph.core.normalize import normalize_row, normalize_rows
from relgraph.core.schema import HeaderConfig


def _row(**overrides: str | None) -> dict[str, str | None]:
    base: dict[str, str | None] = {
        "model": "m1",
        "from_node": "a",
        "relationship": "r1",
        "to_node": "b",
        "experiment": "e1",
    }
    base.update(overrides)
    return base


def test_accepts_complete_row_and_builds_ids() -> None:
    cand = normalize_row(_row())
    assert cand is not None
    assert cand.source == "m1:a"
    assert cand.target == "m1:b"
    assert cand.relationship == "r1"
    assert cand.experiment == "e1"


@pytest.mark.parametrize("missing", ["model", "from_node", "relationship", "to_node"])
@pytest.mark.parametrize("value", ["", None])
def test_rejects_row_missing_required_field(missing: str, value: str | None) -> None:
    assert normalize_row(_row(**{missing: value})) is None


def test_rejects_row_without_required_key(caplog: pytest.LogCaptureFixture) -> None:
    row = _row()
    del row["to_node"]
    with caplog.at_level(logging.WARNING, logger="relgraph.core.normalize"):
        assert normalize_row(row) is None
    assert "Skipping row due to missing data" in caplog.text


@pytest.mark.parametrize("value", ["", None])
def test_empty_experiment_becomes_undefined(value: str | None) -> None:
    cand = normalize_row(_row(experiment=value))
    assert cand is not None
    assert cand.experiment == "undefined"


def test_missing_experiment_column_becomes_undefined() -> None:
    row = _row()
    del row["experiment"]
    cand = normalize_row(row)
    assert cand is not None and cand.experiment == "undefined"


def test_node_names_with_separator_stay_embedded() -> None:
    cand = normalize_row(_row(from_node="ns:a", to_node="ns:b"))
    assert cand is not None
    assert (cand.source, cand.target) == ("m1:ns:a", "m1:ns:b")


def test_custom_headers_are_used() -> None:
    headers = HeaderConfig(
        model="Model", from_node="Src", relationship="Rel", to_node="Dst", experiment="Exp"
    )
    row = {"Model": "m2", "Src": "x", "Rel": "calls", "Dst": "y", "Exp": "run-1"}
    cand = normalize_row(row, headers)
    assert cand is not None
    assert (cand.source, cand.target, cand.experiment) == ("m2:x", "m2:y", "run-1")
    # Default headers do not match these columns
    assert normalize_row(row) is None


def test_normalize_rows_counts_rejections_and_keeps_order() -> None:
    rows = [_row(from_node="a"), _row(to_node=""), _row(from_node="c")]
    accepted, rejected = normalize_rows(rows)
    assert rejected == 1
    assert [c.source for c in accepted] == ["m1:a", "m1:c"]
