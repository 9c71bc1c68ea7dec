"""
Row normalization: map one raw CSV row to an EdgeCandidate or reject it.

A row is rejected when any of model, from_node, to_node or relationship is missing or empty.
Rejection is local: the row is dropped, a warning is logged and the batch continues. An empty
or missing experiment is not a rejection; the row is tagged ``"undefined"``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .constants import UNDEFINED_EXPERIMENT
from .schema import EdgeCandidate, HeaderConfig, node_id

__all__ = ["normalize_row", "normalize_rows"]

logger = logging.getLogger(__name__)


def _field(row: Mapping[str, Any], header: str) -> str:
    value = row.get(header)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def normalize_row(
    row: Mapping[str, Any], headers: HeaderConfig | None = None
) -> EdgeCandidate | None:
    """Validate one raw row and derive its source/target node ids.

    Args:
        row (Mapping[str, Any]): Header name to cell value, as produced by the CSV parser.
            Missing cells may be absent or None.
        headers (HeaderConfig | None): Header names to read; defaults to HeaderConfig().

    Returns:
        EdgeCandidate | None: The candidate edge, or None if the row was rejected.

    Examples:
        >>> c = normalize_row({"model": "m1", "from_node": "a", "to_node": "b",
        ...                    "relationship": "r1", "experiment": ""})
        >>> (c.source, c.target, c.experiment)
        ('m1:a', 'm1:b', 'undefined')
        >>> normalize_row({"model": "m1", "from_node": "a", "relationship": "r1"}) is None
        True
    """
    h = headers or HeaderConfig()
    model = _field(row, h.model)
    from_node = _field(row, h.from_node)
    to_node = _field(row, h.to_node)
    relationship = _field(row, h.relationship)
    experiment = _field(row, h.experiment) or UNDEFINED_EXPERIMENT

    if not (model and from_node and to_node and relationship):
        logger.warning("Skipping row due to missing data: %s", dict(row))
        return None

    return EdgeCandidate(
        source=node_id(model, from_node),
        target=node_id(model, to_node),
        relationship=relationship,
        experiment=experiment,
    )


def normalize_rows(
    rows: Iterable[Mapping[str, Any]], headers: HeaderConfig | None = None
) -> tuple[list[EdgeCandidate], int]:
    """Normalize a batch of rows, returning (accepted candidates, rejected count)."""
    h = headers or HeaderConfig()
    accepted: list[EdgeCandidate] = []
    rejected = 0
    for row in rows:
        cand = normalize_row(row, h)
        if cand is None:
            rejected += 1
        else:
            accepted.append(cand)
    if rejected:
        logger.info("Dropped %d malformed row(s); kept %d", rejected, len(accepted))
    return accepted, rejected
