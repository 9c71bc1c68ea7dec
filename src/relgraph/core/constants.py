"""
relgraph core defaults.

Defines the node-id separator, the fallback experiment tag, the default header names and the
experiment color palette. This module is zero-IO and uses only the Python standard library.

Notes:
    - Node ids are built as ``f"{model}{NODE_ID_SEPARATOR}{node_name}"``.
    - Colors are assigned round-robin from PALETTE in first-seen experiment order.
    - relgraph.io.config consumes these defaults and lets env/TOML
      override them.
"""

from __future__ import annotations

__all__ = [
    "NODE_ID_SEPARATOR",
    "UNDEFINED_EXPERIMENT",
    "EDGE_ID_PREFIX",
    "DEFAULT_HEADERS",
    "DEFAULT_DELIMITER",
    "DEFAULT_URL_SUFFIX",
    "PALETTE",
]

# Joins model and node name into a node id; labels are recovered by splitting on the first one.
NODE_ID_SEPARATOR: str = ":"

# Tag used when a row has an empty or missing experiment field. A valid tag, not an error marker.
UNDEFINED_EXPERIMENT: str = "undefined"

EDGE_ID_PREFIX: str = "e-"

DEFAULT_HEADERS: dict[str, str] = {
    "model": "model",
    "from_node": "from_node",
    "relationship": "relationship",
    "to_node": "to_node",
    "experiment": "experiment",
}

DEFAULT_DELIMITER: str = ";"

DEFAULT_URL_SUFFIX: str = ".csv"

PALETTE: tuple[str, ...] = (
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#96CEB4",
    "#FFEEAD",
    "#FF9999",
    "#77DD77",
    "#AEC6CF",
)
