"""
Core exception types raised by graph building and the session state machine.

Provides typed exceptions for core-domain failures:
- SchemaError for invalid model fields (e.g., empty header names).
- GraphError for invalid build inputs (e.g., an empty palette).
- StateError for operations that are not valid in the current session state.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Malformed rows are never errors: the row normalizer drops them and logs a warning.
    - IO-layer failures (bad URL, network, CSV parse) live in relgraph.io.errors.

Examples:
    >>> from relgraph.core.errors import GraphError
    >>> try:
    ...     raise GraphError("palette must contain at least one color")
    ... except GraphError as e:
    ...     msg = str(e)
    >>> "palette" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "SchemaError",
    "GraphError",
    "StateError",
]


class SchemaError(ValueError):
    """Schema-level validation failure (e.g., an empty header name)."""


class GraphError(ValueError):
    """Invalid input to graph construction (e.g., empty palette)."""


class StateError(RuntimeError):
    """Operation not allowed in the current session state (e.g., toggle before any load)."""
