"""
relgraph.io — Load path for remote CSV datasets.

## Responsibilities
- Validate the source URL before any network access.
- Fetch CSV text over HTTP (requests) and parse it with Polars into raw row dicts.
- Provide GraphSettings with env > TOML > defaults precedence.
- Drive a GraphSession load cycle with typed, user-facing errors.

## Public API
- GraphSettings — Load configuration (headers, delimiter, URL suffix, timeout, palette).
- load_rows_from_url — validate -> fetch -> parse.
- fetch_into_session — full load cycle against a relgraph.core.GraphSession.

## Import DAG discipline
- Depends on stdlib, polars, requests and relgraph.core.
- MUST NOT import higher layers: viz or app.

## Examples
```python
from relgraph.core import GraphSession
from relgraph.io import GraphSettings, fetch_into_session

session = GraphSession()
fetch_into_session(session, "https://example.org/graph.csv", GraphSettings.load())  # doctest: +SKIP
```
"""

from __future__ import annotations

from .config import GraphSettings
from .errors import CsvParseError, FetchError, InvalidSourceError, IoConfigError, IoError
from .read import (
    fetch_csv_text,
    fetch_into_session,
    load_rows_from_url,
    parse_csv_rows,
    validate_source_url,
)

__all__ = [
    "GraphSettings",
    "IoError",
    "IoConfigError",
    "InvalidSourceError",
    "FetchError",
    "CsvParseError",
    "validate_source_url",
    "fetch_csv_text",
    "parse_csv_rows",
    "load_rows_from_url",
    "fetch_into_session",
]
