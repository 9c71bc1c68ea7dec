"""
Read utilities for remote CSV datasets.

Overview
- validate_source_url(): rejects empty URLs and URLs without the expected suffix, before IO.
- fetch_csv_text(): HTTP GET via requests; failures surface as FetchError.
- parse_csv_rows(): Polars CSV parse (all columns as strings, blank lines skipped) into a list
  of row dicts; failures surface as CsvParseError.
- load_rows_from_url(): validate -> fetch -> parse.
- fetch_into_session(): full load cycle against a GraphSession with stale-load protection.

Notes
- Empty cells come back as None; relgraph.core.normalize treats None and "" alike.
- No partial results: a parse error aborts the whole load.
- Rows with fewer fields than the header are padded with None, so the normalizer drops them
  as malformed rows instead of failing the load.
- Blank lines inside quoted values are kept; only blank records are skipped.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Callable
from typing import Any

import polars as pl
import requests
from polars.exceptions import PolarsError

from relgraph.core.constants import DEFAULT_DELIMITER, DEFAULT_URL_SUFFIX
from relgraph.core.pipeline import GraphSession

from .config import GraphSettings
from .errors import CsvParseError, FetchError, InvalidSourceError

__all__ = [
    "validate_source_url",
    "fetch_csv_text",
    "parse_csv_rows",
    "load_rows_from_url",
    "fetch_into_session",
]

logger = logging.getLogger(__name__)

RowsLoader = Callable[[str, GraphSettings], list[dict[str, Any]]]

_LEADING_BLANK_LINES = re.compile(r"\A(?:[ \t]*\r?\n)+")


def validate_source_url(url: str | None, suffix: str = DEFAULT_URL_SUFFIX) -> str:
    """Return the stripped URL or raise InvalidSourceError.

    Examples:
        >>> validate_source_url(" https://example.org/data.csv ")
        'https://example.org/data.csv'
    """
    u = (url or "").strip()
    if not u or not u.endswith(suffix):
        raise InvalidSourceError(
            f"Invalid source URL {u!r}: expected a URL ending with {suffix!r}",
            user_message="Please enter a valid CSV URL",
            context={"url": u, "suffix": suffix},
        )
    return u


def fetch_csv_text(url: str, *, timeout: float = 30.0) -> str:
    """Download the CSV body as text.

    Responses without an explicit charset are decoded as UTF-8.

    Raises:
        FetchError: On connection errors, timeouts or non-2xx statuses.
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(
            f"Failed to fetch {url}: {e}",
            user_message="Error loading CSV. Check the URL and your connection.",
            context={"url": url},
        ) from e
    if "charset" not in response.headers.get("content-type", "").lower():
        response.encoding = "utf-8"
    return response.text


def parse_csv_rows(text: str, *, delimiter: str = DEFAULT_DELIMITER) -> list[dict[str, Any]]:
    """Parse delimited text with a header row into a list of row dicts.

    Args:
        text (str): CSV text; the first non-blank line is the header row.
        delimiter (str): Field separator (default ";").

    Returns:
        list[dict[str, Any]]: One dict per data row, header name -> string or None.

    Raises:
        CsvParseError: If Polars cannot parse the text (e.g., rows with extra fields).

    Examples:
        >>> parse_csv_rows("model;from_node\\n\\nm1;a\\n")
        [{'model': 'm1', 'from_node': 'a'}]
    """
    body = _LEADING_BLANK_LINES.sub("", text.lstrip("\ufeff"))
    if not body.strip():
        return []
    data = body.encode("utf-8")
    try:
        df = pl.read_csv(
            io.BytesIO(data),
            separator=delimiter,
            has_header=True,
            infer_schema_length=0,
        )
    except PolarsError as e:
        raise CsvParseError(
            f"CSV parsing failed: {e}",
            user_message="Error reading CSV. Check the file format and the delimiter.",
            context={"delimiter": delimiter},
        ) from e
    # Blank records (empty or whitespace-only lines) carry no data.
    blank = pl.all_horizontal(pl.all().str.strip_chars().fill_null("") == "")
    return df.filter(~blank).to_dicts()


def load_rows_from_url(url: str, settings: GraphSettings | None = None) -> list[dict[str, Any]]:
    """Validate, fetch and parse a CSV dataset into raw rows."""
    s = settings or GraphSettings()
    u = validate_source_url(url, s.url_suffix)
    text = fetch_csv_text(u, timeout=s.request_timeout)
    rows = parse_csv_rows(text, delimiter=s.delimiter)
    logger.info("Parsed %d row(s) from %s", len(rows), u)
    return rows


def fetch_into_session(
    session: GraphSession,
    url: str,
    settings: GraphSettings | None = None,
    *,
    loader: RowsLoader = load_rows_from_url,
) -> bool:
    """Run one load cycle against ``session``.

    The URL is validated before a load starts. Fetch/parse errors are recorded on the session
    (prior state untouched) and re-raised for the caller to report.

    Args:
        session (GraphSession): Target session.
        url (str): Source CSV URL.
        settings (GraphSettings | None): Load settings; defaults to GraphSettings().
        loader (RowsLoader): Rows loader, e.g. a cached wrapper of load_rows_from_url.

    Returns:
        bool: True if the session state was replaced, False if a newer load superseded this one.

    Raises:
        InvalidSourceError: If the URL is rejected (no load is started).
        IoError: If fetching or parsing fails.
    """
    s = settings or GraphSettings()
    u = validate_source_url(url, s.url_suffix)
    ticket = session.begin_load()
    try:
        rows = loader(u, s)
    except BaseException as e:
        # Includes Streamlit reruns and KeyboardInterrupt.
        session.fail_load(ticket, e)
        raise
    return session.complete_load(ticket, rows, s.headers)
