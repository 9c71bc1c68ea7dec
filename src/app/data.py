from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import streamlit as st

from relgraph.io.config import GraphSettings
from relgraph.io.read import load_rows_from_url

__all__ = [
    "CacheConfig",
    "load_rows",
    "make_rows_loader",
]

# ---------- Cache configuration (factory of cached callables) ----------


@dataclass(frozen=True)
class CacheConfig:
    """Hashable cache configuration for Streamlit @st.cache_data.

    Note: Streamlit's decorator parameters (ttl, persist) are fixed at decoration
    time. We build and memoize decorated callables per (name, ttl, persist) so the
    app can switch these at runtime while still benefiting from caching.
    """

    ttl: int | None = None
    persist: bool = False


# Registry of decorated functions by (loader_name, CacheConfig)
_CACHE_REGISTRY: dict[tuple[str, CacheConfig], Callable[..., Any]] = {}


def _get_cached(loader_name: str, cfg: CacheConfig, fn: Callable[..., Any]) -> Callable[..., Any]:
    key = (loader_name, cfg)
    if key in _CACHE_REGISTRY:
        return _CACHE_REGISTRY[key]
    if cfg.persist:
        wrapped = st.cache_data(persist="disk", ttl=cfg.ttl)(fn)
    else:
        wrapped = st.cache_data(ttl=cfg.ttl)(fn)
    _CACHE_REGISTRY[key] = wrapped
    return wrapped


# ---------- Loaders (internal implementations) ----------


def _load_rows_impl(
    url: str, delimiter: str, url_suffix: str, request_timeout: float
) -> list[dict[str, Any]]:
    # Primitive arguments only, so Streamlit can hash the cache key.
    settings = GraphSettings(
        delimiter=delimiter, url_suffix=url_suffix, request_timeout=request_timeout
    )
    return load_rows_from_url(url, settings)


# ---------- Public loader APIs (dispatch to cached implementations) ----------


def load_rows(
    url: str, settings: GraphSettings, *, cfg: CacheConfig = CacheConfig()
) -> list[dict[str, Any]]:
    """Fetch and parse ``url`` into raw rows, cached per (url, delimiter, suffix, timeout).

    Header names are not part of the key: they are applied after parsing, so changing them
    rebuilds the graph without refetching.
    """
    fn = _get_cached("load_rows", cfg, _load_rows_impl)
    rows: list[dict[str, Any]] = fn(
        url, settings.delimiter, settings.url_suffix, settings.request_timeout
    )
    return rows


def make_rows_loader(
    cfg: CacheConfig = CacheConfig(),
) -> Callable[[str, GraphSettings], list[dict[str, Any]]]:
    """Return a loader with the signature expected by relgraph.io.read.fetch_into_session."""

    def _loader(url: str, settings: GraphSettings) -> list[dict[str, Any]]:
        return load_rows(url, settings, cfg=cfg)

    return _loader
