"""
Header (global controls) for the relgraph Streamlit application.

This module renders the top-of-page controls, including:
- CSV URL input and the five header-name inputs (model, from node, relationship,
  to node, experiment), prefilled from GraphSettings.
- The "Visualize" submit button, disabled while a load is in flight.
- Cache preferences panel and construction of a CacheConfig used by data loaders.

Notes:
    - Performs no IO; loading is triggered by the caller when the form is submitted.
    - Header names typed here override settings for the current load only.
"""

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st
from pydantic import ValidationError

from app.data import CacheConfig
from relgraph.core.schema import HeaderConfig
from relgraph.io.config import GraphSettings


@dataclass(frozen=True)
class LoadRequest:
    """Submitted header form: source URL plus header names for this load."""

    url: str
    headers: HeaderConfig


def render_header(
    *,
    default_url: str | None,
    settings: GraphSettings,
    is_loading: bool = False,
) -> tuple[LoadRequest | None, CacheConfig]:
    """Render the global header and return the submitted load request and cache config.

    Args:
        default_url (str | None): Optional URL prefilled in the form.
        settings (GraphSettings): Settings providing default header names.
        is_loading (bool): Disable the submit button while a load runs.

    Returns:
        tuple[LoadRequest | None, CacheConfig]: (request if "Visualize" was clicked, cache_config)

    Notes:
        - Invalid header names (blank) are reported inline and no request is returned.
        - The cache configuration returned is used by app.data loaders to build
          decorated callables with matching Streamlit caching semantics.
    """
    st.markdown("### Relational Graph Explorer")

    # Session defaults
    if "cache_ttl" not in st.session_state:
        st.session_state["cache_ttl"] = 600
    if "cache_persist" not in st.session_state:
        st.session_state["cache_persist"] = False

    h = settings.headers
    request: LoadRequest | None = None
    with st.form("load_form", border=False):
        url = st.text_input("CSV URL", value=default_url or "", key="form_url")
        c1, c2, c3, c4, c5 = st.columns(5)
        with c1:
            model_h = st.text_input("Model Header", value=h.model, key="form_h_model")
        with c2:
            from_h = st.text_input("From Node Header", value=h.from_node, key="form_h_from")
        with c3:
            rel_h = st.text_input("Relationship Header", value=h.relationship, key="form_h_rel")
        with c4:
            to_h = st.text_input("To Node Header", value=h.to_node, key="form_h_to")
        with c5:
            exp_h = st.text_input("Experiment Header", value=h.experiment, key="form_h_exp")
        submitted = st.form_submit_button("Visualize", disabled=is_loading, type="primary")

    if submitted:
        try:
            headers = HeaderConfig(
                model=model_h,
                from_node=from_h,
                relationship=rel_h,
                to_node=to_h,
                experiment=exp_h,
            )
        except ValidationError:
            st.error("Header names must not be empty.")
        else:
            request = LoadRequest(url=url, headers=headers)

    with st.expander("Cache preferences", expanded=False):
        ttl = st.number_input(
            "Fetch cache TTL (seconds, 0 disables expiry)",
            min_value=0,
            value=int(st.session_state["cache_ttl"]),
            step=60,
            key="cache_ttl_input",
        )
        persist = st.checkbox(
            "Persist fetched CSV to disk cache",
            value=bool(st.session_state["cache_persist"]),
            key="cache_persist_input",
        )
        st.session_state["cache_ttl"] = int(ttl)
        st.session_state["cache_persist"] = bool(persist)
        if st.button("Clear fetch cache", key="cache_clear"):
            st.cache_data.clear()
            st.success("Cache cleared.")

    cache_cfg = CacheConfig(
        ttl=int(st.session_state["cache_ttl"]) or None,
        persist=bool(st.session_state["cache_persist"]),
    )
    return request, cache_cfg
