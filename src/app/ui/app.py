"""
Streamlit application orchestrator for the relgraph explorer.

This module composes the header form, the experiment legend and the graph view while
delegating supporting concerns to focused modules under app.ui.* (header, legend, helpers).

Responsibilities:
    - Configure the Streamlit page and logging.
    - Keep one relgraph.core.GraphSession per browser session (st.session_state).
    - Run a load when the header form is submitted; report load errors without touching the
      previously loaded graph.
    - Apply legend toggles to the session and render the filtered view.

Notes:
    - Charts are produced by app.charts and relgraph.viz.* modules.
    - Fetch + parse results are cached through app.data (CacheConfig from the header).
"""

from __future__ import annotations

import logging
from typing import Any, cast

import streamlit as st

from app import charts as app_charts
from app.data import make_rows_loader
from relgraph.core.pipeline import GraphSession
from relgraph.io.config import GraphSettings
from relgraph.io.errors import InvalidSourceError, IoError
from relgraph.io.read import fetch_into_session
from relgraph.logging_utils import configure_logging, log_exception

from .header import render_header
from .helpers import compute_graph_summary, status_message
from .legend import render_legend

logger = logging.getLogger(__name__)

SESSION_KEY = "graph_session"


def get_graph_session(settings: GraphSettings) -> GraphSession:
    """Return the GraphSession stored in Streamlit session state, creating it on first use."""
    session = st.session_state.get(SESSION_KEY)
    if not isinstance(session, GraphSession):
        session = GraphSession(palette=settings.palette)
        st.session_state[SESSION_KEY] = session
    return session


def streamlit_app(
    default_url: str | None = None,
    config_path: str | None = None,
) -> None:
    """Render the relgraph Streamlit application.

    Args:
        default_url (str | None): Optional CSV URL prefilled in the header form.
        config_path (str | None): Optional explicit TOML settings file; otherwise settings
            are searched in relgraph.toml / pyproject.toml and overridden by RELGRAPH_* env.

    Returns:
        None
    """
    st.set_page_config(page_title="Relational Graph Explorer", layout="wide")
    configure_logging()

    try:
        settings = GraphSettings.load(config_path)
    except IoError as e:
        st.error(log_exception(logger, e))
        settings = GraphSettings()

    session = get_graph_session(settings)

    request, cache_cfg = render_header(
        default_url=default_url,
        settings=settings,
        is_loading=session.is_loading,
    )

    if request is not None:
        load_settings = GraphSettings(
            headers=request.headers,
            delimiter=settings.delimiter,
            url_suffix=settings.url_suffix,
            request_timeout=settings.request_timeout,
            palette=settings.palette,
        )
        try:
            with st.spinner("Loading CSV ..."):
                fetch_into_session(
                    session, request.url, load_settings, loader=make_rows_loader(cache_cfg)
                )
        except InvalidSourceError as e:
            st.warning(e.user_message)
        except IoError as e:
            st.error(log_exception(logger, e))

    full = session.full_graph
    c_legend, c_graph = st.columns([0.2, 0.8])

    with c_legend:
        clicked = render_legend(full, session.selection)
        if clicked is not None:
            session.toggle(clicked)
            st.rerun()

    with c_graph:
        view = session.view()
        msg = status_message(full, view, is_loading=session.is_loading)
        if msg:
            st.info(msg)
        else:
            summary = compute_graph_summary(full, view)
            m1, m2, m3 = st.columns(3)
            m1.metric("Visible nodes", f"{summary['visible_nodes']} / {summary['nodes']}")
            m2.metric("Visible links", f"{summary['visible_links']} / {summary['edges']}")
            m3.metric("Experiments", summary["experiments"])
            show_labels = st.checkbox("Show node labels", value=False, key="graph_show_labels")
            try:
                ch = app_charts.graph_chart(
                    view, palette=settings.palette, show_labels=show_labels
                )
                st.altair_chart(cast(Any, ch), theme=None, use_container_width=True)
            except Exception as e:  # pragma: no cover
                st.error(f"Failed to render graph: {e}")
