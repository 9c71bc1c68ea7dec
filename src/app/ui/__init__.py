"""
relgraph App UI package.

This package contains the decomposed Streamlit UI for the relgraph explorer. It exposes
high-level orchestration and focused modules for separate concerns (header, legend,
helpers).

Modules:
    - app: Streamlit application orchestrator (streamlit_app).
    - header: Load form (CSV URL, header names) and cache preferences.
    - legend: Experiment chips with visibility toggles.
    - helpers: Small cross-cutting helpers (status messages, chip styling, summary counts).

Usage:
    from app.ui import streamlit_app
    streamlit_app(default_url="https://example.org/graph.csv")
"""

from __future__ import annotations

from .app import streamlit_app
from .header import render_header
from .legend import render_legend

__all__ = [
    "streamlit_app",
    "render_header",
    "render_legend",
]
