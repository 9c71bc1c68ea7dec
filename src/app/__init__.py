from __future__ import annotations

"""
Top-level Streamlit app package.

This package hosts the interactive relgraph explorer (Streamlit) decoupled from the
relgraph.* library modules. Layout and chart primitives remain under relgraph.viz; the
Streamlit UI shell and app-specific helpers live here.

CLI entrypoint (configured in pyproject.toml):
    relgraph-app = app.main:main
"""
