"""
relgraph App entrypoint.

This module provides the CLI entrypoint to launch the Streamlit UI. It defers
all UI composition to the app.ui package and exists solely to start Streamlit
programmatically or render directly when already running under Streamlit.

Usage:
    - Python execution (hands process to Streamlit):
        uv run python -m app.main --url https://example.org/graph.csv --config relgraph.toml

    - Streamlit direct:
        streamlit run src/app/main.py -- --url https://example.org/graph.csv
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from app.ui import streamlit_app


def main(argv: list[str] | None = None) -> None:
    """Console entrypoint that launches Streamlit with the relgraph UI.

    If already executing within a Streamlit server (environment variable
    STREAMLIT_SERVER_PORT is set), this function renders the app directly.
    Otherwise, it execs "python -m streamlit run <this_module>" to leverage
    Streamlit's reloader and argument parsing, passing through any supported
    options after "--".

    Args:
        argv (list[str] | None): Optional list of CLI arguments. If None,
            sys.argv[1:] is used.

    Examples:
        uv run python -m app.main --url https://example.org/graph.csv
        streamlit run src/app/main.py -- --url https://example.org/graph.csv
    """
    args = list(sys.argv[1:] if argv is None else argv)

    parser = argparse.ArgumentParser(description="relgraph Streamlit App")
    parser.add_argument("--url", default=None, help="CSV URL prefilled in the load form")
    parser.add_argument(
        "--config",
        default=None,
        help="TOML settings file (default: relgraph.toml or [tool.relgraph] in pyproject.toml)",
    )
    ns = parser.parse_args(args)

    # If invoked within Streamlit, just render
    if os.environ.get("STREAMLIT_SERVER_PORT"):
        streamlit_app(default_url=ns.url, config_path=ns.config)
        return

    # Otherwise, exec streamlit run on this module to take over the process
    app_path = Path(__file__).resolve()
    cmd = [sys.executable, "-m", "streamlit", "run", str(app_path)]

    passthrough: list[str] = []
    if ns.url:
        passthrough += ["--url", ns.url]
    if ns.config:
        passthrough += ["--config", ns.config]
    if passthrough:
        cmd += ["--"] + passthrough

    try:
        os.execv(sys.executable, cmd)
    except OSError:
        import subprocess

        subprocess.run(cmd, check=False)


def render_from_argv(argv: list[str] | None = None) -> None:
    """Render the app inside `streamlit run`, reading options passed after "--".

    Unknown arguments are ignored so Streamlit's own flags never abort the render.
    """
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--url", default=None)
    parser.add_argument("--config", default=None)
    ns, _ = parser.parse_known_args(list(sys.argv[1:] if argv is None else argv))
    streamlit_app(default_url=ns.url, config_path=ns.config)


if __name__ == "__main__":
    render_from_argv()
