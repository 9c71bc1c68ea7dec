"""
relgraph — turn a relational CSV dataset into an experiment-colored, filterable graph.

Packages
- relgraph.core — normalization, graph building, visibility filtering, session state machine.
- relgraph.io — URL validation, HTTP fetch, CSV parsing, settings.
- relgraph.viz — layout and Altair network chart for filtered views.

The Streamlit UI lives in the separate top-level ``app`` package.
"""

from __future__ import annotations

__version__ = "0.1.0"
