"""
Experiment legend for the relgraph Streamlit application.

Renders one colored chip per experiment (in color-assignment order) with a toggle button.
Hidden experiments are dimmed. Clicking a chip returns its experiment tag so the caller can
update the session selection and rerun.
"""

from __future__ import annotations

import html
from collections.abc import Mapping

import streamlit as st

from app.charts import legend_entries
from relgraph.core.schema import FullGraph

from .helpers import chip_style


def render_legend(graph: FullGraph, selection: Mapping[str, bool]) -> str | None:
    """Render the legend and return the experiment the user clicked, if any.

    Args:
        graph (FullGraph): Loaded graph providing experiments and colors.
        selection (Mapping[str, bool]): Current visibility selection.

    Returns:
        str | None: Experiment tag to toggle, or None.
    """
    if not graph.experiment_color_map:
        return None
    st.markdown("#### Legend")
    clicked: str | None = None
    for i, row in enumerate(legend_entries(graph, selection)):
        exp = str(row["experiment"])
        visible = bool(row["visible"])
        style = chip_style(str(row["color"]), visible)
        c1, c2 = st.columns([0.75, 0.25])
        with c1:
            st.markdown(
                f'<span style="{style}">{html.escape(exp)}</span>'
                f' <small>{row["edges"]} edges</small>',
                unsafe_allow_html=True,
            )
        with c2:
            if st.button("Hide" if visible else "Show", key=f"legend_toggle_{i}"):
                clicked = exp
    return clicked
