"""
Streamlit application orchestrator for the tag dashboard.

Responsibilities:
    - Configure the Streamlit page and resolve settings (env > TOML > defaults).
    - Load dataset records via dashboard.data with configurable caching.
    - Keep one Dashboard (coordinator plus views) per session and dataset.
    - Map sidebar widgets to view selections; every selection change runs a
      cross-filter pass through the coordinator.
    - Render each view's chart and offer the filtered records as a CSV download.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, cast

import streamlit as st

from dashboard.data import CacheConfig, load_records, write_demo_csv
from tagdash.io import DashboardSettings, IoError, records_to_frame

from .helpers import Dashboard, build_dashboard, describe_selection, enable_vegafusion_optional


def _session_dashboard(key: str, settings: DashboardSettings, data_path: str) -> Dashboard | None:
    """Return the session's Dashboard for ``key``, building it on first use or dataset change."""
    current = st.session_state.get("dashboard")
    if current is not None and st.session_state.get("dashboard_key") == key:
        return cast(Dashboard, current)
    try:
        with st.spinner(f"Loading {data_path} ..."):
            records = load_records(data_path, cfg=CacheConfig(ttl=600))
    except FileNotFoundError as e:
        st.error(str(e))
        return None
    except IoError as e:
        st.error(f"Failed to load dataset: {e}")
        return None
    if current is not None:
        cast(Dashboard, current).close()
    dash = build_dashboard(settings, records)
    st.session_state["dashboard"] = dash
    st.session_state["dashboard_key"] = key
    return dash


def streamlit_app(default_data: str | None = None, default_top_n: int | None = None) -> None:
    """Render the tag dashboard.

    Args:
        default_data (str | None): Dataset CSV path; falls back to settings, then to a
            generated demo file.
        default_top_n (int | None): Overrides the configured number of timeline tags.
    """
    st.set_page_config(page_title="Tag Dashboard", layout="wide")
    st.markdown("### Tag Dashboard")
    accel_msg = enable_vegafusion_optional()
    if accel_msg:
        st.caption(accel_msg)

    settings = DashboardSettings.load()
    if default_top_n is not None:
        settings = replace(settings, top_n_tags=default_top_n)
    try:
        settings.validate()
    except IoError as e:
        st.error(f"Invalid configuration: {e}")
        return

    data_path = default_data or settings.data_path
    if not data_path:
        data_path = str(write_demo_csv())
        st.caption(f"No dataset configured; showing demo data from {data_path}")

    key = f"{Path(data_path).resolve()}|{settings!r}"
    dash = _session_dashboard(key, settings, data_path)
    if dash is None:
        return

    all_tags = dash.bars.tag_domain

    # Sidebar selections; each select() emits SelectionChanged -> coordinator pass
    with st.sidebar.expander("Tag graph", expanded=True):
        use_pct = st.checkbox(
            "Weight edges by overlap ratio", value=dash.graph.use_percentage, key="graph_use_pct"
        )
        if use_pct != dash.graph.use_percentage:
            dash.graph.use_percentage = use_pct
        graph_sel = st.multiselect(
            "Select tags (graph)", options=all_tags, default=sorted(dash.graph.selection), key="graph_sel"
        )
        dash.graph.select(graph_sel)

    with st.sidebar.expander("Tag measures", expanded=False):
        bar_sel = st.multiselect(
            "Select tags (bars)", options=all_tags, default=sorted(dash.bars.selection), key="bar_sel"
        )
        dash.bars.select(bar_sel)

    with st.sidebar.expander("Timeline", expanded=False):
        timeline_sel = st.multiselect(
            "Select tags (timeline)",
            options=dash.timeline.tracked_tags,
            default=sorted(dash.timeline.selection),
            key="timeline_sel",
        )
        dash.timeline.select(timeline_sel)

    st.subheader("Statistics")
    st.table(dash.stats.rows())
    st.download_button(
        "Download filtered records (CSV)",
        data=records_to_frame(dash.stats.filtered_data).write_csv(),
        file_name="filtered_posts.csv",
        mime="text/csv",
    )

    c1, c2 = st.columns(2)
    with c1:
        st.subheader("Tag graph")
        st.caption(f"Selection: {describe_selection(dash.graph.selection)}")
        st.altair_chart(cast(Any, dash.graph.chart()), theme=None, use_container_width=True)
    with c2:
        st.subheader("Tag timeline")
        st.caption(f"Selection: {describe_selection(dash.timeline.selection)}")
        st.altair_chart(cast(Any, dash.timeline.chart()), theme=None, use_container_width=True)

    st.subheader("Tag measures")
    st.caption(f"Selection: {describe_selection(dash.bars.selection)}")
    st.altair_chart(cast(Any, dash.bars.chart()), theme=None, use_container_width=True)
