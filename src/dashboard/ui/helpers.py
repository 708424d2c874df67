"""
Shared UI helper utilities for the dashboard Streamlit application.

This module centralizes small helpers used by the UI: the optional Altair
accelerator, dashboard wiring (coordinator plus views), and display formatting.

Notes:
    - Contains no Streamlit state manipulation itself, so it is testable without a
      running Streamlit server.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import altair as alt

from tagdash.core.records import Record
from tagdash.io import DashboardSettings
from tagdash.views import (
    FilterCoordinator,
    StatisticsView,
    TagBarChartView,
    TagGraphView,
    TagTimelineView,
)


def enable_vegafusion_optional() -> str | None:
    """Attempt to enable the VegaFusion accelerator for Altair if available.

    Returns:
        str | None: Short status message if enabling succeeded, otherwise None.
    """
    try:
        alt.data_transformers.enable("vegafusion")
        return "VegaFusion enabled (optional accelerator)."
    except Exception:
        return None


@dataclass
class Dashboard:
    """One coordinator and the four panels registered on it, in display order."""

    coordinator: FilterCoordinator
    graph: TagGraphView
    bars: TagBarChartView
    timeline: TagTimelineView
    stats: StatisticsView

    def close(self) -> None:
        self.coordinator.close()


def build_dashboard(settings: DashboardSettings, records: Sequence[Record] = ()) -> Dashboard:
    """Create the coordinator, register the views, and load ``records``.

    Args:
        settings (DashboardSettings): View defaults (top-N, weighting, measures).
        records (Sequence[Record]): Initial dataset (may be empty).

    Returns:
        Dashboard: Wired dashboard; every view has seen the dataset once.
    """
    coordinator = FilterCoordinator()
    graph = TagGraphView(use_percentage=settings.use_percentage)
    bars = TagBarChartView(measures=settings.measures)
    timeline = TagTimelineView(top_n=settings.top_n_tags, normalize=settings.normalize_timeline)
    stats = StatisticsView()
    for view in (graph, bars, timeline, stats):
        coordinator.register_view(view)
    coordinator.load_or_refresh_dataset(records)
    return Dashboard(coordinator=coordinator, graph=graph, bars=bars, timeline=timeline, stats=stats)


def describe_selection(tags: frozenset[str] | set[str], *, limit: int = 5) -> str:
    """Short label for a selection, e.g. ``"python, r (+3 more)"`` or ``"all tags"``."""
    if not tags:
        return "all tags"
    ordered = sorted(tags)
    head = ", ".join(ordered[:limit])
    rest = len(ordered) - limit
    return f"{head} (+{rest} more)" if rest > 0 else head
