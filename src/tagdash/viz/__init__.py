"""
tagdash.viz: Altair charts for the dashboard views.

## Responsibilities
- Turn transform output (TagAggregate maps, TimeBuckets, TagGraph) into charts.
- Read-only by contract: never mutates records, views or selections.

## Public API
- tag_bar_chart: grouped bars of per-tag measures.
- stacked_area_chart: stacked monthly series (counts or shares).
- network_chart / circular_layout: co-occurrence graph on a circle.

## Import DAG discipline
- Depends on: tagdash.core, tagdash.transforms, polars, altair.
- Must not import tagdash.views or the streamlit shell.
"""

from __future__ import annotations

from .base import apply_chart_defaults, empty_chart, to_values
from .charts import circular_layout, network_chart, stacked_area_chart, tag_bar_chart

__all__ = [
    "apply_chart_defaults",
    "empty_chart",
    "to_values",
    "circular_layout",
    "network_chart",
    "stacked_area_chart",
    "tag_bar_chart",
]
