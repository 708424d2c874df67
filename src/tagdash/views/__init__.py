"""
tagdash.views: View contract, cross-filter coordination, and dashboard views.

## Public API
- View: protocol with ``filter`` and ``update``.
- SelectionChanged: signal a view emits when its own selection changes.
- BaseView / SelectableView: base classes with identity and tag-set filters.
- FilterCoordinator: composes every other view's filter for each view.
- TagBarChartView, TagGraphView, TagTimelineView, StatisticsView: dashboard panels.

## Import DAG discipline
- Depends on tagdash.core, tagdash.transforms, tagdash.viz.
"""

from __future__ import annotations

from .bar_chart import TagBarChartView
from .base import BaseView, SelectableView, SelectionChanged, View
from .coordinator import FilterCoordinator
from .statistics import StatisticsView
from .tag_graph import TagGraphView
from .timeline import TagTimelineView

__all__ = [
    "View",
    "SelectionChanged",
    "BaseView",
    "SelectableView",
    "FilterCoordinator",
    "TagBarChartView",
    "TagGraphView",
    "TagTimelineView",
    "StatisticsView",
]
