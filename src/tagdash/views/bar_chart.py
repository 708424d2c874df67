"""
Grouped bar chart of per-tag measures.
"""

from __future__ import annotations

from collections.abc import Sequence

import altair as alt

from tagdash.core.constants import DEFAULT_MEASURES, MEASURES
from tagdash.core.records import Record
from tagdash.transforms.tags import TagAggregate, TagAggregator
from tagdash.viz.charts import tag_bar_chart

from .base import SelectableView

__all__ = ["TagBarChartView"]


class TagBarChartView(SelectableView):
    """
    Bars of summed measures per tag over the effective subset.

    The tag axis is computed from the full dataset when it changes, so bars stay in
    place while other views filter.

    Args:
        measures (Sequence[str]): Measures drawn per tag (names from MEASURES).
        name (str | None): Display name.

    Raises:
        ValueError: If a measure name is unknown.
    """

    def __init__(self, measures: Sequence[str] = DEFAULT_MEASURES, name: str | None = None) -> None:
        super().__init__(name or "Tag measures")
        unknown = [m for m in measures if m not in MEASURES]
        if unknown:
            raise ValueError(f"unknown measures: {unknown!r}")
        self.measures = tuple(measures)
        self.tag_domain: list[str] = []
        self.aggregates: dict[str, TagAggregate] = {}
        self._aggregator = TagAggregator()

    def update(
        self,
        data: Sequence[Record],
        filtered_data: Sequence[Record],
        data_changed: bool = False,
    ) -> None:
        super().update(data, filtered_data, data_changed)
        if data_changed:
            self.tag_domain = sorted({r.tag_name for r in data})
        self.aggregates = self._aggregator.aggregate(filtered_data)

    def max_count(self) -> int:
        """Largest drawn measure value (0 when nothing is drawn)."""
        return max(
            (a.measure(m) for a in self.aggregates.values() for m in self.measures),
            default=0,
        )

    def chart(self) -> alt.TopLevelMixin:
        return tag_bar_chart(
            self.aggregates,
            measures=self.measures,
            tag_domain=self.tag_domain,
            selected=self.selection,
        )
