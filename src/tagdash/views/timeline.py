"""
Stacked monthly series of the most frequent tags.
"""

from __future__ import annotations

from collections.abc import Sequence

import altair as alt

from tagdash.core.constants import DEFAULT_TOP_N_TAGS
from tagdash.core.records import Record
from tagdash.transforms.timeseries import TimeBucket, TimeBucketAggregator, select_top_tags
from tagdash.viz.charts import stacked_area_chart

from .base import SelectableView

__all__ = ["TagTimelineView"]


class TagTimelineView(SelectableView):
    """
    Monthly post counts for the top-N tags of the full dataset, plus an overflow series.

    The tracked tags are picked from the full dataset when it changes, so series keep
    their identity while other views filter; months are bucketed from the effective
    subset.

    Args:
        top_n (int): Number of tags tracked individually.
        normalize (bool): Draw per-month shares instead of counts.
        name (str | None): Display name.
    """

    def __init__(
        self, top_n: int = DEFAULT_TOP_N_TAGS, normalize: bool = True, name: str | None = None
    ) -> None:
        super().__init__(name or "Tag timeline")
        self.top_n = top_n
        self.normalize = normalize
        self.tracked_tags: list[str] = []
        self.buckets: list[TimeBucket] = []
        self._aggregator = TimeBucketAggregator()

    def update(
        self,
        data: Sequence[Record],
        filtered_data: Sequence[Record],
        data_changed: bool = False,
    ) -> None:
        super().update(data, filtered_data, data_changed)
        if data_changed:
            self.tracked_tags = select_top_tags(data, self.top_n)
        self.buckets = self._aggregator.transform(filtered_data, self.tracked_tags)

    def chart(self) -> alt.TopLevelMixin:
        return stacked_area_chart(self.buckets, normalize=self.normalize)
