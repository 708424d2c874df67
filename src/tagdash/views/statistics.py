"""
Statistics panel: headline numbers for the full dataset and the effective subset.
"""

from __future__ import annotations

from collections.abc import Sequence

from tagdash.core.records import Record
from tagdash.transforms.stats import DatasetStatistics, compute_statistics

from .base import BaseView

__all__ = ["StatisticsView"]


class StatisticsView(BaseView):
    """Read-only view; its filter is the identity."""

    def __init__(self, name: str | None = None) -> None:
        super().__init__(name or "Statistics")
        self.dataset_stats = DatasetStatistics()
        self.filtered_stats = DatasetStatistics()

    def update(
        self,
        data: Sequence[Record],
        filtered_data: Sequence[Record],
        data_changed: bool = False,
    ) -> None:
        super().update(data, filtered_data, data_changed)
        if data_changed:
            self.dataset_stats = compute_statistics(self.data)
        self.filtered_stats = compute_statistics(self.filtered_data)

    def rows(self) -> list[dict[str, object]]:
        """Table rows (complete dataset, filtered dataset) for display."""
        out: list[dict[str, object]] = []
        for label, s in (("Complete dataset", self.dataset_stats), ("Filtered dataset", self.filtered_stats)):
            out.append(
                {
                    "": label,
                    "Total number of posts": s.post_total,
                    "Number of distinct post creators": s.user_total,
                    "Start date": s.start_date or "",
                    "End date": s.end_date or "",
                }
            )
        return out
