"""
Headline statistics for a record set (post total, distinct creators, date span).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tagdash.core.records import Record

__all__ = ["DatasetStatistics", "compute_statistics"]


@dataclass(frozen=True)
class DatasetStatistics:
    post_total: int = 0
    user_total: int = 0
    start_date: str | None = None
    end_date: str | None = None


def compute_statistics(records: Iterable[Record]) -> DatasetStatistics:
    """Count records and distinct owners, and find the min/max creation date.

    Owners and dates that are absent on a record are ignored.
    """
    total = 0
    owners: set[str] = set()
    start: str | None = None
    end: str | None = None
    for r in records:
        total += 1
        if r.owner_user_id is not None:
            owners.add(r.owner_user_id)
        d = r.creation_date
        if d is not None:
            if start is None or d < start:
                start = d
            if end is None or d > end:
                end = d
    return DatasetStatistics(post_total=total, user_total=len(owners), start_date=start, end_date=end)
