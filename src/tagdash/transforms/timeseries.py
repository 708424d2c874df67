"""
Monthly tag counts for stacked time-series views.

``select_top_tags`` picks the tags tracked individually; ``TimeBucketAggregator``
counts records per calendar month for each tracked tag and folds every other tag
into one overflow counter. Buckets exist for every month between the first and last
creation month, including months without records, so the x-domain of a stacked area
chart is continuous.

Examples:
    >>> from tagdash.core import Record
    >>> recs = [Record(tag_name="a", post_id="1", creation_date="2020-01-03"),
    ...         Record(tag_name="b", post_id="2", creation_date="2020-03-09")]
    >>> [b.key for b in TimeBucketAggregator().transform(recs, ["a"])]
    ['2020-01', '2020-02', '2020-03']
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date

import polars as pl

from tagdash.core.constants import OTHER_KEY
from tagdash.core.records import Record

__all__ = [
    "TimeBucket",
    "TimeBucketAggregator",
    "select_top_tags",
    "month_range",
    "buckets_to_frame",
    "overflow_series",
]


@dataclass(frozen=True)
class TimeBucket:
    """
    Counts for one calendar month.

    Attributes:
        key (str): ``YYYY-MM``.
        date (datetime.date): First day of the month.
        counts (Mapping[str, int]): One counter per tracked tag (zero included).
        other (int): Records whose tag is not tracked.
    """

    key: str
    date: date
    counts: Mapping[str, int] = field(default_factory=dict)
    other: int = 0

    @property
    def total(self) -> int:
        return sum(self.counts.values()) + self.other


def overflow_series(tracked_tags: Iterable[str]) -> str:
    """Series name for the overflow counter, distinct from every tracked tag.

    Normally OTHER_KEY; a tracked tag with that name pushes the overflow series to
    ``"other (untracked)"`` and so on.
    """
    tracked = set(tracked_tags)
    name = OTHER_KEY
    while name in tracked:
        name = f"{name} (untracked)"
    return name


def select_top_tags(records: Iterable[Record], n: int) -> list[str]:
    """Return the ``n`` tags with the most records, most frequent first.

    Ties keep the order in which tags first appear in ``records``. Empty input or
    ``n <= 0`` gives an empty list.
    """
    if n <= 0:
        return []
    counts: dict[str, int] = {}
    for r in records:
        counts[r.tag_name] = counts.get(r.tag_name, 0) + 1
    # sorted() is stable; dict order is first-seen order.
    ranked = sorted(counts, key=lambda t: -counts[t])
    return ranked[:n]


def _parse_month(key: str) -> tuple[int, int]:
    return int(key[:4]), int(key[5:7])


def month_range(start: str, end: str) -> Iterator[str]:
    """Yield ``YYYY-MM`` keys from ``start`` to ``end`` inclusive."""
    y, m = _parse_month(start)
    end_y, end_m = _parse_month(end)
    while (y, m) <= (end_y, end_m):
        yield f"{y:04d}-{m:02d}"
        m += 1
        if m > 12:
            y, m = y + 1, 1


class TimeBucketAggregator:
    """Fold records into gap-filled monthly buckets."""

    def transform(self, records: Iterable[Record], tracked_tags: Sequence[str]) -> list[TimeBucket]:
        """Return one bucket per month in the records' date span, in chronological order.

        Records without a parseable creation date are skipped. When no record has a
        date, the result is empty.
        """
        dated = [(r.month, r.tag_name) for r in records if r.month is not None]
        if not dated:
            return []
        # Zero-padded ISO months order correctly as strings.
        min_key = min(k for k, _ in dated)
        max_key = max(k for k, _ in dated)

        tracked = list(dict.fromkeys(tracked_tags))
        tracked_set = set(tracked)
        counts: dict[str, dict[str, int]] = {}
        other: dict[str, int] = {}
        for key in month_range(min_key, max_key):
            counts[key] = dict.fromkeys(tracked, 0)
            other[key] = 0

        for key, tag in dated:
            if tag in tracked_set:
                counts[key][tag] += 1
            else:
                other[key] += 1

        out: list[TimeBucket] = []
        for key, per_tag in counts.items():
            y, m = _parse_month(key)
            out.append(TimeBucket(key=key, date=date(y, m, 1), counts=per_tag, other=other[key]))
        return out

    def transform_top(self, records: Sequence[Record], n: int) -> list[TimeBucket]:
        """Bucket ``records`` tracking their own top-``n`` tags."""
        return self.transform(records, select_top_tags(records, n))


def buckets_to_frame(buckets: Sequence[TimeBucket], *, normalize: bool = False) -> pl.DataFrame:
    """Long frame with columns ``date, key, series, value`` for stacked charts.

    Series order follows the tracked tag order, with the overflow series (named by
    ``overflow_series``) last. With ``normalize`` values are per-month shares; months
    without records stay at zero.
    """
    long_rows: list[dict[str, object]] = []
    for b in buckets:
        denom = b.total if normalize else 1
        series = list(b.counts.items()) + [(overflow_series(b.counts), b.other)]
        for name, count in series:
            value = count / denom if denom else 0.0
            long_rows.append({"date": b.date, "key": b.key, "series": name, "value": float(value)})
    return pl.DataFrame(
        long_rows,
        schema={"date": pl.Date, "key": pl.Utf8, "series": pl.Utf8, "value": pl.Float64},
    )
