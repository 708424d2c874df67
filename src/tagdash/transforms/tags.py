"""
Per-tag rollups over a record set.

TagAggregator folds records into one TagAggregate per distinct tag name in a single
linear pass. Metric sums only move when the source field is present on the record,
and owners are de-duplicated per tag through an aggregator-local ``seen_owners``
table, so OwnerUserIdCount is the number of distinct authors rather than a sum.

The fold is commutative: any ordering of the same records yields equal aggregates.

Examples:
    >>> from tagdash.core import Record
    >>> recs = [Record(tag_name="a", post_id="1", owner_user_id="u1", answer_count=2),
    ...         Record(tag_name="a", post_id="2", owner_user_id="u1"),
    ...         Record(tag_name="b", post_id="1")]
    >>> aggs = TagAggregator().aggregate(recs)
    >>> aggs["a"].record_count, aggs["a"].answer_count, aggs["a"].owner_user_id_count
    (2, 2, 1)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import polars as pl

from tagdash.core.constants import MEASURES
from tagdash.core.records import Record

__all__ = [
    "TagAggregate",
    "TagAggregator",
    "aggregate_tags",
    "aggregates_to_frame",
]

_MEASURE_ATTRS: dict[str, str] = {
    "AnswerCount": "answer_count",
    "CommentCount": "comment_count",
    "FavoriteCount": "favorite_count",
    "ViewCount": "view_count",
    "ScoreCount": "score_count",
    "OwnerUserIdCount": "owner_user_id_count",
    "RecordCount": "record_count",
}


@dataclass(frozen=True)
class TagAggregate:
    """
    Rolled-up metrics for one tag over a record set.

    Attributes:
        tag_name (str): Tag this aggregate describes.
        answer_count, comment_count, favorite_count, view_count (int): Sums of the
            present values of the matching record field.
        score_count (int): Sum of present scores.
        owner_user_id_count (int): Number of distinct present owner ids.
        record_count (int): Number of records (posts) bearing the tag.
    """

    tag_name: str
    answer_count: int = 0
    comment_count: int = 0
    favorite_count: int = 0
    view_count: int = 0
    score_count: int = 0
    owner_user_id_count: int = 0
    record_count: int = 0

    def measure(self, name: str) -> int:
        """Return a measure by its display name (e.g. ``"CommentCount"``).

        Raises:
            KeyError: If the name is not one of tagdash.core.constants.MEASURES.
        """
        return int(getattr(self, _MEASURE_ATTRS[name]))


class _Totals:
    __slots__ = tuple(_MEASURE_ATTRS.values())

    def __init__(self) -> None:
        for attr in self.__slots__:
            setattr(self, attr, 0)


class TagAggregator:
    """Fold records into ``{tag_name: TagAggregate}``.

    Each call to ``aggregate`` starts from empty state; aggregates carry no identity
    across runs.
    """

    def aggregate(self, records: Iterable[Record]) -> dict[str, TagAggregate]:
        totals: dict[str, _Totals] = {}
        seen_owners: dict[str, set[str]] = {}
        for r in records:
            t = totals.get(r.tag_name)
            if t is None:
                t = totals[r.tag_name] = _Totals()
                seen_owners[r.tag_name] = set()
            t.record_count += 1
            if r.answer_count is not None:
                t.answer_count += r.answer_count
            if r.comment_count is not None:
                t.comment_count += r.comment_count
            if r.favorite_count is not None:
                t.favorite_count += r.favorite_count
            if r.view_count is not None:
                t.view_count += r.view_count
            if r.score is not None:
                t.score_count += r.score
            if r.owner_user_id is not None:
                owners = seen_owners[r.tag_name]
                if r.owner_user_id not in owners:
                    owners.add(r.owner_user_id)
                    t.owner_user_id_count += 1
        return {
            name: TagAggregate(tag_name=name, **{a: getattr(t, a) for a in _Totals.__slots__})
            for name, t in totals.items()
        }


def aggregate_tags(records: Iterable[Record]) -> dict[str, TagAggregate]:
    """Functional shorthand for ``TagAggregator().aggregate(records)``."""
    return TagAggregator().aggregate(records)


def aggregates_to_frame(
    aggregates: Mapping[str, TagAggregate], measures: Iterable[str] = MEASURES
) -> pl.DataFrame:
    """Long frame with one row per (tag, measure): columns TagName, measure, count.

    Rows are ordered by tag name, then by the given measure order.
    """
    measures = list(measures)
    rows = [
        {"TagName": name, "measure": m, "count": aggregates[name].measure(m)}
        for name in sorted(aggregates)
        for m in measures
    ]
    if not rows:
        return pl.DataFrame(
            {
                "TagName": pl.Series([], dtype=pl.Utf8),
                "measure": pl.Series([], dtype=pl.Utf8),
                "count": pl.Series([], dtype=pl.Int64),
            }
        )
    return pl.DataFrame(rows, schema={"TagName": pl.Utf8, "measure": pl.Utf8, "count": pl.Int64})
