from __future__ import annotations

import random

import pytest

from tagdash.core import OTHER_KEY, Record
from tagdash.transforms import (
    TimeBucketAggregator,
    buckets_to_frame,
    month_range,
    overflow_series,
    select_top_tags,
)


def _rec(tag: str, date: str | None, post: str = "1") -> Record:
    return Record(tag_name=tag, post_id=post, creation_date=date)


def test_gap_month_is_filled_with_zeros() -> None:
    recs = [_rec("a", "2020-01-15"), _rec("b", "2020-03-02")]
    buckets = TimeBucketAggregator().transform(recs, ["a", "b"])
    assert [b.key for b in buckets] == ["2020-01", "2020-02", "2020-03"]
    gap = buckets[1]
    assert gap.counts == {"a": 0, "b": 0}
    assert gap.other == 0
    assert gap.date.isoformat() == "2020-02-01"


def test_untracked_tags_go_to_other() -> None:
    recs = [_rec("a", "2021-05-01"), _rec("b", "2021-05-02"), _rec("c", "2021-05-03")]
    (bucket,) = TimeBucketAggregator().transform(recs, ["a"])
    assert bucket.counts == {"a": 1}
    assert bucket.other == 2
    assert bucket.total == 3


def test_bucket_count_equals_inclusive_month_span() -> None:
    rng = random.Random(5)
    recs = [
        _rec(rng.choice("abc"), f"{rng.randint(2018, 2020)}-{rng.randint(1, 12):02d}-01")
        for _ in range(50)
    ]
    buckets = TimeBucketAggregator().transform(recs, ["a"])
    months = sorted(r.month for r in recs if r.month)
    lo_y, lo_m = map(int, months[0].split("-"))
    hi_y, hi_m = map(int, months[-1].split("-"))
    assert len(buckets) == (hi_y - lo_y) * 12 + (hi_m - lo_m) + 1
    keys = [b.key for b in buckets]
    assert keys == sorted(keys)
    assert keys == list(month_range(keys[0], keys[-1]))
    assert sum(b.total for b in buckets) == len(recs)


def test_empty_or_undated_input_gives_no_buckets() -> None:
    agg = TimeBucketAggregator()
    assert agg.transform([], ["a"]) == []
    assert agg.transform([_rec("a", None)], ["a"]) == []


def test_month_range_crosses_year_boundary() -> None:
    assert list(month_range("2019-11", "2020-02")) == ["2019-11", "2019-12", "2020-01", "2020-02"]


def test_select_top_tags_breaks_ties_by_first_occurrence() -> None:
    recs = (
        [_rec("c", None)]
        + [_rec("a", None) for _ in range(5)]
        + [_rec("b", None) for _ in range(5)]
    )
    assert select_top_tags(recs, 1) == ["a"]
    assert select_top_tags(recs, 3) == ["a", "b", "c"]


@pytest.mark.parametrize("n", [0, -2])
def test_select_top_tags_non_positive_n(n: int) -> None:
    assert select_top_tags([_rec("a", None)], n) == []


def test_select_top_tags_empty_input() -> None:
    assert select_top_tags([], 3) == []


def test_transform_top_tracks_most_frequent() -> None:
    recs = [_rec("a", "2020-01-01"), _rec("a", "2020-01-02"), _rec("b", "2020-01-03")]
    (bucket,) = TimeBucketAggregator().transform_top(recs, 1)
    assert bucket.counts == {"a": 2}
    assert bucket.other == 1


def test_shares_and_long_frame() -> None:
    recs = [_rec("a", "2020-01-01"), _rec("b", "2020-01-02"), _rec("a", "2020-03-01")]
    buckets = TimeBucketAggregator().transform(recs, ["a"])
    df = buckets_to_frame(buckets, normalize=True)
    jan = dict(df.filter(df["key"] == "2020-01").select("series", "value").iter_rows())
    feb = dict(df.filter(df["key"] == "2020-02").select("series", "value").iter_rows())
    assert jan["a"] == pytest.approx(0.5)
    assert feb == {"a": 0.0, OTHER_KEY: 0.0}  # empty month stays at zero
    assert df.columns == ["date", "key", "series", "value"]
    assert df.height == 3 * 2
    assert df.get_column("series").to_list()[:2] == ["a", OTHER_KEY]


def test_tracked_tag_named_like_overflow_keeps_its_own_series() -> None:
    recs = [_rec(OTHER_KEY, "2020-01-01"), _rec(OTHER_KEY, "2020-01-02"), _rec("x", "2020-01-03")]
    tracked = select_top_tags(recs, 1)
    assert tracked == [OTHER_KEY]

    (bucket,) = TimeBucketAggregator().transform(recs, tracked)
    df = buckets_to_frame([bucket])

    assert df.height == 2
    assert df.get_column("series").n_unique() == 2
    values = dict(df.select("series", "value").iter_rows())
    assert values == {OTHER_KEY: 2.0, overflow_series(tracked): 1.0}


def test_overflow_series_name_avoids_every_tracked_tag() -> None:
    assert overflow_series(["a", "b"]) == OTHER_KEY
    name = overflow_series([OTHER_KEY, f"{OTHER_KEY} (untracked)"])
    assert name not in {OTHER_KEY, f"{OTHER_KEY} (untracked)"}
