from __future__ import annotations

from tagdash.core import Record
from tagdash.transforms import DatasetStatistics, compute_statistics


def test_statistics_count_posts_owners_and_span() -> None:
    recs = [
        Record(tag_name="a", post_id="1", owner_user_id="u1", creation_date="2020-02-01"),
        Record(tag_name="b", post_id="1", owner_user_id="u1", creation_date="2020-02-01"),
        Record(tag_name="a", post_id="2", owner_user_id=None, creation_date="2019-12-31"),
        Record(tag_name="c", post_id="3", owner_user_id="u2"),
    ]
    s = compute_statistics(recs)
    assert s == DatasetStatistics(
        post_total=4, user_total=2, start_date="2019-12-31", end_date="2020-02-01"
    )


def test_statistics_of_empty_input() -> None:
    assert compute_statistics([]) == DatasetStatistics()
