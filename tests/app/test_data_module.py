from __future__ import annotations

from pathlib import Path

from tagdash.io import read_records
from tagdash.transforms import TimeBucketAggregator, compute_statistics

from dashboard.data import write_demo_csv


def test_demo_csv_loads_into_records(tmp_path: Path) -> None:
    path = write_demo_csv(tmp_path / "nested" / "demo.csv")

    recs = read_records(path)

    assert len(recs) == 9
    r_row = next(r for r in recs if r.tag_name == "r")
    assert r_row.owner_user_id is None
    assert r_row.answer_count is None
    assert r_row.score == -1

    stats = compute_statistics(recs)
    assert stats.start_date == "2020-01-04"
    assert stats.end_date == "2020-04-01"
    assert stats.user_total == 3

    buckets = TimeBucketAggregator().transform(recs, ["python"])
    assert [b.key for b in buckets] == ["2020-01", "2020-02", "2020-03", "2020-04"]
    assert buckets[1].total == 0
