from __future__ import annotations

import pytest
from pydantic import ValidationError

from tagdash.core import Record, RecordError
from tagdash.core.records import parse_date, parse_identifier, parse_int


def test_record_accepts_dataset_column_names_and_parses_text() -> None:
    r = Record.model_validate(
        {
            "TagName": " python ",
            "PostId": "42",
            "OwnerUserId": "7.0",
            "CreationDate": "2017-03-09 12:30:00",
            "AnswerCount": "3",
            "CommentCount": "",
            "FavoriteCount": "abc",
            "ViewCount": "1e2",
            "Score": "-2",
        }
    )
    assert r.tag_name == "python"
    assert r.post_id == "42"
    assert r.owner_user_id == "7"
    assert r.creation_date == "2017-03-09"
    assert r.month == "2017-03"
    assert r.answer_count == 3
    # Absent/unparseable metrics stay absent, never zero
    assert r.comment_count is None
    assert r.favorite_count is None
    assert r.view_count == 100
    assert r.score == -2


def test_record_is_immutable() -> None:
    r = Record(tag_name="a", post_id="1")
    with pytest.raises(ValidationError):
        r.tag_name = "b"  # type: ignore[misc]


@pytest.mark.parametrize("row", [{"PostId": "1"}, {"TagName": "  ", "PostId": "1"}, {"TagName": "a"}])
def test_from_row_rejects_rows_without_identity(row: dict[str, object]) -> None:
    with pytest.raises(RecordError):
        Record.from_row(row)


def test_parse_helpers_treat_garbage_as_absent() -> None:
    assert parse_int("2.5") is None
    assert parse_int("nan") is None
    assert parse_int(True) is None
    assert parse_int(4.0) == 4
    assert parse_identifier(3) == "3"
    assert parse_identifier(3.0) == "3"
    assert parse_identifier("") is None
    assert parse_date("not a date") is None
    assert parse_date("2020-13-01") is None
    assert parse_date("2020-02-29T10:00") == "2020-02-29"


def test_impossible_calendar_dates_are_absent() -> None:
    assert parse_date("2020-02-31") is None
    assert parse_date("2019-02-29") is None
    assert parse_date("2020-04-31 08:00") is None
    r = Record(tag_name="a", post_id="1", creation_date="2021-06-31")
    assert r.creation_date is None
    assert r.month is None


def test_missing_date_gives_no_month() -> None:
    r = Record(tag_name="a", post_id="1", creation_date="garbage")
    assert r.creation_date is None
    assert r.month is None
