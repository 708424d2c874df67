"""
Pydantic v2 row model for one tagged post.

Responsibilities
- Define Record, the immutable input row every transform and view consumes.
- Normalize loosely typed CSV values: identifiers to strings, metrics to ints,
  dates to their ``YYYY-MM-DD`` part.
- Treat blank or unparseable metrics and dates as absent (None), never as zero.

Table mappings
- TagName -> tag_name, PostId -> post_id, OwnerUserId -> owner_user_id,
  CreationDate -> creation_date, AnswerCount -> answer_count,
  CommentCount -> comment_count, FavoriteCount -> favorite_count,
  ViewCount -> view_count, Score -> score.

Examples:
    >>> from tagdash.core.records import Record
    >>> r = Record.model_validate({"TagName": "python", "PostId": "7", "CreationDate": "2020-01-05",
    ...                            "AnswerCount": "3", "Score": "n/a"})
    >>> (r.tag_name, r.post_id, r.answer_count, r.score, r.month)
    ('python', '7', 3, None, '2020-01')
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import RecordError

__all__ = [
    "Record",
    "parse_int",
    "parse_identifier",
    "parse_date",
]

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


def parse_int(value: Any) -> int | None:
    """Parse a metric value to int; None when blank, non-numeric or non-integral."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        f = float(text)
    except ValueError:
        return None
    if f != f or f in (float("inf"), float("-inf")) or not f.is_integer():
        return None
    return int(f)


def parse_identifier(value: Any) -> str | None:
    """Normalize an identifier to a string (``1``, ``"1"`` and ``1.0`` -> ``"1"``)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if value != value:
            return None
        return str(int(value)) if value.is_integer() else str(value)
    text = str(value).strip()
    if not text:
        return None
    if text.endswith(".0") and text[:-2].lstrip("-").isdigit():
        return text[:-2]
    return text


def parse_date(value: Any) -> str | None:
    """Return the ``YYYY-MM-DD`` part of a date string, or None if it does not parse."""
    if value is None:
        return None
    if hasattr(value, "isoformat"):
        value = value.isoformat()
    m = _DATE_RE.match(str(value).strip())
    if not m:
        return None
    try:
        date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None
    return m.group(0)


class Record(BaseModel):
    """
    One dataset row: a post carrying one tag.

    A post with several tags appears as several records sharing ``post_id``.

    Attributes:
        tag_name (str): Tag of this row (required, non-empty).
        post_id (str): Post identifier (required).
        owner_user_id (str | None): Author identifier, if known.
        creation_date (str | None): ``YYYY-MM-DD`` creation date, if parseable.
        answer_count, comment_count, favorite_count, view_count, score (int | None):
            Metrics, None when absent or unparseable.

    Raises:
        pydantic.ValidationError: If tag_name or post_id is missing or blank.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    tag_name: str = Field(alias="TagName")
    post_id: str = Field(alias="PostId")
    owner_user_id: str | None = Field(default=None, alias="OwnerUserId")
    creation_date: str | None = Field(default=None, alias="CreationDate")
    answer_count: int | None = Field(default=None, alias="AnswerCount")
    comment_count: int | None = Field(default=None, alias="CommentCount")
    favorite_count: int | None = Field(default=None, alias="FavoriteCount")
    view_count: int | None = Field(default=None, alias="ViewCount")
    score: int | None = Field(default=None, alias="Score")

    @field_validator("tag_name", mode="before")
    @classmethod
    def _v_tag_name(cls, v: Any) -> str:
        text = "" if v is None else str(v).strip()
        if not text:
            raise RecordError("TagName must be a non-empty string")
        return text

    @field_validator("post_id", mode="before")
    @classmethod
    def _v_post_id(cls, v: Any) -> str:
        ident = parse_identifier(v)
        if ident is None:
            raise RecordError("PostId must be present")
        return ident

    @field_validator("owner_user_id", mode="before")
    @classmethod
    def _v_owner(cls, v: Any) -> str | None:
        return parse_identifier(v)

    @field_validator("creation_date", mode="before")
    @classmethod
    def _v_date(cls, v: Any) -> str | None:
        return parse_date(v)

    @field_validator(
        "answer_count", "comment_count", "favorite_count", "view_count", "score", mode="before"
    )
    @classmethod
    def _v_metric(cls, v: Any) -> int | None:
        return parse_int(v)

    @property
    def month(self) -> str | None:
        """``YYYY-MM`` bucket key of the creation date, or None."""
        return self.creation_date[:7] if self.creation_date else None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> Record:
        """Build a Record from a CSV-style row keyed by column names.

        Raises:
            RecordError: If the row has no usable TagName or PostId.
        """
        try:
            return cls.model_validate(row)
        except ValidationError as exc:
            raise RecordError(f"invalid record row: {exc.errors()[0].get('msg')}") from exc
