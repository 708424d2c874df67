"""
Dataset column names and dashboard defaults.

This module is zero-IO and uses only the Python standard library. Column names are
the headers of the source CSV export; Record exposes them as lower_snake fields.
"""

from __future__ import annotations

__all__ = [
    "REQUIRED_COLUMNS",
    "NUMERIC_COLUMNS",
    "KNOWN_COLUMNS",
    "MEASURES",
    "DEFAULT_MEASURES",
    "DEFAULT_TOP_N_TAGS",
    "OTHER_KEY",
]

# Columns a dataset file must carry to be loadable at all.
REQUIRED_COLUMNS: tuple[str, ...] = ("TagName", "PostId", "CreationDate")

# Numeric metrics; arrive as text and are parsed to integers (absent when unparseable).
NUMERIC_COLUMNS: tuple[str, ...] = (
    "AnswerCount",
    "CommentCount",
    "FavoriteCount",
    "ViewCount",
    "Score",
)

KNOWN_COLUMNS: tuple[str, ...] = ("TagName", "PostId", "OwnerUserId", "CreationDate") + NUMERIC_COLUMNS

# Per-tag measures exposed by TagAggregate, keyed by display name.
MEASURES: tuple[str, ...] = (
    "AnswerCount",
    "CommentCount",
    "FavoriteCount",
    "ViewCount",
    "ScoreCount",
    "OwnerUserIdCount",
    "RecordCount",
)

DEFAULT_MEASURES: tuple[str, ...] = (
    "CommentCount",
    "OwnerUserIdCount",
    "AnswerCount",
    "FavoriteCount",
)

DEFAULT_TOP_N_TAGS: int = 10

# Key of the overflow counter in time buckets (tags not individually tracked).
OTHER_KEY: str = "other"
