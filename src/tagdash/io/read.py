"""
Read dataset files into Records.

The dataset is a CSV export with one row per (post, tag). Every column is read as
text, validated and typed by tagdash.io.validate, then turned into immutable
Records. Rows without a tag name or post id cannot be represented and are dropped
(logged at WARNING with a count); every other malformed field becomes absent.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

import polars as pl

from tagdash.core.constants import KNOWN_COLUMNS
from tagdash.core.errors import RecordError
from tagdash.core.records import Record

from .errors import IoSchemaError
from .validate import normalize_frame

__all__ = ["read_frame", "frame_to_records", "read_records", "records_to_frame"]

logger = logging.getLogger(__name__)


def read_frame(path: str | os.PathLike[str]) -> pl.DataFrame:
    """
    Read a dataset CSV into a typed frame.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        tagdash.io.errors.IoSchemaError: If the file is empty or not parseable as CSV, or
            required columns are missing.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Dataset file not found: {p}")
    try:
        df = pl.read_csv(p, infer_schema_length=0)
    except pl.exceptions.PolarsError as exc:
        raise IoSchemaError(f"could not parse dataset file {p}: {exc}") from exc
    return normalize_frame(df)


def frame_to_records(df: pl.DataFrame) -> tuple[Record, ...]:
    """Convert a frame to Records, dropping rows that lack a tag name or post id."""
    cols = [c for c in KNOWN_COLUMNS if c in df.columns]
    out: list[Record] = []
    dropped = 0
    for row in df.select(cols).iter_rows(named=True):
        try:
            out.append(Record.from_row(row))
        except RecordError:
            dropped += 1
    if dropped:
        logger.warning("dropped %d row(s) without TagName or PostId", dropped)
    logger.debug("built %d records from %d rows", len(out), df.height)
    return tuple(out)


def read_records(path: str | os.PathLike[str]) -> tuple[Record, ...]:
    """Read a dataset CSV straight into Records."""
    return frame_to_records(read_frame(path))


def records_to_frame(records: Iterable[Record]) -> pl.DataFrame:
    """Frame with the dataset column names, one row per record."""
    rows = [r.model_dump(by_alias=True) for r in records]
    schema = {
        "TagName": pl.Utf8,
        "PostId": pl.Utf8,
        "OwnerUserId": pl.Utf8,
        "CreationDate": pl.Utf8,
        "AnswerCount": pl.Int64,
        "CommentCount": pl.Int64,
        "FavoriteCount": pl.Int64,
        "ViewCount": pl.Int64,
        "Score": pl.Int64,
    }
    return pl.DataFrame(rows, schema=schema)
