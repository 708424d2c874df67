"""
Column checks and safe casts for raw dataset frames.

Checks performed
- Required columns present (TagName, PostId, CreationDate).
- Numeric metric columns cast non-strictly to Int64: unparseable text becomes null.
- Text columns stripped; empty strings become null.
"""

from __future__ import annotations

from collections.abc import Iterable

import polars as pl

from tagdash.core.constants import NUMERIC_COLUMNS, REQUIRED_COLUMNS

from .errors import IoSchemaError

__all__ = ["ensure_columns_present", "normalize_frame"]


def ensure_columns_present(df: pl.DataFrame, needed: Iterable[str] = REQUIRED_COLUMNS) -> None:
    missing = [c for c in needed if c not in df.columns]
    if missing:
        raise IoSchemaError(f"missing required columns: {missing!r}")


def _text(col: str) -> pl.Expr:
    stripped = pl.col(col).cast(pl.Utf8).str.strip_chars()
    return pl.when(stripped == "").then(None).otherwise(stripped).alias(col)


def _integer(col: str) -> pl.Expr:
    stripped = pl.col(col).cast(pl.Utf8).str.strip_chars()
    as_int = stripped.cast(pl.Int64, strict=False)
    # "3.0" style exports: accept integral floats, reject fractional ones
    as_float = stripped.cast(pl.Float64, strict=False)
    integral = pl.when(as_float == as_float.floor()).then(as_float.cast(pl.Int64, strict=False))
    return pl.coalesce(as_int, integral).alias(col)


def normalize_frame(df: pl.DataFrame) -> pl.DataFrame:
    """
    Validate and type a raw dataset frame.

    Args:
        df (pl.DataFrame): Frame as read from the dataset file (any dtypes).

    Returns:
        pl.DataFrame: Same rows; text columns stripped, metric columns Int64 with nulls
        for absent or unparseable values.

    Raises:
        IoSchemaError: If required columns are missing.
    """
    ensure_columns_present(df)
    exprs: list[pl.Expr] = []
    for col in df.columns:
        if col in NUMERIC_COLUMNS:
            exprs.append(_integer(col))
        elif df.schema[col] == pl.Utf8:
            exprs.append(_text(col))
    return df.with_columns(exprs) if exprs else df
