"""
Dataset access for the Streamlit shell: cached record loading and a demo dataset.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import polars as pl
import streamlit as st

from tagdash.core.records import Record
from tagdash.io import read_records

__all__ = [
    "CacheConfig",
    "load_records",
    "write_demo_csv",
    "DEMO_PATH",
]

logger = logging.getLogger(__name__)

DEMO_PATH = Path("out") / "demo_posts.csv"

@dataclass(frozen=True)
class CacheConfig:
    """Cache policy for dataset loads.

    st.cache_data fixes ttl and persist when it decorates, so one decorated loader
    is kept per (loader name, CacheConfig) in ``_LOADERS``.
    """

    ttl: int | None = None
    persist: bool = False


_LOADERS: dict[tuple[str, CacheConfig], Callable[..., Any]] = {}


def _cached_loader(name: str, cfg: CacheConfig, fn: Callable[..., Any]) -> Callable[..., Any]:
    loader = _LOADERS.get((name, cfg))
    if loader is None:
        persist = "disk" if cfg.persist else None
        loader = st.cache_data(ttl=cfg.ttl, persist=persist)(fn)
        _LOADERS[(name, cfg)] = loader
    return loader


def _load_records_impl(path: str) -> tuple[Record, ...]:
    return read_records(path)


def load_records(path: str, *, cfg: CacheConfig = CacheConfig()) -> tuple[Record, ...]:
    """Load dataset records through a Streamlit cache keyed by path."""
    fn = _cached_loader("load_records", cfg, _load_records_impl)
    return fn(path)  # type: ignore[no-any-return]


def write_demo_csv(path: Path = DEMO_PATH) -> Path:
    """Write a small tagged-posts CSV so the dashboard has something to show.

    Covers three months with a gap month, multi-tag posts, a repeated owner, and a
    row with unparseable metrics.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    df = pl.DataFrame(
        {
            "TagName": ["python", "pandas", "python", "numpy", "pandas", "numpy", "r", "python", "d3"],
            "PostId": ["1", "1", "2", "2", "2", "3", "4", "5", "5"],
            "OwnerUserId": ["10", "10", "11", "11", "11", "10", "", "12", "12"],
            "CreationDate": [
                "2020-01-04",
                "2020-01-04",
                "2020-01-20",
                "2020-01-20",
                "2020-01-20",
                "2020-03-02",
                "2020-03-15",
                "2020-04-01",
                "2020-04-01",
            ],
            "AnswerCount": ["2", "2", "1", "1", "1", "0", "n/a", "3", "3"],
            "CommentCount": ["4", "4", "0", "0", "0", "2", "", "1", "1"],
            "FavoriteCount": ["1", "1", "", "", "", "5", "", "0", "0"],
            "ViewCount": ["120", "120", "45", "45", "45", "300", "12", "80", "80"],
            "Score": ["3", "3", "1", "1", "1", "7", "-1", "2", "2"],
        }
    )
    df.write_csv(path)
    logger.info("wrote demo dataset to %s", path)
    return path
