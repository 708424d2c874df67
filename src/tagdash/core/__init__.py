"""
tagdash.core: Records, constants, and error types shared by every layer.

## Public API
- Record: immutable dataset row (pydantic model).
- RecordError: raised when a row cannot become a Record.
- Constants describing dataset columns and defaults.

## Import DAG discipline
- Depends only on stdlib and pydantic. Zero IO.
"""

from __future__ import annotations

from .constants import (
    DEFAULT_MEASURES,
    NUMERIC_COLUMNS,
    OTHER_KEY,
    REQUIRED_COLUMNS,
)
from .errors import RecordError
from .records import Record

__all__ = [
    "Record",
    "RecordError",
    "DEFAULT_MEASURES",
    "NUMERIC_COLUMNS",
    "OTHER_KEY",
    "REQUIRED_COLUMNS",
]
