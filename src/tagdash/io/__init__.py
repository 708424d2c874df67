"""
tagdash.io: Dataset loading and dashboard configuration.

## Responsibilities
- Read the CSV export with Polars, check columns, type metrics (nulls for
  unparseable values), and build immutable Records.
- Load DashboardSettings from env/TOML.

## Public API
- read_records / read_frame / frame_to_records / records_to_frame
- DashboardSettings
- IoError, IoConfigError, IoSchemaError

## Import DAG discipline
- Depends only on stdlib, polars, and tagdash.core.
- MUST NOT import transforms, views, viz, or the streamlit shell.
"""

from __future__ import annotations

from .config import DashboardSettings
from .errors import IoConfigError, IoError, IoSchemaError
from .read import frame_to_records, read_frame, read_records, records_to_frame

__all__ = [
    "DashboardSettings",
    "IoConfigError",
    "IoError",
    "IoSchemaError",
    "frame_to_records",
    "read_frame",
    "read_records",
    "records_to_frame",
]
