"""
tagdash: Cross-filtered dashboard core over tagged forum posts.

## Responsibilities
- Parse tabular post/tag rows into immutable records (tagdash.core, tagdash.io).
- Fold records into per-tag rollups, a tag co-occurrence graph, and gap-filled
  monthly series (tagdash.transforms).
- Coordinate N independent views that mutually filter each other's data
  (tagdash.views).
- Turn view state into Altair charts (tagdash.viz).

## Import DAG discipline
- core <- transforms <- views; io depends on core only; viz depends on core and
  transforms. Nothing here imports the streamlit shell (dashboard).
"""

from __future__ import annotations

__version__ = "0.1.0"
