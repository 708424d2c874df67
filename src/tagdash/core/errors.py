"""
Core exception types.

Notes:
    - Malformed numeric or date fields never raise; they become absent fields.
    - RecordError is reserved for rows missing the identity of a record
      (tag name or post id), which cannot be represented at all.

Examples:
    >>> from tagdash.core.errors import RecordError
    >>> isinstance(RecordError("missing TagName"), ValueError)
    True
"""

from __future__ import annotations

__all__ = [
    "RecordError",
]


class RecordError(ValueError):
    """A row cannot be turned into a Record (missing tag name or post id)."""
