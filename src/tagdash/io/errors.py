"""
Custom exceptions for the tagdash.io module.

Purpose
- Provide IO-layer error types, distinct from tagdash.core.errors.RecordError.
  - IoConfigError: invalid or unsupported dashboard configuration.
  - IoSchemaError: a dataset file cannot be parsed or lacks required columns.

Notes
- Missing dataset files surface as the builtin FileNotFoundError.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for IO-related errors in tagdash.io.
    """


class IoConfigError(IoError):
    """
    Raised when dashboard configuration is invalid.

    Examples:
        - Negative top_n_tags
        - Unknown bar chart measure
    """


class IoSchemaError(IoError):
    """
    Raised when a dataset frame lacks the columns needed to build records.
    """
