"""
Shared helpers for chart builders: inline-data conversion and uniform defaults.
"""

from __future__ import annotations

from typing import Any

import altair as alt
import polars as pl

__all__ = ["to_values", "apply_chart_defaults", "empty_chart"]


def to_values(df: pl.DataFrame) -> list[dict[str, Any]]:
    """Rows of ``df`` as JSON-ready dicts for ``alt.Data(values=...)``."""
    return df.to_dicts()


# Uniform chart defaults for a consistent look across panels
def apply_chart_defaults(ch: alt.TopLevelMixin) -> alt.TopLevelMixin:
    try:
        return (
            ch.configure_axis(labelFontSize=12, titleFontSize=12, grid=True)
            .configure_legend(labelFontSize=12, titleFontSize=12)
            .configure_title(fontSize=14)
            .configure_view(strokeOpacity=0)
        )
    except Exception:
        # Non-top-level charts cannot be configured; return as-is
        return ch


def empty_chart(message: str) -> alt.TopLevelMixin:
    """Placeholder chart showing ``message`` where there is nothing to draw."""
    return apply_chart_defaults(
        alt.Chart(alt.Data(values=[{"text": message}])).mark_text().encode(text="text:N")
    )
