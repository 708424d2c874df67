"""
Altair chart builders for the dashboard views.

Each builder takes transform output (aggregates, buckets, graphs) and returns a
top-level Altair chart with inline data. Builders do no aggregation of their own
beyond reshaping to long frames.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence

import altair as alt
import polars as pl

from tagdash.core.constants import DEFAULT_MEASURES
from tagdash.transforms.graph import TagGraph
from tagdash.transforms.tags import TagAggregate, aggregates_to_frame
from tagdash.transforms.timeseries import TimeBucket, buckets_to_frame, overflow_series

from .base import apply_chart_defaults, empty_chart, to_values

__all__ = [
    "circular_layout",
    "tag_bar_chart",
    "stacked_area_chart",
    "network_chart",
]

SELECTED_COLOR = "green"
UNSELECTED_COLOR = "red"


def circular_layout(node_ids: Sequence[str], *, radius: float = 1.0) -> dict[str, tuple[float, float]]:
    """Place nodes evenly on a circle, in the given order."""
    n = len(node_ids)
    if n == 0:
        return {}
    if n == 1:
        return {node_ids[0]: (0.0, 0.0)}
    return {
        node: (radius * math.cos(2 * math.pi * k / n), radius * math.sin(2 * math.pi * k / n))
        for k, node in enumerate(node_ids)
    }


def tag_bar_chart(
    aggregates: Mapping[str, TagAggregate],
    *,
    measures: Sequence[str] = DEFAULT_MEASURES,
    tag_domain: Sequence[str] | None = None,
    selected: Iterable[str] = (),
    height: int = 300,
) -> alt.TopLevelMixin:
    """Grouped bars: one group per tag, one bar per measure.

    ``tag_domain`` fixes the x-axis (e.g. every tag of the full dataset) so filtered
    redraws keep tags in place; tags absent from ``aggregates`` draw no bars.
    """
    df = aggregates_to_frame(aggregates, measures)
    if df.is_empty():
        return empty_chart("No tags in the current selection")
    selected_set = set(selected)
    df = df.with_columns(
        pl.col("TagName").is_in(list(selected_set)).alias("selected")
        if selected_set
        else pl.lit(True).alias("selected")
    )
    domain = list(tag_domain) if tag_domain is not None else sorted(aggregates)
    ch = (
        alt.Chart(alt.Data(values=to_values(df)))
        .mark_bar()
        .encode(
            x=alt.X("TagName:N", scale=alt.Scale(domain=domain), sort=domain, title="Tag"),
            xOffset=alt.XOffset("measure:N", sort=list(measures)),
            y=alt.Y("count:Q", title="Count"),
            color=alt.Color("measure:N", sort=list(measures), title="Measure"),
            opacity=alt.condition(alt.datum.selected, alt.value(1.0), alt.value(0.35)),
            tooltip=["TagName:N", "measure:N", "count:Q"],
        )
        .properties(height=height)
    )
    return apply_chart_defaults(ch)


def stacked_area_chart(
    buckets: Sequence[TimeBucket],
    *,
    normalize: bool = True,
    height: int = 300,
) -> alt.TopLevelMixin:
    """Stacked areas of monthly tag counts, or of per-month shares when ``normalize``."""
    if not buckets:
        return empty_chart("No dated records in the current selection")
    df = buckets_to_frame(buckets, normalize=normalize)
    series_order = list(buckets[0].counts) + [overflow_series(buckets[0].counts)]
    rank = {s: i for i, s in enumerate(series_order)}
    df = df.with_columns(
        pl.col("date").cast(pl.Utf8),
        pl.Series("series_rank", [rank[s] for s in df.get_column("series").to_list()], dtype=pl.Int64),
    )
    y_title = "Share of posts" if normalize else "Posts"
    ch = (
        alt.Chart(alt.Data(values=to_values(df)))
        .mark_area()
        .encode(
            x=alt.X("date:T", title="Month"),
            y=alt.Y(
                "value:Q",
                stack="zero",
                title=y_title,
                axis=alt.Axis(format="%") if normalize else alt.Axis(),
            ),
            color=alt.Color("series:N", sort=series_order, title="Tag"),
            order=alt.Order("series_rank:Q"),
            tooltip=["key:N", "series:N", alt.Tooltip("value:Q", format=".2f")],
        )
        .properties(height=height)
    )
    return apply_chart_defaults(ch)


def network_chart(
    graph: TagGraph,
    layout: Mapping[str, tuple[float, float]],
    *,
    selected: Iterable[str] = (),
    height: int = 400,
) -> alt.TopLevelMixin:
    """Nodes at ``layout`` positions with edges whose opacity scales with weight.

    Nodes missing from ``layout`` are not drawn. Selected nodes are drawn in
    SELECTED_COLOR, the rest in UNSELECTED_COLOR.
    """
    positioned = [n for n in graph.node_ids() if n in layout]
    if not positioned:
        return empty_chart("No tags to draw")
    selected_set = set(selected)
    nodes = pl.DataFrame(
        {
            "id": positioned,
            "x": [layout[n][0] for n in positioned],
            "y": [layout[n][1] for n in positioned],
            "selected": [n in selected_set for n in positioned],
        }
    )
    node_layer = (
        alt.Chart(alt.Data(values=to_values(nodes)))
        .mark_circle(size=80)
        .encode(
            x=alt.X("x:Q", axis=None),
            y=alt.Y("y:Q", axis=None),
            color=alt.condition(
                alt.datum.selected, alt.value(SELECTED_COLOR), alt.value(UNSELECTED_COLOR)
            ),
            tooltip=["id:N"],
        )
    )
    labels = node_layer.mark_text(dx=12, align="left").encode(text="id:N")

    edge_rows = [
        {
            "source": e.source,
            "target": e.target,
            "x1": layout[e.source][0],
            "y1": layout[e.source][1],
            "x2": layout[e.target][0],
            "y2": layout[e.target][1],
            "weight": float(e.weight),
        }
        for e in graph.edges
        if e.source in layout and e.target in layout
    ]
    layers: list[alt.Chart] = []
    if edge_rows:
        edge_layer = (
            alt.Chart(alt.Data(values=edge_rows))
            .mark_rule(color="#0000ff")
            .encode(
                x="x1:Q",
                y="y1:Q",
                x2="x2:Q",
                y2="y2:Q",
                opacity=alt.Opacity("weight:Q", scale=alt.Scale(range=[0.05, 1.0]), legend=None),
                strokeWidth=alt.StrokeWidth("weight:Q", scale=alt.Scale(range=[0.5, 4.0]), legend=None),
                tooltip=["source:N", "target:N", "weight:Q"],
            )
        )
        layers.append(edge_layer)
    layers.extend([node_layer, labels])
    ch = alt.layer(*layers).properties(height=height)
    return apply_chart_defaults(ch)
