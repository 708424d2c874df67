"""
tagdash.transforms: Pure folds from records to the structures views draw.

## Public API
- TagAggregator / TagAggregate: per-tag rollups.
- CooccurrenceGraphBuilder / TagGraph: tag co-occurrence graph.
- TimeBucketAggregator / TimeBucket / select_top_tags: gap-filled monthly series.
- compute_statistics / DatasetStatistics: headline numbers.

## Notes
- Every transform accepts any iterable of Records and degrades to an empty result
  on empty input; none of them raise on malformed fields.
"""

from __future__ import annotations

from .graph import CooccurrenceGraphBuilder, GraphEdge, GraphNode, TagGraph, build_cooccurrence_graph
from .stats import DatasetStatistics, compute_statistics
from .tags import TagAggregate, TagAggregator, aggregate_tags, aggregates_to_frame
from .timeseries import (
    TimeBucket,
    TimeBucketAggregator,
    buckets_to_frame,
    month_range,
    overflow_series,
    select_top_tags,
)

__all__ = [
    "CooccurrenceGraphBuilder",
    "GraphEdge",
    "GraphNode",
    "TagGraph",
    "build_cooccurrence_graph",
    "DatasetStatistics",
    "compute_statistics",
    "TagAggregate",
    "TagAggregator",
    "aggregate_tags",
    "aggregates_to_frame",
    "TimeBucket",
    "TimeBucketAggregator",
    "buckets_to_frame",
    "month_range",
    "overflow_series",
    "select_top_tags",
]
