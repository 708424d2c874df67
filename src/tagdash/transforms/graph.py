"""
Tag co-occurrence graph.

Nodes are tags; an edge between two tags counts the posts carrying both. Records are
grouped by post id and every unordered pair of record indices ``i < j`` inside a post
contributes one co-occurrence when the two tag names differ. A tag repeated within
one post never pairs with itself.

Edge weights are either the raw pair count or, with ``use_percentage``, the overlap
ratio ``pair / (total(a) + total(b) - pair)`` where ``total`` counts the records
bearing a tag across the whole input.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import polars as pl

from tagdash.core.records import Record

__all__ = [
    "GraphNode",
    "GraphEdge",
    "TagGraph",
    "CooccurrenceGraphBuilder",
    "build_cooccurrence_graph",
]


@dataclass(frozen=True)
class GraphNode:
    """One tag in the graph; identity is the tag name."""

    id: str


@dataclass(frozen=True)
class GraphEdge:
    """Undirected weighted edge between two distinct tags."""

    source: str
    target: str
    weight: float

    def key(self) -> frozenset[str]:
        return frozenset((self.source, self.target))


@dataclass(frozen=True)
class TagGraph:
    """
    Immutable co-occurrence graph.

    Attributes:
        nodes (tuple[GraphNode, ...]): One node per distinct tag, in first-seen order.
        edges (tuple[GraphEdge, ...]): At most one edge per unordered pair, weight > 0.
    """

    nodes: tuple[GraphNode, ...]
    edges: tuple[GraphEdge, ...]

    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes]

    def edge(self, a: str, b: str) -> GraphEdge | None:
        """Return the edge joining ``a`` and ``b`` in either direction, or None."""
        key = frozenset((a, b))
        for e in self.edges:
            if e.key() == key and a != b:
                return e
        return None

    def weight(self, a: str, b: str) -> float:
        e = self.edge(a, b)
        return e.weight if e is not None else 0

    def incident(self, tag: str) -> Iterator[GraphEdge]:
        return (e for e in self.edges if tag in (e.source, e.target))

    def to_frames(self) -> tuple[pl.DataFrame, pl.DataFrame]:
        """Return (nodes, edges) frames with columns ``id`` and ``source, target, weight``."""
        nodes = pl.DataFrame({"id": pl.Series(self.node_ids(), dtype=pl.Utf8)})
        edges = pl.DataFrame(
            {
                "source": pl.Series([e.source for e in self.edges], dtype=pl.Utf8),
                "target": pl.Series([e.target for e in self.edges], dtype=pl.Utf8),
                "weight": pl.Series([float(e.weight) for e in self.edges], dtype=pl.Float64),
            }
        )
        return nodes, edges


class CooccurrenceGraphBuilder:
    """Build a TagGraph from records.

    Args:
        use_percentage (bool): Default weighting used when ``build`` is not told
            otherwise. Raw pair counts when False.
    """

    def __init__(self, use_percentage: bool = False) -> None:
        self.use_percentage = use_percentage

    def build(self, records: Iterable[Record], use_percentage: bool | None = None) -> TagGraph:
        if use_percentage is None:
            use_percentage = self.use_percentage

        posts: dict[str, list[str]] = {}
        totals: dict[str, int] = {}
        for r in records:
            posts.setdefault(r.post_id, []).append(r.tag_name)
            totals[r.tag_name] = totals.get(r.tag_name, 0) + 1
        node_ids = list(totals)

        pair_counts: dict[str, dict[str, int]] = {}
        for tags in posts.values():
            if len(tags) < 2:
                continue
            for i in range(len(tags)):
                ti = tags[i]
                for j in range(i + 1, len(tags)):
                    tj = tags[j]
                    if ti == tj:
                        continue
                    row_i = pair_counts.setdefault(ti, {})
                    row_i[tj] = row_i.get(tj, 0) + 1
                    row_j = pair_counts.setdefault(tj, {})
                    row_j[ti] = row_j.get(ti, 0) + 1

        edges: list[GraphEdge] = []
        for i, a in enumerate(node_ids):
            row = pair_counts.get(a)
            if not row:
                continue
            for b in node_ids[i + 1 :]:
                pair = row.get(b, 0)
                if pair <= 0:
                    continue
                weight: float = pair
                if use_percentage:
                    # Tags repeated inside one post can push pair past the union size.
                    union = totals[a] + totals[b] - pair
                    weight = min(pair / union, 1.0) if union > 0 else 1.0
                edges.append(GraphEdge(source=a, target=b, weight=weight))

        return TagGraph(nodes=tuple(GraphNode(id=n) for n in node_ids), edges=tuple(edges))


def build_cooccurrence_graph(records: Iterable[Record], *, use_percentage: bool = False) -> TagGraph:
    return CooccurrenceGraphBuilder(use_percentage=use_percentage).build(records)
