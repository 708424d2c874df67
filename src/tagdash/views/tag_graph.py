"""
Tag co-occurrence graph view.

Nodes are selectable; the selection restricts other views to records bearing the
selected tags. The node layout is computed once per dataset so positions do not jump
while other views filter.
"""

from __future__ import annotations

from collections.abc import Sequence

import altair as alt

from tagdash.core.records import Record
from tagdash.transforms.graph import CooccurrenceGraphBuilder, TagGraph
from tagdash.viz.charts import circular_layout, network_chart

from .base import SelectableView

__all__ = ["TagGraphView"]


class TagGraphView(SelectableView):
    """
    Co-occurrence graph of the effective subset.

    Args:
        use_percentage (bool): Weight edges by overlap ratio instead of raw count.
        name (str | None): Display name.

    Attributes:
        graph (TagGraph): Graph of the last effective subset.
        layout (dict[str, tuple[float, float]]): Node positions for every tag of the
            full dataset.
        selected_nodes (frozenset[str]): Selected tags present in the current graph.
    """

    def __init__(self, use_percentage: bool = False, name: str | None = None) -> None:
        super().__init__(name or "Tag graph")
        self.builder = CooccurrenceGraphBuilder(use_percentage=use_percentage)
        self.graph = TagGraph(nodes=(), edges=())
        self.layout: dict[str, tuple[float, float]] = {}
        self.selected_nodes: frozenset[str] = frozenset()

    @property
    def use_percentage(self) -> bool:
        return self.builder.use_percentage

    @use_percentage.setter
    def use_percentage(self, value: bool) -> None:
        self.builder.use_percentage = bool(value)
        self.graph = self.builder.build(self.filtered_data)

    def update(
        self,
        data: Sequence[Record],
        filtered_data: Sequence[Record],
        data_changed: bool = False,
    ) -> None:
        super().update(data, filtered_data, data_changed)
        if data_changed:
            full = self.builder.build(data)
            self.layout = circular_layout(full.node_ids())
        self.graph = self.builder.build(filtered_data)
        self.on_selection_changed()

    def on_selection_changed(self) -> None:
        present = set(self.graph.node_ids())
        self.selected_nodes = frozenset(t for t in self.selection if t in present)

    def select_region(
        self, min_xy: tuple[float, float], max_xy: tuple[float, float]
    ) -> bool:
        """Select the nodes strictly inside the rectangle spanned by two corners."""
        x0, x1 = sorted((min_xy[0], max_xy[0]))
        y0, y1 = sorted((min_xy[1], max_xy[1]))
        inside = [
            node
            for node in self.graph.node_ids()
            if node in self.layout
            and x0 < self.layout[node][0] < x1
            and y0 < self.layout[node][1] < y1
        ]
        return self.select(inside)

    def chart(self) -> alt.TopLevelMixin:
        return network_chart(self.graph, self.layout, selected=self.selected_nodes)
