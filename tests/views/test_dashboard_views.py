from __future__ import annotations

import pytest

from tagdash.core import Record
from tagdash.views import (
    FilterCoordinator,
    StatisticsView,
    TagBarChartView,
    TagGraphView,
    TagTimelineView,
    View,
)


def _rec(tag: str, post: str, **kw: object) -> Record:
    return Record(tag_name=tag, post_id=post, **kw)


def _data() -> list[Record]:
    return [
        _rec("a", "1", owner_user_id="u1", creation_date="2020-01-05", comment_count=2, answer_count=1),
        _rec("b", "1", owner_user_id="u1", creation_date="2020-01-05", comment_count=2, answer_count=1),
        _rec("a", "2", owner_user_id="u2", creation_date="2020-03-10", comment_count=1),
        _rec("c", "3", owner_user_id="u3", creation_date="2020-04-01", favorite_count=4),
    ]


def test_concrete_views_satisfy_view_protocol() -> None:
    for v in (TagBarChartView(), TagGraphView(), TagTimelineView(), StatisticsView()):
        assert isinstance(v, View)


def test_bar_chart_keeps_tag_domain_while_filtered() -> None:
    view = TagBarChartView()
    data = _data()
    view.update(data, data, True)
    assert view.tag_domain == ["a", "b", "c"]
    assert view.aggregates["a"].comment_count == 3
    assert view.max_count() == 4

    view.update(data, [r for r in data if r.tag_name == "c"], False)
    assert view.tag_domain == ["a", "b", "c"]
    assert list(view.aggregates) == ["c"]
    assert view.aggregates["c"].owner_user_id_count == 1


def test_bar_chart_rejects_unknown_measure() -> None:
    with pytest.raises(ValueError):
        TagBarChartView(measures=["CommentCount", "Nope"])


def test_bar_chart_filter_by_selected_tags() -> None:
    view = TagBarChartView()
    data = _data()
    assert view.filter(data) is data
    view.select(["b", "c"])
    assert [r.tag_name for r in view.filter(data)] == ["b", "c"]


def test_graph_view_layout_from_full_data_graph_from_subset() -> None:
    view = TagGraphView()
    data = _data()
    view.update(data, data, True)
    assert set(view.layout) == {"a", "b", "c"}
    assert view.graph.weight("a", "b") == 1

    subset = [r for r in data if r.tag_name != "b"]
    view.update(data, subset, False)
    assert set(view.layout) == {"a", "b", "c"}
    assert view.graph.node_ids() == ["a", "c"]
    assert view.graph.edges == ()


def test_graph_view_percentage_toggle_rebuilds() -> None:
    view = TagGraphView()
    data = _data()
    view.update(data, data, True)
    assert view.graph.weight("a", "b") == 1
    view.use_percentage = True
    # a appears twice, b once, together once: 1 / (2 + 1 - 1)
    assert view.graph.weight("a", "b") == pytest.approx(0.5)


def test_graph_view_select_region_selects_nodes_inside() -> None:
    coord = FilterCoordinator()
    graph = TagGraphView()
    other = TagBarChartView()
    coord.register_view(graph)
    coord.register_view(other)
    coord.load_or_refresh_dataset(_data())

    # circular layout puts the first node ("a") at (1, 0)
    changed = graph.select_region((0.5, -0.5), (1.5, 0.5))

    assert changed is True
    assert graph.selection == frozenset({"a"})
    assert graph.selected_nodes == frozenset({"a"})
    assert set(other.aggregates) == {"a"}

    assert graph.select_region((0.5, -0.5), (1.5, 0.5)) is False


def test_graph_view_selected_nodes_track_current_graph() -> None:
    view = TagGraphView()
    data = _data()
    view.update(data, data, True)
    view.select(["a", "c"])
    assert view.selected_nodes == frozenset({"a", "c"})
    view.update(data, [r for r in data if r.tag_name != "c"], False)
    assert view.selected_nodes == frozenset({"a"})
    assert view.selection == frozenset({"a", "c"})


def test_timeline_tracks_top_tags_of_full_dataset() -> None:
    view = TagTimelineView(top_n=1)
    data = _data()
    view.update(data, data, True)
    assert view.tracked_tags == ["a"]
    assert [b.key for b in view.buckets] == ["2020-01", "2020-02", "2020-03", "2020-04"]
    assert view.buckets[0].counts == {"a": 1}
    assert view.buckets[0].other == 1

    view.update(data, [r for r in data if r.tag_name == "c"], False)
    assert view.tracked_tags == ["a"]
    assert [b.key for b in view.buckets] == ["2020-04"]
    assert view.buckets[0].counts == {"a": 0}
    assert view.buckets[0].other == 1


def test_statistics_view_rows() -> None:
    view = StatisticsView()
    data = _data()
    view.update(data, data, True)
    view.update(data, data[:2], False)

    full, filtered = view.rows()
    assert full["Total number of posts"] == 4
    assert full["Number of distinct post creators"] == 3
    assert full["Start date"] == "2020-01-05"
    assert full["End date"] == "2020-04-01"
    assert filtered["Total number of posts"] == 2
    assert filtered["Number of distinct post creators"] == 1
    assert filtered["End date"] == "2020-01-05"
    assert view.filter(data) is data


def test_views_render_charts() -> None:
    data = _data()
    views = [TagBarChartView(), TagGraphView(), TagTimelineView()]
    for v in views:
        v.update(data, data, True)
        spec = v.chart().to_dict()
        assert isinstance(spec, dict)
