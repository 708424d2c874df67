from __future__ import annotations

from tagdash.core import Record
from tagdash.io import DashboardSettings

from dashboard.ui.helpers import build_dashboard, describe_selection


def _data() -> list[Record]:
    return [
        Record(tag_name="python", post_id="1", owner_user_id="10", creation_date="2020-01-04"),
        Record(tag_name="pandas", post_id="1", owner_user_id="10", creation_date="2020-01-04"),
        Record(tag_name="r", post_id="2", owner_user_id="11", creation_date="2020-02-10"),
    ]


def test_describe_selection_labels() -> None:
    assert describe_selection(frozenset()) == "all tags"
    assert describe_selection({"r", "python"}) == "python, r"
    assert describe_selection({"a", "b", "c", "d"}, limit=2) == "a, b (+2 more)"


def test_build_dashboard_wires_views_from_settings() -> None:
    settings = DashboardSettings(top_n_tags=1, use_percentage=True, measures=("ViewCount",))

    dash = build_dashboard(settings, _data())

    assert dash.coordinator.views == [dash.graph, dash.bars, dash.timeline, dash.stats]
    assert dash.graph.use_percentage is True
    assert dash.bars.measures == ("ViewCount",)
    assert dash.timeline.tracked_tags == ["python"]
    assert dash.stats.dataset_stats.post_total == 3
    assert dash.graph.graph.weight("python", "pandas") == 1.0


def test_selection_in_one_panel_filters_the_others() -> None:
    dash = build_dashboard(DashboardSettings(), _data())

    dash.bars.select(["r"])

    assert dash.stats.filtered_stats.post_total == 1
    assert dash.graph.graph.node_ids() == ["r"]
    # The bar chart is not filtered by its own selection
    assert set(dash.bars.aggregates) == {"python", "pandas", "r"}

    dash.close()
    assert dash.coordinator.views == []
