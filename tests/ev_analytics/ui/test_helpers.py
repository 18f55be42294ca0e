from ev_analytics.core.filter_state import FilterState
from ev_analytics.core.metrics import Metrics
from ev_analytics.ui.helpers import (
    dropdown_options,
    format_filter_summary,
    insights,
    metric_cards,
)


def _metrics(**overrides) -> Metrics:
    base = dict(
        total_vehicles=12345,
        avg_range=110.4,
        popular_make="TESLA",
        unique_models=42,
        bev_count=10000,
        phev_count=2345,
        latest_year=2023,
        latest_year_count=1500,
    )
    base.update(overrides)
    return Metrics(**base)


def test_dropdown_options_put_all_first():
    opts = dropdown_options(["2021", "2020"], "All Years")
    assert opts[0] == {"label": "All Years", "value": "all"}
    assert [o["value"] for o in opts[1:]] == ["2021", "2020"]


def test_metric_cards_format_values():
    cards = metric_cards(_metrics())
    values = {c["label"]: c["value"] for c in cards}
    assert values == {
        "Total EVs": "12,345",
        "Avg Range": "110.4 mi",
        "Top Manufacturer": "TESLA",
        "Unique Models": "42",
    }


def test_insights_mention_metrics():
    items = insights(_metrics())
    assert [i["title"] for i in items] == [
        "Market Leadership",
        "Growth Trajectory",
        "Range Evolution",
        "Vehicle Diversity",
    ]
    assert "TESLA" in items[0]["text"]
    assert "1,500" in items[1]["text"] and "2023" in items[1]["text"]
    assert "110.4 miles" in items[2]["text"]


def test_insights_without_latest_year():
    items = insights(_metrics(latest_year=None, latest_year_count=0))
    assert "No model year" in items[1]["text"]


def test_filter_summary():
    assert format_filter_summary(FilterState(), 3) == "All years · All manufacturers · 3 vehicles"
    assert format_filter_summary(FilterState(year="2020", make="KIA"), 1000) == "2020 · KIA · 1,000 vehicles"
