from __future__ import annotations

from typing import List, Optional

from ev_analytics.core.dataset import ALL
from ev_analytics.core.filter_state import FilterState
from ev_analytics.core.metrics import Metrics

ALL_YEARS_LABEL = "All Years"
ALL_MAKES_LABEL = "All Manufacturers"
PLACEHOLDER = "N/A"


def dropdown_options(values: List[str], all_label: str) -> List[dict]:
    """Selector options: the "all" entry first, then the given values."""
    return [{"label": all_label, "value": ALL}] + [{"label": v, "value": v} for v in values]


def format_count(value: Optional[int]) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value:,}"


def format_range(value: Optional[float]) -> str:
    if value is None:
        return PLACEHOLDER
    return f"{value:.1f} mi"


def format_filter_summary(state: FilterState, n_rows: int) -> str:
    year = "All years" if state.year == ALL else state.year
    make = "All manufacturers" if state.make == ALL else state.make
    return f"{year} · {make} · {n_rows:,} vehicles"


def metric_cards(metrics: Metrics) -> List[dict]:
    """Label/value pairs for the headline cards, in display order."""
    return [
        {"icon": "⚡", "label": "Total EVs", "value": format_count(metrics.total_vehicles), "tone": "primary"},
        {"icon": "📊", "label": "Avg Range", "value": format_range(metrics.avg_range), "tone": "secondary"},
        {"icon": "🏆", "label": "Top Manufacturer", "value": metrics.popular_make, "tone": "accent"},
        {"icon": "🚗", "label": "Unique Models", "value": format_count(metrics.unique_models), "tone": "info"},
    ]


def insights(metrics: Metrics) -> List[dict]:
    """
    The four "Key Insights" paragraphs, filled in from the metrics.
    """
    if metrics.latest_year is not None:
        growth = (
            f"The EV population shows strong growth over recent years, with "
            f"{format_count(metrics.latest_year_count)} vehicles registered in "
            f"{metrics.latest_year}, demonstrating rapid adoption."
        )
    else:
        growth = "No model year information is available to describe growth."

    return [
        {
            "title": "Market Leadership",
            "text": (
                f"{metrics.popular_make} dominates the EV market with the highest number of "
                f"registered vehicles, indicating strong brand preference and market penetration."
            ),
        },
        {"title": "Growth Trajectory", "text": growth},
        {
            "title": "Range Evolution",
            "text": (
                f"Average electric range of {metrics.avg_range:.1f} miles indicates significant "
                f"improvements in battery technology, addressing range anxiety concerns."
            ),
        },
        {
            "title": "Vehicle Diversity",
            "text": (
                f"With {format_count(metrics.unique_models)} unique models available, the market "
                f"offers diverse options for consumers with varying needs and preferences."
            ),
        },
    ]
