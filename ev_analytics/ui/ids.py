from __future__ import annotations

__all__ = ["IDs", "graph_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"

    class Control:
        YEAR_SELECT = "year-select"
        MAKE_SELECT = "make-select"
        RESET_BTN = "reset-filters-btn"

        # Status line under the filters
        FILTER_SUMMARY = "filter-summary"

        CHART_GRID = "chart-grid"


GRAPH_ID_PREFIX = "graph-"


def graph_id(view_id: str) -> str:
    return f"{GRAPH_ID_PREFIX}{view_id}"
