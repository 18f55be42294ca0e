from __future__ import annotations

from dataclasses import dataclass

from ev_analytics.core.aggregations import (
    MIN_GROWTH_YEAR,
    TOP_LOCATIONS_LIMIT,
    TOP_MAKES_LIMIT,
    TOP_MODELS_LIMIT,
)

DEFAULT_DATA_SOURCE = "Electric_Vehicle_Population_Data.csv"


@dataclass(frozen=True)
class GlobalConfig:
    """
    App-wide settings read from global.json.

    data_source is a local path (already resolved against the config root)
    or an http(s) URL.
    """
    ui_title: str = "Electric Vehicle Analytics"
    subtitle: str = "Comprehensive insights into the EV population landscape"
    data_source: str = DEFAULT_DATA_SOURCE
    top_makes_limit: int = TOP_MAKES_LIMIT
    top_models_limit: int = TOP_MODELS_LIMIT
    top_locations_limit: int = TOP_LOCATIONS_LIMIT
    min_growth_year: int = MIN_GROWTH_YEAR
