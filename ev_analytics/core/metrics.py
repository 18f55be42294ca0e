from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from ev_analytics.core.aggregations import ranked_counts
from ev_analytics.core.dataset import (
    ELECTRIC_RANGE,
    MAKE,
    MODEL,
    MODEL_YEAR,
    VEHICLE_TYPE,
    column,
    parse_number,
    parse_year,
)

logger = logging.getLogger(__name__)

BEV_LABEL = "Battery Electric Vehicle (BEV)"
PHEV_LABEL = "Plug-in Hybrid Electric Vehicle (PHEV)"
NO_MAKE = "N/A"


@dataclass(frozen=True)
class Metrics:
    """
    Headline numbers for the whole dataset (filters are not applied).

    latest_year is None when no record has a parseable model year;
    latest_year_count is 0 in that case.
    """
    total_vehicles: int = 0
    avg_range: float = 0.0
    popular_make: str = NO_MAKE
    unique_models: int = 0
    bev_count: int = 0
    phev_count: int = 0
    latest_year: Optional[int] = None
    latest_year_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def round_half_up(value: float, ndigits: int = 1) -> float:
    q = Decimal(10) ** -ndigits
    return float(Decimal(str(value)).quantize(q, rounding=ROUND_HALF_UP))


def average_range(df: pd.DataFrame) -> float:
    """Mean of positive parseable electric ranges, 1 dp; 0.0 if there are none."""
    ranges = parse_number(column(df, ELECTRIC_RANGE))
    ranges = ranges[np.isfinite(ranges) & (ranges > 0)]
    if ranges.empty:
        return 0.0
    return round_half_up(float(ranges.mean()), 1)


def popular_make(df: pd.DataFrame) -> str:
    ranked = ranked_counts(column(df, MAKE), "make", limit=1)
    if ranked.empty:
        return NO_MAKE
    return str(ranked["make"].iloc[0])


def compute_metrics(df: pd.DataFrame) -> Metrics:
    """
    Compute the summary metrics over the full, unfiltered record frame.
    """
    types = column(df, VEHICLE_TYPE)
    years = parse_year(column(df, MODEL_YEAR)).dropna()

    latest_year: Optional[int] = None
    latest_year_count = 0
    if not years.empty:
        latest_year = int(years.max())
        latest_year_count = int((years == latest_year).sum())
    else:
        logger.warning(
            "No parseable model years; latest year metric unavailable",
            extra={"n_rows": len(df)},
        )

    metrics = Metrics(
        total_vehicles=len(df),
        avg_range=average_range(df),
        popular_make=popular_make(df),
        unique_models=int(column(df, MODEL).nunique()),
        bev_count=int((types == BEV_LABEL).sum()),
        phev_count=int((types == PHEV_LABEL).sum()),
        latest_year=latest_year,
        latest_year_count=latest_year_count,
    )

    logger.info("Metrics computed", extra=metrics.to_dict())
    return metrics
