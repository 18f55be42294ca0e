"""
Chart aggregators.

Each function turns a record frame into a small ordered table for one
chart. They are pure: the input frame is never modified and calling one
twice on the same frame gives the same result.

Ties in "top N" rankings are broken by the order in which each key first
appears in the input.
"""

from __future__ import annotations

from typing import List

import numpy as np
import pandas as pd

from ev_analytics.core.dataset import (
    COUNTY,
    ELECTRIC_RANGE,
    MAKE,
    MODEL,
    MODEL_YEAR,
    STATE,
    VEHICLE_TYPE,
    column,
    parse_number,
    parse_year,
)

MIN_GROWTH_YEAR = 2010
TOP_MAKES_LIMIT = 10
TOP_MODELS_LIMIT = 8
TOP_LOCATIONS_LIMIT = 10

UNKNOWN_LOCATION = "Unknown"

RANGE_LABELS = ["0-50", "51-100", "101-150", "151-200", "201-250", "251-300", "300+"]
RANGE_EDGES = [-np.inf, 50, 100, 150, 200, 250, 300, np.inf]


def ranked_counts(keys: pd.Series, key_name: str, value_name: str = "count", limit: int | None = None) -> pd.DataFrame:
    """
    Count occurrences of each key, most frequent first.

    Keys with equal counts keep first-seen order (stable sort over
    counts laid out in order of appearance).
    """
    if keys.empty:
        return pd.DataFrame({key_name: pd.Series(dtype=object), value_name: pd.Series(dtype="int64")})

    counts = keys.value_counts(sort=False).reindex(pd.unique(keys))
    counts = counts.sort_values(ascending=False, kind="stable")
    if limit is not None:
        counts = counts.head(limit)

    return pd.DataFrame({key_name: counts.index.astype(str), value_name: counts.to_numpy(dtype="int64")})


def first_seen_counts(keys: pd.Series, key_name: str, value_name: str = "count") -> pd.DataFrame:
    """Count occurrences of each key, in order of first appearance."""
    if keys.empty:
        return pd.DataFrame({key_name: pd.Series(dtype=object), value_name: pd.Series(dtype="int64")})

    counts = keys.value_counts(sort=False).reindex(pd.unique(keys))
    return pd.DataFrame({key_name: counts.index.astype(str), value_name: counts.to_numpy(dtype="int64")})


def top_makes(df: pd.DataFrame, limit: int = TOP_MAKES_LIMIT) -> pd.DataFrame:
    return ranked_counts(column(df, MAKE), "make", limit=limit)


def yearly_growth(df: pd.DataFrame, min_year: int = MIN_GROWTH_YEAR) -> pd.DataFrame:
    """
    Registrations per model year from ``min_year`` onward.

    Callers pass the full table: the growth trend ignores the year/make
    filters. Keys are the raw "Model Year" strings, ordered by their
    parsed value.
    """
    raw = column(df, MODEL_YEAR)
    years = parse_year(raw)
    keep = years.notna() & (years >= min_year)
    keep = keep.fillna(False).astype(bool)

    counts = first_seen_counts(raw[keep], "year")
    if counts.empty:
        return counts

    order = parse_year(counts["year"]).to_numpy(dtype="int64")
    counts = counts.iloc[np.argsort(order, kind="stable")]
    return counts.reset_index(drop=True)


def electric_range_buckets(df: pd.DataFrame) -> pd.DataFrame:
    """
    Count records per electric-range band.

    Bands are closed on the upper edge (50 falls in "0-50", 300 in
    "251-300"); anything above 300 is "300+". Every band is emitted, in
    order, even when empty. Unparseable ranges are skipped.
    """
    ranges = parse_number(column(df, ELECTRIC_RANGE)).dropna()
    bands = pd.cut(ranges, bins=RANGE_EDGES, labels=RANGE_LABELS, right=True, include_lowest=True)
    counts = bands.value_counts().reindex(RANGE_LABELS, fill_value=0)
    return pd.DataFrame({"range": RANGE_LABELS, "count": counts.to_numpy(dtype="int64")})


def classify_vehicle_type(value: str) -> str:
    if "BEV" in value:
        return "BEV"
    if "PHEV" in value:
        return "PHEV"
    return "Other"


def vehicle_type_distribution(df: pd.DataFrame) -> pd.DataFrame:
    types = column(df, VEHICLE_TYPE)
    types = types[types != ""]
    return first_seen_counts(types.map(classify_vehicle_type), "name", value_name="value")


def top_models(df: pd.DataFrame, limit: int = TOP_MODELS_LIMIT) -> pd.DataFrame:
    keys = column(df, MAKE) + " " + column(df, MODEL)
    return ranked_counts(keys, "model", limit=limit)


def location_keys(df: pd.DataFrame) -> pd.Series:
    """State if present, else County, else "Unknown"."""
    state = column(df, STATE)
    county = column(df, COUNTY)
    location = state.where(state != "", county)
    return location.where(location != "", UNKNOWN_LOCATION)


def geographic_distribution(df: pd.DataFrame, limit: int = TOP_LOCATIONS_LIMIT) -> pd.DataFrame:
    locations = location_keys(df)
    locations = locations[locations != UNKNOWN_LOCATION]
    return ranked_counts(locations, "state", limit=limit)


def year_options(df: pd.DataFrame, min_year: int = MIN_GROWTH_YEAR) -> List[str]:
    """Distinct raw model years from ``min_year`` onward, newest first."""
    raw = pd.Series(pd.unique(column(df, MODEL_YEAR)), dtype=object)
    raw = raw[raw != ""]
    years = parse_year(raw)
    keep = (years.notna() & (years >= min_year)).fillna(False).astype(bool)
    raw, years = raw[keep], years[keep]
    order = np.argsort(-years.to_numpy(dtype="int64"), kind="stable")
    return [str(v) for v in raw.to_numpy()[order]]


def make_options(df: pd.DataFrame) -> List[str]:
    makes = column(df, MAKE)
    return sorted({m for m in makes if m})
