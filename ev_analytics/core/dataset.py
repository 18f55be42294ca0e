from __future__ import annotations

from pathlib import Path
from typing import List, Optional, TYPE_CHECKING

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from ev_analytics.core.filter_state import FilterState


# Header names as they appear in the source CSV
MAKE = "Make"
MODEL = "Model"
MODEL_YEAR = "Model Year"
ELECTRIC_RANGE = "Electric Range"
VEHICLE_TYPE = "Electric Vehicle Type"
STATE = "State"
COUNTY = "County"

REQUIRED_COLUMNS = (MODEL_YEAR, MAKE, MODEL)

ALL = "all"


def column(df: pd.DataFrame, name: str) -> pd.Series:
    """
    Return a string column, or a Series of empty strings if the header
    is absent. Missing fields behave like empty ones everywhere.
    """
    if name not in df.columns:
        return pd.Series([""] * len(df), index=df.index, dtype=object)
    return df[name].fillna("").astype(str)


# Leading numeric prefix, the rest of the field is ignored ("250 mi" -> 250)
LEADING_NUMBER = r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
LEADING_INTEGER = r"^\s*([+-]?\d+)"


def _leading_value(values: pd.Series, pattern: str) -> pd.Series:
    matched = values.astype(str).str.extract(pattern, expand=False)
    return pd.to_numeric(matched, errors="coerce").astype("float64")


def parse_number(values: pd.Series) -> pd.Series:
    """
    Parse a string column to float from each field's leading number.

    "250 mi" parses as 250.0; a field with no leading number becomes NaN.
    """
    return _leading_value(values, LEADING_NUMBER)


def parse_year(values: pd.Series) -> pd.Series:
    """
    Parse a string column to whole years (nullable Int64) from each field's
    leading integer, so "2021 (est)" is 2021 and "2020.7" is 2020.

    Fields with no leading digits or absurdly large values are <NA>.
    """
    numbers = _leading_value(values, LEADING_INTEGER)
    # out-of-range values would overflow Int64
    numbers = numbers.where(np.isfinite(numbers) & (numbers.abs() < 1e9))
    return np.trunc(numbers).astype("Int64")


def filtered_view(df: pd.DataFrame, state: FilterState) -> pd.DataFrame:
    """
    Rows matching the year and make constraints of ``state``.

    Plain string equality, no normalisation. ``"all"`` leaves a dimension
    unconstrained. A value that matches nothing gives an empty frame.
    """
    mask = pd.Series(True, index=df.index)
    if state.year != ALL:
        mask &= column(df, MODEL_YEAR) == state.year
    if state.make != ALL:
        mask &= column(df, MAKE) == state.make
    return df.loc[mask]


class Dataset:
    """
    The loaded record table.

    Wraps a DataFrame of string columns in input order. The frame is
    treated as read-only after construction; filtering always returns a
    new frame.
    """

    def __init__(
        self,
        name: str,
        records: pd.DataFrame,
        source: Optional[str] = None,
        file_path: Optional[Path] = None,
    ) -> None:
        self.name = name
        self.records = records.reset_index(drop=True)
        self.source = source
        self.file_path = file_path

    def __len__(self) -> int:
        return len(self.records)

    @property
    def columns(self) -> List[str]:
        return [str(c) for c in self.records.columns]

    @property
    def is_empty(self) -> bool:
        return self.records.empty

    def subset_for_state(self, state: FilterState) -> pd.DataFrame:
        return filtered_view(self.records, state)
