from __future__ import annotations

import io
import logging
import warnings
from pathlib import Path

import pandas as pd
import requests

from ev_analytics.core.dataset import REQUIRED_COLUMNS, Dataset, column
from ev_analytics.core.exceptions import FetchFailure, ParseFailure

logger = logging.getLogger(__name__)

FETCH_TIMEOUT_S = 30


def is_url(source: str | Path) -> bool:
    return str(source).lower().startswith(("http://", "https://"))


def fetch_text(source: str | Path, timeout: float = FETCH_TIMEOUT_S) -> str:
    """
    Read the raw CSV text from a local path or an http(s) URL.

    Raises:
        FetchFailure: if the file is missing/unreadable or the request fails
    """
    if is_url(source):
        url = str(source)
        try:
            resp = requests.get(url, timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchFailure(f"Failed to fetch CSV file: {e}") from e
        try:
            return resp.content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise FetchFailure(f"Failed to fetch CSV file: {e}") from e

    path = Path(source)
    if not path.is_file():
        raise FetchFailure(f"Failed to fetch CSV file: {path} not found")
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FetchFailure(f"Failed to fetch CSV file: {e}") from e


def parse_records(text: str) -> pd.DataFrame:
    """
    Parse CSV text into a frame of string columns, header-driven.

    Blank lines are skipped, fields are kept verbatim (no NA inference) and
    short rows are padded with empty strings. A trailing comma on
    every row is tolerated; any other row wider than the header is rejected
    rather than shifted. Rows missing Model Year, Make or Model are dropped.

    Raises:
        ParseFailure: if the parser rejects the text, a row is wider than
            the header or a required header is absent
    """
    try:
        # rows wider than the header surface as a ParserWarning
        with warnings.catch_warnings():
            warnings.simplefilter("error", pd.errors.ParserWarning)
            df = pd.read_csv(
                io.StringIO(text.lstrip("\ufeff")),
                dtype=object,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
            )
    except pd.errors.EmptyDataError as e:
        raise ParseFailure("Failed to load data: CSV is empty") from e
    except (pd.errors.ParserError, pd.errors.ParserWarning, ValueError) as e:
        raise ParseFailure(f"Failed to load data: {e}") from e

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ParseFailure(f"Failed to load data: missing required columns {missing}")

    df = df.fillna("")

    keep = pd.Series(True, index=df.index)
    for name in REQUIRED_COLUMNS:
        keep &= column(df, name) != ""

    n_dropped = int((~keep).sum())
    if n_dropped:
        logger.info(
            "Dropped incomplete records",
            extra={"n_dropped": n_dropped, "required": list(REQUIRED_COLUMNS)},
        )

    return df.loc[keep].reset_index(drop=True)


def load_dataset(source: str | Path, name: str | None = None) -> Dataset:
    """
    Fetch and parse the CSV at ``source`` into a Dataset.

    Raises:
        FetchFailure, ParseFailure
    """
    logger.info("Loading dataset", extra={"source": str(source)})

    text = fetch_text(source)
    records = parse_records(text)

    file_path = None if is_url(source) else Path(source)
    ds = Dataset(
        name=name or (file_path.stem if file_path is not None else str(source)),
        records=records,
        source=str(source),
        file_path=file_path,
    )

    logger.info(
        "Dataset loaded",
        extra={"dataset": ds.name, "n_rows": len(ds), "n_columns": len(ds.columns)},
    )
    return ds
