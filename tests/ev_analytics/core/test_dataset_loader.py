from pathlib import Path

import pytest
import requests

from ev_analytics.core import dataset_loader
from ev_analytics.core.dataset_handle import DatasetHandle, LoadStatus
from ev_analytics.core.dataset_loader import fetch_text, load_dataset, parse_records
from ev_analytics.core.exceptions import DatasetLoadError, FetchFailure, ParseFailure

HEADER = "County,State,Model Year,Make,Model,Electric Vehicle Type,Electric Range"


def _write_csv(tmp_path: Path, body: str, name: str = "ev.csv") -> Path:
    path = tmp_path / name
    path.write_text(body)
    return path


def test_load_dataset_reads_header_driven_rows(tmp_path):
    path = _write_csv(
        tmp_path,
        "\n".join(
            [
                HEADER,
                "King,WA,2020,TESLA,MODEL 3,Battery Electric Vehicle (BEV),322",
                "",
                "Kitsap,WA,2019,NISSAN,LEAF,Battery Electric Vehicle (BEV),",
            ]
        )
        + "\n",
    )

    ds = load_dataset(path)

    assert ds.name == "ev"
    assert ds.file_path == path
    assert len(ds) == 2
    assert list(ds.records["Make"]) == ["TESLA", "NISSAN"]
    # values stay verbatim strings; empty fields are ""
    assert ds.records["Model Year"].iloc[0] == "2020"
    assert ds.records["Electric Range"].iloc[1] == ""


def test_rows_missing_required_fields_are_dropped():
    text = "\n".join(
        [
            HEADER,
            "King,WA,2020,TESLA,MODEL 3,Battery Electric Vehicle (BEV),322",
            "King,WA,,TESLA,MODEL Y,Battery Electric Vehicle (BEV),300",
            "King,WA,2021,,MODEL Y,Battery Electric Vehicle (BEV),300",
            "King,WA,2021,KIA,,Plug-in Hybrid Electric Vehicle (PHEV),26",
        ]
    )

    df = parse_records(text)

    assert len(df) == 1
    assert list(df.index) == [0]
    assert df["Model"].iloc[0] == "MODEL 3"


def test_na_like_strings_are_kept_verbatim():
    text = HEADER + "\nNA,N/A,2020,NULL,None,Battery Electric Vehicle (BEV),nan\n"
    df = parse_records(text)
    assert len(df) == 1
    assert df["Make"].iloc[0] == "NULL"
    assert df["County"].iloc[0] == "NA"


def test_short_rows_are_padded_with_empty_strings():
    text = HEADER + "\nKing,WA,2020,TESLA,MODEL 3\n"
    df = parse_records(text)
    assert df["Electric Range"].iloc[0] == ""
    assert df["Electric Vehicle Type"].iloc[0] == ""


def test_byte_order_mark_is_ignored():
    text = "\ufeff" + HEADER + "\nKing,WA,2020,TESLA,MODEL 3,Battery Electric Vehicle (BEV),322\n"
    df = parse_records(text)
    assert "County" in df.columns


def test_missing_required_header_is_parse_failure():
    with pytest.raises(ParseFailure, match="Model Year"):
        parse_records("Make,Model\nTESLA,MODEL 3\n")


def test_empty_text_is_parse_failure():
    with pytest.raises(ParseFailure):
        parse_records("")


def test_malformed_row_is_parse_failure():
    text = HEADER + "\nKing,WA,2020,TESLA,MODEL 3,BEV,322,extra,fields\n"
    with pytest.raises(ParseFailure):
        parse_records(text)


def test_wide_rows_never_shift_fields_into_the_index():
    text = (
        HEADER
        + "\nKing,WA,2020,TESLA,MODEL 3,BEV,322,extra,fields"
        + "\nPierce,WA,2019,KIA,NIRO,PHEV,26,a,b\n"
    )
    with pytest.raises(ParseFailure):
        parse_records(text)


def test_single_wide_row_after_valid_rows_is_parse_failure():
    text = (
        HEADER
        + "\nKing,WA,2020,TESLA,MODEL 3,BEV,322"
        + "\nPierce,WA,2019,KIA,NIRO,PHEV,26,extra\n"
    )
    with pytest.raises(ParseFailure):
        parse_records(text)


def test_trailing_comma_on_every_row_keeps_fields_aligned():
    text = (
        HEADER
        + "\nKing,WA,2020,TESLA,MODEL 3,BEV,322,"
        + "\nPierce,WA,2019,KIA,NIRO,PHEV,26,\n"
    )

    df = parse_records(text)

    assert list(df.columns) == HEADER.split(",")
    assert list(df["County"]) == ["King", "Pierce"]
    assert list(df["Make"]) == ["TESLA", "KIA"]
    assert list(df["Electric Range"]) == ["322", "26"]


def test_missing_file_is_fetch_failure(tmp_path):
    with pytest.raises(FetchFailure, match="not found"):
        fetch_text(tmp_path / "nope.csv")


def test_url_http_error_is_fetch_failure(monkeypatch):
    class _Resp:
        content = b""

        def raise_for_status(self):
            raise requests.HTTPError("404 Client Error")

    monkeypatch.setattr(dataset_loader.requests, "get", lambda url, timeout: _Resp())

    with pytest.raises(FetchFailure, match="404"):
        fetch_text("https://example.org/ev.csv")


def test_url_source_is_fetched_with_requests(monkeypatch):
    calls = {}

    class _Resp:
        content = (HEADER + "\nKing,WA,2020,TESLA,MODEL 3,Battery Electric Vehicle (BEV),322\n").encode("utf-8")

        def raise_for_status(self):
            return None

    def _get(url, timeout):
        calls["url"] = url
        return _Resp()

    monkeypatch.setattr(dataset_loader.requests, "get", _get)

    ds = load_dataset("https://example.org/ev.csv", name="remote")

    assert calls["url"] == "https://example.org/ev.csv"
    assert ds.name == "remote"
    assert ds.file_path is None
    assert len(ds) == 1


class _BytesResp:
    def __init__(self, content: bytes):
        self.content = content
        # what requests guesses for text/csv without a charset
        self.encoding = "ISO-8859-1"

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding)

    def raise_for_status(self):
        return None


def test_url_body_is_decoded_as_utf8(monkeypatch):
    body = "Model Year,Make,Model\n2020,CITRO\u00cbN,\u00eb-C4\n".encode("utf-8")
    monkeypatch.setattr(dataset_loader.requests, "get", lambda url, timeout: _BytesResp(body))

    ds = load_dataset("https://example.org/ev.csv")

    assert ds.records["Make"].iloc[0] == "CITRO\u00cbN"
    assert ds.records["Model"].iloc[0] == "\u00eb-C4"


def test_url_body_byte_order_mark_is_stripped(monkeypatch):
    body = b"\xef\xbb\xbf" + b"Model Year,Make,Model\n2020,TESLA,MODEL 3\n"
    monkeypatch.setattr(dataset_loader.requests, "get", lambda url, timeout: _BytesResp(body))

    assert fetch_text("https://example.org/ev.csv").startswith("Model Year")


def test_url_body_not_utf8_is_fetch_failure(monkeypatch):
    monkeypatch.setattr(dataset_loader.requests, "get", lambda url, timeout: _BytesResp(b"Make\n\xff\xfe\n"))

    with pytest.raises(FetchFailure):
        fetch_text("https://example.org/ev.csv")


def test_fetch_and_parse_failures_share_a_base():
    assert issubclass(FetchFailure, DatasetLoadError)
    assert issubclass(ParseFailure, DatasetLoadError)


def test_handle_ready_on_success(tmp_path):
    path = _write_csv(tmp_path, HEADER + "\nKing,WA,2020,TESLA,MODEL 3,Battery Electric Vehicle (BEV),322\n")

    handle = DatasetHandle.load(path)

    assert handle.status is LoadStatus.READY
    assert handle.is_materialised()
    assert handle.error is None
    assert len(handle.dataset) == 1


def test_handle_failed_keeps_message(tmp_path):
    handle = DatasetHandle.load(tmp_path / "missing.csv")

    assert handle.status is LoadStatus.FAILED
    assert not handle.is_materialised()
    assert "Failed to fetch CSV file" in handle.error
    with pytest.raises(RuntimeError):
        _ = handle.dataset
