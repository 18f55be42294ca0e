import pandas as pd

from ev_analytics.core.metrics import Metrics, compute_metrics, round_half_up


def _make_records(rows):
    columns = ["Make", "Model", "Model Year", "Electric Range", "Electric Vehicle Type", "State"]
    return pd.DataFrame([{c: r.get(c, "") for c in columns} for r in rows], columns=columns, dtype=str)


def test_compute_metrics_two_tesla_example():
    df = _make_records(
        [
            {
                "Make": "Tesla",
                "Model": "Model 3",
                "Model Year": "2020",
                "Electric Range": "250",
                "Electric Vehicle Type": "Battery Electric Vehicle (BEV)",
                "State": "WA",
            },
            {
                "Make": "Tesla",
                "Model": "Model Y",
                "Model Year": "2021",
                "Electric Range": "300",
                "Electric Vehicle Type": "Battery Electric Vehicle (BEV)",
                "State": "CA",
            },
        ]
    )

    m = compute_metrics(df)

    assert m == Metrics(
        total_vehicles=2,
        avg_range=275.0,
        popular_make="Tesla",
        unique_models=2,
        bev_count=2,
        phev_count=0,
        latest_year=2021,
        latest_year_count=1,
    )


def test_avg_range_ignores_zero_negative_and_unparseable():
    df = _make_records(
        [
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Range": "0"},
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Range": "-10"},
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Range": "n/a"},
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Range": "100"},
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Range": "33"},
        ]
    )

    # (100 + 33) / 2 = 66.5
    assert compute_metrics(df).avg_range == 66.5


def test_avg_range_zero_when_no_positive_range():
    df = _make_records(
        [
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Range": "0"},
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Range": ""},
        ]
    )
    assert compute_metrics(df).avg_range == 0


def test_avg_range_rounds_half_up_to_one_decimal():
    assert round_half_up(10.25, 1) == 10.3
    assert round_half_up(10.24, 1) == 10.2

    df = _make_records(
        [
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Range": "10"},
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Range": "11"},
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Range": "11"},
        ]
    )
    # 32 / 3 = 10.666...
    assert compute_metrics(df).avg_range == 10.7


def test_popular_make_tie_goes_to_first_seen():
    df = _make_records(
        [
            {"Make": "NISSAN", "Model": "LEAF", "Model Year": "2019"},
            {"Make": "TESLA", "Model": "MODEL 3", "Model Year": "2019"},
            {"Make": "TESLA", "Model": "MODEL Y", "Model Year": "2020"},
            {"Make": "NISSAN", "Model": "LEAF", "Model Year": "2020"},
        ]
    )
    m = compute_metrics(df)
    assert m.popular_make == "NISSAN"
    assert m.unique_models == 3


def test_type_counts_are_exact_matches():
    df = _make_records(
        [
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Vehicle Type": "Battery Electric Vehicle (BEV)"},
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Vehicle Type": "Plug-in Hybrid Electric Vehicle (PHEV)"},
            {"Make": "A", "Model": "1", "Model Year": "2020", "Electric Vehicle Type": "BEV"},
        ]
    )
    m = compute_metrics(df)
    assert m.bev_count == 1
    assert m.phev_count == 1


def test_latest_year_uses_parsed_years():
    df = _make_records(
        [
            {"Make": "A", "Model": "1", "Model Year": "2022"},
            {"Make": "A", "Model": "1", "Model Year": "2023"},
            {"Make": "A", "Model": "1", "Model Year": "2023"},
            {"Make": "A", "Model": "1", "Model Year": "unknown"},
        ]
    )
    m = compute_metrics(df)
    assert m.latest_year == 2023
    assert m.latest_year_count == 2


def test_empty_table_metrics():
    m = compute_metrics(_make_records([]))
    assert m.total_vehicles == 0
    assert m.avg_range == 0
    assert m.popular_make == "N/A"
    assert m.unique_models == 0
    assert m.latest_year is None
    assert m.latest_year_count == 0


def test_compute_metrics_does_not_mutate_input():
    df = _make_records([{"Make": "A", "Model": "1", "Model Year": "2020", "Electric Range": "x"}])
    before = df.copy()
    compute_metrics(df)
    pd.testing.assert_frame_equal(df, before)


def test_metrics_read_leading_numbers_of_text_fields():
    df = _make_records(
        [
            {
                "Make": "KIA",
                "Model": "NIRO",
                "Model Year": "2021 (est)",
                "Electric Range": "250 mi",
                "Electric Vehicle Type": "Battery Electric Vehicle (BEV)",
            }
        ]
    )

    metrics = compute_metrics(df)

    assert metrics.avg_range == 250.0
    assert metrics.latest_year == 2021
    assert metrics.latest_year_count == 1
