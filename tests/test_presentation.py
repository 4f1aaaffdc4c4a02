import pytest

from hotel_backend.db.sample_data import demo_properties
from hotel_backend.services.presentation import (
    ChartMode,
    chart_series,
    metrics_series,
    occupancy_series,
    performance_rows,
    revenue_series,
    truncate_label,
)


def test_truncate_label():
    assert truncate_label("Coastal Inn & Suites", 15) == "Coastal Inn & S..."
    assert truncate_label("Lakeside Retreat", 20) == "Lakeside Retreat"
    assert truncate_label("x" * 15, 15) == "x" * 15


def test_metrics_series_keeps_insertion_order(make_property):
    props = [make_property(0, revpar=50.0), make_property(1, revpar=150.0), make_property(2, revpar=100.0)]
    series = metrics_series(props)
    assert [point["fullName"] for point in series] == ["Hotel 0", "Hotel 1", "Hotel 2"]
    assert set(series[0]) == {"name", "fullName", "city", "adr", "occupancyPct", "revpar", "rooms"}


def test_metrics_series_rounding(make_property):
    point = metrics_series([make_property(0, adr=185.555, occupancy=0.125, revpar=23.1249)])[0]
    assert point["adr"] == 185.56
    assert point["revpar"] == 23.12
    # half-up, not banker's rounding
    assert point["occupancyPct"] == 13


def test_occupancy_series_sorted_ascending_with_long_labels():
    series = occupancy_series(demo_properties())
    values = [point["occupancyPct"] for point in series]
    assert values == sorted(values)
    assert [point["index"] for point in series] == list(range(1, len(series) + 1))
    first = series[0]
    assert first["fullName"] == "Business Express Hotel"
    assert first["name"] == "Business Express Hot..."
    assert first["occupancyPct"] == 68


def test_revenue_series_sorted_descending_with_potential_revenue():
    series = revenue_series(demo_properties())
    revpars = [point["revpar"] for point in series]
    assert revpars == sorted(revpars, reverse=True)
    top = series[0]
    assert top["fullName"] == "Seaside Resort & Spa"
    assert top["name"] == "Seaside Resort ..."
    assert top["potentialRevenue"] == 82500.0
    grand_plaza = next(point for point in series if point["fullName"] == "Grand Plaza Hotel")
    assert grand_plaza["potentialRevenue"] == 46375.0


def test_revenue_series_ties_keep_input_order(make_property):
    props = [make_property(0, revpar=90.0), make_property(1, revpar=120.0), make_property(2, revpar=90.0)]
    assert [point["fullName"] for point in revenue_series(props)] == ["Hotel 1", "Hotel 0", "Hotel 2"]


def test_adapters_do_not_mutate_source():
    props = demo_properties()
    before = [p.model_dump() for p in props]
    for mode in ChartMode:
        chart_series(props, mode)
    assert [p.model_dump() for p in props] == before


def test_chart_series_dispatches_on_mode_name():
    props = demo_properties()
    assert chart_series(props, "revenue") == revenue_series(props)
    assert chart_series(props, ChartMode.OCCUPANCY) == occupancy_series(props)
    with pytest.raises(ValueError):
        chart_series(props, "pie")


def test_performance_rows_formatting(make_property):
    row = performance_rows([make_property(0, adr=185.5, occupancy=0.785, revpar=144.69)])[0]
    assert row["ADR"] == "$185.50"
    assert row["Occupancy"] == "78.5%"
    assert row["RevPAR"] == "$144.69"


def test_empty_input_gives_empty_series():
    for mode in ChartMode:
        assert chart_series([], mode) == []
