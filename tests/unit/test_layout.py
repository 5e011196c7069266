"""Tests for dashboard formatting and table rows."""

from dashboard.components.layout import (
    HARVEST_COLUMNS,
    INVESTMENT_COLUMNS,
    format_cell_number,
    format_price_per_kg,
    format_usd,
    format_weight,
    harvest_rows,
    investment_rows,
    stat_tiles,
)
from service.stats import compute_stats


def test_stat_formats():
    assert format_weight(14) == "14.0 kg"
    assert format_weight(1234.56) == "1234.6 kg"
    assert format_price_per_kg(3.75) == "$3.75/kg"
    assert format_price_per_kg(0) == "$0.00/kg"
    assert format_usd(60.0) == "$60"
    assert format_usd(1250.4) == "$1250"
    # halves round up, like a price tag
    assert format_usd(1250.5) == "$1251"
    assert format_price_per_kg(2.345) == "$2.35/kg"


def test_format_cell_number():
    assert format_cell_number(10.0) == "10"
    assert format_cell_number(2.5) == "2.5"
    assert format_cell_number(7) == "7"
    assert format_cell_number(None) == ""


def test_stat_tiles_labels_and_values(sample_harvests, sample_investments):
    tiles = stat_tiles(compute_stats(sample_harvests, sample_investments))

    assert [t["label"] for t in tiles] == [
        "Total Catch", "Avg Dock Price", "Est. Revenue", "Total Invested",
    ]
    assert [t["value"] for t in tiles] == ["14.0 kg", "$3.75/kg", "$60", "$1251"]


def test_stat_tiles_for_empty_data():
    tiles = stat_tiles(compute_stats([], []))
    assert [t["value"] for t in tiles] == ["0.0 kg", "$0.00/kg", "$0", "$0"]


def test_harvest_rows(sample_harvests):
    rows = harvest_rows(sample_harvests)

    assert rows[0] == {
        "Date": "2024-06-01",
        "Boat": "Sea Breeze",
        "Location": "Port Clyde",
        "Weight (kg)": "10",
        "Price/kg": "$5",
    }
    assert rows[1]["Price/kg"] == "$2.5"
    assert all(tuple(r) == HARVEST_COLUMNS for r in rows)


def test_rows_fall_back_to_legacy_date_field():
    rows = harvest_rows([{"date": "2023-12-31", "boat": "Old", "weight_kg": 1, "price_per_kg": 1}])
    assert rows[0]["Date"] == "2023-12-31"

    rows = investment_rows([{"date": "2023-11-30", "investor_name": "X", "amount_usd": 5}])
    assert rows[0]["Date"] == "2023-11-30"


def test_investment_rows(sample_investments):
    rows = investment_rows(sample_investments)

    assert rows[1] == {
        "Date": "2024-05-15",
        "Investor": "Grace Hopper",
        "Instrument": "convertible note",
        "Amount": "$250.5",
    }
    assert all(tuple(r) == INVESTMENT_COLUMNS for r in rows)


def test_rows_keep_collection_order(sample_harvests):
    reversed_rows = harvest_rows(list(reversed(sample_harvests)))
    assert [r["Boat"] for r in reversed_rows] == ["Lucky Trap", "Sea Breeze"]
