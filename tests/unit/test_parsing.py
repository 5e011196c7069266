"""Tests for form text parsing helpers."""

import math

from utils.parsing import (
    as_number,
    is_invalid_number,
    missing_required,
    parse_decimal,
    to_wire_number,
)


def test_parse_decimal_plain_numbers():
    assert parse_decimal("12.5") == 12.5
    assert parse_decimal("  7") == 7.0
    assert parse_decimal("-3") == -3.0
    assert parse_decimal(".25") == 0.25
    assert parse_decimal("1e3") == 1000.0


def test_parse_decimal_uses_leading_numeric_prefix():
    assert parse_decimal("12.5kg") == 12.5
    assert parse_decimal("3,5") == 3.0


def test_parse_decimal_invalid_text_gives_nan_marker():
    for text in ("", "   ", "abc", "kg12", None):
        value = parse_decimal(text)
        assert math.isnan(value)
        assert is_invalid_number(value)


def test_parse_decimal_infinity():
    assert parse_decimal("Infinity") == math.inf
    assert parse_decimal("-Infinity") == -math.inf


def test_to_wire_number_maps_non_finite_to_none():
    assert to_wire_number(4.5) == 4.5
    assert to_wire_number(math.nan) is None
    assert to_wire_number(math.inf) is None


def test_as_number_defaults_to_zero():
    assert as_number(3) == 3.0
    assert as_number(2.5) == 2.5
    assert as_number(None) == 0.0
    assert as_number("10") == 0.0
    assert as_number(True) == 0.0
    assert as_number(math.nan) == 0.0


def test_missing_required_reports_blank_fields():
    draft = {"boat": "Sea Breeze", "location": "  ", "weight_kg": "", "notes": ""}
    missing = missing_required(draft, ("boat", "location", "weight_kg", "harvest_date"))
    assert missing == ["location", "weight_kg", "harvest_date"]
