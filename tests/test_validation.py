"""Tests for clamping, truncation and date normalization."""

from datetime import date, datetime

import pytest

from logic.logic_validation import NOTES_MAX_LENGTH, clamp, clamp_int, normalize_date, truncate


@pytest.mark.parametrize(
    "raw, expected",
    [
        (5, 5),
        (-3, 0),
        (42, 10),
        ("7", 7),
        ("abc", 0),
        (None, 0),
        ("", 0),
        (float("nan"), 0),
        (float("inf"), 10),
    ],
)
def test_clamp_default_range(raw, expected):
    assert clamp(raw) == expected


def test_clamp_custom_range_and_non_numeric_below_min():
    # non-numeric becomes 0, which is then raised to the minimum
    assert clamp("oops", 1, 5) == 1
    assert clamp(9, 1, 5) == 5
    assert clamp(7.5, 0, 14) == 7.5


def test_clamp_returns_int_for_integral_values():
    value = clamp(8.0, 0, 14)
    assert value == 8
    assert isinstance(value, int)


@pytest.mark.parametrize("raw", [-100, -0.5, 0, 3.3, 10, 11, "12", "x", None, 1e9])
def test_clamp_is_idempotent_and_in_range(raw):
    once = clamp(raw, 0, 10)
    assert 0 <= once <= 10
    assert clamp(once, 0, 10) == once


def test_clamp_int_rounds_half_up():
    assert clamp_int(4.5) == 5
    assert clamp_int(4.49) == 4
    assert clamp_int("2.5", 1, 5) == 3
    assert clamp_int(99, 1, 30) == 30
    assert isinstance(clamp_int(3.0), int)


def test_truncate_limits_notes():
    assert truncate("x" * 600) == "x" * NOTES_MAX_LENGTH
    assert truncate(None) == ""
    assert truncate("ok") == "ok"


def test_normalize_date_accepts_dates_and_iso_strings():
    assert normalize_date("2024-03-01") == "2024-03-01"
    assert normalize_date(" 2024-03-01 ") == "2024-03-01"
    assert normalize_date(date(2024, 1, 2)) == "2024-01-02"
    assert normalize_date(datetime(2024, 1, 2, 23, 59)) == "2024-01-02"


@pytest.mark.parametrize("raw", ["", None, "yesterday", "2024-13-01", 20240301, "2024-03-01xyz", "2024-03-01 junk"])
def test_normalize_date_rejects_garbage(raw):
    with pytest.raises(ValueError):
        normalize_date(raw)


def test_normalize_date_accepts_iso_datetime_strings():
    assert normalize_date("2024-03-01T10:30") == "2024-03-01"
    assert normalize_date("2024-03-01 23:59:59") == "2024-03-01"
