"""Tests for date helpers and week numbering."""

from datetime import date

import pytest

from datenotes.date_utils import (
    canonicalize_date,
    get_start_of_the_week,
    get_week,
    get_week_year,
    parse_date,
    week_day_name,
)
from datenotes.exceptions import ConfigurationError, InvalidDateError


def test_canonicalize_date_trims_time_and_whitespace():
    assert canonicalize_date("  2024-03-15T10:30:00 ") == "2024-03-15"


def test_canonicalize_date_rejects_garbage():
    with pytest.raises(InvalidDateError):
        canonicalize_date("2024-13-45")
    with pytest.raises(InvalidDateError):
        parse_date("yesterday")


def test_unpadded_dates_are_rejected():
    with pytest.raises(InvalidDateError):
        canonicalize_date("2024-3-15")
    with pytest.raises(InvalidDateError):
        parse_date("2024-03-5")


def test_iso_week_rolls_into_next_year():
    """Monday 2024-12-30 belongs to ISO week 1 of 2025."""
    day = date(2024, 12, 30)
    assert get_week(day, "monday") == 1
    assert get_week_year(day, "monday") == 2025


def test_iso_week_rolls_into_previous_year():
    """Friday 2021-01-01 belongs to ISO week 53 of 2020."""
    day = date(2021, 1, 1)
    assert get_week(day, "monday") == 53
    assert get_week_year(day, "monday") == 2020


def test_sunday_weeks_start_at_zero():
    assert get_week(date(2022, 1, 1), "sunday") == 0
    assert get_week(date(2022, 1, 2), "sunday") == 1
    assert get_week(date(2021, 12, 31), "sunday") == 52
    assert get_week_year(date(2022, 1, 1), "sunday") == 2022


def test_unknown_start_of_week():
    with pytest.raises(ConfigurationError):
        get_week(date(2024, 3, 15), "friday")


def test_start_of_the_week():
    friday = date(2024, 3, 15)
    assert get_start_of_the_week(friday, "monday") == date(2024, 3, 11)
    assert get_start_of_the_week(friday, "sunday") == date(2024, 3, 10)
    sunday = date(2024, 3, 17)
    assert get_start_of_the_week(sunday, "monday") == date(2024, 3, 11)
    assert get_start_of_the_week(sunday, "sunday") == sunday


def test_week_day_name():
    assert week_day_name(date(2024, 3, 15)) == "Friday"
    assert week_day_name(date(2024, 3, 17)) == "Sunday"
