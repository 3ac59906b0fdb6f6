"""Tests for title pattern expansion."""

import pytest

from datenotes.exceptions import UnknownPatternError
from datenotes.models.calendar_config import CalendarConfig, StartOfWeek
from datenotes.processing.patterns import expand_title, pad_week_number


def test_month_pattern():
    assert expand_title("{monthNumberPadded} - {month}", "2024-03-15") == "03 - March"


def test_default_day_pattern():
    assert expand_title("{dayInMonthPadded} - {weekDay}", "2024-03-05") == "05 - Tuesday"


def test_weekday_abbreviations():
    assert expand_title("{weekDay3} {weekDay2}", "2024-03-15") == "Fri Fr"


def test_year_and_iso_date():
    assert expand_title("{year}: {isoDate}", "2024-03-15") == "2024: 2024-03-15"


def test_literal_text_passes_through():
    assert expand_title("Journal (no tokens)", "2024-03-15") == "Journal (no tokens)"


def test_week_number_monday_is_iso():
    """2024-03-15 is in ISO week 11."""
    assert expand_title("WW{weekNumber}", "2024-03-15") == "WW11"


def test_week_number_uses_configured_start_of_week():
    config = CalendarConfig(start_of_the_week=StartOfWeek.SUNDAY)
    assert expand_title("WW{weekNumber}", "2024-03-15", config) == "WW10"


def test_week_number_override_beats_config():
    config = CalendarConfig(start_of_the_week=StartOfWeek.SUNDAY)
    assert expand_title("WW{weekNumber}", "2024-03-15", config, "monday") == "WW11"


def test_week_number_padded():
    assert expand_title("W{weekNumberPadded}", "2024-02-01") == "W05"
    assert expand_title("W{weekNumberPadded}", "2024-03-15") == "W11"


def test_week_number_padded_zero_is_not_padded():
    """2022-01-01 falls before the first Sunday of the year (week 0)."""
    assert expand_title("W{weekNumberPadded}", "2022-01-01", None, "sunday") == "W0"


def test_pad_week_number():
    assert pad_week_number(0) == "0"
    assert pad_week_number(1) == "01"
    assert pad_week_number(9) == "09"
    assert pad_week_number(10) == "10"


def test_unknown_token():
    with pytest.raises(UnknownPatternError) as exc_info:
        expand_title("{bogus}", "2024-03-15")
    assert exc_info.value.token == "bogus"
    assert "{bogus}" in str(exc_info.value)
