"""Date parsing and week numbering helpers."""

from datetime import date, datetime, timedelta

from datenotes.constants import DAYS
from datenotes.exceptions import ConfigurationError, InvalidDateError
from datenotes.models.calendar_config import StartOfWeek


def canonicalize_date(date_str: str) -> str:
    """Normalize a date string to canonical YYYY-MM-DD form.

    Surrounding whitespace and any trailing time part are dropped.

    Raises:
        InvalidDateError: If the first ten characters are not a valid date.
    """
    candidate = date_str.strip()[:10]
    parse_date(candidate)
    return candidate


def parse_date(date_str: str) -> date:
    """Parse a canonical date string.

    Only zero-padded YYYY-MM-DD is accepted; "2024-3-15" is rejected so
    that label values keep their fixed width.
    """
    candidate = date_str.strip()[:10]
    try:
        day = datetime.strptime(candidate, "%Y-%m-%d").date()
    except ValueError:
        day = None
    if day is None or day.isoformat() != candidate:
        raise InvalidDateError(f"Invalid date: {date_str!r}. Use YYYY-MM-DD.")
    return day


def local_now_date() -> str:
    """Today's date in the local timezone."""
    return date.today().isoformat()


def parse_start_of_the_week(value: str | StartOfWeek) -> StartOfWeek:
    """Validate a start-of-the-week convention.

    Raises:
        ConfigurationError: For anything other than monday or sunday.
    """
    try:
        return StartOfWeek(value)
    except ValueError:
        raise ConfigurationError(f"Unrecognized start of the week {value}") from None


def get_week(day: date, start_of_the_week: str | StartOfWeek) -> int:
    """Week number of a date.

    Monday weeks follow ISO 8601, where the first days of January may
    belong to the last week of the previous year and the last days of
    December to week 1 of the next. Sunday weeks are counted from the first
    Sunday of the year; days before it are week 0.
    """
    convention = parse_start_of_the_week(start_of_the_week)
    if convention is StartOfWeek.MONDAY:
        return day.isocalendar()[1]
    return int(day.strftime("%U"))


def get_week_year(day: date, start_of_the_week: str | StartOfWeek) -> int:
    """Year that owns the week containing the date."""
    convention = parse_start_of_the_week(start_of_the_week)
    if convention is StartOfWeek.MONDAY:
        return day.isocalendar()[0]
    return day.year


def get_start_of_the_week(day: date, start_of_the_week: str | StartOfWeek) -> date:
    """First day of the week containing the date."""
    convention = parse_start_of_the_week(start_of_the_week)
    if convention is StartOfWeek.MONDAY:
        return day - timedelta(days=day.weekday())
    return day - timedelta(days=(day.weekday() + 1) % 7)


def week_day_name(day: date) -> str:
    """Full English weekday name."""
    return DAYS[(day.weekday() + 1) % 7]
