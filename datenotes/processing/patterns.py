"""Title pattern expansion for container notes."""

import re

from datenotes.constants import MONTHS
from datenotes.date_utils import get_week, parse_date, week_day_name
from datenotes.exceptions import UnknownPatternError
from datenotes.models.calendar_config import CalendarConfig, StartOfWeek

TOKEN_PATTERN = re.compile(r"{(\w+)}")


def pad_week_number(week_number: int) -> str:
    """Left-pad single digit week numbers.

    Week 0 is returned as-is ("0"), unlike weeks 1-9.
    """
    if 0 < week_number <= 9:
        return f"0{week_number}"
    return str(week_number)


def expand_title(
    pattern: str,
    date_str: str,
    config: CalendarConfig | None = None,
    start_of_the_week: str | StartOfWeek | None = None,
) -> str:
    """Expand {token} placeholders in a title pattern.

    Args:
        pattern: Title pattern, e.g. "{monthNumberPadded} - {month}"
        date_str: Canonical date the title is built for
        config: Calendar configuration supplying the start of the week
        start_of_the_week: Overrides the configured start of the week

    Raises:
        UnknownPatternError: If the pattern contains an unrecognized token.
    """
    day = parse_date(date_str)
    if start_of_the_week is None:
        start_of_the_week = config.start_of_the_week if config else StartOfWeek.MONDAY
    weekday = week_day_name(day)

    def replace(match: re.Match) -> str:
        token = match.group(1)
        if token == "year":
            return f"{day.year:04d}"
        if token == "month":
            return MONTHS[day.month - 1]
        if token == "monthNumberPadded":
            return f"{day.month:02d}"
        if token == "weekNumber":
            return str(get_week(day, start_of_the_week))
        if token == "weekNumberPadded":
            return pad_week_number(get_week(day, start_of_the_week))
        if token == "weekDay":
            return weekday
        if token == "weekDay3":
            return weekday[:3]
        if token == "weekDay2":
            return weekday[:2]
        if token == "dayInMonthPadded":
            return f"{day.day:02d}"
        if token == "isoDate":
            return day.isoformat()
        raise UnknownPatternError(token)

    return TOKEN_PATTERN.sub(replace, pattern)
