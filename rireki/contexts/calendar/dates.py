"""
Strict calendar date parsing.

Two external shapes are accepted and normalized to CalendarDate:
- Canonical string "YYYY/MM/DD" (the form's birth date field)
- Discrete numeric fields (year, month, day)

Impossible dates such as 2024/02/30 or April 31 raise MalformedDateError
instead of rolling over into the next month.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date
from typing import Any

from rireki.contexts.calendar.exceptions import MalformedDateError

DATE_PATTERN = re.compile(r"^(\d{4})/(\d{2})/(\d{2})$")

MIN_YEAR = 1
MAX_YEAR = 9999


def _require_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; a checkbox value is never a date component
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedDateError(f"{field_name} must be an integer", value)
    return value


@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    A validated Gregorian calendar date.

    Attributes:
        year: Four-digit year
        month: Month (1-12)
        day: Day of month, valid for the given month and year
    """

    year: int
    month: int
    day: int

    def __post_init__(self):
        year = _require_int(self.year, "year")
        month = _require_int(self.month, "month")
        day = _require_int(self.day, "day")

        if not MIN_YEAR <= year <= MAX_YEAR:
            raise MalformedDateError(f"Year out of range ({MIN_YEAR}-{MAX_YEAR})", year)
        if not 1 <= month <= 12:
            raise MalformedDateError("Month out of range (1-12)", month)
        days_in_month = calendar.monthrange(year, month)[1]
        if not 1 <= day <= days_in_month:
            raise MalformedDateError(
                f"Day out of range for {year}/{month:02d} (1-{days_in_month})", day
            )

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"


@dataclass(frozen=True, order=True)
class YearMonth:
    """Year and month of a history event (entry, graduation, exit, ...)."""

    year: int
    month: int

    def __post_init__(self):
        # Day 1 always exists, so this validates year and month only
        CalendarDate(self.year, self.month, 1)

    @property
    def sort_key(self) -> tuple:
        return (self.year, self.month)


def parse_calendar_date(text: str) -> CalendarDate:
    """
    Parse a canonical "YYYY/MM/DD" string.

    Args:
        text: Date string, e.g. "1995/04/02"

    Returns:
        CalendarDate

    Raises:
        MalformedDateError: If the string is not in YYYY/MM/DD form or names a
            date that does not exist

    Examples:
        parse_calendar_date("2000/02/29")
        # CalendarDate(year=2000, month=2, day=29)

        parse_calendar_date("2024/02/30")
        # MalformedDateError (no rollover to 2024/03/01)
    """
    if not isinstance(text, str):
        raise MalformedDateError("Date must be a YYYY/MM/DD string", text)

    match = DATE_PATTERN.match(text.strip())
    if not match:
        raise MalformedDateError("Date must be in YYYY/MM/DD format", text)

    year, month, day = (int(part) for part in match.groups())
    return CalendarDate(year, month, day)


def calendar_date_from_fields(year: Any, month: Any, day: Any) -> CalendarDate:
    """Build a CalendarDate from discrete numeric fields (strict)."""
    return CalendarDate(year, month, day)


def calculate_age(birth: CalendarDate, on: date) -> int:
    """
    Age in completed years on a given day.

    Decremented by one when (month, day) of `on` precedes the birthday.
    A 29 February birthday therefore ticks over on 1 March in common years.
    """
    age = on.year - birth.year
    if (on.month, on.day) < (birth.month, birth.day):
        age -= 1
    return age
