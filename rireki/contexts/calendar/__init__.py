"""
Calendar Context

Responsibilities:
- Converts Gregorian dates to Japanese era (元号) labels
- Parses calendar dates strictly (no day rollover)
- Derives the standard school enrollment schedule from a birth date
- Calculates age in completed years

Owns: Era table, date validity rules, school-year arithmetic
Never: Knows about documents, layout, or rendering
"""

from rireki.contexts.calendar.dates import (
    CalendarDate,
    YearMonth,
    calculate_age,
    calendar_date_from_fields,
    parse_calendar_date,
)
from rireki.contexts.calendar.era import (
    ERAS,
    Era,
    EraDate,
    convert_to_era,
    format_era_date,
    format_era_year,
    format_era_year_month,
)
from rireki.contexts.calendar.exceptions import MalformedDateError
from rireki.contexts.calendar.school import (
    SchoolSchedule,
    SchoolStage,
    calculate_school_schedule,
)

__all__ = [
    # Dates
    "CalendarDate",
    "YearMonth",
    "calculate_age",
    "calendar_date_from_fields",
    "parse_calendar_date",
    "MalformedDateError",
    # Eras
    "ERAS",
    "Era",
    "EraDate",
    "convert_to_era",
    "format_era_date",
    "format_era_year",
    "format_era_year_month",
    # School schedule
    "SchoolSchedule",
    "SchoolStage",
    "calculate_school_schedule",
]
