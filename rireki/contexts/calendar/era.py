"""
Japanese era (元号) conversion.

The era table is ordered by start date, newest first. A date belongs to the
first era whose start date is on or before it, so the first day of an era
belongs to the new era (1989/01/08 is 平成元年, not 昭和64年).
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from rireki.contexts.calendar.dates import CalendarDate, YearMonth


@dataclass(frozen=True)
class Era:
    name: str
    start_year: int
    start_month: int
    start_day: int

    @property
    def start(self) -> Tuple[int, int, int]:
        return (self.start_year, self.start_month, self.start_day)


ERAS = (
    Era("令和", 2019, 5, 1),
    Era("平成", 1989, 1, 8),
    Era("昭和", 1926, 12, 25),
    Era("大正", 1912, 7, 30),
    Era("明治", 1868, 1, 1),
)

GANNEN = "元年"


@dataclass(frozen=True)
class EraDate:
    """
    A year expressed in a Japanese era.

    Attributes:
        era_name: Era name (e.g., "令和")
        era_year: Year within the era, starting at 1
    """

    era_name: str
    era_year: int

    @property
    def display_label(self) -> str:
        """"令和元年" for the first year, "令和6年" otherwise."""
        if self.era_year == 1:
            return f"{self.era_name}{GANNEN}"
        return f"{self.era_name}{self.era_year}年"


def convert_to_era(year: int, month: int, day: int) -> Optional[EraDate]:
    """
    Convert a Gregorian date to its Japanese era year.

    Args:
        year: Gregorian year
        month: Month (1-12)
        day: Day of month

    Returns:
        EraDate, or None for dates before 1868/01/01. Callers treat None as
        "no era annotation" and fall back to the Gregorian year.

    Examples:
        convert_to_era(1988, 1, 7).display_label   # "昭和63年"
        convert_to_era(1989, 1, 8).display_label   # "平成元年"
        convert_to_era(1850, 6, 1)                 # None
    """
    target = (year, month, day)
    for era in ERAS:
        if target >= era.start:
            return EraDate(era_name=era.name, era_year=year - era.start_year + 1)
    return None


def format_era_year(year: int, month: int, day: int = 1) -> str:
    """Era year label, or "<year>年" when the date predates every era."""
    era_date = convert_to_era(year, month, day)
    return era_date.display_label if era_date else f"{year}年"


def format_era_year_month(year_month: Optional[YearMonth]) -> Tuple[str, str]:
    """
    Year and month column labels for a history table row.

    Events are dated to the first of the month. Undated rows get empty labels,
    and pre-Meiji years fall back to the bare Gregorian number.

    Returns:
        (year_label, month_label), e.g. ("平成20年", "4")
    """
    if year_month is None:
        return "", ""
    era_date = convert_to_era(year_month.year, year_month.month, 1)
    year_label = era_date.display_label if era_date else str(year_month.year)
    return year_label, str(year_month.month)


def format_era_date(value: CalendarDate) -> str:
    """Full date in era form, e.g. "令和6年4月1日"."""
    return f"{format_era_year(value.year, value.month, value.day)}{value.month}月{value.day}日"
