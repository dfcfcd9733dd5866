"""
Standard school enrollment schedule.

The Japanese school year starts in April. The schedule keys off the birth
month only: a child born in April or earlier enters elementary school at
birth_year + 6, anyone later at birth_year + 7. Each later stage starts in the
year its predecessor ends.
"""

from dataclasses import dataclass
from typing import List, Tuple

SCHOOL_YEAR_START_MONTH = 4
GRADUATION_MONTH = 3

# (stage name, years spent in the stage)
STAGE_DURATIONS = (
    ("elementary", 6),
    ("junior_high", 3),
    ("high", 3),
    ("university", 4),
)


@dataclass(frozen=True)
class SchoolStage:
    entry_year: int
    graduation_year: int

    @property
    def entry_label(self) -> str:
        return f"{self.entry_year}年{SCHOOL_YEAR_START_MONTH}月"

    @property
    def graduation_label(self) -> str:
        return f"{self.graduation_year}年{GRADUATION_MONTH}月"


@dataclass(frozen=True)
class SchoolSchedule:
    elementary: SchoolStage
    junior_high: SchoolStage
    high: SchoolStage
    university: SchoolStage

    def stages(self) -> List[Tuple[str, SchoolStage]]:
        """Stages in enrollment order as (name, stage) pairs."""
        return [(name, getattr(self, name)) for name, _ in STAGE_DURATIONS]


def calculate_school_schedule(birth_year: int, birth_month: int, birth_day: int) -> SchoolSchedule:
    """
    Derive entry and graduation years for each school stage.

    No plausibility check is made on the birth date; the form validates it.

    Examples:
        calculate_school_schedule(2000, 4, 1).elementary.entry_label   # "2006年4月"
        calculate_school_schedule(2000, 5, 1).elementary.entry_label   # "2007年4月"
    """
    if birth_month <= SCHOOL_YEAR_START_MONTH:
        entry_year = birth_year + 6
    else:
        entry_year = birth_year + 7

    stages = {}
    for name, duration in STAGE_DURATIONS:
        stage = SchoolStage(entry_year=entry_year, graduation_year=entry_year + duration)
        stages[name] = stage
        entry_year = stage.graduation_year

    return SchoolSchedule(**stages)
