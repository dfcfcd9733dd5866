"""
Document Model Builder

Flattens the entry arrays of a form snapshot into era-annotated display rows
(résumé) and per-employer blocks (career history).

Rows keep the order of the entry arrays. Entries are not re-sorted by date.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from rireki.contexts.calendar import YearMonth, convert_to_era, format_era_year_month
from rireki.contexts.modeling import labels
from rireki.contexts.modeling.form_data import (
    CareerHistoryEntry,
    EducationEntry,
    Enrolled,
    OnLeave,
    QualificationEntry,
    Resigned,
    ResumeFormData,
    WorkHistoryEntry,
)
from rireki.contexts.modeling.logger import log_section_built, log_skipped_entry


@dataclass(frozen=True)
class DocumentRow:
    """
    One line of a year/month/text table.

    Attributes:
        label: Row text (e.g., "東京大学 卒業")
        sort_key: (year, month) of the event, None for undated rows
        year_label: Era year for the year column (e.g., "平成24年"), "" if undated
        month_label: Month for the month column, "" if undated
        supplemental_text: Optional second line under the label
    """

    label: str
    sort_key: Optional[Tuple[int, int]] = None
    year_label: str = ""
    month_label: str = ""
    supplemental_text: Optional[str] = None

    @property
    def is_dated(self) -> bool:
        return self.sort_key is not None


@dataclass(frozen=True)
class RowSection:
    """
    Named group of rows inside a table (学歴, 職歴, 資格・免許).

    Attributes:
        name: Machine name (e.g., "education")
        heading: Heading printed above the rows ("" for no heading row)
        rows: Rows in display order
    """

    name: str
    heading: str
    rows: Tuple[DocumentRow, ...]


@dataclass(frozen=True)
class CareerBlock:
    """
    Display model of one career history entry.

    Attributes:
        company_name: Company name
        period: Period string (e.g., "平成24年4月 〜 在職中")
        employment_label: Employment type in Japanese, "" when unset
        affiliation: "部署：… | 役職：…" line, "" when neither is set
        subsections: (heading, text) pairs for the non-empty free-text fields
    """

    company_name: str
    period: str
    employment_label: str = ""
    affiliation: str = ""
    subsections: Tuple[Tuple[str, str], ...] = ()

    @property
    def period_line(self) -> str:
        """Period with the employment type appended, e.g. "… 〜 在職中 （正社員）"."""
        if self.employment_label:
            return f"{self.period} （{self.employment_label}）"
        return self.period


def _dated_row(label: str, year_month: Optional[YearMonth]) -> DocumentRow:
    year_label, month_label = format_era_year_month(year_month)
    return DocumentRow(
        label=label,
        sort_key=year_month.sort_key if year_month else None,
        year_label=year_label,
        month_label=month_label,
    )


# =============================================================================
# Résumé rows
# =============================================================================


def education_rows(entry: EducationEntry) -> List[DocumentRow]:
    """
    Rows for one school: an entry row and exactly one terminal row.

    Returns an empty list when the entry year/month is missing.
    """
    if entry.entered_at is None:
        log_skipped_entry("education", entry.id, "entry year/month missing")
        return []

    rows = [_dated_row(f"{entry.school_name} {labels.SCHOOL_ENTRY}", entry.entered_at)]

    status = entry.status
    terminal_label = f"{entry.school_name} {status.label}"
    if isinstance(status, (Enrolled, OnLeave)):
        rows.append(DocumentRow(label=terminal_label))
    else:
        rows.append(_dated_row(terminal_label, status.completed_at))

    return rows


def work_history_rows(entry: WorkHistoryEntry) -> List[DocumentRow]:
    """
    Rows for one employer: 入社 and either an undated 在職中 or a dated 退社.

    Returns an empty list when the entry year/month is missing.
    """
    if entry.entered_at is None:
        log_skipped_entry("work_history", entry.id, "entry year/month missing")
        return []

    rows = [_dated_row(f"{entry.company_name} {labels.COMPANY_ENTRY}", entry.entered_at)]

    status = entry.status
    terminal_label = f"{entry.company_name} {status.label}"
    if isinstance(status, Resigned):
        rows.append(_dated_row(terminal_label, status.left_at))
    else:
        rows.append(DocumentRow(label=terminal_label))

    return rows


def qualification_row(entry: QualificationEntry) -> DocumentRow:
    return _dated_row(entry.name, entry.obtained_at)


def build_education_rows(entries: Iterable[EducationEntry]) -> List[DocumentRow]:
    rows = [row for entry in entries for row in education_rows(entry)]
    log_section_built("education", len(rows))
    return rows


def build_work_history_rows(entries: Iterable[WorkHistoryEntry]) -> List[DocumentRow]:
    rows = [row for entry in entries for row in work_history_rows(entry)]
    log_section_built("work_history", len(rows))
    return rows


def build_qualification_rows(entries: Iterable[QualificationEntry]) -> List[DocumentRow]:
    rows = [qualification_row(entry) for entry in entries]
    log_section_built("qualifications", len(rows))
    return rows


def build_history_sections(snapshot: ResumeFormData) -> List[RowSection]:
    """
    Sections of the combined 学歴・職歴 table, omitting empty ones.

    Returns:
        Up to two RowSections, education first
    """
    sections = []
    education = build_education_rows(snapshot.education)
    if education:
        sections.append(RowSection("education", labels.EDUCATION_HEADING, tuple(education)))
    work_history = build_work_history_rows(snapshot.work_history)
    if work_history:
        sections.append(
            RowSection("work_history", labels.WORK_HISTORY_HEADING, tuple(work_history))
        )
    return sections


def build_qualification_section(snapshot: ResumeFormData) -> Optional[RowSection]:
    rows = build_qualification_rows(snapshot.qualifications)
    if not rows:
        return None
    return RowSection("qualifications", "", tuple(rows))


# =============================================================================
# Career history blocks
# =============================================================================


def _format_period_side(year_month: Optional[YearMonth]) -> str:
    if year_month is None:
        return ""
    era_date = convert_to_era(year_month.year, year_month.month, 1)
    if era_date:
        return f"{era_date.display_label}{year_month.month}月"
    return f"{year_month.year}年{year_month.month}月"


def format_period(started_at: Optional[YearMonth], ended_at: Optional[YearMonth]) -> str:
    """
    Period string for a career entry.

    A missing end date means the job is current and prints as 在職中.

    Examples:
        format_period(YearMonth(2012, 4), YearMonth(2019, 5))
        # "平成24年4月 〜 令和元年5月"

        format_period(YearMonth(2020, 1), None)
        # "令和2年1月 〜 在職中"

        format_period(None, None)
        # "在職中"
    """
    start = _format_period_side(started_at)
    end = _format_period_side(ended_at) if ended_at else labels.CURRENTLY_EMPLOYED

    if start and end:
        return f"{start}{labels.PERIOD_SEPARATOR}{end}"
    return start or end


def _affiliation_line(entry: CareerHistoryEntry) -> str:
    parts = []
    if entry.department:
        parts.append(f"{labels.DEPARTMENT_PREFIX}{entry.department}")
    if entry.position:
        parts.append(f"{labels.POSITION_PREFIX}{entry.position}")
    return labels.AFFILIATION_SEPARATOR.join(parts)


def career_block(entry: CareerHistoryEntry) -> CareerBlock:
    subsections = [
        (heading, text.strip())
        for heading, text in (
            (labels.JOB_DESCRIPTION_HEADING, entry.job_description),
            (labels.ACHIEVEMENTS_HEADING, entry.achievements),
            (labels.TECHNOLOGIES_HEADING, entry.technologies),
        )
        if text and text.strip()
    ]
    return CareerBlock(
        company_name=entry.company_name,
        period=format_period(entry.started_at, entry.ended_at),
        employment_label=entry.employment_type.label if entry.employment_type else "",
        affiliation=_affiliation_line(entry),
        subsections=tuple(subsections),
    )


def build_career_blocks(entries: Iterable[CareerHistoryEntry]) -> List[CareerBlock]:
    blocks = [career_block(entry) for entry in entries]
    log_section_built("career_history", len(blocks))
    return blocks
