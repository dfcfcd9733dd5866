"""
Form Snapshot Loader

Reads a form file (YAML or JSON, camelCase keys as saved by the form) and
builds the typed, immutable snapshot the generators consume.

Strictness is applied at this boundary:
- The birth date must be a real "YYYY/MM/DD" date between 1900 and this year.
- Every year/month pair must be a real month (no rollover).
- A status that requires a date must have one; a status that forbids a date
  has any stray date fields ignored.

A history entry that fails these checks is dropped with a debug log so that
one half-edited row never blocks generation. Missing or malformed required
personal fields fail the whole snapshot.

Example form (YAML):
    name: 山田 太郎
    furigana: やまだ たろう
    birthDate: 1995/04/02
    gender: male
    education:
      - id: e1
        schoolName: 東京大学
        entryYear: 2014
        entryMonth: 4
        status: graduated
        completionYear: 2018
        completionMonth: 3
"""

from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, TypeVar, Union

from omegaconf import OmegaConf

from rireki.contexts.calendar import CalendarDate, MalformedDateError, YearMonth, parse_calendar_date
from rireki.contexts.intake.logger import log_dropped_entry, log_snapshot_loaded
from rireki.contexts.modeling import (
    ApplicantProfile,
    CareerFormData,
    CareerHistoryEntry,
    EducationEntry,
    Employed,
    EmploymentType,
    Gender,
    IncompleteEntryError,
    InvalidSnapshotError,
    QualificationEntry,
    Resigned,
    ResumeFormData,
    SkillEntry,
    WorkHistoryEntry,
)
from rireki.contexts.modeling.form_data import DATED_EDUCATION_STATUSES, UNDATED_EDUCATION_STATUSES

MIN_BIRTH_YEAR = 1900

T = TypeVar("T")


# =============================================================================
# Field helpers
# =============================================================================


def _text(raw: Mapping[str, Any], key: str) -> Optional[str]:
    """Optional text field; blank strings become None, numbers become text."""
    value = raw.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _year_month(raw: Mapping[str, Any], year_key: str, month_key: str) -> Optional[YearMonth]:
    """YearMonth from two optional fields; None unless both are present."""
    year = raw.get(year_key)
    month = raw.get(month_key)
    if year is None or month is None:
        return None
    return YearMonth(year, month)


def _require_text(raw: Mapping[str, Any], key: str, kind: str, entry_id: str) -> str:
    value = _text(raw, key)
    if value is None:
        raise IncompleteEntryError(
            f"Required field '{key}' is empty",
            entry_kind=kind,
            entry_id=entry_id,
            missing_fields=[key],
        )
    return value


def _entry_id(raw: Mapping[str, Any], index: int) -> str:
    return _text(raw, "id") or f"#{index}"


# =============================================================================
# Profile
# =============================================================================


def parse_birth_date(text: Any, today: Optional[date] = None) -> CalendarDate:
    """
    Parse the birth date field and check it is plausible.

    Raises:
        MalformedDateError: If the date is malformed, impossible, or its year
            is outside 1900..current year
    """
    birth = parse_calendar_date(text)
    current_year = (today or date.today()).year
    if not MIN_BIRTH_YEAR <= birth.year <= current_year:
        raise MalformedDateError(
            f"Birth year must be between {MIN_BIRTH_YEAR} and {current_year}", text
        )
    return birth


def profile_from_dict(raw: Mapping[str, Any], today: Optional[date] = None) -> ApplicantProfile:
    """
    Build the personal details shared by both documents.

    Raises:
        InvalidSnapshotError: If name, furigana, birth date, or gender is missing
            or gender is not "male"/"female"
        MalformedDateError: If the birth date is invalid
    """
    missing = [key for key in ("name", "furigana", "birthDate", "gender") if _text(raw, key) is None]
    if missing:
        raise InvalidSnapshotError(f"Missing required fields: {', '.join(missing)}")

    try:
        gender = Gender(_text(raw, "gender"))
    except ValueError as e:
        raise InvalidSnapshotError(f"Unknown gender: {raw['gender']!r}") from e

    return ApplicantProfile(
        name=_text(raw, "name"),
        furigana=_text(raw, "furigana"),
        birth_date=parse_birth_date(raw["birthDate"], today),
        gender=gender,
        postal_code=_text(raw, "postalCode"),
        prefecture=_text(raw, "prefecture"),
        city=_text(raw, "city"),
        address=_text(raw, "address"),
        building=_text(raw, "building"),
        email=_text(raw, "email"),
        phone=_text(raw, "phone"),
    )


# =============================================================================
# Entries
# =============================================================================


def education_entry_from_dict(raw: Mapping[str, Any], index: int = 0) -> EducationEntry:
    """
    Raises:
        IncompleteEntryError: Missing school name, unknown status, or a
            graduated/withdrawn/completed entry without its completion date
        MalformedDateError: If a year/month pair is not a real month
    """
    entry_id = _entry_id(raw, index)
    school_name = _require_text(raw, "schoolName", "education", entry_id)
    code = _text(raw, "status")

    if code in UNDATED_EDUCATION_STATUSES:
        status = UNDATED_EDUCATION_STATUSES[code]()
    elif code in DATED_EDUCATION_STATUSES:
        completed_at = _year_month(raw, "completionYear", "completionMonth")
        if completed_at is None:
            raise IncompleteEntryError(
                f"Status '{code}' requires a completion date",
                entry_kind="education",
                entry_id=entry_id,
                missing_fields=["completionYear", "completionMonth"],
            )
        status = DATED_EDUCATION_STATUSES[code](completed_at)
    else:
        raise IncompleteEntryError(
            f"Unknown education status: {code!r}",
            entry_kind="education",
            entry_id=entry_id,
            missing_fields=["status"],
        )

    return EducationEntry(
        id=entry_id,
        school_name=school_name,
        status=status,
        entered_at=_year_month(raw, "entryYear", "entryMonth"),
    )


def work_history_entry_from_dict(raw: Mapping[str, Any], index: int = 0) -> WorkHistoryEntry:
    """
    Raises:
        IncompleteEntryError: Missing company name, unknown status, or a
            resigned entry without its exit date
        MalformedDateError: If a year/month pair is not a real month
    """
    entry_id = _entry_id(raw, index)
    company_name = _require_text(raw, "companyName", "work_history", entry_id)
    code = _text(raw, "status")

    if code == Employed.code:
        # Exit fields left over from an earlier edit are ignored
        status = Employed()
    elif code == Resigned.code:
        left_at = _year_month(raw, "exitYear", "exitMonth")
        if left_at is None:
            raise IncompleteEntryError(
                "Status 'resigned' requires an exit date",
                entry_kind="work_history",
                entry_id=entry_id,
                missing_fields=["exitYear", "exitMonth"],
            )
        status = Resigned(left_at)
    else:
        raise IncompleteEntryError(
            f"Unknown work history status: {code!r}",
            entry_kind="work_history",
            entry_id=entry_id,
            missing_fields=["status"],
        )

    return WorkHistoryEntry(
        id=entry_id,
        company_name=company_name,
        status=status,
        entered_at=_year_month(raw, "entryYear", "entryMonth"),
        description=_text(raw, "description"),
    )


def qualification_entry_from_dict(raw: Mapping[str, Any], index: int = 0) -> QualificationEntry:
    entry_id = _entry_id(raw, index)
    name = _require_text(raw, "name", "qualification", entry_id)

    # Undated is allowed; a half-filled date is not
    missing = [key for key in ("year", "month") if raw.get(key) is None]
    if len(missing) == 1:
        raise IncompleteEntryError(
            f"Qualification date needs both year and month, '{missing[0]}' is empty",
            entry_kind="qualification",
            entry_id=entry_id,
            missing_fields=missing,
        )

    return QualificationEntry(
        id=entry_id,
        name=name,
        obtained_at=_year_month(raw, "year", "month"),
    )


def career_history_entry_from_dict(raw: Mapping[str, Any], index: int = 0) -> CareerHistoryEntry:
    entry_id = _entry_id(raw, index)
    company_name = _require_text(raw, "companyName", "career_history", entry_id)

    employment_type = None
    code = _text(raw, "employmentType")
    if code is not None:
        try:
            employment_type = EmploymentType(code)
        except ValueError as e:
            raise IncompleteEntryError(
                f"Unknown employment type: {code!r}",
                entry_kind="career_history",
                entry_id=entry_id,
                missing_fields=["employmentType"],
            ) from e

    return CareerHistoryEntry(
        id=entry_id,
        company_name=company_name,
        started_at=_year_month(raw, "startYear", "startMonth"),
        ended_at=_year_month(raw, "endYear", "endMonth"),
        employment_type=employment_type,
        department=_text(raw, "department"),
        position=_text(raw, "position"),
        job_description=_text(raw, "jobDescription"),
        achievements=_text(raw, "achievements"),
        technologies=_text(raw, "technologies"),
    )


def skill_entry_from_dict(raw: Mapping[str, Any], index: int = 0) -> SkillEntry:
    entry_id = _entry_id(raw, index)
    return SkillEntry(
        id=entry_id,
        skill_name=_require_text(raw, "skillName", "skill", entry_id),
        category=_text(raw, "category"),
        experience=_text(raw, "experience"),
    )


def _entries(
    raw: Mapping[str, Any],
    key: str,
    kind: str,
    factory: Callable[[Mapping[str, Any], int], T],
) -> Tuple[T, ...]:
    """Build every entry of one array, dropping the ones that fail strict construction."""
    items = raw.get(key) or []
    if not isinstance(items, list):
        raise InvalidSnapshotError(f"'{key}' must be a list, got {type(items).__name__}")

    entries: List[T] = []
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            log_dropped_entry(kind, f"#{index}", InvalidSnapshotError("Entry is not a mapping"))
            continue
        try:
            entries.append(factory(item, index))
        except (IncompleteEntryError, MalformedDateError) as e:
            log_dropped_entry(kind, _entry_id(item, index), e)
    return tuple(entries)


# =============================================================================
# Snapshots
# =============================================================================


def resume_snapshot_from_dict(raw: Mapping[str, Any], today: Optional[date] = None) -> ResumeFormData:
    """
    Build a résumé snapshot from a form dict.

    Args:
        raw: Form data with camelCase keys
        today: Reference date for the birth year check (defaults to today)

    Raises:
        InvalidSnapshotError: If required personal fields are missing
        MalformedDateError: If the birth date is invalid
    """
    return ResumeFormData(
        profile=profile_from_dict(raw, today),
        photo=_text(raw, "photo"),
        education=_entries(raw, "education", "education", education_entry_from_dict),
        work_history=_entries(raw, "workHistory", "work_history", work_history_entry_from_dict),
        qualifications=_entries(raw, "qualifications", "qualification", qualification_entry_from_dict),
        motivation=_text(raw, "motivation"),
        self_pr=_text(raw, "selfPR"),
        remarks=_text(raw, "remarks"),
    )


def career_snapshot_from_dict(raw: Mapping[str, Any], today: Optional[date] = None) -> CareerFormData:
    """Build a career history snapshot from a form dict. See resume_snapshot_from_dict()."""
    return CareerFormData(
        profile=profile_from_dict(raw, today),
        summary=_text(raw, "summary"),
        career_history=_entries(raw, "careerHistory", "career_history", career_history_entry_from_dict),
        skills=_entries(raw, "skills", "skill", skill_entry_from_dict),
    )


def load_form_data(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a form file into a plain dict.

    YAML and JSON are both read through OmegaConf (JSON is valid YAML).

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidSnapshotError: If the file does not hold a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Form file not found: {path}")

    config = OmegaConf.load(path)
    if not OmegaConf.is_dict(config):
        raise InvalidSnapshotError(f"Form file must contain a mapping: {path}")
    return OmegaConf.to_container(config, resolve=False)


def load_resume_snapshot(path: Union[str, Path], today: Optional[date] = None) -> ResumeFormData:
    """
    Load a résumé snapshot from a YAML or JSON form file.

    Example:
        snapshot = load_resume_snapshot("forms/yamada.yaml")
        artifact = generate_resume_document(snapshot)
    """
    snapshot = resume_snapshot_from_dict(load_form_data(path), today)
    log_snapshot_loaded(
        str(path),
        "resume",
        {
            "education": len(snapshot.education),
            "work_history": len(snapshot.work_history),
            "qualifications": len(snapshot.qualifications),
        },
    )
    return snapshot


def load_career_snapshot(path: Union[str, Path], today: Optional[date] = None) -> CareerFormData:
    """Load a career history snapshot from a YAML or JSON form file."""
    snapshot = career_snapshot_from_dict(load_form_data(path), today)
    log_snapshot_loaded(
        str(path),
        "career",
        {"career_history": len(snapshot.career_history), "skills": len(snapshot.skills)},
    )
    return snapshot
