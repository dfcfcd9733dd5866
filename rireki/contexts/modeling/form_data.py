"""
Form Snapshot Data Structures

Typed, immutable representation of the résumé and career history forms.
A snapshot is built once per generation call (see rireki.contexts.intake) and
passed by value into the builders; nothing here is cached or mutated.

Terminal statuses are separate classes so that a status which carries no date
(enrolled, on leave, employed) cannot carry one at all. Code that needs the
completion or exit date reaches it through the status object, never through an
optional field on the entry.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Union

from rireki.contexts.calendar import CalendarDate, YearMonth
from rireki.contexts.modeling import labels


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"

    @property
    def label(self) -> str:
        return labels.GENDER_LABELS[self.value]


class EmploymentType(Enum):
    FULL_TIME = "fullTime"
    CONTRACT = "contract"
    PART_TIME = "partTime"
    DISPATCH = "dispatch"

    @property
    def label(self) -> str:
        return labels.EMPLOYMENT_TYPE_LABELS[self.value]


# =============================================================================
# Education statuses
# =============================================================================


@dataclass(frozen=True)
class Graduated:
    completed_at: YearMonth
    code: ClassVar[str] = "graduated"
    label: ClassVar[str] = labels.GRADUATED


@dataclass(frozen=True)
class Withdrawn:
    completed_at: YearMonth
    code: ClassVar[str] = "withdrawn"
    label: ClassVar[str] = labels.WITHDRAWN


@dataclass(frozen=True)
class Completed:
    completed_at: YearMonth
    code: ClassVar[str] = "completed"
    label: ClassVar[str] = labels.COMPLETED


@dataclass(frozen=True)
class Enrolled:
    code: ClassVar[str] = "enrolled"
    label: ClassVar[str] = labels.ENROLLED


@dataclass(frozen=True)
class OnLeave:
    code: ClassVar[str] = "on_leave"
    label: ClassVar[str] = labels.ON_LEAVE


EducationStatus = Union[Graduated, Withdrawn, Completed, Enrolled, OnLeave]

# Statuses that end with a dated completion event
DATED_EDUCATION_STATUSES = {cls.code: cls for cls in (Graduated, Withdrawn, Completed)}
UNDATED_EDUCATION_STATUSES = {cls.code: cls for cls in (Enrolled, OnLeave)}


# =============================================================================
# Work history statuses
# =============================================================================


@dataclass(frozen=True)
class Employed:
    code: ClassVar[str] = "employed"
    label: ClassVar[str] = labels.EMPLOYED


@dataclass(frozen=True)
class Resigned:
    left_at: YearMonth
    code: ClassVar[str] = "resigned"
    label: ClassVar[str] = labels.RESIGNED


WorkStatus = Union[Employed, Resigned]


# =============================================================================
# Entries
# =============================================================================


@dataclass(frozen=True)
class EducationEntry:
    """
    One school on the résumé.

    Attributes:
        id: Opaque unique token from the form
        school_name: School name as entered
        status: Terminal status (carries the completion date when it has one)
        entered_at: Entry year/month; None while the entry is being edited
    """

    id: str
    school_name: str
    status: EducationStatus
    entered_at: Optional[YearMonth] = None


@dataclass(frozen=True)
class WorkHistoryEntry:
    """
    One employer on the résumé.

    Attributes:
        id: Opaque unique token from the form
        company_name: Company name as entered
        status: Employed, or Resigned with its exit date
        entered_at: Entry year/month; None while the entry is being edited
        description: Free text kept from the form (not printed on the résumé)
    """

    id: str
    company_name: str
    status: WorkStatus
    entered_at: Optional[YearMonth] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class QualificationEntry:
    id: str
    name: str
    obtained_at: Optional[YearMonth] = None


@dataclass(frozen=True)
class CareerHistoryEntry:
    """
    One employer on the career history document.

    An entry without ended_at is a current job and prints as 在職中.
    """

    id: str
    company_name: str
    started_at: Optional[YearMonth] = None
    ended_at: Optional[YearMonth] = None
    employment_type: Optional[EmploymentType] = None
    department: Optional[str] = None
    position: Optional[str] = None
    job_description: Optional[str] = None
    achievements: Optional[str] = None
    technologies: Optional[str] = None


@dataclass(frozen=True)
class SkillEntry:
    id: str
    skill_name: str
    category: Optional[str] = None
    experience: Optional[str] = None


# =============================================================================
# Snapshots
# =============================================================================


@dataclass(frozen=True)
class ApplicantProfile:
    """
    Personal details shared by both documents.

    Attributes:
        name: Full name (氏名)
        furigana: Reading of the name in hiragana (ふりがな)
        birth_date: Validated birth date
        gender: Gender as selected on the form
        postal_code, prefecture, city, address, building: Address parts
        email, phone: Contact details
    """

    name: str
    furigana: str
    birth_date: CalendarDate
    gender: Gender
    postal_code: Optional[str] = None
    prefecture: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    building: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @property
    def full_address(self) -> str:
        parts = [self.prefecture, self.city, self.address, self.building]
        return " ".join(part for part in parts if part)


@dataclass(frozen=True)
class ResumeFormData:
    """Snapshot of the résumé (履歴書) form."""

    profile: ApplicantProfile
    photo: Optional[str] = None  # base64, optionally as a data URL
    education: Tuple[EducationEntry, ...] = ()
    work_history: Tuple[WorkHistoryEntry, ...] = ()
    qualifications: Tuple[QualificationEntry, ...] = ()
    motivation: Optional[str] = None
    self_pr: Optional[str] = None
    remarks: Optional[str] = None


@dataclass(frozen=True)
class CareerFormData:
    """Snapshot of the career history (職務経歴書) form."""

    profile: ApplicantProfile
    summary: Optional[str] = None
    career_history: Tuple[CareerHistoryEntry, ...] = ()
    skills: Tuple[SkillEntry, ...] = ()
