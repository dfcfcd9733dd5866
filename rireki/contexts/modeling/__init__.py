"""
Modeling Context

Responsibilities:
- Defines the typed, immutable form snapshots (ResumeFormData, CareerFormData)
- Flattens education, work history, and qualification entries into rows
- Builds career history blocks with period strings and employment labels
- Owns the fixed Japanese vocabulary of both documents

Owns: Snapshot types, status-dependent row generation
Never: Measures, paginates, or draws anything
"""

from rireki.contexts.modeling.exceptions import IncompleteEntryError, InvalidSnapshotError
from rireki.contexts.modeling.form_data import (
    ApplicantProfile,
    CareerFormData,
    CareerHistoryEntry,
    Completed,
    EducationEntry,
    Employed,
    EmploymentType,
    Enrolled,
    Gender,
    Graduated,
    OnLeave,
    QualificationEntry,
    Resigned,
    ResumeFormData,
    SkillEntry,
    Withdrawn,
    WorkHistoryEntry,
)
from rireki.contexts.modeling.rows import (
    CareerBlock,
    DocumentRow,
    RowSection,
    build_career_blocks,
    build_education_rows,
    build_history_sections,
    build_qualification_rows,
    build_qualification_section,
    build_work_history_rows,
    format_period,
)

__all__ = [
    # Exceptions
    "IncompleteEntryError",
    "InvalidSnapshotError",
    # Snapshot types
    "ApplicantProfile",
    "CareerFormData",
    "CareerHistoryEntry",
    "Completed",
    "EducationEntry",
    "Employed",
    "EmploymentType",
    "Enrolled",
    "Gender",
    "Graduated",
    "OnLeave",
    "QualificationEntry",
    "Resigned",
    "ResumeFormData",
    "SkillEntry",
    "Withdrawn",
    "WorkHistoryEntry",
    # Builders
    "CareerBlock",
    "DocumentRow",
    "RowSection",
    "build_career_blocks",
    "build_education_rows",
    "build_history_sections",
    "build_qualification_rows",
    "build_qualification_section",
    "build_work_history_rows",
    "format_period",
]
