"""
Intake Context

Responsibilities:
- Reads saved form files (YAML/JSON) into typed, immutable snapshots
- Enforces strict dates and status/date consistency at the boundary
- Looks up addresses from postal codes (zipcloud with a built-in fallback)
- Keeps an in-progress form draft on disk

Owns: Form file format, postal lookup, draft storage
Never: Builds rows, paginates, or draws
"""

from rireki.contexts.intake.draft_store import STORAGE_KEY, DraftStore
from rireki.contexts.intake.postal_code import (
    Address,
    format_postal_code,
    lookup_address,
    normalize_postal_code,
)
from rireki.contexts.intake.snapshot_loader import (
    career_snapshot_from_dict,
    load_career_snapshot,
    load_form_data,
    load_resume_snapshot,
    parse_birth_date,
    resume_snapshot_from_dict,
)

__all__ = [
    # Snapshots
    "career_snapshot_from_dict",
    "load_career_snapshot",
    "load_form_data",
    "load_resume_snapshot",
    "parse_birth_date",
    "resume_snapshot_from_dict",
    # Postal code
    "Address",
    "format_postal_code",
    "lookup_address",
    "normalize_postal_code",
    # Drafts
    "DraftStore",
    "STORAGE_KEY",
]
