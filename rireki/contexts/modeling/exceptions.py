"""Custom exceptions for the modeling context."""

from typing import List, Optional


class IncompleteEntryError(ValueError):
    """
    Exception raised when a history entry lacks a field its status requires.

    Builders catch this per entry and skip the entry, so one half-edited row
    never blocks the rest of the document.

    Attributes:
        message: Error description
        entry_kind: Kind of entry (e.g., "education", "work_history")
        entry_id: Opaque id of the offending entry
        missing_fields: Names of the fields that were required but absent
    """

    def __init__(
        self,
        message: str,
        entry_kind: Optional[str] = None,
        entry_id: Optional[str] = None,
        missing_fields: Optional[List[str]] = None,
    ):
        self.message = message
        self.entry_kind = entry_kind
        self.entry_id = entry_id
        self.missing_fields = missing_fields or []

        parts = [message]
        if entry_kind:
            parts.append(f"Entry: {entry_kind} (id={entry_id})")
        if self.missing_fields:
            parts.append(f"Missing: {', '.join(self.missing_fields)}")

        super().__init__("\n".join(parts))


class InvalidSnapshotError(ValueError):
    """
    Exception raised when a form snapshot is missing required top-level fields
    (name, furigana, birth date, gender) or has the wrong shape.
    """

    pass
