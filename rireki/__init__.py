"""
RIREKI - Japanese résumé and career history document generation

Builds standards-shaped 履歴書 (résumé) and 職務経歴書 (career history) PDFs from
an immutable form snapshot. Nothing is persisted between calls.

Architecture:
- Calendar Context: Japanese era conversion, strict date parsing, school schedules
- Modeling Context: Typed form snapshots and era-annotated document rows
- Layout Context: Fixed-page A4 pagination with overflow slicing
- Rendering Context: Section blocks, font registry, and PDF emission
- Intake Context: Snapshot loading, postal code lookup, draft storage
"""

__version__ = "0.1.0"
