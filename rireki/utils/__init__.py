"""
Shared utilities for RIREKI.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps
- PDF inspection
- Text helpers
"""

from rireki.utils.timestamp import now, today

__all__ = ["now", "today"]
