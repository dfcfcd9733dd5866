"""
Modeling context logger.

Provides logging interface for the modeling context with automatic [model] prefix.
All modeling modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[model]"


def _log_info(message: str) -> None:
    """Log info message with [model] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [model] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [model] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def log_skipped_entry(entry_kind: str, entry_id: str, reason: str) -> None:
    """Log an entry that contributed no rows."""
    _log_debug(f"Skipped {entry_kind} entry {entry_id}: {reason}")


def log_section_built(section_name: str, row_count: int) -> None:
    _log_debug(f"Built section '{section_name}' with {row_count} rows")
