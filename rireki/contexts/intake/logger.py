"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from loguru directly.
"""

from loguru import logger

from rireki.utils.text_processing import truncate_display

CONTEXT_PREFIX = "[intake]"


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def log_snapshot_loaded(source: str, document_type: str, entry_counts: dict) -> None:
    counts = ", ".join(f"{kind}={count}" for kind, count in entry_counts.items())
    _log_info(f"Loaded {document_type} snapshot from {source} ({counts})")


def log_dropped_entry(entry_kind: str, entry_id: str, error: Exception) -> None:
    """Log an entry left out of the snapshot because it failed strict construction."""
    _log_debug(f"Dropped {entry_kind} entry {entry_id}: {truncate_display(str(error), 160)}")
