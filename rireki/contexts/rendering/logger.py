"""
Rendering context logger.

Provides logging interface for the rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.

Usage:
    from rireki.contexts.rendering.logger import setup_rendering_logger, log_generation_start

    setup_rendering_logger(session_log_dir("render", LOGS_PATH))
    log_generation_start("resume", snapshot.profile.name)
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from rireki.utils.logger import setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, font_name: Optional[str] = None, verbose: bool = False) -> Path:
    """
    Configure loguru for document generation runs.

    Args:
        log_dir: Directory for this logging session
        font_name: Font used for the run, recorded in the provenance header
        verbose: Also show DEBUG messages (page placements, skipped entries) on the console

    Returns:
        Path to log file
    """
    return setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Font": font_name or "default"},
        level_colors={"INFO": "<cyan>"},
        console_level="DEBUG" if verbose else "INFO",
    )


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def log_generation_start(document_type: str, applicant_name: str) -> None:
    _log_info(f"Generating {document_type} for '{applicant_name}'")


def log_section_measured(section_name: str, height_mm: float) -> None:
    _log_debug(f"Measured '{section_name}': {height_mm:.1f}mm")


def log_generation_result(document_type: str, page_count: int, size_bytes: int) -> None:
    _log_success(f"Generated {document_type}: {page_count} page(s), {size_bytes:,} bytes")


def log_generation_failed(document_type: str, error: Exception) -> None:
    _log_error(f"Failed to generate {document_type}: {type(error).__name__}: {error}")
