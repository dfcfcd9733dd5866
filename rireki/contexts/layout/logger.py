"""
Layout context logger.

Provides logging interface for the layout context with automatic [layout] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[layout]"


def _log_debug(message: str) -> None:
    """Log debug message with [layout] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_section_sliced(section_name: str, height_mm: float, slice_count: int) -> None:
    _log_debug(f"'{section_name}' ({height_mm:.1f}mm) exceeds one page, split into {slice_count} slices")


def log_layout_summary(result) -> None:
    """
    Log a one-line summary per page of a LayoutResult.

    Args:
        result: LayoutResult from layout_sections()
    """
    _log_debug(f"Laid out {len(result.sections)} sections on {result.page_count} page(s)")
    for page_number, page in enumerate(result.pages, start=1):
        names = ", ".join(
            f"{s.section_name}[{s.offset_mm:.1f}+{s.height_mm:.1f}]" if s.is_partial else s.section_name
            for s in page
        )
        _log_debug(f"  Page {page_number}: {names}")
