"""
PDF inspection utilities for generated documents.

Helper functions:
    page_count: Quick page count without full extraction.
    page_sizes_mm: Page dimensions in millimetres, via pdfplumber.
    page_text: Text of one page, via pdfplumber.
"""

from io import BytesIO
from pathlib import Path
from typing import List, Optional, Tuple, Union

import pdfplumber
from PyPDF2 import PdfReader

POINTS_PER_MM = 72 / 25.4

PDFSource = Union[str, Path, bytes]


def _open_source(source: PDFSource):
    """Return something PdfReader/pdfplumber accept for a path or in-memory PDF."""
    if isinstance(source, bytes):
        return BytesIO(source)
    return str(source)


def page_count(source: PDFSource) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(_open_source(source))
        return len(reader.pages)
    except Exception:
        return None


def page_sizes_mm(source: PDFSource) -> List[Tuple[float, float]]:
    """
    Get (width, height) of every page in millimetres, rounded to 0.1mm.

    Args:
        source: Path to a PDF file or the PDF bytes

    Returns:
        One (width_mm, height_mm) tuple per page
    """
    with pdfplumber.open(_open_source(source)) as pdf:
        return [
            (round(page.width / POINTS_PER_MM, 1), round(page.height / POINTS_PER_MM, 1))
            for page in pdf.pages
        ]


def page_text(source: PDFSource, page_number: int = 1) -> str:
    """Extracted text of one page (1-indexed), via pdfplumber."""
    with pdfplumber.open(_open_source(source)) as pdf:
        return pdf.pages[page_number - 1].extract_text() or ""
