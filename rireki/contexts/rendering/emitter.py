"""
Document emitter.

Measures the template's sections, hands their heights to the layout engine,
and draws every placed slice onto a reportlab canvas. A slice of an oversized
section is drawn by clipping the page to the slice and shifting the whole
block up by the slice offset, so consecutive slices show consecutive parts of
the same drawing.
"""

from dataclasses import dataclass
from datetime import date
from io import BytesIO
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from reportlab.lib.units import mm
from reportlab.pdfgen.canvas import Canvas

from rireki.contexts.layout import A4, LayoutResult, PageGeometry, layout_sections
from rireki.contexts.modeling import CareerFormData, ResumeFormData, labels
from rireki.contexts.rendering.blocks import SectionBlock
from rireki.contexts.rendering.exceptions import DocumentGenerationError
from rireki.contexts.rendering.fonts import FontRegistry
from rireki.contexts.rendering.logger import (
    log_generation_failed,
    log_generation_result,
    log_generation_start,
    log_section_measured,
)
from rireki.contexts.rendering.templates import career_blocks, resume_blocks

RESUME = "resume"
CAREER = "career"


@dataclass
class DocumentArtifact:
    """
    A generated PDF together with the layout it was drawn from.

    Attributes:
        document_type: "resume" or "career"
        pdf_bytes: Complete PDF file contents
        layout: Page placement of every section
        generated_on: Date printed in the "現在" stamp
    """

    document_type: str
    pdf_bytes: bytes
    layout: LayoutResult
    generated_on: date

    @property
    def page_count(self) -> int:
        return self.layout.page_count

    @property
    def section_names(self) -> List[str]:
        return self.layout.section_names()

    def save(self, path: Union[str, Path]) -> Path:
        """Write the PDF to path, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.pdf_bytes)
        return path


def emit_pdf(
    blocks: Sequence[SectionBlock],
    layout: LayoutResult,
    geometry: PageGeometry,
    title: str = "",
) -> bytes:
    """
    Draw laid-out blocks into a PDF.

    Args:
        blocks: Section blocks, in the same order as the layout's sections
        layout: Result of layout_sections() for those blocks
        geometry: Page geometry the layout was computed with
        title: PDF document title metadata

    Returns:
        PDF file contents
    """
    buffer = BytesIO()
    page_size = (geometry.width_mm * mm, geometry.height_mm * mm)
    canv = Canvas(buffer, pagesize=page_size)
    canv.setTitle(title)

    left = geometry.margin_mm * mm
    usable_top = (geometry.height_mm - geometry.margin_mm) * mm
    width = geometry.usable_width_mm * mm

    for page in layout.pages:
        for placed in page:
            block = blocks[placed.section_index]
            slice_top = usable_top - placed.y_mm * mm

            if not placed.is_partial:
                block.draw(canv, left, slice_top)
                continue

            canv.saveState()
            clip = canv.beginPath()
            clip.rect(left, slice_top - placed.height_mm * mm, width, placed.height_mm * mm)
            canv.clipPath(clip, stroke=0, fill=0)
            # Block top sits above the page by the slice offset
            block.draw(canv, left, slice_top + placed.offset_mm * mm)
            canv.restoreState()
        canv.showPage()

    canv.save()
    return buffer.getvalue()


def _generate(
    document_type: str,
    applicant_name: str,
    build_blocks: Callable[[FontRegistry, PageGeometry, date], List[SectionBlock]],
    title: str,
    fonts: Optional[FontRegistry],
    geometry: PageGeometry,
    today: Optional[date],
) -> DocumentArtifact:
    log_generation_start(document_type, applicant_name)
    today = today or date.today()
    try:
        fonts = fonts or FontRegistry()
        fonts.load()
        blocks = build_blocks(fonts, geometry, today)
        boxes = []
        for block in blocks:
            box = block.box()
            log_section_measured(box.name, box.height_mm)
            boxes.append(box)
        layout = layout_sections(boxes, geometry)
        pdf_bytes = emit_pdf(blocks, layout, geometry, title=f"{title} {applicant_name}".strip())
    except Exception as e:
        log_generation_failed(document_type, e)
        raise DocumentGenerationError(
            f"Could not generate {document_type} document",
            document_type=document_type,
            original_error=e,
        ) from e

    log_generation_result(document_type, layout.page_count, len(pdf_bytes))
    return DocumentArtifact(
        document_type=document_type,
        pdf_bytes=pdf_bytes,
        layout=layout,
        generated_on=today,
    )


def generate_resume_document(
    snapshot: ResumeFormData,
    fonts: Optional[FontRegistry] = None,
    geometry: PageGeometry = A4,
    today: Optional[date] = None,
) -> DocumentArtifact:
    """
    Generate the résumé (履歴書) PDF for a form snapshot.

    Args:
        snapshot: Résumé form snapshot
        fonts: Shared font registry (a new one is created if omitted)
        geometry: Page geometry (A4 with 10mm margins by default)
        today: Date for the "現在" stamp and age; defaults to the current date

    Returns:
        DocumentArtifact with the PDF bytes and the layout

    Raises:
        DocumentGenerationError: If anything fails; no partial output is returned

    Example:
        artifact = generate_resume_document(load_resume_snapshot("me.yaml"))
        artifact.save("outs/results/rirekisho.pdf")
    """
    return _generate(
        RESUME,
        snapshot.profile.name,
        lambda fonts, geometry, today: resume_blocks(snapshot, fonts, geometry, today),
        labels.RESUME_TITLE,
        fonts,
        geometry,
        today,
    )


def generate_career_document(
    snapshot: CareerFormData,
    fonts: Optional[FontRegistry] = None,
    geometry: PageGeometry = A4,
    today: Optional[date] = None,
) -> DocumentArtifact:
    """
    Generate the career history (職務経歴書) PDF for a form snapshot.

    See generate_resume_document() for arguments and errors.
    """
    return _generate(
        CAREER,
        snapshot.profile.name,
        lambda fonts, geometry, today: career_blocks(snapshot, fonts, geometry, today),
        labels.CAREER_TITLE,
        fonts,
        geometry,
        today,
    )
