"""
Rendering Context

Responsibilities:
- Registers the Japanese font once and measures/wraps text with it
- Turns snapshots into measured section blocks in fixed template order
- Draws the laid-out sections into a multi-page A4 PDF with reportlab
- Wraps every failure into a single DocumentGenerationError

Owns: Fonts, section blocks, PDF assembly
Never: Decides page breaks (layout) or builds row text (modeling)
"""

from rireki.contexts.rendering.blocks import SectionBlock, as_of_stamp, decode_photo
from rireki.contexts.rendering.emitter import (
    DocumentArtifact,
    emit_pdf,
    generate_career_document,
    generate_resume_document,
)
from rireki.contexts.rendering.exceptions import (
    DocumentGenerationError,
    FontLoadError,
    PhotoDecodeError,
)
from rireki.contexts.rendering.fonts import FontRegistry
from rireki.contexts.rendering.templates import career_blocks, resume_blocks

__all__ = [
    "DocumentArtifact",
    "DocumentGenerationError",
    "FontLoadError",
    "FontRegistry",
    "PhotoDecodeError",
    "SectionBlock",
    "as_of_stamp",
    "career_blocks",
    "decode_photo",
    "emit_pdf",
    "generate_career_document",
    "generate_resume_document",
    "resume_blocks",
]
