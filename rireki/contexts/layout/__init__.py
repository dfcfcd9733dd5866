"""
Layout Context

Responsibilities:
- Places measured sections onto fixed-size A4 pages in reading order
- Moves a section to the next page instead of splitting it
- Slices a section across pages only when it is taller than one page
- Resolves page geometry presets (margins, section spacing)

Owns: Page geometry, page-break decisions
Never: Measures text or draws; heights are given by the rendering context
"""

from rireki.contexts.layout.config_resolver import apply_layout_presets, load_layout_presets
from rireki.contexts.layout.exceptions import LayoutError
from rireki.contexts.layout.geometry import A4, PageGeometry
from rireki.contexts.layout.paginator import (
    LayoutResult,
    SectionBox,
    Slice,
    layout_sections,
)

__all__ = [
    "A4",
    "PageGeometry",
    "LayoutError",
    "LayoutResult",
    "SectionBox",
    "Slice",
    "layout_sections",
    "apply_layout_presets",
    "load_layout_presets",
]
