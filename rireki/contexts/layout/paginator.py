"""
Paginated layout engine.

Places an ordered list of sections with known heights onto fixed-size pages,
top to bottom, in document order.

Rules:
- A section that fits on the current page is placed below the previous one,
  separated by the geometry's section gap.
- A section that does not fit starts a new page, unless it is the first
  section on the page.
- A section taller than the usable page height is the only thing ever split.
  It starts on a page of its own and is cut into slices of
  min(remaining page space, remaining section height), one slice per page.
- The last page keeps whatever partial fill it has.

So a section is split only when it alone cannot fit on an empty page, and an
oversized section of height h occupies exactly ceil(h / usable height) pages.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from rireki.contexts.layout.exceptions import LayoutError
from rireki.contexts.layout.geometry import PageGeometry
from rireki.contexts.layout.logger import log_layout_summary, log_section_sliced

# Float tolerance in mm. Heights come from point-to-mm conversions.
EPSILON_MM = 1e-6


@dataclass(frozen=True)
class SectionBox:
    """
    A section as the layout engine sees it.

    Attributes:
        name: Section identifier (e.g., "basic_info", "history")
        height_mm: Rendered height of the whole section
    """

    name: str
    height_mm: float


@dataclass(frozen=True)
class Slice:
    """
    A vertical span of a section placed on one page.

    Attributes:
        section_index: Index of the section in the input list
        section_name: Name of the section
        page_number: Page the slice is on (1-indexed)
        y_mm: Distance from the top of the usable area to the top of the slice
        offset_mm: Distance from the top of the section to the top of the slice
        height_mm: Height of the slice
        section_height_mm: Height of the whole section
    """

    section_index: int
    section_name: str
    page_number: int
    y_mm: float
    offset_mm: float
    height_mm: float
    section_height_mm: float

    @property
    def is_partial(self) -> bool:
        """True if this slice is only part of its section."""
        return self.offset_mm > EPSILON_MM or self.height_mm < self.section_height_mm - EPSILON_MM


@dataclass
class LayoutResult:
    """
    Placement of every section onto pages.

    Attributes:
        geometry: Page geometry used for the layout
        sections: Input sections, in order
        pages: Slices per page, in reading order
    """

    geometry: PageGeometry
    sections: List[SectionBox]
    pages: List[List[Slice]] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def page_breaks(self) -> List[Tuple[int, float]]:
        """(section_index, offset_mm) of the first slice on every page after the first."""
        return [(page[0].section_index, page[0].offset_mm) for page in self.pages[1:]]

    def slices_for(self, section_name: str) -> List[Slice]:
        """All slices of a section, in order."""
        return [s for page in self.pages for s in page if s.section_name == section_name]

    def section_names(self) -> List[str]:
        return [section.name for section in self.sections]


class _PageFiller:
    """Cursor over the page being filled: current page and height consumed."""

    def __init__(self, geometry: PageGeometry):
        self.usable_height = geometry.usable_height_mm
        self.gap = geometry.section_gap_mm
        self.pages: List[List[Slice]] = []
        self.current_y = 0.0

    @property
    def page_is_empty(self) -> bool:
        return not self.pages or not self.pages[-1]

    @property
    def space_left(self) -> float:
        return self.usable_height - self.current_y

    def new_page(self) -> None:
        self.pages.append([])
        self.current_y = 0.0

    def fits(self, height: float) -> bool:
        gap = 0.0 if self.page_is_empty else self.gap
        return self.current_y + gap + height <= self.usable_height + EPSILON_MM

    def place(self, index: int, section: SectionBox, offset: float, height: float) -> None:
        if not self.pages:
            self.new_page()
        if self.pages[-1]:
            self.current_y += self.gap
        self.pages[-1].append(
            Slice(
                section_index=index,
                section_name=section.name,
                page_number=len(self.pages),
                y_mm=self.current_y,
                offset_mm=offset,
                height_mm=height,
                section_height_mm=section.height_mm,
            )
        )
        self.current_y += height


def layout_sections(sections: Sequence[SectionBox], geometry: PageGeometry) -> LayoutResult:
    """
    Place sections onto pages.

    Args:
        sections: Sections in document order
        geometry: Page size, margin, and section gap

    Returns:
        LayoutResult with one list of slices per page. An empty input gives
        zero pages.

    Raises:
        LayoutError: If a section has a negative height

    Example:
        result = layout_sections(
            [SectionBox("basic_info", 95.0), SectionBox("history", 120.0)],
            PageGeometry(),
        )
        result.page_count   # 1 (95 + 8 + 120 <= 277)
    """
    filler = _PageFiller(geometry)
    usable = geometry.usable_height_mm

    for index, section in enumerate(sections):
        height = section.height_mm
        if height < 0:
            raise LayoutError(f"Section '{section.name}' has negative height {height}")

        if not filler.page_is_empty and not filler.fits(height):
            filler.new_page()

        if height <= usable + EPSILON_MM:
            filler.place(index, section, 0.0, height)
            continue

        # Oversized: the page is empty here, so slicing starts at the page top
        offset = 0.0
        remaining = height
        slice_count = 0
        while remaining > EPSILON_MM:
            if filler.space_left <= EPSILON_MM:
                filler.new_page()
            slice_height = min(filler.space_left, remaining)
            filler.place(index, section, offset, slice_height)
            offset += slice_height
            remaining -= slice_height
            slice_count += 1
        log_section_sliced(section.name, height, slice_count)

    result = LayoutResult(geometry=geometry, sections=list(sections), pages=filler.pages)
    log_layout_summary(result)
    return result
