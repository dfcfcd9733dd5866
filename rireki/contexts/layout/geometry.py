"""
Page geometry for the paginated layout.

All layout arithmetic is done in millimetres. The rendering context converts
to PDF points only when drawing.
"""

from dataclasses import dataclass

from rireki.contexts.layout.exceptions import LayoutError

A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0
DEFAULT_MARGIN_MM = 10.0
DEFAULT_SECTION_GAP_MM = 8.0


@dataclass(frozen=True)
class PageGeometry:
    """
    Fixed page size, margin, and spacing between stacked sections.

    Attributes:
        width_mm: Page width
        height_mm: Page height
        margin_mm: Margin applied on all four sides
        section_gap_mm: Vertical space between two sections on the same page
    """

    width_mm: float = A4_WIDTH_MM
    height_mm: float = A4_HEIGHT_MM
    margin_mm: float = DEFAULT_MARGIN_MM
    section_gap_mm: float = DEFAULT_SECTION_GAP_MM

    def __post_init__(self):
        if self.margin_mm < 0 or self.section_gap_mm < 0:
            raise LayoutError("Margin and section gap must not be negative")
        if self.usable_width_mm <= 0 or self.usable_height_mm <= 0:
            raise LayoutError(
                f"Margin {self.margin_mm}mm leaves no usable area on a "
                f"{self.width_mm}x{self.height_mm}mm page"
            )

    @property
    def usable_width_mm(self) -> float:
        return self.width_mm - 2 * self.margin_mm

    @property
    def usable_height_mm(self) -> float:
        """Page height minus top and bottom margins."""
        return self.height_mm - 2 * self.margin_mm


A4 = PageGeometry()
