"""Unit tests for the paginated layout engine."""

import math

import pytest

from rireki.contexts.layout import A4, LayoutError, PageGeometry, SectionBox, layout_sections

USABLE = A4.usable_height_mm  # 277mm
GAP = A4.section_gap_mm  # 8mm


def boxes(*heights):
    return [SectionBox(f"section_{i}", height) for i, height in enumerate(heights)]


@pytest.mark.unit
def test_usable_height_of_a4():
    """Test that the default geometry is A4 minus 10mm margins."""
    assert USABLE == pytest.approx(277.0)
    assert A4.usable_width_mm == pytest.approx(190.0)


@pytest.mark.unit
def test_empty_input_has_no_pages():
    """Test that no sections produce no pages."""
    assert layout_sections([], A4).page_count == 0


@pytest.mark.unit
def test_sections_that_fit_share_a_page():
    """Test stacking with the section gap between neighbours."""
    result = layout_sections(boxes(95.0, 120.0), A4)

    assert result.page_count == 1
    first, second = result.pages[0]
    assert first.y_mm == 0.0
    assert second.y_mm == pytest.approx(95.0 + GAP)
    assert not second.is_partial


@pytest.mark.unit
def test_exact_fit_including_gap_stays_on_page():
    """Test that a section ending exactly at the page bottom is not moved."""
    result = layout_sections(boxes(100.0, USABLE - 100.0 - GAP), A4)

    assert result.page_count == 1


@pytest.mark.unit
def test_section_that_does_not_fit_moves_whole():
    """Test that a section moves to the next page instead of splitting."""
    result = layout_sections(boxes(200.0, 100.0), A4)

    assert result.page_count == 2
    assert result.page_breaks == [(1, 0.0)]
    (moved,) = result.slices_for("section_1")
    assert moved.page_number == 2
    assert moved.y_mm == 0.0
    assert moved.height_mm == 100.0
    assert not moved.is_partial


@pytest.mark.unit
def test_section_filling_a_page_is_not_split():
    """Test that a section exactly one usable page tall is placed whole."""
    result = layout_sections(boxes(10.0, USABLE), A4)

    assert result.page_count == 2
    assert len(result.slices_for("section_1")) == 1


@pytest.mark.unit
@pytest.mark.parametrize("height", [USABLE + 1.0, 600.0, 2 * USABLE, 1000.5])
def test_oversized_section_spans_ceil_pages(height):
    """Test that an oversized section occupies ceil(height / usable) pages."""
    result = layout_sections(boxes(height), A4)

    slices = result.slices_for("section_0")
    assert len(slices) == math.ceil(height / USABLE)
    assert result.page_count == len(slices)
    assert [s.page_number for s in slices] == list(range(1, len(slices) + 1))


@pytest.mark.unit
def test_oversized_slices_reconstruct_section():
    """Test that slices are contiguous, non-overlapping, and cover the whole section."""
    result = layout_sections(boxes(600.0), A4)

    slices = result.slices_for("section_0")
    assert [s.offset_mm for s in slices] == pytest.approx([0.0, USABLE, 2 * USABLE])
    assert [s.height_mm for s in slices] == pytest.approx([USABLE, USABLE, 600.0 - 2 * USABLE])
    assert sum(s.height_mm for s in slices) == pytest.approx(600.0)
    for previous, current in zip(slices, slices[1:]):
        assert current.offset_mm == pytest.approx(previous.offset_mm + previous.height_mm)
    assert all(s.is_partial for s in slices)
    assert all(s.y_mm == 0.0 for s in slices)


@pytest.mark.unit
def test_oversized_section_starts_on_fresh_page():
    """Test that an oversized section after other content starts a new page."""
    result = layout_sections(boxes(50.0, 600.0), A4)

    assert result.page_count == 4
    assert result.page_breaks == [(1, 0.0), (1, pytest.approx(USABLE)), (1, pytest.approx(2 * USABLE))]


@pytest.mark.unit
def test_section_after_oversized_shares_last_page():
    """Test that the last page keeps its partial fill for following sections."""
    result = layout_sections(boxes(600.0, 20.0), A4)

    assert result.page_count == 3
    (after,) = result.slices_for("section_1")
    assert after.page_number == 3
    assert after.y_mm == pytest.approx(600.0 - 2 * USABLE + GAP)


@pytest.mark.unit
def test_layout_is_deterministic():
    """Test that the same input produces the same page breaks twice."""
    sections = boxes(40.0, 95.3, 180.25, 12.0, 410.0, 33.3, 250.0)

    first = layout_sections(sections, A4)
    second = layout_sections(sections, A4)

    assert first.page_breaks == second.page_breaks
    assert first.pages == second.pages


@pytest.mark.unit
def test_reading_order_is_preserved():
    """Test that slices appear in input order across pages."""
    result = layout_sections(boxes(120.0, 120.0, 120.0, 120.0), A4)

    order = [s.section_index for page in result.pages for s in page]
    assert order == [0, 1, 2, 3]
    assert result.page_count == 2


@pytest.mark.unit
def test_zero_gap_geometry():
    """Test stacking without a section gap."""
    geometry = PageGeometry(section_gap_mm=0)

    result = layout_sections(boxes(138.5, 138.5), geometry)

    assert result.page_count == 1
    assert result.pages[0][1].y_mm == pytest.approx(138.5)


@pytest.mark.unit
def test_negative_height_is_rejected():
    """Test that a negative section height raises LayoutError."""
    with pytest.raises(LayoutError):
        layout_sections(boxes(-1.0), A4)


@pytest.mark.unit
def test_geometry_without_usable_area_is_rejected():
    """Test that margins consuming the page raise LayoutError."""
    with pytest.raises(LayoutError):
        PageGeometry(margin_mm=105)
