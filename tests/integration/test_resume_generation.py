"""
Integration tests for résumé generation - renders real PDFs with reportlab
and inspects them with PyPDF2 and pdfplumber.
"""

import base64
import math
from datetime import date
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from rireki.contexts.intake import load_resume_snapshot, resume_snapshot_from_dict
from rireki.contexts.layout import A4
from rireki.contexts.rendering import (
    DocumentGenerationError,
    FontLoadError,
    FontRegistry,
    PhotoDecodeError,
    generate_resume_document,
)
from rireki.utils.pdf_processing import page_count, page_sizes_mm

FIXTURES_PATH = Path(__file__).resolve().parents[1] / "fixtures"
TODAY = date(2024, 4, 1)


@pytest.fixture(scope="module")
def fonts():
    return FontRegistry(font_path=None)


def png_data_url(width=300, height=400) -> str:
    buffer = BytesIO()
    Image.new("RGB", (width, height), (120, 140, 160)).save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


def many_schools(count):
    return [
        {
            "id": f"e{i}",
            "schoolName": f"第{i}学校",
            "entryYear": 1990 + i % 30,
            "entryMonth": 4,
            "status": "graduated",
            "completionYear": 1991 + i % 30,
            "completionMonth": 3,
        }
        for i in range(count)
    ]


@pytest.mark.integration
def test_minimal_resume_is_single_page(fonts):
    """Test that required fields alone produce one page with the basic info block."""
    snapshot = load_resume_snapshot(FIXTURES_PATH / "resume_minimal.yaml", TODAY)

    artifact = generate_resume_document(snapshot, fonts=fonts, today=TODAY)

    assert artifact.page_count == 1
    assert artifact.section_names == ["title", "basic_info"]
    assert artifact.pdf_bytes.startswith(b"%PDF")
    assert page_count(artifact.pdf_bytes) == 1
    assert page_sizes_mm(artifact.pdf_bytes) == [(210.0, 297.0)]


@pytest.mark.integration
def test_full_resume_sections_in_template_order(fonts):
    """Test the fixed résumé section order."""
    snapshot = load_resume_snapshot(FIXTURES_PATH / "resume_full.yaml", TODAY)

    artifact = generate_resume_document(snapshot, fonts=fonts, today=TODAY)

    assert artifact.section_names == [
        "title",
        "basic_info",
        "history",
        "qualifications",
        "motivation",
        "self_pr",
        "remarks",
    ]
    assert artifact.generated_on == TODAY
    assert page_count(artifact.pdf_bytes) == artifact.page_count


@pytest.mark.integration
def test_full_resume_sections_are_not_split(fonts):
    """Test that sections shorter than a page are never sliced."""
    snapshot = load_resume_snapshot(FIXTURES_PATH / "resume_full.yaml", TODAY)

    artifact = generate_resume_document(snapshot, fonts=fonts, today=TODAY)

    for name in artifact.section_names:
        slices = artifact.layout.slices_for(name)
        assert len(slices) == 1, f"{name} was split"
        assert not slices[0].is_partial


@pytest.mark.integration
def test_long_history_is_sliced_across_pages(fonts):
    """Test that an oversized history table spans ceil(height / usable) pages."""
    form = {
        "name": "山田 太郎",
        "furigana": "やまだ たろう",
        "birthDate": "1995/04/02",
        "gender": "male",
        "education": many_schools(40),
    }
    snapshot = resume_snapshot_from_dict(form, TODAY)

    artifact = generate_resume_document(snapshot, fonts=fonts, today=TODAY)

    (history,) = [box for box in artifact.layout.sections if box.name == "history"]
    slices = artifact.layout.slices_for("history")
    assert history.height_mm > A4.usable_height_mm
    assert len(slices) == math.ceil(history.height_mm / A4.usable_height_mm)
    assert sum(s.height_mm for s in slices) == pytest.approx(history.height_mm)
    assert page_count(artifact.pdf_bytes) == artifact.page_count
    assert len(page_sizes_mm(artifact.pdf_bytes)) == artifact.page_count


@pytest.mark.integration
def test_generation_is_deterministic(fonts):
    """Test that the same snapshot yields the same page breaks."""
    snapshot = load_resume_snapshot(FIXTURES_PATH / "resume_full.yaml", TODAY)

    first = generate_resume_document(snapshot, fonts=fonts, today=TODAY)
    second = generate_resume_document(snapshot, fonts=fonts, today=TODAY)

    assert first.layout.page_breaks == second.layout.page_breaks
    assert first.layout.pages == second.layout.pages


@pytest.mark.integration
def test_resume_with_photo(fonts):
    """Test that a data URL photo is embedded."""
    snapshot = resume_snapshot_from_dict(
        {
            "name": "山田 花子",
            "furigana": "やまだ はなこ",
            "birthDate": "1998/10/15",
            "gender": "female",
            "photo": png_data_url(),
        },
        TODAY,
    )

    artifact = generate_resume_document(snapshot, fonts=fonts, today=TODAY)

    assert artifact.page_count == 1
    assert page_count(artifact.pdf_bytes) == 1


@pytest.mark.integration
def test_bad_photo_raises_generation_error(fonts):
    """Test that an undecodable photo fails the whole generation."""
    snapshot = resume_snapshot_from_dict(
        {
            "name": "山田 太郎",
            "furigana": "やまだ たろう",
            "birthDate": "1995/04/02",
            "gender": "male",
            "photo": "data:image/png;base64,bm90IGFuIGltYWdl",
        },
        TODAY,
    )

    with pytest.raises(DocumentGenerationError) as exc_info:
        generate_resume_document(snapshot, fonts=fonts, today=TODAY)

    error = exc_info.value
    assert isinstance(error.original_error, PhotoDecodeError)
    assert error.document_type == "resume"
    assert error.user_message == "PDF生成に失敗しました。もう一度お試しください。"


@pytest.mark.integration
def test_font_failure_raises_generation_error(tmp_path):
    """Test that a missing font file fails generation with the wrapped error."""
    snapshot = load_resume_snapshot(FIXTURES_PATH / "resume_minimal.yaml", TODAY)

    with pytest.raises(DocumentGenerationError) as exc_info:
        generate_resume_document(snapshot, fonts=FontRegistry(tmp_path / "missing.otf"), today=TODAY)

    assert isinstance(exc_info.value.original_error, FontLoadError)


@pytest.mark.integration
def test_artifact_save(fonts, tmp_path):
    """Test writing the PDF to disk."""
    snapshot = load_resume_snapshot(FIXTURES_PATH / "resume_minimal.yaml", TODAY)
    artifact = generate_resume_document(snapshot, fonts=fonts, today=TODAY)

    saved = artifact.save(tmp_path / "out" / "rirekisho.pdf")

    assert saved.exists()
    assert page_count(saved) == 1
