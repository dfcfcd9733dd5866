"""Unit tests for font measurement and section block sizing."""

import base64
import dataclasses
from datetime import date
from io import BytesIO

import pytest
from PIL import Image

from rireki.contexts.calendar import CalendarDate, YearMonth
from rireki.contexts.layout import A4
from rireki.contexts.modeling import ApplicantProfile, Gender, RowSection
from rireki.contexts.modeling.rows import DocumentRow
from rireki.contexts.rendering import FontLoadError, FontRegistry, PhotoDecodeError, as_of_stamp, decode_photo
from rireki.contexts.rendering.blocks import (
    BasicInfoBlock,
    LabeledTextBlock,
    YearMonthTableBlock,
    birth_date_line,
)

WIDTH = A4.usable_width_mm


@pytest.fixture(scope="module")
def fonts():
    registry = FontRegistry(font_path=None)
    registry.load()
    return registry


@pytest.fixture
def profile():
    return ApplicantProfile(
        name="山田 太郎",
        furigana="やまだ たろう",
        birth_date=CalendarDate(1995, 4, 2),
        gender=Gender.MALE,
    )


def png_base64(width=60, height=80) -> str:
    buffer = BytesIO()
    Image.new("RGB", (width, height), (200, 180, 160)).save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("ascii")


# =============================================================================
# Fonts
# =============================================================================


@pytest.mark.unit
def test_builtin_font_loads_once(fonts):
    """Test that the built-in CID font registers and is reused."""
    assert fonts.is_loaded
    assert fonts.load() == "HeiseiKakuGo-W5"
    assert fonts.font_name == "HeiseiKakuGo-W5"


@pytest.mark.unit
def test_missing_font_file_raises(tmp_path):
    """Test FontLoadError for a configured font that does not exist."""
    registry = FontRegistry(font_path=tmp_path / "missing.ttf")

    with pytest.raises(FontLoadError) as exc_info:
        registry.load()

    assert exc_info.value.font_path == tmp_path / "missing.ttf"
    assert not registry.is_loaded


@pytest.mark.unit
def test_wrap_text_breaks_between_characters(fonts):
    """Test character-level wrapping of Japanese text."""
    assert fonts.wrap_text("志望動機の本文", 10, 40) == ["志望動機", "の本文"]


@pytest.mark.unit
def test_wrap_text_keeps_line_breaks(fonts):
    """Test that newlines and blank lines survive wrapping."""
    assert fonts.wrap_text("一行目\n\n三行目", 10, 500) == ["一行目", "", "三行目"]
    assert fonts.wrap_text("", 10, 500) == [""]
    assert fonts.wrap_text(None, 10, 500) == [""]


@pytest.mark.unit
def test_wrapped_lines_fit_width(fonts):
    """Test that no wrapped line is wider than the limit."""
    text = "Webアプリケーションの設計・開発・運用を担当し、チームリーダーとして5名のメンバーを統括しました。" * 3

    lines = fonts.wrap_text(text, 9, 150)

    assert "".join(lines) == text
    assert all(fonts.string_width(line, 9) <= 150 for line in lines)


@pytest.mark.unit
def test_fit_size_shrinks_long_text(fonts):
    """Test that fit_size steps down until the text fits, but not below the floor."""
    assert fonts.fit_size("短い", 10, 100) == 10
    assert fonts.fit_size("とても長い住所の文字列です", 10, 100) < 10
    assert fonts.fit_size("あ" * 200, 10, 50) == 6.0


# =============================================================================
# Blocks
# =============================================================================


@pytest.mark.unit
def test_as_of_stamp_and_birth_line(profile):
    """Test the era date stamp and the birth date line with age."""
    assert as_of_stamp(date(2024, 4, 1)) == "令和6年4月1日 現在"
    assert birth_date_line(profile, date(2024, 4, 1)) == "平成7年4月2日生（満28歳）"


@pytest.mark.unit
def test_basic_info_heights(fonts, profile):
    """Test the résumé and career variants of the basic info table."""
    resume = BasicInfoBlock(fonts, WIDTH, profile, date(2024, 4, 1))
    career = BasicInfoBlock(fonts, WIDTH, profile, date(2024, 4, 1), with_photo=False, contact_when_present=True)

    assert resume.height_mm == pytest.approx(65.0)
    assert career.height_mm == pytest.approx(40.0)
    assert resume.box().name == "basic_info"


@pytest.mark.unit
@pytest.mark.parametrize(
    "fields, expected_mm",
    [
        ({"prefecture": "東京都", "city": "千代田区", "phone": "090-1234-5678"}, 65.0),
        ({"address": "千代田1-1"}, 55.0),
        ({"email": "taro@example.com"}, 50.0),
        ({"postal_code": "1000001", "building": "千代田ビル"}, 40.0),
    ],
)
def test_career_basic_info_counts_only_printed_rows(fonts, profile, fields, expected_mm):
    """Test that career address and contact rows appear only when their data is set."""
    career = BasicInfoBlock(
        fonts,
        WIDTH,
        dataclasses.replace(profile, **fields),
        date(2024, 4, 1),
        with_photo=False,
        contact_when_present=True,
    )

    assert career.height_mm == pytest.approx(expected_mm)


@pytest.mark.unit
def test_labeled_text_block_grows_with_text(fonts):
    """Test the minimum height and growth for long text."""
    short = LabeledTextBlock(fonts, WIDTH, "motivation", "志望動機", "貴社を志望します。")
    long = LabeledTextBlock(fonts, WIDTH, "motivation", "志望動機", "貴社を志望します。\n" * 40)

    assert short.height_mm == pytest.approx(30.0)
    assert long.height_mm > 30.0


@pytest.mark.unit
def test_history_table_height_counts_rows(fonts):
    """Test table height from header, heading rows, data rows, and closing row."""
    section = RowSection(
        "education",
        "学　歴",
        (
            DocumentRow("東京大学 入学", (2014, 4), "平成26年", "4"),
            DocumentRow("東京大学 卒業", (2018, 3), "平成30年", "3"),
        ),
    )

    table = YearMonthTableBlock(fonts, WIDTH, "history", "学歴・職歴", [section], closing_label="以上")

    # header + heading + 2 rows + 以上, 9mm each
    assert table.height_mm == pytest.approx(45.0)


@pytest.mark.unit
def test_decode_photo_accepts_data_url():
    """Test plain base64 and data URL photos."""
    payload = png_base64()

    assert decode_photo(payload).getSize() == (60, 80)
    assert decode_photo(f"data:image/png;base64,{payload}").getSize() == (60, 80)


@pytest.mark.unit
@pytest.mark.parametrize("photo", ["not base64!!", base64.b64encode(b"plain text, not an image").decode("ascii")])
def test_decode_photo_rejects_bad_payload(photo):
    """Test PhotoDecodeError for invalid base64 and non-image bytes."""
    with pytest.raises(PhotoDecodeError):
        decode_photo(photo)
