"""
Section blocks for the résumé and career history templates.

Each block measures itself once at construction (so layout never depends on
drawing) and draws itself with its top-left corner at a given point. The
layout engine only sees the name and height; the emitter may draw a block
several times under different clip rectangles when it is sliced across pages.

Coordinates passed to draw() are PDF points with the origin at the bottom-left
of the page. Dimensions below are given in millimetres and converted with
reportlab's `mm` unit.
"""

import base64
import binascii
import re
from abc import ABC, abstractmethod
from datetime import date
from io import BytesIO
from typing import List, Optional, Sequence, Tuple

from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas

from rireki.contexts.calendar import CalendarDate, calculate_age, format_era_date
from rireki.contexts.layout import SectionBox
from rireki.contexts.modeling import labels
from rireki.contexts.modeling.form_data import ApplicantProfile, SkillEntry
from rireki.contexts.modeling.rows import CareerBlock, RowSection
from rireki.contexts.rendering.exceptions import PhotoDecodeError
from rireki.contexts.rendering.fonts import FontRegistry

BLACK = colors.black
LABEL_FILL = colors.Color(0.9, 0.9, 0.9)
SUBHEADER_FILL = colors.Color(0.95, 0.95, 0.95)
PLACEHOLDER_GRAY = colors.Color(0.7, 0.7, 0.7)
MUTED_GRAY = colors.Color(0.3, 0.3, 0.3)
HEADING_GRAY = colors.Color(0.4, 0.4, 0.4)

THIN_LINE = 0.5
THICK_LINE = 1.5

CELL_PADDING = 2 * mm
LINE_SPACING = 1.2

DATA_URL_PATTERN = re.compile(r"^data:image/[\w.+-]+;base64,", re.IGNORECASE)


# =============================================================================
# Drawing helpers
# =============================================================================


def _cell(canv: Canvas, x: float, top: float, width: float, height: float, fill=None, line_width: float = THIN_LINE) -> None:
    """Stroke a rectangle whose top edge is at `top`, optionally filled."""
    canv.setLineWidth(line_width)
    canv.setStrokeColor(BLACK)
    if fill is not None:
        canv.setFillColor(fill)
    canv.rect(x, top - height, width, height, stroke=1, fill=1 if fill is not None else 0)
    canv.setFillColor(BLACK)


def _centered_baseline(top: float, height: float, size: float) -> float:
    """Baseline that vertically centres one line of `size` text in a band."""
    return top - height / 2 - size * 0.35


def _text(
    canv: Canvas,
    fonts: FontRegistry,
    text: str,
    x: float,
    baseline: float,
    size: float,
    color=BLACK,
    align: str = "left",
    width: float = 0.0,
) -> None:
    """Draw one line of text; centre/right alignment is within [x, x + width]."""
    if not text:
        return
    canv.setFont(fonts.font_name, size)
    canv.setFillColor(color)
    if align == "center":
        canv.drawCentredString(x + width / 2, baseline, text)
    elif align == "right":
        canv.drawRightString(x + width, baseline, text)
    else:
        canv.drawString(x, baseline, text)
    canv.setFillColor(BLACK)


def _line_height(size: float) -> float:
    return size * LINE_SPACING


def decode_photo(photo: str) -> ImageReader:
    """
    Decode a base64 photo (plain or data URL) into a reportlab image.

    Raises:
        PhotoDecodeError: If the payload is not base64 or not a readable image
    """
    payload = DATA_URL_PATTERN.sub("", photo.strip())
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise PhotoDecodeError(f"Photo is not valid base64: {e}") from e

    try:
        image = ImageReader(BytesIO(raw))
        image.getSize()
    except Exception as e:
        raise PhotoDecodeError(f"Photo could not be decoded as an image: {e}") from e
    return image


# =============================================================================
# Base class
# =============================================================================


class SectionBlock(ABC):
    """
    A rectangular, full-width part of a document.

    Attributes:
        name: Section identifier used by the layout engine and in logs
        fonts: Font registry used for measuring and drawing
        width: Block width in points
    """

    name: str = ""

    def __init__(self, fonts: FontRegistry, width_mm: float):
        self.fonts = fonts
        self.width = width_mm * mm
        self._height: Optional[float] = None

    @property
    def height(self) -> float:
        """Block height in points, measured once."""
        if self._height is None:
            self._height = self.measure()
        return self._height

    @property
    def height_mm(self) -> float:
        return self.height / mm

    def box(self) -> SectionBox:
        return SectionBox(name=self.name, height_mm=self.height_mm)

    @abstractmethod
    def measure(self) -> float:
        """Compute the block height in points."""

    @abstractmethod
    def draw(self, canv: Canvas, x: float, top: float) -> None:
        """Draw the whole block with its top-left corner at (x, top)."""


# =============================================================================
# Shared blocks
# =============================================================================


class TitleBlock(SectionBlock):
    """Document title, centred, with the right-aligned "…現在" date stamp below."""

    name = "title"
    TITLE_SIZE = 24
    STAMP_SIZE = 10

    def __init__(self, fonts: FontRegistry, width_mm: float, title: str, stamp: str):
        super().__init__(fonts, width_mm)
        self.title = title
        self.stamp = stamp

    def measure(self) -> float:
        return self.TITLE_SIZE + 6 * mm + self.STAMP_SIZE + 4 * mm

    def draw(self, canv: Canvas, x: float, top: float) -> None:
        title_baseline = top - self.TITLE_SIZE
        _text(canv, self.fonts, self.title, x, title_baseline, self.TITLE_SIZE, align="center", width=self.width)
        stamp_baseline = title_baseline - 6 * mm - self.STAMP_SIZE
        _text(canv, self.fonts, self.stamp, x, stamp_baseline, self.STAMP_SIZE, align="right", width=self.width)


def as_of_stamp(today: date) -> str:
    """"令和6年4月1日 現在" for the generation date."""
    return f"{format_era_date(CalendarDate(today.year, today.month, today.day))}{labels.AS_OF_SUFFIX}"


def birth_date_line(profile: ApplicantProfile, today: date) -> str:
    """"平成7年4月2日生（満29歳）"."""
    birth = profile.birth_date
    age = calculate_age(birth, today)
    return f"{format_era_date(birth)}生（満{age}歳）"


class BasicInfoBlock(SectionBlock):
    """
    Personal details table.

    Résumé layout: name/furigana/birth date/gender rows with the photo cell to
    their right, followed by the address and contact rows, always printed.
    Career history layout: the four personal rows full width, then the
    address rows if any of prefecture/city/address is set and the contact
    row if a phone number or email is set.
    """

    name = "basic_info"
    LABEL_WIDTH = 24 * mm
    PHOTO_WIDTH = 32 * mm
    PHOTO_HEIGHT = 40 * mm
    ROW_HEIGHT = 10 * mm
    ADDRESS_HEIGHT = 15 * mm
    POSTAL_HEIGHT = 6 * mm
    LABEL_SIZE = 8
    VALUE_SIZE = 10
    NAME_SIZE = 14

    def __init__(
        self,
        fonts: FontRegistry,
        width_mm: float,
        profile: ApplicantProfile,
        today: date,
        photo: Optional[str] = None,
        with_photo: bool = True,
        contact_when_present: bool = False,
    ):
        super().__init__(fonts, width_mm)
        self.profile = profile
        self.today = today
        self.with_photo = with_photo
        self.photo = decode_photo(photo) if (photo and with_photo) else None

        if contact_when_present:
            self.show_address = any((profile.prefecture, profile.city, profile.address))
            self.show_contact = bool(profile.phone or profile.email)
        else:
            self.show_address = True
            self.show_contact = True

    def _personal_rows(self) -> List[Tuple[str, str, float, bool]]:
        """(label, value, value size, gray label) for the four personal rows."""
        profile = self.profile
        return [
            ("ふりがな", profile.furigana, self.VALUE_SIZE, True),
            ("氏名", profile.name, self.NAME_SIZE, True),
            ("生年月日", birth_date_line(profile, self.today), self.VALUE_SIZE, not self.with_photo),
            ("性別", profile.gender.label, self.VALUE_SIZE, not self.with_photo),
        ]

    def measure(self) -> float:
        height = 4 * self.ROW_HEIGHT
        if self.show_address:
            height += self.ADDRESS_HEIGHT
        if self.show_contact:
            height += self.ROW_HEIGHT
        return height

    def draw(self, canv: Canvas, x: float, top: float) -> None:
        _cell(canv, x, top, self.width, self.height, line_width=THICK_LINE)

        value_width = self.width - self.LABEL_WIDTH
        if self.with_photo:
            value_width -= self.PHOTO_WIDTH
            self._draw_photo(canv, x + self.LABEL_WIDTH + value_width, top)

        y = top
        for label, value, size, gray in self._personal_rows():
            self._draw_row(canv, x, y, label, value, size, gray, value_width)
            y -= self.ROW_HEIGHT

        if self.show_address:
            self._draw_address(canv, x, y)
            y -= self.ADDRESS_HEIGHT
        if self.show_contact:
            self._draw_contact(canv, x, y)

    def _draw_row(self, canv, x, top, label, value, size, gray, value_width) -> None:
        _cell(canv, x, top, self.LABEL_WIDTH, self.ROW_HEIGHT, fill=LABEL_FILL if gray else None)
        _text(canv, self.fonts, label, x + CELL_PADDING, _centered_baseline(top, self.ROW_HEIGHT, self.LABEL_SIZE), self.LABEL_SIZE)

        _cell(canv, x + self.LABEL_WIDTH, top, value_width, self.ROW_HEIGHT)
        size = self.fonts.fit_size(value, size, value_width - 2 * CELL_PADDING)
        _text(canv, self.fonts, value, x + self.LABEL_WIDTH + CELL_PADDING, _centered_baseline(top, self.ROW_HEIGHT, size), size)

    def _draw_photo(self, canv: Canvas, x: float, top: float) -> None:
        _cell(canv, x, top, self.PHOTO_WIDTH, self.PHOTO_HEIGHT)
        if self.photo is None:
            _text(
                canv,
                self.fonts,
                labels.PHOTO_PLACEHOLDER,
                x,
                _centered_baseline(top, self.PHOTO_HEIGHT, 8),
                8,
                color=PLACEHOLDER_GRAY,
                align="center",
                width=self.PHOTO_WIDTH,
            )
            return

        # Fit inside the cell keeping the aspect ratio, centred
        image_width, image_height = self.photo.getSize()
        scale = min(self.PHOTO_WIDTH / image_width, self.PHOTO_HEIGHT / image_height)
        draw_width = image_width * scale
        draw_height = image_height * scale
        canv.drawImage(
            self.photo,
            x + (self.PHOTO_WIDTH - draw_width) / 2,
            top - self.PHOTO_HEIGHT + (self.PHOTO_HEIGHT - draw_height) / 2,
            width=draw_width,
            height=draw_height,
            mask="auto",
        )

    def _draw_address(self, canv: Canvas, x: float, top: float) -> None:
        profile = self.profile
        value_x = x + self.LABEL_WIDTH
        value_width = self.width - self.LABEL_WIDTH

        _cell(canv, x, top, self.LABEL_WIDTH, self.ADDRESS_HEIGHT, fill=LABEL_FILL)
        _text(canv, self.fonts, "現住所", x + CELL_PADDING, _centered_baseline(top, self.ADDRESS_HEIGHT, self.LABEL_SIZE), self.LABEL_SIZE)

        _cell(canv, value_x, top, value_width, self.POSTAL_HEIGHT, fill=SUBHEADER_FILL)
        _text(
            canv,
            self.fonts,
            f"〒{profile.postal_code or ''}",
            value_x + CELL_PADDING,
            _centered_baseline(top, self.POSTAL_HEIGHT, self.LABEL_SIZE),
            self.LABEL_SIZE,
        )

        address_top = top - self.POSTAL_HEIGHT
        address_height = self.ADDRESS_HEIGHT - self.POSTAL_HEIGHT
        _cell(canv, value_x, address_top, value_width, address_height)
        address = profile.full_address
        size = self.fonts.fit_size(address, self.VALUE_SIZE, value_width - 2 * CELL_PADDING)
        _text(canv, self.fonts, address, value_x + CELL_PADDING, _centered_baseline(address_top, address_height, size), size)

    def _draw_contact(self, canv: Canvas, x: float, top: float) -> None:
        profile = self.profile
        half = (self.width - self.LABEL_WIDTH) / 2

        self._draw_row(canv, x, top, "電話番号", profile.phone or "", self.VALUE_SIZE, True, half)

        email_x = x + self.LABEL_WIDTH + half
        self._draw_row(canv, email_x, top, "メール", profile.email or "", 8, True, half - self.LABEL_WIDTH)


# =============================================================================
# Résumé blocks
# =============================================================================


class YearMonthTableBlock(SectionBlock):
    """
    年 | 月 | text table used for 学歴・職歴 and 資格・免許.

    Each RowSection with a heading gets a centred heading row. Row text wraps
    inside its column, so a long school or company name makes its row taller.
    An optional closing row ("以上") is right-aligned at the end.
    """

    YEAR_WIDTH = 20 * mm
    MONTH_WIDTH = 12 * mm
    MIN_ROW_HEIGHT = 9 * mm
    TEXT_SIZE = 10
    SUPPLEMENT_SIZE = 8

    def __init__(
        self,
        fonts: FontRegistry,
        width_mm: float,
        name: str,
        header_label: str,
        sections: Sequence[RowSection],
        closing_label: Optional[str] = None,
    ):
        super().__init__(fonts, width_mm)
        self.name = name
        self.header_label = header_label
        self.sections = list(sections)
        self.closing_label = closing_label
        self.text_width = self.width - self.YEAR_WIDTH - self.MONTH_WIDTH

    def _row_lines(self, row) -> Tuple[List[str], List[str]]:
        max_width = self.text_width - 2 * CELL_PADDING
        lines = self.fonts.wrap_text(row.label, self.TEXT_SIZE, max_width)
        supplement = []
        if row.supplemental_text:
            supplement = self.fonts.wrap_text(row.supplemental_text, self.SUPPLEMENT_SIZE, max_width)
        return lines, supplement

    def _row_height(self, row) -> float:
        lines, supplement = self._row_lines(row)
        content = len(lines) * _line_height(self.TEXT_SIZE) + len(supplement) * _line_height(self.SUPPLEMENT_SIZE)
        return max(self.MIN_ROW_HEIGHT, content + 2 * CELL_PADDING)

    def measure(self) -> float:
        height = self.MIN_ROW_HEIGHT  # column header
        for section in self.sections:
            if section.heading:
                height += self.MIN_ROW_HEIGHT
            height += sum(self._row_height(row) for row in section.rows)
        if self.closing_label:
            height += self.MIN_ROW_HEIGHT
        return height

    def draw(self, canv: Canvas, x: float, top: float) -> None:
        _cell(canv, x, top, self.width, self.height, line_width=THICK_LINE)

        y = top
        self._draw_columns(canv, x, y, self.MIN_ROW_HEIGHT, labels.YEAR_HEADER, labels.MONTH_HEADER, self.header_label, fill=LABEL_FILL)
        y -= self.MIN_ROW_HEIGHT

        for section in self.sections:
            if section.heading:
                _cell(canv, x, y, self.width, self.MIN_ROW_HEIGHT)
                _text(
                    canv,
                    self.fonts,
                    section.heading,
                    x,
                    _centered_baseline(y, self.MIN_ROW_HEIGHT, self.TEXT_SIZE),
                    self.TEXT_SIZE,
                    align="center",
                    width=self.width,
                )
                y -= self.MIN_ROW_HEIGHT

            for row in section.rows:
                height = self._row_height(row)
                self._draw_row(canv, x, y, height, row)
                y -= height

        if self.closing_label:
            _cell(canv, x, y, self.YEAR_WIDTH + self.MONTH_WIDTH, self.MIN_ROW_HEIGHT)
            _cell(canv, x + self.YEAR_WIDTH + self.MONTH_WIDTH, y, self.text_width, self.MIN_ROW_HEIGHT)
            _text(
                canv,
                self.fonts,
                self.closing_label,
                x,
                _centered_baseline(y, self.MIN_ROW_HEIGHT, self.TEXT_SIZE),
                self.TEXT_SIZE,
                align="right",
                width=self.width - CELL_PADDING,
            )

    def _draw_columns(self, canv, x, top, height, year, month, text, fill=None) -> None:
        """Header row: three cells with centred year/month and left-aligned text."""
        month_x = x + self.YEAR_WIDTH
        text_x = month_x + self.MONTH_WIDTH
        _cell(canv, x, top, self.YEAR_WIDTH, height, fill=fill)
        _cell(canv, month_x, top, self.MONTH_WIDTH, height, fill=fill)
        _cell(canv, text_x, top, self.text_width, height, fill=fill)

        baseline = _centered_baseline(top, height, self.TEXT_SIZE)
        _text(canv, self.fonts, year, x, baseline, self.TEXT_SIZE, align="center", width=self.YEAR_WIDTH)
        _text(canv, self.fonts, month, month_x, baseline, self.TEXT_SIZE, align="center", width=self.MONTH_WIDTH)
        _text(canv, self.fonts, text, text_x + CELL_PADDING, baseline, self.TEXT_SIZE)

    def _draw_row(self, canv: Canvas, x: float, top: float, height: float, row) -> None:
        month_x = x + self.YEAR_WIDTH
        text_x = month_x + self.MONTH_WIDTH
        _cell(canv, x, top, self.YEAR_WIDTH, height)
        _cell(canv, month_x, top, self.MONTH_WIDTH, height)
        _cell(canv, text_x, top, self.text_width, height)

        # Dates sit on the first text line
        first_baseline = _centered_baseline(top, self.MIN_ROW_HEIGHT, self.TEXT_SIZE)
        year_size = self.fonts.fit_size(row.year_label, self.TEXT_SIZE, self.YEAR_WIDTH - CELL_PADDING)
        _text(canv, self.fonts, row.year_label, x, first_baseline, year_size, align="center", width=self.YEAR_WIDTH)
        _text(canv, self.fonts, row.month_label, month_x, first_baseline, self.TEXT_SIZE, align="center", width=self.MONTH_WIDTH)

        lines, supplement = self._row_lines(row)
        baseline = first_baseline
        for line in lines:
            _text(canv, self.fonts, line, text_x + CELL_PADDING, baseline, self.TEXT_SIZE)
            baseline -= _line_height(self.TEXT_SIZE)
        for line in supplement:
            _text(canv, self.fonts, line, text_x + CELL_PADDING, baseline, self.SUPPLEMENT_SIZE, color=MUTED_GRAY)
            baseline -= _line_height(self.SUPPLEMENT_SIZE)


class LabeledTextBlock(SectionBlock):
    """Free-text box with a gray label cell on the left (志望動機, 自己PR, 本人希望欄)."""

    LABEL_WIDTH = 28 * mm
    MIN_HEIGHT = 30 * mm
    TEXT_SIZE = 10

    def __init__(self, fonts: FontRegistry, width_mm: float, name: str, label: str, text: str):
        super().__init__(fonts, width_mm)
        self.name = name
        self.label = label
        self.text = text
        self.content_width = self.width - self.LABEL_WIDTH

    @property
    def lines(self) -> List[str]:
        return self.fonts.wrap_text(self.text, self.TEXT_SIZE, self.content_width - 2 * CELL_PADDING)

    def measure(self) -> float:
        content = len(self.lines) * _line_height(self.TEXT_SIZE) + 2 * CELL_PADDING
        return max(self.MIN_HEIGHT, content)

    def draw(self, canv: Canvas, x: float, top: float) -> None:
        _cell(canv, x, top, self.width, self.height, line_width=THICK_LINE)
        _cell(canv, x, top, self.LABEL_WIDTH, self.height, fill=LABEL_FILL)
        _cell(canv, x + self.LABEL_WIDTH, top, self.content_width, self.height)

        baseline = top - CELL_PADDING - self.TEXT_SIZE
        _text(canv, self.fonts, self.label, x + CELL_PADDING, baseline, self.TEXT_SIZE)
        for line in self.lines:
            _text(canv, self.fonts, line, x + self.LABEL_WIDTH + CELL_PADDING, baseline, self.TEXT_SIZE)
            baseline -= _line_height(self.TEXT_SIZE)


# =============================================================================
# Career history blocks
# =============================================================================


class _HeadingBar:
    """Gray full-width heading bar used by the career history sections."""

    HEIGHT = 10 * mm
    SIZE = 12
    PADDING = 3 * mm

    @classmethod
    def draw(cls, canv: Canvas, fonts: FontRegistry, x: float, top: float, width: float, text: str) -> None:
        _cell(canv, x, top, width, cls.HEIGHT, fill=LABEL_FILL, line_width=THICK_LINE)
        _text(canv, fonts, text, x + cls.PADDING, _centered_baseline(top, cls.HEIGHT, cls.SIZE), cls.SIZE)


class HeadedTextBlock(SectionBlock):
    """Heading bar followed by a bordered text box (職務要約)."""

    MIN_CONTENT_HEIGHT = 30 * mm
    TEXT_SIZE = 10

    def __init__(self, fonts: FontRegistry, width_mm: float, name: str, heading: str, text: str):
        super().__init__(fonts, width_mm)
        self.name = name
        self.heading = heading
        self.text = text

    @property
    def lines(self) -> List[str]:
        return self.fonts.wrap_text(self.text, self.TEXT_SIZE, self.width - 2 * _HeadingBar.PADDING)

    @property
    def content_height(self) -> float:
        content = len(self.lines) * _line_height(self.TEXT_SIZE) + 2 * _HeadingBar.PADDING
        return max(self.MIN_CONTENT_HEIGHT, content)

    def measure(self) -> float:
        return _HeadingBar.HEIGHT + self.content_height

    def draw(self, canv: Canvas, x: float, top: float) -> None:
        _HeadingBar.draw(canv, self.fonts, x, top, self.width, self.heading)
        content_top = top - _HeadingBar.HEIGHT
        _cell(canv, x, content_top, self.width, self.content_height, line_width=THICK_LINE)

        baseline = content_top - _HeadingBar.PADDING - self.TEXT_SIZE
        for line in self.lines:
            _text(canv, self.fonts, line, x + _HeadingBar.PADDING, baseline, self.TEXT_SIZE)
            baseline -= _line_height(self.TEXT_SIZE)


class CareerEntryBlock(SectionBlock):
    """
    One employer on the career history document.

    The first entry also carries the 職務経歴 heading bar, so the heading is
    never left alone at the bottom of a page.
    """

    COMPANY_SIZE = 11
    DETAIL_SIZE = 9
    SUBHEADING_SIZE = 8
    PADDING = 3 * mm

    def __init__(self, fonts: FontRegistry, width_mm: float, name: str, block: CareerBlock, heading: Optional[str] = None):
        super().__init__(fonts, width_mm)
        self.name = name
        self.block = block
        self.heading = heading
        self.text_width = self.width - 3 * self.PADDING

    def _lines(self) -> List[Tuple[str, float, object, float]]:
        """(text, size, color, indent) for every line of the entry, top to bottom."""
        block = self.block
        lines = [
            (block.company_name, self.COMPANY_SIZE, BLACK, 0.0),
            (block.period_line, self.DETAIL_SIZE, MUTED_GRAY, 0.0),
        ]
        if block.affiliation:
            lines.append((block.affiliation, self.DETAIL_SIZE, BLACK, 0.0))
        for subheading, text in block.subsections:
            lines.append((subheading, self.SUBHEADING_SIZE, HEADING_GRAY, 0.0))
            for line in self.fonts.wrap_text(text, self.DETAIL_SIZE, self.text_width):
                lines.append((line, self.DETAIL_SIZE, BLACK, self.PADDING))
        return lines

    @property
    def heading_height(self) -> float:
        return _HeadingBar.HEIGHT if self.heading else 0.0

    @property
    def entry_height(self) -> float:
        content = sum(_line_height(size) for _, size, _, _ in self._lines())
        return content + 2 * self.PADDING

    def measure(self) -> float:
        return self.heading_height + self.entry_height

    def draw(self, canv: Canvas, x: float, top: float) -> None:
        if self.heading:
            _HeadingBar.draw(canv, self.fonts, x, top, self.width, self.heading)
        entry_top = top - self.heading_height
        _cell(canv, x, entry_top, self.width, self.entry_height)

        y = entry_top - self.PADDING
        for text, size, color, indent in self._lines():
            line_height = _line_height(size)
            _text(canv, self.fonts, text, x + self.PADDING + indent, y - size, size, color=color)
            y -= line_height


class SkillsTableBlock(SectionBlock):
    """保有スキル: heading bar, then カテゴリ | スキル名 | 経験 rows."""

    name = "skills"
    ROW_HEIGHT = 9 * mm
    CATEGORY_WIDTH = 32 * mm
    EXPERIENCE_WIDTH = 32 * mm
    HEADER_SIZE = 8
    CELL_SIZE = 9

    def __init__(self, fonts: FontRegistry, width_mm: float, skills: Sequence[SkillEntry]):
        super().__init__(fonts, width_mm)
        self.skills = list(skills)
        self.skill_width = self.width - self.CATEGORY_WIDTH - self.EXPERIENCE_WIDTH

    def measure(self) -> float:
        return _HeadingBar.HEIGHT + self.ROW_HEIGHT * (len(self.skills) + 1)

    def draw(self, canv: Canvas, x: float, top: float) -> None:
        _HeadingBar.draw(canv, self.fonts, x, top, self.width, labels.SKILLS_HEADING)
        y = top - _HeadingBar.HEIGHT
        self._draw_row(canv, x, y, ("カテゴリ", "スキル名", "経験"), self.HEADER_SIZE, SUBHEADER_FILL)
        y -= self.ROW_HEIGHT
        for skill in self.skills:
            cells = (skill.category or "-", skill.skill_name, skill.experience or "-")
            self._draw_row(canv, x, y, cells, self.CELL_SIZE)
            y -= self.ROW_HEIGHT

    def _draw_row(self, canv: Canvas, x: float, top: float, cells: Tuple[str, str, str], size: float, fill=None) -> None:
        widths = (self.CATEGORY_WIDTH, self.skill_width, self.EXPERIENCE_WIDTH)
        cell_x = x
        for text, width in zip(cells, widths):
            _cell(canv, cell_x, top, width, self.ROW_HEIGHT, fill=fill)
            fitted = self.fonts.fit_size(text, size, width - 2 * CELL_PADDING)
            _text(canv, self.fonts, text, cell_x + CELL_PADDING, _centered_baseline(top, self.ROW_HEIGHT, fitted), fitted)
            cell_x += width
