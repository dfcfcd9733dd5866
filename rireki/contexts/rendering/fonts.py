"""
Japanese font registry.

Registers the document font with reportlab once and reuses it for every
measurement and draw call of the session. The registry is passed explicitly
into the emitter; callers that generate many documents share one instance.

Font selection:
- RIREKI_FONT_PATH (or the font_path argument): a TrueType/OpenType file.
  For .ttc collections the first face is used.
- Otherwise the built-in Adobe-Japan1 CID font HeiseiKakuGo-W5, which needs
  no font file.
"""

import os
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.pdfbase.ttfonts import TTFont

from rireki.contexts.rendering.exceptions import FontLoadError

load_dotenv()
FONT_PATH = os.getenv("RIREKI_FONT_PATH") or None

DEFAULT_CID_FONT = "HeiseiKakuGo-W5"
TTF_FONT_NAME = "RirekiJP"
MIN_FIT_SIZE = 6.0


class FontRegistry:
    """
    Load-once holder for the document font.

    Args:
        font_path: TrueType/OpenType file; defaults to RIREKI_FONT_PATH, then
                   the built-in CID font

    Example:
        >>> fonts = FontRegistry()
        >>> fonts.load()
        'HeiseiKakuGo-W5'
        >>> fonts.wrap_text("志望動機の本文", 10, 40)
        ['志望動機', 'の本文']
    """

    def __init__(self, font_path: Optional[Union[str, Path]] = None):
        if font_path is None and FONT_PATH:
            font_path = FONT_PATH
        self.font_path = Path(font_path) if font_path else None
        self._font_name: Optional[str] = None

    @property
    def is_loaded(self) -> bool:
        return self._font_name is not None

    @property
    def font_name(self) -> str:
        return self.load()

    def load(self) -> str:
        """
        Register the font with reportlab if not done yet.

        Returns:
            The reportlab font name to use with setFont/stringWidth

        Raises:
            FontLoadError: If the font file is missing or unreadable
        """
        if self._font_name is not None:
            return self._font_name

        if self.font_path is None:
            try:
                pdfmetrics.registerFont(UnicodeCIDFont(DEFAULT_CID_FONT))
            except Exception as e:
                raise FontLoadError("Could not register built-in CID font", original_error=e) from e
            self._font_name = DEFAULT_CID_FONT
            return self._font_name

        if not self.font_path.exists():
            raise FontLoadError("Font file not found", font_path=self.font_path)

        try:
            if self.font_path.suffix.lower() == ".ttc":
                font = TTFont(TTF_FONT_NAME, str(self.font_path), subfontIndex=0)
            else:
                font = TTFont(TTF_FONT_NAME, str(self.font_path))
            pdfmetrics.registerFont(font)
        except Exception as e:
            raise FontLoadError("Could not register font", font_path=self.font_path, original_error=e) from e

        self._font_name = TTF_FONT_NAME
        return self._font_name

    def string_width(self, text: str, size: float) -> float:
        """Width of text in points."""
        return pdfmetrics.stringWidth(text, self.font_name, size)

    def fit_size(self, text: str, size: float, max_width: float) -> float:
        """
        Largest font size, stepping down by 0.5pt from size, at which text fits.

        Never goes below MIN_FIT_SIZE.
        """
        while size > MIN_FIT_SIZE:
            if self.string_width(text, size) <= max_width:
                return size
            size -= 0.5
        return MIN_FIT_SIZE

    def wrap_text(self, text: str, size: float, max_width: float) -> List[str]:
        """
        Break text into lines no wider than max_width points.

        Japanese text has no spaces to break on, so lines break between any two
        characters. Newlines in the input are kept as line breaks and blank
        lines are preserved.

        Args:
            text: Text to wrap
            size: Font size in points
            max_width: Maximum line width in points

        Returns:
            List of lines (at least one, possibly empty)
        """
        lines: List[str] = []
        for paragraph in (text or "").split("\n"):
            if not paragraph:
                lines.append("")
                continue

            current = ""
            for char in paragraph:
                candidate = current + char
                if current and self.string_width(candidate, size) > max_width:
                    lines.append(current)
                    current = char
                else:
                    current = candidate
            if current:
                lines.append(current)

        return lines or [""]
