"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Optional

USER_FACING_MESSAGE = "PDF生成に失敗しました。もう一度お試しください。"


class FontLoadError(RuntimeError):
    """
    Exception raised when the Japanese font cannot be registered.

    Attributes:
        message: Error description
        font_path: Font file that failed to load (None for the built-in CID font)
        original_error: The underlying reportlab/OS error
    """

    def __init__(
        self,
        message: str,
        font_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.font_path = font_path
        self.original_error = original_error

        parts = [message]
        if font_path:
            parts.append(f"Font: {font_path}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class PhotoDecodeError(ValueError):
    """Exception raised when the résumé photo is not a decodable base64 image."""

    pass


class DocumentGenerationError(Exception):
    """
    The single error surfaced to callers when a document cannot be produced.

    Any failure in font loading, image decoding, measurement, layout, or PDF
    assembly is wrapped in this error. No partial artifact is returned.

    Attributes:
        message: Error description
        document_type: "resume" or "career"
        original_error: The wrapped exception
        user_message: Message suitable for showing to the person filling the form
    """

    def __init__(
        self,
        message: str,
        document_type: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.document_type = document_type
        self.original_error = original_error
        self.user_message = USER_FACING_MESSAGE

        parts = [message]
        if document_type:
            parts.append(f"Document: {document_type}")
        if original_error:
            parts.append(f"\nOriginal error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))
