"""Custom exceptions for the calendar context."""

from typing import Any, Optional


class MalformedDateError(ValueError):
    """
    Exception raised when a date string or triple is not a real calendar date.

    Attributes:
        message: Error description
        raw_value: The rejected input (string, tuple, or field value)
    """

    def __init__(self, message: str, raw_value: Optional[Any] = None):
        self.message = message
        self.raw_value = raw_value

        parts = [message]
        if raw_value is not None:
            parts.append(f"Got: {raw_value!r}")

        super().__init__("\n".join(parts))
