"""Text helpers shared by the logging and rendering code."""


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for single-line display, collapsing newlines.

    Args:
        text: Text to truncate
        max_len: Maximum length of the returned string (including "...")

    Returns:
        Text on one line, cut to max_len characters with "..." if truncated

    Examples:
        truncate_display("短い文", 10)
        # "短い文"

        truncate_display("一行目\n二行目です", 8)
        # "一行目 二..."
    """
    flat = " ".join(text.split())
    if len(flat) <= max_len:
        return flat
    return flat[: max(max_len - 3, 0)] + "..."


def is_blank(text) -> bool:
    """True for None or whitespace-only strings."""
    return text is None or not str(text).strip()
