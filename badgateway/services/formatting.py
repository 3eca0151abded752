"""
Display formatting for responses and history entries.
"""


HISTORY_LABEL_LENGTH = 18
ERROR_SUMMARY_LENGTH = 40


def format_size(size: int) -> str:
    """
    Format a byte count for display.

    Example:
        >>> format_size(512)
        '512 B'
        >>> format_size(2048)
        '2.0 KB'
    """
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def truncate(text: str, max_len: int) -> str:
    """Shorten text to max_len characters, ending in "..." when cut."""
    if len(text) > max_len:
        return text[:max(max_len - 3, 0)] + "..."
    return text


def format_headers(headers: list[tuple[str, str]]) -> str:
    """Render header pairs as "name: value" lines."""
    return "\n".join(f"{name}: {value}" for name, value in headers)
