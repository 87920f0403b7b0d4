"""
Path display utilities - no external dependencies.

Functions for shortening path strings to fit a display budget.
Paths are treated as opaque strings: nothing here splits them into
segments, normalizes separators, or touches the filesystem.
"""

__all__ = [
    "ELLIPSIS",
    "abbreviate_path",
]

# Single code point (U+2026), not three periods
ELLIPSIS = "…"


def abbreviate_path(path: str, max_len: int) -> str:
    """
    Shorten a path from the left to fit max_len characters.

    Characters are Python string characters (code points) for both the
    length check and the slice. A negative max_len is treated as zero.

    Args:
        path: Path string to shorten
        max_len: Number of trailing characters to keep when truncating
            (the ellipsis is not counted)

    Returns:
        path unchanged if it fits, else the ellipsis followed by the
        last max_len characters of path

    Example:
        >>> abbreviate_path("short.txt", 20)
        'short.txt'
        >>> abbreviate_path("/very/long/path/to/some/deep/file.txt", 10)
        '…p/file.txt'
        >>> abbreviate_path("ab", 0)
        '…'
    """
    max_len = max(max_len, 0)
    if len(path) <= max_len:
        return path
    return ELLIPSIS + path[len(path) - max_len :]
