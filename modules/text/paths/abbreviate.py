"""Left-truncate a path to a display budget."""

__all__ = ["abbreviate"]


def abbreviate(path: str, max_len: int) -> str:
    """Return path, or '…' plus its last max_len characters if longer."""
    max_len = max(max_len, 0)
    if len(path) <= max_len:
        return path
    return "…" + path[len(path) - max_len :]
