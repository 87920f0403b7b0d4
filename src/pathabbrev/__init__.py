"""
pathabbrev - Shorten file-system paths for display.

This package is organized into focused subpackages:

- text/     Pure text utilities (no dependencies)
            - paths: abbreviate_path, ELLIPSIS

Usage:
    from pathabbrev import abbreviate_path

    label = abbreviate_path("/very/long/path/to/some/deep/file.txt", 10)
    # '…p/file.txt'
"""

__version__ = "0.1.0"

# Convenience imports from text (no dependencies)
from pathabbrev.text import (
    ELLIPSIS,
    abbreviate_path,
)

__all__ = [
    "__version__",
    # text.paths
    "ELLIPSIS",
    "abbreviate_path",
]
