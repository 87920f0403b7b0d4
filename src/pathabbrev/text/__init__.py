"""
Text utilities subpackage - no external dependencies.

Pure functions for formatting path strings for display.
"""

from pathabbrev.text.paths import (
    ELLIPSIS,
    abbreviate_path,
)

__all__ = [
    # paths
    "ELLIPSIS",
    "abbreviate_path",
]
