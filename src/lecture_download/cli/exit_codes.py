"""Exit-code constants used by the CLI layer.

Every exit path uses one of these well-known values rather than magic
integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: the run completed, or only usage/help was printed."""

GENERAL_ERROR: int = 1
"""A known LectureDownloadError was caught and reported."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
