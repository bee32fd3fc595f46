"""Shared Rich console for the CLI layer.

Everything user-facing, including log records, goes to stderr so
stdout stays free for piping.
"""

from __future__ import annotations

from rich.console import Console

console = Console(stderr=True, highlight=False)


def get_rich_console() -> Console:
    """Return the process-wide stderr console."""
    return console
