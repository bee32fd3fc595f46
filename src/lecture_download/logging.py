"""Centralized logging configuration.

All modules log through children of the ``lecture_download`` logger.
Records are rendered by Rich on stderr so they interleave cleanly with
ffmpeg's own stderr output and the progress bars.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("lecture_download")


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the lecture_download package.

    Args:
        verbose: If True, enable DEBUG level logging; otherwise WARNING level
    """
    from rich.logging import RichHandler

    from lecture_download.cli.console import get_rich_console

    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=get_rich_console(),
        show_path=False,
        show_time=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
