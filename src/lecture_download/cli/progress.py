"""Rich progress display driven by yt-dlp progress hooks.

One :class:`RichProgressHook` covers one download.  The pipeline asks
for a hook per video through :func:`progress_for`, labels it with the
ordinal and video id, and passes it to the download provider, which
forwards it verbatim to yt-dlp's ``progress_hooks``.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)

from lecture_download.cli.console import get_rich_console


class RichProgressHook:
    """Callable progress-hook adapter for Rich.

    Usage::

        with RichProgressHook("[0] abc123") as hook:
            download_service.download(video_id, fmt, path, progress_callback=hook)
    """

    def __init__(self, label: str) -> None:
        self._label: str = label
        self._progress: Progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            TimeRemainingColumn(),
            console=get_rich_console(),
            transient=False,
        )
        self._task_id: TaskID | None = None
        self._started: bool = False

    def __enter__(self) -> RichProgressHook:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    def start(self) -> None:
        """Start the Rich progress display."""
        if not self._started:
            self._progress.start()
            self._started = True

    def stop(self) -> None:
        """Stop the Rich progress display (idempotent)."""
        if self._started:
            self._progress.stop()
            self._started = False

    def __call__(self, d: dict[str, Any]) -> None:
        """yt-dlp progress-hook callback.

        *d* carries at least a ``"status"`` key: ``"downloading"``,
        ``"finished"`` or ``"error"``.  Calls made while stopped are
        ignored.
        """
        if not self._started:
            return

        status: str = d.get("status", "")
        if status == "downloading":
            self._handle_downloading(d)
        elif status == "finished":
            self._handle_finished()

    def _handle_downloading(self, d: dict[str, Any]) -> None:
        total = _safe_int(d.get("total_bytes") or d.get("total_bytes_estimate"))
        downloaded = _safe_int(d.get("downloaded_bytes")) or 0

        if self._task_id is None:
            self._task_id = self._progress.add_task(self._label, total=total)

        if total is not None:
            self._progress.update(self._task_id, total=total, completed=downloaded)
        else:
            self._progress.update(self._task_id, completed=downloaded)

    def _handle_finished(self) -> None:
        if self._task_id is None:
            return
        task = self._progress.tasks[self._task_id]
        if task.total is not None:
            self._progress.update(self._task_id, completed=task.total)


@contextmanager
def progress_for(label: str) -> Iterator[RichProgressHook]:
    """Pipeline ``progress_factory``: one started hook per download."""
    with RichProgressHook(label) as hook:
        yield hook


def _safe_int(value: object) -> int | None:
    """Convert *value* to ``int`` or return ``None``."""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float, str)):
            return int(value)
        return None
    except (TypeError, ValueError):
        return None
