"""Shared pytest fixtures for the lecture-download test suite.

Guidelines
----------
* No internet access in any test.
* yt-dlp is mocked at the infra boundary; ffmpeg is never executed.
* Anything touching disk works under ``tmp_path``.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest


class RecordingRunner:
    """A :class:`CommandRunner` that records argv lists and fakes outputs.

    ``fail_on`` maps a call index (0-based) to the exit status returned
    for that call; every other call succeeds and touches its output file,
    which is always the last argument.
    """

    def __init__(self, fail_on: dict[int, int] | None = None) -> None:
        self.calls: list[list[str]] = []
        self._fail_on = fail_on or {}

    def run(self, args: Sequence[str]) -> int:
        index = len(self.calls)
        self.calls.append(list(args))
        status = self._fail_on.get(index, 0)
        if status == 0:
            Path(args[-1]).write_bytes(b"media")
        return status


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def link_file(tmp_path: Path) -> Path:
    """An HTML-ish export with three copies of one link and one other link."""
    path = tmp_path / "links.html"
    path.write_text(
        '<a href="https://www.youtube.com/watch?v=AAA111">Lecture 1</a>\n'
        '<p>notes</p><a href="https://www.youtube.com/watch?v=AAA111">again</a>\n'
        '<a href="https://www.youtube.com/watch?v=BBB222">Lecture 2</a>\n'
        '<a href="https://www.youtube.com/watch?v=AAA111">and again</a>\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def runner_factory() -> type[RecordingRunner]:
    """Build runners with scripted failures: ``runner_factory(fail_on={1: 1})``."""
    return RecordingRunner
