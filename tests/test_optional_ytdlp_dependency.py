"""Regression tests for running without yt-dlp installed.

Help, version and doctor must keep working; the provider entry points
fail with a typed error instead of an ImportError traceback.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from lecture_download.cli import exit_codes
from lecture_download.cli.app import main
from lecture_download.exceptions import LectureDownloadError, MissingDependencyError
from lecture_download.infra.ffmpeg_detector import FfmpegStatus
from lecture_download.infra.ytdlp_download_provider import YtDlpDownloadProvider
from lecture_download.infra.ytdlp_provider import YtDlpMetadataProvider


def _remove_ytdlp(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "yt_dlp", None)
    monkeypatch.setitem(sys.modules, "yt_dlp.utils", None)
    monkeypatch.setitem(sys.modules, "yt_dlp.version", None)


def test_help_works_without_ytdlp(monkeypatch: pytest.MonkeyPatch) -> None:
    _remove_ytdlp(monkeypatch)
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_ytdlp(monkeypatch: pytest.MonkeyPatch) -> None:
    _remove_ytdlp(monkeypatch)
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_doctor_reports_missing_ytdlp(monkeypatch: pytest.MonkeyPatch) -> None:
    _remove_ytdlp(monkeypatch)
    found = FfmpegStatus(found=True, path=Path("/usr/bin/ffmpeg"), install_commands=())
    with patch("lecture_download.cli.doctor.detect_ffmpeg", return_value=found):
        assert main(["--doctor"]) == exit_codes.GENERAL_ERROR


def test_metadata_provider_raises_typed_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _remove_ytdlp(monkeypatch)
    with pytest.raises(MissingDependencyError, match="yt-dlp is not installed"):
        YtDlpMetadataProvider().fetch_info("https://www.youtube.com/watch?v=dQw4w9WgXcQ")


def test_download_provider_raises_typed_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
) -> None:
    _remove_ytdlp(monkeypatch)
    with pytest.raises(MissingDependencyError) as exc_info:
        YtDlpDownloadProvider().download(
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ", "18", tmp_path / "0.mp4",
        )
    assert isinstance(exc_info.value, LectureDownloadError)
