"""Infrastructure layer — external system integration.

This layer wraps all interaction with yt-dlp, ffmpeg and the filesystem
layout.  Every raw third-party exception must be caught here and
re-raised as a :class:`~lecture_download.exceptions.LectureDownloadError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from lecture_download.infra.ffmpeg_detector import FfmpegStatus, detect_ffmpeg, require_ffmpeg
from lecture_download.infra.ffmpeg_runner import FfmpegRunner
from lecture_download.infra.workspace import OutputWorkspace, folder_name
from lecture_download.infra.ytdlp_download_provider import YtDlpDownloadProvider
from lecture_download.infra.ytdlp_provider import YtDlpMetadataProvider

__all__: list[str] = [
    "FfmpegRunner",
    "FfmpegStatus",
    "OutputWorkspace",
    "YtDlpDownloadProvider",
    "YtDlpMetadataProvider",
    "detect_ffmpeg",
    "folder_name",
    "require_ffmpeg",
]
