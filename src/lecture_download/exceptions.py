"""Custom exception hierarchy for lecture-download.

Every failure that can abort a run is a subclass of
:class:`LectureDownloadError`.  Raw third-party exceptions (yt-dlp,
``subprocess``, ``OSError``) must be caught at the infrastructure boundary
and re-raised as one of the typed subclasses below, so the CLI error
boundary has a single type to render.

Hierarchy
---------
LectureDownloadError
├── InputFileError
│   └── InputFileNotFoundError
├── NoLinksFoundError
├── LinkExtractionError
├── MetadataExtractionError
├── VideoUnavailableError
├── FormatSelectionError
├── DownloadFailedError
├── WorkspaceError
├── FfmpegNotFoundError
├── MediaProcessingError
│   ├── AudioBoostError
│   ├── ConcatenationError
│   └── NormalizationError
└── MissingDependencyError
"""

from __future__ import annotations


class LectureDownloadError(Exception):
    """Base exception for all lecture-download errors.

    The CLI renders ``str(exc)`` on one line and, when present, the
    :attr:`hint` on the next.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InputFileError(LectureDownloadError):
    """Raised when the link source file cannot be read."""


class InputFileNotFoundError(InputFileError):
    """Raised when the link source file does not exist."""


class NoLinksFoundError(LectureDownloadError):
    """Raised when the input file contains no watch links."""


class LinkExtractionError(LectureDownloadError):
    """Raised when a video identifier cannot be extracted from a link."""


# --- Metadata / extraction -------------------------------------------------

class MetadataExtractionError(LectureDownloadError):
    """Raised when yt-dlp fails to extract video metadata."""


class VideoUnavailableError(LectureDownloadError):
    """Raised when the target video is unavailable (private, removed, etc.)."""


# --- Format handling -------------------------------------------------------

class FormatSelectionError(LectureDownloadError):
    """Raised when no audio-capable format can be selected."""


# --- Download --------------------------------------------------------------

class DownloadFailedError(LectureDownloadError):
    """Raised when the download process terminates with an error."""


# --- Workspace -------------------------------------------------------------

class WorkspaceError(LectureDownloadError):
    """Raised when the dated output folder or scratch files cannot be created."""


# --- Media processing ------------------------------------------------------

class FfmpegNotFoundError(LectureDownloadError):
    """Raised when ffmpeg cannot be located on the system PATH."""


class MediaProcessingError(LectureDownloadError):
    """Raised when an ffmpeg invocation exits with a non-zero status.

    Attributes
    ----------
    stage:
        Pipeline stage that ran the tool (``"boost"``, ``"concat"``,
        ``"normalize"``).
    subject:
        The file the stage was working on.
    returncode:
        The tool's exit status, or ``None`` if it never started.
    """

    def __init__(
        self,
        message: str,
        *,
        stage: str,
        subject: str,
        returncode: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.stage: str = stage
        self.subject: str = subject
        self.returncode: int | None = returncode


class AudioBoostError(MediaProcessingError):
    """Raised when boosting the audio of one downloaded video fails."""


class ConcatenationError(MediaProcessingError):
    """Raised when the concat-demuxer merge fails."""


class NormalizationError(MediaProcessingError):
    """Raised when the final dynamic loudness normalization fails."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(LectureDownloadError):
    """Raised when a required Python package is not installed."""


def append_ytdlp_upgrade_suggestion(hint: str) -> str:
    """Append yt-dlp upgrade guidance to an existing hint text.

    YouTube changes break extraction regularly, so most fetch failures
    are worth pairing with this advice.  The suggestion is appended only
    once.
    """
    marker = "Also try updating yt-dlp:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    pip install --upgrade yt-dlp",
        )
    )
