"""Domain models for lecture-download.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access and a few derived properties.  They carry
no I/O and no dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Video metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VideoMetadata:
    """Top-level metadata for a single YouTube video."""

    id: str
    """YouTube video ID (e.g. ``dQw4w9WgXcQ``)."""

    title: str
    """Human-readable video title."""

    duration: int | None
    """Duration in seconds, or ``None`` if unavailable."""

    webpage_url: str
    """Canonical URL of the video page."""


# ---------------------------------------------------------------------------
# Individual format descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VideoFormat:
    """A single stream format reported by the extraction backend.

    Only formats for which :attr:`has_audio` holds are eligible for
    download, since the rest of the pipeline boosts and normalizes audio.
    """

    format_id: str
    """Backend-specific identifier for this format."""

    ext: str
    """Container extension (e.g. ``mp4``, ``webm``)."""

    height: int | None
    """Vertical resolution in pixels, or ``None`` if unknown."""

    fps: int | None
    """Frames per second, or ``None`` if unknown."""

    tbr: float | None
    """Total average bitrate in kbit/s, or ``None`` if unknown."""

    vcodec: str
    """Video codec name.  ``"none"`` when the stream has no video."""

    acodec: str
    """Audio codec name.  ``"none"`` when the stream has no audio."""

    audio_channels: int | None = None
    """Number of audio channels, or ``None`` if unreported."""

    @property
    def has_audio(self) -> bool:
        """Whether this format declares at least one audio channel."""
        if self.audio_channels is not None and self.audio_channels > 0:
            return True
        return self.acodec != "none"

    @property
    def has_video(self) -> bool:
        return self.vcodec != "none"


# ---------------------------------------------------------------------------
# Typed collection wrapper
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FormatCollection:
    """Immutable, ordered collection of :class:`VideoFormat` entries."""

    formats: tuple[VideoFormat, ...]

    def __len__(self) -> int:
        return len(self.formats)

    def __bool__(self) -> bool:
        return len(self.formats) > 0


@dataclass(frozen=True, slots=True)
class ResolvedVideo:
    """Metadata and the chosen stream, parsed from a single lookup."""

    metadata: VideoMetadata
    video_format: VideoFormat


# ---------------------------------------------------------------------------
# Encoding settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EncodingSettings:
    """Fixed ffmpeg parameters shared by the boost, concat and normalize passes."""

    video_codec: str = "libx264"
    fps: int = 30
    volume_scale: int = 5
    """Linear amplitude factor for the ``volume`` filter (5 means 5x, not dB)."""
    audio_codec: str = "aac"
    audio_bitrate: str = "192k"


# ---------------------------------------------------------------------------
# Pipeline artefacts
# ---------------------------------------------------------------------------

class PipelineStage(str, enum.Enum):
    """States of the linear download-and-merge pipeline."""

    START = "start"
    LINKS_EXTRACTED = "links_extracted"
    FOLDER_READY = "folder_ready"
    DOWNLOADED = "downloaded"
    BOOSTED = "boosted"
    CONCATENATED = "concatenated"
    NORMALIZED = "normalized"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class DownloadedVideo:
    """One video fetched to disk, identified by its ordinal."""

    ordinal: int
    link: str
    video_id: str
    format_id: str
    path: Path
    title: str = "Unknown"


@dataclass(frozen=True, slots=True)
class PipelineResult:
    """Everything a successful run produced, in pipeline order."""

    links: tuple[str, ...]
    folder: Path
    downloads: tuple[DownloadedVideo, ...]
    boosted: tuple[Path, ...]
    manifest: Path
    combined: Path
    output: Path
    stages: tuple[PipelineStage, ...] = ()
