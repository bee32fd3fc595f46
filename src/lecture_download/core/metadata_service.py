"""Core metadata service — video lookup and stream selection.

Depends on a :class:`~lecture_download.core.protocols.MetadataProvider`
injected at construction time, keeping the core free of any yt-dlp
import.

Guarantees
----------
* Only :class:`~lecture_download.exceptions.LectureDownloadError`
  subclasses escape.
* All parsing logic is deterministic and stateless.
"""

from __future__ import annotations

import logging
from typing import Any

from lecture_download.core.format_filter import select_audio_formats
from lecture_download.core.links import watch_url
from lecture_download.core.models import (
    FormatCollection,
    ResolvedVideo,
    VideoFormat,
    VideoMetadata,
)
from lecture_download.core.protocols import MetadataProvider
from lecture_download.exceptions import (
    FormatSelectionError,
    LinkExtractionError,
    LectureDownloadError,
    MetadataExtractionError,
    append_ytdlp_upgrade_suggestion,
)

logger = logging.getLogger(__name__)


class MetadataService:
    """Stateless service that looks up videos and picks a stream format.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`MetadataProvider` protocol.
    """

    def __init__(self, provider: MetadataProvider) -> None:
        self._provider: MetadataProvider = provider

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def fetch_metadata(self, video_id: str) -> VideoMetadata:
        """Return top-level metadata for *video_id*.

        Raises
        ------
        LinkExtractionError
            If *video_id* is empty.
        MetadataExtractionError
            If the backend fails to return metadata.
        VideoUnavailableError
            If the video is confirmed unavailable.
        """
        info = self._fetch(video_id)
        return self._parse_metadata(info)

    def get_audio_formats(self, video_id: str) -> FormatCollection:
        """Return every audio-carrying format of *video_id*, best first.

        The collection may be empty; :meth:`select_stream` turns that into
        an error.
        """
        return self._audio_formats(self._fetch(video_id))

    def select_stream(self, video_id: str) -> VideoFormat:
        """Pick the format to download for *video_id*.

        Raises
        ------
        FormatSelectionError
            If the video offers no format with an audio channel.
        """
        return self.resolve(video_id).video_format

    def resolve(self, video_id: str) -> ResolvedVideo:
        """Look up *video_id* once and return its metadata and chosen stream.

        Raises
        ------
        FormatSelectionError
            If the video offers no format with an audio channel.
        """
        info = self._fetch(video_id)
        collection = self._audio_formats(info)
        if not collection:
            raise FormatSelectionError(
                f"No format with an audio channel found for video {video_id}.",
                hint=append_ytdlp_upgrade_suggestion(
                    "The video may be a live stream or audio may be unavailable.",
                ),
            )
        chosen = collection.formats[0]
        logger.debug(
            "Selected format %s (%s, %sp) for %s out of %d audio formats",
            chosen.format_id,
            chosen.ext,
            chosen.height,
            video_id,
            len(collection),
        )
        return ResolvedVideo(metadata=self._parse_metadata(info), video_format=chosen)

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self, video_id: str) -> dict[str, Any]:
        """Call the provider and ensure only our exceptions escape."""
        if not video_id.strip():
            raise LinkExtractionError("Video id must not be empty.")
        url = watch_url(video_id)
        try:
            return self._provider.fetch_info(url)
        except LectureDownloadError:
            raise
        except Exception as exc:
            raise MetadataExtractionError(
                f"Unexpected provider error for {url}: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Raw-dict → domain-model parsers (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_metadata(info: dict[str, Any]) -> VideoMetadata:
        """Convert a raw info dict into a :class:`VideoMetadata`."""
        raw_duration = info.get("duration")
        duration: int | None = (
            int(raw_duration) if raw_duration is not None else None
        )
        return VideoMetadata(
            id=str(info.get("id", "")),
            title=str(info.get("title", "Unknown")),
            duration=duration,
            webpage_url=str(info.get("webpage_url", "")),
        )

    @classmethod
    def _audio_formats(cls, info: dict[str, Any]) -> FormatCollection:
        parsed = cls._parse_formats(cls._extract_raw_formats(info))
        return FormatCollection(formats=tuple(select_audio_formats(parsed)))

    @staticmethod
    def _extract_raw_formats(info: dict[str, Any]) -> list[dict[str, Any]]:
        """Safely pull the ``formats`` list from a raw info dict."""
        raw: object = info.get("formats")
        if not isinstance(raw, list):
            return []
        return [entry for entry in raw if isinstance(entry, dict)]

    @staticmethod
    def _parse_single_format(raw: dict[str, Any]) -> VideoFormat:
        """Convert one raw format dict to a :class:`VideoFormat`."""
        raw_fps = raw.get("fps")
        fps: int | None = round(raw_fps) if raw_fps is not None else None

        raw_tbr = raw.get("tbr")
        tbr: float | None = float(raw_tbr) if raw_tbr is not None else None

        raw_channels = raw.get("audio_channels")
        channels: int | None = raw_channels if isinstance(raw_channels, int) else None

        return VideoFormat(
            format_id=str(raw.get("format_id", "")),
            ext=str(raw.get("ext", "")),
            height=raw.get("height") if isinstance(raw.get("height"), int) else None,
            fps=fps,
            tbr=tbr,
            vcodec=str(raw.get("vcodec") or "none"),
            acodec=str(raw.get("acodec") or "none"),
            audio_channels=channels,
        )

    @classmethod
    def _parse_formats(
        cls,
        raw_formats: list[dict[str, Any]],
    ) -> list[VideoFormat]:
        """Convert a list of raw format dicts to domain models."""
        return [cls._parse_single_format(entry) for entry in raw_formats]
