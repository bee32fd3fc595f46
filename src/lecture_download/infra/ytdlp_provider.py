"""yt-dlp backed implementation of :class:`~lecture_download.core.protocols.MetadataProvider`.

All yt-dlp exceptions are caught here and re-raised as typed
:class:`~lecture_download.exceptions.LectureDownloadError` subclasses.
"""

from __future__ import annotations

from typing import Any

from lecture_download.exceptions import (
    MetadataExtractionError,
    MissingDependencyError,
    VideoUnavailableError,
    append_ytdlp_upgrade_suggestion,
)


def import_ytdlp() -> Any:
    """Import yt-dlp lazily so ``--help`` and ``--doctor`` work without it."""
    try:
        import yt_dlp
        import yt_dlp.utils
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "yt-dlp is not installed. Install with: pip install yt-dlp",
        ) from exc
    return yt_dlp


class YtDlpMetadataProvider:
    """Concrete :class:`MetadataProvider` backed by the yt-dlp Python API.

    Usage::

        provider = YtDlpMetadataProvider()
        info = provider.fetch_info("https://www.youtube.com/watch?v=...")
    """

    # Substrings in yt-dlp error messages that indicate the video itself
    # is unavailable (as opposed to a transient or extraction error).
    _UNAVAILABLE_SIGNALS: tuple[str, ...] = (
        "unavailable",
        "private video",
        "removed",
        "not available",
        "account terminated",
        "sign in to confirm your age",
    )

    @staticmethod
    def _build_opts() -> dict[str, Any]:
        """Return yt-dlp options suitable for metadata-only extraction."""
        return {
            "quiet": True,
            "no_warnings": True,
            "no_color": True,
            "noplaylist": True,
            "skip_download": True,
        }

    def fetch_info(self, url: str) -> dict[str, Any]:
        """Extract metadata for *url* without downloading.

        Raises
        ------
        VideoUnavailableError
            When yt-dlp reports the video as unavailable / private / removed.
        MetadataExtractionError
            For all other extraction failures.
        """
        yt_dlp = import_ytdlp()

        try:
            with yt_dlp.YoutubeDL(self._build_opts()) as ydl:
                info: Any = ydl.extract_info(url, download=False)
        except yt_dlp.utils.DownloadError as exc:
            self._raise_mapped(exc)
        except Exception as exc:
            raise MetadataExtractionError(
                f"Unexpected yt-dlp error: {exc}",
            ) from exc

        if not isinstance(info, dict):
            raise MetadataExtractionError(
                f"yt-dlp returned no metadata for {url}.",
                hint=append_ytdlp_upgrade_suggestion(
                    "The link may not point to a single video.",
                ),
            )

        return dict(info)

    @classmethod
    def _raise_mapped(cls, exc: Exception) -> None:
        """Translate a yt-dlp ``DownloadError`` into a domain exception."""
        msg_lower = str(exc).lower()
        if any(signal in msg_lower for signal in cls._UNAVAILABLE_SIGNALS):
            raise VideoUnavailableError(
                str(exc),
                hint="The video may be private, removed, or geo-restricted.",
            ) from exc
        raise MetadataExtractionError(
            str(exc),
            hint=append_ytdlp_upgrade_suggestion("Check the link and your network."),
        ) from exc
