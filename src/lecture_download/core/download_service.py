"""Core download service — fetch one chosen stream to one local file.

The actual transfer is delegated to a
:class:`~lecture_download.core.protocols.DownloadProvider` injected at
construction time.  This service:

* Turns a video id into the canonical watch URL.
* Requests exactly the selected ``format_id``; no merging, no fallback.
* Ensures only :class:`~lecture_download.exceptions.LectureDownloadError`
  subclasses escape.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lecture_download.core.links import watch_url
from lecture_download.core.models import VideoFormat
from lecture_download.core.protocols import DownloadProvider, ProgressCallback
from lecture_download.exceptions import DownloadFailedError, LectureDownloadError

logger = logging.getLogger(__name__)


class DownloadService:
    """Stateless service that downloads a selected format.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`DownloadProvider` protocol.
    """

    def __init__(self, provider: DownloadProvider) -> None:
        self._provider: DownloadProvider = provider

    def download(
        self,
        video_id: str,
        video_format: VideoFormat,
        output_path: Path,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> Path:
        """Download *video_format* of *video_id* to *output_path*.

        Returns
        -------
        Path
            *output_path*, for chaining.

        Raises
        ------
        DownloadFailedError
            When the download fails for any reason.
        """
        url = watch_url(video_id)
        logger.info("Downloading %s (format %s) to %s", url, video_format.format_id, output_path)
        try:
            self._provider.download(
                url,
                video_format.format_id,
                output_path,
                progress_callback=progress_callback,
            )
        except LectureDownloadError:
            raise
        except Exception as exc:
            raise DownloadFailedError(
                f"Unexpected download error for {url}: {exc}",
            ) from exc
        return output_path
