"""yt-dlp backed implementation of :class:`~lecture_download.core.protocols.DownloadProvider`.

Downloads one already-chosen format to a fixed path.  All yt-dlp
exceptions are caught here and re-raised as
:class:`~lecture_download.exceptions.DownloadFailedError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from lecture_download.core.protocols import ProgressCallback
from lecture_download.exceptions import DownloadFailedError, append_ytdlp_upgrade_suggestion
from lecture_download.infra.ytdlp_provider import import_ytdlp


class YtDlpDownloadProvider:
    """Concrete :class:`DownloadProvider` backed by the yt-dlp Python API."""

    @staticmethod
    def _build_opts(
        format_spec: str,
        output_path: Path,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> dict[str, Any]:
        """Return yt-dlp options for writing *format_spec* to *output_path*.

        ``%`` is doubled because ``outtmpl`` is a template; the resulting
        name is used verbatim.  Existing files are overwritten so a rerun
        on the same day replaces earlier ordinals.
        """
        hooks: list[ProgressCallback] = []
        if progress_callback is not None:
            hooks.append(progress_callback)

        return {
            "format": format_spec,
            "outtmpl": str(output_path).replace("%", "%%"),
            "overwrites": True,
            "noplaylist": True,
            "quiet": True,
            "no_warnings": True,
            "no_color": True,
            "noprogress": progress_callback is None,
            "progress_hooks": hooks,
        }

    def download(
        self,
        url: str,
        format_spec: str,
        output_path: Path,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Download *url* in *format_spec* to *output_path*.

        Raises
        ------
        DownloadFailedError
            For any yt-dlp error during the download.
        """
        opts = self._build_opts(
            format_spec,
            output_path,
            progress_callback=progress_callback,
        )
        yt_dlp = import_ytdlp()

        try:
            with yt_dlp.YoutubeDL(opts) as ydl:
                ydl.download([url])
        except yt_dlp.utils.DownloadError as exc:
            raise DownloadFailedError(
                str(exc),
                hint=append_ytdlp_upgrade_suggestion(
                    "Check the link and your network, then rerun.",
                ),
            ) from exc
        except Exception as exc:
            raise DownloadFailedError(
                f"Unexpected yt-dlp download error: {exc}",
            ) from exc
