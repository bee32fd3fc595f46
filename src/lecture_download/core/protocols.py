"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Protocol

ProgressCallback = Callable[[dict[str, Any]], None]


class MetadataProvider(Protocol):
    """Contract for metadata extraction backends."""

    def fetch_info(self, url: str) -> dict[str, Any]:
        """Fetch raw metadata for *url* and return a provider-specific dict.

        The returned dict must contain at least:

        * ``"id"`` — video identifier (``str``)
        * ``"title"`` — video title (``str``)
        * ``"formats"`` — list of format dicts (``list[dict]``)

        Raises
        ------
        MetadataExtractionError
            When the backend fails to extract metadata.
        VideoUnavailableError
            When the target video is confirmed unavailable.
        """
        ...  # pragma: no cover


class DownloadProvider(Protocol):
    """Contract for video download backends."""

    def download(
        self,
        url: str,
        format_spec: str,
        output_path: Path,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Download *url* in *format_spec* to exactly *output_path*.

        Raises
        ------
        DownloadFailedError
            When the download fails for any reason.
        """
        ...  # pragma: no cover


class CommandRunner(Protocol):
    """Contract for the external media tool."""

    def run(self, args: Sequence[str]) -> int:
        """Run the tool with *args* to completion and return its exit status.

        A status of ``0`` means success.  Implementations raise
        :class:`~lecture_download.exceptions.FfmpegNotFoundError` when the
        tool cannot be started at all.
        """
        ...  # pragma: no cover


class WorkspaceLayout(Protocol):
    """Where each pipeline stage reads and writes its files."""

    @property
    def folder(self) -> Path: ...  # pragma: no cover

    @property
    def manifest_path(self) -> Path: ...  # pragma: no cover

    @property
    def combined_path(self) -> Path: ...  # pragma: no cover

    def prepare(self) -> Path:
        """Create (or reuse) the output folder and return it."""
        ...  # pragma: no cover

    def download_path(self, ordinal: int) -> Path: ...  # pragma: no cover

    def boosted_path(self, ordinal: int) -> Path: ...  # pragma: no cover
