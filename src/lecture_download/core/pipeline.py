"""Linear download-and-merge pipeline.

Start → LinksExtracted → FolderReady → Downloaded* → Boosted* →
Concatenated → Normalized → Done

Every stage runs to completion before the next begins, and the first
:class:`~lecture_download.exceptions.LectureDownloadError` aborts all
remaining work.  Nothing produced along the way is deleted.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from pathlib import Path

from lecture_download.core.download_service import DownloadService
from lecture_download.core.links import extract_links, extract_video_id
from lecture_download.core.media_service import MediaService
from lecture_download.core.metadata_service import MetadataService
from lecture_download.core.models import DownloadedVideo, PipelineResult, PipelineStage
from lecture_download.core.protocols import ProgressCallback, WorkspaceLayout
from lecture_download.exceptions import (
    InputFileError,
    InputFileNotFoundError,
    LectureDownloadError,
    NoLinksFoundError,
)

logger = logging.getLogger(__name__)

ProgressFactory = Callable[[str], AbstractContextManager[ProgressCallback | None]]
"""Given a display label, return a context manager yielding a progress hook."""


def _no_progress(_label: str) -> AbstractContextManager[ProgressCallback | None]:
    return contextlib.nullcontext(None)


def _format_duration(seconds: int | None) -> str:
    if seconds is None:
        return "unknown length"
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"


class Pipeline:
    """Wire the six stages together over one output workspace."""

    def __init__(
        self,
        metadata_service: MetadataService,
        download_service: DownloadService,
        media_service: MediaService,
        workspace: WorkspaceLayout,
    ) -> None:
        self._metadata = metadata_service
        self._downloads = download_service
        self._media = media_service
        self._workspace = workspace
        self._stages: list[PipelineStage] = [PipelineStage.START]

    @property
    def stage(self) -> PipelineStage:
        """The most recent state the pipeline reached."""
        return self._stages[-1]

    def _advance(self, stage: PipelineStage) -> None:
        self._stages.append(stage)
        logger.debug("Pipeline stage: %s", stage.value)

    # ------------------------------------------------------------------
    # Stage 1: links
    # ------------------------------------------------------------------

    @staticmethod
    def read_links(input_path: Path) -> list[str]:
        """Read *input_path* and return its distinct watch links in order.

        Raises
        ------
        InputFileNotFoundError
            If *input_path* does not exist.
        InputFileError
            If it exists but cannot be read.
        """
        if not input_path.exists():
            raise InputFileNotFoundError(f"file does not exist: {input_path}")
        try:
            text = input_path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise InputFileError(f"Could not read {input_path}: {exc}") from exc
        return extract_links(text)

    # ------------------------------------------------------------------
    # Full run
    # ------------------------------------------------------------------

    def run(
        self,
        input_path: Path,
        output_path: Path,
        *,
        progress_factory: ProgressFactory | None = None,
    ) -> PipelineResult:
        """Execute every stage in order and return what was produced.

        Each call starts a fresh stage history and a fresh scratch
        directory, so one pipeline can serve several runs.
        """
        self._stages = [PipelineStage.START]
        try:
            return self._run(input_path, output_path, progress_factory or _no_progress)
        except LectureDownloadError:
            self._advance(PipelineStage.FAILED)
            raise

    def _run(
        self,
        input_path: Path,
        output_path: Path,
        progress_factory: ProgressFactory,
    ) -> PipelineResult:
        links = self.read_links(input_path)
        if not links:
            raise NoLinksFoundError(
                f"No YouTube links found in {input_path}.",
                hint="Links must start with https://www.youtube.com/",
            )
        logger.info("Found %d distinct links in %s", len(links), input_path)
        self._advance(PipelineStage.LINKS_EXTRACTED)

        folder = self._workspace.prepare()
        self._advance(PipelineStage.FOLDER_READY)

        downloads: list[DownloadedVideo] = []
        for ordinal, link in enumerate(links):
            video_id = extract_video_id(link)
            resolved = self._metadata.resolve(video_id)
            video_format = resolved.video_format
            logger.info(
                "[%d] %s (%s)",
                ordinal,
                resolved.metadata.title,
                _format_duration(resolved.metadata.duration),
            )
            target = self._workspace.download_path(ordinal)
            with progress_factory(f"[{ordinal}] {video_id}") as hook:
                self._downloads.download(
                    video_id,
                    video_format,
                    target,
                    progress_callback=hook,
                )
            downloads.append(
                DownloadedVideo(
                    ordinal=ordinal,
                    link=link,
                    video_id=video_id,
                    format_id=video_format.format_id,
                    path=target,
                    title=resolved.metadata.title,
                )
            )
        self._advance(PipelineStage.DOWNLOADED)

        boosted = [
            self._media.boost(
                video.ordinal,
                video.path,
                self._workspace.boosted_path(video.ordinal),
            )
            for video in downloads
        ]
        self._advance(PipelineStage.BOOSTED)

        manifest = self._workspace.manifest_path
        combined = self._media.concatenate(boosted, manifest, self._workspace.combined_path)
        self._advance(PipelineStage.CONCATENATED)

        self._media.normalize(combined, output_path)
        self._advance(PipelineStage.NORMALIZED)
        self._advance(PipelineStage.DONE)

        return PipelineResult(
            links=tuple(links),
            folder=folder,
            downloads=tuple(downloads),
            boosted=tuple(boosted),
            manifest=manifest,
            combined=combined,
            output=output_path,
            stages=tuple(self._stages),
        )
