"""Core media service — audio boost, concatenation and normalization.

Each stage builds its argument list with
:mod:`lecture_download.core.media_commands`, hands it to a
:class:`~lecture_download.core.protocols.CommandRunner` and turns a
non-zero exit status into a stage-specific
:class:`~lecture_download.exceptions.MediaProcessingError`.  There is no
retry: the first failure aborts the run.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from lecture_download.core.media_commands import (
    build_boost_args,
    build_concat_args,
    build_normalize_args,
    render_manifest,
)
from lecture_download.core.models import EncodingSettings
from lecture_download.core.protocols import CommandRunner
from lecture_download.exceptions import (
    AudioBoostError,
    ConcatenationError,
    NormalizationError,
    WorkspaceError,
)

logger = logging.getLogger(__name__)


class MediaService:
    """Drive the external media tool through the three processing passes.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`CommandRunner` protocol.
    settings:
        Codec, frame-rate, volume and bitrate parameters.
    """

    def __init__(
        self,
        runner: CommandRunner,
        settings: EncodingSettings | None = None,
    ) -> None:
        self._runner: CommandRunner = runner
        self._settings: EncodingSettings = settings or EncodingSettings()

    @property
    def settings(self) -> EncodingSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def boost(self, ordinal: int, source: Path, destination: Path) -> Path:
        """Scale the audio of one downloaded video.

        Raises
        ------
        AudioBoostError
            Naming *ordinal* and *source* when the tool fails.
        """
        logger.info(
            "Boosting audio of video %d by %dx: %s -> %s",
            ordinal,
            self._settings.volume_scale,
            source,
            destination,
        )
        status = self._runner.run(build_boost_args(source, destination, self._settings))
        if status != 0:
            raise AudioBoostError(
                f"Error boosting audio for video {ordinal} ({source}): "
                f"ffmpeg exited with status {status}",
                stage="boost",
                subject=str(source),
                returncode=status,
            )
        return destination

    def concatenate(
        self,
        sources: Sequence[Path],
        manifest: Path,
        destination: Path,
    ) -> Path:
        """Write *manifest* for *sources* and merge them into *destination*.

        The manifest is overwritten on every call and left on disk.

        Raises
        ------
        WorkspaceError
            If the manifest cannot be written.
        ConcatenationError
            When the tool fails.
        """
        try:
            manifest.write_text(render_manifest(sources), encoding="utf-8")
        except OSError as exc:
            raise WorkspaceError(
                f"Could not write file list {manifest}: {exc}",
            ) from exc
        logger.info("Combining %d videos into %s", len(sources), destination)

        status = self._runner.run(build_concat_args(manifest, destination, self._settings))
        if status != 0:
            raise ConcatenationError(
                f"Error combining videos listed in {manifest}: "
                f"ffmpeg exited with status {status}",
                stage="concat",
                subject=str(manifest),
                returncode=status,
            )
        return destination

    def normalize(self, source: Path, destination: Path) -> Path:
        """Apply dynamic loudness normalization to the combined video.

        Raises
        ------
        NormalizationError
            When the tool fails.
        """
        logger.info("Normalizing audio: %s -> %s", source, destination)
        status = self._runner.run(build_normalize_args(source, destination, self._settings))
        if status != 0:
            raise NormalizationError(
                f"Error normalizing audio of {source}: "
                f"ffmpeg exited with status {status}",
                stage="normalize",
                subject=str(source),
                returncode=status,
            )
        return destination
