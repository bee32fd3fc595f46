"""Infrastructure: run ffmpeg as a blocking subprocess.

ffmpeg's stderr is inherited so its diagnostics reach the user
unchanged; stdin and stdout are detached.  The exit status is the only
result consumed.  No timeout is applied.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from lecture_download.exceptions import FfmpegNotFoundError
from lecture_download.infra.ffmpeg_detector import install_hint, platform_install_commands

logger = logging.getLogger(__name__)


class FfmpegRunner:
    """Concrete :class:`~lecture_download.core.protocols.CommandRunner` for ffmpeg.

    Parameters
    ----------
    executable:
        Path or name of the ffmpeg binary, usually the result of
        :func:`~lecture_download.infra.ffmpeg_detector.require_ffmpeg`.
    """

    def __init__(self, executable: Path | str = "ffmpeg") -> None:
        self._executable: str = str(executable)

    @property
    def executable(self) -> str:
        return self._executable

    def run(self, args: Sequence[str]) -> int:
        """Run ffmpeg with *args* and return its exit status."""
        cmd = [self._executable, *args]
        logger.debug("Running: %s", shlex.join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                check=False,
            )
        except FileNotFoundError as exc:
            raise FfmpegNotFoundError(
                f"Could not start {self._executable}.",
                hint=install_hint(platform_install_commands()),
            ) from exc
        if proc.returncode != 0:
            logger.debug("%s exited with status %d", self._executable, proc.returncode)
        return proc.returncode
