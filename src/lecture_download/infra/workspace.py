"""Infrastructure: the dated output folder and per-run scratch files.

Layout for a run started on 2026-10-18 with default settings::

    2026-10-18/
        0.mp4  1.mp4 ...               raw downloads, by ordinal
        boosted_0.mp4 ...              audio-boosted copies
        run-XXXXXXXX/
            videos.txt                 concat manifest
            combined_output.mp4        concatenated, not yet normalized

The dated folder is shared by every run on the same day, so ordinals
from a later run overwrite earlier ones.  The manifest and combined file
live in a run-unique scratch directory unless explicit paths are given.
Nothing is ever removed.
"""

from __future__ import annotations

import datetime as dt
import logging
import tempfile
from pathlib import Path

from lecture_download.exceptions import WorkspaceError

logger = logging.getLogger(__name__)

FOLDER_MODE = 0o755
MANIFEST_NAME = "videos.txt"
COMBINED_NAME = "combined_output.mp4"


def folder_name(today: dt.date | None = None) -> str:
    """Return the output folder name for *today* (local date) as ``YYYY-MM-DD``."""
    return (today or dt.date.today()).strftime("%Y-%m-%d")


class OutputWorkspace:
    """Paths for every file a pipeline run reads or writes.

    Parameters
    ----------
    root:
        Directory in which the dated folder is created.
    today:
        Date naming the folder; defaults to the local date at construction.
    manifest_path, combined_path:
        Explicit locations for the concat manifest and the combined
        intermediate.  When either is omitted it goes into a fresh
        ``run-*`` directory inside the dated folder.
    """

    def __init__(
        self,
        root: Path | str = ".",
        *,
        today: dt.date | None = None,
        manifest_path: Path | None = None,
        combined_path: Path | None = None,
    ) -> None:
        self._folder: Path = Path(root) / folder_name(today)
        self._manifest_path: Path | None = manifest_path
        self._combined_path: Path | None = combined_path
        self._scratch: Path | None = None

    @property
    def folder(self) -> Path:
        return self._folder

    @property
    def scratch(self) -> Path | None:
        """The run-unique directory, once :meth:`prepare` created one."""
        return self._scratch

    @property
    def manifest_path(self) -> Path:
        if self._manifest_path is not None:
            return self._manifest_path
        return self._require_scratch() / MANIFEST_NAME

    @property
    def combined_path(self) -> Path:
        if self._combined_path is not None:
            return self._combined_path
        return self._require_scratch() / COMBINED_NAME

    def download_path(self, ordinal: int) -> Path:
        return self._folder / f"{ordinal}.mp4"

    def boosted_path(self, ordinal: int) -> Path:
        return self._folder / f"boosted_{ordinal}.mp4"

    def prepare(self) -> Path:
        """Create the dated folder if absent (reuse it otherwise).

        Every call starts a new ``run-*`` scratch directory when one is
        needed, so each run gets its own manifest and combined file.

        Raises
        ------
        WorkspaceError
            If the folder or the scratch directory cannot be created.
        """
        try:
            if not self._folder.is_dir():
                self._folder.mkdir(mode=FOLDER_MODE, parents=True)
                logger.info("Created output folder %s", self._folder)
            else:
                logger.info("Reusing output folder %s", self._folder)
            if self._manifest_path is None or self._combined_path is None:
                self._scratch = Path(tempfile.mkdtemp(prefix="run-", dir=self._folder))
                logger.debug("Scratch directory for this run: %s", self._scratch)
        except OSError as exc:
            raise WorkspaceError(
                f"Error creating directory {self._folder}: {exc}",
            ) from exc
        return self._folder

    def _require_scratch(self) -> Path:
        if self._scratch is None:
            raise WorkspaceError(
                "Output workspace has not been prepared yet.",
            )
        return self._scratch
