"""Infrastructure: ffmpeg detection and platform guidance.

Locates ffmpeg on the system PATH and provides platform-specific
installation guidance when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from lecture_download.exceptions import FfmpegNotFoundError


@dataclass(frozen=True, slots=True)
class FfmpegStatus:
    """Result of an ffmpeg detection probe.

    Attributes
    ----------
    found : bool
        Whether ffmpeg was located on PATH.
    path : Path | None
        Absolute path to the ffmpeg binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing ffmpeg on the current
        platform.  Empty when ffmpeg is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


def detect_ffmpeg() -> FfmpegStatus:
    """Probe the system for an ffmpeg binary.

    Returns a :class:`FfmpegStatus` regardless of whether ffmpeg is
    present; the caller decides whether to abort or merely warn.
    """
    result = shutil.which("ffmpeg")

    if result is not None:
        return FfmpegStatus(
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )

    return FfmpegStatus(
        found=False,
        path=None,
        install_commands=platform_install_commands(),
    )


def install_hint(commands: tuple[str, ...]) -> str | None:
    """Format *commands* as the hint shown under a missing-ffmpeg error."""
    if not commands:
        return None
    return "\n".join(["Install ffmpeg using one of:", *(f"  {cmd}" for cmd in commands)])


def require_ffmpeg() -> Path:
    """Locate ffmpeg or raise :class:`FfmpegNotFoundError`.

    Called before the first download so a missing tool does not surface
    only after every video has been fetched.
    """
    status = detect_ffmpeg()
    if not status.found or status.path is None:
        raise FfmpegNotFoundError(
            "ffmpeg is not installed or not on PATH.",
            hint=install_hint(status.install_commands),
        )
    return status.path


def platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Gyan.FFmpeg",
            "choco install ffmpeg",
        )
    if system == "linux":
        return (
            "sudo apt install ffmpeg",
            "sudo dnf install ffmpeg",
            "sudo pacman -S ffmpeg",
        )
    if system == "darwin":
        return ("brew install ffmpeg",)
    return ("Please install ffmpeg from https://ffmpeg.org/download.html",)
