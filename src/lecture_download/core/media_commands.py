"""Pure builders for the three ffmpeg invocations and the concat manifest.

Nothing here touches the filesystem or spawns a process; each function
returns the argument list (without the ``ffmpeg`` executable itself) so
the exact command lines can be asserted in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from lecture_download.core.models import EncodingSettings


def _audio_args(settings: EncodingSettings) -> list[str]:
    return [
        "-c:a", settings.audio_codec,
        "-strict", "experimental",
        "-b:a", settings.audio_bitrate,
    ]


def build_boost_args(
    source: Path,
    destination: Path,
    settings: EncodingSettings,
) -> list[str]:
    """Re-encode video at a fixed frame rate and scale audio amplitude."""
    return [
        "-y",
        "-i", str(source),
        "-c:v", settings.video_codec,
        "-vf", f"fps={settings.fps}",
        "-af", f"volume={settings.volume_scale}",
        *_audio_args(settings),
        str(destination),
    ]


def build_concat_args(
    manifest: Path,
    destination: Path,
    settings: EncodingSettings,
) -> list[str]:
    """Merge the files listed in *manifest* through the concat demuxer.

    ``-safe 0`` is required because manifest entries are absolute paths.
    """
    return [
        "-y",
        "-f", "concat",
        "-safe", "0",
        "-i", str(manifest),
        "-c:v", settings.video_codec,
        *_audio_args(settings),
        str(destination),
    ]


def build_normalize_args(
    source: Path,
    destination: Path,
    settings: EncodingSettings,
) -> list[str]:
    """Copy video unchanged and apply ``dynaudnorm`` to the audio."""
    return [
        "-y",
        "-i", str(source),
        "-c:v", "copy",
        "-af", "dynaudnorm",
        *_audio_args(settings),
        str(destination),
    ]


def quote_manifest_path(path: Path) -> str:
    """Quote *path* for a concat-demuxer ``file`` directive."""
    escaped = str(path).replace("'", "'\\''")
    return f"'{escaped}'"


def render_manifest(paths: Sequence[Path]) -> str:
    """Render one ``file '<abs path>'`` line per input, in order.

    Relative entries would be resolved against the manifest's own
    directory, so every path is made absolute first.
    """
    return "".join(
        f"file {quote_manifest_path(path.resolve())}\n" for path in paths
    )
