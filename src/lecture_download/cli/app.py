"""CLI application entry point for lecture-download.

This module is the **sole error boundary** for the entire application.
It catches :class:`~lecture_download.exceptions.LectureDownloadError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders one
message via Rich and returns a well-defined exit code.

Architecture notes
------------------
* No business logic lives here; providers and services are wired up and
  handed to :class:`~lecture_download.core.pipeline.Pipeline`.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.markup import escape

from lecture_download.cli import exit_codes
from lecture_download.cli.console import console
from lecture_download.core.models import EncodingSettings
from lecture_download.exceptions import InputFileNotFoundError, LectureDownloadError
from lecture_download.logging import configure_logging
from lecture_download.version import __version__

logger = logging.getLogger(__name__)

_DEFAULTS = EncodingSettings()


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    Exactly two positionals are expected; any other count is handled in
    :func:`main` by printing the usage line, not by argparse.
    """
    parser = argparse.ArgumentParser(
        prog="lecture-download",
        usage="%(prog)s [options] input-file output-file",
        description=(
            "Download every YouTube video linked from INPUT-FILE, boost and "
            "merge their audio, and write one normalized video to OUTPUT-FILE."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="FILE",
        help="Text file to scan for watch links, then the final output video path.",
    )
    parser.add_argument(
        "--volume",
        type=_positive_int,
        default=_DEFAULTS.volume_scale,
        help="Linear audio amplitude factor applied to every video (default: %(default)s).",
    )
    parser.add_argument(
        "--fps",
        type=_positive_int,
        default=_DEFAULTS.fps,
        help="Frame rate of the re-encoded videos (default: %(default)s).",
    )
    parser.add_argument(
        "--audio-bitrate",
        default=_DEFAULTS.audio_bitrate,
        help="Audio bitrate for every encode (default: %(default)s).",
    )
    parser.add_argument(
        "--output-root",
        type=Path,
        default=Path("."),
        help="Directory in which the dated download folder is created (default: cwd).",
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        default=None,
        help="Where to write the concat file list (default: a per-run scratch dir).",
    )
    parser.add_argument(
        "--combined",
        type=Path,
        default=None,
        help="Where to write the merged, not yet normalized video "
        "(default: a per-run scratch dir).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every stage and ffmpeg command line.",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Check Python, yt-dlp and ffmpeg, then exit.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_run(
    input_path: Path,
    output_path: Path,
    settings: EncodingSettings,
    *,
    output_root: Path,
    manifest: Path | None = None,
    combined: Path | None = None,
) -> int:
    """Wire providers and services, then run the whole pipeline.

    The input file is checked here as well as in
    :meth:`Pipeline.read_links` so that a missing input is reported
    before the ffmpeg lookup, and both checks happen before any network
    access.
    """
    from lecture_download.cli.progress import progress_for
    from lecture_download.core.download_service import DownloadService
    from lecture_download.core.media_service import MediaService
    from lecture_download.core.metadata_service import MetadataService
    from lecture_download.core.pipeline import Pipeline
    from lecture_download.infra.ffmpeg_detector import require_ffmpeg
    from lecture_download.infra.ffmpeg_runner import FfmpegRunner
    from lecture_download.infra.workspace import OutputWorkspace
    from lecture_download.infra.ytdlp_download_provider import YtDlpDownloadProvider
    from lecture_download.infra.ytdlp_provider import YtDlpMetadataProvider

    if not input_path.exists():
        raise InputFileNotFoundError(f"file does not exist: {input_path}")

    ffmpeg_path = require_ffmpeg()
    logger.debug("Using ffmpeg at %s", ffmpeg_path)

    pipeline = Pipeline(
        MetadataService(YtDlpMetadataProvider()),
        DownloadService(YtDlpDownloadProvider()),
        MediaService(FfmpegRunner(ffmpeg_path), settings),
        OutputWorkspace(
            output_root,
            manifest_path=manifest,
            combined_path=combined,
        ),
    )
    result = pipeline.run(input_path, output_path, progress_factory=progress_for)

    console.print(
        "[bold green]Successfully created output file:[/bold green] "
        f"{escape(str(result.output))}"
    )
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    from lecture_download.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the lecture-download CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.doctor:
        return _handle_doctor()

    if len(args.paths) != 2:
        parser.print_usage()
        return exit_codes.SUCCESS

    input_path, output_path = (Path(p) for p in args.paths)
    settings = EncodingSettings(
        fps=args.fps,
        volume_scale=args.volume,
        audio_bitrate=args.audio_bitrate,
    )
    return _handle_run(
        input_path,
        output_path,
        settings,
        output_root=args.output_root,
        manifest=args.manifest,
        combined=args.combined,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except LectureDownloadError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
