"""``lecture-download --doctor``: environment diagnostics.

Collects one row per runtime requirement and renders them as a Rich
table.  Python and yt-dlp are critical; ffmpeg is reported as FAIL too,
since every run needs it for the boost, concat and normalize passes.
"""

from __future__ import annotations

import platform
import sys

from rich.table import Table

from lecture_download.cli import exit_codes
from lecture_download.cli.console import console
from lecture_download.infra.ffmpeg_detector import detect_ffmpeg
from lecture_download.version import __version__

Check = tuple[str, str, bool]
"""(component, value, ok)"""


def _python_check() -> Check:
    ok = sys.version_info[:2] >= (3, 10)
    return "Python", platform.python_version(), ok


def _ytdlp_check() -> Check:
    try:
        from yt_dlp.version import __version__ as ydl_version
    except ImportError:
        return "yt-dlp", "not installed", False
    return "yt-dlp", ydl_version, True


def _ffmpeg_check() -> Check:
    status = detect_ffmpeg()
    if status.found:
        return "ffmpeg", str(status.path), True
    return "ffmpeg", "not found", False


def _os_check() -> Check:
    system = {"Darwin": "macOS"}.get(platform.system(), platform.system())
    return "OS", f"{system} {platform.release()} ({platform.machine()})", True


def collect_checks() -> list[Check]:
    return [
        ("lecture-download", __version__, True),
        _python_check(),
        _ytdlp_check(),
        _ffmpeg_check(),
        _os_check(),
    ]


def run_doctor() -> int:
    """Render all checks and return the matching exit code."""
    checks = collect_checks()

    table = Table(
        title="lecture-download doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=6)
    for label, value, ok in checks:
        table.add_row(label, value, "[green]OK[/green]" if ok else "[red]FAIL[/red]")

    console.print()
    console.print(table)
    console.print()

    ffmpeg_status = detect_ffmpeg()
    if not ffmpeg_status.found:
        console.print("[yellow]ffmpeg is not installed.[/yellow] Install using one of:")
        for cmd in ffmpeg_status.install_commands:
            console.print(f"  [bold]{cmd}[/bold]")
        console.print()

    if not all(ok for _, _, ok in checks):
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
