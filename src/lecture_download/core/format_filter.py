"""Pure stream-format filtering and ranking.

Every function in this module is a **pure** transformation: no I/O,
no side effects, fully deterministic.

Pipeline order (enforced by :func:`select_audio_formats`):

1. **Filter** — keep only formats that carry an audio channel.
2. **Sort** — muxed video+audio first, then resolution desc, fps desc,
   mp4 preferred, more audio channels, higher bitrate.
"""

from __future__ import annotations

from collections.abc import Sequence

from lecture_download.core.models import VideoFormat


# ---------------------------------------------------------------------------
# 1. Filter
# ---------------------------------------------------------------------------

def filter_with_audio(
    formats: Sequence[VideoFormat],
) -> list[VideoFormat]:
    """Return only formats that declare at least one audio channel."""
    return [fmt for fmt in formats if fmt.has_audio]


# ---------------------------------------------------------------------------
# 2. Sort
# ---------------------------------------------------------------------------

def _sort_key(fmt: VideoFormat) -> tuple[int, int, int, int, int, float]:
    """Compute a sort key that puts the preferred download first.

    All components ascend, so "more is better" values are negated.
    """
    muxed_priority: int = 0 if fmt.has_video else 1
    height: int = fmt.height if fmt.height is not None else 0
    fps: int = fmt.fps if fmt.fps is not None else 0
    ext_priority: int = 0 if fmt.ext == "mp4" else 1
    channels: int = fmt.audio_channels if fmt.audio_channels is not None else 0
    tbr: float = fmt.tbr if fmt.tbr is not None else 0.0
    return (muxed_priority, -height, -fps, ext_priority, -channels, -tbr)


def sort_formats(formats: Sequence[VideoFormat]) -> list[VideoFormat]:
    """Rank formats best-first.  Ties keep their incoming order."""
    return sorted(formats, key=_sort_key)


# ---------------------------------------------------------------------------
# Composite pipeline
# ---------------------------------------------------------------------------

def select_audio_formats(
    formats: Sequence[VideoFormat],
) -> list[VideoFormat]:
    """Run the full filter → sort pipeline.

    Returns an empty list when no format carries audio.
    """
    return sort_formats(filter_with_audio(formats))
