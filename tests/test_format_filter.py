"""Tests for the pure format filtering pipeline (core/format_filter.py).

Every test is a pure function call — no I/O, no mocking.  Covered:

* Audio-channel filtering
* Sort order (muxed first, height desc, fps desc, mp4, channels, bitrate)
* End-to-end pipeline via ``select_audio_formats``
* Edge cases (empty input, all-filtered, None dimensions)
"""

from __future__ import annotations

from lecture_download.core.format_filter import (
    filter_with_audio,
    select_audio_formats,
    sort_formats,
)
from lecture_download.core.models import VideoFormat


def _fmt(
    *,
    format_id: str = "18",
    ext: str = "mp4",
    height: int | None = 360,
    fps: int | None = 30,
    tbr: float | None = 500.0,
    vcodec: str = "avc1.42001E",
    acodec: str = "mp4a.40.2",
    audio_channels: int | None = 2,
) -> VideoFormat:
    return VideoFormat(
        format_id=format_id,
        ext=ext,
        height=height,
        fps=fps,
        tbr=tbr,
        vcodec=vcodec,
        acodec=acodec,
        audio_channels=audio_channels,
    )


def _ids(formats: list[VideoFormat]) -> list[str]:
    return [fmt.format_id for fmt in formats]


# ---------------------------------------------------------------------------
# filter_with_audio
# ---------------------------------------------------------------------------

class TestFilterWithAudio:
    def test_drops_video_only(self) -> None:
        formats = [
            _fmt(format_id="137", acodec="none", audio_channels=None),
            _fmt(format_id="18"),
        ]
        assert _ids(filter_with_audio(formats)) == ["18"]

    def test_keeps_audio_only(self) -> None:
        formats = [_fmt(format_id="140", vcodec="none", height=None, fps=None)]
        assert _ids(filter_with_audio(formats)) == ["140"]

    def test_channel_count_alone_counts_as_audio(self) -> None:
        formats = [_fmt(format_id="x", acodec="none", audio_channels=2)]
        assert _ids(filter_with_audio(formats)) == ["x"]

    def test_zero_channels_without_codec_dropped(self) -> None:
        formats = [_fmt(format_id="x", acodec="none", audio_channels=0)]
        assert filter_with_audio(formats) == []

    def test_empty(self) -> None:
        assert filter_with_audio([]) == []


# ---------------------------------------------------------------------------
# sort_formats
# ---------------------------------------------------------------------------

class TestSortFormats:
    def test_muxed_before_audio_only(self) -> None:
        formats = [
            _fmt(format_id="251", vcodec="none", height=None, fps=None, tbr=160.0),
            _fmt(format_id="18"),
        ]
        assert _ids(sort_formats(formats)) == ["18", "251"]

    def test_height_desc(self) -> None:
        formats = [_fmt(format_id="18", height=360), _fmt(format_id="22", height=720)]
        assert _ids(sort_formats(formats)) == ["22", "18"]

    def test_fps_desc_within_same_height(self) -> None:
        formats = [_fmt(format_id="a", fps=30), _fmt(format_id="b", fps=60)]
        assert _ids(sort_formats(formats)) == ["b", "a"]

    def test_mp4_preferred(self) -> None:
        formats = [_fmt(format_id="w", ext="webm"), _fmt(format_id="m", ext="mp4")]
        assert _ids(sort_formats(formats)) == ["m", "w"]

    def test_more_channels_then_higher_bitrate(self) -> None:
        formats = [
            _fmt(format_id="mono", audio_channels=1, tbr=900.0),
            _fmt(format_id="low", audio_channels=2, tbr=300.0),
            _fmt(format_id="high", audio_channels=2, tbr=600.0),
        ]
        assert _ids(sort_formats(formats)) == ["high", "low", "mono"]

    def test_none_dimensions_sort_last(self) -> None:
        formats = [
            _fmt(format_id="unknown", height=None, fps=None, tbr=None),
            _fmt(format_id="known"),
        ]
        assert _ids(sort_formats(formats)) == ["known", "unknown"]

    def test_ties_keep_incoming_order(self) -> None:
        formats = [_fmt(format_id="first"), _fmt(format_id="second")]
        assert _ids(sort_formats(formats)) == ["first", "second"]


# ---------------------------------------------------------------------------
# select_audio_formats
# ---------------------------------------------------------------------------

class TestSelectAudioFormats:
    def test_realistic_youtube_listing(self) -> None:
        formats = [
            _fmt(format_id="139", ext="m4a", vcodec="none", height=None, fps=None, tbr=48.0),
            _fmt(format_id="140", ext="m4a", vcodec="none", height=None, fps=None, tbr=129.0),
            _fmt(format_id="160", height=144, acodec="none", audio_channels=None),
            _fmt(format_id="18", height=360, tbr=600.0),
            _fmt(format_id="137", height=1080, acodec="none", audio_channels=None),
        ]
        assert _ids(select_audio_formats(formats)) == ["18", "140", "139"]

    def test_all_filtered_gives_empty(self) -> None:
        formats = [_fmt(acodec="none", audio_channels=None)]
        assert select_audio_formats(formats) == []
