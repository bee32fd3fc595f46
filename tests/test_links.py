"""Tests for link extraction and video-ID parsing (core/links.py).

Pure string functions — no I/O, no mocking.
"""

from __future__ import annotations

import pytest

from lecture_download.core.links import (
    deduplicate,
    extract_links,
    extract_video_id,
    find_links,
    watch_url,
)
from lecture_download.exceptions import LinkExtractionError


# ---------------------------------------------------------------------------
# find_links
# ---------------------------------------------------------------------------

class TestFindLinks:
    def test_links_terminate_at_quotes(self) -> None:
        text = '<a href="https://www.youtube.com/watch?v=one">x</a> "https://www.youtube.com/watch?v=two"'
        assert find_links(text) == [
            "https://www.youtube.com/watch?v=one",
            "https://www.youtube.com/watch?v=two",
        ]

    def test_links_terminate_at_backslash_and_pipe(self) -> None:
        text = r'{"u":"https://www.youtube.com/watch?v=one\\u0026x"}|https://www.youtube.com/watch?v=two|'
        assert find_links(text) == [
            "https://www.youtube.com/watch?v=one",
            "https://www.youtube.com/watch?v=two",
        ]

    def test_other_hosts_ignored(self) -> None:
        text = '"https://youtu.be/abc" "http://www.youtube.com/watch?v=abc" "https://vimeo.com/1"'
        assert find_links(text) == []

    def test_empty_text(self) -> None:
        assert find_links("") == []

    def test_wrapped_link_is_joined(self) -> None:
        text = '"https://www.youtube.com/watch?v=ab\ncd"'
        assert find_links(text) == ["https://www.youtube.com/watch?v=abcd"]

    def test_carriage_returns_removed(self) -> None:
        text = '"https://www.youtube.com/watch?v=ab\r\ncd"'
        assert find_links(text) == ["https://www.youtube.com/watch?v=abcd"]

    def test_one_link_per_line(self) -> None:
        text = "https://www.youtube.com/watch?v=aaa\nhttps://www.youtube.com/watch?v=bbb\n"
        assert extract_links(text) == [
            "https://www.youtube.com/watch?v=aaa",
            "https://www.youtube.com/watch?v=bbb",
        ]

    def test_links_in_prose_end_at_blank(self) -> None:
        text = (
            "week 1 https://www.youtube.com/watch?v=aaa notes\n"
            "week 2 https://www.youtube.com/watch?v=bbb\n"
        )
        assert extract_links(text) == [
            "https://www.youtube.com/watch?v=aaa",
            "https://www.youtube.com/watch?v=bbb",
        ]

    def test_crlf_separated_links(self) -> None:
        text = "https://www.youtube.com/watch?v=aaa\r\nhttps://www.youtube.com/watch?v=aaa\r\n"
        assert extract_links(text) == ["https://www.youtube.com/watch?v=aaa"]

    def test_raw_matches_kept_when_not_stripping(self) -> None:
        text = '"https://www.youtube.com/watch?v=ab\ncd"'
        assert find_links(text, strip_newlines=False) == [
            "https://www.youtube.com/watch?v=ab\ncd",
        ]


# ---------------------------------------------------------------------------
# deduplicate
# ---------------------------------------------------------------------------

class TestDeduplicate:
    def test_first_occurrence_wins(self) -> None:
        assert deduplicate(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

    def test_idempotent(self) -> None:
        once = deduplicate(["x", "y", "x", "z", "y"])
        assert deduplicate(once) == once

    def test_no_duplicates_unchanged(self) -> None:
        assert deduplicate(["a", "b", "c"]) == ["a", "b", "c"]

    def test_empty(self) -> None:
        assert deduplicate([]) == []

    def test_accepts_any_iterable(self) -> None:
        assert deduplicate(iter(["a", "a"])) == ["a"]


# ---------------------------------------------------------------------------
# extract_links
# ---------------------------------------------------------------------------

class TestExtractLinks:
    def test_distinct_links_in_first_seen_order(self) -> None:
        distinct = [f"https://www.youtube.com/watch?v=vid{i}" for i in range(4)]
        parts = [f'<li>talk {i}: <a href="{link}">go</a></li>' for i, link in enumerate(distinct)]
        duplicates = [f'<a href="{distinct[1]}">repeat</a>'] * 3
        text = "\n".join(parts[:2] + duplicates + parts[2:])

        assert extract_links(text) == distinct

    def test_repeats_of_one_link_collapse(self) -> None:
        link = "https://www.youtube.com/watch?v=same"
        text = f'"{link}" "{link}" "{link}"'
        assert extract_links(text) == [link]


# ---------------------------------------------------------------------------
# extract_video_id
# ---------------------------------------------------------------------------

class TestExtractVideoId:
    def test_plain_link(self) -> None:
        assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == "dQw4w9WgXcQ"

    def test_stops_at_next_query_parameter(self) -> None:
        assert extract_video_id("https://www.youtube.com/watch?v=abc123&t=5") == "abc123"

    def test_stops_at_fragment(self) -> None:
        assert extract_video_id("https://www.youtube.com/watch?v=abc123#t=5") == "abc123"

    def test_stops_at_non_id_character(self) -> None:
        assert extract_video_id("https://www.youtube.com/watch?v=abc-_9Z</a>") == "abc-_9Z"

    @pytest.mark.parametrize(
        "link",
        [
            "https://www.youtube.com/playlist?list=PL123",
            "https://www.youtube.com/@channel",
            "https://www.youtube.com/watch?v=",
        ],
    )
    def test_missing_id_raises(self, link: str) -> None:
        with pytest.raises(LinkExtractionError, match="Cannot extract video id"):
            extract_video_id(link)

    def test_error_has_hint(self) -> None:
        with pytest.raises(LinkExtractionError) as exc_info:
            extract_video_id("https://www.youtube.com/feed")
        assert exc_info.value.hint is not None


class TestWatchUrl:
    def test_round_trip(self) -> None:
        assert extract_video_id(watch_url("abc123")) == "abc123"

    def test_canonical_form(self) -> None:
        assert watch_url("abc123") == "https://www.youtube.com/watch?v=abc123"
