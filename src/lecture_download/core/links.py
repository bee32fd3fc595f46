"""Pure link extraction, deduplication and video-ID parsing.

Every function here is a deterministic transformation over strings:

1. **Find** — collect all watch-link substrings in a text blob.
2. **Deduplicate** — drop repeats, first occurrence wins.
3. **Identify** — pull the ``v`` query value out of a single link.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from lecture_download.exceptions import LinkExtractionError

LINK_PREFIX = "https://www.youtube.com/"

# A link runs from the fixed prefix up to the next quote, pipe or
# backslash, so links embedded in HTML attributes or JSON strings
# terminate at their closing delimiter.
LINK_PATTERN: re.Pattern[str] = re.compile(re.escape(LINK_PREFIX) + r'[^"|\\]+')

# Video ids only ever use the URL-safe base64 alphabet.
VIDEO_ID_PATTERN: re.Pattern[str] = re.compile(r"watch\?v=([A-Za-z0-9_-]+)")

_BLANK_PATTERN: re.Pattern[str] = re.compile(r"[ \t]")

WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"


# ---------------------------------------------------------------------------
# 1. Find
# ---------------------------------------------------------------------------

def find_links(text: str, *, strip_newlines: bool = True) -> list[str]:
    """Return every watch-link match in *text*, in order of appearance.

    Links wrapped across lines in the source keep their line breaks in the
    raw match; with *strip_newlines* (the default) those are removed and
    the cleaned link is returned.

    Outside quotes a raw match can swallow the text after it, including
    further links on later lines.  The cleaned match is therefore split
    again at every later link prefix, and each piece ends at its first
    space or tab.
    """
    matches = LINK_PATTERN.findall(text)
    if not strip_newlines:
        return matches
    links: list[str] = []
    for match in matches:
        joined = match.replace("\r", "").replace("\n", "")
        for piece in joined.split(LINK_PREFIX)[1:]:
            links.append(LINK_PREFIX + _BLANK_PATTERN.split(piece, maxsplit=1)[0])
    return links


# ---------------------------------------------------------------------------
# 2. Deduplicate
# ---------------------------------------------------------------------------

def deduplicate(links: Iterable[str]) -> list[str]:
    """Remove repeated links while preserving first-seen order."""
    seen: set[str] = set()
    result: list[str] = []
    for link in links:
        if link not in seen:
            seen.add(link)
            result.append(link)
    return result


def extract_links(text: str) -> list[str]:
    """Run the find → deduplicate pipeline over *text*."""
    return deduplicate(find_links(text))


# ---------------------------------------------------------------------------
# 3. Identify
# ---------------------------------------------------------------------------

def extract_video_id(link: str) -> str:
    """Return the video identifier carried by *link*.

    Raises
    ------
    LinkExtractionError
        If *link* has no ``watch?v=`` segment.
    """
    match = VIDEO_ID_PATTERN.search(link)
    if match is None:
        raise LinkExtractionError(
            f"Cannot extract video id from link: {link}",
            hint="Only https://www.youtube.com/watch?v=<id> links can be downloaded.",
        )
    return match.group(1)


def watch_url(video_id: str) -> str:
    """Build the canonical watch URL for *video_id*."""
    return WATCH_URL_TEMPLATE.format(video_id=video_id)
