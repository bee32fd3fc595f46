"""lecture-download — batch YouTube download, merge and loudness pass.

Scans a text file for watch links, fetches each video through the yt-dlp
Python API and hands the results to ffmpeg for audio boosting,
concatenation and dynamic normalization.
"""

from lecture_download.version import __version__

__all__: list[str] = ["__version__"]
