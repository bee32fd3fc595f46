"""Allow ``python -m lecture_download`` invocation.

Delegates to the same error-boundary entry point as the
``lecture-download`` console script.
"""

from __future__ import annotations

from lecture_download.cli.app import cli

if __name__ == "__main__":
    cli()
