"""Fetch a URL and write the response body to standard output."""

from __future__ import annotations

import shutil
import sys
import urllib.error
import urllib.request
from typing import BinaryIO, Sequence


def http_get(url: str, out: BinaryIO) -> None:
    """Send a GET request for ``url`` and copy the body to ``out``.

    Raises urllib.error.HTTPError if the status is not a success.
    """
    with urllib.request.urlopen(url) as response:
        status = response.status
        if not 200 <= status < 300:
            raise urllib.error.HTTPError(
                url, status, response.reason, response.headers, None
            )
        shutil.copyfileobj(response, out)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``http-get URL``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("usage: http-get URL", file=sys.stderr)
        return 1
    try:
        http_get(args[0], sys.stdout.buffer)
        sys.stdout.buffer.flush()
    except urllib.error.HTTPError as err:
        print(f"error: {err.code} {err.reason}", file=sys.stderr)
        return 1
    except (urllib.error.URLError, OSError, ValueError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())