"""Print the lines of standard input or of files that contain a given string."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Sequence


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def grep(target: str, lines: Iterable[str]) -> Iterator[str]:
    """Yield each line, without its line ending, that contains ``target``."""
    for raw in lines:
        line = _strip_newline(raw)
        if target in line:
            yield line


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``grep PATTERN FILE...``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("usage: grep PATTERN FILE...", file=sys.stderr)
        return 1
    target, files = args[0], args[1:]
    try:
        if not files:
            for line in grep(target, sys.stdin):
                print(line)
        else:
            for name in files:
                with open(name, encoding="utf-8", newline="") as f:
                    for line in grep(target, f):
                        print(line)
    except (OSError, UnicodeDecodeError) as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())