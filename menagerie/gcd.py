"""Greatest common divisor of unsigned integers, with a command-line front end."""

from __future__ import annotations

import re
import sys
from functools import reduce
from typing import Sequence

_U64_MAX = 2**64 - 1
_U64_PATTERN = re.compile(r"\+?[0-9]+")


def gcd(n: int, m: int) -> int:
    """Return the greatest common divisor of two positive integers."""
    if n == 0 or m == 0:
        raise ValueError("gcd arguments must be non-zero")
    while m != 0:
        if m < n:
            n, m = m, n
        m %= n
    return n


def _parse_u64(text: str) -> int:
    """Parse an unsigned 64-bit decimal integer, rejecting anything else."""
    if not _U64_PATTERN.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value > _U64_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greatest common divisor of the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        numbers = [_parse_u64(arg) for arg in args]
    except ValueError as exc:
        print(f"error parsing argument: {exc}", file=sys.stderr)
        return 1

    if not numbers:
        print("Usage: gcd NUMBER ...", file=sys.stderr)
        return 1

    try:
        divisor = reduce(gcd, numbers)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"The greatest common divisor of {numbers} is {divisor}")
    return 0


if __name__ == "__main__":
    sys.exit(main())