"""Byte strings guaranteed to hold only ASCII text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


class NotAsciiError(ValueError):
    """Raised when bytes that are not ASCII are offered; ``data`` holds them."""

    def __init__(self, data: bytes) -> None:
        super().__init__(f"not ASCII: {data!r}")
        self.data = data


@dataclass(frozen=True)
class Ascii:
    """An ASCII-encoded string: bytes from 0 to 0x7f only."""

    _data: bytes

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "Ascii":
        """Wrap ``data``, raising NotAsciiError if any byte is not ASCII."""
        raw = bytes(data)
        if not raw.isascii():
            raise NotAsciiError(raw)
        return cls(raw)

    @classmethod
    def from_bytes_unchecked(cls, data: BytesLike) -> "Ascii":
        """Wrap ``data`` without checking it; the caller vouches it is ASCII."""
        return cls(bytes(data))

    def __bytes__(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        return self._data.decode("ascii")

    def __len__(self) -> int:
        return len(self._data)