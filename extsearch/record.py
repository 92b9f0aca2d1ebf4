"""Fixed-size record stored in the data files."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator

ITEMS_PER_PAGE = 1000
MAX_TABLE = 1000
DATA2_SIZE = 1000
DATA3_SIZE = 5000

_LAYOUT = struct.Struct(f"<qq{DATA2_SIZE}s{DATA3_SIZE}sqq")
RECORD_SIZE = _LAYOUT.size


def _encode(text: str, size: int, name: str) -> bytes:
    raw = text.encode("utf-8")
    if len(raw) >= size:
        raise ValueError(
            f"{name} needs {len(raw) + 1} bytes, at most {size} are available"
        )
    return raw


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Record:
    """One record: a key, a number, two text fields and two tree links."""

    key: int
    data1: int = 0
    data2: str = ""
    data3: str = ""
    left: int = -1
    right: int = -1

    def pack(self) -> bytes:
        """Return the record's on-disk bytes."""
        try:
            return _LAYOUT.pack(
                self.key,
                self.data1,
                _encode(self.data2, DATA2_SIZE, "data2"),
                _encode(self.data3, DATA3_SIZE, "data3"),
                self.left,
                self.right,
            )
        except struct.error as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def unpack(cls, data: bytes) -> Record:
        """Build a record from exactly RECORD_SIZE bytes."""
        if len(data) != RECORD_SIZE:
            raise ValueError(
                f"a record takes {RECORD_SIZE} bytes, got {len(data)}"
            )
        key, data1, data2, data3, left, right = _LAYOUT.unpack(data)
        return cls(key, data1, _decode(data2), _decode(data3), left, right)


def read_records(stream: BinaryIO) -> Iterator[Record]:
    """Yield every complete record from the stream's current position."""
    while True:
        chunk = stream.read(RECORD_SIZE)
        if len(chunk) < RECORD_SIZE:
            return
        yield Record.unpack(chunk)