"""Indexed sequential search over a file of records sorted by key."""

from __future__ import annotations

import os
from itertools import takewhile
from typing import BinaryIO, Optional, Sequence

from extsearch.record import (
    ITEMS_PER_PAGE,
    MAX_TABLE,
    RECORD_SIZE,
    Record,
    read_records,
)

_PAGE_BYTES = ITEMS_PER_PAGE * RECORD_SIZE


def build_page_index(stream: BinaryIO) -> list[int]:
    """Return the first key of every page of the file."""
    index: list[int] = []
    stream.seek(0)
    while True:
        first = stream.read(RECORD_SIZE)
        if len(first) < RECORD_SIZE:
            return index
        if len(index) == MAX_TABLE:
            raise ValueError(f"file has more than {MAX_TABLE} pages")
        index.append(Record.unpack(first).key)
        stream.seek(len(index) * _PAGE_BYTES)


def indexed_search(
    index: Sequence[int], key: int, stream: BinaryIO
) -> Optional[Record]:
    """Find the record with the key using the page index, or return None."""
    page = sum(1 for _ in takewhile(lambda first: first <= key, index))
    if page == 0:
        return None
    if page < len(index):
        count = ITEMS_PER_PAGE
    else:
        total = stream.seek(0, os.SEEK_END) // RECORD_SIZE
        count = total % ITEMS_PER_PAGE or ITEMS_PER_PAGE
    stream.seek((page - 1) * _PAGE_BYTES)
    for _, record in zip(range(count), read_records(stream)):
        if record.key == key:
            return record
    return None