"""Binary search tree stored record by record in a file."""

from __future__ import annotations

import os
from dataclasses import replace
from typing import BinaryIO, Optional, Union

from extsearch.record import RECORD_SIZE, Record


def create_binary_tree_file(path: Union[str, os.PathLike]) -> None:
    """Create an empty tree file, truncating any existing one."""
    with open(path, "wb"):
        pass


def _read_at(stream: BinaryIO, index: int) -> Record:
    stream.seek(index * RECORD_SIZE)
    chunk = stream.read(RECORD_SIZE)
    if len(chunk) < RECORD_SIZE:
        raise ValueError(f"no record at position {index}")
    return Record.unpack(chunk)


def _write_at(stream: BinaryIO, index: int, record: Record) -> None:
    stream.seek(index * RECORD_SIZE)
    stream.write(record.pack())


def insert_into_tree(record: Record, stream: BinaryIO) -> bool:
    """Append a record and link it into the tree; False if the key exists.

    Links are record positions in the file; -1 means no child.
    """
    end = stream.seek(0, os.SEEK_END)
    if end % RECORD_SIZE:
        raise ValueError("tree file does not hold whole records")
    new_index = end // RECORD_SIZE
    node = replace(record, left=-1, right=-1)
    if new_index == 0:
        _write_at(stream, 0, node)
        return True

    current_index = 0
    while True:
        current = _read_at(stream, current_index)
        if record.key == current.key:
            return False
        if record.key > current.key:
            child = current.right
            linked = replace(current, right=new_index)
        else:
            child = current.left
            linked = replace(current, left=new_index)
        if child == -1:
            _write_at(stream, current_index, linked)
            _write_at(stream, new_index, node)
            return True
        current_index = child


def search_tree(key: int, stream: BinaryIO) -> Optional[Record]:
    """Return the record with the key, or None."""
    if stream.seek(0, os.SEEK_END) < RECORD_SIZE:
        return None
    index = 0
    while index != -1:
        current = _read_at(stream, index)
        if key == current.key:
            return current
        index = current.right if key > current.key else current.left
    return None