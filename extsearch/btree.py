"""In-memory B-tree of integer keys."""

from __future__ import annotations

from bisect import bisect_left, insort
from dataclasses import dataclass, field
from typing import Iterator, Optional

DEFAULT_ORDER = 5


@dataclass
class Page:
    """A tree node: sorted keys and one more child than keys."""

    keys: list[int] = field(default_factory=list)
    children: list[Optional[Page]] = field(default_factory=lambda: [None])


class BTree:
    """B-tree whose pages hold between ``order`` and ``2 * order`` keys."""

    def __init__(self, order: int = DEFAULT_ORDER) -> None:
        if order < 1:
            raise ValueError("order must be at least 1")
        self.order = order
        self.root: Optional[Page] = None

    @property
    def max_keys(self) -> int:
        return 2 * self.order

    def search(self, key: int) -> bool:
        """Return whether the key is stored in the tree."""
        page = self.root
        while page is not None:
            pos = bisect_left(page.keys, key)
            if pos < len(page.keys) and page.keys[pos] == key:
                return True
            page = page.children[pos]
        return False

    def __contains__(self, key: int) -> bool:
        return self.search(key)

    def insert(self, key: int) -> bool:
        """Insert a key; return False if it was already present."""
        outcome = self._insert(key, self.root)
        if outcome is None:
            return False
        grew, up_key, right = outcome
        if grew:
            self.root = Page([up_key], [self.root, right])
        return True

    def _insert(
        self, key: int, page: Optional[Page]
    ) -> Optional[tuple[bool, int, Optional[Page]]]:
        if page is None:
            return True, key, None
        pos = bisect_left(page.keys, key)
        if pos < len(page.keys) and page.keys[pos] == key:
            return None
        outcome = self._insert(key, page.children[pos])
        if outcome is None:
            return None
        grew, up_key, right = outcome
        if not grew:
            return outcome
        slot = bisect_left(page.keys, up_key)
        if len(page.keys) < self.max_keys:
            insort(page.keys, up_key)
            page.children.insert(slot + 1, right)
            return False, up_key, None
        keys = page.keys[:slot] + [up_key] + page.keys[slot:]
        children = page.children[: slot + 1] + [right] + page.children[slot + 1 :]
        m = self.order
        sibling = Page(keys[m + 1 :], children[m + 1 :])
        page.keys = keys[:m]
        page.children = children[: m + 1]
        return True, keys[m], sibling

    def __iter__(self) -> Iterator[int]:
        yield from self._walk(self.root)

    def _walk(self, page: Optional[Page]) -> Iterator[int]:
        if page is None:
            return
        for child, key in zip(page.children, page.keys):
            yield from self._walk(child)
            yield key
        yield from self._walk(page.children[-1])

    def format(self) -> str:
        """Keys in ascending order, each followed by a space."""
        return "".join(f"{key} " for key in self)