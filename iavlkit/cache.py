"""A least-recently-used cache of nodes keyed by their byte keys."""

from __future__ import annotations

from collections import OrderedDict
from typing import Protocol


class CacheNode(Protocol):
    """Anything that can be cached: it exposes its byte key."""

    @property
    def key(self) -> bytes:
        """The node's key."""
        ...


class LRUCache:
    """An LRU cache bounded by element count."""

    def __init__(self, max_element_count: int) -> None:
        self._max = max_element_count
        self._entries: OrderedDict[bytes, CacheNode] = OrderedDict()

    def add(self, node: CacheNode) -> CacheNode | None:
        """Add a node.

        Returns the node it replaced, or the evicted oldest node when the cache
        overflowed, otherwise None.
        """
        if node is None:
            raise ValueError("cannot cache None")
        key = bytes(node.key)
        if key in self._entries:
            old = self._entries[key]
            self._entries[key] = node
            self._entries.move_to_end(key)
            return old
        self._entries[key] = node
        if len(self._entries) > self._max:
            _, oldest = self._entries.popitem(last=False)
            return oldest
        return None

    def get(self, key: bytes) -> CacheNode | None:
        """Return the node for key, marking it recently used, or None."""
        key = bytes(key)
        node = self._entries.get(key)
        if node is not None:
            self._entries.move_to_end(key)
        return node

    def has(self, key: bytes) -> bool:
        """Report whether key is cached, without touching recency."""
        return bytes(key) in self._entries

    def remove(self, key: bytes) -> CacheNode | None:
        """Remove and return the node for key, or None if absent."""
        return self._entries.pop(bytes(key), None)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, (bytes, bytearray)) and self.has(key)