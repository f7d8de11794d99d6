"""Depth-first traversal of tree nodes and a key/value iterator built on it."""

from __future__ import annotations

from collections.abc import Iterator as _PyIterator
from dataclasses import dataclass
from typing import Any


@dataclass
class TraversableNode:
    """An in-memory tree node.

    Leaves have ``subtree_height`` 0 and carry a value. Inner nodes carry the
    smallest key of their right subtree, their hash and both children.
    """

    key: bytes
    value: bytes | None = None
    version: int = 0
    subtree_height: int = 0
    size: int = 1
    hash: bytes = b""
    left: TraversableNode | None = None
    right: TraversableNode | None = None


class IteratorError(Exception):
    """Raised or recorded when an iterator cannot work."""


def _is_leaf(node: TraversableNode) -> bool:
    return node.subtree_height == 0


class Traversal:
    """Lazy depth-first traversal over a subtree, limited to a key range.

    Leaves outside ``[start, end)`` (or ``[start, end]`` when ``inclusive``)
    are skipped; inner nodes on the way are always produced. ``post`` selects
    post-order instead of pre-order.
    """

    def __init__(
        self,
        root: TraversableNode | None,
        start: bytes | None = None,
        end: bytes | None = None,
        ascending: bool = True,
        inclusive: bool = False,
        post: bool = False,
    ) -> None:
        self._start = start
        self._end = end
        self._ascending = ascending
        self._inclusive = inclusive
        self._post = post
        self._pending: list[tuple[TraversableNode | None, bool]] = [(root, True)]

    def __iter__(self) -> Traversal:
        return self

    def __next__(self) -> TraversableNode:
        while self._pending:
            node, delayed = self._pending.pop()
            if node is None:
                self._pending.clear()
                raise StopIteration
            if not delayed:
                return node

            start, end = self._start, self._end
            after_start = start is None or start < node.key
            start_or_after = after_start or start == node.key
            before_end = end is None or node.key < end
            if self._inclusive:
                before_end = before_end or node.key == end

            leaf = _is_leaf(node)
            produce = not leaf or (start_or_after and before_end)

            if self._post and produce:
                self._pending.append((node, False))

            if not leaf:
                if self._ascending:
                    if before_end:
                        self._pending.append((node.right, True))
                    if after_start:
                        self._pending.append((node.left, True))
                else:
                    if after_start:
                        self._pending.append((node.left, True))
                    if before_end:
                        self._pending.append((node.right, True))

            if not self._post and produce:
                return node
        raise StopIteration


class Iterator:
    """Iterates the leaves of a tree in key order within ``[start, end)``.

    ``tree`` is any object with a ``root`` attribute (``None`` for an empty
    tree). Passing ``None`` as the tree gives an invalid iterator whose
    :meth:`error` reports the problem.
    """

    def __init__(self, start: bytes | None, end: bytes | None, ascending: bool, tree: Any) -> None:
        self._start = start
        self._end = end
        self._key: bytes | None = None
        self._value: bytes | None = None
        self._valid = False
        self._error: IteratorError | None = None
        self._traversal: Traversal | None = None

        if tree is None:
            self._error = IteratorError(
                "iterator must be created with an immutable tree but the tree was nil"
            )
        else:
            self._valid = True
            self._traversal = Traversal(tree.root, start, end, ascending, False, False)
            self.next()

    def domain(self) -> tuple[bytes | None, bytes | None]:
        """Return the start and end bounds the iterator was created with."""
        return self._start, self._end

    def valid(self) -> bool:
        """Report whether the iterator points at a key/value pair."""
        return self._valid

    def key(self) -> bytes | None:
        return self._key

    def value(self) -> bytes | None:
        return self._value

    def next(self) -> None:
        """Advance to the next leaf, or become invalid when none is left."""
        if self._traversal is None:
            return
        for node in self._traversal:
            if _is_leaf(node):
                self._key, self._value = node.key, node.value
                return
        self._traversal = None
        self._valid = False

    def close(self) -> None:
        """Invalidate the iterator, raising the recorded error if there is one."""
        self._traversal = None
        self._valid = False
        if self._error is not None:
            raise self._error

    def error(self) -> IteratorError | None:
        """Return the recorded error, or None."""
        return self._error

    def is_fast(self) -> bool:
        """This iterator walks the tree itself rather than a flat index."""
        return False

    def __iter__(self) -> _PyIterator[tuple[bytes | None, bytes | None]]:
        while self._valid:
            yield self._key, self._value
            self.next()