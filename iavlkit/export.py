"""Exporting tree nodes in post-order so they can be re-imported into an empty tree."""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass
from typing import Any

from .traversal import Traversal, TraversableNode


@dataclass(frozen=True)
class ExportNode:
    """The data of one exported node."""

    key: bytes
    value: bytes | None
    version: int
    height: int


class ExportDoneError(Exception):
    """Raised by :meth:`Exporter.next` when all nodes have been exported."""

    def __init__(self, message: str = "export is complete") -> None:
        super().__init__(message)


class NotInitializedTreeError(Exception):
    """Raised when an exporter is created for a tree that does not exist."""


_MISSING = object()


class Exporter:
    """Produces a tree's nodes depth-first in post-order (left, right, node).

    ``tree`` is any object with a ``root`` attribute. That order must be kept
    when importing to recreate the same structure.
    """

    def __init__(self, tree: Any) -> None:
        if tree is None:
            raise NotInitializedTreeError("tree is nil: export failed to create an exporter")
        root = getattr(tree, "root", _MISSING)
        if root is _MISSING:
            raise NotInitializedTreeError("tree has no root: export failed to create an exporter")
        self._nodes: Generator[ExportNode, None, None] | None = self._generate(root)

    @staticmethod
    def _generate(root: TraversableNode | None) -> Generator[ExportNode, None, None]:
        for node in Traversal(root, None, None, True, False, True):
            yield ExportNode(
                key=node.key,
                value=node.value,
                version=node.version,
                height=node.subtree_height,
            )

    def next(self) -> ExportNode:
        """Return the next node, raising :class:`ExportDoneError` when finished."""
        if self._nodes is None:
            raise ExportDoneError()
        try:
            return next(self._nodes)
        except StopIteration:
            self._nodes = None
            raise ExportDoneError() from None

    def close(self) -> None:
        """Stop the export. Safe to call more than once."""
        if self._nodes is not None:
            self._nodes.close()
        self._nodes = None

    def __iter__(self) -> Exporter:
        return self

    def __next__(self) -> ExportNode:
        try:
            return self.next()
        except ExportDoneError:
            raise StopIteration from None

    def __enter__(self) -> Exporter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()