"""Text renderings of a tree: its nested shape and its leaf listing."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .traversal import TraversableNode

NodeEncoder = Callable[[bytes, int, bool], str]


def default_node_encoder(ident: bytes, depth: int, is_leaf: bool) -> str:
    """Describe a node as '* ' (leaf) or '- ' (inner) followed by its id in upper-case hex."""
    prefix = "* " if is_leaf else "- "
    if not ident:
        return f"{prefix}<nil>"
    return f"{prefix}{bytes(ident).hex().upper()}"


def render_shape(
    root: TraversableNode | None,
    indent: str,
    encoder: NodeEncoder | None = None,
) -> list[str]:
    """Return one line per node, in key order, each indented by its depth.

    Leaves are described by their key, inner nodes by their hash.
    """
    encode = encoder if encoder is not None else default_node_encoder

    def render(node: TraversableNode | None, depth: int) -> list[str]:
        prefix = indent * depth
        if node is None:
            return [f"{prefix}<nil>"]
        if node.subtree_height == 0:
            return [f"{prefix}{encode(node.key, depth, True)}"]
        here = f"{prefix}{encode(node.hash, depth, False)}"
        return [*render(node.left, depth + 1), here, *render(node.right, depth + 1)]

    return render(root, 0)


def format_leaves(pairs: Iterable[tuple[bytes, bytes]]) -> str:
    """Return the 'Tree{key: value, ...}' listing with lower-case hex keys and values."""
    leaves = ", ".join(f"{bytes(k).hex()}: {bytes(v or b'').hex()}" for k, v in pairs)
    return "Tree{" + leaves + "}"