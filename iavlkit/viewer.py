"""Formatting helpers for printing tree keys, shapes and versions."""

from __future__ import annotations

from collections.abc import Iterable


def encode_id(ident: bytes) -> str:
    """Return the bytes as text if printable ASCII, otherwise as upper-case hex."""
    ident = bytes(ident)
    if any(b < 0x20 or b >= 0x80 for b in ident):
        return ident.hex().upper()
    return ident.decode("ascii")


def parse_weave_key(key: bytes) -> str:
    """Render a key whose part before the first ':' is ASCII and the rest may be binary."""
    key = bytes(key)
    prefix, sep, ident = key.partition(b":")
    if not sep:
        return encode_id(key)
    return f"{encode_id(prefix)}:{encode_id(ident)}"


def node_encoder(ident: bytes, depth: int, is_leaf: bool) -> str:
    """Describe a node for shape output, marking leaves with '*' and inner nodes with '-'."""
    prefix = f"*{depth} " if is_leaf else f"-{depth} "
    if not ident:
        return f"{prefix}<nil>"
    return f"{prefix}{parse_weave_key(ident)}"


def format_versions(versions: Iterable[int]) -> str:
    """Return the listing of available versions, one per line."""
    lines = ["Available versions:"]
    lines.extend(f"  {version}" for version in versions)
    return "\n".join(lines) + "\n"