"""Counters for export and import runs."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol


class _ExportedNode(Protocol):
    key: bytes
    value: bytes | None
    height: int


def _format_duration(seconds: float) -> str:
    ms = round(seconds * 1000)
    if ms == 0:
        return "0s"
    sign = "-" if ms < 0 else ""
    ms = abs(ms)
    if ms < 1000:
        return f"{sign}{ms}ms"
    hours, rest = divmod(ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, frac = divmod(rest, 1000)
    sec_text = f"{secs}.{frac:03d}".rstrip("0") if frac else str(secs)
    parts = [sign]
    if hours:
        parts.append(f"{hours}h")
    if hours or minutes:
        parts.append(f"{minutes}m")
    parts.append(f"{sec_text}s")
    return "".join(parts)


@dataclass
class Stats:
    """Node counts, total size and elapsed time of an export or import."""

    nodes: int = 0
    leaf_nodes: int = 0
    size: int = 0
    duration: float = 0.0

    def add(self, other: Stats) -> None:
        """Accumulate another set of statistics into this one."""
        self.nodes += other.nodes
        self.leaf_nodes += other.leaf_nodes
        self.size += other.size
        self.duration += other.duration

    def add_duration_since(self, started: float) -> None:
        """Add the time elapsed since a ``time.monotonic()`` reading."""
        self.duration += time.monotonic() - started

    def add_node(self, node: _ExportedNode) -> None:
        """Count an exported node and its approximate size."""
        self.nodes += 1
        if node.height == 0:
            self.leaf_nodes += 1
        self.size += len(node.key or b"") + len(node.value or b"") + 8 + 1

    def __str__(self) -> str:
        return (
            f"{self.nodes} nodes ({self.leaf_nodes} leaves) in "
            f"{_format_duration(self.duration)} with size {self.size // 1024 // 1024} MB"
        )