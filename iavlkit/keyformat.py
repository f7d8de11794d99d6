"""Fixed-width, lexicographically sortable byte keys with a one-byte prefix."""

from __future__ import annotations

from .hexbytes import bytes_to_str

_UINT64_MASK = (1 << 64) - 1
_INT64_MIN = -(1 << 63)


def _prefix_byte(prefix: int | str | bytes) -> int:
    if isinstance(prefix, bool):
        raise TypeError("prefix must be a single byte")
    if isinstance(prefix, int):
        if not 0 <= prefix <= 0xFF:
            raise ValueError(f"prefix {prefix} does not fit in a byte")
        return prefix
    if isinstance(prefix, str):
        prefix = prefix.encode("latin-1")
    if isinstance(prefix, (bytes, bytearray)) and len(prefix) == 1:
        return prefix[0]
    raise TypeError("prefix must be a single byte")


def _format(arg: object) -> bytes:
    if isinstance(arg, bool):
        raise TypeError(f"KeyFormat cannot format value of type bool: {arg}")
    if isinstance(arg, int):
        if not _INT64_MIN <= arg <= _UINT64_MASK:
            raise ValueError(f"value {arg} does not fit in 64 bits")
        return (arg & _UINT64_MASK).to_bytes(8, "big")
    if isinstance(arg, (bytes, bytearray)):
        return bytes(arg)
    raise TypeError(f"KeyFormat cannot format value of type {type(arg).__name__}: {arg!r}")


def _scan(kind: object, value: bytes) -> int | bytes:
    if kind in (bytes, "bytes"):
        return value
    if kind in (int, "int64", "uint64"):
        if len(value) < 8:
            raise ValueError(f"segment {value.hex().upper()} is shorter than 8 bytes")
        return int.from_bytes(value[:8], "big", signed=kind != "uint64")
    raise TypeError(f"KeyFormat cannot scan into {kind!r}")


class KeyFormat:
    """A key layout: a prefix byte followed by fixed-width segments.

    A width of 0 is allowed for the last segment only, and makes it unbounded.
    """

    def __init__(self, prefix: int | str | bytes, *args: int) -> None:
        layout = list(args)
        for index, width in enumerate(layout):
            if width < 0:
                raise ValueError("segment widths cannot be negative")
            if width == 0 and index != len(layout) - 1:
                raise ValueError("Only the last item in a key format can be 0")
        self._prefix = _prefix_byte(prefix)
        self._layout = layout

    def key_bytes(self, *args: bytes) -> bytes:
        """Build a key from raw segments, left-padding each to its width."""
        if len(args) > len(self._layout):
            raise ValueError(
                f"KeyFormat.key_bytes() is provided with {len(args)} segments "
                f"but format only has {len(self._layout)} segments"
            )
        out = bytearray([self._prefix])
        for index, (segment, width) in enumerate(zip(args, self._layout)):
            segment = bytes(segment)
            if width == 0:
                out += segment
                continue
            if len(segment) > width:
                raise ValueError(
                    f"length of segment {segment.hex().upper()} provided to KeyFormat.key_bytes() "
                    f"is longer than the {width} bytes required by layout for segment {index}"
                )
            out += bytes(width - len(segment)) + segment
        return bytes(out)

    def key(self, *args: int | bytes) -> bytes:
        """Build a key from integers (as 8-byte big-endian) and byte strings.

        With no arguments the result is the bare prefix.
        """
        if len(args) > len(self._layout):
            raise ValueError(
                f"KeyFormat.key() is provided with {len(args)} args "
                f"but format only has {len(self._layout)} segments"
            )
        return self.key_bytes(*(_format(arg) for arg in args))

    def scan_bytes(self, key: bytes) -> list[bytes]:
        """Split a key into its segments; a short key yields fewer segments."""
        segments: list[bytes] = []
        end = 1
        for width in self._layout:
            end += width
            if end > len(key):
                break
            if width == 0:
                segments.append(bytes(key[end:]))
                break
            segments.append(bytes(key[end - width:end]))
        return segments

    def scan(self, key: bytes, *args: object) -> tuple[int | bytes, ...]:
        """Decode the leading segments of key.

        Each argument names how to read its segment: ``int`` or ``"int64"`` for a
        signed integer, ``"uint64"`` for an unsigned one, ``bytes`` or ``"bytes"``
        for the raw segment.
        """
        segments = self.scan_bytes(key)
        if len(args) > len(segments):
            raise ValueError(
                f"KeyFormat.scan() is provided with {len(args)} args but format only has "
                f"{len(segments)} segments in key {bytes(key).hex().upper()}"
            )
        return tuple(_scan(kind, segment) for kind, segment in zip(args, segments))

    def prefix(self) -> str:
        """Return the prefix byte as a one-character string."""
        return bytes_to_str(bytes([self._prefix]))