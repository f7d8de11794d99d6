"""Byte strings that render as upper-case hex, and lossless bytes/str conversion."""

from __future__ import annotations

import binascii


class HexBytes(bytes):
    """Bytes whose text and JSON forms are upper-case hexadecimal."""

    def to_json(self) -> str:
        """Return the JSON string literal holding the upper-case hex form."""
        return f'"{self}"'

    @classmethod
    def from_json(cls, data: str | bytes) -> HexBytes:
        """Parse a JSON string literal of hex digits."""
        if isinstance(data, (bytes, bytearray)):
            try:
                text = bytes(data).decode("ascii")
            except UnicodeDecodeError as exc:
                raise ValueError(f"invalid hex string: {data!r}") from exc
        else:
            text = data
        if len(text) < 2 or text[0] != '"' or text[-1] != '"':
            raise ValueError(f"invalid hex string: {text}")
        try:
            return cls(binascii.unhexlify(text[1:-1]))
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"invalid hex string: {text}") from exc

    def __str__(self) -> str:
        return self.hex().upper()

    def __repr__(self) -> str:
        return f"HexBytes({str(self)!r})"

    def __format__(self, spec: str) -> str:
        if spec == "p":
            return f"0x{id(self):x}"
        return str(self)


def bytes_to_str(b: bytes) -> str:
    """Convert raw bytes to a str without losing any byte values."""
    return bytes(b).decode("utf-8", "surrogateescape")


def str_to_bytes(s: str) -> bytes:
    """Convert a str produced by :func:`bytes_to_str` (or any text) back to bytes."""
    return s.encode("utf-8", "surrogateescape")