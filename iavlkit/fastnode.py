"""Fast nodes: the latest value of a key, stored outside the tree for quick reads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .encoding import (
    DecodeError,
    decode_bytes,
    decode_varint,
    encode_bytes,
    encode_bytes_size,
    encode_varint,
    encode_varint_size,
)


@dataclass
class FastNode:
    """A key with its current value and the version that last updated it."""

    key: bytes
    version_last_updated_at: int
    value: bytes

    def encoded_size(self) -> int:
        """Return the size of the serialized form in bytes."""
        return encode_varint_size(self.version_last_updated_at) + encode_bytes_size(self.value)

    def to_bytes(self) -> bytes:
        """Serialize the node: a zig-zag varint version, then the length-prefixed value."""
        return encode_varint(self.version_last_updated_at) + encode_bytes(self.value)

    def write_bytes(self, w: BinaryIO) -> None:
        """Write the serialized node to a binary stream."""
        w.write(self.to_bytes())

    @classmethod
    def deserialize(cls, key: bytes, buf: bytes) -> FastNode:
        """Build a node for key from its serialized form."""
        try:
            version, consumed = decode_varint(buf)
        except DecodeError as exc:
            raise DecodeError(f"decoding fastnode.version, {exc}", exc.consumed) from exc
        try:
            value, _ = decode_bytes(buf[consumed:])
        except DecodeError as exc:
            raise DecodeError(f"decoding fastnode.value, {exc}", exc.consumed) from exc
        return cls(key=key, version_last_updated_at=version, value=value)