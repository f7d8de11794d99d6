"""Varint and length-prefixed byte encodings used by the tree's storage format."""

from __future__ import annotations

MAX_VARINT_LEN64 = 10
_UINT64_LIMIT = 1 << 64
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class DecodeError(ValueError):
    """Raised when encoded data cannot be decoded.

    ``consumed`` holds the number of input bytes read before the failure.
    """

    def __init__(self, message: str, consumed: int = 0) -> None:
        super().__init__(message)
        self.consumed = consumed


def decode_uvarint(bz: bytes) -> tuple[int, int]:
    """Decode an unsigned varint, returning the value and the number of bytes read."""
    value = 0
    shift = 0
    for index, byte in enumerate(bz):
        if index == MAX_VARINT_LEN64:
            raise DecodeError("EOF decoding uvarint", index + 1)
        if byte < 0x80:
            if index == MAX_VARINT_LEN64 - 1 and byte > 1:
                raise DecodeError("EOF decoding uvarint", index + 1)
            return value | (byte << shift), index + 1
        value |= (byte & 0x7F) << shift
        shift += 7
    raise DecodeError("buffer too small", 0)


def decode_varint(bz: bytes) -> tuple[int, int]:
    """Decode a zig-zag signed varint, returning the value and the number of bytes read."""
    try:
        unsigned, consumed = decode_uvarint(bz)
    except DecodeError as exc:
        message = "EOF decoding varint" if exc.consumed else str(exc)
        raise DecodeError(message, exc.consumed) from exc
    value = unsigned >> 1
    if unsigned & 1:
        value = ~value
    return value, consumed


def decode_bytes(bz: bytes) -> tuple[bytes, int]:
    """Decode a varint length-prefixed byte string.

    Returns the bytes and the total number of input bytes read.
    """
    size, consumed = decode_uvarint(bz)
    if size >= _INT64_MAX:
        raise DecodeError(f"invalid out of range length {size} decoding []byte", consumed)
    end = consumed + size
    if len(bz) < end:
        raise DecodeError(f"insufficient bytes decoding []byte of length {size}", consumed)
    return bytes(bz[consumed:end]), end


def encode_uvarint(u: int) -> bytes:
    """Encode an unsigned 64-bit integer as a varint."""
    if not 0 <= u < _UINT64_LIMIT:
        raise ValueError(f"value {u} does not fit in an unsigned 64-bit integer")
    out = bytearray()
    while u >= 0x80:
        out.append((u & 0x7F) | 0x80)
        u >>= 7
    out.append(u)
    return bytes(out)


def encode_varint(i: int) -> bytes:
    """Encode a signed 64-bit integer as a zig-zag varint."""
    if not _INT64_MIN <= i <= _INT64_MAX:
        raise ValueError(f"value {i} does not fit in a signed 64-bit integer")
    unsigned = (i << 1) if i >= 0 else ((~i) << 1) | 1
    return encode_uvarint(unsigned)


def encode_bytes(bz: bytes) -> bytes:
    """Length-prefix a byte string with a varint."""
    return encode_uvarint(len(bz)) + bytes(bz)


def encode_uvarint_size(u: int) -> int:
    """Return the encoded size of an unsigned varint."""
    if u == 0:
        return 1
    return (u.bit_length() + 6) // 7


def encode_varint_size(i: int) -> int:
    """Return the encoded size of a signed varint."""
    return len(encode_varint(i))


def encode_bytes_size(bz: bytes) -> int:
    """Return the encoded size of a length-prefixed byte string."""
    return encode_uvarint_size(len(bz)) + len(bz)