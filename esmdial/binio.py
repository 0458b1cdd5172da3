"""Little-endian binary reading helpers that fail loudly on short reads."""

from __future__ import annotations

import struct
from typing import BinaryIO

__all__ = ["TruncatedError", "read_exact", "read_u32", "read_u16", "read_cstring"]

_U32 = struct.Struct("<I")
_U16 = struct.Struct("<H")


class TruncatedError(EOFError):
    """Raised when a stream ends before the requested data could be read."""


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``stream`` or raise TruncatedError."""
    if size < 0:
        raise ValueError(f"cannot read a negative number of bytes: {size}")
    data = stream.read(size)
    if len(data) != size:
        raise TruncatedError(f"expected {size} bytes, got {len(data)}")
    return data


def read_u32(stream: BinaryIO) -> int:
    """Read an unsigned 32-bit little-endian integer."""
    return _U32.unpack(read_exact(stream, _U32.size))[0]


def read_u16(stream: BinaryIO) -> int:
    """Read an unsigned 16-bit little-endian integer."""
    return _U16.unpack(read_exact(stream, _U16.size))[0]


def read_cstring(stream: BinaryIO) -> bytes:
    """Read a NUL-terminated byte string; the terminator is consumed, not returned."""
    chunks = bytearray()
    while True:
        byte = read_exact(stream, 1)
        if byte == b"\0":
            return bytes(chunks)
        chunks += byte