"""Big-endian readers and fixed-point helpers for box payloads."""

from __future__ import annotations

import io
from typing import BinaryIO


class ParseError(ValueError):
    """Raised when box data is truncated or malformed."""


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise ParseError."""
    if size < 0:
        raise ParseError(f"cannot read a negative number of bytes: {size}")
    data = stream.read(size)
    if len(data) != size:
        raise ParseError(
            f"unexpected end of data: wanted {size} bytes, got {len(data)}"
        )
    return data


def read_string(stream: BinaryIO, size: int) -> str:
    """Read ``size`` bytes and decode them as UTF-8."""
    data = read_exact(stream, size)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"invalid UTF-8 string: {exc}") from exc


def _read_uint(stream: BinaryIO, width: int) -> int:
    return int.from_bytes(read_exact(stream, width), "big")


def read_u8(stream: BinaryIO) -> int:
    """Read an unsigned 8-bit integer."""
    return _read_uint(stream, 1)


def read_u16(stream: BinaryIO) -> int:
    """Read a big-endian unsigned 16-bit integer."""
    return _read_uint(stream, 2)


def read_u24(stream: BinaryIO) -> int:
    """Read a big-endian unsigned 24-bit integer."""
    return _read_uint(stream, 3)


def read_u32(stream: BinaryIO) -> int:
    """Read a big-endian unsigned 32-bit integer."""
    return _read_uint(stream, 4)


def read_u48(stream: BinaryIO) -> int:
    """Read a big-endian unsigned 48-bit integer."""
    return _read_uint(stream, 6)


def read_u64(stream: BinaryIO) -> int:
    """Read a big-endian unsigned 64-bit integer."""
    return _read_uint(stream, 8)


def skip(stream: BinaryIO, count: int) -> None:
    """Move the stream position forward by ``count`` bytes."""
    stream.seek(count, io.SEEK_CUR)


def fixed_point_u8(raw: int) -> int:
    """Integer part of an unsigned 8.8 fixed-point value."""
    return (raw >> 8) & 0xFF


def fixed_point_u16(raw: int) -> int:
    """Integer part of an unsigned 16.16 fixed-point value."""
    return (raw >> 16) & 0xFFFF