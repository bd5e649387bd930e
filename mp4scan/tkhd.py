"""The track header box."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .base import Atom, BaseBox, printed
from .binary import (
    ParseError,
    fixed_point_u8,
    fixed_point_u16,
    read_u8,
    read_u16,
    read_u24,
    read_u32,
    read_u64,
    skip,
)

_RESERVED_AFTER_DURATION = 8
_RESERVED_AFTER_VOLUME = 2
_MATRIX = 36


@dataclass
class Tkhd(Atom):
    """Track header box: identity, duration, layout and size of a track."""

    version: int = printed()
    flags: int = printed()
    creation_time: int = printed()
    modification_time: int = printed()
    track_id: int = printed()
    duration: int = printed()
    layer: int = printed()
    alternate_group: int = printed()
    volume: int = printed()
    width: int = printed()
    height: int = printed()

    @classmethod
    def parse(cls, base: BaseBox, stream: BinaryIO) -> "Tkhd":
        """Read the track header fields for version 0 or 1."""
        version = read_u8(stream)
        flags = read_u24(stream)
        if version == 1:
            creation_time = read_u64(stream)
            modification_time = read_u64(stream)
            track_id = read_u32(stream)
            read_u32(stream)  # reserved
            duration = read_u64(stream)
        elif version == 0:
            creation_time = read_u32(stream)
            modification_time = read_u32(stream)
            track_id = read_u32(stream)
            read_u32(stream)  # reserved
            duration = read_u32(stream)
        else:
            raise ParseError("version must be 0 or 1")

        skip(stream, _RESERVED_AFTER_DURATION)
        layer = read_u16(stream)
        alternate_group = read_u16(stream)
        volume = fixed_point_u8(read_u16(stream))
        skip(stream, _RESERVED_AFTER_VOLUME + _MATRIX)
        width = fixed_point_u16(read_u32(stream))
        height = fixed_point_u16(read_u32(stream))

        return cls(
            base,
            version,
            flags,
            creation_time,
            modification_time,
            track_id,
            duration,
            layer,
            alternate_group,
            volume,
            width,
            height,
        )