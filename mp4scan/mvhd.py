"""The movie header box."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import BinaryIO

from .base import Atom, BaseBox, PrintStyle, printed
from .binary import ParseError, read_u8, read_u24, read_u32, read_u64, skip

# reserved (10), matrix (36), preview time, preview duration, poster time,
# selection time, selection duration (4 each)
_SKIPPED = 10 + 36 + 5 * 4


@dataclass
class Mvhd(Atom):
    """Movie header box: times, time scale and duration of the movie."""

    version: int = printed()
    flags: int = printed()
    creation_time: int = printed()
    modification_time: int = printed()
    timescale: int = printed()
    duration: int = printed()
    current_time: int = printed()
    next_track_id: int = printed()
    duration_sec: timedelta = printed(PrintStyle.STRUCTURE)

    @classmethod
    def parse(cls, base: BaseBox, stream: BinaryIO) -> "Mvhd":
        """Read the movie header fields for version 0 or 1."""
        version = read_u8(stream)
        flags = read_u24(stream)
        if version == 1:
            creation_time = read_u64(stream)
            modification_time = read_u64(stream)
            timescale = read_u32(stream)
            duration = read_u64(stream)
        elif version == 0:
            creation_time = read_u32(stream)
            modification_time = read_u32(stream)
            timescale = read_u32(stream)
            duration = read_u32(stream)
        else:
            raise ParseError("version must be 0 or 1")

        skip(stream, _SKIPPED)
        current_time = read_u32(stream)
        next_track_id = read_u32(stream)

        if timescale == 0:
            raise ParseError("timescale must not be zero")
        duration_sec = timedelta(milliseconds=duration * 1000 // timescale)

        return cls(
            base,
            version,
            flags,
            creation_time,
            modification_time,
            timescale,
            duration,
            current_time,
            next_track_id,
            duration_sec,
        )