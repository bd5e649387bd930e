"""Boxes found inside a track's media box."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Tuple

from .base import Atom, BaseBox, printed
from .binary import ParseError, read_string, read_u8, read_u16, read_u24, read_u32, read_u48, read_u64
from .boxtype import HEADER_SIZE

_FULL_BOX_HEADER = HEADER_SIZE + 1 + 3


def _version_and_flags(stream: BinaryIO) -> Tuple[int, int]:
    return read_u8(stream), read_u24(stream)


def _remaining(base: BaseBox, used: int) -> int:
    if base.size < used:
        raise ParseError(
            f"{base.size}-byte box is smaller than its {used}-byte fixed part"
        )
    return base.size - used


@dataclass
class Mdhd(Atom):
    """Media header box."""

    version: int = printed()
    flags: int = printed()
    creation_time: int = printed()
    modification_time: int = printed()
    time_scale: int = printed()
    duration: int = printed()
    language: int = printed()
    quality: int = printed()

    @classmethod
    def parse(cls, base: BaseBox, stream: BinaryIO) -> "Mdhd":
        """Read the media header fields for version 0 or 1."""
        version, flags = _version_and_flags(stream)
        if version == 1:
            read_time = read_u64
        elif version == 0:
            read_time = read_u32
        else:
            raise ParseError("version must be 0 or 1")
        creation_time = read_time(stream)
        modification_time = read_time(stream)
        time_scale = read_time(stream)
        duration = read_time(stream)
        language = read_u16(stream)
        quality = read_u16(stream)
        return cls(
            base,
            version,
            flags,
            creation_time,
            modification_time,
            time_scale,
            duration,
            language,
            quality,
        )


@dataclass
class Elng(Atom):
    """Extended language tag box."""

    version: int = printed()
    flags: int = printed()
    language: str = printed()

    @classmethod
    def parse(cls, base: BaseBox, stream: BinaryIO) -> "Elng":
        """Read the language tag that fills the rest of the box."""
        version, flags = _version_and_flags(stream)
        language = read_string(stream, _remaining(base, _FULL_BOX_HEADER))
        return cls(base, version, flags, language)


@dataclass
class Hdlr(Atom):
    """Handler reference box."""

    version: int = printed()
    flags: int = printed()
    component_type: str = printed()
    component_sub: str = printed()
    component_manufacturer: int = printed()
    component_flags: int = printed()
    component_mask: int = printed()
    component_name: str = printed()

    @classmethod
    def parse(cls, base: BaseBox, stream: BinaryIO) -> "Hdlr":
        """Read the handler fields and the name that fills the rest of the box."""
        version, flags = _version_and_flags(stream)
        component_type = read_string(stream, 4)
        component_sub = read_string(stream, 4)
        component_manufacturer = read_u32(stream)
        component_flags = read_u32(stream)
        component_mask = read_u32(stream)
        name_size = _remaining(base, _FULL_BOX_HEADER + 20)
        component_name = read_string(stream, name_size)
        return cls(
            base,
            version,
            flags,
            component_type,
            component_sub,
            component_manufacturer,
            component_flags,
            component_mask,
            component_name,
        )


@dataclass
class Vmhd(Atom):
    """Video media header box."""

    version: int = printed()
    flags: int = printed()
    graphic_mode: int = printed()
    opcolor: int = printed()

    @classmethod
    def parse(cls, base: BaseBox, stream: BinaryIO) -> "Vmhd":
        """Read the graphics mode and the 48-bit opcolor."""
        version, flags = _version_and_flags(stream)
        graphic_mode = read_u16(stream)
        opcolor = read_u48(stream)
        return cls(base, version, flags, graphic_mode, opcolor)


@dataclass
class Dref(Atom):
    """Data reference box; only the entry count is read."""

    version: int = printed()
    flags: int = printed()
    num_of_entries: int = printed()

    @classmethod
    def parse(cls, base: BaseBox, stream: BinaryIO) -> "Dref":
        """Read the version, flags and number of entries."""
        version, flags = _version_and_flags(stream)
        num_of_entries = read_u32(stream)
        return cls(base, version, flags, num_of_entries)