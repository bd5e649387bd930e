"""The file type box: major brand, minor version and compatible brands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, List

from .base import Atom, BaseBox, PrintStyle, printed
from .binary import ParseError, read_string, read_u32

_FIXED_PART = 16  # box header + major brand + minor version


@dataclass
class Ftyp(Atom):
    """File type box."""

    major: str = printed()
    minor: int = printed()
    brands: List[str] = printed(PrintStyle.ITER)

    @classmethod
    def parse(cls, base: BaseBox, stream: BinaryIO) -> "Ftyp":
        """Read the brands that follow the box header."""
        if base.size < _FIXED_PART:
            raise ParseError(f"ftyp box too small: {base.size} bytes")
        major = read_string(stream, 4)
        minor = read_u32(stream)
        brand_count = (base.size - _FIXED_PART) // 4
        brands = [read_string(stream, 4) for _ in range(brand_count)]
        return cls(base, major, minor, brands)