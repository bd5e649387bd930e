"""Box headers and the common atom base with its printed report."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, BinaryIO, List, Optional, TextIO, Tuple

from .binary import ParseError, read_exact
from .boxtype import AnyBoxType, UnknownBox, box_type_from_code, box_type_name

_SEPARATOR = "----------------------------------------"
_STYLE_KEY = "print_style"


class PrintStyle(Enum):
    """How a field of an atom appears in the printed report."""

    PRINT = "print"
    ITER = "iter"
    STRUCTURE = "structure"
    ATOM_CONTAINER = "atom_container"


def printed(style: PrintStyle = PrintStyle.PRINT) -> Any:
    """Declare a dataclass field that appears in the atom's report."""
    return field(metadata={_STYLE_KEY: PrintStyle(style)})


def parse_header(stream: BinaryIO) -> Tuple[AnyBoxType, int]:
    """Read a box header; at end of data return (UnknownBox(0), 0)."""
    header = stream.read(8)
    if len(header) < 8:
        return UnknownBox(0), 0
    size = int.from_bytes(header[:4], "big")
    name = box_type_from_code(int.from_bytes(header[4:], "big"))
    if size != 1:
        return name, size
    largesize = int.from_bytes(read_exact(stream, 8), "big")
    if largesize == 0:
        return name, 0
    if largesize < 16:
        raise ParseError("64-bit box size too small")
    return name, largesize


@dataclass(frozen=True)
class BaseBox:
    """Position, size, type and nesting depth of one box."""

    offset: int
    size: int
    name: AnyBoxType
    depth: int = 0

    def next(self, stream: BinaryIO) -> "BaseBox":
        """Read the header of the sibling box that follows this one."""
        offset = self.offset + self.size
        stream.seek(offset)
        name, size = parse_header(stream)
        return BaseBox(offset, size, name, self.depth)

    def child(self, stream: BinaryIO) -> "BaseBox":
        """Read the header of a child box at the current stream position."""
        offset = stream.tell()
        name, size = parse_header(stream)
        return BaseBox(offset, size, name, self.depth + 1)

    def indent(self) -> str:
        """Indentation prefix for this box's depth."""
        return "\t" * self.depth

    def lines(self) -> List[str]:
        """Report lines describing this box."""
        indent = self.indent()
        return [
            _SEPARATOR,
            f"{indent}name: {box_type_name(self.name)}",
            f"{indent}offset: {self.offset}",
            f"{indent}size: {self.size}",
        ]

    def print(self, out: Optional[TextIO] = None) -> None:
        """Write this box's report lines to ``out`` (standard output by default)."""
        _write_lines(self.lines(), out)

    def __str__(self) -> str:
        return f"({box_type_name(self.name)}, {self.size})"


def first_box(stream: BinaryIO) -> BaseBox:
    """Read the header of the first top-level box of a stream."""
    name, size = parse_header(stream)
    return BaseBox(0, size, name, 0)


def _write_lines(lines: List[str], out: Optional[TextIO]) -> None:
    target = sys.stdout if out is None else out
    for line in lines:
        print(line, file=target)


@dataclass
class Atom:
    """A parsed box; subclasses declare report fields with ``printed``."""

    base: BaseBox

    @classmethod
    def parse(cls, base: BaseBox, stream: BinaryIO) -> "Atom":
        """Build the atom from its header; the default reads no payload."""
        return cls(base)

    def lines(self) -> List[str]:
        """Report lines: the box header followed by the printed fields."""
        result = self.base.lines()
        indent = self.base.indent()
        for spec in fields(self):
            style = spec.metadata.get(_STYLE_KEY)
            if style is None:
                continue
            value = getattr(self, spec.name)
            result.extend(_field_lines(indent, spec.name, value, style))
        return result

    def print_comp(self, out: Optional[TextIO] = None) -> None:
        """Write the report to ``out`` (standard output by default)."""
        _write_lines(self.lines(), out)


def _field_lines(indent: str, name: str, value: Any, style: PrintStyle) -> List[str]:
    if style is PrintStyle.PRINT:
        return [f"{indent}{name}: {value}"]
    if style is PrintStyle.STRUCTURE:
        return [f"{indent}{name}: {value!r}"]
    if style is PrintStyle.ITER:
        items = [f"{indent}\t{item}," for item in value]
        return [f"{indent}<{name}>", *items, f"{indent}</{name}>"]
    return [line for atom in value for line in atom.lines()]