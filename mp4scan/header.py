"""The top level of an MP4 file: the sequence of its outermost boxes."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from os import PathLike
from typing import BinaryIO, Dict, List, Optional, TextIO, Type, Union

from .base import Atom, first_box
from .boxtype import BoxType, UnknownBox
from .containers import Moov
from .ftyp import Ftyp
from .simple import Mdat, Undef

_TOP_LEVEL: Dict[BoxType, Type[Atom]] = {
    BoxType.Ftyp: Ftyp,
    BoxType.Moov: Moov,
    BoxType.Mdat: Mdat,
}


@dataclass
class Mp4Header:
    """The outermost boxes of an MP4 file, parsed in file order."""

    atoms: List[Atom] = field(default_factory=list)

    @classmethod
    def parse(cls, path: Union[str, "PathLike[str]"]) -> "Mp4Header":
        """Parse the file at ``path``."""
        with open(path, "rb") as stream:
            return cls.parse_stream(stream)

    @classmethod
    def parse_stream(cls, stream: BinaryIO) -> "Mp4Header":
        """Parse boxes from a seekable binary stream positioned at its start.

        Parsing stops at the end of data or at the first box of unknown type.
        """
        atoms: List[Atom] = []
        current = first_box(stream)
        while not isinstance(current.name, UnknownBox):
            kind = _TOP_LEVEL.get(current.name, Undef)
            atoms.append(kind.parse(current, stream))
            if current.size == 0:
                # A zero size means the box runs to the end of the file.
                break
            current = current.next(stream)
        return cls(atoms)

    def lines(self) -> List[str]:
        """Report lines of every box in order."""
        return [line for atom in self.atoms for line in atom.lines()]

    def print_comp(self, out: Optional[TextIO] = None) -> None:
        """Write the report to ``out`` (standard output by default)."""
        target = sys.stdout if out is None else out
        for line in self.lines():
            print(line, file=target)