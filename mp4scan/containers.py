"""Boxes that hold other boxes: movie, track, media and their children."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, ClassVar, Dict, List, Type

from .base import Atom, BaseBox, PrintStyle, printed
from .boxtype import BoxType
from .media import Dref, Elng, Hdlr, Mdhd, Vmhd
from .mvhd import Mvhd
from .simple import Edts, Smhd, Undef
from .tkhd import Tkhd


@dataclass
class ContainerAtom(Atom):
    """A box whose payload is a sequence of child boxes."""

    atoms: List[Atom] = printed(PrintStyle.ATOM_CONTAINER)

    children: ClassVar[Dict[BoxType, Type[Atom]]] = {}
    """Child box types decoded by this container; others become Undef."""

    @classmethod
    def parse(cls, base: BaseBox, stream: BinaryIO) -> "ContainerAtom":
        """Read child boxes until the stream passes the end of this box."""
        end = base.offset + base.size
        child = base.child(stream)
        atoms: List[Atom] = []
        while stream.tell() < end:
            kind = cls.children.get(child.name, Undef)
            atoms.append(kind.parse(child, stream))
            if child.size == 0:
                # A zero size means the box runs to the end; nothing follows it.
                break
            child = child.next(stream)
        return cls(base, atoms)


@dataclass
class Dinf(ContainerAtom):
    """Data information box."""

    children: ClassVar[Dict[BoxType, Type[Atom]]] = {BoxType.Dref: Dref}


@dataclass
class Minf(ContainerAtom):
    """Media information box."""

    children: ClassVar[Dict[BoxType, Type[Atom]]] = {
        BoxType.Smhd: Smhd,
        BoxType.Vmhd: Vmhd,
        BoxType.Hdlr: Hdlr,
        BoxType.Dinf: Dinf,
    }


@dataclass
class Mdia(ContainerAtom):
    """Media box of a track."""

    children: ClassVar[Dict[BoxType, Type[Atom]]] = {
        BoxType.Mdhd: Mdhd,
        BoxType.Elng: Elng,
        BoxType.Minf: Minf,
    }


@dataclass
class Trak(ContainerAtom):
    """Track box."""

    children: ClassVar[Dict[BoxType, Type[Atom]]] = {
        BoxType.Tkhd: Tkhd,
        BoxType.Edts: Edts,
        BoxType.Mdia: Mdia,
    }


@dataclass
class Moov(ContainerAtom):
    """Movie box."""

    children: ClassVar[Dict[BoxType, Type[Atom]]] = {
        BoxType.Mvhd: Mvhd,
        BoxType.Trak: Trak,
    }