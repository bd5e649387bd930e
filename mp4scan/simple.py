"""Atoms whose payload is not decoded: only their header is reported."""

from __future__ import annotations

from dataclasses import dataclass

from .base import Atom


@dataclass
class Undef(Atom):
    """A box of a type that is not decoded."""


@dataclass
class Mdat(Atom):
    """Media data box; its payload is left unread."""


@dataclass
class Edts(Atom):
    """Edit box of a track; its payload is left unread."""


@dataclass
class Smhd(Atom):
    """Sound media header box; its payload is left unread."""