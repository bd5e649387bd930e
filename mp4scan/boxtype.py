"""Box type codes: the four-character names that identify MP4 boxes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

HEADER_SIZE = 8
"""Size in bytes of a compact box header (32-bit size plus type code)."""


class BoxType(Enum):
    """Box types known by name; each value is the big-endian type code."""

    Ftyp = 0x66747970
    Mvhd = 0x6D766864
    Mfhd = 0x6D666864
    Free = 0x66726565
    Mdat = 0x6D646174
    Moov = 0x6D6F6F76
    Mvex = 0x6D766578
    Mehd = 0x6D656864
    Trex = 0x74726578
    Emsg = 0x656D7367
    Moof = 0x6D6F6F66
    Tkhd = 0x746B6864
    Tfhd = 0x74666864
    Tfdt = 0x74666474
    Edts = 0x65647473
    Mdia = 0x6D646961
    Elst = 0x656C7374
    Mdhd = 0x6D646864
    Hdlr = 0x68646C72
    Minf = 0x6D696E66
    Vmhd = 0x766D6864
    Stbl = 0x7374626C
    Stsd = 0x73747364
    Stts = 0x73747473
    Ctts = 0x63747473
    Stss = 0x73747373
    Stsc = 0x73747363
    Stsz = 0x7374737A
    Stco = 0x7374636F
    Co64 = 0x636F3634
    Trak = 0x7472616B
    Traf = 0x74726166
    Trun = 0x7472756E
    Udta = 0x75647461
    Meta = 0x6D657461
    Dinf = 0x64696E66
    Dref = 0x64726566
    UrlB = 0x75726C20
    Smhd = 0x736D6864
    Avc1 = 0x61766331
    AvcC = 0x61766343
    Hev1 = 0x68657631
    HvcC = 0x68766343
    Mp4a = 0x6D703461
    Esds = 0x65736473
    Tx3g = 0x74783367
    Vpcc = 0x76706343
    Vp09 = 0x76703039
    Data = 0x64617461
    Ilst = 0x696C7374
    Name = 0xA96E616D
    Day = 0xA9646179
    Covr = 0x636F7672
    Desc = 0x64657363
    Wide = 0x77696465
    Elng = 0x656C6E67


@dataclass(frozen=True)
class UnknownBox:
    """A type code that does not belong to any known BoxType."""

    code: int


AnyBoxType = Union[BoxType, UnknownBox]

_BY_CODE = {member.value: member for member in BoxType}


def box_type_from_code(code: int) -> AnyBoxType:
    """Map a 32-bit type code to its BoxType, or to UnknownBox."""
    if not 0 <= code <= 0xFFFFFFFF:
        raise ValueError(f"box type code out of 32-bit range: {code}")
    return _BY_CODE.get(code, UnknownBox(code))


def box_type_code(box_type: AnyBoxType) -> int:
    """Return the 32-bit type code of a box type."""
    if isinstance(box_type, UnknownBox):
        return box_type.code
    return box_type.value


def box_type_name(box_type: AnyBoxType) -> str:
    """Return the label used when printing a box type."""
    if isinstance(box_type, UnknownBox):
        return "UnknownBox"
    return box_type.name