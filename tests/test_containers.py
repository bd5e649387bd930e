import io
import struct
from datetime import timedelta

import pytest

from mp4scan.base import first_box
from mp4scan.binary import ParseError
from mp4scan.boxtype import HEADER_SIZE, BoxType, UnknownBox
from mp4scan.containers import ContainerAtom, Dinf, Mdia, Minf, Moov, Trak
from mp4scan.media import Dref, Hdlr
from mp4scan.mvhd import Mvhd
from mp4scan.simple import Undef
from mp4scan.tkhd import Tkhd


def box(kind: bytes, payload: bytes = b"") -> bytes:
    return struct.pack(">I", HEADER_SIZE + len(payload)) + kind + payload


def full(version: int = 0, flags: int = 0) -> bytes:
    return bytes([version]) + flags.to_bytes(3, "big")


def dref_payload(entries: int) -> bytes:
    return full() + struct.pack(">I", entries)


def hdlr_payload(sub: bytes, name: bytes) -> bytes:
    return full() + b"mhlr" + sub + struct.pack(">III", 0, 0, 0) + name


def mvhd_payload(timescale: int, duration: int) -> bytes:
    return (
        full()
        + struct.pack(">IIII", 1, 2, timescale, duration)
        + bytes(66)
        + struct.pack(">II", 0, 2)
    )


def tkhd_payload(track_id: int, width: int, height: int) -> bytes:
    return (
        full()
        + struct.pack(">IIIII", 0, 0, track_id, 0, 100)
        + bytes(8)
        + struct.pack(">HHH", 0, 0, 0x0100)
        + bytes(2)
        + bytes(36)
        + struct.pack(">II", width << 16, height << 16)
    )


def parse_container(cls, data: bytes):
    stream = io.BytesIO(data)
    return cls.parse(first_box(stream), stream)


def test_dinf_reads_dref_child():
    dinf = parse_container(Dinf, box(b"dinf", box(b"dref", dref_payload(3))))
    [dref] = dinf.atoms
    assert isinstance(dref, Dref)
    assert dref.num_of_entries == 3
    assert dref.base.offset == HEADER_SIZE
    assert dref.base.depth == dinf.base.depth + 1


def test_unknown_child_becomes_undef():
    dinf = parse_container(Dinf, box(b"dinf", box(b"zzzz", b"abcd")))
    [child] = dinf.atoms
    assert type(child) is Undef
    assert child.base.name == UnknownBox(int.from_bytes(b"zzzz", "big"))


def test_siblings_follow_each_other():
    data = box(b"dinf", box(b"dref", dref_payload(1)) + box(b"url ", b"\x00\x00\x00\x01"))
    dinf = parse_container(Dinf, data)
    first, second = dinf.atoms
    assert second.base.offset == first.base.offset + first.base.size
    assert second.base.offset + second.base.size == dinf.base.size


def test_mdia_does_not_decode_hdlr():
    payload = hdlr_payload(b"vide", b"name")
    mdia = parse_container(Mdia, box(b"mdia", box(b"hdlr", payload)))
    assert len(mdia.atoms) == 1
    [child] = mdia.atoms
    assert type(child) is Undef
    assert child.base.name is BoxType.Hdlr
    assert child.base.offset == HEADER_SIZE
    assert child.base.size == HEADER_SIZE + len(payload)


def test_minf_decodes_hdlr():
    minf = parse_container(Minf, box(b"minf", box(b"hdlr", hdlr_payload(b"vide", b"name"))))
    [child] = minf.atoms
    assert isinstance(child, Hdlr)
    assert child.component_sub == "vide"
    assert child.component_name == "name"


def test_moov_holds_mvhd_and_trak():
    trak = box(b"trak", box(b"tkhd", tkhd_payload(7, 640, 480)))
    moov = parse_container(Moov, box(b"moov", box(b"mvhd", mvhd_payload(1000, 5000)) + trak))
    mvhd, track = moov.atoms
    assert isinstance(mvhd, Mvhd)
    assert mvhd.duration_sec == timedelta(seconds=5)
    assert isinstance(track, Trak)
    [tkhd] = track.atoms
    assert isinstance(tkhd, Tkhd)
    assert (tkhd.track_id, tkhd.width, tkhd.height) == (7, 640, 480)


def test_depth_grows_with_nesting():
    inner = box(b"dinf", box(b"dref", dref_payload(1)))
    for kind in (b"minf", b"mdia", b"trak", b"moov"):
        inner = box(kind, inner)
    atom = parse_container(Moov, inner)
    depths = [atom.base.depth]
    while isinstance(atom, ContainerAtom):
        atom = atom.atoms[0]
        depths.append(atom.base.depth)
    assert isinstance(atom, Dref)
    assert depths == list(range(len(depths)))


def test_container_stops_at_its_end():
    data = box(b"dinf", box(b"dref", dref_payload(1))) + box(b"free", b"xxxx")
    dinf = parse_container(Dinf, data)
    assert len(dinf.atoms) == 1


def test_empty_container():
    dinf = parse_container(Dinf, box(b"dinf"))
    assert dinf.atoms == []


def test_lines_put_children_after_own_header():
    dinf = parse_container(Dinf, box(b"dinf", box(b"dref", dref_payload(2))))
    assert dinf.lines() == dinf.base.lines() + dinf.atoms[0].lines()


def test_truncated_child_raises():
    data = box(b"dinf", struct.pack(">I", 16) + b"dref" + b"\x00\x00")
    with pytest.raises(ParseError):
        parse_container(Dinf, data)