import io

import pytest

from mp4scan.base import first_box
from mp4scan.binary import ParseError
from mp4scan.boxtype import HEADER_SIZE, BoxType
from mp4scan.media import Dref, Elng, Hdlr, Mdhd, Vmhd


def _box(kind: bytes, payload: bytes) -> bytes:
    return (HEADER_SIZE + len(payload)).to_bytes(4, "big") + kind + payload


def _full(version: int, flags: int) -> bytes:
    return bytes([version]) + flags.to_bytes(3, "big")


def _parse(cls, data: bytes):
    stream = io.BytesIO(data)
    base = first_box(stream)
    return cls.parse(base, stream), stream, base


def _mdhd(version: int) -> bytes:
    wide = 8 if version == 1 else 4
    payload = _full(version, 0)
    payload += b"".join(n.to_bytes(wide, "big") for n in (21, 22, 48000, 96000))
    payload += (0x55C4).to_bytes(2, "big") + (0).to_bytes(2, "big")
    return _box(b"mdhd", payload)


@pytest.mark.parametrize("version", [0, 1])
def test_mdhd(version):
    atom, stream, base = _parse(Mdhd, _mdhd(version))
    assert base.name is BoxType.Mdhd
    assert atom.version == version
    assert atom.creation_time == 21
    assert atom.modification_time == 22
    assert atom.time_scale == 48000
    assert atom.duration == 96000
    assert atom.language == 0x55C4
    assert atom.quality == 0
    assert stream.tell() == base.size


def test_mdhd_bad_version_raises():
    data = bytearray(_mdhd(0))
    data[HEADER_SIZE] = 3
    with pytest.raises(ParseError):
        _parse(Mdhd, bytes(data))


def test_elng_reads_rest_of_box():
    atom, stream, base = _parse(Elng, _box(b"elng", _full(0, 0) + b"en-US\x00"))
    assert base.name is BoxType.Elng
    assert atom.language == "en-US\x00"
    assert stream.tell() == base.size


def test_elng_invalid_utf8_raises():
    with pytest.raises(ParseError):
        _parse(Elng, _box(b"elng", _full(0, 0) + b"\xff\xfe"))


def test_hdlr():
    payload = _full(0, 0) + b"mhlrvide"
    payload += (1).to_bytes(4, "big") + (2).to_bytes(4, "big") + (3).to_bytes(4, "big")
    payload += b"VideoHandler"
    atom, stream, base = _parse(Hdlr, _box(b"hdlr", payload))
    assert atom.component_type == "mhlr"
    assert atom.component_sub == "vide"
    assert atom.component_manufacturer == 1
    assert atom.component_flags == 2
    assert atom.component_mask == 3
    assert atom.component_name == "VideoHandler"
    assert stream.tell() == base.size
    assert "component_name: VideoHandler" in atom.lines()


def test_hdlr_too_small_raises():
    with pytest.raises(ParseError):
        _parse(Hdlr, _box(b"hdlr", _full(0, 0) + b"mhlrvide"))


def test_vmhd():
    payload = _full(0, 1) + (64).to_bytes(2, "big") + (0x000100020003).to_bytes(6, "big")
    atom, stream, base = _parse(Vmhd, _box(b"vmhd", payload))
    assert atom.flags == 1
    assert atom.graphic_mode == 64
    assert atom.opcolor == 0x000100020003
    assert stream.tell() == base.size


def test_dref():
    atom, _, base = _parse(Dref, _box(b"dref", _full(0, 0) + (1).to_bytes(4, "big")))
    assert base.name is BoxType.Dref
    assert atom.version == 0
    assert atom.num_of_entries == 1
    assert "num_of_entries: 1" in atom.lines()


def test_dref_truncated_raises():
    with pytest.raises(ParseError):
        _parse(Dref, _box(b"dref", _full(0, 0) + b"\x00"))