import io

import pytest

from errors import TruncatedData
from util import (
    floorDiv, floorMod, getBlockAsInteger, getIntegerAsBlock,
    readBytes, readString, readU8, readU16,
)


def test_readers_are_big_endian():
    f = io.BytesIO(b"\x01\x02\x03\xff\xfe")
    assert readU8(f) == 1
    assert readU16(f) == 0x0203
    assert readU16(f) == 0xFFFE


def test_read_string():
    f = io.BytesIO(b"\x00\x0ddefault:stone\x00\x00")
    assert readString(f) == "default:stone"
    assert readString(f) == ""


def test_short_reads_raise():
    with pytest.raises(TruncatedData):
        readU16(io.BytesIO(b"\x01"))
    with pytest.raises(TruncatedData):
        readBytes(io.BytesIO(b"abc"), 4)
    with pytest.raises(TruncatedData):
        readString(io.BytesIO(b"\x00\x05ab"))


@pytest.mark.parametrize("a, div, mod", [
    (0, 0, 0),
    (15, 0, 15),
    (16, 1, 0),
    (-1, -1, 15),
    (-16, -1, 0),
    (-17, -2, 15),
])
def test_floor_div_and_mod(a, div, mod):
    assert floorDiv(a, 16) == div
    assert floorMod(a, 16) == mod
    assert floorDiv(a, 16) * 16 + floorMod(a, 16) == a


@pytest.mark.parametrize("pos", [
    (0, 0, 0),
    (-1, -1, -1),
    (2047, -2048, 5),
    (-30, 12, 100),
])
def test_block_key(pos):
    assert getIntegerAsBlock(getBlockAsInteger(*pos)) == pos


def test_block_key_layout():
    assert getBlockAsInteger(1, 2, 3) == 3 * 0x1000000 + 2 * 0x1000 + 1
