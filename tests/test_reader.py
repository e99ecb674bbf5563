import struct

import pytest

from doglookup.errors import TruncatedDataError
from doglookup.reader import Reader


def test_reads_integers_in_order():
    data = struct.pack(">BHI", 7, 513, 70000)
    reader = Reader(data)
    assert reader.read_u8() == 7
    assert reader.read_u16() == 513
    assert reader.read_u32() == 70000
    assert reader.position == len(data)
    assert reader.remaining == 0


def test_big_endian_u16():
    assert Reader(b"\x12\x34").read_u16() == 0x1234


def test_read_exact_returns_slice():
    reader = Reader(b"abcdef")
    assert reader.read_exact(3) == b"abc"
    assert reader.read_exact(3) == b"def"


def test_starting_position():
    reader = Reader(b"\x00\x00\x2a", 2)
    assert reader.read_u8() == 0x2A


def test_empty_buffer_raises():
    with pytest.raises(TruncatedDataError):
        Reader(b"").read_u8()


def test_short_buffer_raises_and_keeps_position():
    reader = Reader(b"\x01\x02\x03")
    with pytest.raises(TruncatedDataError):
        reader.read_u32()
    assert reader.position == 0


def test_position_past_end_raises():
    reader = Reader(b"\x01\x02", 10)
    with pytest.raises(TruncatedDataError):
        reader.read_u8()


def test_zero_length_read_is_empty():
    reader = Reader(b"\x01")
    assert reader.read_exact(0) == b""
    assert reader.position == 0