from ipaddress import IPv4Address

import pytest

from doglookup.errors import MandatedLength, TruncatedDataError, WrongRecordLengthError
from doglookup.reader import Reader
from doglookup.records.a import A


def test_parses():
    buf = bytes([0x7F, 0x00, 0x00, 0x01])
    assert A.read(len(buf), Reader(buf)) == A(IPv4Address("127.0.0.1"))


def test_record_too_short():
    buf = bytes([0x7F, 0x00, 0x00])
    with pytest.raises(WrongRecordLengthError) as excinfo:
        A.read(len(buf), Reader(buf))
    assert excinfo.value == WrongRecordLengthError(3, MandatedLength.exactly(4))


def test_record_too_long():
    buf = bytes([0x7F, 0x00, 0x00, 0x00, 0x01])
    with pytest.raises(WrongRecordLengthError) as excinfo:
        A.read(len(buf), Reader(buf))
    assert excinfo.value == WrongRecordLengthError(5, MandatedLength.exactly(4))


def test_record_empty():
    with pytest.raises(WrongRecordLengthError) as excinfo:
        A.read(0, Reader(b""))
    assert excinfo.value == WrongRecordLengthError(0, MandatedLength.exactly(4))


def test_buffer_ends_abruptly():
    with pytest.raises(TruncatedDataError):
        A.read(4, Reader(bytes([0x7F, 0x00])))


def test_reads_at_reader_position():
    reader = Reader(bytes([0xFF, 0xFF, 0x0A, 0x00, 0x00, 0x02]), 2)
    assert A.read(4, reader).address == IPv4Address("10.0.0.2")
    assert reader.position == 6