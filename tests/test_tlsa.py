import pytest

from doglookup.errors import (
    MandatedLength,
    TruncatedDataError,
    WrongRecordLengthError,
)
from doglookup.reader import Reader
from doglookup.records.tlsa import TLSA


def test_parses():
    buf = bytes([0x03, 0x01, 0x01, 0x05, 0x95, 0x98, 0x11, 0x22, 0x33])
    assert TLSA.read(len(buf), Reader(buf)) == TLSA(
        certificate_usage=3,
        selector=1,
        matching_type=1,
        certificate_data=bytes([0x05, 0x95, 0x98, 0x11, 0x22, 0x33]),
    )


def test_one_byte_certificate():
    buf = bytes([0x03, 0x01, 0x01, 0x05])
    assert TLSA.read(len(buf), Reader(buf)) == TLSA(3, 1, 1, bytes([0x05]))


def test_record_too_short():
    buf = bytes([0x03, 0x01, 0x01])
    with pytest.raises(WrongRecordLengthError) as info:
        TLSA.read(len(buf), Reader(buf))
    assert info.value == WrongRecordLengthError(3, MandatedLength.at_least(4))


def test_record_empty():
    with pytest.raises(TruncatedDataError):
        TLSA.read(0, Reader(b""))


def test_buffer_ends_abruptly():
    with pytest.raises(TruncatedDataError):
        TLSA.read(6, Reader(bytes([0x01])))


def test_hex_rep():
    record = TLSA(3, 1, 1, bytes([0x05, 0x95, 0x98, 0x11, 0x22, 0x33]))
    assert record.hex_certificate_data() == "059598112233"