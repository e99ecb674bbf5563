import pytest

from doglookup.errors import MandatedLength, TruncatedDataError, WrongRecordLengthError
from doglookup.reader import Reader
from doglookup.records.openpgpkey import OPENPGPKEY


def test_parses():
    buf = bytes([0x12, 0x34, 0x56, 0x78])
    assert OPENPGPKEY.read(len(buf), Reader(buf)) == OPENPGPKEY(
        bytes([0x12, 0x34, 0x56, 0x78])
    )


def test_one_byte_of_key():
    buf = bytes([0x2B])
    assert OPENPGPKEY.read(len(buf), Reader(buf)) == OPENPGPKEY(bytes([0x2B]))


def test_record_empty():
    with pytest.raises(WrongRecordLengthError) as info:
        OPENPGPKEY.read(0, Reader(b""))
    assert info.value == WrongRecordLengthError(0, MandatedLength.at_least(1))


def test_buffer_ends_abruptly():
    with pytest.raises(TruncatedDataError):
        OPENPGPKEY.read(23, Reader(bytes([0x12, 0x34])))


def test_base64_key():
    record = OPENPGPKEY(bytes([0x12, 0x34, 0x56, 0x78]))
    assert record.base64_key() == "EjRWeA=="


def test_reads_only_stated_length():
    reader = Reader(bytes([0x01, 0x02, 0x03]))
    record = OPENPGPKEY.read(2, reader)
    assert record.key == bytes([0x01, 0x02])
    assert reader.position == 2