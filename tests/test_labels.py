import pytest

from doglookup.errors import TooMuchRecursionError, TruncatedDataError
from doglookup.labels import LabelEncodingError, Labels, read_labels
from doglookup.reader import Reader


def test_nothing():
    assert read_labels(Reader(bytes([0x00]))) == (Labels.root(), 1)


def test_one_label():
    buf = bytes([0x03]) + b"one" + bytes([0x00])
    assert read_labels(Reader(buf)) == (Labels.encode("one."), 5)


def test_two_labels():
    buf = bytes([0x03]) + b"one" + bytes([0x03]) + b"two" + bytes([0x00])
    assert read_labels(Reader(buf)) == (Labels.encode("one.two."), 9)


def test_label_followed_by_backtrack():
    buf = (
        bytes([0x03]) + b"one" + bytes([0xC0, 0x06])
        + bytes([0x03]) + b"two" + bytes([0x00])
    )
    assert read_labels(Reader(buf)) == (Labels.encode("one.two."), 6)


def test_backtrack_restores_position():
    buf = (
        bytes([0x03]) + b"one" + bytes([0xC0, 0x06])
        + bytes([0x03]) + b"two" + bytes([0x00])
    )
    reader = Reader(buf)
    read_labels(reader)
    assert reader.position == 6


def test_extremely_long_label():
    buf = bytes([0xBF]) + bytes([0x65] * 191) + bytes([0x00])
    assert read_labels(Reader(buf))[1] == 193


def test_immediate_recursion():
    with pytest.raises(TooMuchRecursionError) as info:
        read_labels(Reader(bytes([0xC0, 0x00])))
    assert info.value.recursions == (0,)


def test_mutual_recursion():
    with pytest.raises(TooMuchRecursionError) as info:
        read_labels(Reader(bytes([0xC0, 0x02, 0xC0, 0x00])))
    assert info.value.recursions == (2, 0)


def test_too_much_recursion():
    buf = bytes([
        0xC0, 0x02, 0xC0, 0x04, 0xC0, 0x06, 0xC0, 0x08,
        0xC0, 0x0A, 0xC0, 0x0C, 0xC0, 0x0E, 0xC0, 0x10,
        0x00,
    ])
    with pytest.raises(TooMuchRecursionError) as info:
        read_labels(Reader(buf))
    assert info.value.recursions == (2, 4, 6, 8, 10, 12, 14, 16)


def test_truncated_label_raises():
    with pytest.raises(TruncatedDataError):
        read_labels(Reader(bytes([0x05, 0x62, 0x73])))


def test_to_bytes_wire_form():
    expected = b"\x03dns\x06lookup\x03dog\x00"
    assert Labels.encode("dns.lookup.dog").to_bytes() == expected


def test_round_trip_through_wire():
    name = Labels.encode("srv-example.lookup.dog")
    labels, consumed = read_labels(Reader(name.to_bytes()))
    assert labels == name
    assert consumed == len(name.to_bytes())


def test_display_and_length():
    name = Labels.encode("dns.lookup.dog")
    assert str(name) == "dns.lookup.dog."
    assert len(name) == 3
    assert str(Labels.root()) == ""
    assert len(Labels.root()) == 0


def test_trailing_dot_is_ignored():
    assert Labels.encode("bsago.me.") == Labels.encode("bsago.me")


def test_extend_concatenates():
    combined = Labels.encode("dns").extend(Labels.encode("lookup.dog"))
    assert combined == Labels.encode("dns.lookup.dog")


def test_label_too_long():
    label = "a" * 256
    with pytest.raises(LabelEncodingError) as info:
        Labels.encode(f"{label}.dog")
    assert info.value.label == label


def test_longest_label_is_accepted():
    name = Labels.encode("a" * 255)
    assert name.segments == ((255, "a" * 255),)


def test_international_label_is_punycoded():
    name = Labels.encode("bücher.example")
    assert str(name) == "xn--bcher-kva.example."