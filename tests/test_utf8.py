import pytest

from glyphterm.utf8 import IncompleteSequenceError, utf8_decode, utf8_encode


@pytest.mark.parametrize("text", ["A", "é", "€", "😀", "\x00", "\u07ff", "\uffff"])
def test_encode_matches_standard_encoding(text):
    assert utf8_encode(ord(text)) == text.encode("utf-8")


@pytest.mark.parametrize("text", ["A", "é", "€", "😀", "\u0800", "\U0010ffff"])
def test_decode_round_trip(text):
    encoded = text.encode("utf-8")
    assert utf8_decode(encoded) == (ord(text), len(encoded))


def test_decode_reads_only_first_sequence():
    assert utf8_decode(b"ab") == (ord("a"), 1)
    data = "€x".encode("utf-8")
    assert utf8_decode(data) == (ord("€"), 3)


def test_decode_accepts_memoryview():
    data = memoryview("é!".encode("utf-8"))
    assert utf8_decode(data[0:]) == (ord("é"), 2)


@pytest.mark.parametrize("data", [b"\x80", b"\xbf", b"\xf8", b"\xff"])
def test_decode_rejects_invalid_lead_byte(data):
    with pytest.raises(ValueError) as info:
        utf8_decode(data)
    assert not isinstance(info.value, IncompleteSequenceError)


@pytest.mark.parametrize("data", [b"", b"\xe2\x82", b"\xf0\x9f", b"\xc3"])
def test_decode_incomplete(data):
    with pytest.raises(IncompleteSequenceError):
        utf8_decode(data)


@pytest.mark.parametrize("codepoint", [-1, 0x110000])
def test_encode_rejects_out_of_range(codepoint):
    with pytest.raises(ValueError):
        utf8_encode(codepoint)


@pytest.mark.parametrize("codepoint", [0x7F, 0x80, 0x7FF, 0x800, 0xFFFF, 0x10000, 0x10FFFF])
def test_encode_decode_round_trip_at_boundaries(codepoint):
    encoded = utf8_encode(codepoint)
    assert utf8_decode(encoded) == (codepoint, len(encoded))