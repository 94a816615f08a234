"""Decoding and encoding of single UTF-8 sequences."""

from __future__ import annotations

__all__ = ["IncompleteSequenceError", "utf8_decode", "utf8_encode"]


class IncompleteSequenceError(ValueError):
    """Raised when the input ends before a multi-byte sequence is complete."""


_LEAD_MASKS = {1: 0x7F, 2: 0x1F, 3: 0x0F, 4: 0x07}


def _sequence_length(lead: int) -> int:
    """Return the length announced by a lead byte, or 0 if it cannot start a sequence."""
    if lead < 0x80:
        return 1
    if 0xC0 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF7:
        return 4
    return 0


def utf8_decode(data) -> tuple[int, int]:
    """Decode the first code point of ``data``.

    Returns ``(codepoint, length)`` where ``length`` is the number of bytes used.
    Raises ``ValueError`` for a byte that cannot start a sequence and
    ``IncompleteSequenceError`` when ``data`` stops short of a whole sequence.
    """
    if not len(data):
        raise IncompleteSequenceError("no bytes to decode")
    lead = data[0]
    length = _sequence_length(lead)
    if not length:
        raise ValueError(f"invalid UTF-8 lead byte 0x{lead:02x}")
    if len(data) < length:
        raise IncompleteSequenceError(
            f"sequence needs {length} bytes, only {len(data)} available"
        )
    codepoint = lead & _LEAD_MASKS[length]
    for byte in data[1:length]:
        codepoint = (codepoint << 6) | (byte & 0x3F)
    return codepoint, length


def utf8_encode(codepoint: int) -> bytes:
    """Encode one code point as UTF-8 bytes; raises ``ValueError`` if out of range."""
    if not 0 <= codepoint <= 0x10FFFF:
        raise ValueError(f"code point {codepoint:#x} is outside the Unicode range")
    return chr(codepoint).encode("utf-8", "surrogatepass")