"""Translation of key presses and typed characters into bytes for the shell."""

from __future__ import annotations

from enum import Enum, auto

from .utf8 import utf8_encode

__all__ = ["Key", "key_bytes", "char_bytes", "is_copy_shortcut"]


class Key(Enum):
    """Keys that produce input other than plain text."""

    ENTER = auto()
    BACKSPACE = auto()
    TAB = auto()
    ESCAPE = auto()
    UP = auto()
    DOWN = auto()
    RIGHT = auto()
    LEFT = auto()
    C = auto()
    D = auto()


_KEY_SEQUENCES = {
    Key.ENTER: b"\n",
    Key.BACKSPACE: b"\x7f",
    Key.TAB: b"\t",
    Key.ESCAPE: b"\x1b",
    Key.UP: b"\x1b[A",
    Key.DOWN: b"\x1b[B",
    Key.RIGHT: b"\x1b[C",
    Key.LEFT: b"\x1b[D",
}

_CTRL_SEQUENCES = {
    Key.C: b"\x03",
    Key.D: b"\x04",
}


def key_bytes(key: Key, ctrl: bool = False) -> bytes:
    """Bytes to send for ``key``; empty when the key sends nothing."""
    if key in _KEY_SEQUENCES:
        return _KEY_SEQUENCES[key]
    if ctrl:
        return _CTRL_SEQUENCES.get(key, b"")
    return b""


def char_bytes(codepoint: int) -> bytes:
    """UTF-8 bytes to send for a typed character."""
    return utf8_encode(codepoint)


def is_copy_shortcut(key: Key, ctrl: bool = False, super_key: bool = False) -> bool:
    """Whether the key press asks to copy the selection (C with Ctrl or Super)."""
    return key is Key.C and (ctrl or super_key)