"""A small graphical terminal emulator that runs a shell in a pseudo-terminal."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "colors",
    "keys",
    "layout",
    "platform",
    "screen",
    "selection",
    "utf8",
    "window",
]