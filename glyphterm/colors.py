"""The 16-colour ANSI palette used to draw text."""

from __future__ import annotations

__all__ = ["PALETTE", "ansi_color"]

RGB = tuple[float, float, float]

PALETTE: tuple[RGB, ...] = (
    (0.0, 0.0, 0.0),  # black
    (0.8, 0.0, 0.0),  # red
    (0.0, 0.8, 0.0),  # green
    (0.8, 0.8, 0.0),  # yellow
    (0.0, 0.0, 0.8),  # blue
    (0.8, 0.0, 0.8),  # magenta
    (0.0, 0.8, 0.8),  # cyan
    (0.8, 0.8, 0.8),  # white
    (0.5, 0.5, 0.5),  # bright black
    (1.0, 0.0, 0.0),  # bright red
    (0.0, 1.0, 0.0),  # bright green
    (1.0, 1.0, 0.0),  # bright yellow
    (0.0, 0.0, 1.0),  # bright blue
    (1.0, 0.0, 1.0),  # bright magenta
    (0.0, 1.0, 1.0),  # bright cyan
    (1.0, 1.0, 1.0),  # bright white
)


def ansi_color(color: int, bold: bool) -> RGB:
    """Return the RGB triple for a palette index; bold selects the bright variant."""
    index = color % 16
    if bold and index < 8:
        index += 8
    return PALETTE[index]