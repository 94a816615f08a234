"""Mapping between window pixels and terminal grid cells."""

from __future__ import annotations

from dataclasses import dataclass

from .screen import Screen

__all__ = ["Layout", "compute_layout"]

PADDING_X = 0.0
PADDING_Y = 30.0
TARGET_COLS = 120
TARGET_ROWS = 40
ASPECT_RATIO = 1.9
CURSOR_OFFSET_Y = -13.0


@dataclass(frozen=True)
class Layout:
    """Grid size and cell geometry for a given window size."""

    cols: int = 128
    rows: int = 36
    char_width: float = 18.0
    char_height: float = 35.0
    padding_x: float = 10.0
    padding_y: float = 20.0

    def to_grid(self, xpos: float, ypos: float) -> tuple[int, int]:
        """Convert a pixel position to a cell position, clamped to the grid."""
        x = int((xpos - self.padding_x) / self.char_width)
        y = int((ypos - self.padding_y) / self.char_height)
        x = min(max(x, 0), self.cols - 1)
        y = min(max(y, 0), self.rows - 1)
        return x, y

    def cell_origin(self, x: int, y: int) -> tuple[float, float]:
        """The top-left pixel of cell ``(x, y)``."""
        return self.padding_x + x * self.char_width, self.padding_y + y * self.char_height

    def cursor_rect(self, x: int, y: int) -> tuple[float, float, float, float]:
        """The rectangle ``(x, y, w, h)`` in pixels where the cursor is drawn."""
        return (
            x * self.char_width,
            self.padding_y + CURSOR_OFFSET_Y + y * self.char_height,
            self.char_width,
            self.char_height,
        )


def compute_layout(width: int, height: int) -> Layout:
    """Fit a grid of monospace cells into a window of ``width`` by ``height`` pixels."""
    available_width = width - 2 * PADDING_X
    available_height = height - 2 * PADDING_Y
    if available_width <= 0 or available_height <= 0:
        raise ValueError(f"window {width}x{height} is too small for the terminal")

    char_width = available_width / TARGET_COLS
    char_height = available_height / TARGET_ROWS
    if char_height / char_width > ASPECT_RATIO:
        char_height = char_width * ASPECT_RATIO
    else:
        char_width = char_height / ASPECT_RATIO

    cols = min(int(available_width / char_width), Screen.MAX_COLS)
    rows = min(int(available_height / char_height), Screen.MAX_ROWS)
    return Layout(
        cols=max(1, cols),
        rows=max(1, rows),
        char_width=char_width,
        char_height=char_height,
        padding_x=PADDING_X,
        padding_y=PADDING_Y,
    )