"""Mouse selection over the grid and extraction of the selected text."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .screen import Screen

__all__ = ["Selection", "selection_text"]


@dataclass
class Selection:
    """A stream selection from a start cell to an end cell."""

    active: bool = False
    start_x: int = 0
    start_y: int = 0
    end_x: int = 0
    end_y: int = 0

    def begin(self, x: int, y: int) -> None:
        """Start a new selection at ``(x, y)``."""
        self.active = True
        self.start_x = self.end_x = x
        self.start_y = self.end_y = y

    def extend(self, x: int, y: int) -> None:
        """Move the end of an active selection to ``(x, y)``."""
        if self.active:
            self.end_x = x
            self.end_y = y

    def bounds(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """Return ``((first_x, first_y), (last_x, last_y))`` in reading order."""
        start = (self.start_y, self.start_x)
        end = (self.end_y, self.end_x)
        (min_y, min_x), (max_y, max_x) = sorted((start, end))
        return (min_x, min_y), (max_x, max_y)

    def cells(self, cols: int, rows: int) -> Iterator[tuple[int, int]]:
        """Yield the selected cells that lie within a ``cols`` by ``rows`` grid."""
        (min_x, min_y), (max_x, max_y) = self.bounds()
        for y in range(min_y, min(max_y, rows - 1) + 1):
            start = min_x if y == min_y else 0
            end = max_x if y == max_y else cols - 1
            for x in range(start, min(end, cols - 1) + 1):
                yield x, y


def selection_text(screen: Screen, selection: Selection) -> str:
    """The text under ``selection``, rows joined by newlines, empty cells skipped."""
    (min_x, min_y), (max_x, max_y) = selection.bounds()
    lines = []
    for y in range(min_y, min(max_y, screen.rows - 1) + 1):
        start = min_x if y == min_y else 0
        end = max_x if y == max_y else screen.cols - 1
        codepoints = (
            screen.cell(x, y).codepoint for x in range(start, min(end, screen.cols - 1) + 1)
        )
        lines.append("".join(chr(cp) for cp in codepoints if cp))
    return "\n".join(lines)