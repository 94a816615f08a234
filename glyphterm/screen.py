"""The character grid of the terminal and the interpreter that updates it."""

from __future__ import annotations

from dataclasses import dataclass, field

from .utf8 import IncompleteSequenceError, utf8_decode

__all__ = ["Cell", "CSISequence", "Screen"]

_ESC = 0x1B
_LF = 10
_CR = 13
_BS = 8
_DEL = 127
_REPEAT_LIMIT = 32767


@dataclass(frozen=True)
class Cell:
    """One position of the grid: a code point (0 for empty) and its attributes."""

    codepoint: int = 0
    fg: int = 7
    bg: int = 0
    bold: bool = False


BLANK = Cell()


@dataclass
class CSISequence:
    """A parsed control sequence: final command character, parameters and prefix."""

    command: str
    params: list[int] = field(default_factory=list)
    prefix: str = ""


class Screen:
    """A terminal screen that interprets output bytes from a child process."""

    MAX_COLS = 192
    MAX_ROWS = 108
    MAX_PARAMS = 16

    def __init__(self, cols: int = 128, rows: int = 36) -> None:
        self._grid = [self._blank_row() for _ in range(self.MAX_ROWS)]
        self.cols = 1
        self.rows = 1
        self.cursor_x = 0
        self.cursor_y = 0
        self.fg = 7
        self.bg = 0
        self.bold = False
        self.recent_codepoint = 0
        self._pending = b""
        self.resize(cols, rows)

    @classmethod
    def _blank_row(cls) -> list[Cell]:
        return [BLANK] * cls.MAX_COLS

    @property
    def cursor(self) -> tuple[int, int]:
        """The cursor position as ``(x, y)``."""
        return self.cursor_x, self.cursor_y

    @property
    def pending(self) -> bytes:
        """Bytes held back because they end in an incomplete sequence."""
        return self._pending

    def resize(self, cols: int, rows: int) -> None:
        """Set the visible size, limited to the grid's capacity."""
        self.cols = max(1, min(cols, self.MAX_COLS))
        self.rows = max(1, min(rows, self.MAX_ROWS))
        self.move_to(self.cursor_x, self.cursor_y)

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``; raises ``IndexError`` outside the screen."""
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise IndexError(f"cell ({x}, {y}) is outside the screen")
        return self._grid[y][x]

    def move_to(self, x: int, y: int) -> None:
        """Move the cursor, clamping it to the screen."""
        self.cursor_x = max(0, min(x, self.cols - 1))
        self.cursor_y = max(0, min(y, self.rows - 1))

    def scroll_up(self, top: int, n: int) -> None:
        """Move the lines from ``top`` down up by ``n``, blanking the bottom."""
        if n <= 0 or top >= self.rows:
            return
        bottom = self.rows
        n = min(n, bottom - top)
        self._grid[top:bottom] = self._grid[top + n : bottom] + [
            self._blank_row() for _ in range(n)
        ]

    def scroll_down(self, top: int, n: int) -> None:
        """Move the lines from ``top`` down by ``n``, blanking the opened lines."""
        if n <= 0 or top >= self.rows:
            return
        bottom = self.rows
        n = min(n, bottom - top)
        self._grid[top:bottom] = [self._blank_row() for _ in range(n)] + self._grid[
            top : bottom - n
        ]

    def insert_blank_chars(self, n: int) -> None:
        """Insert ``n`` blank cells at the cursor, pushing the rest of the line right."""
        if n <= 0:
            return
        row = self._grid[self.cursor_y]
        x = self.cursor_x
        count = min(x + n, self.cols) - x
        row[x : self.cols] = [BLANK] * count + row[x : self.cols - count]

    def delete_cells(self, n: int) -> None:
        """Delete ``n`` cells at the cursor, pulling the rest of the line left."""
        if n <= 0:
            return
        row = self._grid[self.cursor_y]
        x = self.cursor_x
        n = min(n, self.cols - x)
        row[x : self.cols] = row[x + n : self.cols] + [BLANK] * n

    def _clear(self, y: int, start: int, stop: int) -> None:
        start = max(0, start)
        stop = min(stop, self.cols)
        if start < stop:
            self._grid[y][start:stop] = [BLANK] * (stop - start)

    def _erase_display(self, op: int) -> None:
        if op == 0:
            self._clear(self.cursor_y, self.cursor_x, self.cols)
            for y in range(self.cursor_y + 1, self.rows):
                self._clear(y, 0, self.cols)
        elif op == 1:
            for y in range(self.cursor_y):
                self._clear(y, 0, self.cols)
            self._clear(self.cursor_y, 0, self.cursor_x + 1)
        elif op == 2:
            for y in range(self.rows):
                self._clear(y, 0, self.cols)

    def _erase_line(self, op: int) -> None:
        if op == 0:
            self._clear(self.cursor_y, self.cursor_x, self.cols)
        elif op == 1:
            self._clear(self.cursor_y, 0, self.cursor_x + 1)
        elif op == 2:
            self._clear(self.cursor_y, 0, self.cols)

    def _select_graphic_rendition(self, params: list[int]) -> None:
        for param in params:
            if param == 0:
                self.fg, self.bg, self.bold = 7, 0, False
            elif param == 1:
                self.bold = True
            elif 30 <= param <= 37:
                self.fg = param - 30
            elif 40 <= param <= 47:
                self.bg = param - 40
            elif 90 <= param <= 97:
                self.fg = param - 90 + 8
            elif 100 <= param <= 107:
                self.bg = param - 100 + 8

    def apply_csi(self, csi: CSISequence) -> None:
        """Carry out one control sequence; unknown commands are ignored."""
        params = csi.params
        amount = params[0] if params else 1
        op = params[0] if params else 0
        x, y = self.cursor_x, self.cursor_y
        match csi.command:
            case "m":
                self._select_graphic_rendition(params)
            case "A":
                self.move_to(x, y - amount)
            case "B" | "e":
                self.move_to(x, y + amount)
            case "C" | "a":
                self.move_to(x + amount, y)
            case "D":
                self.move_to(x - amount, y)
            case "E":
                self.move_to(0, y + amount)
            case "F":
                self.move_to(0, y - amount)
            case "G" | "`":
                self.move_to(amount - 1, y)
            case "H" | "f":
                row = params[0] if params else 1
                col = params[1] if len(params) > 1 else 1
                self.move_to(col - 1, row - 1)
            case "J":
                self._erase_display(op)
            case "K":
                self._erase_line(op)
            case "L":
                self.scroll_down(y, amount)
            case "M":
                self.scroll_up(y, amount)
            case "P":
                self.delete_cells(amount)
            case "S":
                if csi.prefix != "?":
                    self.scroll_up(0, amount)
            case "X":
                self._clear(y, x, x + amount)
            case "@":
                self.insert_blank_chars(amount)
            case "b":
                if self.recent_codepoint:
                    for _ in range(min(amount, _REPEAT_LIMIT)):
                        self._write_cell(self.recent_codepoint)
            case "d":
                self.move_to(x, amount - 1)

    def parse_escape(self, data) -> int:
        """Interpret an escape sequence at the start of ``data``.

        Returns the number of bytes consumed, or 0 when the sequence is not
        complete yet (or ``data`` does not start with ESC).
        """
        if len(data) < 2 or data[0] != _ESC:
            return 0
        if data[1] != ord("["):
            return 2

        i = 2
        prefix = ""
        if i < len(data) and data[i] == ord("?"):
            prefix = "?"
            i += 1

        params: list[int] = []
        num = 0
        has_num = False
        while i < len(data):
            byte = data[i]
            if ord("0") <= byte <= ord("9"):
                num = num * 10 + byte - ord("0")
                has_num = True
            elif byte == ord(";"):
                params.append(num)
                num = 0
                if len(params) >= self.MAX_PARAMS:
                    break
            else:
                break
            i += 1

        if has_num and len(params) < self.MAX_PARAMS:
            params.append(num)
        if i >= len(data):
            return 0

        self.apply_csi(CSISequence(chr(data[i]), params, prefix))
        return i + 1

    def _line_feed(self) -> None:
        self.cursor_y += 1
        if self.cursor_y >= self.rows:
            self.scroll_up(0, 1)
            self.cursor_y = self.rows - 1

    def _write_cell(self, codepoint: int) -> None:
        self._grid[self.cursor_y][self.cursor_x] = Cell(
            codepoint, self.fg, self.bg, self.bold
        )
        self.recent_codepoint = codepoint
        self.cursor_x += 1
        if self.cursor_x >= self.cols:
            self.cursor_x = 0
            self._line_feed()

    def put_char(self, codepoint: int) -> None:
        """Handle one decoded code point: a control character or a printed cell."""
        if codepoint == _LF:
            self.cursor_x = 0
            self._line_feed()
        elif codepoint in (_BS, _DEL):
            if self.cursor_x > 0:
                self.cursor_x -= 1
        elif codepoint == _CR:
            self.cursor_x = 0
        else:
            self._write_cell(codepoint)

    def feed(self, data: bytes) -> None:
        """Interpret output bytes; an incomplete tail is kept for the next call."""
        buffer = self._pending + bytes(data)
        pos = 0
        with memoryview(buffer) as view:
            while pos < len(buffer):
                if buffer[pos] == _ESC:
                    consumed = self.parse_escape(view[pos:])
                    if not consumed:
                        break
                    pos += consumed
                    continue
                try:
                    codepoint, length = utf8_decode(view[pos:])
                except IncompleteSequenceError:
                    break
                except ValueError:
                    pos += 1
                    continue
                self.put_char(codepoint)
                pos += length
        self._pending = buffer[pos:]

    def row_text(self, y: int) -> str:
        """The visible text of row ``y``, blanks as spaces, trailing blanks dropped."""
        if not 0 <= y < self.rows:
            raise IndexError(f"row {y} is outside the screen")
        return "".join(
            chr(cell.codepoint) if cell.codepoint else " "
            for cell in self._grid[y][: self.cols]
        ).rstrip(" ")