# glyphterm

glyphterm is a small graphical terminal emulator for Linux and macOS. It
starts a shell in a pseudo-terminal, reads what the shell writes, keeps a grid
of character cells, and draws that grid in a pygame window.

## Installation

```
pip install .
```

pygame is installed with the package.

## Usage

```
glyphterm [--shell PROGRAM] [--font FONT_FILE]
```

- `--shell` is the program to run in the terminal. The default is `/bin/zsh`.
  The child gets `TERM=xterm-256color` and `COLORTERM=truecolor`.
- `--font` is the path of a monospace font file. Without it, the first
  existing file among `glyphterm.platform.font_paths()` is used. These are a
  few well-known monospace fonts under `/usr/share/fonts` on Linux, and under
  `~/Library/Fonts` and `/System/Library/Fonts` on macOS.

The window opens at 1280x720 and can be resized. The grid is fitted to the
window. It aims at about 120 columns by 40 rows of cells with a height to
width ratio of 1.9, and it is never larger than 192x108. When the grid size
changes, the new size is passed to the pseudo-terminal. The program ends when
you close the window or when the shell exits.

### Input

- Typed text is sent to the shell as UTF-8.
- Enter, Backspace (sent as DEL, `0x7f`), Tab, Escape and the four arrow keys
  (`ESC [ A` to `ESC [ D`) are sent to the shell.
- Ctrl+D sends `0x04`.
- Ctrl+C or Cmd/Super+C copies the current selection to the clipboard with
  `pygame.scrap`. It does not send anything to the shell.
- Dragging with the left mouse button selects text in reading order.

## What the screen understands

`glyphterm.screen.Screen` interprets the output:

- UTF-8 text. A sequence that is cut off at the end of a chunk is held back
  until more bytes arrive. Bytes that cannot start a sequence are skipped.
- Line feed (which also returns to column 0), carriage return, and backspace
  or DEL (which move the cursor left).
- Wrapping at the right edge, and scrolling up when the bottom line is passed.
- These CSI commands: `A B C D E F G H J K L M P S X @ a b d e f \``, and
  `m` for reset, bold, and the 8 normal and 8 bright foreground and background
  colours. Other escape sequences are consumed and ignored.

## Library use

The terminal state machine works without a window:

```python
from glyphterm.screen import Screen

screen = Screen()
screen.feed(b"hello\r\n\x1b[31mred\x1b[0m")
print(screen.row_text(0))       # "hello"
print(screen.cell(0, 1).fg)     # 1
print(screen.cursor)            # (3, 1)
```

Other modules:

- `glyphterm.utf8`: `utf8_decode(data)` returns `(codepoint, length)`, and
  `utf8_encode(codepoint)` returns the encoded bytes.
- `glyphterm.colors`: `ansi_color(color, bold)` maps a palette index to an
  RGB triple in the range 0..1. With bold, the bright variant is used.
- `glyphterm.layout`: `compute_layout(width, height)` returns a `Layout`
  with grid size and cell geometry. It also converts pixels to cells with
  `to_grid`.
- `glyphterm.selection`: `Selection` and `selection_text(screen, selection)`.
- `glyphterm.keys`: `Key`, `key_bytes`, `char_bytes` and `is_copy_shortcut`.
- `glyphterm.window.Window`: the pygame window.
- `glyphterm.app`: `TerminalApp`, which ties a screen to input and drawing,
  and `spawn_shell`, which starts a program on a new pseudo-terminal.

## Limitations

- Only printable ASCII is drawn. Other characters are stored in the grid and
  included in copied text, but they are not drawn.
- Background colours are recorded per cell but not drawn.
- There is no scrollback, no 256-colour or true-colour SGR, no alternate
  screen, and no answer to device status reports.
- It runs only on POSIX systems, because it relies on pseudo-terminals.

## Running the tests

```
pip install ".[test]"
pytest
```