"""The terminal application: shell process, input handling and drawing."""

from __future__ import annotations

import argparse
import fcntl
import os
import select
import signal
import struct
import sys
import termios
from collections.abc import Callable
from typing import Protocol

import pygame

from .colors import ansi_color
from .keys import Key, char_bytes, is_copy_shortcut, key_bytes
from .layout import Layout, compute_layout
from .screen import Screen
from .selection import Selection, selection_text
from .window import Window

__all__ = ["TerminalApp", "spawn_shell", "main"]

SELECTION_COLOR = (0.3, 0.5, 0.8)
CURSOR_COLOR = (0.8, 0.8, 0.8)
BACKGROUND = (0.05, 0.05, 0.06)
DEFAULT_SHELL = "/bin/zsh"
_READ_SIZE = 32767
_POLL_SECONDS = 0.002


class _Canvas(Protocol):
    def size(self) -> tuple[int, int]: ...
    def set_text_color(self, r: float, g: float, b: float) -> None: ...
    def draw_text(self, x: float, y: float, text: str) -> None: ...
    def draw_rect(
        self, x: float, y: float, w: float, h: float, r: float, g: float, b: float
    ) -> None: ...


class TerminalApp:
    """Connects a screen, a mouse selection and keyboard input to a shell's input."""

    def __init__(self, screen: Screen, writer: Callable[[bytes], object]) -> None:
        self.screen = screen
        self.writer = writer
        self.layout = Layout()
        self.selection = Selection()
        self.on_resize: Callable[[int, int, int, int], None] | None = None
        self._grid_size: tuple[int, int] | None = None

    def update_layout(self, width: int, height: int) -> bool:
        """Fit the grid to a window size; returns whether the grid size changed.

        On a change, ``on_resize(rows, cols, width, height)`` is called if set.
        """
        self.layout = compute_layout(width, height)
        grid_size = (self.layout.cols, self.layout.rows)
        if grid_size == self._grid_size:
            return False
        self._grid_size = grid_size
        self.screen.resize(*grid_size)
        if self.on_resize is not None:
            self.on_resize(self.layout.rows, self.layout.cols, width, height)
        return True

    def render(self, window: _Canvas) -> None:
        """Draw the selection, the text and the cursor onto ``window``."""
        self.update_layout(*window.size())
        layout = self.layout
        screen = self.screen

        if self.selection.active:
            for x, y in self.selection.cells(screen.cols, screen.rows):
                window.draw_rect(
                    *layout.cell_origin(x, y),
                    layout.char_width,
                    layout.char_height,
                    *SELECTION_COLOR,
                )

        for y in range(screen.rows):
            for x in range(screen.cols):
                cell = screen.cell(x, y)
                if not cell.codepoint:
                    continue
                window.set_text_color(*ansi_color(cell.fg, cell.bold))
                window.draw_text(*layout.cell_origin(x, y), chr(cell.codepoint))

        window.draw_rect(*layout.cursor_rect(*screen.cursor), *CURSOR_COLOR)

    def mouse_down(self, xpos: float, ypos: float) -> None:
        """Start a selection at the cell under the pointer."""
        self.selection.begin(*self.layout.to_grid(xpos, ypos))

    def mouse_drag(self, xpos: float, ypos: float) -> None:
        """Extend the selection to the cell under the pointer."""
        self.selection.extend(*self.layout.to_grid(xpos, ypos))

    def copy_text(self) -> str:
        """The text currently selected."""
        return selection_text(self.screen, self.selection)

    def handle_key(
        self, key: Key, ctrl: bool = False, super_key: bool = False
    ) -> str | None:
        """Handle a key press.

        A copy shortcut returns the selected text and sends nothing; any other
        key sends its bytes to the shell and returns ``None``.
        """
        if is_copy_shortcut(key, ctrl, super_key):
            return self.copy_text()
        data = key_bytes(key, ctrl)
        if data:
            self.writer(data)
        return None

    def handle_text(self, text: str) -> None:
        """Send typed characters to the shell as UTF-8."""
        for ch in text:
            self.writer(char_bytes(ord(ch)))


def spawn_shell(shell: str = DEFAULT_SHELL) -> tuple[int, int]:
    """Start ``shell`` on a new pseudo-terminal; returns ``(pid, master_fd)``."""
    pid, master_fd = os.fork_pty() if hasattr(os, "fork_pty") else _pty_fork()
    if pid == 0:
        os.environ["TERM"] = "xterm-256color"
        os.environ["COLORTERM"] = "truecolor"
        try:
            os.execlp(shell, os.path.basename(shell))
        except OSError as exc:
            print(f"execlp: {exc}", file=sys.stderr, flush=True)
        os._exit(1)
    return pid, master_fd


def _pty_fork() -> tuple[int, int]:
    import pty

    return pty.fork()


def _set_winsize(fd: int, rows: int, cols: int, width: int, height: int) -> None:
    fcntl.ioctl(fd, termios.TIOCSWINSZ, struct.pack("HHHH", rows, cols, width, height))


def _drain(fd: int, screen: Screen) -> bool:
    """Feed all readable output to ``screen``; returns False once the shell is gone."""
    while True:
        ready, _, _ = select.select([fd], [], [], 0)
        if not ready:
            return True
        try:
            data = os.read(fd, _READ_SIZE)
        except OSError:
            return False
        if not data:
            return False
        screen.feed(data)


_PYGAME_KEYS = {
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_BACKSPACE: Key.BACKSPACE,
    pygame.K_TAB: Key.TAB,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_c: Key.C,
    pygame.K_d: Key.D,
}


def _put_clipboard(text: str) -> None:
    try:
        pygame.scrap.put_text(text)
    except pygame.error as exc:
        print(f"clipboard unavailable: {exc}", file=sys.stderr)


def _dispatch(app: TerminalApp, event: pygame.event.Event) -> None:
    if event.type == pygame.KEYDOWN:
        key = _PYGAME_KEYS.get(event.key)
        if key is None:
            return
        ctrl = bool(event.mod & pygame.KMOD_CTRL)
        super_key = bool(event.mod & pygame.KMOD_GUI)
        copied = app.handle_key(key, ctrl, super_key)
        if copied is not None:
            _put_clipboard(copied)
    elif event.type == pygame.TEXTINPUT:
        app.handle_text(event.text)
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        app.mouse_down(*event.pos)
    elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
        app.mouse_drag(*event.pos)


def main(argv: list[str] | None = None) -> int:
    """Run the terminal window until it is closed or the shell exits."""
    parser = argparse.ArgumentParser(prog="glyphterm", description="A small terminal emulator.")
    parser.add_argument("--shell", default=DEFAULT_SHELL, help="program to run")
    parser.add_argument("--font", default=None, help="path of a monospace font file")
    args = parser.parse_args(argv)

    pid, master_fd = spawn_shell(args.shell)
    try:
        window = Window("myterm", 1280, 720, args.font)
    except (OSError, pygame.error) as exc:
        print(f"Failed to init window: {exc}", file=sys.stderr)
        os.kill(pid, signal.SIGHUP)
        os.close(master_fd)
        return 1

    app = TerminalApp(Screen(), lambda data: os.write(master_fd, data))
    app.on_resize = lambda rows, cols, w, h: _set_winsize(master_fd, rows, cols, w, h)
    pygame.key.set_repeat(400, 30)

    running = True
    dirty = True
    with window:
        while running:
            ready, _, _ = select.select([master_fd], [], [], _POLL_SECONDS)
            if ready:
                running = _drain(master_fd, app.screen)
                dirty = True

            if dirty:
                window.clear(*BACKGROUND)
                app.render(window)
                window.swap()
                dirty = False

            for event in window.poll():
                _dispatch(app, event)
                dirty = True
            if window.should_close():
                running = False

    os.close(master_fd)
    try:
        os.kill(pid, signal.SIGHUP)
    except ProcessLookupError:
        pass
    os.waitpid(pid, 0)
    return 0