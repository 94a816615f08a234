"""A window that draws the terminal's text and rectangles with pygame."""

from __future__ import annotations

from pathlib import Path

import pygame

from .platform import find_font

__all__ = ["Window"]

FONT_SIZE = 14


def _to_rgb(r: float, g: float, b: float) -> tuple[int, int, int]:
    """Convert colour components in 0..1 to 0..255, clamping out-of-range values."""
    return tuple(round(max(0.0, min(1.0, c)) * 255) for c in (r, g, b))


class Window:
    """A resizable window with a monospace font, drawn in pixel coordinates."""

    def __init__(
        self,
        title: str = "glyphterm",
        width: int = 1280,
        height: int = 720,
        font_path: str | Path | None = None,
    ) -> None:
        path = Path(font_path) if font_path is not None else Path(find_font())
        if not path.is_file():
            raise FileNotFoundError(f"could not open font {path}")

        pygame.display.init()
        pygame.font.init()
        try:
            pygame.display.set_mode((width, height), pygame.RESIZABLE)
            pygame.display.set_caption(title)
            self._font = pygame.font.Font(str(path), FONT_SIZE)
        except Exception:
            pygame.font.quit()
            pygame.display.quit()
            raise
        self._text_color = (255, 255, 255)
        self._close_requested = False
        self._closed = False

    def __enter__(self) -> Window:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def surface(self) -> pygame.Surface:
        """The surface being drawn on."""
        return pygame.display.get_surface()

    def size(self) -> tuple[int, int]:
        """The drawable size as ``(width, height)`` in pixels."""
        return self.surface.get_size()

    def clear(self, r: float, g: float, b: float) -> None:
        """Fill the whole window with one colour."""
        self.surface.fill(_to_rgb(r, g, b))

    def set_text_color(self, r: float, g: float, b: float) -> None:
        """Set the colour used by later calls to :meth:`draw_text`."""
        self._text_color = _to_rgb(r, g, b)

    def draw_text(self, x: float, y: float, text: str) -> None:
        """Draw ``text`` with its baseline at ``y``; only printable ASCII is drawn."""
        printable = "".join(ch for ch in text if 32 <= ord(ch) < 128)
        if not printable:
            return
        image = self._font.render(printable, True, self._text_color)
        self.surface.blit(image, (round(x), round(y - self._font.get_ascent())))

    def draw_rect(
        self, x: float, y: float, w: float, h: float, r: float, g: float, b: float
    ) -> None:
        """Fill the rectangle at ``(x, y)`` of size ``w`` by ``h``."""
        rect = pygame.Rect(round(x), round(y), round(w), round(h))
        self.surface.fill(_to_rgb(r, g, b), rect)

    def swap(self) -> None:
        """Show what has been drawn."""
        pygame.display.flip()

    def poll(self) -> list[pygame.event.Event]:
        """Collect pending events; a quit event marks the window for closing."""
        events = pygame.event.get()
        if any(event.type == pygame.QUIT for event in events):
            self._close_requested = True
        return events

    def should_close(self) -> bool:
        """Whether the user asked to close the window, or it is already closed."""
        return self._close_requested or self._closed

    def close(self) -> None:
        """Release the font and the display."""
        if self._closed:
            return
        self._closed = True
        pygame.font.quit()
        pygame.display.quit()