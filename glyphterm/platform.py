"""Per-system locations of monospace fonts."""

from __future__ import annotations

import platform as _platform
from collections.abc import Iterable
from pathlib import Path

__all__ = ["font_paths", "find_font"]

_SYSTEM_FONT_DIR = Path("/System/Library/Fonts")
_SHARED_FONT_DIR = Path("/usr/share/fonts")


def _macos_fonts() -> tuple[str, ...]:
    user_fonts = Path.home() / "Library" / "Fonts"
    candidates = [
        user_fonts / "FiraCodeNerdFontMono-Regular.ttf",
        *(_SYSTEM_FONT_DIR / name for name in ("Monaco.ttf", "Menlo.ttc")),
    ]
    return tuple(str(path) for path in candidates)


def _linux_fonts() -> tuple[str, ...]:
    # Arch-style layout first, then the Debian/Ubuntu one.
    relative = [
        ("TTF", "JetBrainsMonoNerdFont-Regular.ttf"),
        ("liberation", "LiberationMono-Regular.ttf"),
        ("TTF", "DejaVuSansMono.ttf"),
        ("truetype/dejavu", "DejaVuSansMono.ttf"),
        ("truetype/liberation", "LiberationMono-Regular.ttf"),
    ]
    return tuple(str(_SHARED_FONT_DIR / folder / name) for folder, name in relative)


def font_paths(system: str | None = None) -> tuple[str, ...]:
    """Candidate font files for ``system`` (default: the running system), best first."""
    if system is None:
        system = _platform.system()
    return _macos_fonts() if system == "Darwin" else _linux_fonts()


def find_font(paths: Iterable[str | Path] | None = None) -> str:
    """Return the first existing file among ``paths``; raises ``FileNotFoundError``."""
    candidates = list(font_paths() if paths is None else paths)
    for path in candidates:
        if Path(path).is_file():
            return str(path)
    raise FileNotFoundError(f"could not open any font among {len(candidates)} candidates")