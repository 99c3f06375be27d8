"""Window front-end for the game using ``pygame``.

Each console cell becomes a fixed-size rectangle in the window with the cell's
character drawn in a monospace font.  This gives the same look as the
terminal front-end on machines without a usable terminal.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, Optional, Tuple

import pygame

from .console import PALETTE, VirtualConsole
from .display import DisplayError, Key, KeyCode


LOGGER = logging.getLogger(__name__)

Color = Tuple[int, int, int]

FOREGROUND: Color = (200, 200, 200)
BACKGROUND: Color = (0, 0, 0)

COLOR_VALUES: Dict[str, Color] = {
    "black": (0, 0, 0),
    "yellow": (237, 194, 46),
    "cyan": (0, 188, 212),
    "blue": (66, 103, 210),
    "green": (76, 175, 80),
    "red": (229, 57, 53),
    "magenta": (186, 104, 200),
}

_SPECIAL_KEYS: Dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}

# Closing the window behaves like pressing the quit key.
QUIT_KEY = "q"


def cell_colors(color: int) -> Tuple[Color, Color]:
    """Return ``(foreground, background)`` for a console colour index."""

    if color in PALETTE:
        fg, bg = PALETTE[color]
        return COLOR_VALUES[fg], COLOR_VALUES[bg]
    return FOREGROUND, BACKGROUND


def translate_event(event: pygame.event.Event) -> Optional[KeyCode]:
    """Turn a pygame event into a key code, or ``None`` if it is not a key."""

    if event.type == pygame.QUIT:
        return QUIT_KEY
    if event.type != pygame.KEYDOWN:
        return None
    if event.key in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[event.key]
    text = getattr(event, "unicode", "")
    if text and len(text) == 1 and ord(text) <= 0xFF:
        return text
    return None


class PygameDisplay:
    """Render the virtual console into a pygame window."""

    def __init__(self, width: int, height: int, *, font_size: int = 18) -> None:
        self.width = width
        self.height = height
        self.font_size = font_size
        self._screen: Optional[pygame.Surface] = None
        self._font: Optional[pygame.font.Font] = None
        self._cell_size: Tuple[int, int] = (0, 0)
        self._glyphs: Dict[Tuple[int, Color], pygame.Surface] = {}
        self._pending: Deque[KeyCode] = deque()

    def init(self) -> None:
        try:
            pygame.init()
            self._font = pygame.font.SysFont("monospace", self.font_size)
            cell_w, cell_h = self._font.size("M")
            self._cell_size = (cell_w, cell_h)
            self._screen = pygame.display.set_mode((self.width * cell_w, self.height * cell_h))
        except pygame.error as exc:
            pygame.quit()
            raise DisplayError(f"Cannot open the game window: {exc}") from exc
        pygame.display.set_caption("2048")

    def shutdown(self) -> None:
        self._screen = None
        self._font = None
        self._glyphs.clear()
        pygame.quit()

    def poll_key(self) -> Optional[KeyCode]:
        """Return the next buffered key press without waiting."""

        if self._screen is not None:
            for event in pygame.event.get():
                key = translate_event(event)
                if key is not None:
                    self._pending.append(key)
        if not self._pending:
            return None
        return self._pending.popleft()

    def _glyph(self, code: int, color: Color) -> pygame.Surface:
        cached = self._glyphs.get((code, color))
        if cached is None:
            assert self._font is not None
            cached = self._font.render(chr(code), True, color)
            self._glyphs[(code, color)] = cached
        return cached

    def present(self, console: VirtualConsole) -> None:
        if self._screen is None:
            return
        cell_w, cell_h = self._cell_size
        self._screen.fill(BACKGROUND)
        for row, chars, colors in console.rows():
            for col in range(console.width):
                fg, bg = cell_colors(int(colors[col]))
                rect = pygame.Rect(col * cell_w, row * cell_h, cell_w, cell_h)
                if bg != BACKGROUND:
                    pygame.draw.rect(self._screen, bg, rect)
                code = int(chars[col])
                if code not in (0x00, 0x20):
                    self._screen.blit(self._glyph(code, fg), rect)
        pygame.display.flip()
        # Keep the window responsive between key polls.
        pygame.event.pump()


__all__ = ["PygameDisplay", "cell_colors", "translate_event"]
