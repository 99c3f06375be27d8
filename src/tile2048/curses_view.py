"""Terminal front-end built on :mod:`curses`."""

from __future__ import annotations

import curses
import logging
from typing import Any, Dict, Optional

from .console import PALETTE, VirtualConsole
from .display import DisplayError, Key, KeyCode


LOGGER = logging.getLogger(__name__)

_CURSES_COLORS = {
    "black": curses.COLOR_BLACK,
    "yellow": curses.COLOR_YELLOW,
    "cyan": curses.COLOR_CYAN,
    "blue": curses.COLOR_BLUE,
    "green": curses.COLOR_GREEN,
    "red": curses.COLOR_RED,
    "magenta": curses.COLOR_MAGENTA,
}

_SPECIAL_KEYS: Dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
}


def translate_key(code: int) -> Optional[KeyCode]:
    """Turn a ``getch`` result into a key code, or ``None`` if there is none."""

    if code in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[code]
    if 0 <= code <= 0xFF:
        return chr(code)
    return None


class CursesDisplay:
    """Show the virtual console in the terminal.

    The terminal is put in raw, non-echoing mode with non-blocking key reads.
    Colour index ``0`` is drawn without attributes; the others map to the
    colour pairs defined in :data:`tile2048.console.PALETTE`.
    """

    def __init__(self, width: int, height: int, *, screen: Any = None) -> None:
        self.width = width
        self.height = height
        self._screen = screen
        self._owns_screen = screen is None
        self._colors = False

    def init(self) -> None:
        if self._screen is None:
            try:
                self._screen = curses.initscr()
            except curses.error as exc:
                raise DisplayError(f"Cannot initialise the terminal: {exc}") from exc
        try:
            curses.noecho()
            curses.cbreak()
            self._screen.keypad(True)
            self._screen.nodelay(True)
            try:
                curses.curs_set(0)
            except curses.error:
                LOGGER.debug("Terminal cannot hide the cursor")
            self._init_colors()
        except curses.error as exc:
            self.shutdown()
            raise DisplayError(f"Cannot set up the terminal: {exc}") from exc

        rows, cols = self._screen.getmaxyx()
        if rows < self.height or cols < self.width:
            self.shutdown()
            raise DisplayError(
                f"Terminal is {cols}x{rows}, need at least {self.width}x{self.height}"
            )

    def _init_colors(self) -> None:
        if not curses.has_colors():
            LOGGER.info("Terminal has no colour support")
            return
        curses.start_color()
        for index, (fg, bg) in PALETTE.items():
            curses.init_pair(index, _CURSES_COLORS[fg], _CURSES_COLORS[bg])
        self._colors = True

    def shutdown(self) -> None:
        if self._screen is None:
            return
        self._screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        if self._owns_screen:
            curses.endwin()
            self._screen = None

    def poll_key(self) -> Optional[KeyCode]:
        if self._screen is None:
            return None
        return translate_key(self._screen.getch())

    def _attribute(self, color: int) -> int:
        if color and self._colors:
            return curses.color_pair(color)
        return curses.A_NORMAL

    def present(self, console: VirtualConsole) -> None:
        """Copy every console cell to the terminal and refresh it."""

        if self._screen is None:
            return
        last = (console.height - 1, console.width - 1)
        for row, chars, colors in console.rows():
            for col in range(console.width):
                try:
                    self._screen.addch(row, col, int(chars[col]), self._attribute(int(colors[col])))
                except curses.error:
                    # Writing the bottom-right cell pushes the cursor off screen.
                    if (row, col) != last:
                        raise
        self._screen.refresh()


__all__ = ["CursesDisplay", "translate_key"]
