"""In-memory character console used as a back buffer.

A console stores characters in a rectangular grid of cells.  Every cell holds
an 8-bit character code and an 8-bit colour index.  The console owns a cursor
that decides where written bytes land; running past the end of the grid
scrolls the contents up by one row.

Nothing here touches the terminal.  The game paints a frame into a
:class:`VirtualConsole` and a display backend copies the finished frame to the
screen in one go, which keeps animations free of flicker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .config import CONSOLE_HEIGHT, CONSOLE_WIDTH


CellArray = NDArray[np.uint8]

BLANK = ord(" ")

# Colour indices understood by the display backends.  ``0`` means "no special
# attribute"; the rest are foreground/background pairs.
NO_COLOR = 0
BLACK_ON_YELLOW = 1
BLACK_ON_CYAN = 2
BLACK_ON_BLUE = 3
BLACK_ON_GREEN = 4
BLACK_ON_RED = 5
BLACK_ON_MAGENTA = 6

PALETTE: Dict[int, Tuple[str, str]] = {
    BLACK_ON_YELLOW: ("black", "yellow"),
    BLACK_ON_CYAN: ("black", "cyan"),
    BLACK_ON_BLUE: ("black", "blue"),
    BLACK_ON_GREEN: ("black", "green"),
    BLACK_ON_RED: ("black", "red"),
    BLACK_ON_MAGENTA: ("black", "magenta"),
}


def _is_byte(value: int) -> bool:
    return 0 <= value <= 0xFF


def _as_code(ch: Union[int, str]) -> int:
    if isinstance(ch, str):
        return ord(ch) if len(ch) == 1 else -1
    return int(ch)


@dataclass
class Cursor:
    """Position where the next byte is written."""

    row: int = 0
    col: int = 0
    visible: bool = False


class VirtualConsole:
    """Fixed-size grid of ``(character, colour)`` cells with a cursor."""

    def __init__(
        self,
        width: int = CONSOLE_WIDTH,
        height: int = CONSOLE_HEIGHT,
        *,
        clear_color: int = NO_COLOR,
        write_color: int = NO_COLOR,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("Console dimensions must be positive")
        self.width = width
        self.height = height
        self.clear_color = clear_color
        self.write_color = write_color
        self.cursor = Cursor()
        self.chars: CellArray = np.full((height, width), BLANK, dtype=np.uint8)
        self.colors: CellArray = np.full((height, width), clear_color, dtype=np.uint8)

    def in_bounds(self, row: int, col: int) -> bool:
        """Return ``True`` if ``(row, col)`` addresses a cell of this console."""

        return 0 <= row < self.height and 0 <= col < self.width

    # Cursor movement --------------------------------------------------
    def _advance_cursor(self) -> bool:
        """Move one column right, wrapping; return ``True`` if a scroll is due."""

        cursor = self.cursor
        if cursor.col < self.width - 1:
            cursor.col += 1
            return False
        cursor.col = 0
        if cursor.row == self.height - 1:
            return True
        cursor.row += 1
        return False

    def _retreat_cursor(self) -> None:
        if self.cursor.col > 0:
            self.cursor.col -= 1

    def _newline(self) -> bool:
        self.cursor.col = 0
        if self.cursor.row == self.height - 1:
            return True
        self.cursor.row += 1
        return False

    def _scroll(self) -> None:
        """Scroll up by one row; the top row is lost for good."""

        self.chars[:-1] = self.chars[1:].copy()
        self.colors[:-1] = self.colors[1:].copy()
        self.chars[-1] = BLANK
        self.colors[-1] = self.clear_color

    # Writing ----------------------------------------------------------
    def put_byte(self, byte: Union[int, str]) -> int:
        """Write ``byte`` at the cursor, honouring ``\\b``, ``\\n`` and ``\\r``.

        Ordinary bytes are drawn with :attr:`write_color` and advance the
        cursor.  Running off the last row scrolls the console.  The byte is
        returned unchanged; anything that is not a single byte is ignored.
        """

        code = _as_code(byte)
        if not _is_byte(code):
            return code
        cursor = self.cursor
        if code == 0x08:
            self._retreat_cursor()
            self.chars[cursor.row, cursor.col] = BLANK
            self.colors[cursor.row, cursor.col] = self.write_color
        elif code == 0x0A:
            if self._newline():
                self._scroll()
        elif code == 0x0D:
            cursor.col = 0
        else:
            self.chars[cursor.row, cursor.col] = code
            self.colors[cursor.row, cursor.col] = self.write_color
            if self._advance_cursor():
                self._scroll()
        return code

    def put_bytes(self, data: Optional[bytes], length: Optional[int] = None) -> None:
        """Write the first ``length`` bytes of ``data`` (all of it by default)."""

        if data is None:
            return
        if length is None:
            length = len(data)
        if length < 0:
            return
        for byte in data[:length]:
            self.put_byte(byte)

    def put_string(self, text: Optional[str]) -> None:
        """Write ``text`` through :meth:`put_byte`."""

        if text is None:
            return
        self.put_bytes(text.encode("latin-1", errors="replace"))

    def clear(self) -> None:
        """Blank every cell with the clear colour and home the cursor."""

        self.chars.fill(BLANK)
        self.colors.fill(self.clear_color)
        self.cursor.row = 0
        self.cursor.col = 0

    def draw_char(self, row: int, col: int, ch: Union[int, str], color: int) -> None:
        """Draw directly into a cell without touching the cursor.

        Out-of-range coordinates, characters or colours are ignored.
        """

        code = _as_code(ch)
        if not self.in_bounds(row, col) or not _is_byte(code) or not _is_byte(color):
            return
        self.chars[row, col] = code
        self.colors[row, col] = color

    def set_cursor(self, row: int, col: int) -> bool:
        """Move the cursor; return ``False`` and leave it alone if out of range."""

        if not self.in_bounds(row, col):
            return False
        self.cursor.row = row
        self.cursor.col = col
        return True

    # Reading ----------------------------------------------------------
    def get(self, row: int, col: int) -> Tuple[str, int]:
        """Return ``(character, colour)`` at ``(row, col)``.

        Coordinates outside the console read as ``("\\0", 0)``.
        """

        if not self.in_bounds(row, col):
            return "\0", 0
        return chr(int(self.chars[row, col])), int(self.colors[row, col])

    def get_char(self, row: int, col: int) -> str:
        return self.get(row, col)[0]

    def rows(self) -> Iterator[Tuple[int, CellArray, CellArray]]:
        """Yield ``(row, chars, colours)`` for every console row."""

        for row in range(self.height):
            yield row, self.chars[row], self.colors[row]

    def row_text(self, row: int) -> str:
        return self.chars[row].tobytes().decode("latin-1")

    def text(self) -> str:
        """Return the characters of the console joined by newlines."""

        return "\n".join(self.row_text(row) for row in range(self.height))


__all__ = [
    "BLACK_ON_BLUE",
    "BLACK_ON_CYAN",
    "BLACK_ON_GREEN",
    "BLACK_ON_MAGENTA",
    "BLACK_ON_RED",
    "BLACK_ON_YELLOW",
    "BLANK",
    "Cursor",
    "NO_COLOR",
    "PALETTE",
    "VirtualConsole",
]
