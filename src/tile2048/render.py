"""Paint game screens into a :class:`~tile2048.console.VirtualConsole`.

Frames are composed in layers: first a static background (a text screen or
the empty board), then the tiles, then anything moving on top.  Nothing here
presents the console; that is left to the display backend.
"""

from __future__ import annotations

from typing import Dict, Tuple

from .animation import Position
from .board import Grid
from .console import (
    BLACK_ON_BLUE,
    BLACK_ON_CYAN,
    BLACK_ON_GREEN,
    BLACK_ON_MAGENTA,
    BLACK_ON_RED,
    BLACK_ON_YELLOW,
    VirtualConsole,
)
from .game_state import GameSession
from .screens import (
    BANNER_ROW,
    GAME_BACKGROUND,
    HIGH_SCORE_POS,
    SCORE_POS,
    TITLE_HIGH_SCORE_POS,
    TITLE_SCREEN,
)


# Size of one board cell on the console, borders included.
CELL_HEIGHT = 6
CELL_WIDTH = 12
# Size of the coloured block drawn inside a cell.
BLOCK_HEIGHT = CELL_HEIGHT - 1
BLOCK_WIDTH = CELL_WIDTH - 1

BLOCK_COLORS: Dict[int, int] = {
    2: BLACK_ON_YELLOW,
    4: BLACK_ON_CYAN,
    8: BLACK_ON_BLUE,
    16: BLACK_ON_GREEN,
    32: BLACK_ON_RED,
    64: BLACK_ON_MAGENTA,
}
# Anything above 64 shares the last colour.
DEFAULT_BLOCK_COLOR = BLACK_ON_MAGENTA


def cell_origin(cell: Position) -> Position:
    """Return the console position of the top-left corner of a grid cell."""

    row, col = cell
    return row * CELL_HEIGHT + 1, col * CELL_WIDTH + 1


def block_color(value: int) -> int:
    return BLOCK_COLORS.get(value, DEFAULT_BLOCK_COLOR)


def draw_block(console: VirtualConsole, row: int, col: int, value: int) -> None:
    """Draw a coloured block showing ``value`` with its corner at ``(row, col)``."""

    old_color = console.write_color
    console.write_color = block_color(value)
    blank = " " * BLOCK_WIDTH
    label = str(value).center(BLOCK_WIDTH)
    for offset in range(BLOCK_HEIGHT):
        if console.set_cursor(row + offset, col):
            console.put_string(label if offset == BLOCK_HEIGHT // 2 else blank)
    console.write_color = old_color


def draw_blocks(console: VirtualConsole, grid: Grid) -> None:
    """Draw every non-empty tile of ``grid`` in its board cell."""

    rows, cols = grid.shape
    for r in range(rows):
        for c in range(cols):
            value = int(grid[r, c])
            if value > 0:
                draw_block(console, *cell_origin((r, c)), value)


def draw_score(console: VirtualConsole, position: Tuple[int, int], score: int) -> None:
    if console.set_cursor(*position):
        console.put_string(str(score))


def draw_background(console: VirtualConsole, screen: str) -> None:
    """Clear ``console`` and print ``screen`` from the top-left corner."""

    console.clear()
    console.set_cursor(0, 0)
    console.put_string(screen)


def draw_title(console: VirtualConsole, high_score: int) -> None:
    draw_background(console, TITLE_SCREEN)
    draw_score(console, TITLE_HIGH_SCORE_POS, high_score)


def _draw_frame(console: VirtualConsole, session: GameSession, grid: Grid) -> None:
    draw_background(console, GAME_BACKGROUND)
    draw_score(console, SCORE_POS, session.score)
    draw_score(console, HIGH_SCORE_POS, session.high_score)
    draw_blocks(console, grid)


def draw_board(console: VirtualConsole, session: GameSession) -> None:
    """Draw the board while waiting for input: grid, tiles and scores."""

    _draw_frame(console, session, session.grid)


def draw_animation_frame(console: VirtualConsole, session: GameSession) -> None:
    """Draw one frame of a shift in progress.

    The still tiles come from the session background; moving and idle blocks
    are drawn over them at their current console positions.
    """

    _draw_frame(console, session, session.background)
    for block in session.animations.live():
        draw_block(console, *block.cur, block.value)


def draw_banner(console: VirtualConsole, banner: str) -> None:
    """Print ``banner`` across the board, starting at the banner row."""

    if console.set_cursor(BANNER_ROW, 0):
        console.put_string(banner)


__all__ = [
    "BLOCK_COLORS",
    "CELL_HEIGHT",
    "CELL_WIDTH",
    "block_color",
    "cell_origin",
    "draw_animation_frame",
    "draw_background",
    "draw_banner",
    "draw_block",
    "draw_blocks",
    "draw_board",
    "draw_score",
    "draw_title",
]
