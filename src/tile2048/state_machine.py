"""Tick-driven state machine running the game.

Every screen has two modes: an *enter* mode that paints the screen and an
*input* mode that waits for a key.  Enter modes always hand over to their input
mode on the next tick; input modes read at most one key per tick and hold when
nothing was pressed.  :meth:`GameStateMachine.step` runs exactly one tick.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from .animation import step_moving_blocks
from .config import GameConfig
from .console import VirtualConsole
from .display import Display, Key, KeyCode
from .engine import Direction, shift
from .game_state import GameSession
from .render import (
    cell_origin,
    draw_animation_frame,
    draw_background,
    draw_banner,
    draw_board,
    draw_title,
)
from .screens import (
    DEFEAT_BANNER,
    DIFFICULTY_LEVELS,
    DIFFICULTY_SCREEN,
    INSTRUCTIONS_SCREEN,
    VICTORY_BANNER,
)


LOGGER = logging.getLogger(__name__)


class Mode(str, Enum):
    """Every state the game can be in."""

    TITLE_ENTER = "title_enter"
    TITLE_INPUT = "title_input"
    INSTRUCTIONS_ENTER = "instructions_enter"
    INSTRUCTIONS_INPUT = "instructions_input"
    DIFFICULTY_ENTER = "difficulty_enter"
    DIFFICULTY_INPUT = "difficulty_input"
    GAME_START = "game_start"
    GAME_ENTER = "game_enter"
    GAME_INPUT = "game_input"
    SHIFTING_BLOCKS = "shifting_blocks"
    DONE_SHIFTING_BLOCKS = "done_shifting_blocks"
    VICTORY = "victory"
    DEFEAT = "defeat"
    GAME_OVER_INPUT = "game_over_input"


# Digit key -> tile that wins the game.
DIFFICULTY_TARGETS: Dict[str, int] = {key: tile for key, tile, _ in DIFFICULTY_LEVELS}

MOVE_KEYS: Dict[KeyCode, Direction] = {
    "w": Direction.UP,
    Key.UP: Direction.UP,
    "a": Direction.LEFT,
    Key.LEFT: Direction.LEFT,
    "s": Direction.DOWN,
    Key.DOWN: Direction.DOWN,
    "d": Direction.RIGHT,
    Key.RIGHT: Direction.RIGHT,
}

QUIT_KEY = "q"


def normalize_key(key: Optional[KeyCode]) -> Optional[KeyCode]:
    """Fold single characters to lower case; leave special keys alone."""

    if key is None or isinstance(key, Key):
        return key
    if len(key) == 1:
        return key.lower()
    return key


class GameStateMachine:
    """Drive a :class:`GameSession` one tick at a time."""

    def __init__(
        self,
        display: Display,
        session: Optional[GameSession] = None,
        console: Optional[VirtualConsole] = None,
        config: Optional[GameConfig] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.display = display
        self.session = session or GameSession.create(
            seed=self.config.seed, max_animations=self.config.max_animations
        )
        self.console = console or VirtualConsole(
            self.config.console_width, self.config.console_height
        )
        self.mode = Mode.TITLE_ENTER
        self.running = True
        self._handlers: Dict[Mode, Callable[[], None]] = {
            Mode.TITLE_ENTER: self._title_enter,
            Mode.TITLE_INPUT: self._title_input,
            Mode.INSTRUCTIONS_ENTER: self._instructions_enter,
            Mode.INSTRUCTIONS_INPUT: self._instructions_input,
            Mode.DIFFICULTY_ENTER: self._difficulty_enter,
            Mode.DIFFICULTY_INPUT: self._difficulty_input,
            Mode.GAME_START: self._game_start,
            Mode.GAME_ENTER: self._game_enter,
            Mode.GAME_INPUT: self._game_input,
            Mode.SHIFTING_BLOCKS: self._shifting_blocks,
            Mode.DONE_SHIFTING_BLOCKS: self._done_shifting_blocks,
            Mode.VICTORY: self._victory,
            Mode.DEFEAT: self._defeat,
            Mode.GAME_OVER_INPUT: self._game_over_input,
        }

    def step(self) -> bool:
        """Run a single tick; return ``False`` once the player has quit."""

        if self.running:
            self._handlers[self.mode]()
        return self.running

    # Helpers ----------------------------------------------------------
    def _transition(self, mode: Mode) -> None:
        LOGGER.debug("Mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    def _read_key(self) -> Optional[KeyCode]:
        return normalize_key(self.display.poll_key())

    def _present(self) -> None:
        self.display.present(self.console)

    def _draw_screen(self, screen: str, next_mode: Mode) -> None:
        draw_background(self.console, screen)
        self._present()
        self._transition(next_mode)

    # Title, instructions and difficulty screens ----------------------
    def _title_enter(self) -> None:
        draw_title(self.console, self.session.high_score)
        self._present()
        self._transition(Mode.TITLE_INPUT)

    def _title_input(self) -> None:
        key = self._read_key()
        if key == "n":
            self._transition(Mode.DIFFICULTY_ENTER)
        elif key == "i":
            self._transition(Mode.INSTRUCTIONS_ENTER)
        elif key == QUIT_KEY:
            LOGGER.info("Quit from title screen (high score %d)", self.session.high_score)
            self.running = False

    def _instructions_enter(self) -> None:
        self._draw_screen(INSTRUCTIONS_SCREEN, Mode.INSTRUCTIONS_INPUT)

    def _instructions_input(self) -> None:
        if self._read_key() == QUIT_KEY:
            self._transition(Mode.TITLE_ENTER)

    def _difficulty_enter(self) -> None:
        self._draw_screen(DIFFICULTY_SCREEN, Mode.DIFFICULTY_INPUT)

    def _difficulty_input(self) -> None:
        key = self._read_key()
        if key == QUIT_KEY:
            self._transition(Mode.TITLE_ENTER)
        elif isinstance(key, str) and key in DIFFICULTY_TARGETS:
            self.session.winning_tile = DIFFICULTY_TARGETS[key]
            LOGGER.info("Winning tile set to %d", self.session.winning_tile)
            self._transition(Mode.GAME_START)

    # Playing ----------------------------------------------------------
    def _game_start(self) -> None:
        self.session.reset_game()
        LOGGER.info("New game started")
        self._transition(Mode.GAME_ENTER)
        # No tick boundary between starting and entering a game.
        self._game_enter()

    def _game_enter(self) -> None:
        self.session.ticks += 1
        draw_board(self.console, self.session)
        self._present()
        self._transition(Mode.GAME_INPUT)

    def _game_input(self) -> None:
        self.session.ticks += 1
        key = self._read_key()
        if key == QUIT_KEY:
            self._transition(Mode.TITLE_ENTER)
            return
        direction = MOVE_KEYS.get(key) if key is not None else None
        if direction is None:
            return

        session = self.session
        result = shift(session.grid, direction, session.animations, project=cell_origin)
        if not result.changed:
            return
        session.background[...] = result.background
        session.add_score(result.score_delta)
        LOGGER.debug(
            "Shift %s moved %d tile(s), score +%d",
            direction.value,
            len(result.moves),
            result.score_delta,
        )
        self._transition(Mode.SHIFTING_BLOCKS)

    def _shifting_blocks(self) -> None:
        self.session.ticks += 1
        if self.session.ticks % self.config.animation_slowdown != 0:
            return
        draw_animation_frame(self.console, self.session)
        self._present()
        if not step_moving_blocks(self.session.animations, self.config.step_size):
            self._transition(Mode.DONE_SHIFTING_BLOCKS)

    def _done_shifting_blocks(self) -> None:
        session = self.session
        session.ticks += 1
        session.animations.reset()

        if session.board.is_won(session.winning_tile):
            LOGGER.info("Reached %d with score %d", session.winning_tile, session.score)
            self._transition(Mode.VICTORY)
            return

        session.add_random_tile()
        if session.board.is_lost():
            LOGGER.info("No moves left, final score %d", session.score)
            self._transition(Mode.DEFEAT)
        else:
            self._transition(Mode.GAME_ENTER)

    # Game over --------------------------------------------------------
    def _game_over(self, banner: str) -> None:
        draw_board(self.console, self.session)
        draw_banner(self.console, banner)
        self._present()
        self._transition(Mode.GAME_OVER_INPUT)

    def _victory(self) -> None:
        self._game_over(VICTORY_BANNER)

    def _defeat(self) -> None:
        self._game_over(DEFEAT_BANNER)

    def _game_over_input(self) -> None:
        if self._read_key() == QUIT_KEY:
            self._transition(Mode.TITLE_ENTER)


__all__ = [
    "DIFFICULTY_TARGETS",
    "GameStateMachine",
    "MOVE_KEYS",
    "Mode",
    "normalize_key",
]
