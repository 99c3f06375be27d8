"""Terminal 2048 with animated tile shifts."""

from .animation import AnimatedBlock, AnimationPool, BlockState, step_moving_blocks
from .board import Board, GRID_SIZE, add_random_tile, is_lost, is_won
from .config import GameConfig
from .console import Cursor, VirtualConsole
from .display import Display, DisplayError, HeadlessDisplay, Key
from .engine import (
    Direction,
    Move,
    ShiftResult,
    shift,
    shift_down,
    shift_grid_left,
    shift_left,
    shift_right,
    shift_up,
)
from .game_state import GameSession
from .runner import GameRunner
from .state_machine import GameStateMachine, Mode
from .transform import Transform

__all__ = [
    "AnimatedBlock",
    "AnimationPool",
    "BlockState",
    "Board",
    "Cursor",
    "Direction",
    "Display",
    "DisplayError",
    "GRID_SIZE",
    "GameConfig",
    "GameRunner",
    "GameSession",
    "GameStateMachine",
    "HeadlessDisplay",
    "Key",
    "Mode",
    "Move",
    "ShiftResult",
    "Transform",
    "VirtualConsole",
    "add_random_tile",
    "is_lost",
    "is_won",
    "shift",
    "shift_down",
    "shift_grid_left",
    "shift_left",
    "shift_right",
    "shift_up",
    "step_moving_blocks",
]
