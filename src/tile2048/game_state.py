"""High level game state container."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from .animation import AnimationPool
from .board import Board, Grid, create_empty_grid
from .config import MAX_ANIMATIONS


DEFAULT_WINNING_TILE = 2048


@dataclass
class GameSession:
    """Mutable state for a 2048 session.

    The session lives for the whole process: starting a new round resets the
    board, score and timer but keeps the high score.
    """

    board: Board = field(default_factory=Board)
    animations: AnimationPool = field(default_factory=lambda: AnimationPool(MAX_ANIMATIONS))
    background: Grid = field(default_factory=create_empty_grid)
    score: int = 0
    high_score: int = 0
    ticks: int = 0
    winning_tile: int = DEFAULT_WINNING_TILE
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def create(cls, *, seed: Optional[int] = None, max_animations: int = MAX_ANIMATIONS) -> "GameSession":
        """Build a session with a seeded random generator."""

        return cls(animations=AnimationPool(max_animations), rng=random.Random(seed))

    @property
    def grid(self) -> Grid:
        return self.board.grid

    def add_score(self, points: int) -> None:
        """Add ``points`` to the score, raising the high score if beaten."""

        self.set_score(self.score + points)

    def set_score(self, score: int) -> None:
        self.score = score
        if self.score > self.high_score:
            self.high_score = self.score

    def add_random_tile(self):
        return self.board.add_random_tile(self.rng)

    def reset_game(self) -> None:
        """Reset the board, score and timer for a new round.

        Two random tiles are placed on the fresh board.
        """

        self.board.clear()
        self.background.fill(0)
        self.animations.reset()
        self.score = 0
        self.ticks = 0
        self.add_random_tile()
        self.add_random_tile()


__all__ = ["DEFAULT_WINNING_TILE", "GameSession"]
