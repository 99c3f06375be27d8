"""Fixed-interval game loop."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .config import GameConfig
from .display import Display, open_display
from .game_state import GameSession
from .state_machine import GameStateMachine


LOGGER = logging.getLogger(__name__)


class GameRunner:
    """Own the session and tick the state machine until the player quits.

    The loop is strictly sequential: one tick runs to completion, then the
    runner sleeps for ``config.tick_seconds`` before the next one.
    """

    def __init__(
        self,
        display: Display,
        config: Optional[GameConfig] = None,
        *,
        session: Optional[GameSession] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or GameConfig()
        self.display = display
        self.session = session or GameSession.create(
            seed=self.config.seed, max_animations=self.config.max_animations
        )
        self._sleep = sleep
        self._running = False
        self.machine: Optional[GameStateMachine] = None
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._running

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Play until the player quits or ``max_ticks`` ticks have run.

        Returns the number of ticks executed.
        """

        self.ticks = 0
        with open_display(self.display):
            self.machine = GameStateMachine(self.display, self.session, config=self.config)
            self._running = True
            LOGGER.info("Game loop started (tick %.3fs)", self.config.tick_seconds)
            try:
                while self._running:
                    if max_ticks is not None and self.ticks >= max_ticks:
                        break
                    self._running = self.machine.step() and self._running
                    self.ticks += 1
                    if self._running:
                        self._sleep(self.config.tick_seconds)
            finally:
                self._running = False
                LOGGER.info(
                    "Game loop stopped after %d tick(s), high score %d",
                    self.ticks,
                    self.session.high_score,
                )
        return self.ticks

    def stop(self) -> None:
        """Ask the loop to finish after the current tick."""

        if not self._running:
            LOGGER.info("Stop ignored: game not running")
            return
        self._running = False


__all__ = ["GameRunner"]
