"""Runtime configuration for the 2048 game loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# Seconds slept between two state machine ticks (10ms).
TICK_SECONDS = 0.01
# Draw and advance the animation only on every Nth tick.
ANIMATION_SLOWDOWN = 1
# Console cells an animated block travels per animation step.
ANIMATION_STEP = 1
# Maximum number of animated blocks alive at once.
MAX_ANIMATIONS = 16

CONSOLE_WIDTH = 80
CONSOLE_HEIGHT = 25

BACKENDS = ("curses", "pygame")


@dataclass
class GameConfig:
    """Settings shared by the runner, the state machine and the displays."""

    tick_seconds: float = TICK_SECONDS
    animation_slowdown: int = ANIMATION_SLOWDOWN
    step_size: int = ANIMATION_STEP
    max_animations: int = MAX_ANIMATIONS
    console_width: int = CONSOLE_WIDTH
    console_height: int = CONSOLE_HEIGHT
    seed: Optional[int] = None
    backend: str = "curses"
    font_size: int = 18

    def __post_init__(self) -> None:
        if self.tick_seconds < 0:
            raise ValueError("tick_seconds must not be negative")
        if self.animation_slowdown < 1:
            raise ValueError("animation_slowdown must be at least 1")
        if self.step_size < 1:
            raise ValueError("step_size must be at least 1")
        if self.max_animations < 1:
            raise ValueError("max_animations must be at least 1")
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend: {self.backend}")


__all__ = [
    "ANIMATION_SLOWDOWN",
    "ANIMATION_STEP",
    "BACKENDS",
    "CONSOLE_HEIGHT",
    "CONSOLE_WIDTH",
    "GameConfig",
    "MAX_ANIMATIONS",
    "TICK_SECONDS",
]
