"""Animated blocks and the scheduler that moves them.

When a shift slides or merges tiles, every travelling tile is recorded as an
:class:`AnimatedBlock`.  Each animation tick moves the blocks one step closer to
their destination; a block that has arrived becomes idle and keeps showing its
final value until the state machine folds the shift into the real grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from .config import ANIMATION_STEP, MAX_ANIMATIONS


Position = Tuple[int, int]  # (row, col)


class BlockState(str, Enum):
    """Life cycle of an animation slot."""

    DEAD = "dead"
    MOVING = "moving"
    IDLE = "idle"


@dataclass
class AnimatedBlock:
    """A tile travelling from ``cur`` towards ``dest``.

    ``moving_value`` is shown while travelling and ``idle_value`` once the
    block has arrived; they differ when the move ends in a merge.
    """

    state: BlockState = BlockState.DEAD
    cur: Position = (0, 0)
    dest: Position = (0, 0)
    moving_value: int = 0
    idle_value: int = 0

    @property
    def value(self) -> int:
        """Value to draw for the block in its current state."""

        return self.idle_value if self.state is BlockState.IDLE else self.moving_value


class AnimationPool:
    """Fixed number of reusable :class:`AnimatedBlock` slots."""

    def __init__(self, capacity: int = MAX_ANIMATIONS) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.blocks: List[AnimatedBlock] = [AnimatedBlock() for _ in range(capacity)]

    def add(self, start: Position, dest: Position, moving_value: int, idle_value: int) -> bool:
        """Start a new animation in the first dead slot.

        Returns ``False`` and records nothing when every slot is taken.
        """

        for block in self.blocks:
            if block.state is BlockState.DEAD:
                block.state = BlockState.MOVING
                block.cur = start
                block.dest = dest
                block.moving_value = moving_value
                block.idle_value = idle_value
                return True
        return False

    def reset(self) -> None:
        """Mark every slot dead so it can be reused."""

        for block in self.blocks:
            block.state = BlockState.DEAD

    def moving(self) -> Iterator[AnimatedBlock]:
        return (b for b in self.blocks if b.state is BlockState.MOVING)

    def live(self) -> Iterator[AnimatedBlock]:
        """Yield blocks that are moving or idle, i.e. everything to draw."""

        return (b for b in self.blocks if b.state is not BlockState.DEAD)

    def __len__(self) -> int:
        return sum(1 for _ in self.live())


def _approach(current: int, target: int, step: int) -> int:
    delta = target - current
    if delta > 0:
        return current + min(delta, step)
    if delta < 0:
        return current - min(-delta, step)
    return current


def step_moving_blocks(pool: AnimationPool, step_size: int = ANIMATION_STEP) -> bool:
    """Advance every moving block by up to ``step_size`` on each axis.

    Blocks that reach their destination become idle.  Returns ``True`` while
    at least one block is still moving after the update.
    """

    still_moving = False
    for block in pool.moving():
        row, col = block.cur
        dest_row, dest_col = block.dest
        block.cur = (_approach(row, dest_row, step_size), _approach(col, dest_col, step_size))
        if block.cur == block.dest:
            block.state = BlockState.IDLE
        else:
            still_moving = True
    return still_moving


__all__ = [
    "AnimatedBlock",
    "AnimationPool",
    "BlockState",
    "Position",
    "step_moving_blocks",
]
