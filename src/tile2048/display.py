"""Display contract shared by the terminal and window front-ends.

A display acquires the screen, hands out key presses without ever blocking and
copies a finished :class:`~tile2048.console.VirtualConsole` to the screen.
"""

from __future__ import annotations

import logging
from collections import deque
from contextlib import contextmanager
from enum import Enum
from typing import Deque, Iterable, Iterator, List, Optional, Protocol, TypeVar, Union

from .console import VirtualConsole


LOGGER = logging.getLogger(__name__)


class Key(str, Enum):
    """Non-character keys reported by :meth:`Display.poll_key`."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


KeyCode = Union[Key, str]


class DisplayError(RuntimeError):
    """Raised when a display cannot be acquired or drawn to."""


class Display(Protocol):
    def init(self) -> None:
        ...

    def shutdown(self) -> None:
        ...

    def poll_key(self) -> Optional[KeyCode]:
        ...

    def present(self, console: VirtualConsole) -> None:
        ...


D = TypeVar("D", bound=Display)


@contextmanager
def open_display(display: D) -> Iterator[D]:
    """Acquire ``display`` for the duration of the block.

    ``shutdown`` is called on the way out even when the block raises, so the
    terminal is always handed back in a usable state.
    """

    display.init()
    LOGGER.info("Display %s acquired", type(display).__name__)
    try:
        yield display
    finally:
        display.shutdown()
        LOGGER.info("Display %s released", type(display).__name__)


class HeadlessDisplay:
    """Display that replays scripted keys and records presented frames.

    Useful for tests and for driving the game without a terminal.  Each call
    to :meth:`poll_key` consumes one scripted entry; ``None`` entries stand for
    ticks where no key was pressed.
    """

    def __init__(self, keys: Iterable[Optional[KeyCode]] = (), *, keep_frames: bool = True) -> None:
        self.keys: Deque[Optional[KeyCode]] = deque(keys)
        self.keep_frames = keep_frames
        self.frames: List[str] = []
        self.presented = 0
        self.active = False

    def feed(self, *keys: Optional[KeyCode]) -> None:
        self.keys.extend(keys)

    def init(self) -> None:
        self.active = True

    def shutdown(self) -> None:
        self.active = False

    def poll_key(self) -> Optional[KeyCode]:
        if not self.keys:
            return None
        return self.keys.popleft()

    def present(self, console: VirtualConsole) -> None:
        self.presented += 1
        if self.keep_frames:
            self.frames.append(console.text())

    @property
    def last_frame(self) -> str:
        return self.frames[-1] if self.frames else ""


__all__ = [
    "Display",
    "DisplayError",
    "HeadlessDisplay",
    "Key",
    "KeyCode",
    "open_display",
]
