"""Play 2048 in the terminal.

Run with: `python -m tile2048`

Pass ``--help`` to pick the pygame window instead of the terminal, fix the
random seed or slow the animations down.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import BACKENDS, GameConfig
from .display import Display, DisplayError
from .runner import GameRunner


LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(prog="tile2048", description=__doc__)
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=defaults.backend,
        help="Where to draw the game.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for tile placement.")
    parser.add_argument(
        "--tick",
        type=float,
        default=defaults.tick_seconds,
        help="Seconds between two game ticks.",
    )
    parser.add_argument(
        "--slowdown",
        type=int,
        default=defaults.animation_slowdown,
        help="Advance animations only every N ticks.",
    )
    parser.add_argument(
        "--font-size",
        type=int,
        default=defaults.font_size,
        help="Font size of the pygame window.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log messages to this file instead of stderr.",
    )
    return parser.parse_args(argv)


def configure_logging(level: str, log_file: Optional[str], backend: str) -> None:
    level_value = getattr(logging, level.upper(), logging.WARNING)
    fmt = "%(asctime)s %(name)s %(levelname)s %(message)s"
    if log_file:
        logging.basicConfig(level=level_value, filename=log_file, format=fmt)
    elif backend == "curses":
        # stderr shares the terminal with the game screen.
        logging.basicConfig(level=level_value, handlers=[logging.NullHandler()])
    else:
        logging.basicConfig(level=level_value, format=fmt)


def build_display(config: GameConfig) -> Display:
    if config.backend == "pygame":
        from .pygame_view import PygameDisplay

        return PygameDisplay(
            config.console_width, config.console_height, font_size=config.font_size
        )
    from .curses_view import CursesDisplay

    return CursesDisplay(config.console_width, config.console_height)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file, args.backend)
    try:
        config = GameConfig(
            tick_seconds=args.tick,
            animation_slowdown=args.slowdown,
            seed=args.seed,
            backend=args.backend,
            font_size=args.font_size,
        )
    except ValueError as exc:
        print(f"tile2048: {exc}", file=sys.stderr)
        return 2

    runner = GameRunner(build_display(config), config)
    try:
        runner.run()
    except DisplayError as exc:
        LOGGER.error("Display failed: %s", exc)
        print(f"tile2048: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        LOGGER.info("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
