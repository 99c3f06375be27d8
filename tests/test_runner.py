import logging

import pytest

from tile2048.config import GameConfig
from tile2048.display import HeadlessDisplay
from tile2048.game_state import GameSession
from tile2048.runner import GameRunner
from tile2048.state_machine import Mode


class FakeSleep:
    def __init__(self) -> None:
        self.calls = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class ExplodingDisplay(HeadlessDisplay):
    def present(self, console) -> None:
        raise RuntimeError("screen went away")


def test_runner_stops_when_player_quits(caplog):
    display = HeadlessDisplay([None, "q"])
    sleep = FakeSleep()
    runner = GameRunner(display, GameConfig(tick_seconds=0.25), sleep=sleep)

    with caplog.at_level(logging.INFO, logger="tile2048"):
        ticks = runner.run()

    assert ticks == 3
    # No sleep after the final tick.
    assert sleep.calls == [0.25, 0.25]
    assert not runner.running
    assert not display.active
    assert "Game loop stopped after 3 tick(s)" in caplog.text
    assert "Display HeadlessDisplay released" in caplog.text


def test_runner_honours_max_ticks():
    display = HeadlessDisplay()
    runner = GameRunner(display, sleep=FakeSleep())
    assert runner.run(max_ticks=5) == 5
    assert runner.machine is not None
    assert runner.machine.mode is Mode.TITLE_INPUT
    assert display.presented == 1


def test_runner_keeps_session_between_runs():
    session = GameSession.create(seed=3)
    session.set_score(128)
    display = HeadlessDisplay(["q"])
    runner = GameRunner(display, session=session, sleep=FakeSleep())
    runner.run()
    assert "High Score: 128" in display.frames[0]
    assert runner.session is session


def test_runner_plays_a_game():
    display = HeadlessDisplay(["n", "9", "a", "d", "w", "s", "q", "q"])
    runner = GameRunner(display, GameConfig(seed=5), sleep=FakeSleep())
    runner.run(max_ticks=2000)
    assert runner.machine.running is False
    assert runner.session.winning_tile == 2048
    assert display.presented > 3


def test_display_is_released_when_a_tick_fails():
    display = ExplodingDisplay()
    runner = GameRunner(display, sleep=FakeSleep())
    with pytest.raises(RuntimeError):
        runner.run()
    assert not display.active
    assert not runner.running


def test_stop_ends_loop_after_current_tick():
    display = HeadlessDisplay()
    runner = GameRunner(display)

    def sleep(_seconds: float) -> None:
        runner.stop()

    runner._sleep = sleep
    assert runner.run() == 1


def test_stop_is_ignored_when_idle(caplog):
    runner = GameRunner(HeadlessDisplay())
    with caplog.at_level(logging.INFO, logger="tile2048.runner"):
        runner.stop()
    assert "Stop ignored" in caplog.text


def test_stop_during_a_tick_is_not_overwritten():
    class StoppingDisplay(HeadlessDisplay):
        def present(self, console) -> None:
            super().present(console)
            runner.stop()

    sleep = FakeSleep()
    runner = GameRunner(StoppingDisplay(), sleep=sleep)
    assert runner.run() == 1
    assert sleep.calls == []
