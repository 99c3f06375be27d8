import pygame
import pytest

from tile2048.console import BLACK_ON_RED, NO_COLOR, VirtualConsole
from tile2048.display import Key, open_display
from tile2048.pygame_view import (
    BACKGROUND,
    COLOR_VALUES,
    FOREGROUND,
    PygameDisplay,
    cell_colors,
    translate_event,
)


@pytest.fixture
def window(monkeypatch):
    """A small PygameDisplay opened on SDL's off-screen drivers."""

    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    display = PygameDisplay(8, 3, font_size=12)
    with open_display(display):
        yield display


def test_cell_colors_use_palette():
    assert cell_colors(NO_COLOR) == (FOREGROUND, BACKGROUND)
    assert cell_colors(BLACK_ON_RED) == (COLOR_VALUES["black"], COLOR_VALUES["red"])
    assert cell_colors(99) == (FOREGROUND, BACKGROUND)


def test_translate_event_maps_keys():
    up = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP, unicode="")
    letter = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d, unicode="d")
    shifted = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LSHIFT, unicode="")
    assert translate_event(up) is Key.UP
    assert translate_event(letter) == "d"
    assert translate_event(shifted) is None


def test_closing_the_window_quits():
    assert translate_event(pygame.event.Event(pygame.QUIT)) == "q"


def test_other_events_are_ignored():
    release = pygame.event.Event(pygame.KEYUP, key=pygame.K_a, unicode="a")
    assert translate_event(release) is None


def test_window_is_sized_from_console_cells(window):
    cell_w, cell_h = window._font.size("M")
    assert pygame.display.get_surface().get_size() == (8 * cell_w, 3 * cell_h)


def test_present_paints_block_background(window):
    console = VirtualConsole(8, 3)
    console.write_color = BLACK_ON_RED
    console.put_string("2 ")
    console.draw_char(2, 7, "\0", NO_COLOR)
    window.present(console)

    surface = pygame.display.get_surface()
    cell_w, cell_h = window._font.size("M")
    assert surface.get_at((cell_w + cell_w // 2, cell_h // 2))[:3] == COLOR_VALUES["red"]
    assert surface.get_at((5 * cell_w, cell_h))[:3] == BACKGROUND


def test_poll_key_reads_queued_events(window):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT, unicode=""))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w, unicode="w"))
    assert window.poll_key() is Key.LEFT
    assert window.poll_key() == "w"
    assert window.poll_key() is None


def test_shutdown_releases_the_window(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    display = PygameDisplay(4, 2)
    with open_display(display):
        assert pygame.display.get_init()
    assert not pygame.display.get_init()
    assert display.poll_key() is None
    display.present(VirtualConsole(4, 2))
