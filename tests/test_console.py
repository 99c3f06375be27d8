import pytest

from tile2048.console import BLACK_ON_RED, NO_COLOR, VirtualConsole


def test_put_byte_writes_and_advances() -> None:
    console = VirtualConsole(5, 3, write_color=BLACK_ON_RED)
    console.put_byte("a")
    assert console.get(0, 0) == ("a", BLACK_ON_RED)
    assert (console.cursor.row, console.cursor.col) == (0, 1)


def test_wrap_at_end_of_row_moves_to_next_row() -> None:
    console = VirtualConsole(3, 2)
    console.put_string("abc")
    assert (console.cursor.row, console.cursor.col) == (1, 0)
    assert console.row_text(0) == "abc"


def test_write_in_last_cell_scrolls() -> None:
    console = VirtualConsole(3, 2)
    console.put_string("top")
    assert console.set_cursor(1, 2)
    console.put_byte("x")
    assert console.row_text(0) == "  x"
    assert console.row_text(1) == "   "
    assert (console.cursor.row, console.cursor.col) == (1, 0)


def test_newline_on_last_row_scrolls_and_fills_with_clear_color() -> None:
    console = VirtualConsole(4, 2, clear_color=BLACK_ON_RED)
    console.put_string("ab\ncd\n")
    assert console.row_text(0) == "cd  "
    assert console.row_text(1) == "    "
    assert console.get(1, 0) == (" ", BLACK_ON_RED)
    assert (console.cursor.row, console.cursor.col) == (1, 0)


def test_carriage_return_keeps_row() -> None:
    console = VirtualConsole(5, 2)
    console.put_string("abc\rX")
    assert console.row_text(0) == "Xbc  "
    assert (console.cursor.row, console.cursor.col) == (0, 1)


def test_backspace_blanks_previous_cell_and_clamps() -> None:
    console = VirtualConsole(5, 2, write_color=BLACK_ON_RED)
    console.put_string("ab\b")
    assert console.row_text(0) == "a    "
    assert console.cursor.col == 1
    console.put_string("\b\b\b")
    assert console.cursor.col == 0
    assert console.get(0, 0) == (" ", BLACK_ON_RED)


def test_clear_resets_cells_and_cursor() -> None:
    console = VirtualConsole(4, 2)
    console.put_string("hello")
    console.clear()
    assert console.text() == "    \n    "
    assert (console.cursor.row, console.cursor.col) == (0, 0)


def test_draw_char_ignores_invalid_input() -> None:
    console = VirtualConsole(4, 2)
    before = console.text()
    console.draw_char(-1, 0, "x", 1)
    console.draw_char(0, 4, "x", 1)
    console.draw_char(2, 0, "x", 1)
    console.draw_char(0, 0, 300, 1)
    console.draw_char(0, 0, "x", 256)
    console.draw_char(0, 0, "x", -1)
    assert console.text() == before
    console.draw_char(1, 3, "z", 5)
    assert console.get(1, 3) == ("z", 5)
    assert (console.cursor.row, console.cursor.col) == (0, 0)


def test_get_out_of_bounds_reads_zero() -> None:
    console = VirtualConsole(4, 2)
    assert console.get(5, 5) == ("\0", NO_COLOR)
    assert console.get_char(-1, 0) == "\0"


def test_set_cursor_rejects_out_of_bounds() -> None:
    console = VirtualConsole(4, 2)
    console.set_cursor(1, 1)
    assert console.set_cursor(2, 0) is False
    assert console.set_cursor(0, -1) is False
    assert (console.cursor.row, console.cursor.col) == (1, 1)


def test_put_bytes_respects_length_and_ignores_bad_input() -> None:
    console = VirtualConsole(6, 1)
    console.put_bytes(b"abcdef", 3)
    assert console.row_text(0) == "abc   "
    console.put_bytes(b"zzz", -1)
    console.put_bytes(None, 2)
    console.put_string(None)
    assert console.row_text(0) == "abc   "
    assert console.cursor.col == 3


def test_scroll_discards_top_row_for_long_text() -> None:
    console = VirtualConsole(2, 2)
    console.put_string("aabbcc")
    assert console.text() == "cc\n  "


@pytest.mark.parametrize("value", [256, -1, "ab", ""])
def test_put_byte_ignores_values_that_are_not_bytes(value) -> None:
    console = VirtualConsole(4, 2)
    console.put_byte(value)
    assert console.text() == "    \n    "
    assert (console.cursor.row, console.cursor.col) == (0, 0)
