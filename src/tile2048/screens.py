"""Static text shown by the game.

Every full screen is 25 lines of at most 79 characters, so printing it from
the top-left corner of an 80x25 console never wraps or scrolls.
"""

from __future__ import annotations

from typing import List, Sequence


SCREEN_LINES = 25
FRAME_WIDTH = 79


def _frame(body: Sequence[str], *, width: int = FRAME_WIDTH, height: int = SCREEN_LINES) -> str:
    """Surround ``body`` with a star border, padding it to ``height`` lines."""

    inner = width - 2
    lines = ["*" * width]
    for text in body:
        lines.append("*" + text[:inner].ljust(inner) + "*")
    while len(lines) < height - 1:
        lines.append("*" + " " * inner + "*")
    lines.append("*" * width)
    return "\n".join(lines)


TITLE_SCREEN = _frame(
    [
        "High Score:",
        "",
        "        .-''-.     .----.          ,--.    .-''-.",
        "      .' .-.  )   / .--. \\        /   |   / .-.  )",
        "     / .'  / /   ' '    ' '      / /| |  ( (   ) )",
        "    (_/   / /    \\ \\    / /     / / | |   '.-''-.'",
        "         / /      `.`''.'      / /__| |_  / .-.  \\",
        "        / /       / `'-. `.   |________ |( (   ) )",
        "       . '       ' /    `. \\           | | '.-''-.'",
        "      / /    _  / /       \\ '          | |   `''`",
        "     / '  _.'.)| |         | |         | |",
        "    /  '-'_.'  ' '         ' '        /___\\",
        "   (_.-''-'     \\ '.-''-.' /",
        "                 `''----''`",
        "",
        "                          Slide the tiles, merge the numbers",
        "                          ~*~*~*~*~*~*~*~*~*~*~*~*~*~*~*~*~*",
        "                              (N)ew Game",
        "                              (I)nstructions",
        "                              (Q)uit",
    ]
)

INSTRUCTIONS_SCREEN = _frame(
    [
        "",
        "                             How to Play",
        "                             -----------",
        "                             W / Up:    Shift blocks up",
        "                             A / Left:  Shift blocks left",
        "                             S / Down:  Shift blocks down",
        "                             D / Right: Shift blocks right",
        "                             Q:         Quit",
        "",
        "",
        "       Every move pushes all tiles as far as they go in one direction.",
        "       Two touching tiles with the same number merge into one tile",
        "       worth their sum, and the merged value is added to your score.",
        "       After each move a new 2 or 4 appears on an empty square.",
        "",
        "       Reach the tile you picked on the difficulty screen to win.",
        "       If the board fills up and nothing can merge, the game is lost.",
        "",
        "",
        "                      (To leave this screen, press 'Q')",
    ]
)

DIFFICULTY_LEVELS = (
    ("1", 8, "Unicellular Organism"),
    ("2", 16, "Moss"),
    ("3", 32, "Mango"),
    ("4", 64, "Jellyfish"),
    ("5", 128, "Cockroach"),
    ("6", 256, "Hamster"),
    ("7", 512, "Ferret"),
    ("8", 1024, "Kangaroo"),
    ("9", 2048, "Human"),
    ("0", 4096, "Dolphin"),
)


def _difficulty_body() -> List[str]:
    body = ["", "", "", "", "                       Select A Difficulty Level"]
    for key, tile, label in DIFFICULTY_LEVELS:
        body.append(f"                            ({key}) {tile:<4} -- {label}")
    body.append("")
    body.append("                            (Q) Back to the title screen")
    return body


DIFFICULTY_SCREEN = _frame(_difficulty_body())

VICTORY_BANNER = _frame(
    [
        "        YOU WIN -- PRESS 'Q' TO RETURN TO THE MAIN SCREEN",
        "        Way to go.",
    ],
    width=68,
    height=4,
)

DEFEAT_BANNER = _frame(
    [
        "        YOU LOSE -- PRESS 'Q' TO RETURN TO THE MAIN SCREEN",
        "        No merges left. Better luck next time.",
    ],
    width=68,
    height=4,
)


# Game board: a 4x4 grid of 11x5 cells plus a score panel on the right.
_GRID_BORDER = "#" + "#".join(["-" * 11] * 4) + "#"
_GRID_ROW = "|" + "|".join([" " * 11] * 4) + "|"
_SIDE_PANEL = {
    0: "  #-----------#-----------#",
    1: "  |  SCORE    |  TOP      |",
    2: "  #-----------#-----------#",
    3: "  |           |           |",
    4: "  #-----------#-----------#",
    6: "     WASD/arrows: move",
    7: "     'Q' to quit",
}


def _game_background() -> str:
    lines = []
    for row in range(SCREEN_LINES):
        base = _GRID_BORDER if row % 6 == 0 else _GRID_ROW
        lines.append(base + _SIDE_PANEL.get(row, ""))
    return "\n".join(lines)


GAME_BACKGROUND = _game_background()

# Console positions of the score read-outs.
TITLE_HIGH_SCORE_POS = (1, 13)
SCORE_POS = (3, 52)
HIGH_SCORE_POS = (3, 64)
BANNER_ROW = 10


__all__ = [
    "BANNER_ROW",
    "DEFEAT_BANNER",
    "DIFFICULTY_LEVELS",
    "DIFFICULTY_SCREEN",
    "GAME_BACKGROUND",
    "HIGH_SCORE_POS",
    "INSTRUCTIONS_SCREEN",
    "SCORE_POS",
    "TITLE_HIGH_SCORE_POS",
    "TITLE_SCREEN",
    "VICTORY_BANNER",
]
