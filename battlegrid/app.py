"""The interactive terminal game: key handling, screen layout and main loop."""

from __future__ import annotations

import argparse
import enum
import random
import re

from battlegrid import assets
from battlegrid import rules
from battlegrid.render import (
    battlefield_lines,
    combat_info_lines,
    status_line,
    unit_info_lines,
)
from battlegrid.state import GameState

COMBAT_HEIGHT = 8
INFO_WIDTH = 36
INFO_BOTTOM = 8

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


class Action(enum.Enum):
    QUIT = "quit"
    CURSOR_UP = "cursor_up"
    CURSOR_DOWN = "cursor_down"
    CURSOR_LEFT = "cursor_left"
    CURSOR_RIGHT = "cursor_right"
    END_TURN = "end_turn"


_NAMED_KEYS = {
    "KEY_UP": Action.CURSOR_UP,
    "KEY_DOWN": Action.CURSOR_DOWN,
    "KEY_LEFT": Action.CURSOR_LEFT,
    "KEY_RIGHT": Action.CURSOR_RIGHT,
}

_TEXT_KEYS = {
    "\x03": Action.QUIT,
    " ": Action.END_TURN,
}

_CURSOR_MOVES = {
    Action.CURSOR_UP: (0, -1),
    Action.CURSOR_DOWN: (0, 1),
    Action.CURSOR_LEFT: (-1, 0),
    Action.CURSOR_RIGHT: (1, 0),
}


def action_for_key(key) -> Action | None:
    """The action bound to a keystroke, or None if the key is unbound."""
    name = getattr(key, "name", None)
    if name in _NAMED_KEYS:
        return _NAMED_KEYS[name]
    return _TEXT_KEYS.get(str(key))


def apply_action(state: GameState, action: Action, rng: random.Random | None = None) -> bool:
    """Carry out an action. Returns False when the game should stop."""
    if action is Action.QUIT:
        return False
    if action is Action.END_TURN:
        rules.end_turn(state, rng)
    else:
        rules.move_cursor(state, *_CURSOR_MOVES[action])
    return True


def _cells(text: str) -> list[str]:
    """Split text into visible characters, each carrying its own colour."""
    cells: list[str] = []
    colour = ""
    pos = 0

    def add(chunk: str) -> None:
        cells.extend(f"{colour}{ch}{assets.RESET_TEXT}" if colour else ch for ch in chunk)

    for match in _ANSI.finditer(text):
        add(text[pos:match.start()])
        code = match.group()
        colour = "" if code == assets.RESET_TEXT else code
        pos = match.end()
    add(text[pos:])
    return cells


def _draw_view(grid: list[list[str]], x0: int, y0: int, x1: int, y1: int, lines: list[str]) -> None:
    """Draw a framed view with its content clipped to the frame."""
    if x0 >= x1 or y0 >= y1:
        return
    height, width = len(grid), len(grid[0])

    def put(x: int, y: int, cell: str) -> None:
        if 0 <= x < width and 0 <= y < height:
            grid[y][x] = cell

    for y in range(y0 + 1, y1):
        for x in range(x0 + 1, x1):
            put(x, y, " ")
    for x in range(x0 + 1, x1):
        put(x, y0, "─")
        put(x, y1, "─")
    for y in range(y0 + 1, y1):
        put(x0, y, "│")
        put(x1, y, "│")
    put(x0, y0, "┌")
    put(x1, y0, "┐")
    put(x0, y1, "└")
    put(x1, y1, "┘")

    for row, line in enumerate(lines, start=y0 + 1):
        if row >= y1:
            break
        for col, cell in enumerate(_cells(line), start=x0 + 1):
            if col >= x1:
                break
            put(col, row, cell)


def compose_screen(state: GameState, width: int, height: int) -> list[str]:
    """Lay out the three views on a screen of the given size."""
    if width < 1 or height < 1:
        raise ValueError(f"screen size must be positive, got {width}x{height}")
    grid = [[" "] * width for _ in range(height)]
    _draw_view(
        grid, 0, 0, width - 1, height - COMBAT_HEIGHT - 1,
        battlefield_lines(state) + [status_line(state)],
    )
    _draw_view(
        grid, 0, height - COMBAT_HEIGHT, width - 1, height - 1,
        combat_info_lines(state),
    )
    _draw_view(
        grid, width - INFO_WIDTH, 0, width - 1, INFO_BOTTOM,
        unit_info_lines(state),
    )
    return ["".join(row) for row in grid]


def run(state: GameState, terminal, rng: random.Random | None = None) -> None:
    """Draw the game and react to keys until the player quits."""
    with terminal.fullscreen(), terminal.cbreak(), terminal.hidden_cursor():
        try:
            while True:
                screen = compose_screen(state, terminal.width, terminal.height)
                print(terminal.home + terminal.clear + "\n".join(screen), end="", flush=True)
                action = action_for_key(terminal.inkey())
                if action is not None and not apply_action(state, action, rng):
                    return
        except KeyboardInterrupt:
            return


def main(argv: list[str] | None = None) -> int:
    """Start an interactive game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="battlegrid", description="A turn-based battle on a grid."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)

    from blessed import Terminal

    run(GameState(), Terminal(), random.Random(args.seed))
    return 0