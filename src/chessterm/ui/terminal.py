"""Curses front end: key polling, key-to-action mapping and the event loop."""

from __future__ import annotations

import curses
import logging
from typing import Any

from chessterm.core.types import Direction
from chessterm.game.controller import GameController
from chessterm.game.interfaces import Action, Cancel, Confirm, MoveCursor, Quit
from chessterm.ui.render import draw, init_colors

_LOGGER = logging.getLogger(__name__)

POLL_INTERVAL_MS = 100
KEY_ESCAPE = 27

KEY_BINDINGS: dict[int, Action] = {
    curses.KEY_UP: MoveCursor(Direction.UP),
    curses.KEY_DOWN: MoveCursor(Direction.DOWN),
    curses.KEY_LEFT: MoveCursor(Direction.LEFT),
    curses.KEY_RIGHT: MoveCursor(Direction.RIGHT),
    ord("k"): MoveCursor(Direction.UP),
    ord("j"): MoveCursor(Direction.DOWN),
    ord("h"): MoveCursor(Direction.LEFT),
    ord("l"): MoveCursor(Direction.RIGHT),
    ord("w"): MoveCursor(Direction.UP),
    ord("s"): MoveCursor(Direction.DOWN),
    ord("a"): MoveCursor(Direction.LEFT),
    ord("d"): MoveCursor(Direction.RIGHT),
    ord("\n"): Confirm(),
    ord("\r"): Confirm(),
    ord(" "): Confirm(),
    curses.KEY_ENTER: Confirm(),
    KEY_ESCAPE: Cancel(),
    curses.KEY_BACKSPACE: Cancel(),
    127: Cancel(),
    ord("q"): Quit(),
    ord("Q"): Quit(),
}


def action_for_key(key: int) -> Action | None:
    """Translate a curses key code. Unbound keys map to ``None``."""
    return KEY_BINDINGS.get(key)


def run_loop(stdscr: Any, controller: GameController, figurines: bool = True) -> None:
    """Draw, wait for a key, dispatch it; repeat until a quit action."""
    curses.curs_set(0)
    curses.set_escdelay(25)
    init_colors()
    stdscr.keypad(True)
    stdscr.timeout(POLL_INTERVAL_MS)

    while True:
        draw(stdscr, controller.snapshot(), figurines)
        key = stdscr.getch()
        if key == -1:
            continue
        action = action_for_key(key)
        if action is None:
            continue
        _LOGGER.debug("Key %d -> %s", key, action)
        if not controller.handle(action):
            break


def play(controller: GameController, figurines: bool = True) -> None:
    """Run the game in the terminal, restoring terminal modes on exit."""
    curses.wrapper(run_loop, controller, figurines)
