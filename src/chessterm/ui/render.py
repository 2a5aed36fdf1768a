"""Text layout of a :class:`GameSnapshot` and its curses drawing."""

from __future__ import annotations

import curses
from typing import Any

from chessterm.core.types import BOARD_SIZE, FILE_NAMES, Square
from chessterm.game.snapshot import GameSnapshot
from chessterm.ui.i18n import t

FIGURINES: dict[str, str] = {
    "P": "♙",
    "R": "♖",
    "N": "♘",
    "B": "♗",
    "Q": "♕",
    "K": "♔",
    "p": "♟",
    "r": "♜",
    "n": "♞",
    "b": "♝",
    "q": "♛",
    "k": "♚",
}
EMPTY = "."

# ── Color pair IDs ──────────────────────────────────────────────────────────
PAIR_CURSOR = 1
PAIR_SELECTED = 2
PAIR_TITLE = 3
PAIR_STATUS = 4


def piece_glyph(symbol: str | None, figurines: bool = True) -> str:
    """Character drawn for a FEN piece letter."""
    if symbol is None:
        return EMPTY
    return FIGURINES[symbol] if figurines else symbol


def render_board(snapshot: GameSnapshot, figurines: bool = True) -> list[str]:
    """Board rows, rank 8 at the top.

    The cursor square is wrapped in ``[ ]`` and the selected origin in ``( )``.
    """
    header = "   " + "".join(f" {f.upper()} " for f in FILE_NAMES)
    rows = [header]
    for rank in reversed(range(BOARD_SIZE)):
        cells = []
        for file in range(BOARD_SIZE):
            sq = Square(file, rank)
            glyph = piece_glyph(snapshot.piece_at(sq), figurines)
            if sq == snapshot.cursor:
                cells.append(f"[{glyph}]")
            elif sq == snapshot.selection:
                cells.append(f"({glyph})")
            else:
                cells.append(f" {glyph} ")
        rows.append(f"{rank + 1}  " + "".join(cells))
    return rows


def render_status(snapshot: GameSnapshot) -> list[str]:
    """Status panel lines: older messages first, the latest last."""
    return list(snapshot.history) if snapshot.history else [snapshot.status]


def _safe_addstr(win: Any, y: int, x: int, text: str, attr: int = 0) -> None:
    """Write *text*, ignoring the error curses raises at the window edge."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def init_colors() -> None:
    """Initialise curses color pairs when the terminal supports them."""
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(PAIR_CURSOR, curses.COLOR_BLACK, curses.COLOR_YELLOW)
    curses.init_pair(PAIR_SELECTED, curses.COLOR_BLACK, curses.COLOR_GREEN)
    curses.init_pair(PAIR_TITLE, curses.COLOR_CYAN, -1)
    curses.init_pair(PAIR_STATUS, curses.COLOR_WHITE, -1)


def draw(stdscr: Any, snapshot: GameSnapshot, figurines: bool = True) -> None:
    """Paint one frame: title, board, status panel and key help."""
    colors = curses.has_colors()
    stdscr.erase()

    y = 0
    title_attr = curses.A_BOLD | (curses.color_pair(PAIR_TITLE) if colors else 0)
    _safe_addstr(stdscr, y, 0, snapshot.title, title_attr)
    y += 2

    for row in render_board(snapshot, figurines):
        _safe_addstr(stdscr, y, 0, row)
        y += 1
    _highlight(stdscr, snapshot.cursor, PAIR_CURSOR, colors, figurines, snapshot)
    if snapshot.selection is not None and snapshot.selection != snapshot.cursor:
        _highlight(stdscr, snapshot.selection, PAIR_SELECTED, colors, figurines, snapshot)

    y += 1
    _safe_addstr(stdscr, y, 0, t().title_status, curses.A_UNDERLINE)
    y += 1
    status_attr = curses.color_pair(PAIR_STATUS) if colors else 0
    for line in render_status(snapshot):
        _safe_addstr(stdscr, y, 2, line, status_attr)
        y += 1

    y += 1
    _safe_addstr(stdscr, y, 0, t().help_keys, curses.A_DIM)
    stdscr.refresh()


def _highlight(
    stdscr: Any,
    square: Square,
    pair: int,
    colors: bool,
    figurines: bool,
    snapshot: GameSnapshot,
) -> None:
    # Board rows start at y=3 (title, blank, header); each cell is 3 wide after a 3-char label.
    y = 3 + (BOARD_SIZE - 1 - square.rank)
    x = 3 + square.file * 3
    attr = curses.color_pair(pair) if colors else curses.A_REVERSE
    glyph = piece_glyph(snapshot.piece_at(square), figurines)
    _safe_addstr(stdscr, y, x + 1, glyph, attr)
