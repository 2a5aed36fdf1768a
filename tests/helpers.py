"""Scripted players and cursor-driving helpers shared by the controller tests."""

from __future__ import annotations

from collections.abc import Sequence

from chessterm.core.types import Direction, Move, Square
from chessterm.game.controller import GameController
from chessterm.game.interfaces import Confirm, IMover, MoveCursor


class ScriptedMover(IMover):
    """Plays the scripted moves in order while they are legal, else the first legal move.

    Records every legal-move list it was offered.
    """

    def __init__(self, script: Sequence[Move] = ()) -> None:
        self._script = list(script)
        self.offered: list[list[Move]] = []
        self.chosen: list[Move] = []

    @property
    def name(self) -> str:
        return "Scripted"

    def choose(self, legal_moves: Sequence[Move]) -> Move:
        self.offered.append(list(legal_moves))
        if self._script and self._script[0] in legal_moves:
            move = self._script.pop(0)
        else:
            move = legal_moves[0]
        self.chosen.append(move)
        return move


def walk_cursor(ctrl: GameController, target: Square) -> None:
    """Issue directional actions until the cursor sits on *target*."""
    pos = ctrl.cursor.position
    step_file = Direction.RIGHT if target.file > pos.file else Direction.LEFT
    step_rank = Direction.UP if target.rank > pos.rank else Direction.DOWN
    for _ in range(abs(target.file - pos.file)):
        ctrl.handle(MoveCursor(step_file))
    for _ in range(abs(target.rank - pos.rank)):
        ctrl.handle(MoveCursor(step_rank))


def play_human(ctrl: GameController, move: Move) -> None:
    """Select *move*'s origin and destination through cursor actions."""
    walk_cursor(ctrl, move.origin)
    ctrl.handle(Confirm())
    walk_cursor(ctrl, move.destination)
    ctrl.handle(Confirm())

