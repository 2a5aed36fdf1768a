"""Game management layer — controller, cursor, selection, movers, status.

Quick start::

    from chessterm.game import Confirm, GameController, MoveCursor

    ctrl = GameController()
    ctrl.new_game()
    ctrl.handle(Confirm())
    frame = ctrl.snapshot()
"""

from chessterm.game.controller import GameController, GameEvents
from chessterm.game.cursor import Cursor
from chessterm.game.errors import InternalInvariantError
from chessterm.game.interfaces import (
    Action,
    Cancel,
    Confirm,
    ConfirmOutcome,
    IMover,
    MoveCursor,
    Quit,
    TurnPhase,
)
from chessterm.game.player import RandomMover
from chessterm.game.selection import Armed, ConfirmResult, Idle, Selection
from chessterm.game.snapshot import GameSnapshot
from chessterm.game.status import StatusLog

__all__ = [
    # Interfaces
    "Action",
    "Cancel",
    "Confirm",
    "ConfirmOutcome",
    "IMover",
    "MoveCursor",
    "Quit",
    "TurnPhase",
    # Concrete
    "Armed",
    "ConfirmResult",
    "Cursor",
    "GameController",
    "GameEvents",
    "GameSnapshot",
    "Idle",
    "InternalInvariantError",
    "RandomMover",
    "Selection",
    "StatusLog",
]
