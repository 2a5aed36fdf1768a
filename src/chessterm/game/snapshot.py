"""Read-only view of the game handed to the renderer after every event."""

from __future__ import annotations

from dataclasses import dataclass

from chessterm.core.rules import GamePhase
from chessterm.core.types import Move, Side, Square
from chessterm.game.interfaces import TurnPhase

BoardRows = tuple[tuple[str | None, ...], ...]


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Everything needed to draw one frame.

    ``board[rank][file]`` holds the FEN letter of the piece on that square
    or ``None``; rank 0 is White's back rank.
    """

    board: BoardRows
    cursor: Square
    selection: Square | None
    status: str
    history: tuple[str, ...]
    title: str
    side_to_move: Side
    human_side: Side
    phase: GamePhase
    turn_phase: TurnPhase
    last_move: Move | None
    ply_count: int

    def piece_at(self, square: Square) -> str | None:
        return self.board[square.rank][square.file]

    @property
    def is_game_over(self) -> bool:
        return self.turn_phase == TurnPhase.GAME_OVER
