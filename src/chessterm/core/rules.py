"""Rules authority: the boundary between the game layer and chess rules.

The game layer only talks to :class:`RulesAuthority`.  :class:`ChessRules`
implements it on top of ``python-chess``, which owns the board position,
move legality and terminal-state detection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum, StrEnum, auto
from typing import Protocol

import chess

from chessterm.core.types import Move, Side, Square

_LOGGER = logging.getLogger(__name__)


# ── Game phase ───────────────────────────────────────────────────────────────


class PhaseKind(IntEnum):
    """Classification of the current position."""

    IN_PROGRESS = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    DRAW = auto()


class DrawReason(StrEnum):
    """Draws that python-chess adjudicates without a claim."""

    INSUFFICIENT_MATERIAL = "insufficient material"
    SEVENTY_FIVE_MOVES = "seventy-five move rule"
    FIVEFOLD_REPETITION = "fivefold repetition"


@dataclass(frozen=True, slots=True)
class GamePhase:
    """Tagged phase value.

    ``side`` is the side in check (``CHECK``) or the side that has been
    mated (``CHECKMATE``); ``reason`` is set only for ``DRAW``.
    """

    kind: PhaseKind
    side: Side | None = None
    reason: DrawReason | None = None

    @classmethod
    def in_progress(cls) -> GamePhase:
        return cls(PhaseKind.IN_PROGRESS)

    @classmethod
    def check(cls, side: Side) -> GamePhase:
        return cls(PhaseKind.CHECK, side)

    @classmethod
    def checkmate(cls, side: Side) -> GamePhase:
        return cls(PhaseKind.CHECKMATE, side)

    @classmethod
    def stalemate(cls) -> GamePhase:
        return cls(PhaseKind.STALEMATE)

    @classmethod
    def draw(cls, reason: DrawReason) -> GamePhase:
        return cls(PhaseKind.DRAW, reason=reason)

    @property
    def is_terminal(self) -> bool:
        return self.kind in (PhaseKind.CHECKMATE, PhaseKind.STALEMATE, PhaseKind.DRAW)

    @property
    def winner(self) -> Side | None:
        if self.kind == PhaseKind.CHECKMATE and self.side is not None:
            return self.side.opposite
        return None


# ── Protocol ─────────────────────────────────────────────────────────────────


class RulesAuthority(Protocol):
    """What the game layer needs from a chess rules implementation."""

    @property
    def side_to_move(self) -> Side: ...

    def legal_moves(self, side: Side) -> list[Move]:
        """All legal moves for *side*; empty if *side* is not to move."""
        ...

    def is_occupied_by(self, square: Square, side: Side) -> bool: ...

    def apply(self, origin: Square, destination: Square) -> bool:
        """Apply the move if legal. Returns ``False`` and changes nothing otherwise."""
        ...

    def game_phase(self) -> GamePhase: ...

    def piece_symbol(self, square: Square) -> str | None:
        """FEN letter of the piece on *square* (``"P"``, ``"n"``...), or ``None``."""
        ...


# ── python-chess adapter ─────────────────────────────────────────────────────


def _to_chess_square(square: Square) -> chess.Square:
    return chess.square(square.file, square.rank)


def _from_chess_square(sq: chess.Square) -> Square:
    return Square(chess.square_file(sq), chess.square_rank(sq))


def _to_chess_color(side: Side) -> chess.Color:
    return chess.WHITE if side == Side.WHITE else chess.BLACK


class ChessRules:
    """:class:`RulesAuthority` backed by a :class:`chess.Board`.

    Under-promotions are not offered: a pawn reaching the last rank always
    becomes a queen, so every ``(origin, destination)`` pair names at most
    one legal move.

    Args:
        fen: Starting position.  ``None`` means the standard start.

    Raises:
        ValueError: If *fen* is not a valid position.
    """

    __slots__ = ("_board",)

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board(fen) if fen else chess.Board()
        if not self._board.is_valid():
            raise ValueError(f"Illegal position: {self._board.status()!r}")

    @property
    def side_to_move(self) -> Side:
        return Side.WHITE if self._board.turn == chess.WHITE else Side.BLACK

    def fen(self) -> str:
        return self._board.fen()

    def legal_moves(self, side: Side) -> list[Move]:
        if side != self.side_to_move:
            return []
        moves: list[Move] = []
        for mv in self._board.legal_moves:
            if mv.promotion not in (None, chess.QUEEN):
                continue
            moves.append(Move(_from_chess_square(mv.from_square), _from_chess_square(mv.to_square)))
        return moves

    def is_occupied_by(self, square: Square, side: Side) -> bool:
        piece = self._board.piece_at(_to_chess_square(square))
        return piece is not None and piece.color == _to_chess_color(side)

    def apply(self, origin: Square, destination: Square) -> bool:
        mv = self._find_legal(origin, destination)
        if mv is None:
            _LOGGER.debug("Rejected %s%s in %s", origin, destination, self._board.fen())
            return False
        self._board.push(mv)
        return True

    def game_phase(self) -> GamePhase:
        board = self._board
        mover = self.side_to_move
        if board.is_checkmate():
            return GamePhase.checkmate(mover)
        if board.is_stalemate():
            return GamePhase.stalemate()
        if board.is_insufficient_material():
            return GamePhase.draw(DrawReason.INSUFFICIENT_MATERIAL)
        if board.is_seventyfive_moves():
            return GamePhase.draw(DrawReason.SEVENTY_FIVE_MOVES)
        if board.is_fivefold_repetition():
            return GamePhase.draw(DrawReason.FIVEFOLD_REPETITION)
        if board.is_check():
            return GamePhase.check(mover)
        return GamePhase.in_progress()

    def piece_symbol(self, square: Square) -> str | None:
        piece = self._board.piece_at(_to_chess_square(square))
        return piece.symbol() if piece is not None else None

    # ── Internal helpers ─────────────────────────────────────────────────

    def _find_legal(self, origin: Square, destination: Square) -> chess.Move | None:
        from_sq = _to_chess_square(origin)
        to_sq = _to_chess_square(destination)
        for promotion in (None, chess.QUEEN):
            mv = chess.Move(from_sq, to_sq, promotion=promotion)
            if self._board.is_legal(mv):
                return mv
        return None
