"""Tests for the selection state machine."""

from __future__ import annotations

from chessterm.core.rules import ChessRules, GamePhase
from chessterm.core.types import E2, E4, E5, Move, Side, Square, parse_square
from chessterm.game.interfaces import ConfirmOutcome
from chessterm.game.selection import IDLE, Armed, Selection


class FakeRules:
    """Minimal rules authority: a piece map and an explicit legal-move set."""

    def __init__(self, pieces: dict[Square, Side], legal: set[Move]) -> None:
        self.pieces = dict(pieces)
        self.legal = set(legal)
        self.applied: list[Move] = []
        self._side = Side.WHITE

    @property
    def side_to_move(self) -> Side:
        return self._side

    def legal_moves(self, side: Side) -> list[Move]:
        return sorted(self.legal, key=str) if side == self._side else []

    def is_occupied_by(self, square: Square, side: Side) -> bool:
        return self.pieces.get(square) == side

    def apply(self, origin: Square, destination: Square) -> bool:
        move = Move(origin, destination)
        if move not in self.legal:
            return False
        self.pieces[destination] = self.pieces.pop(origin)
        self.applied.append(move)
        self._side = self._side.opposite
        return True

    def game_phase(self) -> GamePhase:
        return GamePhase.in_progress()

    def piece_symbol(self, square: Square) -> str | None:
        side = self.pieces.get(square)
        if side is None:
            return None
        return "P" if side == Side.WHITE else "p"


def _rules() -> FakeRules:
    e7 = parse_square("e7")
    return FakeRules({E2: Side.WHITE, e7: Side.BLACK}, {Move(E2, E4)})


class TestIdle:
    def test_starts_idle(self) -> None:
        sel = Selection()
        assert sel.state == IDLE
        assert sel.origin is None
        assert not sel.is_armed

    def test_confirm_own_piece_arms(self) -> None:
        sel = Selection()
        result = sel.confirm(E2, _rules())
        assert result.outcome == ConfirmOutcome.ARMED
        assert sel.state == Armed(E2)
        assert sel.origin == E2

    def test_confirm_empty_square_stays_idle(self) -> None:
        sel = Selection()
        result = sel.confirm(E4, _rules())
        assert result.outcome == ConfirmOutcome.NO_PIECE
        assert sel.state == IDLE

    def test_confirm_opponent_piece_stays_idle(self) -> None:
        sel = Selection()
        result = sel.confirm(parse_square("e7"), _rules())
        assert result.outcome == ConfirmOutcome.NO_PIECE
        assert sel.state == IDLE

    def test_cancel_in_idle_is_noop(self) -> None:
        sel = Selection()
        assert not sel.cancel()
        assert sel.state == IDLE


class TestArmed:
    def test_confirm_origin_toggles_off(self) -> None:
        rules = _rules()
        sel = Selection()
        sel.confirm(E2, rules)
        result = sel.confirm(E2, rules)
        assert result.outcome == ConfirmOutcome.DESELECTED
        assert sel.state == IDLE
        assert rules.applied == []

    def test_legal_move_applied(self) -> None:
        rules = _rules()
        sel = Selection()
        sel.confirm(E2, rules)
        result = sel.confirm(E4, rules)
        assert result.outcome == ConfirmOutcome.MOVED
        assert result.move == Move(E2, E4)
        assert rules.applied == [Move(E2, E4)]
        assert sel.state == IDLE

    def test_illegal_move_returns_to_idle(self) -> None:
        rules = _rules()
        sel = Selection()
        sel.confirm(E2, rules)
        result = sel.confirm(E5, rules)
        assert result.outcome == ConfirmOutcome.ILLEGAL_MOVE
        assert result.move == Move(E2, E5)
        assert sel.state == IDLE
        assert rules.applied == []
        assert rules.side_to_move == Side.WHITE

    def test_cancel_clears(self) -> None:
        sel = Selection()
        sel.confirm(E2, _rules())
        assert sel.cancel()
        assert sel.state == IDLE

    def test_reset(self) -> None:
        sel = Selection()
        sel.confirm(E2, _rules())
        sel.reset()
        assert sel.state == IDLE


class TestWithChessRules:
    def test_e2_e4(self) -> None:
        rules = ChessRules()
        sel = Selection()
        assert sel.confirm(E2, rules).outcome == ConfirmOutcome.ARMED
        assert sel.confirm(E4, rules).outcome == ConfirmOutcome.MOVED
        assert rules.side_to_move == Side.BLACK

    def test_e2_e5_rejected_without_side_effects(self) -> None:
        rules = ChessRules()
        fen_before = rules.fen()
        sel = Selection()
        sel.confirm(E2, rules)
        assert sel.confirm(E5, rules).outcome == ConfirmOutcome.ILLEGAL_MOVE
        assert rules.fen() == fen_before
        assert sel.state == IDLE
