"""GameController — the single owner of a game session.

Coordinates: rules authority, cursor, selection, automated mover, status log.
Processes one input action at a time to completion and emits events via
simple callbacks so the front end / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessterm.core.rules import ChessRules, GamePhase, PhaseKind, RulesAuthority
from chessterm.core.types import BOARD_SIZE, Move, Side, Square
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
from chessterm.game.selection import ConfirmResult, Selection
from chessterm.game.snapshot import GameSnapshot
from chessterm.game.status import DEFAULT_HISTORY_SIZE, StatusLog
from chessterm.ui.i18n import t

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Side], None]  # move, side that played it
GameOverCallback = Callable[[GamePhase], None]
TurnPhaseCallback = Callable[[TurnPhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_turn_phase_changed: list[TurnPhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Sequences human move → automated reply → human move.

    The automated reply is played synchronously inside the same
    :meth:`handle` call that applied the human move, so the human never
    acts on a stale position.

    Args:
        mover: Policy for the automated side.  ``RandomMover()`` by default.
        human_side: Side driven by keyboard input.
        history_size: Number of status messages kept for display.
    """

    __slots__ = (
        "_rules",
        "_mover",
        "_human_side",
        "_cursor",
        "_selection",
        "_status",
        "_phase",
        "_turn_phase",
        "_move_history",
        "events",
    )

    def __init__(
        self,
        mover: IMover | None = None,
        human_side: Side = Side.WHITE,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ) -> None:
        self._rules: RulesAuthority = ChessRules()
        self._mover = mover if mover is not None else RandomMover()
        self._human_side = human_side
        self._cursor = Cursor()
        self._selection = Selection()
        self._status = StatusLog(history_size)
        self._phase = GamePhase.in_progress()
        self._turn_phase = TurnPhase.WAITING_FOR_HUMAN
        self._move_history: list[tuple[Side, Move]] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def rules(self) -> RulesAuthority:
        return self._rules

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def status(self) -> StatusLog:
        return self._status

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def turn_phase(self) -> TurnPhase:
        return self._turn_phase

    @property
    def human_side(self) -> Side:
        return self._human_side

    @property
    def side_to_move(self) -> Side:
        return self._rules.side_to_move

    @property
    def move_history(self) -> list[tuple[Side, Move]]:
        return list(self._move_history)

    @property
    def is_game_over(self) -> bool:
        return self._turn_phase == TurnPhase.GAME_OVER

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self, fen: str | None = None, *, rules: RulesAuthority | None = None) -> None:
        """Set up a new game from the standard start, *fen*, or a given authority.

        If the automated side is to move first its reply is played
        immediately.

        Raises:
            ValueError: If *fen* is not a valid position.
        """
        self._rules = rules if rules is not None else ChessRules(fen)
        self._cursor.reset()
        self._selection.reset()
        self._status.clear()
        self._move_history = []
        self._phase = self._rules.game_phase()

        side = self._rules.side_to_move
        self._status.set(t().status_new_game.format(color=t().color(side)))
        _LOGGER.info("New game, human plays %s, %s to move", self._human_side, side)

        if self._phase.is_terminal:
            self._enter_game_over()
            return
        if side != self._human_side:
            self._play_automated_move()
            return
        self._set_turn_phase(TurnPhase.WAITING_FOR_HUMAN)

    def handle(self, action: Action) -> bool:
        """Process one input action. Returns ``False`` when the loop should stop."""
        if isinstance(action, Quit):
            return False
        if self._turn_phase == TurnPhase.GAME_OVER:
            self._status.set(t().status_game_over)
            return True

        if isinstance(action, MoveCursor):
            self._cursor.move(action.direction)
        elif isinstance(action, Cancel):
            if self._selection.cancel():
                self._status.set(t().status_selection_cleared)
        elif isinstance(action, Confirm):
            if self._rules.side_to_move != self._human_side:
                self._status.set(t().status_not_your_turn)
            else:
                self._on_confirm()
        return True

    # ── Read-only views ──────────────────────────────────────────────────

    def title(self) -> str:
        """One-line description of whose turn it is or how the game ended."""
        s = t()
        phase = self._phase
        if phase.kind == PhaseKind.CHECKMATE and phase.winner is not None:
            return s.title_checkmate.format(color=s.color(phase.winner))
        if phase.kind == PhaseKind.STALEMATE:
            return s.title_stalemate
        if phase.kind == PhaseKind.DRAW and phase.reason is not None:
            return s.title_draw.format(reason=s.draw_reason(phase.reason))
        if phase.kind == PhaseKind.CHECK and phase.side is not None:
            return s.title_check.format(color=s.color(phase.side))
        return s.title_turn.format(color=s.color(self._rules.side_to_move))

    def snapshot(self) -> GameSnapshot:
        board = tuple(
            tuple(self._rules.piece_symbol(Square(file, rank)) for file in range(BOARD_SIZE))
            for rank in range(BOARD_SIZE)
        )
        return GameSnapshot(
            board=board,
            cursor=self._cursor.position,
            selection=self._selection.origin,
            status=self._status.latest(),
            history=self._status.history(),
            title=self.title(),
            side_to_move=self._rules.side_to_move,
            human_side=self._human_side,
            phase=self._phase,
            turn_phase=self._turn_phase,
            last_move=self._move_history[-1][1] if self._move_history else None,
            ply_count=len(self._move_history),
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _on_confirm(self) -> None:
        s = t()
        side = self._rules.side_to_move
        result: ConfirmResult = self._selection.confirm(self._cursor.position, self._rules)
        outcome = result.outcome
        if outcome == ConfirmOutcome.ARMED:
            self._status.set(s.status_piece_selected.format(square=result.square))
        elif outcome == ConfirmOutcome.NO_PIECE:
            self._status.set(s.status_no_piece)
        elif outcome == ConfirmOutcome.DESELECTED:
            self._status.set(s.status_deselected)
        elif outcome == ConfirmOutcome.ILLEGAL_MOVE:
            self._status.set(s.status_illegal_move)
        elif outcome == ConfirmOutcome.MOVED and result.move is not None:
            self._record_move(result.move, side, s.status_moved.format(move=result.move))
            if not self.is_game_over:
                self._play_automated_move()

    def _play_automated_move(self) -> None:
        self._set_turn_phase(TurnPhase.COMPUTING_AUTOMATED_MOVE)
        side = self._rules.side_to_move
        move = self._mover.choose(self._rules.legal_moves(side))
        if not self._rules.apply(move.origin, move.destination):
            raise InternalInvariantError(f"rules authority rejected automated move {move}")
        message = t().status_engine_moved.format(name=self._mover.name, move=move)
        self._record_move(move, side, message)
        if not self.is_game_over:
            self._set_turn_phase(TurnPhase.WAITING_FOR_HUMAN)

    def _record_move(self, move: Move, side: Side, message: str) -> None:
        """Recompute the phase after *side* played *move* and report it."""
        self._move_history.append((side, move))
        self._phase = self._rules.game_phase()
        _LOGGER.debug("%s played %s, phase %s", side, move, self._phase.kind.name)
        self._status.set(self._phase_message(move) or message)

        for cb in self.events.on_move:
            cb(move, side)

        if self._phase.is_terminal:
            self._enter_game_over()

    def _phase_message(self, move: Move) -> str | None:
        s = t()
        phase = self._phase
        if phase.kind == PhaseKind.CHECK and phase.side is not None:
            return s.status_check.format(move=move, color=s.color(phase.side))
        if phase.kind == PhaseKind.CHECKMATE and phase.winner is not None:
            return s.status_checkmate.format(move=move, color=s.color(phase.winner))
        if phase.kind == PhaseKind.STALEMATE:
            return s.status_stalemate.format(move=move)
        if phase.kind == PhaseKind.DRAW and phase.reason is not None:
            return s.status_draw.format(move=move, reason=s.draw_reason(phase.reason))
        return None

    def _enter_game_over(self) -> None:
        self._selection.reset()
        self._set_turn_phase(TurnPhase.GAME_OVER)
        _LOGGER.info("Game over: %s", self.title())
        for cb in self.events.on_game_over:
            cb(self._phase)

    def _set_turn_phase(self, phase: TurnPhase) -> None:
        if phase == self._turn_phase:
            return
        self._turn_phase = phase
        for cb in self.events.on_turn_phase_changed:
            cb(phase)
