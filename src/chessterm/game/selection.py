"""Selection state machine that turns confirm/cancel actions into move attempts.

States::

    Idle ──confirm on own piece──▶ Armed(origin)
    Armed(origin) ──confirm on origin──▶ Idle            (deselect)
    Armed(origin) ──confirm elsewhere──▶ Idle            (move attempted)
    Armed(origin) ──cancel──▶ Idle

A rejected move attempt also returns to ``Idle``: the player picks the
piece again rather than retrying a destination from the same origin.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias

from chessterm.core.rules import RulesAuthority
from chessterm.core.types import Move, Square
from chessterm.game.interfaces import ConfirmOutcome

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Idle:
    """No square chosen."""


@dataclass(frozen=True, slots=True)
class Armed:
    """Origin chosen, waiting for a destination."""

    origin: Square


SelectionState: TypeAlias = Idle | Armed

IDLE = Idle()


@dataclass(frozen=True, slots=True)
class ConfirmResult:
    """What a confirm action did.  ``move`` is set only for ``MOVED``."""

    outcome: ConfirmOutcome
    square: Square
    move: Move | None = None


class Selection:
    """The human player's in-progress choice of a move."""

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state: SelectionState = IDLE

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def origin(self) -> Square | None:
        return self._state.origin if isinstance(self._state, Armed) else None

    @property
    def is_armed(self) -> bool:
        return isinstance(self._state, Armed)

    def confirm(self, at: Square, rules: RulesAuthority) -> ConfirmResult:
        """Interpret a confirm action with the cursor on *at*.

        In ``Idle`` this selects a piece of the side to move.  In
        ``Armed`` it either deselects (same square) or submits the move
        ``origin -> at`` to *rules*, which applies it when legal.
        """
        state = self._state
        if isinstance(state, Idle):
            if rules.is_occupied_by(at, rules.side_to_move):
                self._state = Armed(at)
                _LOGGER.debug("Armed %s", at)
                return ConfirmResult(ConfirmOutcome.ARMED, at)
            return ConfirmResult(ConfirmOutcome.NO_PIECE, at)

        self._state = IDLE
        if at == state.origin:
            _LOGGER.debug("Deselected %s", at)
            return ConfirmResult(ConfirmOutcome.DESELECTED, at)

        move = Move(state.origin, at)
        if not rules.apply(move.origin, move.destination):
            _LOGGER.debug("Illegal move attempt %s", move)
            return ConfirmResult(ConfirmOutcome.ILLEGAL_MOVE, at, move)
        return ConfirmResult(ConfirmOutcome.MOVED, at, move)

    def cancel(self) -> bool:
        """Drop the current selection. Returns ``False`` if nothing was selected."""
        if isinstance(self._state, Idle):
            return False
        self._state = IDLE
        return True

    def reset(self) -> None:
        self._state = IDLE
