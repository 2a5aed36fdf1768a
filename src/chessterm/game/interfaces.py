"""Abstract interfaces and value types for the game layer.

The turn controller depends on these definitions, not on concrete
movers or on the terminal front end that produces actions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TypeAlias

from chessterm.core.types import Direction, Move

# ── Turn controller FSM states ───────────────────────────────────────────────


class TurnPhase(IntEnum):
    """Finite-state-machine states of the turn controller."""

    WAITING_FOR_HUMAN = auto()
    COMPUTING_AUTOMATED_MOVE = auto()
    GAME_OVER = auto()


class ConfirmOutcome(IntEnum):
    """Result of a confirm action on the selection state machine."""

    ARMED = auto()
    DESELECTED = auto()
    NO_PIECE = auto()
    ILLEGAL_MOVE = auto()
    MOVED = auto()


# ── Input actions ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveCursor:
    direction: Direction


@dataclass(frozen=True, slots=True)
class Confirm:
    pass


@dataclass(frozen=True, slots=True)
class Cancel:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


Action: TypeAlias = MoveCursor | Confirm | Cancel | Quit


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IMover(ABC):
    """Move-selection policy for the automated side."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def choose(self, legal_moves: Sequence[Move]) -> Move:
        """Pick one of *legal_moves*.

        Raises:
            InternalInvariantError: If *legal_moves* is empty.
        """
