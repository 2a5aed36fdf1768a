"""Core domain layer — coordinates, sides and the rules authority.

Quick start::

    from chessterm.core import ChessRules, Side, parse_square

    rules = ChessRules()
    rules.apply(parse_square("e2"), parse_square("e4"))
    assert rules.side_to_move == Side.BLACK
"""

from chessterm.core.rules import (
    ChessRules,
    DrawReason,
    GamePhase,
    PhaseKind,
    RulesAuthority,
)
from chessterm.core.types import Direction, Move, Side, Square, parse_square

__all__ = [
    # Types
    "Direction",
    "Move",
    "Side",
    "Square",
    "parse_square",
    # Rules
    "ChessRules",
    "DrawReason",
    "GamePhase",
    "PhaseKind",
    "RulesAuthority",
]
