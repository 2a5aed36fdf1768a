"""Automated mover implementations."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from chessterm.core.types import Move
from chessterm.game.errors import InternalInvariantError
from chessterm.game.interfaces import IMover

_LOGGER = logging.getLogger(__name__)


class RandomMover(IMover):
    """Picks uniformly at random among the legal moves it is given.

    The random source is injected so that a seeded ``random.Random`` gives
    reproducible games.

    Args:
        rng: Random source.  A fresh unseeded ``random.Random`` by default.
        name: Display name.
    """

    __slots__ = ("_rng", "_name")

    def __init__(self, rng: random.Random | None = None, name: str = "Engine") -> None:
        self._rng = rng if rng is not None else random.Random()
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def choose(self, legal_moves: Sequence[Move]) -> Move:
        if not legal_moves:
            raise InternalInvariantError("automated mover invoked with no legal moves")
        move = self._rng.choice(legal_moves)
        _LOGGER.debug("%s picked %s out of %d moves", self._name, move, len(legal_moves))
        return move
