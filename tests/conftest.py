"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random
from collections.abc import Iterator

import pytest

from chessterm.game.controller import GameController


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from chessterm.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture
def seeded_controller() -> GameController:
    """Human (White) against a seeded random mover, standard start."""
    from chessterm.game.player import RandomMover

    ctrl = GameController(mover=RandomMover(random.Random(1234)))
    ctrl.new_game()
    return ctrl
