"""Application entry point."""

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Sequence

from chessterm.game.controller import GameController
from chessterm.game.player import RandomMover
from chessterm.settings import AppSettings, configure_logging, settings_from_args
from chessterm.ui.i18n import set_language

_LOGGER = logging.getLogger(__name__)


def create_controller(settings: AppSettings) -> GameController:
    """Build a controller from *settings* and start the game.

    Raises:
        ValueError: If the configured start position is not a valid FEN.
    """
    mover = RandomMover(random.Random(settings.seed))
    controller = GameController(
        mover=mover,
        human_side=settings.human_side,
        history_size=settings.history_size,
    )
    controller.new_game(settings.start_fen)
    return controller


def run_application(argv: Sequence[str] | None = None) -> int:
    """Parse options, set up the game and run the terminal loop."""
    from chessterm.ui.terminal import play

    settings = settings_from_args(argv)
    configure_logging(settings)
    set_language(settings.language)

    try:
        controller = create_controller(settings)
    except ValueError as exc:
        print(f"chessterm: invalid start position: {exc}", file=sys.stderr)
        return 2

    _LOGGER.info("Starting with seed=%s", settings.seed)
    play(controller, figurines=settings.use_figurines)
    return 0


def main() -> None:
    """Launch chessterm."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
