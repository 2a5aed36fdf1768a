"""Application settings and their command-line / environment sources."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from chessterm.core.types import Side
from chessterm.game.status import DEFAULT_HISTORY_SIZE
from chessterm.ui.i18n import LANGUAGES

ENV_SEED = "CHESSTERM_SEED"
ENV_LOG_LEVEL = "CHESSTERM_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    use_figurines: bool = True

    # Game
    human_side: Side = Side.WHITE
    start_fen: str | None = None
    history_size: int = DEFAULT_HISTORY_SIZE

    # Automated side
    seed: int | None = None

    # Logging
    log_file: str | None = None
    log_level: str = "WARNING"


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessterm",
        description="Play chess in the terminal against a random-move opponent.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the opponent's random moves")
    parser.add_argument(
        "--play-as",
        choices=("white", "black"),
        default="white",
        help="side controlled from the keyboard (default: white)",
    )
    parser.add_argument("--fen", default=None, help="start from this FEN position")
    parser.add_argument(
        "--history",
        type=_positive_int,
        default=DEFAULT_HISTORY_SIZE,
        help=f"status messages kept on screen (default: {DEFAULT_HISTORY_SIZE})",
    )
    parser.add_argument("--language", choices=LANGUAGES, default="English")
    parser.add_argument("--ascii", action="store_true", help="draw pieces as letters")
    parser.add_argument("--log-file", default=None, help="write a debug log to this file")
    parser.add_argument("--log-level", choices=_LOG_LEVELS, default=None)
    return parser


def settings_from_args(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppSettings:
    """Parse *argv*; ``--seed`` and ``--log-level`` fall back to the environment."""
    env = os.environ if environ is None else environ
    parser = build_parser()
    args = parser.parse_args(argv)

    seed = args.seed
    if seed is None and env.get(ENV_SEED):
        try:
            seed = int(env[ENV_SEED])
        except ValueError:
            parser.error(f"{ENV_SEED} must be an integer, got {env[ENV_SEED]!r}")

    log_level = args.log_level or env.get(ENV_LOG_LEVEL, "WARNING").upper()
    if log_level not in _LOG_LEVELS:
        parser.error(f"{ENV_LOG_LEVEL} must be one of {', '.join(_LOG_LEVELS)}")

    return AppSettings(
        language=args.language,
        use_figurines=not args.ascii,
        human_side=Side.WHITE if args.play_as == "white" else Side.BLACK,
        start_fen=args.fen,
        history_size=args.history,
        seed=seed,
        log_file=args.log_file,
        log_level=log_level,
    )


def configure_logging(settings: AppSettings) -> None:
    """Log to a file when one is configured; stay silent otherwise.

    curses owns the terminal while the game runs, so nothing is written
    to stderr.
    """
    root = logging.getLogger("chessterm")
    if settings.log_file is None:
        root.addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=settings.log_file,
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
