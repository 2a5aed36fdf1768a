"""Tests for settings parsing and application start-up."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from chessterm import app
from chessterm.core.types import Side
from chessterm.game.interfaces import TurnPhase
from chessterm.settings import AppSettings, configure_logging, settings_from_args


class TestSettingsFromArgs:
    def test_defaults(self) -> None:
        s = settings_from_args([], environ={})
        assert s == AppSettings()

    def test_all_options(self) -> None:
        s = settings_from_args(
            [
                "--seed", "7",
                "--play-as", "black",
                "--fen", "8/8/8/8/8/8/8/k6K w - - 0 1",
                "--history", "3",
                "--language", "Russian",
                "--ascii",
                "--log-file", "game.log",
                "--log-level", "DEBUG",
            ],
            environ={},
        )
        assert s.seed == 7
        assert s.human_side == Side.BLACK
        assert s.start_fen == "8/8/8/8/8/8/8/k6K w - - 0 1"
        assert s.history_size == 3
        assert s.language == "Russian"
        assert not s.use_figurines
        assert s.log_file == "game.log"
        assert s.log_level == "DEBUG"

    def test_environment_fallback(self) -> None:
        s = settings_from_args([], environ={"CHESSTERM_SEED": "12", "CHESSTERM_LOG_LEVEL": "info"})
        assert s.seed == 12
        assert s.log_level == "INFO"

    def test_command_line_wins_over_environment(self) -> None:
        s = settings_from_args(["--seed", "1"], environ={"CHESSTERM_SEED": "12"})
        assert s.seed == 1

    def test_bad_environment_seed(self) -> None:
        with pytest.raises(SystemExit):
            settings_from_args([], environ={"CHESSTERM_SEED": "abc"})

    def test_history_must_be_positive(self) -> None:
        with pytest.raises(SystemExit):
            settings_from_args(["--history", "0"], environ={})


class TestConfigureLogging:
    def test_file_logging(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        log_file = tmp_path / "chessterm.log"
        configure_logging(AppSettings(log_file=str(log_file), log_level="DEBUG"))
        logging.getLogger("chessterm.test").debug("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
        for handler in root.handlers:
            handler.close()


class TestCreateController:
    def test_seeded_controllers_agree(self) -> None:
        settings = AppSettings(seed=3, human_side=Side.BLACK)
        first = app.create_controller(settings)
        second = app.create_controller(settings)
        assert first.move_history == second.move_history
        assert len(first.move_history) == 1
        assert first.turn_phase == TurnPhase.WAITING_FOR_HUMAN

    def test_history_size_applied(self) -> None:
        ctrl = app.create_controller(AppSettings(history_size=2))
        assert ctrl.status.capacity == 2

    def test_invalid_fen_reported(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        played: list[object] = []
        monkeypatch.setattr("chessterm.ui.terminal.play", lambda ctrl, figurines=True: played.append(ctrl))
        assert app.run_application(["--fen", "garbage"]) == 2
        assert "invalid start position" in capsys.readouterr().err
        assert played == []

    def test_kingless_fen_reported(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        played: list[object] = []
        monkeypatch.setattr("chessterm.ui.terminal.play", lambda ctrl, figurines=True: played.append(ctrl))
        assert app.run_application(["--fen", "8/8/8/8/8/8/8/8 w - - 0 1"]) == 2
        assert "Illegal position" in capsys.readouterr().err
        assert played == []

    def test_run_application_plays(self, monkeypatch: pytest.MonkeyPatch) -> None:
        played: list[object] = []
        monkeypatch.setattr("chessterm.ui.terminal.play", lambda ctrl, figurines=True: played.append(ctrl))
        assert app.run_application(["--seed", "1"]) == 0
        assert len(played) == 1
