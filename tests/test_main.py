"""Unit tests for /src/main.py (the terminal loop, driven by scripted players)"""

from typing import Callable
from unittest.mock import Mock, patch

import pytest

from src.checkers.board import Board
from src.checkers.game import Game
from src.core.config import LOG_LEVEL_ENV, NO_COLOR_ENV, Settings
from src.core.shared_types import Color, Status
from src.interface.players import QuitGame
from src.main import build_parser, main, run_game, settings_from_args
from src.services.checkers_service import CheckersService

BoardFactory = Callable[..., Board]
PLAIN = Settings(use_color=False)


class ScriptedPlayer:
    """Replays a fixed list of inputs, then quits"""

    def __init__(self, color: Color, moves: list[str]) -> None:
        self.color = color
        self._moves = list(moves)

    def make_move(self) -> str:
        if not self._moves:
            raise QuitGame(f"{self.color} ran out of moves.")
        return self._moves.pop(0)


def collect_output() -> tuple[list[str], Callable[[str], None]]:
    lines: list[str] = []
    return lines, lines.append


def test_game_runs_until_a_side_is_wiped_out(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces(("b3", Color.WHITE), ("e6", Color.BLACK))
    service = CheckersService(Game.new_game(board))
    players = {
        Color.WHITE: ScriptedPlayer(Color.WHITE, ["b3,c4", "c4,e6"]),
        Color.BLACK: ScriptedPlayer(Color.BLACK, ["e6,d5"]),
    }
    lines, output_fn = collect_output()

    run_game(service, players, PLAIN, output_fn)

    assert service.game.status == Status.GAME_OVER
    assert lines[-1] == "White Player Wins!"
    assert "Captured: d5" in lines
    assert lines.count("White's Turn") == 2
    assert lines.count("Black's Turn") == 1


def test_same_player_is_asked_again_after_a_mistake(
    board_with_pieces: BoardFactory,
) -> None:
    board = board_with_pieces(("d5", Color.WHITE), ("e6", Color.BLACK))
    service = CheckersService(Game.new_game(board))
    players = {
        Color.WHITE: ScriptedPlayer(Color.WHITE, ["d5 e6", "d5,e6", "e6,d5", "d5,f7"]),
        Color.BLACK: ScriptedPlayer(Color.BLACK, []),
    }
    lines, output_fn = collect_output()

    run_game(service, players, PLAIN, output_fn)

    assert any("Cannot interpret" in line for line in lines)
    assert "Can't slide there" in lines
    assert "Not your piece" in lines
    assert lines.count("White's Turn") == 4
    assert "Black's Turn" not in lines
    assert lines[-1] == "White Player Wins!"


def test_quitting_aborts_the_game() -> None:
    service = CheckersService(Game.new_game())
    players = {
        Color.WHITE: ScriptedPlayer(Color.WHITE, ["b3,c4"]),
        Color.BLACK: ScriptedPlayer(Color.BLACK, []),
    }
    lines, output_fn = collect_output()

    run_game(service, players, PLAIN, output_fn)

    assert service.game.status == Status.ABORTED
    assert "black ran out of moves." in lines
    assert lines[-1] == "Game aborted."


def test_blocked_side_is_told_it_has_no_legal_move(
    board_with_pieces: BoardFactory,
) -> None:
    """Black's only man sits on its own king row, so it cannot go anywhere"""
    board = board_with_pieces(("h3", Color.WHITE), ("b1", Color.BLACK))
    service = CheckersService(Game.new_game(board))
    players = {
        Color.WHITE: ScriptedPlayer(Color.WHITE, ["h3,g4"]),
        Color.BLACK: ScriptedPlayer(Color.BLACK, []),
    }
    lines, output_fn = collect_output()

    run_game(service, players, PLAIN, output_fn)

    assert "White has no legal move" not in lines
    assert lines.index("Black has no legal move") == lines.index("Black's Turn") + 1
    assert service.game.status == Status.ABORTED
    assert lines[-1] == "Game aborted."


def test_crowning_is_announced(board_with_pieces: BoardFactory) -> None:
    board = board_with_pieces(("c6", Color.WHITE), ("d7", Color.BLACK))
    service = CheckersService(Game.new_game(board))
    players = {color: ScriptedPlayer(color, ["c6,e8"]) for color in Color}
    lines, output_fn = collect_output()

    run_game(service, players, PLAIN, output_fn)

    assert "Crowned!" in lines
    assert "♔" in lines[-2]


# -- SETTINGS / ARGUMENTS --
def test_flags_override_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(NO_COLOR_ENV, raising=False)
    monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
    args = build_parser().parse_args(["--no-color", "--log-level", "debug"])
    settings = settings_from_args(args)
    assert not settings.use_color
    assert settings.log_level == "DEBUG"


def test_environment_used_without_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(NO_COLOR_ENV, raising=False)
    monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
    settings = settings_from_args(build_parser().parse_args([]))
    assert settings.use_color
    assert settings.log_level == "INFO"


def test_main_bad_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert main(["--log-level", "LOUD"]) == 2


def test_main_plays_until_input_ends(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    with (
        patch("builtins.input", Mock(side_effect=EOFError)),
        patch("builtins.print") as mock_print,
        patch("src.main.setup_logger") as mock_setup_logger,
    ):
        assert main(["--no-color"]) == 0

    mock_setup_logger.assert_called_once_with("WARNING", None)
    printed = [call.args[0] for call in mock_print.call_args_list if call.args]
    assert printed[-1] == "Game aborted."
