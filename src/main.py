"""Command-line entry point: two humans playing checkers in one terminal."""

import argparse
import logging
import sys
from typing import Callable, Mapping, Optional

from src.checkers.game import Game
from src.core.config import Settings
from src.core.exceptions import InvalidInputError, InvalidMoveError
from src.core.logger import setup_logger
from src.core.shared_types import Color
from src.interface.display import render_board
from src.interface.players import HumanPlayer, Player, QuitGame
from src.services.checkers_service import CheckersService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="checkers",
        description="Play checkers in the terminal. Enter moves as squares separated by commas, ex) c3,d4 or c3,e5,g7.",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="render the board without ANSI colors"
    )
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING (default), ...")
    parser.add_argument("--log-file", help="also write log records to this file")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Environment first, command-line flags win"""
    settings = Settings.from_env()
    overrides: dict[str, object] = {}
    if args.no_color:
        overrides["use_color"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_file:
        overrides["log_file"] = args.log_file
    return Settings.model_validate(settings.model_dump() | overrides)


def play_turn(
    service: CheckersService,
    player: Player,
    settings: Settings,
    output_fn: Callable[[str], None],
) -> None:
    """Keep asking the same player until they enter a legal move sequence"""
    while True:
        output_fn(render_board(service.game.board, settings.use_color))
        output_fn(f"{player.color.capitalize()}'s Turn")
        if not service.game.board.movable_pieces(player.color):
            # Not a loss: the game only ends on zero pieces, so the player can still quit
            output_fn(f"{player.color.capitalize()} has no legal move")
        raw_move = player.make_move()
        try:
            response = service.play_turn(raw_move)
        except (InvalidInputError, InvalidMoveError) as error:
            output_fn(str(error))
            continue

        if response.captured:
            output_fn(f"Captured: {', '.join(response.captured)}")
        if response.promoted:
            output_fn("Crowned!")
        return


def run_game(
    service: CheckersService,
    players: Mapping[Color, Player],
    settings: Settings,
    output_fn: Callable[[str], None] = print,
) -> None:
    """Alternate turns until one side has no pieces left, then show the final board and the winner."""
    try:
        while not service.is_over:
            play_turn(service, players[service.game.turn_color], settings, output_fn)
    except QuitGame as quit_signal:
        output_fn(str(quit_signal))
        service.abort()

    output_fn(render_board(service.game.board, settings.use_color))
    output_fn(service.final_message())


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = settings_from_args(args)
    except ValueError as error:
        print(f"checkers: {error}", file=sys.stderr)
        return 2

    setup_logger(settings.log_level, settings.log_file)
    logger.debug("starting with %s", settings)

    service = CheckersService(Game.new_game())
    players: dict[Color, Player] = {color: HumanPlayer(color) for color in Color}
    run_game(service, players, settings, print)
    return 0


if __name__ == "__main__":
    sys.exit(main())
