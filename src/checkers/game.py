"""
The Game class will be the entrypoint into the domain layer for the service layer.
It keeps track of whose turn it is and whether the game is still running; every rule about moving pieces lives in the Board.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.board import Board
from src.checkers.moves import SequenceOutcome
from src.checkers.square import Square
from src.core.exceptions import GameStateError, InvalidMoveError, NotYourTurnError
from src.core.shared_types import Color, Status

logger = logging.getLogger(__name__)


@dataclass
class Game:
    board: Board
    turn_color: Color
    status: Status
    last_mover: Optional[Color] = None

    @classmethod
    def new_game(cls, board: Optional[Board] = None) -> Self:
        """White always opens. A custom board can be handed in (puzzles/tests), otherwise the standard opening is used."""
        game = cls(
            board=board if board is not None else Board.starting_position(),
            turn_color=Color.WHITE,
            status=Status.IN_PROGRESS,
        )
        # A position that is already decided never accepts a move
        game._update_game_status()
        return game

    @property
    def winner(self) -> Optional[Color]:
        """
        Only defined once the game is over.
        The player who made the last move is the one who took the final opposing piece.
        """
        if self.status != Status.GAME_OVER:
            return None
        if self.last_mover is not None:
            return self.last_mover
        # decided before any move: whoever still has pieces left
        counts = self.board.count_pieces()
        return next((color for color, count in counts.items() if count > 0), None)

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    def make_move(self, sequence: list[Square], color: Color) -> SequenceOutcome:
        """
        Attempt a move sequence for the player with the `color` pieces
        -----

        1. make sure the game is (still) in progress
        2. make sure it is your turn
        3. make sure you are moving one of your own pieces
        4. let the board simulate and commit the sequence
        5. switch turns and check if the game has ended

        Any rejection leaves both the board and the turn as they were.
        """
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

        self._assert_your_turn(color)

        if not sequence:
            raise InvalidMoveError("Need a start and end location")

        piece = self.board.piece_at(sequence[0])
        if piece is None:
            raise InvalidMoveError("No piece there")
        if piece.color != color:
            raise InvalidMoveError("Not your piece")

        outcome = self.board.execute_sequence(piece, sequence)

        self.last_mover = color
        self._switch_turn()
        self._update_game_status()
        return outcome

    def abort(self) -> None:
        """A player walked away from the game"""
        if self.status == Status.IN_PROGRESS:
            logger.info("game aborted while %s was to move", self.turn_color)
            self.status = Status.ABORTED

    # -- PRIVATE HELPERS ---
    def _assert_your_turn(self, color: Color) -> None:
        if color != self.turn_color:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {self.turn_color} to make a move first."
            )

    def _switch_turn(self) -> None:
        self.turn_color = self.turn_color.opponent

    def _update_game_status(self) -> None:
        if self.board.is_game_over():
            self.status = Status.GAME_OVER
            logger.info("game over, pieces left: %s", self.board.count_pieces())
