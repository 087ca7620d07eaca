"""The Game board owns the live pieces and gates every move sequence: simulate on a copy first, only then commit."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Self

from src.checkers.moves import SequenceOutcome, has_any_move, play_sequence
from src.checkers.pieces import Piece
from src.checkers.square import BOARD_SIZE, Square
from src.core.exceptions import BoardSetupError, InvalidMoveError
from src.core.shared_types import Color

logger = logging.getLogger(__name__)

# Each side starts on the three rows closest to its own back rank
STARTING_ROWS: dict[Color, range] = {
    Color.WHITE: range(0, 3),
    Color.BLACK: range(BOARD_SIZE - 3, BOARD_SIZE),
}


@dataclass
class Board:
    position: dict[Square, Piece]

    @classmethod
    def starting_position(cls) -> Self:
        """
        Standard opening: 12 pieces per side.
        White fills rows 0-2, black rows 5-7, always on the playable (odd row + column) squares. Rows 3-4 stay empty.
        """
        pieces = [
            Piece(color, Square(row, column))
            for color, rows in STARTING_ROWS.items()
            for row in rows
            for column in range(BOARD_SIZE)
            if Square(row, column).is_playable()
        ]
        return cls.from_pieces(pieces)

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> Self:
        """Set up an arbitrary position. Squares must be on the board, playable, and used at most once."""
        position: dict[Square, Piece] = {}
        for piece in pieces:
            square = piece.square
            if not square.is_within_bounds():
                raise BoardSetupError(f"{square} is not on the board.")
            if not square.is_playable():
                raise BoardSetupError(
                    f"{square.to_algebraic()} is not a playable square."
                )
            if square in position:
                raise BoardSetupError(
                    f"Two pieces placed on {square.to_algebraic()}."
                )
            position[square] = piece
        return cls(position)

    # --- QUERIES ---
    def piece_at(self, square: Square) -> Optional[Piece]:
        return self.position.get(square)

    @staticmethod
    def is_on_board(square: Square) -> bool:
        return square.is_within_bounds()

    def pieces_of(self, color: Color) -> list[Piece]:
        return [piece for piece in self.position.values() if piece.color == color]

    def count_pieces(self) -> dict[Color, int]:
        return {color: len(self.pieces_of(color)) for color in Color}

    def is_game_over(self) -> bool:
        """Game ends as soon as either side has no pieces left"""
        return any(count == 0 for count in self.count_pieces().values())

    def movable_pieces(self, color: Color) -> list[Piece]:
        """Pieces of the given color that have at least one slide or jump available"""
        return [
            piece for piece in self.pieces_of(color) if has_any_move(piece, self.position)
        ]

    def remove_piece(self, piece: Piece) -> None:
        """
        Take a piece off the board. Only removes it if it is indeed the piece standing on that square.

        NOTE: captures during a move sequence do not go through here: the jumped pieces are removed from the simulated
        position, which is then committed as a whole.
        """
        if self.position.get(piece.square) == piece:
            del self.position[piece.square]

    # --- MOVE SEQUENCES ---
    def snapshot(self) -> dict[Square, Piece]:
        """Disposable copy of the position. Pieces are immutable, so copying the mapping is enough."""
        return dict(self.position)

    def validate_sequence(self, sequence: list[Square]) -> SequenceOutcome:
        """
        Simulate the sequence on a snapshot
        ----

        The piece is located by the first square of the sequence. The live board is never touched, legal or not.
        """
        if not sequence:
            return SequenceOutcome.rejected("Need a start and end location")

        piece = self.piece_at(sequence[0])
        if piece is None:
            return SequenceOutcome.rejected("No piece there")
        return self._simulate(piece, sequence)

    def is_legal_sequence(self, sequence: list[Square]) -> bool:
        return self.validate_sequence(sequence).legal

    def execute_sequence(self, piece: Piece, sequence: list[Square]) -> SequenceOutcome:
        """
        Simulate first, then commit
        ----

        1. play the sequence on a snapshot
        2. rejected? raise InvalidMoveError and leave the board as it was
        3. legal? the snapshot's resulting position becomes the live position
        """
        outcome = self._simulate(piece, sequence)
        if not outcome.legal:
            raise InvalidMoveError(outcome.error or "Illegal move sequence")

        self.position = outcome.position
        logger.info(
            "%s moved %s%s",
            piece.color,
            ",".join(square.to_algebraic() for square in sequence),
            f", capturing {len(outcome.captured)}" if outcome.captured else "",
        )
        if outcome.promoted:
            logger.info("%s piece crowned on %s", piece.color, sequence[-1].to_algebraic())
        return outcome

    def _simulate(self, piece: Piece, sequence: list[Square]) -> SequenceOutcome:
        outcome = play_sequence(self.snapshot(), piece, sequence)
        if not outcome.legal:
            logger.debug(
                "rejected sequence %s: %s",
                [square.to_algebraic() for square in sequence],
                outcome.error,
            )
        return outcome
