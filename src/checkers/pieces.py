"""Defines a checkers piece: a man or a king of either color"""

from dataclasses import dataclass, replace
from typing import Self

from src.checkers.square import BOARD_SIZE, Square
from src.core.shared_types import Color

Vector = tuple[int, int]

# The row each color has to reach to be crowned (the opponent's back rank)
KING_ROWS: dict[Color, int] = {
    Color.WHITE: BOARD_SIZE - 1,
    Color.BLACK: 0,
}

# White moves UP the board (increasing row), black moves DOWN
FORWARD: dict[Color, int] = {
    Color.WHITE: 1,
    Color.BLACK: -1,
}


@dataclass(frozen=True)
class Piece:
    """
    Immutable value. Moving or crowning a piece creates a new Piece; the Board swaps it in.
    Two pieces compare equal when color, square and king flag agree.
    """

    color: Color
    square: Square
    is_king: bool = False

    @property
    def king_row(self) -> int:
        return KING_ROWS[self.color]

    @property
    def forward(self) -> int:
        return FORWARD[self.color]

    @property
    def directions(self) -> list[Vector]:
        """Diagonal unit vectors the piece may travel along: 2 for a man, 4 for a king"""
        ahead: list[Vector] = [(self.forward, 1), (self.forward, -1)]
        if not self.is_king:
            return ahead
        behind: list[Vector] = [(-self.forward, 1), (-self.forward, -1)]
        return ahead + behind

    def with_king(self, is_king: bool) -> Self:
        # NOTE: crowning is one-way. Asking for a king to become a man again returns the king unchanged.
        return replace(self, is_king=self.is_king or is_king)

    def promoted(self) -> Self:
        return self.with_king(True)

    def moved_to(self, square: Square) -> Self:
        return replace(self, square=square)

    def should_promote(self) -> bool:
        return not self.is_king and self.square.row == self.king_row
