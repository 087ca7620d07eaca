"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Checkers board is always 8x8: rows and columns both run 0..7
BOARD_SIZE = 8


@dataclass(frozen=True)
class Square:
    row: int
    column: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: column letter then row digit. 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        column = ord(sq[0]) - ord("a")
        row = int(sq[1]) - 1
        return cls(row, column)

    def to_algebraic(self) -> str:
        return f"{chr(self.column + ord('a'))}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.column < BOARD_SIZE)

    def is_playable(self) -> bool:
        """Only the dark squares are used: those where row + column is odd"""
        return (self.row + self.column) % 2 == 1

    def offset(self, d_row: int, d_column: int) -> Square:
        return Square(self.row + d_row, self.column + d_column)

    def midpoint(self, other: Square) -> Square:
        """The square jumped over when moving from here to `other`"""
        return Square((self.row + other.row) // 2, (self.column + other.column) // 2)
