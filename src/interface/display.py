"""
Text rendering of the board. Purely observational: nothing in here feeds back into the game.
"""

from src.checkers.board import Board
from src.checkers.pieces import Piece
from src.checkers.square import BOARD_SIZE, Square
from src.core.shared_types import Color

GLYPHS: dict[tuple[Color, bool], str] = {
    (Color.WHITE, False): "♙",
    (Color.WHITE, True): "♔",
    (Color.BLACK, False): "♟",
    (Color.BLACK, True): "♚",
}

# ANSI background colors for the two kinds of squares
PLAYABLE_BACKGROUND = "\033[41m"  # red
IDLE_BACKGROUND = "\033[47m"  # white
RESET = "\033[0m"

COLUMN_LETTERS = "abcdefgh"


def glyph(piece: Piece) -> str:
    return GLYPHS[(piece.color, piece.is_king)]


def render_square(board: Board, square: Square, use_color: bool) -> str:
    piece = board.piece_at(square)
    cell = f" {glyph(piece)} " if piece is not None else "   "
    if not use_color:
        return cell
    background = PLAYABLE_BACKGROUND if square.is_playable() else IDLE_BACKGROUND
    return f"{background}{cell}{RESET}"


def render_board(board: Board, use_color: bool = True) -> str:
    """Row 1 (white's back rank) is printed first, under a header of column letters a-h."""
    header = "   " + "".join(f" {letter} " for letter in COLUMN_LETTERS[:BOARD_SIZE])
    lines = [header]
    for row in range(BOARD_SIZE):
        cells = "".join(
            render_square(board, Square(row, column), use_color)
            for column in range(BOARD_SIZE)
        )
        lines.append(f" {row + 1} {cells}")
    return "\n".join(lines)
