"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.checkers.board import Board
from src.checkers.pieces import Piece
from src.checkers.square import Square
from src.core.shared_types import Color


def make_piece(name: str, color: Color, is_king: bool = False) -> Piece:
    return Piece(color, Square.from_algebraic(name), is_king)


@pytest.fixture
def board_with_pieces() -> Callable[..., Board]:
    """Call the inner function with (square name, color) or (square name, color, is_king) tuples"""

    def _create_board(*specs: tuple) -> Board:
        return Board.from_pieces(make_piece(*spec) for spec in specs)

    return _create_board


@pytest.fixture
def starting_board() -> Board:
    return Board.starting_position()
