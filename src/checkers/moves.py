"""
Geometry/Base movement and capturing rules

Key idea: a move sequence is played out on a *copy* of the position. The same function both validates and
computes the position after the move, so the Board can use it as a simulator before committing anything.

Nothing in here raises for a rule violation: the outcome of a sequence is returned as a `SequenceOutcome`.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Mapping, Optional, Self

from src.checkers.pieces import Piece
from src.checkers.square import Square

# Read-only view of the live pieces, keyed by the square they stand on
Position = Mapping[Square, Piece]


class StepKind(Enum):
    SLIDE = auto()
    JUMP = auto()


@dataclass
class SequenceOutcome:
    """Result of playing a move sequence: either legal (with the position it leads to) or rejected with a reason."""

    legal: bool
    error: Optional[str] = None
    position: dict[Square, Piece] = field(default_factory=dict)
    piece: Optional[Piece] = None
    captured: list[Square] = field(default_factory=list)
    promoted: bool = False

    @classmethod
    def rejected(cls, reason: str) -> Self:
        return cls(legal=False, error=reason)


# --- MOVEMENT RULES ---
def classify_step(from_square: Square, to_square: Square) -> Optional[StepKind]:
    """A slide is one diagonal step, a jump is two. Anything else is not a step at all (None)."""
    d_row = abs(to_square.row - from_square.row)
    d_column = abs(to_square.column - from_square.column)
    if d_row == 1 and d_column == 1:
        return StepKind.SLIDE
    if d_row == 2 and d_column == 2:
        return StepKind.JUMP
    return None


def slide_moves(piece: Piece, position: Position) -> set[Square]:
    """One step along each of the piece's directions, onto an empty square"""
    moves: set[Square] = set()
    for d_row, d_column in piece.directions:
        target_square = piece.square.offset(d_row, d_column)
        if target_square.is_within_bounds() and target_square not in position:
            moves.add(target_square)
    return moves


def jump_moves(piece: Piece, position: Position) -> set[Square]:
    """
    Two steps along each of the piece's directions.
    ---

    Only allowed when the square jumped over holds an opponent's piece and the landing square is empty.
    """
    moves: set[Square] = set()
    for d_row, d_column in piece.directions:
        jumped_square = piece.square.offset(d_row, d_column)
        landing_square = piece.square.offset(2 * d_row, 2 * d_column)
        if not landing_square.is_within_bounds() or landing_square in position:
            continue

        jumped_piece = position.get(jumped_square)
        if jumped_piece is not None and jumped_piece.color != piece.color:
            moves.add(landing_square)
    return moves


def has_any_move(piece: Piece, position: Position) -> bool:
    return bool(slide_moves(piece, position) or jump_moves(piece, position))


# --- MOVE SEQUENCES ---
def play_sequence(
    position: Position, piece: Piece, sequence: list[Square]
) -> SequenceOutcome:
    """
    Play a whole move sequence on a copy of `position`
    ----

    **Rules**

    1. The sequence starts on the square the piece stands on, and visits at least one other square.
    2. Every step is either a slide or a jump, to a square that is legal *at that point* of the sequence.
    3. A slide ends the turn: no step may follow it. So a sequence is a single slide, or one or more jumps.
    4. A jumped piece is removed straight away.
    5. Reaching the opponent's back rank crowns the piece immediately; the rest of the chain may use the king's directions.

    `position` is never modified.
    """
    if not sequence or sequence[0] != piece.square:
        return SequenceOutcome.rejected("Illegal start position")

    if len(sequence) < 2:
        return SequenceOutcome.rejected("Need a start and end location")

    if position.get(piece.square) != piece:
        return SequenceOutcome.rejected("No piece there")

    board = dict(position)
    current = piece
    captured: list[Square] = []
    promoted = False
    turn_over = False
    just_jumped = False

    for target_square in sequence[1:]:
        if turn_over:
            return SequenceOutcome.rejected("Can't move twice")

        step = classify_step(current.square, target_square)
        if step is None:
            return SequenceOutcome.rejected("That move is neither a slide nor a jump")

        if step == StepKind.SLIDE:
            if just_jumped:
                return SequenceOutcome.rejected("Can't jump then slide")
            if target_square not in slide_moves(current, board):
                return SequenceOutcome.rejected("Can't slide there")
            turn_over = True
        else:
            if target_square not in jump_moves(current, board):
                return SequenceOutcome.rejected("Can't jump there")
            jumped_square = current.square.midpoint(target_square)
            del board[jumped_square]
            captured.append(jumped_square)
            just_jumped = True

        del board[current.square]
        current = current.moved_to(target_square)
        if current.should_promote():
            current = current.promoted()
            promoted = True
        board[target_square] = current

    return SequenceOutcome(
        legal=True,
        position=board,
        piece=current,
        captured=captured,
        promoted=promoted,
    )
