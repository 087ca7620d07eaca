"""Orchestration of a single turn: raw player text in, domain call, response out."""

from src.checkers.game import Game
from src.core.shared_types import Status
from src.interface.models import MoveRequest, TurnResponse


class CheckersService:
    """Orchestration of layers for a checkers game."""

    def __init__(self, game: Game) -> None:
        self.game = game

    @property
    def is_over(self) -> bool:
        return self.game.is_over

    def play_turn(self, raw_move: str) -> TurnResponse:
        """
        Make a move attempt for the player whose turn it is.
        ----
        Raises InvalidInputError for unreadable text and InvalidMoveError for an illegal sequence.
        Either way nothing changed, and the caller can simply ask the same player again.
        """
        # Parse the text into squares
        request = MoveRequest(notation=raw_move)
        sequence = request.to_sequence()

        # Attempt the move (the turn color is read BEFORE the game switches it)
        color = self.game.turn_color
        outcome = self.game.make_move(sequence, color)

        return TurnResponse(
            color=color,
            move=[square.to_algebraic() for square in sequence],
            captured=[square.to_algebraic() for square in outcome.captured],
            promoted=outcome.promoted,
            next_color=self.game.turn_color,
            status=self.game.status,
        )

    def abort(self) -> None:
        self.game.abort()

    def final_message(self) -> str:
        """What to announce once the loop ends"""
        if self.game.status == Status.ABORTED:
            return "Game aborted."
        winner = self.game.winner
        if winner is None:
            return "No winner."
        return f"{winner.capitalize()} Player Wins!"
