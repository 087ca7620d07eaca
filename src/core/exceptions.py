"""Exceptions raised by the domain layer and caught at the turn-loop boundary."""


class CheckersError(Exception):
    """Base class for every error the game raises on purpose."""


class InvalidMoveError(CheckersError):
    """A move sequence broke one of the movement rules. Always recoverable: the same player tries again."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class NotYourTurnError(CheckersError):
    pass


class GameStateError(CheckersError):
    """The game is not accepting moves (finished or aborted)."""


class BoardSetupError(CheckersError):
    """An explicitly constructed position violates the board invariants."""


class InvalidInputError(CheckersError):
    """Text typed by a player that cannot be read as move notation."""
