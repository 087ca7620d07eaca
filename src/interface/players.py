"""Players supply raw move text. Turning that text into squares is the service's job."""

from typing import Callable, Optional, Protocol

from src.core.shared_types import Color

QUIT_COMMANDS = {"q", "quit", "exit"}
PROMPT = "Please enter your move as a series of board spaces."


class QuitGame(Exception):
    """The player asked to stop (quit command or end of input)."""


class Player(Protocol):
    color: Color

    def make_move(self) -> str: ...


class HumanPlayer:
    """Reads moves from the terminal (or any replacement for `input`, handy in tests)"""

    def __init__(
        self,
        color: Color,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.color = color
        self._input = input_fn or input
        self._output = output_fn or print

    def make_move(self) -> str:
        self._output(PROMPT)
        try:
            line = self._input("> ")
        except EOFError:
            raise QuitGame(f"{self.color} closed the input.") from None

        if line.strip().lower() in QUIT_COMMANDS:
            raise QuitGame(f"{self.color} quit the game.")
        return line
