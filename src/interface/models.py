"""Input and response models: what crosses the boundary between the terminal and the service"""

import re

from pydantic import BaseModel, field_validator

from src.checkers.square import Square
from src.core.exceptions import InvalidInputError
from src.core.shared_types import Color, Status

# Comma-separated squares, at least two of them. ex) "c3,d4" or "c3,e5,g7"
MOVE_NOTATION = re.compile(r"^[a-h][1-8](,[a-h][1-8])+$")

SquareName = str


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    notation: str

    @field_validator("notation")
    @classmethod
    def validate_notation(cls, value: str) -> str:
        # Be lenient about spacing and capitals: "C3, D4" reads the same as "c3,d4"
        normalized = "".join(value.split()).lower()
        if not MOVE_NOTATION.match(normalized):
            raise InvalidInputError(
                f"Cannot interpret {value!r} as a move. Enter squares separated by commas, ex) c3,d4"
            )
        return normalized

    def to_sequence(self) -> list[Square]:
        return [Square.from_algebraic(name) for name in self.notation.split(",")]


# --- RESPONSE MODELS ---
class TurnResponse(BaseModel):
    color: Color
    move: list[SquareName]
    captured: list[SquareName]
    promoted: bool
    next_color: Color
    status: Status
