"""
Type definitions used across layers
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    GAME_OVER = "game over"
    ABORTED = "aborted"
