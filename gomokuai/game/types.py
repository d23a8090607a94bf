"""Stone colours and board coordinates shared by the board and the agents."""

from __future__ import annotations

import enum
from typing import NamedTuple


class Player(enum.Enum):
    BLACK = 1
    WHITE = 2

    @property
    def other(self) -> Player:
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    def __str__(self) -> str:
        return self.name.capitalize()


class Point(NamedTuple):
    x: int  # 0-indexed column
    y: int  # 0-indexed row


# Returned when the board has no legal move left
INVALID_MOVE = Point(-1, -1)
