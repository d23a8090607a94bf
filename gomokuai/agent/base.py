from __future__ import annotations

import abc

from gomokuai.game.board import Board
from gomokuai.game.types import Player, Point


class Agent(abc.ABC):
    @abc.abstractmethod
    def select_move(self, board: Board, player: Player, candidates: list[Point]) -> Point:
        """Return the candidate where `player` should play.

        `candidates` is non-empty. The board must be left as it was given.
        """

    @property
    def name(self) -> str:
        return self.__class__.__name__
