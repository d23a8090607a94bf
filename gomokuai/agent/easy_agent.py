"""Easy tier: take a win, block a loss, otherwise play a random candidate."""

from __future__ import annotations

import logging
import random
from typing import Optional

from gomokuai.agent.search import trial_move
from gomokuai.game.board import Board, format_point
from gomokuai.game.types import Player, Point

from .base import Agent

logger = logging.getLogger(__name__)


def _wins_at(board: Board, move: Point, player: Player) -> bool:
    with trial_move(board, move, player) as won:
        return won


class EasyAgent(Agent):
    """Looks one move ahead for each side and never searches deeper."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def select_move(self, board: Board, player: Player, candidates: list[Point]) -> Point:
        assert candidates, "No candidate moves available"

        for move in candidates:
            if _wins_at(board, move, player):
                logger.debug("%s wins at %s", player, format_point(move))
                return move

        opponent = player.other
        for move in candidates:
            if _wins_at(board, move, opponent):
                logger.debug("%s blocks %s at %s", player, opponent, format_point(move))
                return move

        move = self.rng.choice(candidates)
        logger.debug("%s plays random candidate %s", player, format_point(move))
        return move
