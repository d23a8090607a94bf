"""Minimax agent: fixed-depth alpha-beta search with pattern evaluation."""

from __future__ import annotations

import logging
from typing import Optional

from gomokuai.agent.base import Agent
from gomokuai.agent.config import EngineConfig
from gomokuai.agent.search import SearchStats, search_root
from gomokuai.game.board import Board, format_point
from gomokuai.game.types import Player, Point

logger = logging.getLogger(__name__)


class MinimaxAgent(Agent):
    """Alpha-beta agent searching `depth` plies, the root move included."""

    def __init__(self, depth: int = 2, config: Optional[EngineConfig] = None) -> None:
        assert depth >= 1, f"Search depth must be >= 1, got {depth}"
        self.depth = depth
        self.config = config if config is not None else EngineConfig()

    @property
    def name(self) -> str:
        return f"MinimaxAgent(d={self.depth})"

    def select_move(self, board: Board, player: Player, candidates: list[Point]) -> Point:
        stats = SearchStats()
        best_move, best_score = search_root(
            board, player, self.depth, candidates, self.config, stats,
        )
        assert best_move is not None, "No candidates found"
        logger.debug(
            "%s best move %s, score %s (%s)",
            self.name, format_point(best_move), best_score, stats,
        )
        return best_move
