"""Decision entry point: best move for a player on a board at a difficulty."""

from __future__ import annotations

import logging
import random
from typing import Optional

from gomokuai.agent.base import Agent
from gomokuai.agent.candidates import generate_candidates
from gomokuai.agent.config import Difficulty, EngineConfig
from gomokuai.agent.easy_agent import EasyAgent
from gomokuai.agent.minimax_agent import MinimaxAgent
from gomokuai.game.board import Board, format_point
from gomokuai.game.types import INVALID_MOVE, Player, Point

logger = logging.getLogger(__name__)


class GomokuAI:
    """Computer opponent. Callers construct one and pass it where needed.

    `choose_move` borrows the board for the length of the call and hands it
    back unchanged; committing the returned move is up to the caller.
    """

    def __init__(
        self,
        difficulty: int = Difficulty.MEDIUM,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.difficulty = Difficulty.from_level(difficulty)
        self.config = config if config is not None else EngineConfig()
        self._easy = EasyAgent(rng)
        self._minimax: dict[int, MinimaxAgent] = {}
        logger.info(
            "initialized with difficulty %d, depth %d",
            self.difficulty, self.difficulty.depth,
        )

    def agent_for(self, difficulty: Difficulty) -> Agent:
        """Return the strategy used at `difficulty`."""
        if difficulty is Difficulty.EASY:
            return self._easy
        agent = self._minimax.get(difficulty.depth)
        if agent is None:
            agent = MinimaxAgent(difficulty.depth, self.config)
            self._minimax[difficulty.depth] = agent
        return agent

    def choose_move(
        self,
        board: Board,
        ai_player: Player,
        difficulty: Optional[int] = None,
    ) -> Point:
        """Return the move `ai_player` should play, or INVALID_MOVE if none.

        `difficulty` overrides the engine's tier for this call only.
        """
        tier = self.difficulty if difficulty is None else Difficulty.from_level(difficulty)

        # Opening move bypasses search
        if board.is_blank():
            return board.center

        candidates = generate_candidates(board, self.config)
        if not candidates:
            logger.warning("no legal move for %s, board is full", ai_player)
            return INVALID_MOVE

        move = self.agent_for(tier).select_move(board, ai_player, candidates)
        logger.debug("%s (%s) plays %s", ai_player, tier, format_point(move))
        return move


def choose_move(
    board: Board,
    ai_player: Player,
    difficulty: int = Difficulty.MEDIUM,
    rng: Optional[random.Random] = None,
) -> Point:
    """One-shot decision with a throwaway engine."""
    return GomokuAI(difficulty, rng=rng).choose_move(board, ai_player)
