"""Minimax with alpha-beta pruning over generated candidates."""

from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from gomokuai.agent.candidates import generate_candidates
from gomokuai.agent.config import EngineConfig
from gomokuai.agent.evaluation import FIVE, evaluate
from gomokuai.game.board import Board
from gomokuai.game.types import Player, Point

INF = math.inf

# Returned as soon as a trial move completes five; dominates any static score
WIN_SCORE = FIVE * 10


@dataclass
class SearchStats:
    """Counters for one decision, reported in the engine's debug log."""

    nodes: int = 0
    leaves: int = 0
    cutoffs: int = 0

    def __str__(self) -> str:
        return f"nodes={self.nodes} leaves={self.leaves} cutoffs={self.cutoffs}"


@contextmanager
def trial_move(board: Board, move: Point, player: Player) -> Iterator[bool]:
    """Place a stone for the duration of the block; yields whether it wins.

    The stone is removed on exit, also when the block raises.
    """
    board.place(move, player)
    try:
        yield board.check_win(move, player)
    finally:
        board.remove(move)


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    ai_player: Player,
    config: Optional[EngineConfig] = None,
    stats: Optional[SearchStats] = None,
) -> float:
    """Minimax search with alpha-beta pruning.

    Scores are always from `ai_player`'s point of view: maximizing nodes
    place `ai_player` stones, minimizing nodes place the opponent's.
    Every trial placement is undone before returning.
    """
    if stats is not None:
        stats.nodes += 1

    if depth == 0:
        if stats is not None:
            stats.leaves += 1
        return evaluate(board, ai_player)

    candidates = generate_candidates(board, config)
    if not candidates:
        if stats is not None:
            stats.leaves += 1
        return evaluate(board, ai_player)

    if maximizing:
        best = -INF
        for move in candidates:
            with trial_move(board, move, ai_player) as won:
                if won:
                    return WIN_SCORE
                score = minimax(board, depth - 1, alpha, beta, False, ai_player, config, stats)

            best = max(best, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break
        return best

    opponent = ai_player.other
    best = INF
    for move in candidates:
        with trial_move(board, move, opponent) as won:
            if won:
                return -WIN_SCORE
            score = minimax(board, depth - 1, alpha, beta, True, ai_player, config, stats)

        best = min(best, score)
        beta = min(beta, score)
        if beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break
    return best


def search_root(
    board: Board,
    ai_player: Player,
    depth: int,
    candidates: Optional[list[Point]] = None,
    config: Optional[EngineConfig] = None,
    stats: Optional[SearchStats] = None,
) -> tuple[Optional[Point], float]:
    """Search every root candidate. Returns (best_move, best_score).

    A candidate that wins on the spot is returned immediately with
    WIN_SCORE. Otherwise the strictly highest score wins and the first
    candidate seen keeps ties. Returns (None, -INF) with no candidates.
    """
    assert depth >= 1, f"Search depth must be >= 1, got {depth}"
    if candidates is None:
        candidates = generate_candidates(board, config)

    best_move: Optional[Point] = None
    best_score = -INF
    alpha = -INF

    for move in candidates:
        with trial_move(board, move, ai_player) as won:
            if won:
                return move, WIN_SCORE
            score = minimax(board, depth - 1, alpha, INF, False, ai_player, config, stats)

        if score > best_score:
            best_score = score
            best_move = move
        alpha = max(alpha, score)

    return best_move, best_score
