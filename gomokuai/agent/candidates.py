"""Candidate generation: the empty cells worth searching."""

from __future__ import annotations

from typing import Optional

from gomokuai.agent.config import EngineConfig
from gomokuai.game.board import Board
from gomokuai.game.types import Point

_DEFAULT_CONFIG = EngineConfig()


def quick_score(board: Board, move: Point) -> int:
    """Cheap ranking for a candidate: 10 per adjacent stone plus centrality."""
    score = 0
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            p = Point(move.x + dx, move.y + dy)
            if board.is_on_grid(p) and not board.is_empty(p):
                score += 10

    center = board.center
    dist_to_center = abs(move.x - center.x) + abs(move.y - center.y)
    score += board.size - dist_to_center
    return score


def generate_candidates(board: Board, config: Optional[EngineConfig] = None) -> list[Point]:
    """Return candidate moves near existing stones (Chebyshev distance <= radius).

    On a blank board, returns the center point. Candidates come back in
    (x, y) order; when there are more than `config.max_candidates` they are
    ranked by `quick_score` and cut, equal scores keeping (x, y) order.
    """
    if config is None:
        config = _DEFAULT_CONFIG
    if board.is_blank():
        return [board.center]

    radius = config.candidate_radius
    candidates: set[Point] = set()

    for pt, _ in board.stones():
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                if dx == 0 and dy == 0:
                    continue
                np = Point(pt.x + dx, pt.y + dy)
                if board.is_on_grid(np) and board.is_empty(np):
                    candidates.add(np)

    ordered = sorted(candidates)
    if len(ordered) > config.max_candidates:
        # sorted() is stable, so ties stay in (x, y) order
        ordered = sorted(ordered, key=lambda m: quick_score(board, m), reverse=True)
        ordered = ordered[:config.max_candidates]
    return ordered
