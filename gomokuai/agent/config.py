"""Difficulty tiers and per-engine search settings."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Empty cells within this Chebyshev distance of a stone are candidates
CANDIDATE_RADIUS = 2

# Max candidates to search at each node
MAX_CANDIDATES = 20


class Difficulty(enum.IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def depth(self) -> int:
        """Search depth in plies for this tier."""
        return int(self)

    @classmethod
    def from_level(cls, level: int) -> Difficulty:
        """Map an integer level to a tier, clamping into 1-3."""
        level = int(level)
        clamped = min(max(level, cls.EASY), cls.HARD)
        if clamped != level:
            logger.warning("difficulty %d out of range, clamped to %d", level, clamped)
        return cls(clamped)

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class EngineConfig:
    candidate_radius: int = CANDIDATE_RADIUS
    max_candidates: int = MAX_CANDIDATES

    def __post_init__(self) -> None:
        if self.candidate_radius < 1:
            raise ValueError(f"candidate_radius must be >= 1, got {self.candidate_radius}")
        if self.max_candidates < 1:
            raise ValueError(f"max_candidates must be >= 1, got {self.max_candidates}")
