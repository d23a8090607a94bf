"""Static evaluation: per-stone line patterns summed for each player."""

from __future__ import annotations

from gomokuai.game.board import DIRECTIONS, WIN_LENGTH, Board
from gomokuai.game.types import Player, Point

# ---------------------------------------------------------------------------
# Pattern scoring table: (run_length, blocked_ends) -> score
# ---------------------------------------------------------------------------

FIVE = 100_000
OPEN_FOUR = 10_000
RUSH_FOUR = 1_000
OPEN_THREE = 1_000
SLEEP_THREE = 100
OPEN_TWO = 100
SLEEP_TWO = 10

PATTERN_SCORES: dict[tuple[int, int], int] = {
    (4, 0): OPEN_FOUR,
    (4, 1): RUSH_FOUR,    # one move from five, single answer
    (3, 0): OPEN_THREE,
    (3, 1): SLEEP_THREE,
    (2, 0): OPEN_TWO,
    (2, 1): SLEEP_TWO,
}


def pattern_score(length: int, blocked: int) -> int:
    """Look up score for a run of `length` stones with `blocked` closed ends.

    A run closed at both ends is dead, and so is an overline.
    """
    if blocked == 2:
        return 0
    if length == WIN_LENGTH:
        return FIVE
    return PATTERN_SCORES.get((length, blocked), 0)


def _run_through(board: Board, point: Point, player: Player, dx: int, dy: int) -> tuple[int, int]:
    """Measure the run of `player` stones through `point` along (dx, dy).

    Returns (length, blocked_ends). An end is blocked when the next cell is
    off the board or holds the opponent.
    """
    length = 1
    blocked = 0
    for sign in (1, -1):
        x, y = point.x + sign * dx, point.y + sign * dy
        while True:
            p = Point(x, y)
            if not board.is_on_grid(p):
                blocked += 1
                break
            owner = board.get(p)
            if owner is None:
                break
            if owner is not player:
                blocked += 1
                break
            length += 1
            x += sign * dx
            y += sign * dy
    return length, blocked


def evaluate_stone(board: Board, point: Point, player: Player) -> int:
    """Sum of the pattern scores of the 4 lines through one stone."""
    score = 0
    for dx, dy in DIRECTIONS:
        length, blocked = _run_through(board, point, player, dx, dy)
        score += pattern_score(length, blocked)
    return score


def player_score(board: Board, player: Player) -> int:
    """Total pattern score over every stone of `player`.

    A run is counted once per stone in it, which rewards positions holding
    several threats at once.
    """
    return sum(
        evaluate_stone(board, pt, owner)
        for pt, owner in board.stones()
        if owner is player
    )


def evaluate(board: Board, ai_player: Player) -> int:
    """Static evaluation from `ai_player`'s point of view.

    Positive when `ai_player` is ahead, negative when the opponent is.
    """
    return player_score(board, ai_player) - player_score(board, ai_player.other)
