from __future__ import annotations

from typing import Iterator, Optional, Sequence

from .types import Player, Point

BOARD_SIZE = 15
WIN_LENGTH = 5

# Four line axes: horizontal, vertical, diagonal, anti-diagonal
DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1)]

STONE_CHARS = {Player.BLACK: "X", Player.WHITE: "O"}
EMPTY_CHAR = "."


def format_point(point: Point) -> str:
    """Format a Point as a coordinate string like '(7, 7)'."""
    return f"({point.x}, {point.y})"


class Board:
    """N x N Gomoku board. Tracks stone placement.

    The engine borrows a board for the length of one decision and undoes
    every trial placement, so callers get back an equal board.
    """

    def __init__(self, size: int = BOARD_SIZE) -> None:
        assert size > 0, f"Board size must be positive, got {size}"
        self.size = size
        self._grid: dict[Point, Player] = {}

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from text rows: '.' empty, 'X' black, 'O' white.

        Row index is y, character index is x. The board is square, sized by
        the number of rows.
        """
        size = len(rows)
        board = cls(size)
        chars = {char: player for player, char in STONE_CHARS.items()}
        for y, row in enumerate(rows):
            assert len(row) == size, f"Row {y} has {len(row)} cells, expected {size}"
            for x, char in enumerate(row):
                if char == EMPTY_CHAR:
                    continue
                assert char in chars, f"Unknown cell {char!r} at {format_point(Point(x, y))}"
                board.place(Point(x, y), chars[char])
        return board

    def place(self, point: Point, player: Player) -> None:
        assert self.is_on_grid(point), f"Point {format_point(point)} is off the grid"
        assert self.is_empty(point), f"{format_point(point)} is occupied"
        self._grid[point] = player

    def remove(self, point: Point) -> None:
        del self._grid[point]

    def get(self, point: Point) -> Optional[Player]:
        return self._grid.get(point)

    def is_empty(self, point: Point) -> bool:
        return point not in self._grid

    def is_on_grid(self, point: Point) -> bool:
        return 0 <= point.x < self.size and 0 <= point.y < self.size

    def is_blank(self) -> bool:
        return not self._grid

    def is_full(self) -> bool:
        return len(self._grid) == self.size * self.size

    @property
    def center(self) -> Point:
        return Point(self.size // 2, self.size // 2)

    @property
    def occupied_count(self) -> int:
        return len(self._grid)

    def stones(self) -> Iterator[tuple[Point, Player]]:
        """Yield (point, player) for every occupied cell."""
        return iter(list(self._grid.items()))

    def copy(self) -> Board:
        clone = Board(self.size)
        clone._grid = dict(self._grid)
        return clone

    def check_win(self, point: Point, player: Player) -> bool:
        """Check if the stone at `point` is part of 5-in-a-row for `player`."""
        assert self.is_on_grid(point), f"Point {format_point(point)} is off the grid"
        for dx, dy in DIRECTIONS:
            count = 1
            # Count forward
            for step in range(1, WIN_LENGTH):
                p = Point(point.x + dx * step, point.y + dy * step)
                if not self.is_on_grid(p) or self.get(p) is not player:
                    break
                count += 1
            # Count backward
            for step in range(1, WIN_LENGTH):
                p = Point(point.x - dx * step, point.y - dy * step)
                if not self.is_on_grid(p) or self.get(p) is not player:
                    break
                count += 1
            if count >= WIN_LENGTH:
                return True
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._grid == other._grid

    def __str__(self) -> str:
        rows = []
        for y in range(self.size):
            row = ""
            for x in range(self.size):
                player = self.get(Point(x, y))
                row += EMPTY_CHAR if player is None else STONE_CHARS[player]
            rows.append(row)
        return "\n".join(rows)


def check_win(board: Board, x: int, y: int, player: Player) -> bool:
    """Win oracle for the turn controller: did the stone just played at
    (x, y) complete five in a row for `player`?"""
    return board.check_win(Point(x, y), player)
