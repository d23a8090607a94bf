"""Tests for the alpha-beta search engine."""

import math

import pytest

from gomokuai.agent.candidates import generate_candidates
from gomokuai.agent.config import EngineConfig
from gomokuai.agent.evaluation import evaluate
from gomokuai.agent import search
from gomokuai.agent.search import WIN_SCORE, SearchStats, minimax, search_root, trial_move
from gomokuai.game.board import Board
from gomokuai.game.types import Player, Point

INF = math.inf


# ---------------------------------------------------------------------------
# Reference: plain minimax with the same win rule and no pruning
# ---------------------------------------------------------------------------

def plain_minimax(board, depth, maximizing, ai_player, counter):
    counter[0] += 1
    if depth == 0:
        return evaluate(board, ai_player)
    candidates = generate_candidates(board)
    if not candidates:
        return evaluate(board, ai_player)

    mover = ai_player if maximizing else ai_player.other
    scores = []
    for move in candidates:
        board.place(move, mover)
        if board.check_win(move, mover):
            board.remove(move)
            return WIN_SCORE if maximizing else -WIN_SCORE
        scores.append(plain_minimax(board, depth - 1, not maximizing, ai_player, counter))
        board.remove(move)
    return max(scores) if maximizing else min(scores)


def plain_root(board, ai_player, depth, counter):
    best = -INF
    for move in generate_candidates(board):
        board.place(move, ai_player)
        if board.check_win(move, ai_player):
            board.remove(move)
            return WIN_SCORE
        best = max(best, plain_minimax(board, depth - 1, False, ai_player, counter))
        board.remove(move)
    return best


SMALL_POSITIONS = [
    [
        ".....",
        ".XO..",
        "..X..",
        "..O..",
        ".....",
    ],
    [
        "X...O",
        ".X.O.",
        ".....",
        ".O.X.",
        ".....",
    ],
    [
        ".....",
        ".XXX.",
        ".OO..",
        "..O..",
        ".....",
    ],
]


class TestAlphaBetaEquivalence:
    @pytest.mark.parametrize("rows", SMALL_POSITIONS)
    @pytest.mark.parametrize("depth", [1, 2, 3])
    @pytest.mark.parametrize("ai_player", [Player.BLACK, Player.WHITE])
    def test_same_root_score_as_plain_minimax(self, rows, depth, ai_player):
        board = Board.from_rows(rows)
        counter = [0]
        expected = plain_root(board, ai_player, depth, counter)

        stats = SearchStats()
        move, score = search_root(board, ai_player, depth, stats=stats)
        assert score == expected
        assert move is not None
        # pruning only ever skips nodes
        assert stats.nodes <= counter[0]

    def test_pruning_happens(self):
        board = Board.from_rows(SMALL_POSITIONS[0])
        counter = [0]
        plain_root(board, Player.BLACK, 3, counter)
        stats = SearchStats()
        search_root(board, Player.BLACK, 3, stats=stats)
        assert stats.cutoffs > 0
        assert stats.nodes < counter[0]


# ---------------------------------------------------------------------------
# Minimax nodes
# ---------------------------------------------------------------------------

class TestMinimax:
    def test_depth_zero_is_static_evaluation(self):
        board = Board.from_rows(SMALL_POSITIONS[1])
        assert minimax(board, 0, -INF, INF, True, Player.BLACK) == evaluate(board, Player.BLACK)

    def test_no_candidates_is_static_evaluation(self):
        board = Board.from_rows(["XOX", "OXO", "OXO"])
        assert minimax(board, 3, -INF, INF, True, Player.BLACK) == evaluate(board, Player.BLACK)

    def test_maximizing_node_sees_own_win(self):
        board = Board()
        for y in range(5, 9):
            board.place(Point(7, y), Player.BLACK)
        assert minimax(board, 2, -INF, INF, True, Player.BLACK) == WIN_SCORE

    def test_minimizing_node_sees_opponent_win(self):
        board = Board()
        for y in range(5, 9):
            board.place(Point(7, y), Player.WHITE)
        assert minimax(board, 2, -INF, INF, False, Player.BLACK) == -WIN_SCORE

    def test_board_restored_after_search(self):
        board = Board.from_rows(SMALL_POSITIONS[2])
        before = board.copy()
        minimax(board, 3, -INF, INF, True, Player.WHITE)
        assert board == before

    def test_stats_count_nodes(self):
        board = Board.from_rows(SMALL_POSITIONS[0])
        stats = SearchStats()
        minimax(board, 1, -INF, INF, True, Player.BLACK, stats=stats)
        n = len(generate_candidates(board))
        assert stats.nodes == n + 1
        assert stats.leaves == n
        assert "nodes=" in str(stats)


# ---------------------------------------------------------------------------
# Root search
# ---------------------------------------------------------------------------

class TestSearchRoot:
    def test_returns_immediate_win(self):
        board = Board()
        for x in range(3, 7):
            board.place(Point(x, 7), Player.WHITE)
        board.place(Point(2, 7), Player.BLACK)
        move, score = search_root(board, Player.WHITE, 3)
        assert move == Point(7, 7)
        assert score == WIN_SCORE

    def test_win_beats_block(self):
        board = Board()
        for x in range(3, 7):
            board.place(Point(x, 7), Player.BLACK)
            board.place(Point(x, 9), Player.WHITE)
        board.place(Point(2, 9), Player.BLACK)
        board.place(Point(2, 7), Player.WHITE)
        # widen the cap so both completing cells are searched
        move, _ = search_root(board, Player.WHITE, 2, config=EngineConfig(max_candidates=60))
        assert move == Point(7, 9)

    def test_no_candidates(self):
        board = Board.from_rows(["XOX", "OXO", "OXO"])
        assert search_root(board, Player.BLACK, 2) == (None, -INF)

    def test_first_candidate_keeps_ties(self):
        # lone stones score 0, so every reply ties
        board = Board(7)
        board.place(Point(3, 3), Player.BLACK)
        move, _ = search_root(board, Player.WHITE, 1)
        cands = generate_candidates(board)
        scores = []
        for m in cands:
            board.place(m, Player.WHITE)
            scores.append(evaluate(board, Player.WHITE))
            board.remove(m)
        best = max(scores)
        assert move == cands[scores.index(best)]

    def test_rejects_zero_depth(self):
        with pytest.raises(AssertionError):
            search_root(Board(), Player.BLACK, 0)


# ---------------------------------------------------------------------------
# Trial moves and interrupted searches
# ---------------------------------------------------------------------------

class Interrupted(Exception):
    pass


def evaluate_then_fail(calls: int):
    """An evaluate() stand-in that raises on the `calls`-th leaf."""
    count = [0]

    def _evaluate(board, ai_player):
        count[0] += 1
        if count[0] >= calls:
            raise Interrupted
        return evaluate(board, ai_player)

    return _evaluate


class TestTrialMove:
    def test_yields_win_and_removes_stone(self):
        board = Board()
        for x in range(3, 7):
            board.place(Point(x, 7), Player.BLACK)
        with trial_move(board, Point(7, 7), Player.BLACK) as won:
            assert won
            assert board.get(Point(7, 7)) is Player.BLACK
        assert board.is_empty(Point(7, 7))

    def test_removes_stone_when_block_raises(self):
        board = Board()
        with pytest.raises(Interrupted):
            with trial_move(board, Point(2, 2), Player.WHITE) as won:
                assert not won
                raise Interrupted
        assert board.is_blank()


class TestInterruptedSearch:
    @pytest.mark.parametrize("calls", [1, 5, 40])
    def test_minimax_restores_board(self, monkeypatch, calls):
        monkeypatch.setattr(search, "evaluate", evaluate_then_fail(calls))
        board = Board.from_rows(SMALL_POSITIONS[0])
        before = board.copy()
        with pytest.raises(Interrupted):
            minimax(board, 3, -INF, INF, True, Player.BLACK)
        assert board == before

    def test_search_root_restores_board(self, monkeypatch):
        monkeypatch.setattr(search, "evaluate", evaluate_then_fail(10))
        board = Board.from_rows(SMALL_POSITIONS[1])
        before = board.copy()
        with pytest.raises(Interrupted):
            search_root(board, Player.WHITE, 2)
        assert board == before
