"""Tests for the minimax / alpha-beta search."""

import pytest

from draughtie.core.board import Board, initial_board
from draughtie.core.enums import Piece, Player
from draughtie.core.move import NO_MOVE, Move
from draughtie.core.move_generator import legal_moves
from draughtie.core.notation import board_from_diagram
from draughtie.engine import (
    INF_SCORE,
    AlphaBetaEngine,
    SearchLimits,
    alpha_beta,
    evaluate,
    find_best_move,
    minimax,
)

MIDGAME = """
. b . . . b . .
. . b . . . b .
. b . . . b . b
. . w . . . . .
. . . w . b . .
w . . . . . w .
. w . . . w . w
w . . . w . . .
"""


def _two_captures() -> Board:
    # White man can take a black king or a black man.
    return Board.from_pieces(
        {
            (4, 3): Piece.WHITE_MAN,
            (3, 2): Piece.BLACK_KING,
            (3, 4): Piece.BLACK_MAN,
        }
    )


class TestHorizon:
    @pytest.mark.parametrize("maximizing", [True, False])
    def test_depth_zero_is_static_eval(self, maximizing: bool) -> None:
        board = _two_captures()
        assert alpha_beta(board, 0, 0, maximizing) == evaluate(board)
        assert minimax(board, 0, 0, maximizing) == evaluate(board)

    def test_side_without_moves_scores_material(self) -> None:
        board = Board.from_pieces({(2, 1): Piece.BLACK_MAN, (0, 3): Piece.BLACK_MAN})
        assert alpha_beta(board, 0, 4, True) == -2


class TestPruningAgreesWithMinimax:
    @pytest.mark.parametrize("max_depth", [1, 2, 3])
    def test_opening(self, max_depth: int) -> None:
        board = initial_board()
        for maximizing in (True, False):
            assert alpha_beta(board, 0, max_depth, maximizing) == minimax(
                board, 0, max_depth, maximizing
            )

    @pytest.mark.parametrize("max_depth", [1, 2, 3])
    def test_midgame(self, max_depth: int) -> None:
        board = board_from_diagram(MIDGAME)
        for maximizing in (True, False):
            assert alpha_beta(board, 0, max_depth, maximizing) == minimax(
                board, 0, max_depth, maximizing
            )

    def test_closed_window_cuts_off_after_first_child(self) -> None:
        engine = AlphaBetaEngine()
        board = board_from_diagram(MIDGAME)
        engine.alpha_beta(board, 0, 3, True, INF_SCORE, INF_SCORE)
        # One node per ply along the leftmost line.
        assert engine.nodes == 4


class TestFindBestMove:
    @pytest.mark.parametrize("max_depth", [0, 1, 2])
    def test_prefers_the_bigger_capture(self, max_depth: int) -> None:
        move = find_best_move(_two_captures(), max_depth)
        assert move == Move.jump((4, 3), (2, 1))

    def test_forced_capture(self) -> None:
        board = Board.from_pieces(
            {
                (4, 5): Piece.WHITE_MAN,
                (6, 1): Piece.WHITE_MAN,
                (3, 4): Piece.BLACK_MAN,
                (0, 1): Piece.BLACK_MAN,
            }
        )
        assert find_best_move(board, 3) == Move.jump((4, 5), (2, 3))

    def test_first_move_wins_ties(self) -> None:
        board = initial_board()
        assert find_best_move(board, 0) == legal_moves(board, Player.WHITE)[0]
        assert find_best_move(board, 1) == Move.step((5, 0), (4, 1))

    def test_no_move_when_white_cannot_move(self) -> None:
        board = Board.from_pieces({(2, 1): Piece.BLACK_MAN})
        assert find_best_move(board, 3) == NO_MOVE
        assert find_best_move(board, 3).is_null

    def test_negative_depth_searches_like_zero(self) -> None:
        board = _two_captures()
        assert find_best_move(board, -1) == find_best_move(board, 0)
        assert find_best_move(initial_board(), -3) == Move.step((5, 0), (4, 1))

    def test_result_is_legal(self) -> None:
        board = board_from_diagram(MIDGAME)
        assert find_best_move(board, 3) in legal_moves(board, Player.WHITE)


class TestAlphaBetaEngine:
    def test_search_result_fields(self) -> None:
        engine = AlphaBetaEngine()
        result = engine.search(initial_board(), SearchLimits(max_depth=2))

        assert result.best_move in legal_moves(initial_board(), Player.WHITE)
        assert result.depth == 2
        assert result.nodes == engine.nodes
        assert result.nodes > 7
        assert result.score == 0

    def test_no_move_result_scores_material(self) -> None:
        board = Board.from_pieces({(2, 1): Piece.BLACK_MAN, (0, 1): Piece.BLACK_KING})
        result = AlphaBetaEngine().search(board, SearchLimits(max_depth=3))
        assert result.best_move.is_null
        assert result.score == -4
        assert result.nodes == 0

    def test_default_limits(self) -> None:
        assert SearchLimits().max_depth == 5

    def test_negative_limits_rejected(self) -> None:
        with pytest.raises(ValueError, match="depth"):
            SearchLimits(max_depth=-1)

    def test_search_does_not_mutate_board(self) -> None:
        board = board_from_diagram(MIDGAME)
        snapshot = board_from_diagram(MIDGAME)
        AlphaBetaEngine().search(board, SearchLimits(max_depth=3))
        assert board == snapshot

    @pytest.mark.slow
    def test_default_depth_from_opening(self) -> None:
        result = AlphaBetaEngine().search(initial_board(), SearchLimits())
        assert result.best_move in legal_moves(initial_board(), Player.WHITE)
