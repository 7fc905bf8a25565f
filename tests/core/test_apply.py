"""Tests for move application: relocation, capture removal and promotion."""

from draughtie.core.apply import apply_move
from draughtie.core.board import Board, initial_board
from draughtie.core.enums import Piece, Player
from draughtie.core.move import Move
from draughtie.core.types import is_valid_square
from draughtie.engine.evaluate import evaluate


class TestQuietMove:
    def test_piece_is_relocated(self) -> None:
        board = initial_board()
        after = apply_move(board, Move.step((5, 0), (4, 1)))
        assert after[(5, 0)] == Piece.EMPTY
        assert after[(4, 1)] == Piece.WHITE_MAN

    def test_input_board_is_unchanged(self) -> None:
        board = initial_board()
        apply_move(board, Move.step((5, 0), (4, 1)))
        assert board == initial_board()

    def test_king_moves_backward(self) -> None:
        board = Board.from_pieces({(3, 2): Piece.BLACK_KING})
        after = apply_move(board, Move.step((3, 2), (2, 1)))
        assert after[(2, 1)] == Piece.BLACK_KING


class TestCapture:
    def test_captured_piece_is_removed(self) -> None:
        board = Board.from_pieces({(4, 5): Piece.WHITE_MAN, (3, 4): Piece.BLACK_MAN})
        after = apply_move(board, Move.jump((4, 5), (2, 3)))
        assert after[(4, 5)] == Piece.EMPTY
        assert after[(3, 4)] == Piece.EMPTY
        assert after[(2, 3)] == Piece.WHITE_MAN
        assert not after.has_pieces(Player.BLACK)

    def test_capture_changes_material(self) -> None:
        board = Board.from_pieces(
            {
                (4, 5): Piece.WHITE_MAN,
                (3, 4): Piece.BLACK_KING,
                (0, 1): Piece.BLACK_MAN,
            }
        )
        assert evaluate(board) == -3
        after = apply_move(board, Move.jump((4, 5), (2, 3)))
        assert evaluate(after) == 0

    def test_light_squares_stay_empty(self) -> None:
        board = Board.from_pieces({(4, 5): Piece.WHITE_MAN, (3, 4): Piece.BLACK_MAN})
        after = apply_move(board, Move.jump((4, 5), (2, 3)))
        for row in range(8):
            for col in range(8):
                if not is_valid_square(row, col):
                    assert after[(row, col)] == Piece.EMPTY


class TestPromotion:
    def test_white_man_crowned_on_row_zero(self) -> None:
        board = Board.from_pieces({(1, 2): Piece.WHITE_MAN})
        after = apply_move(board, Move.step((1, 2), (0, 1)))
        assert after[(0, 1)] == Piece.WHITE_KING

    def test_black_man_crowned_on_row_seven(self) -> None:
        board = Board.from_pieces({(6, 1): Piece.BLACK_MAN})
        after = apply_move(board, Move.step((6, 1), (7, 2)))
        assert after[(7, 2)] == Piece.BLACK_KING

    def test_crowned_by_capture(self) -> None:
        board = Board.from_pieces({(5, 2): Piece.BLACK_MAN, (6, 3): Piece.WHITE_MAN})
        after = apply_move(board, Move.jump((5, 2), (7, 4)))
        assert after[(7, 4)] == Piece.BLACK_KING
        assert after[(6, 3)] == Piece.EMPTY

    def test_own_back_row_does_not_crown(self) -> None:
        # Backward capture into the man's own first row.
        board = Board.from_pieces({(5, 2): Piece.WHITE_MAN, (6, 3): Piece.BLACK_MAN})
        after = apply_move(board, Move.jump((5, 2), (7, 4)))
        assert after[(7, 4)] == Piece.WHITE_MAN

    def test_king_stays_king(self) -> None:
        board = Board.from_pieces({(1, 2): Piece.WHITE_KING})
        after = apply_move(board, Move.step((1, 2), (0, 1)))
        assert after[(0, 1)] == Piece.WHITE_KING
        back = apply_move(after, Move.step((0, 1), (1, 0)))
        assert back[(1, 0)] == Piece.WHITE_KING
