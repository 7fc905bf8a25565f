"""Static material evaluation."""

from __future__ import annotations

from draughtie.core.board import Board
from draughtie.core.enums import Piece

# Positive favours White (the engine), negative favours Black.
PIECE_VALUES: dict[Piece, int] = {
    Piece.EMPTY: 0,
    Piece.WHITE_MAN: 1,
    Piece.WHITE_KING: 3,
    Piece.BLACK_MAN: -1,
    Piece.BLACK_KING: -3,
}


def evaluate(board: Board) -> int:
    """Material balance of *board*; no mobility or positional terms."""
    return sum(PIECE_VALUES[piece] for _, piece in board.occupied())
