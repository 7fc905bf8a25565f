"""Move application: relocation, capture removal and promotion."""

from __future__ import annotations

from draughtie.core.board import Board
from draughtie.core.enums import Piece
from draughtie.core.move import Move
from draughtie.core.types import Square


def apply_move(board: Board, move: Move) -> Board:
    """Return the board after *move*; *board* itself is not modified.

    *move* must come from the generator or have passed ``is_legal``;
    applying :data:`~draughtie.core.move.NO_MOVE` is undefined.
    """
    moved = board[move.start]
    changes: dict[Square, Piece] = {move.start: Piece.EMPTY}
    for sq in move.captured:
        changes[sq] = Piece.EMPTY

    if moved.is_man and move.end[0] == moved.owner.crowning_row:
        moved = moved.crowned
    changes[move.end] = moved

    return board.replace(changes)
