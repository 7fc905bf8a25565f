"""Single-move legality under the simplified draughts rule set."""

from __future__ import annotations

from draughtie.core.board import Board
from draughtie.core.enums import Piece, Player
from draughtie.core.move import Move
from draughtie.core.types import Square, is_valid_square


def can_step(piece: Piece, row_dir: int) -> bool:
    """Whether *piece* may make a quiet move in row direction *row_dir*.

    Kings step in any direction; men only toward the opponent's home row.
    """
    if piece.is_king:
        return True
    if piece.is_man:
        return row_dir == piece.owner.forward
    return False


def captured_square(move: Move) -> Square:
    """Midpoint jumped over by a two-step move."""
    return (
        move.start[0] + (move.end[0] - move.start[0]) // 2,
        move.start[1] + (move.end[1] - move.start[1]) // 2,
    )


def is_legal(board: Board, move: Move, player: Player) -> bool:
    """Check a single proposed move for *player* (simplified rule set).

    Mandatory capture is not enforced here; that is the generator's job.
    """
    if not is_valid_square(*move.start) or not is_valid_square(*move.end):
        return False

    piece = board[move.start]
    if not piece.belongs_to(player):
        return False
    if not board.is_empty(move.end):
        return False

    row_diff = move.end[0] - move.start[0]
    col_diff = move.end[1] - move.start[1]

    if abs(row_diff) == 1 and abs(col_diff) == 1:
        return can_step(piece, row_diff)

    # Captures are allowed in every direction, men included.
    if abs(row_diff) == 2 and abs(col_diff) == 2:
        mid = captured_square(move)
        if not is_valid_square(*mid):
            return False
        return board[mid].belongs_to(player.opponent)

    return False
