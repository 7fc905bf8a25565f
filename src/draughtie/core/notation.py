"""Text diagrams of a board, row 0 first.

Each of the eight lines holds eight glyphs; spaces are ignored::

    . b . b . b . b
    b . b . b . b .
    . b . b . b . b
    . . . . . . . .
    . . . . . . . .
    w . w . w . w .
    . w . w . w . w
    w . w . w . w .

``w``/``W`` are White men/kings, ``b``/``B`` Black men/kings, ``.`` empty.
"""

from __future__ import annotations

from draughtie.core.board import Board
from draughtie.core.enums import Piece
from draughtie.core.types import BOARD_SIZE, Square


def board_from_diagram(text: str) -> Board:
    """Parse a diagram into a :class:`Board`."""
    lines = [line.replace(" ", "") for line in text.strip().splitlines()]
    lines = [line for line in lines if line]
    if len(lines) != BOARD_SIZE:
        raise ValueError(f"Diagram must contain {BOARD_SIZE} rows, got {len(lines)}")

    placement: dict[Square, Piece] = {}
    for row, line in enumerate(lines):
        if len(line) != BOARD_SIZE:
            raise ValueError(f"Invalid diagram row width: {line!r}")
        for col, ch in enumerate(line):
            piece = Piece.from_char(ch)
            if piece != Piece.EMPTY:
                placement[(row, col)] = piece
    return Board.from_pieces(placement)


def board_to_diagram(board: Board) -> str:
    """Serialize *board* in the format read by :func:`board_from_diagram`."""
    return "\n".join(
        " ".join(board[(row, col)].symbol for col in range(BOARD_SIZE))
        for row in range(BOARD_SIZE)
    )
