"""Square type alias and coordinate helpers.

Board layout: row 0 is Black's home row (top of the screen), row 7 is
White's. Only dark squares, where ``(row + col)`` is odd, are playable::

    row 0:  . x . x . x . x
    row 1:  x . x . x . x .
    ...
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col)

BOARD_SIZE = 8

DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def is_valid_square(row: int, col: int) -> bool:
    """Whether ``(row, col)`` is on the board and a dark (playable) square."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE and (row + col) % 2 != 0


def square_index(row: int, col: int) -> int:
    """Flat storage index 0–63 for a board coordinate."""
    return row * BOARD_SIZE + col


def square_name(sq: Square) -> str:
    """Human-readable ``"row,col"`` form, e.g. ``(5, 0)`` → ``'5,0'``."""
    return f"{sq[0]},{sq[1]}"


DARK_SQUARES: tuple[Square, ...] = tuple(
    (row, col)
    for row in range(BOARD_SIZE)
    for col in range(BOARD_SIZE)
    if is_valid_square(row, col)
)
