"""Board - immutable piece placement on an 8x8 draughts board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from draughtie.core.enums import Piece, Player
from draughtie.core.types import (
    BOARD_SIZE,
    DARK_SQUARES,
    Square,
    is_valid_square,
    square_index,
)

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def _require_on_board(row: int, col: int) -> None:
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise IndexError(f"Square off the board: ({row}, {col})")


class Board:
    """Immutable 64-cell board value.

    Every transformation returns a new :class:`Board`; a board can be shared
    freely between a game and any number of hypothetical search branches.
    Light squares are always :attr:`Piece.EMPTY`.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Piece] | None = None) -> None:
        if cells is None:
            self._cells: tuple[Piece, ...] = (Piece.EMPTY,) * _CELL_COUNT
            return
        cells = tuple(Piece(c) for c in cells)
        if len(cells) != _CELL_COUNT:
            raise ValueError(f"Board needs {_CELL_COUNT} cells, got {len(cells)}")
        for idx, piece in enumerate(cells):
            row, col = divmod(idx, BOARD_SIZE)
            if piece != Piece.EMPTY and not is_valid_square(row, col):
                raise ValueError(f"Piece on light square ({row}, {col})")
        self._cells = cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        row, col = sq
        _require_on_board(row, col)
        return self._cells[square_index(row, col)]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] == Piece.EMPTY

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` for every occupied square, row-major."""
        for sq in DARK_SQUARES:
            piece = self[sq]
            if piece != Piece.EMPTY:
                yield sq, piece

    def pieces(self, player: Player) -> list[Square]:
        """Squares occupied by *player*'s men and kings, row-major."""
        return [sq for sq, piece in self.occupied() if piece.belongs_to(player)]

    def count(self, piece: Piece) -> int:
        return self._cells.count(piece)

    def has_pieces(self, player: Player) -> bool:
        return any(piece.belongs_to(player) for _, piece in self.occupied())

    # -- Derivation ---------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece]) -> Board:
        """New board with *changes* applied; ``self`` is left untouched."""
        cells = list(self._cells)
        for (row, col), piece in changes.items():
            _require_on_board(row, col)
            if piece != Piece.EMPTY and not is_valid_square(row, col):
                raise ValueError(f"Piece on light square ({row}, {col})")
            cells[square_index(row, col)] = piece
        b = Board.__new__(Board)
        b._cells = tuple(cells)
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_pieces(cls, placement: Mapping[Square, Piece]) -> Board:
        """Board holding exactly *placement*, everything else empty."""
        return cls().replace(placement)

    @classmethod
    def initial(cls) -> Board:
        """Standard opening: 12 men per side on the three back rows."""
        placement: dict[Square, Piece] = {}
        for row, col in DARK_SQUARES:
            if row < 3:
                placement[(row, col)] = Piece.BLACK_MAN
            elif row >= 5:
                placement[(row, col)] = Piece.WHITE_MAN
        return cls.from_pieces(placement)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            glyphs = [
                self[(row, col)].symbol if is_valid_square(row, col) else " "
                for col in range(BOARD_SIZE)
            ]
            rows.append(f"{row} {' '.join(glyphs)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)


def initial_board() -> Board:
    """Starting position for a new game."""
    return Board.initial()
