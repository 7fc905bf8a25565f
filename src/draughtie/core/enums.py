"""Core enumerations for the draughts domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side identity. ``NONE`` only marks a finished game in the session layer."""

    WHITE = 0
    BLACK = 1
    NONE = 2

    @property
    def opponent(self) -> Player:
        if self == Player.NONE:
            return Player.NONE
        return Player(1 - self.value)

    @property
    def forward(self) -> int:
        """Row direction a man of this side advances in."""
        return -1 if self == Player.WHITE else 1

    @property
    def crowning_row(self) -> int:
        """Opponent's home row, where this side's men are promoted."""
        return 0 if self == Player.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class Piece(IntEnum):
    """Contents of a single board cell."""

    EMPTY = 0
    WHITE_MAN = 1
    WHITE_KING = 2
    BLACK_MAN = 3
    BLACK_KING = 4

    @property
    def owner(self) -> Player:
        if self in (Piece.WHITE_MAN, Piece.WHITE_KING):
            return Player.WHITE
        if self in (Piece.BLACK_MAN, Piece.BLACK_KING):
            return Player.BLACK
        return Player.NONE

    @property
    def is_king(self) -> bool:
        return self in (Piece.WHITE_KING, Piece.BLACK_KING)

    @property
    def is_man(self) -> bool:
        return self in (Piece.WHITE_MAN, Piece.BLACK_MAN)

    @property
    def crowned(self) -> Piece:
        """King of the same colour; kings and empty cells map to themselves."""
        if self == Piece.WHITE_MAN:
            return Piece.WHITE_KING
        if self == Piece.BLACK_MAN:
            return Piece.BLACK_KING
        return self

    def belongs_to(self, player: Player) -> bool:
        return player != Player.NONE and self.owner == player

    @property
    def symbol(self) -> str:
        """Single-character glyph, matching the diagram notation."""
        return _SYMBOLS[self]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Parse a diagram glyph, e.g. ``'w'`` → white man."""
        for piece, symbol in _SYMBOLS.items():
            if symbol == char:
                return piece
        raise ValueError(f"Invalid piece character: {char!r}")


_SYMBOLS: dict[Piece, str] = {
    Piece.EMPTY: ".",
    Piece.WHITE_MAN: "w",
    Piece.WHITE_KING: "W",
    Piece.BLACK_MAN: "b",
    Piece.BLACK_KING: "B",
}


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
