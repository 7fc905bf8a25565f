"""Legal move generation with the mandatory-capture filter."""

from __future__ import annotations

import logging

from draughtie.core.board import Board
from draughtie.core.enums import Player
from draughtie.core.legality import can_step, is_legal
from draughtie.core.move import Move
from draughtie.core.types import DIAGONALS, Square

_LOGGER = logging.getLogger(__name__)


class MoveGenerator:
    """Generates legal moves for a given :class:`Board`.

    Iteration order is fixed: squares row-major, then the four diagonals
    ``(-1,-1), (-1,1), (1,-1), (1,1)``; within a diagonal the step is tried
    before the jump. The search relies on this order for tie-breaking.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, player: Player) -> list[Move]:
        """Captures only if any exist, otherwise quiet moves."""
        steps, jumps = self._generate(player)
        if jumps:
            _LOGGER.debug("Generated %d capture moves for %s", len(jumps), player)
            return jumps
        _LOGGER.debug("Generated %d moves for %s", len(steps), player)
        return steps

    def generate_captures(self, player: Player) -> list[Move]:
        return self._generate(player)[1]

    # -- Internals ----------------------------------------------------------

    def _generate(self, player: Player) -> tuple[list[Move], list[Move]]:
        board = self._board
        steps: list[Move] = []
        jumps: list[Move] = []

        for (row, col) in board.pieces(player):
            piece = board[(row, col)]
            for row_dir, col_dir in DIAGONALS:
                step = Move.step((row, col), (row + row_dir, col + col_dir))
                if can_step(piece, row_dir) and is_legal(board, step, player):
                    steps.append(step)

                jump = Move.jump((row, col), (row + 2 * row_dir, col + 2 * col_dir))
                if is_legal(board, jump, player):
                    jumps.append(jump)

        return steps, jumps


def legal_moves(board: Board, player: Player) -> list[Move]:
    """All legal moves for *player*; empty means *player* cannot move."""
    return MoveGenerator(board).generate_legal_moves(player)


def continuation_captures(board: Board, square: Square, player: Player) -> list[Move]:
    """Captures *player* can make from *square*, i.e. a multi-jump follow-up."""
    captures = MoveGenerator(board).generate_captures(player)
    return [m for m in captures if m.start == square]
