"""Core domain layer — pure draughts logic with zero external dependencies.

Quick start::

    from draughtie.core import Player, apply_move, initial_board, legal_moves

    board = initial_board()
    for move in legal_moves(board, Player.WHITE):
        print(move, apply_move(board, move), sep="\\n")
"""

from draughtie.core.apply import apply_move
from draughtie.core.board import Board, initial_board
from draughtie.core.enums import GameResult, Piece, Player
from draughtie.core.legality import can_step, captured_square, is_legal
from draughtie.core.move import NO_MOVE, Move
from draughtie.core.move_generator import (
    MoveGenerator,
    continuation_captures,
    legal_moves,
)
from draughtie.core.notation import board_from_diagram, board_to_diagram
from draughtie.core.rules import Rules
from draughtie.core.types import (
    DARK_SQUARES,
    Square,
    is_valid_square,
    square_name,
)

__all__ = [
    # Enums
    "GameResult",
    "Piece",
    "Player",
    # Types / helpers
    "DARK_SQUARES",
    "Square",
    "is_valid_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "NO_MOVE",
    "Rules",
    # Operations
    "apply_move",
    "can_step",
    "captured_square",
    "continuation_captures",
    "initial_board",
    "is_legal",
    "legal_moves",
    # Notation
    "board_from_diagram",
    "board_to_diagram",
]
