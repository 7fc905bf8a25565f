"""High-level draughts rules: game-end detection."""

from __future__ import annotations

from draughtie.core.board import Board
from draughtie.core.enums import GameResult, Player
from draughtie.core.move_generator import legal_moves


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def has_legal_move(board: Board, player: Player) -> bool:
        return bool(legal_moves(board, player))

    @staticmethod
    def game_result(board: Board, side_to_move: Player) -> GameResult:
        """Determine the result with *side_to_move* about to play.

        A side without pieces has lost (White is checked first); otherwise
        a side to move without any legal move has lost.
        """
        if not board.has_pieces(Player.WHITE):
            return GameResult.BLACK_WINS
        if not board.has_pieces(Player.BLACK):
            return GameResult.WHITE_WINS
        if side_to_move == Player.NONE:
            return GameResult.IN_PROGRESS
        if not Rules.has_legal_move(board, side_to_move):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Player.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.IN_PROGRESS
