"""Pure-Python draughts search (minimax + alpha-beta).

White is always the maximizing side and Black the minimizing side; scores
are White-positive material counts from :func:`evaluate`.
"""

from __future__ import annotations

import logging

from draughtie.core.apply import apply_move
from draughtie.core.board import Board
from draughtie.core.enums import Player
from draughtie.core.move import NO_MOVE, Move
from draughtie.core.move_generator import legal_moves
from draughtie.engine.evaluate import evaluate
from draughtie.engine.search import IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

INF_SCORE = 1_000_000


def _side(maximizing: bool) -> Player:
    return Player.WHITE if maximizing else Player.BLACK


class AlphaBetaEngine(IEngine):
    """Fixed-depth alpha-beta searcher without move ordering or caching.

    Moves are tried in generator order. The engine keeps no state between
    searches apart from the node counter of the last one.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes = 0

    @property
    def nodes(self) -> int:
        """Nodes visited by the most recent search."""
        return self._nodes

    def search(self, board: Board, limits: SearchLimits) -> SearchResult:
        best_move, score = self._search_root(board, limits.max_depth)
        return SearchResult(best_move, score, limits.max_depth, self._nodes)

    def find_best_move(self, board: Board, max_depth: int) -> Move:
        """White's best move, or :data:`NO_MOVE` if White cannot move."""
        return self._search_root(board, max_depth)[0]

    def alpha_beta(
        self,
        board: Board,
        depth: int,
        max_depth: int,
        maximizing: bool,
        alpha: int,
        beta: int,
    ) -> int:
        self._nodes += 1
        moves = legal_moves(board, _side(maximizing))

        # No moves is scored by material too, same as the horizon.
        if depth >= max_depth or not moves:
            return evaluate(board)

        if maximizing:
            best = -INF_SCORE
            for move in moves:
                value = self.alpha_beta(
                    apply_move(board, move), depth + 1, max_depth, False, alpha, beta
                )
                best = max(best, value)
                alpha = max(alpha, best)
                if beta <= alpha:
                    break
            return best

        best = INF_SCORE
        for move in moves:
            value = self.alpha_beta(
                apply_move(board, move), depth + 1, max_depth, True, alpha, beta
            )
            best = min(best, value)
            beta = min(beta, best)
            if beta <= alpha:
                break
        return best

    def _search_root(self, board: Board, max_depth: int) -> tuple[Move, int]:
        # A negative horizon behaves like depth 0.
        max_depth = max(max_depth, 0)
        self._nodes = 0
        best_move = NO_MOVE
        best_score = -INF_SCORE
        alpha = -INF_SCORE
        beta = INF_SCORE

        for move in legal_moves(board, Player.WHITE):
            score = self.alpha_beta(
                apply_move(board, move), 0, max_depth, False, alpha, beta
            )
            if score > best_score:
                best_score = score
                best_move = move
            alpha = max(alpha, score)

        if best_move.is_null:
            _LOGGER.debug("No legal move for White")
            return best_move, evaluate(board)

        _LOGGER.debug(
            "Best move %s (score %d, depth %d, %d nodes)",
            best_move,
            best_score,
            max_depth,
            self._nodes,
        )
        return best_move, best_score


def alpha_beta(
    board: Board,
    depth: int,
    max_depth: int,
    maximizing: bool,
    alpha: int = -INF_SCORE,
    beta: int = INF_SCORE,
) -> int:
    """Minimax value of *board* with alpha-beta pruning."""
    return AlphaBetaEngine().alpha_beta(board, depth, max_depth, maximizing, alpha, beta)


def find_best_move(board: Board, max_depth: int) -> Move:
    """The move the engine plays for White on *board*."""
    return AlphaBetaEngine().find_best_move(board, max_depth)


def minimax(board: Board, depth: int, max_depth: int, maximizing: bool) -> int:
    """Plain minimax without pruning; same value as :func:`alpha_beta`."""
    moves = legal_moves(board, _side(maximizing))
    if depth >= max_depth or not moves:
        return evaluate(board)
    values = [
        minimax(apply_move(board, m), depth + 1, max_depth, not maximizing)
        for m in moves
    ]
    return max(values) if maximizing else min(values)
