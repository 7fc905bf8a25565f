"""Draughts engine package: evaluation, alpha-beta search and Qt worker bridge."""

from draughtie.engine.alphabeta import (
    INF_SCORE,
    AlphaBetaEngine,
    alpha_beta,
    find_best_move,
    minimax,
)
from draughtie.engine.evaluate import PIECE_VALUES, evaluate
from draughtie.engine.qt_bridge import EngineWorker
from draughtie.engine.search import IEngine, SearchLimits, SearchResult

__all__ = [
    "INF_SCORE",
    "PIECE_VALUES",
    "AlphaBetaEngine",
    "EngineWorker",
    "IEngine",
    "SearchLimits",
    "SearchResult",
    "alpha_beta",
    "evaluate",
    "find_best_move",
    "minimax",
]
