"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from draughtie.core.board import Board
from draughtie.engine.alphabeta import AlphaBetaEngine
from draughtie.engine.search import SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    The search itself cannot be interrupted; callers drop stale results by
    request id.
    """

    best_move_ready = pyqtSignal(int, object, int, int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_limits")

    def __init__(self, *, max_depth: int = 5) -> None:
        super().__init__()
        self._engine = AlphaBetaEngine()
        self._limits = SearchLimits(max_depth=max_depth)

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @pyqtSlot(object, int)
    def request_move(self, board_obj: object, request_id: int) -> None:
        """Search for White's best move on *board_obj* and emit the result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        try:
            result = self._engine.search(board_obj, self._limits)
        except Exception as exc:
            _LOGGER.exception("Engine search failed")
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move.is_null:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.nodes,
        )

    @pyqtSlot(int)
    def set_depth(self, max_depth: int) -> None:
        """Update search depth (takes effect on the next search)."""
        self._limits = SearchLimits(max_depth=max_depth)
