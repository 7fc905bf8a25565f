"""Engine search session orchestration for the main UI thread."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from PyQt6.QtCore import QObject, QThread, QTimer, pyqtSignal

from draughtie.core.board import Board
from draughtie.core.move import NO_MOVE, Move
from draughtie.engine.qt_bridge import EngineWorker
from draughtie.game.interfaces import GamePhase
from draughtie.game.session import GameSession
from draughtie.ui.i18n import t

_LOGGER = logging.getLogger(__name__)


class EngineRequestSignal(Protocol):
    """Minimal signal interface used by :class:`EngineSession`."""

    def connect(self, slot: Callable[..., object]) -> object: ...

    def emit(self, board_obj: object, request_id: int) -> object: ...


class _EngineCommandBus(QObject):
    """Signal bridge for issuing worker commands with queued delivery."""

    set_depth_requested = pyqtSignal(int)


class EngineSession:
    """Owns worker-thread search lifecycle and move handoff to the game."""

    _REQUEST_DELAY_MS = 50
    _MOVE_APPLY_DELAY_MS = 200
    _MAX_FAILURE_RETRIES = 1

    __slots__ = (
        "__weakref__",
        "_game",
        "_engine_request",
        "_set_status",
        "_sync_board",
        "_command_bus",
        "_dispatch_timer",
        "_move_apply_timer",
        "_pending_move",
        "_engine_thread",
        "_engine_worker",
        "_engine_request_id",
        "_pending_engine_request",
        "_pending_engine_board",
        "_remaining_failure_retries",
        "_is_shutting_down",
        "_is_started",
    )

    def __init__(
        self,
        *,
        game: GameSession,
        engine_request: EngineRequestSignal,
        set_status: Callable[[str], None],
        sync_board: Callable[[], None],
        parent: QObject | None = None,
        max_depth: int = 5,
    ) -> None:
        self._game = game
        self._engine_request = engine_request
        self._set_status = set_status
        self._sync_board = sync_board

        self._command_bus = _EngineCommandBus(parent)
        self._dispatch_timer = QTimer(parent)
        self._dispatch_timer.setSingleShot(True)
        self._dispatch_timer.timeout.connect(self._emit_pending_request)

        self._move_apply_timer = QTimer(parent)
        self._move_apply_timer.setSingleShot(True)
        self._move_apply_timer.timeout.connect(self._apply_delayed_move)
        self._pending_move: Move | None = None

        self._engine_thread = QThread(parent)
        self._engine_worker = EngineWorker(max_depth=max_depth)
        self._engine_request_id = 0
        self._pending_engine_request: int | None = None
        self._pending_engine_board: Board | None = None
        self._remaining_failure_retries = 0
        self._is_shutting_down = False
        self._is_started = False

    @property
    def is_busy(self) -> bool:
        """Whether a search or a delayed move application is outstanding."""
        return self._pending_engine_request is not None or self._pending_move is not None

    def setup(self) -> None:
        """Start engine worker in a dedicated thread and connect callbacks."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._engine_worker.moveToThread(self._engine_thread)
        self._engine_request.connect(self._engine_worker.request_move)
        self._command_bus.set_depth_requested.connect(self._engine_worker.set_depth)
        self._engine_worker.best_move_ready.connect(self._on_engine_best_move)
        self._engine_worker.search_no_move.connect(self._on_engine_no_move)
        self._engine_worker.search_error.connect(self._on_engine_error)
        self._engine_thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Drop pending work and shut down the worker thread.

        A search already running is not interrupted; this waits for it.
        """
        if not self._is_started:
            return
        self._is_shutting_down = True
        self.discard_pending()
        self._engine_thread.quit()
        self._engine_thread.wait()
        self._is_started = False

    def set_depth(self, max_depth: int) -> None:
        """Update engine depth for subsequent searches."""
        if self._is_started:
            self._command_bus.set_depth_requested.emit(max_depth)
            return
        self._engine_worker.set_depth(max_depth)

    def request_ai_move(self, board: Board) -> None:
        """Queue a best-move search for *board*."""
        if not self._is_started or self._is_shutting_down:
            return
        self._queue_request(board, reset_retry_budget=True)

    def discard_pending(self) -> None:
        """Forget any pending request; a late result will be ignored."""
        self._dispatch_timer.stop()
        self._move_apply_timer.stop()
        self._clear_pending_request()
        self._pending_move = None

    def _on_engine_best_move(
        self,
        request_id: int,
        move_obj: object,
        score: int,
        nodes: int,
    ) -> None:
        if self._is_shutting_down:
            return
        if request_id != self._pending_engine_request:
            return
        if not isinstance(move_obj, Move):
            return
        if self._game.phase != GamePhase.THINKING:
            return
        if self._pending_engine_board != self._game.board:
            return

        _LOGGER.debug("Engine chose %s (score %d, %d nodes)", move_obj, score, nodes)
        self._clear_pending_request()
        self._remaining_failure_retries = 0

        # Let the UI repaint before the move lands.
        self._pending_move = move_obj
        self._move_apply_timer.start(self._MOVE_APPLY_DELAY_MS)

    def _apply_delayed_move(self) -> None:
        """Apply the pending move after the display delay."""
        if self._is_shutting_down or self._pending_move is None:
            return

        move = self._pending_move
        self._pending_move = None
        self._game.apply_engine_move(move)
        self._sync_board()

    def _on_engine_no_move(self, request_id: int) -> None:
        if self._is_shutting_down:
            return
        if request_id != self._pending_engine_request:
            return
        self._clear_pending_request()
        self._set_status(t().status_ai_no_moves)
        self._game.apply_engine_move(NO_MOVE)
        self._sync_board()

    def _on_engine_error(self, request_id: int, message: str) -> None:
        if self._is_shutting_down:
            return
        if request_id != self._pending_engine_request:
            return

        if self._game.phase != GamePhase.THINKING:
            self._clear_pending_request()
            return

        if self._remaining_failure_retries > 0:
            self._remaining_failure_retries -= 1
            self._queue_request(self._game.board, reset_retry_budget=False)
            return

        _LOGGER.error("Engine failed: %s", message)
        self._clear_pending_request()
        self._set_status(t().status_engine_error.format(msg=message))
        self._sync_board()

    def _queue_request(self, board: Board, *, reset_retry_budget: bool) -> None:
        self.discard_pending()
        if self._is_shutting_down:
            return

        self._engine_request_id += 1
        self._pending_engine_request = self._engine_request_id
        self._pending_engine_board = board
        if reset_retry_budget:
            self._remaining_failure_retries = self._MAX_FAILURE_RETRIES
        self._dispatch_timer.start(self._REQUEST_DELAY_MS)

    def _emit_pending_request(self) -> None:
        if self._is_shutting_down:
            return

        request_id = self._pending_engine_request
        board = self._pending_engine_board
        if request_id is None or board is None:
            return
        self._engine_request.emit(board, request_id)

    def _clear_pending_request(self) -> None:
        self._pending_engine_request = None
        self._pending_engine_board = None
