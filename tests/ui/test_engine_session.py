"""Regression tests for EngineSession wiring."""

from __future__ import annotations

import weakref
from collections.abc import Callable
from types import SimpleNamespace

from draughtie.core.board import initial_board
from draughtie.core.enums import Piece, Player
from draughtie.core.move import NO_MOVE, Move
from draughtie.game.interfaces import GamePhase
from draughtie.game.session import GameSession
from draughtie.ui.engine_session import EngineSession
from draughtie.ui.i18n import t


class _StubEngineRequest:
    def __init__(self) -> None:
        self.emitted: list[tuple[object, int]] = []

    def connect(self, _slot: Callable[..., object]) -> object:
        return object()

    def emit(self, board_obj: object, request_id: int) -> object:
        self.emitted.append((board_obj, request_id))
        return object()


class _StubGame:
    def __init__(self) -> None:
        self.phase = GamePhase.THINKING
        self.board = initial_board()
        self.applied: list[Move] = []

    def apply_engine_move(self, move: Move) -> bool:
        self.applied.append(move)
        return True


def _make_session(
    game: object | None = None,
    *,
    status: list[str] | None = None,
    sync_calls: list[bool] | None = None,
    engine_request: _StubEngineRequest | None = None,
) -> EngineSession:
    status = [] if status is None else status
    sync_calls = [] if sync_calls is None else sync_calls
    return EngineSession(
        game=game if game is not None else GameSession(),  # type: ignore[arg-type]
        engine_request=engine_request or _StubEngineRequest(),
        set_status=status.append,
        sync_board=lambda: sync_calls.append(True),
        max_depth=1,
    )


def _arm(session: EngineSession, game: object, request_id: int = 3) -> None:
    session._engine_request_id = request_id
    session._pending_engine_request = request_id
    session._pending_engine_board = game.board  # type: ignore[attr-defined]


class TestLifecycle:
    def test_shutdown_before_setup_is_noop(self) -> None:
        session = _make_session()
        session.shutdown()
        assert session._is_started is False

    def test_setup_twice_keeps_started_state(self) -> None:
        session = _make_session()
        session.setup()
        session.setup()
        assert session._is_started is True
        session.shutdown()
        assert session._is_started is False

    def test_setup_connects_slots_without_weakref_error(self) -> None:
        session = _make_session()
        assert weakref.ref(session)() is session

        session.setup()
        session.shutdown()

    def test_request_ignored_before_setup(self) -> None:
        session = _make_session()
        session.request_ai_move(initial_board())
        assert not session.is_busy

    def test_request_is_dispatched_with_fresh_id(self) -> None:
        request = _StubEngineRequest()
        session = _make_session(engine_request=request)
        session.setup()

        board = initial_board()
        session.request_ai_move(board)
        assert session.is_busy
        assert session._pending_engine_request == 1

        session._emit_pending_request()
        assert request.emitted == [(board, 1)]

        session.request_ai_move(board)
        assert session._pending_engine_request == 2
        session.shutdown()
        assert not session.is_busy

    def test_set_depth_before_setup_updates_worker(self) -> None:
        session = _make_session()
        session.set_depth(3)
        assert session._engine_worker.limits.max_depth == 3


class TestBestMove:
    def test_best_move_is_applied_after_delay(self) -> None:
        game = _StubGame()
        sync_calls: list[bool] = []
        session = _make_session(game, sync_calls=sync_calls)
        _arm(session, game)

        move = Move.step((5, 0), (4, 1))
        session._on_engine_best_move(3, move, 0, 42)

        assert session._pending_move == move
        assert session._pending_engine_request is None
        assert game.applied == []

        session._move_apply_timer.stop()
        session._apply_delayed_move()

        assert game.applied == [move]
        assert sync_calls == [True]
        assert not session.is_busy

    def test_stale_request_id_is_ignored(self) -> None:
        game = _StubGame()
        session = _make_session(game)
        _arm(session, game, request_id=5)

        session._on_engine_best_move(4, Move.step((5, 0), (4, 1)), 0, 1)

        assert session._pending_move is None
        assert session._pending_engine_request == 5

    def test_result_for_other_board_is_ignored(self) -> None:
        game = _StubGame()
        session = _make_session(game)
        _arm(session, game)
        game.board = game.board.replace({(5, 0): Piece.EMPTY, (4, 1): Piece.WHITE_MAN})

        session._on_engine_best_move(3, Move.step((5, 2), (4, 3)), 0, 1)

        assert session._pending_move is None

    def test_result_outside_thinking_phase_is_ignored(self) -> None:
        game = _StubGame()
        game.phase = GamePhase.AWAITING_MOVE
        session = _make_session(game)
        _arm(session, game)

        session._on_engine_best_move(3, Move.step((5, 0), (4, 1)), 0, 1)

        assert session._pending_move is None

    def test_real_game_advances_to_human_turn(self) -> None:
        game = GameSession()
        game.new_game()
        session = _make_session(game)
        _arm(session, game)

        session._on_engine_best_move(3, Move.step((5, 0), (4, 1)), 0, 7)
        session._move_apply_timer.stop()
        session._apply_delayed_move()

        assert game.side_to_move == Player.BLACK
        assert game.phase == GamePhase.AWAITING_MOVE


class TestNoMoveAndErrors:
    def test_no_move_reports_and_forwards_sentinel(self) -> None:
        game = _StubGame()
        status: list[str] = []
        sync_calls: list[bool] = []
        session = _make_session(game, status=status, sync_calls=sync_calls)
        _arm(session, game)

        session._on_engine_no_move(3)

        assert status == [t().status_ai_no_moves]
        assert game.applied == [NO_MOVE]
        assert sync_calls == [True]

    def test_engine_error_retries_once(self) -> None:
        game = _StubGame()
        status: list[str] = []
        session = _make_session(game, status=status)
        _arm(session, game)
        session._remaining_failure_retries = 1

        session._on_engine_error(3, "boom")

        assert session._pending_engine_request == 4
        assert session._remaining_failure_retries == 0
        assert status == []

        session.discard_pending()

    def test_engine_error_reported_after_retry_budget_exhausted(self) -> None:
        game = _StubGame()
        status: list[str] = []
        sync_calls: list[bool] = []
        session = _make_session(game, status=status, sync_calls=sync_calls)
        _arm(session, game)
        session._remaining_failure_retries = 0

        session._on_engine_error(3, "boom")

        assert session._pending_engine_request is None
        assert status == [t().status_engine_error.format(msg="boom")]
        assert sync_calls == [True]
        assert game.applied == []

    def test_error_outside_thinking_only_clears_request(self) -> None:
        game = SimpleNamespace(phase=GamePhase.GAME_OVER, board=initial_board())
        status: list[str] = []
        session = _make_session(game, status=status)
        _arm(session, game)

        session._on_engine_error(3, "boom")

        assert session._pending_engine_request is None
        assert status == []
