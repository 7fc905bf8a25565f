"""GameSession — the explicit state of one human-vs-engine game.

The session owns everything the presentation layer needs between clicks:
the current board, side to move, the selected square and any multi-jump in
progress. It calls into the stateless core for every decision and notifies
listeners through simple callbacks, so the UI and tests can subscribe.

White is always the engine and Black the human.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from draughtie.core.apply import apply_move
from draughtie.core.board import Board, initial_board
from draughtie.core.enums import GameResult, Player
from draughtie.core.legality import is_legal
from draughtie.core.move import Move
from draughtie.core.move_generator import continuation_captures, legal_moves
from draughtie.core.rules import Rules
from draughtie.core.types import Square, is_valid_square
from draughtie.game.interfaces import ClickOutcome, GamePhase

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

BoardCallback = Callable[[Board], None]
PhaseCallback = Callable[[GamePhase], None]
GameOverCallback = Callable[[GameResult], None]
EngineRequestCallback = Callable[[Board], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_board_changed: list[BoardCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_engine_request: list[EngineRequestCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Turn sequencing, human click handling and game-end detection."""

    __slots__ = (
        "_board",
        "_side_to_move",
        "_selected",
        "_jumping_from",
        "_phase",
        "_result",
        "events",
    )

    def __init__(self) -> None:
        self._board = initial_board()
        self._side_to_move = Player.NONE
        self._selected: Square | None = None
        self._jumping_from: Square | None = None
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def side_to_move(self) -> Player:
        """Side about to play; :attr:`Player.NONE` once the game is over."""
        return self._side_to_move

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def in_multi_jump(self) -> bool:
        return self._jumping_from is not None

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self, *, ai_starts: bool = True, board: Board | None = None) -> None:
        """Start over from *board* (the opening position by default)."""
        self._board = board if board is not None else initial_board()
        self._selected = None
        self._jumping_from = None
        self._result = GameResult.IN_PROGRESS
        self._emit_board()
        self._begin_turn(Player.WHITE if ai_starts else Player.BLACK)

    def check_game_end(self) -> bool:
        """Finish the game if the side to move has lost. Returns True if over."""
        if self.is_game_over:
            return True
        result = Rules.game_result(self._board, self._side_to_move)
        if result == GameResult.IN_PROGRESS:
            return False
        self._finish(result)
        return True

    def reachable_squares(self, square: Square) -> list[Square]:
        """Destinations the side to move can reach from *square* this turn."""
        if self._side_to_move == Player.NONE:
            return []
        return [m.end for m in self._candidate_moves() if m.start == square]

    # ── Human side (Black) ───────────────────────────────────────────────

    def click(self, row: int, col: int) -> ClickOutcome:
        """Handle a click on ``(row, col)`` using the select-then-target protocol."""
        if self._phase != GamePhase.AWAITING_MOVE or self._side_to_move != Player.BLACK:
            return ClickOutcome.IGNORED
        if not is_valid_square(row, col):
            return ClickOutcome.IGNORED

        if self._selected is None:
            if self._board[(row, col)].belongs_to(Player.BLACK):
                self._selected = (row, col)
                _LOGGER.debug("Selected square %s", self._selected)
                return ClickOutcome.SELECTED
            return ClickOutcome.IGNORED

        move = self._human_move(self._selected, (row, col))
        if not self._human_move_allowed(move):
            _LOGGER.debug("Rejected human move %s", move)
            if self._jumping_from is None:
                self._selected = None
            return ClickOutcome.ILLEGAL

        _LOGGER.debug("Human move %s", move)
        if self._commit(move, Player.BLACK):
            self._selected = move.end
            return ClickOutcome.MULTI_JUMP
        self._selected = None
        return ClickOutcome.MOVED

    # ── Engine side (White) ──────────────────────────────────────────────

    def apply_engine_move(self, move: Move) -> bool:
        """Commit the engine's move. Returns False if it was not accepted."""
        if self._phase != GamePhase.THINKING:
            return False
        if move.is_null:
            _LOGGER.debug("Engine found no legal move")
            self.check_game_end()
            return False
        if move not in legal_moves(self._board, Player.WHITE):
            _LOGGER.warning("Engine proposed illegal move %s", move)
            return False

        _LOGGER.debug("Engine move %s", move)
        if self._commit(move, Player.WHITE):
            # The engine keeps the turn and searches again.
            self._emit_phase(GamePhase.THINKING)
            self._emit_engine_request()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _candidate_moves(self) -> list[Move]:
        moves = legal_moves(self._board, self._side_to_move)
        if self._jumping_from is not None:
            moves = [m for m in moves if m.is_capture and m.start == self._jumping_from]
        return moves

    def _human_move_allowed(self, move: Move) -> bool:
        if not is_legal(self._board, move, Player.BLACK):
            return False
        # Mid multi-jump only the jumping piece may move, and only by capturing.
        if self._jumping_from is not None:
            return move in self._candidate_moves()
        return True

    @staticmethod
    def _human_move(start: Square, end: Square) -> Move:
        if abs(end[0] - start[0]) == 2:
            return Move.jump(start, end)
        return Move.step(start, end)

    def _commit(self, move: Move, player: Player) -> bool:
        """Apply *move*; True if *player* must continue a multi-jump."""
        self._board = apply_move(self._board, move)
        self._emit_board()

        if move.is_capture and continuation_captures(self._board, move.end, player):
            self._jumping_from = move.end
            _LOGGER.debug("Multi-jump available for %s from %s", player, move.end)
            return True

        self._jumping_from = None
        self._begin_turn(player.opponent)
        return False

    def _begin_turn(self, player: Player) -> None:
        self._side_to_move = player
        self._phase = GamePhase.NOT_STARTED
        if self.check_game_end():
            return

        if player == Player.WHITE:
            self._emit_phase(GamePhase.THINKING)
            self._emit_engine_request()
        else:
            self._emit_phase(GamePhase.AWAITING_MOVE)

    def _finish(self, result: GameResult) -> None:
        _LOGGER.info("Game over: %s", result.name)
        self._result = result
        self._side_to_move = Player.NONE
        self._selected = None
        self._jumping_from = None
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_board(self) -> None:
        for cb in self.events.on_board_changed:
            cb(self._board)

    def _emit_phase(self, phase: GamePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_engine_request(self) -> None:
        for cb in self.events.on_engine_request:
            cb(self._board)
