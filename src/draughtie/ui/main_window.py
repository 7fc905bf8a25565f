"""MainWindow — board grid, status line and game/engine wiring."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent, QFont
from PyQt6.QtWidgets import (
    QGridLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QWidget,
)

from draughtie.core.board import Board
from draughtie.core.enums import GameResult, Piece, Player
from draughtie.core.types import BOARD_SIZE, Square, is_valid_square
from draughtie.game.interfaces import ClickOutcome, GamePhase
from draughtie.game.session import GameSession
from draughtie.ui.engine_session import EngineSession
from draughtie.ui.i18n import set_language, t
from draughtie.ui.settings import AppSettings
from draughtie.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])

ENGINE_DEPTHS: tuple[int, ...] = (1, 2, 3, 4, 5, 6)

_PIECE_TEXT: dict[Piece, str] = {
    Piece.EMPTY: "",
    Piece.WHITE_MAN: "w",
    Piece.WHITE_KING: "W",
    Piece.BLACK_MAN: "b",
    Piece.BLACK_KING: "B",
}


class MainWindow(QMainWindow):
    """Main application window: the human plays Black against the engine."""

    engine_request = pyqtSignal(object, int)

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        set_language(self._settings.language)
        self._theme = BoardTheme.named(self._settings.board_theme)

        self.setWindowTitle(t().window_title)
        size = self._settings.square_size
        self.setFixedSize(size * BOARD_SIZE, size * BOARD_SIZE + 60)

        self._game = GameSession()
        self._engine_session = EngineSession(
            game=self._game,
            engine_request=self.engine_request,
            set_status=self._set_status,
            sync_board=self._sync_board,
            parent=self,
            max_depth=self._settings.engine_depth,
        )
        self._buttons: dict[Square, QPushButton] = {}

        self._setup_ui()
        self._setup_menu()
        self._connect_game_events()
        self._engine_session.setup()

        self._start_new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget(self)
        grid = QGridLayout(central)
        grid.setSpacing(0)
        grid.setContentsMargins(0, 0, 0, 0)
        self.setCentralWidget(central)

        size = self._settings.square_size
        font = QFont("Arial", self._settings.piece_font_size)
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                button = QPushButton("", central)
                button.setFixedSize(size, size)
                button.setFont(font)
                dark = is_valid_square(row, col)
                button.setStyleSheet(self._theme.square_style(dark))
                button.setEnabled(dark)
                button.clicked.connect(
                    lambda _checked=False, r=row, c=col: self._on_square_clicked(r, c)
                )
                grid.addWidget(button, row, col)
                self._buttons[(row, col)] = button

        self._status_label = QLabel(t().status_ai_turn, central)
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_label.setFont(QFont("Arial", 16))
        grid.addWidget(self._status_label, BOARD_SIZE, 0, 1, BOARD_SIZE)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        self._menu_game = menu_bar.addMenu(s.menu_game)
        assert self._menu_game is not None

        self._act_new_game = QAction(s.menu_new_game, self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._start_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        self._menu_engine = menu_bar.addMenu(s.menu_engine)
        assert self._menu_engine is not None

        self._depth_group = QActionGroup(self)
        self._depth_actions: dict[int, QAction] = {}
        for depth in ENGINE_DEPTHS:
            action = QAction(s.menu_depth.format(depth=depth), self)
            action.setCheckable(True)
            action.setChecked(depth == self._settings.engine_depth)
            action.triggered.connect(
                lambda _checked=False, d=depth: self._on_depth_selected(d)
            )
            self._depth_group.addAction(action)
            self._menu_engine.addAction(action)
            self._depth_actions[depth] = action

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_game_events(self) -> None:
        """Subscribe to GameSession callbacks (idempotent)."""
        events = self._game.events
        self._replace_callback(events.on_board_changed, self._on_board_changed)
        self._replace_callback(events.on_phase_changed, self._on_phase_changed)
        self._replace_callback(events.on_game_over, self._on_game_over)
        self._replace_callback(
            events.on_engine_request, self._engine_session.request_ai_move
        )

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def _start_new_game(self) -> None:
        self._engine_session.discard_pending()
        self._game.new_game(ai_starts=self._settings.ai_starts)
        self._sync_board()

    def _on_depth_selected(self, depth: int) -> None:
        """Applies to the next search; a running one keeps its depth."""
        self._settings.engine_depth = depth
        self._engine_session.set_depth(depth)
        _LOGGER.info("Engine search depth: %d", depth)

    def _on_square_clicked(self, row: int, col: int) -> None:
        outcome = self._game.click(row, col)
        if outcome == ClickOutcome.ILLEGAL:
            QMessageBox.warning(self, t().invalid_move_title, t().invalid_move_text)
        elif outcome == ClickOutcome.MULTI_JUMP:
            self._set_status(t().status_human_multi_jump)
        self._sync_board()

    # ── GameSession callbacks ────────────────────────────────────────────

    def _on_board_changed(self, board: Board) -> None:
        self._render_pieces(board)

    def _on_phase_changed(self, phase: GamePhase) -> None:
        s = t()
        if phase == GamePhase.THINKING:
            text = s.status_ai_multi_jump if self._game.in_multi_jump else s.status_ai_thinking
            self._set_status(text)
        elif phase == GamePhase.AWAITING_MOVE:
            self._set_status(s.status_human_turn)

    def _on_game_over(self, result: GameResult) -> None:
        text = self._game_over_text(result, self._game.board)
        _LOGGER.info("%s", text)
        self._set_status(text)
        self._sync_board()
        QMessageBox.information(self, t().game_over_title, text)

    @staticmethod
    def _game_over_text(result: GameResult, board: Board) -> str:
        s = t()
        if result == GameResult.WHITE_WINS:
            if board.has_pieces(Player.BLACK):
                return s.white_wins_no_moves
            return s.white_wins
        if board.has_pieces(Player.WHITE):
            return s.black_wins_no_moves
        return s.black_wins

    # ── Rendering ────────────────────────────────────────────────────────

    def _set_status(self, text: str) -> None:
        self._status_label.setText(text)

    def _render_pieces(self, board: Board) -> None:
        for (row, col), button in self._buttons.items():
            if is_valid_square(row, col):
                button.setText(_PIECE_TEXT[board[(row, col)]])
            else:
                button.setText("")

    def _sync_board(self) -> None:
        """Repaint pieces, highlights and enabled state from the session."""
        game = self._game
        self._render_pieces(game.board)

        selected = game.selected
        targets: set[Square] = set()
        if selected is not None and self._settings.show_reachable:
            targets = set(game.reachable_squares(selected))

        # Board input waits while the engine owns the turn.
        accepting = not game.is_game_over and not self._engine_session.is_busy
        for sq, button in self._buttons.items():
            dark = is_valid_square(*sq)
            button.setStyleSheet(
                self._theme.square_style(
                    dark, selected=sq == selected, target=sq in targets
                )
            )
            button.setEnabled(dark and accepting)

    # ── Window events ────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._engine_session.shutdown()
        super().closeEvent(event)
