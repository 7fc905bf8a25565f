"""Internationalisation strings for the Draughtie UI.

Usage::

    from draughtie.ui.i18n import t, set_language

    set_language("Russian")
    print(t().status_human_turn)   # "Ход чёрных (человек)"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_quit: str
    menu_engine: str
    menu_depth: str  # e.g. "Depth {depth}"

    status_ai_turn: str
    status_ai_thinking: str
    status_ai_multi_jump: str
    status_ai_no_moves: str
    status_human_turn: str
    status_human_multi_jump: str
    status_engine_error: str  # e.g. "Engine error: {msg}"

    # Invalid move dialog
    invalid_move_title: str
    invalid_move_text: str

    # Game-over reasons
    game_over_title: str
    white_wins: str
    black_wins: str
    white_wins_no_moves: str
    black_wins_no_moves: str


_EN = Strings(
    window_title="Simplified Checkers with Alpha-Beta",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_quit="&Quit",
    menu_engine="&Engine",
    menu_depth="Depth {depth}",
    status_ai_turn="White's turn (AI)",
    status_ai_thinking="White's turn (AI) - Thinking...",
    status_ai_multi_jump="White's turn (AI) - Multi-jump!",
    status_ai_no_moves="AI has no legal moves.",
    status_human_turn="Black's turn (Human)",
    status_human_multi_jump="Black's turn (Human) - Multi-jump!",
    status_engine_error="Engine error: {msg}",
    invalid_move_title="Invalid Move",
    invalid_move_text="That is not a valid move.",
    game_over_title="Game Over",
    white_wins="White Wins!",
    black_wins="Black Wins!",
    white_wins_no_moves="White Wins (Black has no moves)!",
    black_wins_no_moves="Black Wins (White has no moves)!",
)

_RU = Strings(
    window_title="Упрощённые шашки с альфа-бета",
    menu_game="&Игра",
    menu_new_game="&Новая игра",
    menu_quit="&Выход",
    menu_engine="&Движок",
    menu_depth="Глубина {depth}",
    status_ai_turn="Ход белых (ИИ)",
    status_ai_thinking="Ход белых (ИИ) - думает...",
    status_ai_multi_jump="Ход белых (ИИ) - серия взятий!",
    status_ai_no_moves="У ИИ нет ходов.",
    status_human_turn="Ход чёрных (человек)",
    status_human_multi_jump="Ход чёрных (человек) - серия взятий!",
    status_engine_error="Ошибка движка: {msg}",
    invalid_move_title="Недопустимый ход",
    invalid_move_text="Так ходить нельзя.",
    game_over_title="Игра окончена",
    white_wins="Белые победили!",
    black_wins="Чёрные победили!",
    white_wins_no_moves="Белые победили (у чёрных нет ходов)!",
    black_wins_no_moves="Чёрные победили (у белых нет ходов)!",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
