"""Visual theme constants and QSS styles for Draughtie."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the draughts board."""

    light_square: QColor
    dark_square: QColor
    piece_text: QColor  # glyph colour on dark squares
    highlight_selected: QColor  # border around the selected piece
    highlight_target: QColor  # border around reachable squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            piece_text=QColor(255, 255, 255),
            highlight_selected=QColor(0, 0, 255),
            highlight_target=QColor(155, 199, 0),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            piece_text=QColor(255, 255, 255),
            highlight_selected=QColor(255, 255, 0),
            highlight_target=QColor(155, 199, 0),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            piece_text=QColor(255, 255, 255),
            highlight_selected=QColor(0, 0, 255),
            highlight_target=QColor(255, 255, 0),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        """Theme by display name; unknown names fall back to the default."""
        themes = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        return themes.get(name, cls.default)()

    # ── Per-square QSS ───────────────────────────────────────────────────

    def square_style(
        self,
        dark: bool,
        *,
        selected: bool = False,
        target: bool = False,
    ) -> str:
        if not dark:
            return f"background-color: {self.light_square.name()};"
        style = (
            f"background-color: {self.dark_square.name()}; "
            f"color: {self.piece_text.name()};"
        )
        if selected:
            style += f" border: 2px solid {self.highlight_selected.name()};"
        elif target:
            style += f" border: 2px solid {self.highlight_target.name()};"
        return style


THEME_NAMES: list[str] = ["Classic", "Blue", "Green"]


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Arial", "Helvetica Neue", sans-serif;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
