"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    square_size: int = 80  # px
    piece_font_size: int = 30  # pt
    show_reachable: bool = True

    # Engine
    engine_depth: int = 5
    ai_starts: bool = True
