"""Enumerations shared by the game layer and its UI collaborators."""

from __future__ import annotations

from enum import IntEnum, auto


class GamePhase(IntEnum):
    """Finite-state-machine states for a draughts game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()  # human (Black) to move
    THINKING = auto()  # engine (White) is computing
    GAME_OVER = auto()


class ClickOutcome(IntEnum):
    """What a square click did to the session."""

    IGNORED = auto()
    SELECTED = auto()
    ILLEGAL = auto()
    MOVED = auto()
    MULTI_JUMP = auto()  # capture made, the same piece must jump again
