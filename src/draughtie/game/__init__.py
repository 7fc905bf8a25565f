"""Game management layer — session state machine and its events.

Quick start::

    from draughtie.game import GameSession

    session = GameSession()
    session.events.on_engine_request.append(my_engine_callback)
    session.new_game()
"""

from draughtie.game.interfaces import ClickOutcome, GamePhase
from draughtie.game.session import GameEvents, GameSession

__all__ = [
    "ClickOutcome",
    "GameEvents",
    "GamePhase",
    "GameSession",
]
