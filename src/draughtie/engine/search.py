"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from draughtie.core.board import Board
    from draughtie.core.move import Move


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 5

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {self.max_depth}")


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``best_move`` is :data:`~draughtie.core.move.NO_MOVE` when White has no
    legal move; ``score`` is White-positive material.
    """

    best_move: Move
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the UI/game layer."""

    def search(self, board: Board, limits: SearchLimits) -> SearchResult: ...
