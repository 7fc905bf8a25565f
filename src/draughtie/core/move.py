"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from draughtie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing one diagonal step or one jump.

    A multi-jump is a series of single-capture moves by the same piece, so
    ``captured`` holds at most one square.
    """

    start: Square
    end: Square
    is_capture: bool = False
    captured: tuple[Square, ...] = ()

    @classmethod
    def step(cls, start: Square, end: Square) -> Move:
        return cls(start, end)

    @classmethod
    def jump(cls, start: Square, end: Square) -> Move:
        """Two-step capture; the jumped-over midpoint is recorded."""
        mid = ((start[0] + end[0]) // 2, (start[1] + end[1]) // 2)
        return cls(start, end, True, (mid,))

    @property
    def is_null(self) -> bool:
        """Whether this is the :data:`NO_MOVE` sentinel."""
        return self.start[0] == -1

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if self.is_null:
            return "--"
        sep = "x" if self.is_capture else "-"
        return f"{square_name(self.start)}{sep}{square_name(self.end)}"


NO_MOVE = Move((-1, -1), (-1, -1))
"""Returned by the search when the side to move has nothing to play."""
