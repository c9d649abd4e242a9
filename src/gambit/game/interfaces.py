"""Abstract interfaces for the game layer.

The presentation layer talks to :class:`IGameSession`; the session depends
on :class:`IClock`, not on a concrete clock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from gambit.core.enums import Color

if TYPE_CHECKING:
    from gambit.core.move import Move
    from gambit.core.types import Square
    from gambit.game.state import GameSnapshot, StatusReport


# ── Time control presets ─────────────────────────────────────────────────────


class TimeControl:
    """Immutable time-control definition.

    Args:
        initial_seconds: Starting time per player.
    """

    __slots__ = ("initial_seconds",)

    def __init__(self, initial_seconds: float) -> None:
        if initial_seconds < 0:
            raise ValueError(f"initial_seconds must be >= 0, got {initial_seconds}")
        self.initial_seconds = initial_seconds

    # Common presets
    @classmethod
    def bullet_1m(cls) -> TimeControl:
        return cls(60)

    @classmethod
    def blitz_3m(cls) -> TimeControl:
        return cls(180)

    @classmethod
    def blitz_5m(cls) -> TimeControl:
        return cls(300)

    @classmethod
    def rapid_10m(cls) -> TimeControl:
        return cls(600)

    @classmethod
    def classical_30m(cls) -> TimeControl:
        return cls(1800)

    @classmethod
    def unlimited(cls) -> TimeControl:
        """No time limit."""
        return cls(float("inf"))

    @property
    def is_unlimited(self) -> bool:
        return self.initial_seconds == float("inf")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeControl):
            return NotImplemented
        return self.initial_seconds == other.initial_seconds

    def __hash__(self) -> int:
        return hash(self.initial_seconds)

    def __repr__(self) -> str:
        if self.is_unlimited:
            return "TimeControl(unlimited)"
        return f"TimeControl({self.initial_seconds / 60:.0f}m)"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IClock(ABC):
    """Interface for a two-sided countdown clock."""

    @abstractmethod
    def remaining(self, color: Color) -> float:
        """Seconds remaining for *color*."""

    @abstractmethod
    def consume(self, color: Color, seconds: float) -> float:
        """Take *seconds* off *color*'s time and return what is left."""

    @abstractmethod
    def is_flag_fallen(self, color: Color) -> bool:
        """Has *color* run out of time?"""


class IGameSession(ABC):
    """Interface the presentation layer uses to drive a game."""

    @abstractmethod
    def get_legal_moves(self, square: Square) -> list[Move]:
        """Legal moves for the piece on *square* (for highlighting)."""

    @abstractmethod
    def apply_move(self, from_sq: Square, to_sq: Square) -> GameSnapshot:
        """Apply a move if legal. Returns the (possibly unchanged) state."""

    @abstractmethod
    def get_status(self) -> StatusReport:
        """Current status and winner."""

    @abstractmethod
    def reset(self) -> GameSnapshot:
        """Discard the game and clock and start over."""

    @abstractmethod
    def start(self) -> None:
        """Let the clock run."""

    @abstractmethod
    def pause(self) -> None:
        """Freeze the clock without losing elapsed time."""

    @abstractmethod
    def tick(self) -> None:
        """Advance the clock by one tick. Called by an external scheduler."""
