"""Per-side countdown clock."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color
from gambit.game.interfaces import IClock, TimeControl


@dataclass(frozen=True, slots=True)
class ClockSnapshot:
    """Read-only clock readings handed to the presentation layer."""

    white_remaining: float
    black_remaining: float


class Clock(IClock):
    """Remaining time for both players.

    The clock has no notion of wall time. It only loses time through
    :meth:`consume`, which the session calls once per scheduled tick, and
    it never goes below zero.
    """

    __slots__ = ("_remaining",)

    def __init__(self, time_control: TimeControl) -> None:
        self._remaining: dict[Color, float] = {
            Color.WHITE: time_control.initial_seconds,
            Color.BLACK: time_control.initial_seconds,
        }

    # ── IClock implementation ────────────────────────────────────────────

    def remaining(self, color: Color) -> float:
        return self._remaining[color]

    def consume(self, color: Color, seconds: float) -> float:
        self._remaining[color] = max(0.0, self._remaining[color] - seconds)
        return self._remaining[color]

    def is_flag_fallen(self, color: Color) -> bool:
        return self._remaining[color] <= 0.0

    # ── Extra helpers ────────────────────────────────────────────────────

    def set_remaining(self, color: Color, seconds: float) -> None:
        """Manually override remaining time (for testing / adjournments)."""
        self._remaining[color] = max(0.0, seconds)

    def snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(
            white_remaining=self._remaining[Color.WHITE],
            black_remaining=self._remaining[Color.BLACK],
        )
