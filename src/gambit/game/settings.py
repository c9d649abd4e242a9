"""Session configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from gambit.game.interfaces import TimeControl


@dataclass
class SessionSettings:
    """All tunable settings of a game session."""

    # Clock
    time_control: TimeControl = field(default_factory=TimeControl.rapid_10m)
    tick_seconds: float = 1.0  # time taken off per tick
    tick_interval_ms: int = 1000  # how often a scheduler should tick
    auto_start_clock: bool = False  # start the clock on the first move

    def __post_init__(self) -> None:
        if self.tick_seconds <= 0:
            raise ValueError(f"tick_seconds must be positive, got {self.tick_seconds}")
        if self.tick_interval_ms <= 0:
            raise ValueError(
                f"tick_interval_ms must be positive, got {self.tick_interval_ms}"
            )
