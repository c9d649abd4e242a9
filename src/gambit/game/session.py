"""GameSession, the engine's facade for one game.

Owns the GameState and its Clock. Rejected requests are no-ops that
return the unchanged state; listeners are notified via simple callbacks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from gambit.core.enums import Color
from gambit.core.move import Move
from gambit.core.types import Square
from gambit.game.clock import Clock
from gambit.game.interfaces import IGameSession
from gambit.game.settings import SessionSettings
from gambit.game.state import GameSnapshot, GameState, StatusReport

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, str, GameSnapshot], None]  # move, entry, state
GameOverCallback = Callable[[StatusReport], None]
ClockTickCallback = Callable[[Color, float], None]  # color, remaining


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_tick: list[ClockTickCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameSession):
    """One game plus its clock.

    Thread-safety: every method must be called from the same thread. The
    clock tick is an externally scheduled callback on that thread (see
    :class:`gambit.game.qt_bridge.ClockPump`), so ticks and moves never
    interleave.
    """

    __slots__ = ("_settings", "_state", "_clock", "events")

    def __init__(self, settings: SessionSettings | None = None) -> None:
        self._settings = settings if settings is not None else SessionSettings()
        self._state = GameState()
        self._clock = Clock(self._settings.time_control)
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> SessionSettings:
        return self._settings

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def is_running(self) -> bool:
        return self._state.running

    def remaining(self, color: Color) -> float:
        return self._clock.remaining(color)

    @property
    def white_remaining(self) -> float:
        return self._clock.remaining(Color.WHITE)

    @property
    def black_remaining(self) -> float:
        return self._clock.remaining(Color.BLACK)

    def snapshot(self) -> GameSnapshot:
        return self._state.snapshot(self._clock.snapshot())

    # ── IGameSession impl ────────────────────────────────────────────────

    def get_legal_moves(self, square: Square) -> list[Move]:
        return self._state.legal_moves_from(square)

    def apply_move(self, from_sq: Square, to_sq: Square) -> GameSnapshot:
        state = self._state
        if state.is_game_over:
            _LOGGER.debug("Move %s-%s rejected: game is over", from_sq, to_sq)
            return self.snapshot()

        move = next(
            (m for m in state.legal_moves_from(from_sq) if m.to_sq == to_sq),
            None,
        )
        if move is None:
            _LOGGER.debug("Move %s-%s rejected: not legal", from_sq, to_sq)
            return self.snapshot()

        entry = state.apply_move(move.from_sq, move.to_sq)
        if (
            self._settings.auto_start_clock
            and state.ply_count == 1
            and not state.is_game_over
        ):
            state.running = True

        snapshot = self.snapshot()
        self._emit_move(move, entry, snapshot)
        if state.is_game_over:
            self._emit_game_over()
        return snapshot

    def get_status(self) -> StatusReport:
        return self._state.report()

    def reset(self) -> GameSnapshot:
        self._state = GameState()
        self._clock = Clock(self._settings.time_control)
        _LOGGER.info("Session reset")
        return self.snapshot()

    def start(self) -> None:
        if self._state.is_game_over:
            _LOGGER.debug("Clock start ignored: game is over")
            return
        self._state.running = True

    def pause(self) -> None:
        self._state.running = False

    def tick(self) -> None:
        state = self._state
        if not state.running or state.is_game_over:
            return

        color = state.active_color
        if self._clock.is_flag_fallen(color):
            self._forfeit(color)
            return

        left = self._clock.consume(color, self._settings.tick_seconds)
        for cb in self.events.on_tick:
            cb(color, left)
        if left <= 0.0:
            self._forfeit(color)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _forfeit(self, color: Color) -> None:
        self._state.flag_fall(color)
        self._emit_game_over()

    def _emit_move(self, move: Move, entry: str, snapshot: GameSnapshot) -> None:
        for cb in self.events.on_move:
            cb(move, entry, snapshot)

    def _emit_game_over(self) -> None:
        report = self._state.report()
        _LOGGER.info(
            "Game over: %s (winner: %s)",
            report.status.name.lower(),
            report.winner if report.winner is not None else "none",
        )
        for cb in self.events.on_game_over:
            cb(report)
