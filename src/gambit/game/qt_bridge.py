"""Qt bridge that pumps a session's clock from the event loop."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from gambit.core.enums import Color
from gambit.game.session import GameSession
from gambit.game.state import StatusReport

_LOGGER = logging.getLogger(__name__)


class ClockPump(QObject):
    """Calls :meth:`GameSession.tick` once per interval on the owning thread.

    The timer lives on the same event loop as move application, so a tick
    can never run in the middle of a move.
    """

    ticked = pyqtSignal(object, float)  # color, remaining seconds
    game_over = pyqtSignal(object, object)  # status, winner (or None)

    __slots__ = ("_session", "_timer")

    def __init__(self, session: GameSession, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._session = session
        self._timer = QTimer(self)
        self._timer.setInterval(session.settings.tick_interval_ms)
        self._timer.timeout.connect(self._on_timeout)

        session.events.on_tick.append(self._forward_tick)
        session.events.on_game_over.append(self._forward_game_over)

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    @pyqtSlot()
    def start(self) -> None:
        """Start the session clock and the timer that drives it."""
        self._session.start()
        if self._session.is_running:
            self._timer.start()

    @pyqtSlot()
    def pause(self) -> None:
        self._timer.stop()
        self._session.pause()

    @pyqtSlot()
    def reset(self) -> None:
        """Stop pumping and reset the session."""
        self._timer.stop()
        self._session.reset()

    @pyqtSlot()
    def _on_timeout(self) -> None:
        self._session.tick()
        if not self._session.is_running:
            self._timer.stop()

    def _forward_tick(self, color: Color, remaining: float) -> None:
        self.ticked.emit(color, remaining)

    def _forward_game_over(self, report: StatusReport) -> None:
        _LOGGER.debug("Stopping clock pump: %s", report.status.name.lower())
        self._timer.stop()
        self.game_over.emit(report.status, report.winner)
