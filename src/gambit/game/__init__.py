"""Game layer: session, state machine and clock.

Usage::

    from gambit.core import parse_square
    from gambit.game import GameSession, SessionSettings, TimeControl

    session = GameSession(SessionSettings(time_control=TimeControl.blitz_5m()))
    session.start()
    session.apply_move(parse_square("e2"), parse_square("e4"))
    session.tick()  # once per second, from your scheduler

The Qt clock pump lives in :mod:`gambit.game.qt_bridge` and is not imported
here so the game layer stays usable without PyQt6 loaded.
"""

from gambit.game.clock import Clock, ClockSnapshot
from gambit.game.interfaces import IClock, IGameSession, TimeControl
from gambit.game.session import GameSession, SessionEvents
from gambit.game.settings import SessionSettings
from gambit.game.state import GameSnapshot, GameState, StatusReport

__all__ = [
    # Interfaces
    "IClock",
    "IGameSession",
    "TimeControl",
    # Concrete
    "Clock",
    "ClockSnapshot",
    "GameSession",
    "GameSnapshot",
    "GameState",
    "SessionEvents",
    "SessionSettings",
    "StatusReport",
]
