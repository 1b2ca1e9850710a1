"""Game management layer — controller, level timer, session, scheduling.

Quick start::

    from memflip.game import GameController, ManualScheduler

    scheduler = ManualScheduler()
    ctrl = GameController(scheduler)
    ctrl.new_game("Ada Lovelace")
    ctrl.select_tile(0)
    scheduler.advance_seconds(1)
"""

from memflip.game.controller import GameController, GameEvents
from memflip.game.interfaces import (
    GamePhase,
    IGameController,
    IScheduler,
    ScheduledCall,
    TimerState,
)
from memflip.game.scheduler import ManualScheduler, monotonic_ms
from memflip.game.session import GameSession
from memflip.game.timer import LevelTimer, TimerReading

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IScheduler",
    "ScheduledCall",
    "TimerState",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSession",
    "LevelTimer",
    "ManualScheduler",
    "TimerReading",
    "monotonic_ms",
]
