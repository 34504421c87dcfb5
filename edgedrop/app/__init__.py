"""Services d'application pour orchestrer le moteur EdgeDrop."""

from .controls import Intent, apply_intent
from .event_bus import EventBus
from .events import (
    BoardRotatedEvent,
    GameOverEvent,
    LinesClearedEvent,
    RankBoostEvent,
    RankChangedEvent,
    SessionStartedEvent,
    TilePlacedEvent,
)
from .session import GameSession, Mode

__all__ = [
    "EventBus",
    "GameSession",
    "Mode",
    "Intent",
    "apply_intent",
    "SessionStartedEvent",
    "TilePlacedEvent",
    "LinesClearedEvent",
    "RankChangedEvent",
    "RankBoostEvent",
    "BoardRotatedEvent",
    "GameOverEvent",
]
