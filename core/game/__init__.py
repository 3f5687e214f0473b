"""Game engine and state management."""

from core.game.events import GameEvent, EventType
from core.game.state import GameState, RoundOutcome, Side
from core.game.engine import CenterCards, WarGame

__all__ = [
    "GameEvent",
    "EventType",
    "GameState",
    "RoundOutcome",
    "Side",
    "CenterCards",
    "WarGame",
]
