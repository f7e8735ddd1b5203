"""
Game event logging.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class EventType(Enum):
    """Types of game events."""

    PLAYER_ADDED = "player_added"
    PLAYER_REMOVED = "player_removed"

    GAME_START = "game_start"

    SUGGESTION = "suggestion"
    REFUTATION = "refutation"
    ACCUSATION = "accusation"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    player: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        player_str = self.player if self.player is not None else "System"
        return f"[{player_str}] {self.event_type.value}: {self.details}"


class EventLog:
    """
    Public history of a game.

    Only information every player may see goes in here: who refuted a
    suggestion, never which card was shown.
    """

    def __init__(self):
        self.events: List[GameEvent] = []

    def log(self, event_type: EventType, player: Optional[str] = None, **details: Any) -> None:
        """Log a game event."""
        self.events.append(GameEvent(event_type, player, details))

    def get_events(self) -> List[GameEvent]:
        """Get copies of all logged events, detached from the log."""
        return [GameEvent(e.event_type, e.player, copy.deepcopy(e.details)) for e in self.events]

    def clear(self) -> None:
        """Clear the event log."""
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)
