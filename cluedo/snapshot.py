"""
Serialization of GameState into JSON-ready dicts.

`serialize_state` is the full view (hands and solution). `serialize_snapshot`
is the public view: it never exposes a hand or the solution.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from cluedo.cards import Card
from cluedo.events import GameEvent
from cluedo.player import PlayerState
from cluedo.suggestion import Accusation, Refutation, Suggestion

if TYPE_CHECKING:
    from cluedo.game import GameState


def serialize_card(card: Card) -> Dict[str, str]:
    return {"kind": card.card_type.value, "value": card.value.value}


def serialize_suggestion(suggestion: Optional[Suggestion]) -> Optional[Dict[str, str]]:
    if suggestion is None:
        return None
    return {
        "suspect": suggestion.suspect.value,
        "weapon": suggestion.weapon.value,
        "room": suggestion.room.value,
    }


def serialize_player(player: PlayerState, reveal_hand: bool = True) -> Dict[str, Any]:
    data: Dict[str, Any] = {"name": player.name, "hand_size": len(player.cards)}
    if reveal_hand:
        data["cards"] = [serialize_card(c) for c in player.cards]
    return data


def serialize_refutation(refutation: Refutation) -> Dict[str, Any]:
    return {
        "refuted": refutation.refuted,
        "refuted_by": refutation.refuted_by,
        "card": serialize_card(refutation.card) if refutation.card else None,
    }


def serialize_accusation(accusation: Accusation) -> Dict[str, Any]:
    return {"correct": accusation.correct}


def serialize_event(event: GameEvent) -> Dict[str, Any]:
    return {
        "event_type": event.event_type.value,
        "player": event.player,
        "details": dict(event.details),
    }


def serialize_state(game: GameState) -> Dict[str, Any]:
    """Full state: every hand and the solution."""
    return {
        "phase": game.phase.value,
        "players": [serialize_player(p) for p in game.players.values()],
        "solution": serialize_suggestion(game.solution),
    }


def serialize_snapshot(game: GameState) -> Dict[str, Any]:
    """Serialize a GameState into a public, stable JSON dict.

    The snapshot includes:
    - phase (empty / forming / active)
    - players in roster order with hand sizes only
    - whether a solution has been chosen, not what it is
    - number of logged events
    """
    players: List[Dict[str, Any]] = [
        serialize_player(p, reveal_hand=False) for p in game.players.values()
    ]
    return {
        "phase": game.phase.value,
        "players": players,
        "has_solution": game.solution is not None,
        "event_count": len(game.event_log),
    }
