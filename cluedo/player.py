"""
Player state and management.
"""

from typing import List, Optional, TYPE_CHECKING

from cluedo.cards import Card

if TYPE_CHECKING:
    from cluedo.suggestion import Suggestion


class PlayerState:
    """A registered player: a unique, case-sensitive name and a hand of cards."""

    def __init__(self, name: str, cards: Optional[List[Card]] = None):
        self.name = name
        self.cards: List[Card] = list(cards) if cards else []

    def matching_cards(self, suggestion: "Suggestion") -> List[Card]:
        """Cards from this hand that appear in the suggestion, in hand order."""
        wanted = set(suggestion.cards())
        return [card for card in self.cards if card in wanted]

    def copy(self) -> "PlayerState":
        return PlayerState(self.name, self.cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlayerState):
            return NotImplemented
        return self.name == other.name and self.cards == other.cards

    def __repr__(self) -> str:
        return f"PlayerState(name='{self.name}', cards={len(self.cards)})"
