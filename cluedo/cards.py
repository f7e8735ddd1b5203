"""
Card catalog: the fixed universe of suspects, weapons and rooms.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class Suspect(str, Enum):
    """The six suspects."""

    PLUM = "Plum"
    GREEN = "Green"
    MUSTARD = "Mustard"
    PEACOCK = "Peacock"
    SCARLETT = "Scarlett"
    ORCHID = "Orchid"


class Weapon(str, Enum):
    """The six weapons."""

    CANDLESTICK = "Candlestick"
    LEAD_PIPE = "LeadPipe"
    DAGGER = "Dagger"
    ROPE = "Rope"
    REVOLVER = "Revolver"
    WRENCH = "Wrench"


class Room(str, Enum):
    """The nine rooms."""

    KITCHEN = "Kitchen"
    HALL = "Hall"
    LOUNGE = "Lounge"
    BALLROOM = "Ballroom"
    CONSERVATORY = "Conservatory"
    DINING_ROOM = "DiningRoom"
    LIBRARY = "Library"
    BILLIARD_ROOM = "BilliardRoom"
    STUDY = "Study"


class CardType(Enum):
    """Kinds of cards. The three kinds are disjoint."""

    SUSPECT = "suspect"
    WEAPON = "weapon"
    ROOM = "room"


CardValue = Union[Suspect, Weapon, Room]

_TYPE_BY_ENUM = {
    Suspect: CardType.SUSPECT,
    Weapon: CardType.WEAPON,
    Room: CardType.ROOM,
}


@dataclass(frozen=True)
class Card:
    """A single card: a kind plus one value from that kind's closed set."""

    card_type: CardType
    value: CardValue

    def __post_init__(self) -> None:
        expected = _TYPE_BY_ENUM.get(type(self.value))
        if expected is not self.card_type:
            raise ValueError(f"{self.value!r} is not a valid {self.card_type.value} card")

    @classmethod
    def of(cls, value: CardValue) -> "Card":
        """Build a card, inferring its kind from the value's enum."""
        card_type = _TYPE_BY_ENUM.get(type(value))
        if card_type is None:
            raise ValueError(f"Unknown card value: {value!r}")
        return cls(card_type, value)

    @classmethod
    def suspect(cls, value: Suspect) -> "Card":
        return cls(CardType.SUSPECT, value)

    @classmethod
    def weapon(cls, value: Weapon) -> "Card":
        return cls(CardType.WEAPON, value)

    @classmethod
    def room(cls, value: Room) -> "Card":
        return cls(CardType.ROOM, value)

    def __repr__(self) -> str:
        return f"Card({self.card_type.value}:{self.value.value})"


DECK_SIZE = len(Suspect) + len(Weapon) + len(Room)


def full_deck() -> List[Card]:
    """Return all 21 cards in catalog order: suspects, weapons, then rooms."""
    cards: List[Card] = []
    cards.extend(Card.suspect(s) for s in Suspect)
    cards.extend(Card.weapon(w) for w in Weapon)
    cards.extend(Card.room(r) for r in Room)
    return cards
