"""
Suggestions, refutation and accusation.

A suggestion is checked against the other players' hands in turn order;
an accusation is checked against the hidden solution.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from cluedo.cards import Card, Room, Suspect, Weapon
from cluedo.exceptions import UnknownPlayerError
from cluedo.player import PlayerState

# Given the refuting player and their matching cards, return the card to show.
CardChooser = Callable[[PlayerState, List[Card]], Card]


@dataclass(frozen=True)
class Suggestion:
    """A (suspect, weapon, room) claim. Also the shape of the hidden solution."""

    suspect: Suspect
    weapon: Weapon
    room: Room

    def cards(self) -> Tuple[Card, Card, Card]:
        """The three cards named by this suggestion."""
        return (Card.suspect(self.suspect), Card.weapon(self.weapon), Card.room(self.room))


@dataclass(frozen=True)
class Refutation:
    """Outcome of a suggestion. Both fields are None when nobody could refute."""

    refuted_by: Optional[str] = None
    card: Optional[Card] = None

    @property
    def refuted(self) -> bool:
        return self.refuted_by is not None


@dataclass(frozen=True)
class Accusation:
    """Outcome of an accusation."""

    correct: bool


def first_match(player: PlayerState, matches: List[Card]) -> Card:
    """Default reveal policy: the first matching card in hand order."""
    return matches[0]


def turn_order(players: Sequence[PlayerState], suggester: str) -> List[PlayerState]:
    """
    Players who may refute, in turn order.

    Starts with the player seated right after the suggester and wraps around
    the roster; the suggester is excluded.
    """
    names = [p.name for p in players]
    try:
        start = names.index(suggester)
    except ValueError:
        raise UnknownPlayerError(f"Player '{suggester}' not found") from None

    count = len(players)
    return [players[(start + offset) % count] for offset in range(1, count)]


def refute(
    players: Sequence[PlayerState],
    suggestion: Suggestion,
    suggester: str,
    choose_card: Optional[CardChooser] = None,
) -> Refutation:
    """
    Find the first player after the suggester able to refute the suggestion.

    The refuter shows exactly one matching card; which one is up to
    `choose_card`. A chooser returning a card that does not match is a
    programming error and raises ValueError.
    """
    choose_card = choose_card or first_match

    for candidate in turn_order(players, suggester):
        matches = candidate.matching_cards(suggestion)
        if not matches:
            continue
        card = choose_card(candidate, list(matches))
        if card not in matches:
            raise ValueError(f"{card!r} does not refute the suggestion")
        return Refutation(refuted_by=candidate.name, card=card)

    return Refutation()


def accuse(solution: Suggestion, suggestion: Suggestion) -> Accusation:
    """An accusation is correct iff all three fields equal the solution."""
    return Accusation(correct=suggestion == solution)
