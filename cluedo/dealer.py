"""
Deck and dealer.

Chooses the hidden solution, removes it from the deck and deals the rest
round-robin so that hand sizes differ by at most one.
"""

import random
from dataclasses import dataclass
from typing import Dict, List, Sequence

from cluedo.cards import Card, Room, Suspect, Weapon, full_deck
from cluedo.exceptions import InsufficientPlayersError
from cluedo.suggestion import Suggestion


@dataclass
class DealResult:
    """The chosen solution and each player's hand, keyed in roster order."""

    solution: Suggestion
    hands: Dict[str, List[Card]]


def choose_solution(rng: random.Random) -> Suggestion:
    """Draw one suspect, one weapon and one room independently and uniformly."""
    return Suggestion(
        suspect=rng.choice(list(Suspect)),
        weapon=rng.choice(list(Weapon)),
        room=rng.choice(list(Room)),
    )


def build_residual_deck(solution: Suggestion) -> List[Card]:
    """The full deck minus the three solution cards."""
    solution_cards = set(solution.cards())
    return [card for card in full_deck() if card not in solution_cards]


def deal_cards(cards: Sequence[Card], player_count: int) -> List[List[Card]]:
    """
    Deal cards round-robin into `player_count` hands.

    Every seat receives `len(cards) // player_count` cards in full rounds;
    the remaining `len(cards) % player_count` cards go one each to the first
    seats in order.
    """
    if player_count < 1:
        raise ValueError("player_count must be positive")

    base_cards_per_player, extra_cards = divmod(len(cards), player_count)
    hands: List[List[Card]] = [[] for _ in range(player_count)]
    card_index = 0

    for _ in range(base_cards_per_player):
        for seat in range(player_count):
            hands[seat].append(cards[card_index])
            card_index += 1

    for seat in range(extra_cards):
        hands[seat].append(cards[card_index])
        card_index += 1

    return hands


def deal(player_names: Sequence[str], rng: random.Random, min_players: int = 2) -> DealResult:
    """Choose a solution and deal the remaining cards to the players, in roster order."""
    if len(player_names) < min_players:
        raise InsufficientPlayersError(
            f"At least {min_players} players are required, got {len(player_names)}"
        )

    solution = choose_solution(rng)
    deck = build_residual_deck(solution)
    rng.shuffle(deck)

    hands = deal_cards(deck, len(player_names))
    return DealResult(
        solution=solution,
        hands={name: hand for name, hand in zip(player_names, hands)},
    )
