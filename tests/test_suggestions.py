"""
Tests for refuting suggestions and checking accusations.
"""

import pytest

from cluedo.cards import Card, Room, Suspect, Weapon
from cluedo.exceptions import UnknownPlayerError
from cluedo.player import PlayerState
from cluedo.suggestion import Suggestion, accuse, refute, turn_order

SUGGESTION = Suggestion(Suspect.PLUM, Weapon.ROPE, Room.HALL)


def make_players():
    return [
        PlayerState("Alice", [Card.room(Room.HALL), Card.suspect(Suspect.GREEN)]),
        PlayerState("Bob", [Card.weapon(Weapon.DAGGER)]),
        PlayerState("Carol", [Card.suspect(Suspect.PLUM), Card.weapon(Weapon.ROPE)]),
        PlayerState("Dave", [Card.room(Room.STUDY)]),
    ]


def test_turn_order_starts_after_suggester_and_wraps():
    players = make_players()
    order = [p.name for p in turn_order(players, "Carol")]
    assert order == ["Dave", "Alice", "Bob"]


def test_turn_order_unknown_suggester():
    with pytest.raises(UnknownPlayerError):
        turn_order(make_players(), "Eve")


def test_first_player_in_turn_order_refutes():
    players = make_players()

    # Bob cannot refute, Carol can
    result = refute(players, SUGGESTION, "Alice")
    assert result.refuted
    assert result.refuted_by == "Carol"
    assert result.card == Card.suspect(Suspect.PLUM)


def test_wraps_around_to_earlier_players():
    players = make_players()

    # Dave cannot refute, Alice holds the Hall
    result = refute(players, SUGGESTION, "Carol")
    assert result.refuted_by == "Alice"
    assert result.card == Card.room(Room.HALL)


def test_suggester_never_refutes_own_suggestion():
    players = [
        PlayerState("Alice", [Card.suspect(Suspect.PLUM)]),
        PlayerState("Bob", [Card.room(Room.KITCHEN)]),
    ]
    result = refute(players, SUGGESTION, "Alice")

    assert not result.refuted
    assert result.refuted_by is None
    assert result.card is None


def test_unrefuted_when_no_hand_intersects():
    players = [
        PlayerState("Alice", [Card.room(Room.STUDY)]),
        PlayerState("Bob", [Card.weapon(Weapon.DAGGER)]),
        PlayerState("Carol", [Card.suspect(Suspect.ORCHID)]),
    ]
    assert not refute(players, SUGGESTION, "Bob").refuted


def test_refuter_chooses_which_card_to_show():
    players = make_players()
    seen = {}

    def show_last(player, matches):
        seen[player.name] = list(matches)
        return matches[-1]

    result = refute(players, SUGGESTION, "Bob", choose_card=show_last)

    assert result.refuted_by == "Carol"
    assert seen["Carol"] == [Card.suspect(Suspect.PLUM), Card.weapon(Weapon.ROPE)]
    assert result.card == Card.weapon(Weapon.ROPE)


def test_chooser_must_pick_a_matching_card():
    with pytest.raises(ValueError):
        refute(make_players(), SUGGESTION, "Bob", choose_card=lambda p, m: Card.room(Room.LOUNGE))


def test_accuse_correct_only_on_exact_match():
    solution = Suggestion(Suspect.SCARLETT, Weapon.CANDLESTICK, Room.BALLROOM)

    assert accuse(solution, Suggestion(Suspect.SCARLETT, Weapon.CANDLESTICK, Room.BALLROOM)).correct
    assert not accuse(solution, Suggestion(Suspect.SCARLETT, Weapon.REVOLVER, Room.BALLROOM)).correct
    assert not accuse(solution, Suggestion(Suspect.PEACOCK, Weapon.CANDLESTICK, Room.BALLROOM)).correct
    assert not accuse(solution, Suggestion(Suspect.SCARLETT, Weapon.CANDLESTICK, Room.LOUNGE)).correct


def test_suggestion_cards_in_order():
    assert SUGGESTION.cards() == (
        Card.suspect(Suspect.PLUM),
        Card.weapon(Weapon.ROPE),
        Card.room(Room.HALL),
    )
