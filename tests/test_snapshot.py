from cluedo import GameManager, GameConfig
from cluedo.cards import Card, Room, Suspect
from cluedo.snapshot import serialize_card, serialize_snapshot, serialize_state


def _game():
    manager = GameManager(GameConfig(seed=42))
    for name in ["A", "B", "C"]:
        manager.add_player(name)
    return manager.start_game()


def test_basic_snapshot_structure():
    snap = serialize_snapshot(_game())

    assert set(snap) == {"phase", "players", "has_solution", "event_count"}
    assert snap["phase"] == "active"
    assert [p["name"] for p in snap["players"]] == ["A", "B", "C"]

    # Hands are never exposed, only their sizes
    for p in snap["players"]:
        assert set(p) == {"name", "hand_size"}
        assert p["hand_size"] == 6


def test_full_state_includes_hands_and_solution():
    game = _game()
    data = serialize_state(game)

    assert data["solution"] == {
        "suspect": game.solution.suspect.value,
        "weapon": game.solution.weapon.value,
        "room": game.solution.room.value,
    }
    assert all(len(p["cards"]) == 6 for p in data["players"])


def test_empty_state():
    data = serialize_state(GameManager().state())
    assert data == {"phase": "empty", "players": [], "solution": None}


def test_card_wire_format():
    assert serialize_card(Card.room(Room.DINING_ROOM)) == {"kind": "room", "value": "DiningRoom"}
    assert serialize_card(Card.suspect(Suspect.SCARLETT)) == {"kind": "suspect", "value": "Scarlett"}
