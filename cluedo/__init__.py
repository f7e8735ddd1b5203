"""
Cluedo Rules Engine

Card catalog, fair dealing, and suggestion/accusation resolution for a
single deduction game.
"""

from .cards import Card, CardType, Room, Suspect, Weapon, full_deck
from .config import GameConfig
from .game import GameManager, GamePhase, GameState
from .player import PlayerState
from .suggestion import Accusation, Refutation, Suggestion

__all__ = [
    "Card",
    "CardType",
    "Room",
    "Suspect",
    "Weapon",
    "full_deck",
    "GameConfig",
    "GameManager",
    "GamePhase",
    "GameState",
    "PlayerState",
    "Accusation",
    "Refutation",
    "Suggestion",
]
