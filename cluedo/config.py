"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for a Cluedo game."""

    min_players: int = 2

    seed: Optional[int] = None
