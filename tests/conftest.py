"""Shared test fixtures for Cluedo engine tests."""

import pytest

from cluedo import GameConfig, GameManager


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def two_players():
    """Two test players."""
    return ["Alice", "Bob"]


@pytest.fixture
def three_players():
    """Three test players."""
    return ["Alice", "Bob", "Carol"]


@pytest.fixture
def manager(game_config):
    """Empty game manager with fixed seed."""
    return GameManager(game_config)


@pytest.fixture
def forming_manager(manager, three_players):
    """Manager with three registered players and no game started."""
    for name in three_players:
        manager.add_player(name)
    return manager


@pytest.fixture
def active_manager(forming_manager):
    """Manager with a three-player game in progress."""
    forming_manager.start_game()
    return forming_manager
