"""
Main game engine and state management.
"""

import logging
import random
import threading
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from cluedo.config import GameConfig
from cluedo.dealer import deal
from cluedo.events import EventLog, EventType, GameEvent
from cluedo.exceptions import (
    CluedoError,
    DuplicatePlayerError,
    GameAlreadyActiveError,
    GameNotActiveError,
    GameStateCorruptedError,
    InsufficientPlayersError,
    UnknownPlayerError,
)
from cluedo.player import PlayerState
from cluedo.snapshot import serialize_snapshot
from cluedo.suggestion import (
    Accusation,
    CardChooser,
    Refutation,
    Suggestion,
    accuse,
    refute,
)

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Lifecycle of a game: EMPTY -> FORMING -> ACTIVE -> EMPTY."""

    EMPTY = "empty"
    FORMING = "forming"
    ACTIVE = "active"


class GameState:
    """
    Represents the complete state of a Cluedo game.

    Players are kept in insertion order, which is also the dealing and
    refutation order. `solution` is None until the game starts.
    """

    def __init__(self):
        self.players: Dict[str, PlayerState] = {}
        self.solution: Optional[Suggestion] = None
        self.event_log = EventLog()

    @property
    def phase(self) -> GamePhase:
        if self.solution is not None:
            return GamePhase.ACTIVE
        if self.players:
            return GamePhase.FORMING
        return GamePhase.EMPTY

    @property
    def is_active(self) -> bool:
        return self.solution is not None

    def get_player(self, name: str) -> PlayerState:
        player = self.players.get(name)
        if player is None:
            raise UnknownPlayerError(f"Player '{name}' not found")
        return player

    def copy(self) -> "GameState":
        """Detached copy for handing out of the lock."""
        clone = GameState()
        clone.players = {name: p.copy() for name, p in self.players.items()}
        clone.solution = self.solution
        clone.event_log.events = self.event_log.get_events()
        return clone

    def __repr__(self) -> str:
        return (
            f"GameState(phase={self.phase.value}, players={list(self.players)}, "
            f"solution={self.solution})"
        )


class GameManager:
    """
    Owning handle for the single game of this process.

    Every operation, read or write, runs inside one exclusive lock. Engine
    errors are raised before anything is mutated, so a failed call leaves
    the state as it was. Any other exception escaping while the lock is held
    marks the state as corrupted and every later call fails.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.seed)
        self._state = GameState()
        self._lock = threading.Lock()
        self._corrupted = False

    @contextmanager
    def _locked(self) -> Iterator[GameState]:
        with self._lock:
            if self._corrupted:
                raise GameStateCorruptedError("Game state is corrupted; restart the process")
            try:
                yield self._state
            except CluedoError:
                raise
            except Exception:
                self._corrupted = True
                logger.exception("Unexpected error while holding the game state lock")
                raise

    @property
    def phase(self) -> GamePhase:
        with self._locked() as state:
            return state.phase

    # ---- Players ----

    def add_player(self, name: str) -> PlayerState:
        """Register a new player with an empty hand."""
        with self._locked() as state:
            if name in state.players:
                raise DuplicatePlayerError(f"Player '{name}' already exists")

            player = PlayerState(name)
            state.players[name] = player
            state.event_log.log(EventType.PLAYER_ADDED, player=name)
            logger.info(f"Added player {name} ({len(state.players)} registered)")
            return player.copy()

    def remove_player(self, name: str) -> None:
        """Remove a player. During an active game their cards are discarded."""
        with self._locked() as state:
            player = state.get_player(name)

            if state.is_active:
                logger.warning(
                    f"Removing player {name} mid-game; {len(player.cards)} cards discarded"
                )
            del state.players[name]
            state.event_log.log(
                EventType.PLAYER_REMOVED, player=name, discarded_cards=len(player.cards)
            )
            logger.info(f"Removed player {name}")

    def list_players(self) -> List[PlayerState]:
        """All players in insertion order."""
        with self._locked() as state:
            return [p.copy() for p in state.players.values()]

    def get_player(self, name: str) -> PlayerState:
        """A single player, hand included."""
        with self._locked() as state:
            return state.get_player(name).copy()

    # ---- Game lifecycle ----

    def start_game(self) -> GameState:
        """Choose the solution, deal the hands and return the post-deal state."""
        with self._locked() as state:
            if state.is_active:
                raise GameAlreadyActiveError("A game is already in progress")
            if len(state.players) < self.config.min_players:
                raise InsufficientPlayersError(
                    f"At least {self.config.min_players} players are required, "
                    f"got {len(state.players)}"
                )

            result = deal(list(state.players), self.rng, min_players=self.config.min_players)

            state.solution = result.solution
            for name, hand in result.hands.items():
                state.players[name].cards = hand

            state.event_log.log(
                EventType.GAME_START,
                players=list(state.players),
                hand_sizes={name: len(p.cards) for name, p in state.players.items()},
            )
            logger.info(f"Game started with {len(state.players)} players")
            return state.copy()

    def reset_game(self) -> None:
        """End the active game and return to an empty roster."""
        with self._locked() as state:
            if not state.is_active:
                raise GameNotActiveError("No game is in progress")

            state.players = {}
            state.solution = None
            state.event_log.clear()
            logger.info("Game reset")

    # ---- Suggestions and accusations ----

    def refute(
        self,
        suggestion: Suggestion,
        suggester: str,
        choose_card: Optional[CardChooser] = None,
    ) -> Refutation:
        """Resolve a suggestion made by `suggester` against the other hands."""
        with self._locked() as state:
            if not state.is_active:
                raise GameNotActiveError("No game is in progress")
            state.get_player(suggester)

            result = refute(list(state.players.values()), suggestion, suggester, choose_card)

            state.event_log.log(
                EventType.SUGGESTION,
                player=suggester,
                suspect=suggestion.suspect.value,
                weapon=suggestion.weapon.value,
                room=suggestion.room.value,
            )
            state.event_log.log(
                EventType.REFUTATION, player=suggester, refuted_by=result.refuted_by
            )
            return result

    def accuse(self, suggestion: Suggestion, accuser: Optional[str] = None) -> Accusation:
        """Check an accusation against the solution."""
        with self._locked() as state:
            if not state.is_active:
                raise GameNotActiveError("No game is in progress")
            if accuser is not None:
                state.get_player(accuser)

            result = accuse(state.solution, suggestion)

            state.event_log.log(
                EventType.ACCUSATION,
                player=accuser,
                suspect=suggestion.suspect.value,
                weapon=suggestion.weapon.value,
                room=suggestion.room.value,
                correct=result.correct,
            )
            logger.info(
                f"Accusation by {accuser or 'unknown player'} was "
                f"{'correct' if result.correct else 'incorrect'}"
            )
            return result

    # ---- Read-only views ----

    def state(self) -> GameState:
        """Detached copy of the whole state, solution included."""
        with self._locked() as state:
            return state.copy()

    def events(self) -> List[GameEvent]:
        with self._locked() as state:
            return state.event_log.get_events()

    def snapshot(self) -> Dict[str, Any]:
        """Public view of the game; see `serialize_snapshot`."""
        with self._locked() as state:
            return serialize_snapshot(state)
