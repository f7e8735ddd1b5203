"""
Exception hierarchy for the Cluedo engine.

Every engine error carries an ErrorKind so the transport layer can map it
to a stable status without knowing each subclass.
"""

from enum import Enum


class ErrorKind(Enum):
    """Transport-independent classes of engine failure."""

    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INVALID_STATE = "invalid_state"


class CluedoError(Exception):
    """Base exception for all expected, caller-recoverable engine errors."""

    kind: ErrorKind = ErrorKind.INVALID_STATE
    code: str = "cluedo_error"


class DuplicatePlayerError(CluedoError):
    """A player with that name already exists."""

    kind = ErrorKind.CONFLICT
    code = "duplicate_player"


class UnknownPlayerError(CluedoError):
    """No player with that name exists."""

    kind = ErrorKind.NOT_FOUND
    code = "unknown_player"


class GameAlreadyActiveError(CluedoError):
    """A game is already in progress."""

    code = "game_already_active"


class GameNotActiveError(CluedoError):
    """No game is in progress."""

    code = "game_not_active"


class InsufficientPlayersError(CluedoError):
    """Too few players to start a game."""

    code = "insufficient_players"


class GameStateCorruptedError(RuntimeError):
    """
    The shared game state can no longer be trusted.

    Raised on every call after an unexpected error escaped while the state
    lock was held. Not a CluedoError: callers must not recover from it.
    """
