from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from cluedo.cards import Room, Suspect, Weapon
from cluedo.suggestion import Suggestion


class CardDTO(BaseModel):
    kind: str
    value: str


class PlayerResponse(BaseModel):
    name: str
    hand_size: int
    cards: List[CardDTO] = Field(default_factory=list)


class SuggestionDTO(BaseModel):
    suspect: Suspect
    weapon: Weapon
    room: Room

    def to_suggestion(self) -> Suggestion:
        return Suggestion(suspect=self.suspect, weapon=self.weapon, room=self.room)


class GameStateResponse(BaseModel):
    phase: str
    players: List[PlayerResponse]
    solution: Optional[SuggestionDTO] = None


class PublicPlayer(BaseModel):
    name: str
    hand_size: int


class SnapshotResponse(BaseModel):
    phase: str
    players: List[PublicPlayer]
    has_solution: bool
    event_count: int


class SuggestRequest(SuggestionDTO):
    player: str = Field(min_length=1, description="Name of the suggesting player.")


class AccuseRequest(SuggestionDTO):
    player: Optional[str] = Field(default=None, description="Name of the accusing player.")


class RefutationResponse(BaseModel):
    refuted: bool
    refuted_by: Optional[str] = None
    card: Optional[CardDTO] = None


class AccusationResponse(BaseModel):
    correct: bool


class GameEventDTO(BaseModel):
    event_type: str
    player: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)


class GameEventsResponse(BaseModel):
    events: List[GameEventDTO]
    total_events: int


class ErrorResponse(BaseModel):
    error: str
    detail: str
