"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal


class PlayCardRequest(BaseModel):
    """Request to play a card from the player's hand."""

    card_id: str = Field(..., min_length=2, max_length=5, description="Card id, e.g. 'K♠' or '10H'")


class CardResponse(BaseModel):
    """Card representation."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    rank: str
    suit: str
    value: int
    color: Literal["red", "black"]


class CenterCardsResponse(BaseModel):
    """The most recently played pair."""

    player: CardResponse | None = None
    bot: CardResponse | None = None


class GameStateResponse(BaseModel):
    """Current game state, as far as the player is allowed to see it."""

    state: str
    player_hand: list[CardResponse]
    bot_hand_size: int
    deck_remaining: int
    discard_size: int
    center_cards: CenterCardsResponse
    player_score: int
    bot_score: int
    game_log: list[str]
    is_game_over: bool
    winner: Literal["player", "bot"] | None = None


class NewGameResponse(BaseModel):
    """Session handle for a freshly dealt game."""

    session_id: str
