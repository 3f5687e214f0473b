"""Game API endpoints."""

from fastapi import APIRouter, HTTPException, Header
from typing import Annotated, Any

from api.schemas import (
    CardResponse,
    CenterCardsResponse,
    GameStateResponse,
    NewGameResponse,
    PlayCardRequest,
)
from api.session import (
    create_session,
    extract_session_id,
    get_session_store,
    load_game_state,
    save_game_state,
)
from core.cards import Card
from core.game import CenterCards, WarGame

router = APIRouter()

# Live engines for sessions the store still holds
_games: dict[str, WarGame] = {}


def _serialize_card(card: Card | None) -> str | None:
    """Serialize a card to its id."""
    return card.id if card is not None else None


def _deserialize_card(data: str | None) -> Card | None:
    """Deserialize a card from its id."""
    return Card.from_string(data) if data is not None else None


def _serialize_cards(cards: tuple[Card, ...]) -> list[str]:
    return [card.id for card in cards]


def _deserialize_cards(data: list[str]) -> list[Card]:
    return [Card.from_string(card_id) for card_id in data]


def _serialize_game(game: WarGame) -> dict[str, Any]:
    """Serialize game state for session storage."""
    return {
        "state": game._machine_state,
        "deck": _serialize_cards(game.deck),
        "player_hand": _serialize_cards(game.player_hand),
        "bot_hand": _serialize_cards(game.bot_hand),
        "discard": _serialize_cards(game.discard_pile),
        "center_cards": {
            "player": _serialize_card(game.center_cards.player),
            "bot": _serialize_card(game.center_cards.bot),
        },
        "player_score": game.player_score,
        "bot_score": game.bot_score,
        "game_log": list(game.game_log),
    }


def _deserialize_game(data: dict[str, Any]) -> WarGame:
    """Restore game from session data."""
    game = WarGame()
    if data["state"] == "idle":
        return game

    game.load_state(
        deck=_deserialize_cards(data["deck"]),
        player_hand=_deserialize_cards(data["player_hand"]),
        bot_hand=_deserialize_cards(data["bot_hand"]),
        discard=_deserialize_cards(data["discard"]),
        center_cards=CenterCards(
            player=_deserialize_card(data["center_cards"]["player"]),
            bot=_deserialize_card(data["center_cards"]["bot"]),
        ),
        player_score=data["player_score"],
        bot_score=data["bot_score"],
        game_log=data["game_log"],
    )
    return game


async def _load_game(session_id: str) -> WarGame | None:
    """Load game from session store."""
    data = await load_game_state(session_id)
    return _deserialize_game(data) if data is not None else None


async def _save_game(session_id: str, game: WarGame) -> None:
    """Save game to session store."""
    await save_game_state(session_id, _serialize_game(game))


def _new_game() -> WarGame:
    game = WarGame()
    game.start_new_game()
    return game


def _verify_session(session_id: str) -> None:
    """Reject session ids that were not signed by this server or have aged out."""
    if extract_session_id(session_id) is None:
        raise HTTPException(status_code=401, detail="Invalid or expired session")


async def _prune_games() -> None:
    """Drop cached engines whose sessions the store has expired."""
    store = await get_session_store()
    for session_id in list(_games):
        if not await store.exists(session_id):
            del _games[session_id]


async def _get_game(session_id: str) -> WarGame:
    """
    Get the session's game, dealing a fresh one if the session is new or expired.

    The session store decides whether a session is still alive; the engine
    cache only saves rebuilding a live game from its serialized form.
    """
    data = await load_game_state(session_id)
    if data is None:
        _games.pop(session_id, None)
        game = _new_game()
        _games[session_id] = game
        await _save_game(session_id, game)
        return game

    if session_id not in _games:
        _games[session_id] = _deserialize_game(data)
    return _games[session_id]


def _card_to_response(card: Card | None) -> CardResponse | None:
    """Convert a Card to CardResponse."""
    if card is None:
        return None
    return CardResponse(
        id=card.id,
        rank=card.rank.label,
        suit=card.suit.value,
        value=card.value,
        color=card.color.value,
    )


def _game_state_response(game: WarGame) -> GameStateResponse:
    """Convert game state to response. The bot's hand and the deck stay hidden."""
    winner = game.winner
    return GameStateResponse(
        state=game.state.name,
        player_hand=[_card_to_response(c) for c in game.player_hand],
        bot_hand_size=len(game.bot_hand),
        deck_remaining=len(game.deck),
        discard_size=len(game.discard_pile),
        center_cards=CenterCardsResponse(
            player=_card_to_response(game.center_cards.player),
            bot=_card_to_response(game.center_cards.bot),
        ),
        player_score=game.player_score,
        bot_score=game.bot_score,
        game_log=list(game.game_log),
        is_game_over=game.is_game_over,
        winner=winner.value if winner else None,
    )


@router.post("/new")
async def new_game(
    session_id: Annotated[str | None, Header(alias="X-Session-ID")] = None,
) -> NewGameResponse:
    """Deal a new game, creating a session if none was given."""
    if session_id is None:
        await _prune_games()
        session_id = await create_session()
    else:
        _verify_session(session_id)

    game = _new_game()
    _games[session_id] = game
    await _save_game(session_id, game)

    return NewGameResponse(session_id=session_id)


@router.get("/state")
async def get_state(
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Get current game state."""
    _verify_session(session_id)
    game = await _get_game(session_id)
    return _game_state_response(game)


@router.post("/play")
async def play_card(
    request: PlayCardRequest,
    session_id: Annotated[str, Header(alias="X-Session-ID")],
) -> GameStateResponse:
    """Play one of the player's cards against the bot's top card."""
    _verify_session(session_id)
    game = await _get_game(session_id)

    try:
        card = Card.from_string(request.card_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if game.is_game_over:
        raise HTTPException(status_code=400, detail="Game is over")

    if not game.play_card(card):
        raise HTTPException(status_code=400, detail=f"Cannot play {card} now")

    await _save_game(session_id, game)
    return _game_state_response(game)
