"""WebSocket connection management with game engine integration."""

import json
import logging
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status
from typing import Any

from api.routes.game import (
    _games,
    _game_state_response,
    _get_game,
    _new_game,
    _save_game,
)
from api.session import extract_session_id
from core.cards import Card
from core.game import WarGame
from core.game.events import EventHandler, GameEvent

logger = logging.getLogger(__name__)

router = APIRouter()


class ConnectionManager:
    """Track open sockets and the engine events waiting to be sent on each."""

    def __init__(self) -> None:
        self._connections: dict[str, WebSocket] = {}
        self._pending: dict[str, list[GameEvent]] = {}
        self._watched: dict[str, tuple[WarGame, EventHandler]] = {}

    async def connect(self, websocket: WebSocket, session_id: str) -> None:
        """Accept and register a new connection."""
        await websocket.accept()
        self._connections[session_id] = websocket
        self._pending[session_id] = []

    def disconnect(self, session_id: str) -> None:
        """Remove a connection and stop listening to its game."""
        self._connections.pop(session_id, None)
        self._pending.pop(session_id, None)
        self._unwatch(session_id)

    def watch(self, session_id: str, game: WarGame) -> None:
        """Queue every event the game emits for this session, one handler per session."""
        watched = self._watched.get(session_id)
        if watched is not None and watched[0] is game:
            return
        self._unwatch(session_id)

        def handler(event: GameEvent) -> None:
            if session_id in self._pending:
                self._pending[session_id].append(event)

        game.subscribe(handler)
        self._watched[session_id] = (game, handler)

    def _unwatch(self, session_id: str) -> None:
        watched = self._watched.pop(session_id, None)
        if watched is not None:
            game, handler = watched
            game.events.unsubscribe(handler)

    def drain(self, session_id: str) -> list[GameEvent]:
        """Take all queued events for a session."""
        events = self._pending.get(session_id, [])
        self._pending[session_id] = []
        return events

    async def send_message(self, session_id: str, message: dict[str, Any]) -> None:
        """Send a message to a specific session."""
        if session_id in self._connections:
            await self._connections[session_id].send_json(message)

    @property
    def active_connections(self) -> int:
        """Return number of active connections."""
        return len(self._connections)

    @property
    def watched_sessions(self) -> int:
        """Return number of sessions with a game subscription."""
        return len(self._watched)


manager = ConnectionManager()


def _state_dict(game: WarGame) -> dict[str, Any]:
    return _game_state_response(game).model_dump()


def _event_to_message(event: GameEvent, game: WarGame) -> dict[str, Any]:
    """Convert a game event to a WebSocket message."""
    return {
        "type": "event",
        "event_type": event.event_type.name,
        "data": event.data,
        "state": _state_dict(game),
    }


async def _flush_events(session_id: str, game: WarGame) -> None:
    for event in manager.drain(session_id):
        await manager.send_message(session_id, _event_to_message(event, game))


async def _current_game(session_id: str) -> WarGame:
    """The session's game as of now; REST calls may have replaced it."""
    game = await _get_game(session_id)
    manager.watch(session_id, game)
    return game


@router.websocket("/game/{session_id}")
async def game_websocket(websocket: WebSocket, session_id: str) -> None:
    """
    WebSocket endpoint for real-time game updates.

    Messages from client:
    - {"type": "get_state"}
    - {"type": "new_game"}
    - {"type": "play", "card_id": "K♠"}

    Messages to client:
    - {"type": "state_update", "state": {...}}
    - {"type": "event", "event_type": "...", "data": {...}, "state": {...}}
    - {"type": "error", "message": "..."}
    """
    if extract_session_id(session_id) is None:
        await websocket.accept()
        await websocket.send_json({"type": "error", "message": "Invalid or expired session"})
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await manager.connect(websocket, session_id)
    game = await _current_game(session_id)

    await manager.send_message(session_id, {"type": "state_update", "state": _state_dict(game)})

    try:
        while True:
            data = await websocket.receive_text()
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await manager.send_message(session_id, {"type": "error", "message": "Invalid JSON"})
                continue

            msg_type = message.get("type") if isinstance(message, dict) else None

            if msg_type == "get_state":
                game = await _current_game(session_id)
                await manager.send_message(
                    session_id, {"type": "state_update", "state": _state_dict(game)}
                )

            elif msg_type == "new_game":
                game = _new_game()
                _games[session_id] = game
                manager.watch(session_id, game)
                manager.drain(session_id)
                await _save_game(session_id, game)
                await manager.send_message(
                    session_id, {"type": "state_update", "state": _state_dict(game)}
                )

            elif msg_type == "play":
                try:
                    card = Card.from_string(str(message.get("card_id", "")))
                except ValueError as e:
                    await manager.send_message(session_id, {"type": "error", "message": str(e)})
                    continue

                game = await _current_game(session_id)
                if not game.play_card(card):
                    manager.drain(session_id)
                    await manager.send_message(
                        session_id, {"type": "error", "message": f"Cannot play {card} now"}
                    )
                    continue

                await _save_game(session_id, game)
                await _flush_events(session_id, game)

            else:
                await manager.send_message(session_id, {
                    "type": "error",
                    "message": f"Unknown message type: {msg_type}",
                })

    except WebSocketDisconnect:
        logger.debug("Session %s disconnected", session_id[:8])
    finally:
        manager.disconnect(session_id)
