"""Tests for the game event system."""

from core.game import EventType, GameEvent
from core.game.events import EventEmitter


def test_typed_handler_only_receives_its_type():
    emitter = EventEmitter()
    seen = []
    emitter.subscribe(seen.append, EventType.ROUND_ENDED)

    emitter.emit_new(EventType.CARD_PLAYED, side="player")
    emitter.emit_new(EventType.ROUND_ENDED, outcome="DRAW")

    assert [e.event_type for e in seen] == [EventType.ROUND_ENDED]


def test_catch_all_handler_receives_everything():
    emitter = EventEmitter()
    seen = []
    emitter.subscribe(seen.append)

    emitter.emit_new(EventType.GAME_STARTED)
    emitter.emit_new(EventType.GAME_ENDED, winner="bot")

    assert len(seen) == 2


def test_typed_handlers_run_before_catch_all():
    emitter = EventEmitter()
    order = []
    emitter.subscribe(lambda e: order.append("all"))
    emitter.subscribe(lambda e: order.append("typed"), EventType.CARDS_DRAWN)

    emitter.emit_new(EventType.CARDS_DRAWN)

    assert order == ["typed", "all"]


def test_unsubscribe():
    emitter = EventEmitter()
    seen = []
    emitter.subscribe(seen.append, EventType.GAME_STARTED)

    assert emitter.unsubscribe(seen.append, EventType.GAME_STARTED)
    assert not emitter.unsubscribe(seen.append, EventType.GAME_STARTED)

    emitter.emit_new(EventType.GAME_STARTED)
    assert seen == []


def test_handler_may_unsubscribe_while_handling():
    emitter = EventEmitter()
    calls = []

    def once(event):
        calls.append(event)
        emitter.unsubscribe(once)

    emitter.subscribe(once)
    emitter.emit_new(EventType.GAME_STARTED)
    emitter.emit_new(EventType.GAME_STARTED)

    assert len(calls) == 1


def test_history():
    emitter = EventEmitter()
    event = emitter.emit_new(EventType.INVALID_ACTION, message="nope")

    assert emitter.history == [event]
    emitter.history.clear()
    assert len(emitter.history) == 1

    emitter.clear_history()
    assert emitter.history == []


def test_event_str():
    event = GameEvent(EventType.DRAW_SKIPPED, {"deck_remaining": 1})
    assert str(event) == "DRAW_SKIPPED: {'deck_remaining': 1}"
