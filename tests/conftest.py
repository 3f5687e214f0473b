"""Pytest fixtures for War tests."""

from random import Random

import pytest

from core.cards import Card, create_deck
from core.game import CenterCards, WarGame


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def game(rng):
    """A freshly dealt game."""
    g = WarGame(rng=rng)
    g.start_new_game()
    return g


def _arrange(
    player: list[str],
    bot: list[str],
    deck: list[str] | None = None,
    deck_size: int | None = None,
    center: tuple[str, str] | None = None,
    player_score: int = 0,
    bot_score: int = 0,
) -> WarGame:
    """
    Build a game with exact hands.

    `deck` puts named cards at the front of the reserve; `deck_size` fills
    the reserve up to that many cards from the unused ones. Every card not
    placed anywhere goes to the discard pile, so the full deck is accounted for.
    """
    player_cards = [Card.from_string(c) for c in player]
    bot_cards = [Card.from_string(c) for c in bot]
    deck_cards = [Card.from_string(c) for c in (deck or [])]
    center_cards = (
        CenterCards(Card.from_string(center[0]), Card.from_string(center[1]))
        if center
        else CenterCards()
    )

    used = set(player_cards + bot_cards + deck_cards + center_cards.cards())
    unused = [c for c in create_deck() if c not in used]

    if deck_size is not None:
        extra = deck_size - len(deck_cards)
        deck_cards += unused[:extra]
        unused = unused[extra:]

    g = WarGame(rng=Random(0))
    g.load_state(
        deck=deck_cards,
        player_hand=player_cards,
        bot_hand=bot_cards,
        discard=unused,
        center_cards=center_cards,
        player_score=player_score,
        bot_score=bot_score,
    )
    return g


def _total_cards(g: WarGame) -> int:
    return (
        len(g.player_hand)
        + len(g.bot_hand)
        + len(g.deck)
        + len(g.discard_pile)
        + len(g.center_cards)
    )


@pytest.fixture
def arrange():
    """Factory for games with exact hands, reserve and scores."""
    return _arrange


@pytest.fixture
def total_cards():
    """Counts cards across every zone of a game."""
    return _total_cards
