"""Core War engine - 100% UI-agnostic."""

from core.cards import Card, CardColor, Deck, Rank, Suit, create_deck, shuffle_deck
from core.hand import Hand

__all__ = [
    "Card",
    "CardColor",
    "Deck",
    "Rank",
    "Suit",
    "create_deck",
    "shuffle_deck",
    "Hand",
]
