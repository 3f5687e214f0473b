"""Ordered hand of cards held by one side."""

from dataclasses import dataclass, field
from typing import Iterator

from core.cards import Card


@dataclass
class Hand:
    """Cards held by the player or the bot, in the order they were received."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the end of the hand."""
        self.cards.append(card)

    def add_cards(self, cards: list[Card]) -> None:
        """Add several cards to the end of the hand."""
        self.cards.extend(cards)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    def find(self, card_id: str) -> Card | None:
        """Return the card with the given id, if held."""
        for card in self.cards:
            if card.id == card_id:
                return card
        return None

    def remove(self, card: Card) -> Card:
        """
        Remove a card by identity, wherever it sits in the hand.

        Raises:
            ValueError: If the card is not in the hand
        """
        for i, held in enumerate(self.cards):
            if held.id == card.id:
                return self.cards.pop(i)
        raise ValueError(f"{card} is not in hand")

    def take_top(self) -> Card:
        """Remove and return the first card."""
        if not self.cards:
            raise IndexError("Cannot take from an empty hand")
        return self.cards.pop(0)

    @property
    def top(self) -> Card | None:
        """The first card, or None for an empty hand."""
        return self.cards[0] if self.cards else None

    @property
    def is_empty(self) -> bool:
        """Check if the hand holds no cards."""
        return not self.cards

    def __contains__(self, card: object) -> bool:
        return isinstance(card, Card) and self.find(card.id) is not None

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)
