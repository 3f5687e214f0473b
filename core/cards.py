"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator


class CardColor(Enum):
    """Display color of a card, derived from its suit."""

    RED = "red"
    BLACK = "black"


class Suit(Enum):
    """Card suits, in canonical deck order."""

    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"

    def __str__(self) -> str:
        return self.value

    @property
    def color(self) -> CardColor:
        """Return the display color for this suit."""
        if self in (Suit.HEARTS, Suit.DIAMONDS):
            return CardColor.RED
        return CardColor.BLACK


class Rank(Enum):
    """Card ranks with comparison values, in canonical deck order (K down to A)."""

    KING = 13
    QUEEN = 12
    JACK = 11
    TEN = 10
    NINE = 9
    EIGHT = 8
    SEVEN = 7
    SIX = 6
    FIVE = 5
    FOUR = 4
    THREE = 3
    TWO = 2
    ACE = 1

    def __str__(self) -> str:
        return self.label

    @property
    def label(self) -> str:
        """Return the short rank label ("K", "10", "A", ...)."""
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]


_RANK_LOOKUP = {
    "A": Rank.ACE,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
}

_SUIT_LOOKUP = {
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card, identified by rank label + suit symbol."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def id(self) -> str:
        """Unique id within a standard deck, e.g. "K♠" or "10♥"."""
        return f"{self.rank.label}{self.suit.value}"

    @property
    def value(self) -> int:
        """Return the comparison value (K=13 ... A=1)."""
        return self.rank.value

    @property
    def color(self) -> CardColor:
        """Return the display color."""
        return self.suit.color

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'K♠', '10h', 'TD' or 'AS'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_LOOKUP:
            raise ValueError(f"Invalid rank: {rank_str!r}")
        if suit_str not in _SUIT_LOOKUP:
            raise ValueError(f"Invalid suit: {suit_str!r}")

        return cls(_RANK_LOOKUP[rank_str], _SUIT_LOOKUP[suit_str])


DECK_SIZE = 52


def create_deck() -> list[Card]:
    """Return all 52 cards in canonical order: suit-major, then K down to A."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle_deck(deck: Iterable[Card], rng: Random | None = None) -> list[Card]:
    """
    Return a shuffled copy of the given cards.

    Uses Random.shuffle (Fisher-Yates), so every permutation is equally
    likely. The input is left untouched.
    """
    cards = list(deck)
    (rng or Random()).shuffle(cards)
    return cards


class Deck:
    """The reserve of undealt cards. Cards are always taken from the front."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    @classmethod
    def shuffled(cls, rng: Random | None = None) -> "Deck":
        """Build a full 52-card deck in random order."""
        return cls(shuffle_deck(create_deck(), rng))

    def deal(self, count: int) -> list[Card]:
        """Remove and return the first `count` cards."""
        if count < 0:
            raise ValueError("Cannot deal a negative number of cards")
        if count > len(self._cards):
            raise IndexError(
                f"Cannot deal {count} cards from a deck of {len(self._cards)}"
            )
        dealt, self._cards = self._cards[:count], self._cards[count:]
        return dealt

    @property
    def cards(self) -> tuple[Card, ...]:
        """Read-only view of the remaining cards, front first."""
        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
