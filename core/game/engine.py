"""War game engine with state machine."""

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable, Iterable

from transitions import Machine

from core.cards import DECK_SIZE, Card, Deck
from core.hand import Hand
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import GameState, RoundOutcome, Side

logger = logging.getLogger(__name__)

# Cards dealt to each side at the start of a game
HAND_SIZE = 7

# Cards each side draws from the reserve after a draw
DRAW_COUNT = 1


@dataclass(frozen=True)
class CenterCards:
    """The most recently played pair, shown face up until the next round."""

    player: Card | None = None
    bot: Card | None = None

    @property
    def is_empty(self) -> bool:
        """Check if no round has been played yet."""
        return self.player is None and self.bot is None

    def cards(self) -> list[Card]:
        """Return the occupied slots."""
        return [c for c in (self.player, self.bot) if c is not None]

    def __len__(self) -> int:
        return len(self.cards())


class WarGame:
    """
    Human vs. bot War engine using a state machine.

    This is the core game logic, completely UI-agnostic. Presentation layers
    call start_new_game() and play_card(), then read the state back through
    the read-only properties or follow the emitted events.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal", "source": "*", "dest": "player_turn"},
        {"trigger": "continue_play", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "finish", "source": "player_turn", "dest": "game_over"},
    ]

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize an engine with nothing dealt.

        Args:
            rng: Random number generator for reproducible games
        """
        self._rng = rng or Random()
        self._deck = Deck()
        self._player_hand = Hand()
        self._bot_hand = Hand()
        self._discard: list[Card] = []
        self._center = CenterCards()
        self._player_score = 0
        self._bot_score = 0
        self._log: list[str] = []
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    # Read-only views for presentation layers

    @property
    def deck(self) -> tuple[Card, ...]:
        return self._deck.cards

    @property
    def player_hand(self) -> tuple[Card, ...]:
        return tuple(self._player_hand)

    @property
    def bot_hand(self) -> tuple[Card, ...]:
        return tuple(self._bot_hand)

    @property
    def discard_pile(self) -> tuple[Card, ...]:
        """Cards from earlier rounds, oldest first."""
        return tuple(self._discard)

    @property
    def center_cards(self) -> CenterCards:
        return self._center

    @property
    def player_score(self) -> int:
        return self._player_score

    @property
    def bot_score(self) -> int:
        return self._bot_score

    @property
    def game_log(self) -> tuple[str, ...]:
        """Round outcome messages, newest first."""
        return tuple(self._log)

    @property
    def is_game_over(self) -> bool:
        """The game ends once both hands are empty."""
        return self.state == GameState.GAME_OVER

    @property
    def winner(self) -> Side | None:
        """
        The winning side once the game is over.

        An exact score tie is reported as a bot win.
        """
        if not self.is_game_over:
            return None
        return Side.PLAYER if self._player_score > self._bot_score else Side.BOT

    def start_new_game(self) -> None:
        """Shuffle a fresh deck, deal both hands and reset scores and log."""
        self.events.clear_history()
        self._deck = Deck.shuffled(self._rng)
        self.events.emit_new(EventType.DECK_SHUFFLED, cards=len(self._deck))

        self._player_hand = Hand(self._deck.deal(HAND_SIZE))
        self._bot_hand = Hand(self._deck.deal(HAND_SIZE))
        self._discard = []
        self._center = CenterCards()
        self._player_score = 0
        self._bot_score = 0
        self._log = []

        self.deal()
        logger.debug(
            "New game dealt: %d cards each, %d in reserve",
            HAND_SIZE,
            len(self._deck),
        )
        self.events.emit_new(
            EventType.GAME_STARTED,
            hand_size=HAND_SIZE,
            deck_remaining=len(self._deck),
        )

    def play_card(self, card: Card) -> bool:
        """
        Play one round: the player's chosen card against the bot's top card.

        Args:
            card: A card from the player's hand

        Returns:
            True if a round was played. False when the bot has no cards left
            (game not started or already over) or the card is not in hand.
        """
        if self._bot_hand.is_empty or self.state != GameState.PLAYER_TURN:
            return False

        if card not in self._player_hand:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message=f"{card} is not in the player's hand",
                card=str(card),
            )
            return False

        player_card = self._player_hand.remove(card)
        bot_card = self._bot_hand.take_top()

        self._discard.extend(self._center.cards())
        self._center = CenterCards(player=player_card, bot=bot_card)
        self.events.emit_new(EventType.CARD_PLAYED, side=Side.PLAYER.value, card=str(player_card))
        self.events.emit_new(EventType.CARD_PLAYED, side=Side.BOT.value, card=str(bot_card))

        outcome = self._compare(player_card, bot_card)
        if outcome == RoundOutcome.PLAYER_WINS:
            self._player_score += 1
            message = f"Player wins with {player_card} vs {bot_card}"
        elif outcome == RoundOutcome.BOT_WINS:
            self._bot_score += 1
            message = f"Bot wins with {bot_card} vs {player_card}"
        else:
            message = f"Draw with {player_card}, Draw {DRAW_COUNT} card"

        self._log.insert(0, message)
        logger.debug(message)

        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome.name,
            player_card=str(player_card),
            bot_card=str(bot_card),
            player_score=self._player_score,
            bot_score=self._bot_score,
            message=message,
        )

        if outcome == RoundOutcome.DRAW:
            self._draw_after_tie()

        return self._advance()

    @staticmethod
    def _compare(player_card: Card, bot_card: Card) -> RoundOutcome:
        """Compare card values."""
        if player_card.value > bot_card.value:
            return RoundOutcome.PLAYER_WINS
        if player_card.value < bot_card.value:
            return RoundOutcome.BOT_WINS
        return RoundOutcome.DRAW

    def _draw_after_tie(self) -> None:
        """Give each side one card from the reserve, if it can cover both."""
        needed = DRAW_COUNT * 2
        if len(self._deck) < needed:
            self.events.emit_new(EventType.DRAW_SKIPPED, deck_remaining=len(self._deck))
            return

        player_draw, bot_draw = self._deck.deal(needed)
        self._player_hand.add_card(player_draw)
        self._bot_hand.add_card(bot_draw)
        self.events.emit_new(
            EventType.CARDS_DRAWN,
            player_card=str(player_draw),
            bot_card=str(bot_draw),
            deck_remaining=len(self._deck),
        )

    def _advance(self) -> bool:
        """Stay on the player's turn, or end the game once both hands are empty."""
        if self._player_hand.is_empty and self._bot_hand.is_empty:
            self.finish()
            winner = self.winner
            logger.info(
                "Game over: %s wins %d-%d",
                winner,
                self._player_score,
                self._bot_score,
            )
            self.events.emit_new(
                EventType.GAME_ENDED,
                winner=winner.value if winner else None,
                player_score=self._player_score,
                bot_score=self._bot_score,
            )
            return True

        self.continue_play()
        return True

    def load_state(
        self,
        deck: Iterable[Card],
        player_hand: Iterable[Card],
        bot_hand: Iterable[Card],
        discard: Iterable[Card] = (),
        center_cards: CenterCards | None = None,
        player_score: int = 0,
        bot_score: int = 0,
        game_log: Iterable[str] = (),
    ) -> None:
        """
        Replace the whole game state with explicit zones.

        Raises:
            ValueError: If the zones are not exactly one full deck, or a score
                is negative
        """
        center_cards = center_cards or CenterCards()
        deck, player_hand, bot_hand, discard = (
            list(deck),
            list(player_hand),
            list(bot_hand),
            list(discard),
        )

        every_card = deck + player_hand + bot_hand + discard + center_cards.cards()
        if len(every_card) != DECK_SIZE or len(set(every_card)) != DECK_SIZE:
            raise ValueError(
                f"State must hold each of the {DECK_SIZE} cards exactly once, "
                f"got {len(every_card)} cards ({len(set(every_card))} distinct)"
            )
        if player_score < 0 or bot_score < 0:
            raise ValueError("Scores cannot be negative")

        self._deck = Deck(deck)
        self._player_hand = Hand(player_hand)
        self._bot_hand = Hand(bot_hand)
        self._discard = discard
        self._center = center_cards
        self._player_score = player_score
        self._bot_score = bot_score
        self._log = list(game_log)

        if self._player_hand.is_empty and self._bot_hand.is_empty:
            self.machine.set_state(GameState.GAME_OVER.name.lower(), model=self)
        else:
            self.machine.set_state(GameState.PLAYER_TURN.name.lower(), model=self)
