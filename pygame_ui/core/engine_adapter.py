"""Adapter connecting the core War engine to the PyGame UI."""

from dataclasses import dataclass, field
from random import Random
from typing import Callable, Optional

from core.cards import Card, CardColor
from core.game.engine import WarGame
from core.game.events import EventType, GameEvent
from core.game.state import GameState, Side


@dataclass(frozen=True)
class UICardInfo:
    """Card information for the UI layer."""

    card_id: str
    label: str  # "K", "10", "A", ...
    suit: str  # suit symbol
    is_red: bool
    face_up: bool = True

    @classmethod
    def from_core_card(cls, card: Card, face_up: bool = True) -> "UICardInfo":
        """Create UICardInfo from a core Card."""
        return cls(
            card_id=card.id,
            label=card.rank.label,
            suit=card.suit.value,
            is_red=card.color == CardColor.RED,
            face_up=face_up,
        )


@dataclass
class GameSnapshot:
    """Snapshot of game state for UI rendering."""

    state: GameState
    player_hand: list[UICardInfo]
    bot_hand_size: int
    center_player: Optional[UICardInfo]
    center_bot: Optional[UICardInfo]
    player_score: int
    bot_score: int
    deck_remaining: int
    game_log: list[str] = field(default_factory=list)
    is_game_over: bool = False
    winner: Optional[Side] = None

    @property
    def result_text(self) -> str:
        """Banner text for the game-over overlay."""
        if not self.is_game_over:
            return ""
        return "You Win!" if self.winner == Side.PLAYER else "Bot Wins!"


class EngineAdapter:
    """Adapter between the core WarGame and the PyGame UI.

    Subscribes to engine events and translates them to UI callbacks.
    The UI only ever reads snapshots; cards are played by hand index.
    """

    def __init__(self, rng: Optional[Random] = None):
        """Initialize the adapter and deal the first game.

        Args:
            rng: Random number generator for reproducible deals
        """
        self.game = WarGame(rng=rng)
        self.game.subscribe(self._handle_event)

        # UI callbacks
        self._on_round_result: Optional[Callable[[str, str], None]] = None
        self._on_cards_drawn: Optional[Callable[[], None]] = None
        self._on_game_over: Optional[Callable[[Side], None]] = None
        self._on_invalid_action: Optional[Callable[[str], None]] = None

        self.game.start_new_game()

    def set_callbacks(
        self,
        on_round_result: Optional[Callable[[str, str], None]] = None,
        on_cards_drawn: Optional[Callable[[], None]] = None,
        on_game_over: Optional[Callable[[Side], None]] = None,
        on_invalid_action: Optional[Callable[[str], None]] = None,
    ) -> None:
        """Register UI callbacks.

        Args:
            on_round_result: Called with (outcome name, log message)
            on_cards_drawn: Called when a draw hands each side a new card
            on_game_over: Called with the winning side
            on_invalid_action: Called with an error message
        """
        self._on_round_result = on_round_result
        self._on_cards_drawn = on_cards_drawn
        self._on_game_over = on_game_over
        self._on_invalid_action = on_invalid_action

    def _handle_event(self, event: GameEvent) -> None:
        """Handle events from the core engine."""
        etype = event.event_type
        data = event.data

        if etype == EventType.ROUND_ENDED:
            if self._on_round_result:
                self._on_round_result(data["outcome"], data["message"])
        elif etype == EventType.CARDS_DRAWN:
            if self._on_cards_drawn:
                self._on_cards_drawn()
        elif etype == EventType.GAME_ENDED:
            if self._on_game_over:
                self._on_game_over(Side(data["winner"]))
        elif etype == EventType.INVALID_ACTION:
            if self._on_invalid_action:
                self._on_invalid_action(data.get("message", "Invalid action"))

    def new_game(self) -> None:
        """Shuffle and deal a fresh game."""
        self.game.start_new_game()

    def play_card_at(self, index: int) -> bool:
        """Play the player's card at the given hand position.

        Returns:
            True if a round was played
        """
        hand = self.game.player_hand
        if not 0 <= index < len(hand):
            return False
        return self.game.play_card(hand[index])

    def snapshot(self) -> GameSnapshot:
        """Capture what the table should show right now."""
        game = self.game
        center = game.center_cards
        return GameSnapshot(
            state=game.state,
            player_hand=[UICardInfo.from_core_card(c) for c in game.player_hand],
            bot_hand_size=len(game.bot_hand),
            center_player=UICardInfo.from_core_card(center.player) if center.player else None,
            center_bot=UICardInfo.from_core_card(center.bot) if center.bot else None,
            player_score=game.player_score,
            bot_score=game.bot_score,
            deck_remaining=len(game.deck),
            game_log=list(game.game_log),
            is_game_over=game.is_game_over,
            winner=game.winner,
        )
