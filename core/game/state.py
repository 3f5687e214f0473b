"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game lifecycle states.

    Flow: IDLE → PLAYER_TURN → (one round per card) → GAME_OVER
    """

    # Engine built, nothing dealt yet
    IDLE = auto()

    # Waiting for the player to pick a card
    PLAYER_TURN = auto()

    # Both hands empty
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class Side(Enum):
    """The two sides at the table."""

    PLAYER = "player"
    BOT = "bot"

    def __str__(self) -> str:
        return self.name.title()


class RoundOutcome(Enum):
    """Result of comparing the two played cards."""

    PLAYER_WINS = auto()
    BOT_WINS = auto()
    DRAW = auto()

