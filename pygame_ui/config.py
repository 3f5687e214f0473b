"""Configuration constants for the PyGame War table."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Colors:
    """Color palette for the War UI."""

    # Felt and background
    FELT_GREEN: Tuple[int, int, int] = (20, 83, 45)
    BACKGROUND: Tuple[int, int, int] = (156, 163, 175)

    # Card colors
    CARD_WHITE: Tuple[int, int, int] = (250, 250, 250)
    CARD_RED: Tuple[int, int, int] = (239, 68, 68)
    CARD_BLACK: Tuple[int, int, int] = (15, 23, 42)
    CARD_BACK: Tuple[int, int, int] = (153, 27, 27)
    CARD_BORDER: Tuple[int, int, int] = (255, 255, 255)

    # Effects
    SHADOW: Tuple[int, int, int, int] = (0, 0, 0, 90)

    # Text
    TEXT_WHITE: Tuple[int, int, int] = (240, 240, 240)
    TEXT_DARK: Tuple[int, int, int] = (30, 30, 36)
    TEXT_MUTED: Tuple[int, int, int] = (110, 110, 120)

    # Buttons
    BUTTON_DEFAULT: Tuple[int, int, int] = (250, 250, 250)
    BUTTON_HOVER: Tuple[int, int, int] = (229, 231, 235)
    BUTTON_DISABLED: Tuple[int, int, int] = (180, 180, 185)

    # Panels
    PANEL_BG: Tuple[int, int, int] = (255, 255, 255)
    PANEL_BORDER: Tuple[int, int, int] = (209, 213, 219)


@dataclass(frozen=True)
class Dimensions:
    """Dimension constants for layout and sizing."""

    # Screen
    SCREEN_WIDTH: int = 1280
    SCREEN_HEIGHT: int = 720
    TARGET_FPS: int = 60

    # Table area (left of the side panels)
    MARGIN: int = 24
    SIDE_PANEL_WIDTH: int = 256
    TABLE_WIDTH: int = SCREEN_WIDTH - SIDE_PANEL_WIDTH - 3 * MARGIN
    TABLE_CENTER_X: int = MARGIN + TABLE_WIDTH // 2

    # Cards
    CARD_WIDTH: int = 64
    CARD_HEIGHT: int = 96
    CARD_CORNER_RADIUS: int = 8
    CARD_SHADOW_OFFSET: int = 3
    CARD_GAP: int = 8
    HOVER_LIFT: int = 8

    # Rows
    BOT_HAND_Y: int = 110
    CENTER_BOT_Y: int = 280
    CENTER_PLAYER_Y: int = 390
    PLAYER_HAND_Y: int = 560

    # UI Elements
    BUTTON_WIDTH: int = 160
    BUTTON_HEIGHT: int = 44
    BUTTON_CORNER_RADIUS: int = 8
    PANEL_PADDING: int = 16
    PANEL_CORNER_RADIUS: int = 8
    SCORE_PANEL_HEIGHT: int = 120


# Smoothing rate for hover lift, per second
HOVER_SPEED = 18.0


# Global instances for easy import
COLORS = Colors()
DIMENSIONS = Dimensions()
