"""UI components for the War table."""

from pygame_ui.components.card import CardSprite, CardState
from pygame_ui.components.panel import Panel
from pygame_ui.components.button import Button, ButtonState

__all__ = [
    "CardSprite",
    "CardState",
    "Panel",
    "Button",
    "ButtonState",
]
