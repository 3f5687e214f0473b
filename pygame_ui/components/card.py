"""Card sprite: a face-up or face-down card with a hover lift."""

from enum import Enum, auto
from typing import Optional, Tuple

import pygame

from pygame_ui.config import COLORS, DIMENSIONS, HOVER_SPEED
from pygame_ui.core.engine_adapter import UICardInfo
from pygame_ui.utils.math_utils import clamp, lerp


class CardState(Enum):
    """Visual state of a card."""

    IDLE = auto()
    HOVERED = auto()


class CardSprite:
    """One card on the table.

    Face-up cards show rank and suit in the suit's color; face-down cards
    show the red back. Interactive cards lift while hovered.
    """

    def __init__(
        self,
        x: float,
        y: float,
        info: Optional[UICardInfo] = None,
        interactive: bool = False,
    ):
        """
        Args:
            x: Left edge
            y: Top edge
            info: Card to show, or None for a face-down card
            interactive: Whether the card reacts to the mouse
        """
        self.x = x
        self.y = y
        self.info = info
        self.interactive = interactive
        self.state = CardState.IDLE

        self._lift = 0.0
        self._font: Optional[pygame.font.Font] = None

    @property
    def face_up(self) -> bool:
        return self.info is not None and self.info.face_up

    @property
    def rect(self) -> pygame.Rect:
        """Hit box, at the resting position."""
        return pygame.Rect(int(self.x), int(self.y), DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT)

    def contains_point(self, point: Tuple[float, float]) -> bool:
        return self.rect.collidepoint(point)

    def update_hover(self, mouse_pos: Tuple[float, float]) -> None:
        """Track whether the mouse is over this card."""
        if self.interactive and self.contains_point(mouse_pos):
            self.state = CardState.HOVERED
        else:
            self.state = CardState.IDLE

    def update(self, dt: float) -> None:
        """Ease the hover lift toward its target."""
        target = DIMENSIONS.HOVER_LIFT if self.state == CardState.HOVERED else 0.0
        self._lift = lerp(self._lift, target, clamp(HOVER_SPEED * dt, 0.0, 1.0))

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, 34)
        return self._font

    def draw(self, surface: pygame.Surface) -> None:
        """Draw shadow, body and face (or back)."""
        w, h = DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT
        radius = DIMENSIONS.CARD_CORNER_RADIUS
        x, y = int(self.x), int(self.y - self._lift)

        shadow = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.rect(shadow, COLORS.SHADOW, shadow.get_rect(), border_radius=radius)
        offset = DIMENSIONS.CARD_SHADOW_OFFSET
        surface.blit(shadow, (x + offset, y + offset))

        body = pygame.Rect(x, y, w, h)
        if not self.face_up:
            pygame.draw.rect(surface, COLORS.CARD_BACK, body, border_radius=radius)
            pygame.draw.rect(surface, COLORS.CARD_BORDER, body, width=1, border_radius=radius)
            return

        pygame.draw.rect(surface, COLORS.CARD_WHITE, body, border_radius=radius)
        color = COLORS.CARD_RED if self.info.is_red else COLORS.CARD_BLACK
        text = self.font.render(f"{self.info.label}{self.info.suit}", True, color)
        surface.blit(text, text.get_rect(center=body.center))
