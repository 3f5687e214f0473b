"""Clickable button component."""

from enum import Enum, auto
from typing import Callable, Optional, Tuple

import pygame

from pygame_ui.config import COLORS, DIMENSIONS


class ButtonState(Enum):
    """Visual state of a button."""

    NORMAL = auto()
    HOVERED = auto()
    PRESSED = auto()
    DISABLED = auto()


class Button:
    """A rounded button that fires on_click when released over itself."""

    def __init__(
        self,
        x: float,
        y: float,
        text: str,
        on_click: Optional[Callable[[], None]] = None,
        width: int = DIMENSIONS.BUTTON_WIDTH,
        height: int = DIMENSIONS.BUTTON_HEIGHT,
        font_size: int = 30,
        enabled: bool = True,
    ):
        """Initialize a button.

        Args:
            x: Center x
            y: Center y
            text: Label
            on_click: Callback when clicked
            width: Button width
            height: Button height
            font_size: Label font size
            enabled: Whether the button is interactive
        """
        self.text = text
        self.on_click = on_click
        self.width = width
        self.height = height
        self.font_size = font_size
        self.center_x = x
        self.center_y = y
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED
        self._is_pressed = False
        self._font: Optional[pygame.font.Font] = None

    @property
    def enabled(self) -> bool:
        return self.state != ButtonState.DISABLED

    def set_enabled(self, enabled: bool) -> None:
        self._is_pressed = False
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    @property
    def rect(self) -> pygame.Rect:
        """Get the button's rectangle."""
        return pygame.Rect(
            int(self.center_x - self.width / 2),
            int(self.center_y - self.height / 2),
            self.width,
            self.height,
        )

    def contains_point(self, point: Tuple[float, float]) -> bool:
        return self.rect.collidepoint(point)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle a pygame event.

        Returns:
            True if the button was clicked
        """
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEMOTION and not self._is_pressed:
            hovered = self.contains_point(event.pos)
            self.state = ButtonState.HOVERED if hovered else ButtonState.NORMAL

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.contains_point(event.pos):
                self._is_pressed = True
                self.state = ButtonState.PRESSED

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self._is_pressed:
            self._is_pressed = False
            if self.contains_point(event.pos):
                self.state = ButtonState.HOVERED
                if self.on_click:
                    self.on_click()
                return True
            self.state = ButtonState.NORMAL

        return False

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the button."""
        if self.state == ButtonState.DISABLED:
            bg_color, text_color = COLORS.BUTTON_DISABLED, COLORS.TEXT_MUTED
        elif self.state in (ButtonState.HOVERED, ButtonState.PRESSED):
            bg_color, text_color = COLORS.BUTTON_HOVER, COLORS.TEXT_DARK
        else:
            bg_color, text_color = COLORS.BUTTON_DEFAULT, COLORS.TEXT_DARK

        rect = self.rect
        if self.state == ButtonState.PRESSED:
            rect = rect.move(0, 2)

        pygame.draw.rect(surface, bg_color, rect, border_radius=DIMENSIONS.BUTTON_CORNER_RADIUS)
        label = self.font.render(self.text, True, text_color)
        surface.blit(label, label.get_rect(center=rect.center))
