"""Side panels: a titled white box, and a scrolling text list."""

from typing import List, Optional, Sequence

import pygame

from pygame_ui.config import COLORS, DIMENSIONS


class Panel:
    """A rounded panel with a bold title and lines of body text."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        title: str,
        line_height: int = 24,
    ):
        """Initialize a panel.

        Args:
            x: Left edge
            y: Top edge
            width: Panel width
            height: Panel height
            title: Heading shown at the top
            line_height: Vertical distance between body lines
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.title = title
        self.line_height = line_height
        self.lines: List[str] = []

        self._title_font: Optional[pygame.font.Font] = None
        self._body_font: Optional[pygame.font.Font] = None

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    @property
    def capacity(self) -> int:
        """How many body lines fit under the title."""
        body_height = self.height - 2 * DIMENSIONS.PANEL_PADDING - 36
        return max(0, int(body_height // self.line_height))

    def set_lines(self, lines: Sequence[str]) -> None:
        """Replace the body text. Lines past the panel's capacity are not drawn."""
        self.lines = list(lines)

    def visible_lines(self) -> List[str]:
        return self.lines[: self.capacity]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the panel background, title and visible lines."""
        if self._title_font is None:
            self._title_font = pygame.font.Font(None, 32)
            self._body_font = pygame.font.Font(None, 22)

        rect = self.rect
        pygame.draw.rect(surface, COLORS.PANEL_BG, rect, border_radius=DIMENSIONS.PANEL_CORNER_RADIUS)
        pygame.draw.rect(
            surface,
            COLORS.PANEL_BORDER,
            rect,
            width=1,
            border_radius=DIMENSIONS.PANEL_CORNER_RADIUS,
        )

        pad = DIMENSIONS.PANEL_PADDING
        title = self._title_font.render(self.title, True, COLORS.TEXT_DARK)
        surface.blit(title, (rect.x + pad, rect.y + pad))

        y = rect.y + pad + 36
        for line in self.visible_lines():
            text = self._body_font.render(line, True, COLORS.TEXT_DARK)
            surface.blit(text, (rect.x + pad, y))
            y += self.line_height
