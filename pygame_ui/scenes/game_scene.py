"""The War table - integrated with the core engine."""

from random import Random
from typing import List, Optional

import pygame

from core.game.state import Side
from pygame_ui.components.button import Button
from pygame_ui.components.card import CardSprite
from pygame_ui.components.panel import Panel
from pygame_ui.config import COLORS, DIMENSIONS
from pygame_ui.core.engine_adapter import EngineAdapter, GameSnapshot
from pygame_ui.scenes.base_scene import BaseScene
from pygame_ui.utils.math_utils import row_positions

# Number keys 1-9 play the matching card in the player's hand
_NUMBER_KEYS = {getattr(pygame, f"K_{n}"): n - 1 for n in range(1, 10)}


class GameScene(BaseScene):
    """Bot hand on top, the played pair in the middle, the player's hand below.

    Scores and the game log sit in panels to the right. Clicking a card (or
    pressing its number) plays a round; the scene rebuilds its sprites from
    an engine snapshot after every change.
    """

    def __init__(self, rng: Optional[Random] = None):
        super().__init__()
        self._rng = rng

        self.engine: Optional[EngineAdapter] = None
        self.snapshot: Optional[GameSnapshot] = None

        self.bot_cards: List[CardSprite] = []
        self.center_cards: List[CardSprite] = []
        self.player_cards: List[CardSprite] = []

        self.score_panel: Optional[Panel] = None
        self.log_panel: Optional[Panel] = None
        self.play_again_button: Optional[Button] = None

        self.status = ""
        self._fonts: dict[int, pygame.font.Font] = {}

    def on_enter(self) -> None:
        """Deal the first game and lay out the table."""
        super().on_enter()

        self.engine = EngineAdapter(rng=self._rng)
        self.engine.set_callbacks(
            on_round_result=self._on_round_result,
            on_game_over=self._on_game_over,
            on_invalid_action=self._on_invalid_action,
        )

        panel_x = DIMENSIONS.SCREEN_WIDTH - DIMENSIONS.MARGIN - DIMENSIONS.SIDE_PANEL_WIDTH
        self.score_panel = Panel(
            panel_x,
            DIMENSIONS.MARGIN,
            DIMENSIONS.SIDE_PANEL_WIDTH,
            DIMENSIONS.SCORE_PANEL_HEIGHT,
            title="Scores",
        )
        log_y = 2 * DIMENSIONS.MARGIN + DIMENSIONS.SCORE_PANEL_HEIGHT
        self.log_panel = Panel(
            panel_x,
            log_y,
            DIMENSIONS.SIDE_PANEL_WIDTH,
            DIMENSIONS.SCREEN_HEIGHT - log_y - DIMENSIONS.MARGIN,
            title="Game Log",
            line_height=22,
        )
        self.play_again_button = Button(
            DIMENSIONS.TABLE_CENTER_X,
            DIMENSIONS.PLAYER_HAND_Y + 70,
            "Play Again",
            on_click=self._new_game,
            enabled=False,
        )

        self._refresh()

    # Engine callbacks

    def _on_round_result(self, outcome: str, message: str) -> None:
        self.status = message

    def _on_game_over(self, winner: Side) -> None:
        self.status = "Game Over!"

    def _on_invalid_action(self, message: str) -> None:
        self.status = message

    # Actions

    def _new_game(self) -> None:
        self.engine.new_game()
        self.status = ""
        self._refresh()

    def _play(self, index: int) -> None:
        if self.engine.play_card_at(index):
            self._refresh()

    def _refresh(self) -> None:
        """Rebuild every sprite and panel from a fresh snapshot."""
        snap = self.engine.snapshot()
        self.snapshot = snap
        w, gap = DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_GAP
        cx = DIMENSIONS.TABLE_CENTER_X

        self.bot_cards = [
            CardSprite(x, DIMENSIONS.BOT_HAND_Y)
            for x in row_positions(snap.bot_hand_size, cx, w, gap)
        ]

        self.center_cards = []
        if snap.center_bot:
            self.center_cards.append(CardSprite(cx - w / 2, DIMENSIONS.CENTER_BOT_Y, snap.center_bot))
        if snap.center_player:
            self.center_cards.append(
                CardSprite(cx - w / 2, DIMENSIONS.CENTER_PLAYER_Y, snap.center_player)
            )

        self.player_cards = [
            CardSprite(x, DIMENSIONS.PLAYER_HAND_Y, info, interactive=not snap.is_game_over)
            for x, info in zip(
                row_positions(len(snap.player_hand), cx, w, gap), snap.player_hand
            )
        ]
        mouse_pos = pygame.mouse.get_pos() if pygame.display.get_init() else (-1, -1)
        for sprite in self.player_cards:
            sprite.update_hover(mouse_pos)

        self.score_panel.set_lines([f"Bot: {snap.bot_score}", f"Your: {snap.player_score}"])
        self.log_panel.set_lines(snap.game_log)
        self.play_again_button.set_enabled(snap.is_game_over)

    def _card_at(self, pos) -> Optional[int]:
        """Index of the player card under pos, topmost first."""
        for index in range(len(self.player_cards) - 1, -1, -1):
            if self.player_cards[index].contains_point(pos):
                return index
        return None

    # Scene loop

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route mouse and keyboard input to the engine."""
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.quit_requested = True
                return True
            if event.key == pygame.K_n:
                self._new_game()
                return True
            if event.key in _NUMBER_KEYS and not self.snapshot.is_game_over:
                self._play(_NUMBER_KEYS[event.key])
                return True
            return False

        if self.play_again_button.handle_event(event):
            return True

        if event.type == pygame.MOUSEMOTION:
            for sprite in self.player_cards:
                sprite.update_hover(event.pos)
            return False

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            index = self._card_at(event.pos)
            if index is not None and not self.snapshot.is_game_over:
                self._play(index)
                return True

        return False

    def update(self, dt: float) -> None:
        for sprite in self.player_cards:
            sprite.update(dt)

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the table, cards, panels and any game-over banner."""
        surface.fill(COLORS.BACKGROUND)
        felt = pygame.Rect(
            DIMENSIONS.MARGIN,
            DIMENSIONS.MARGIN,
            DIMENSIONS.TABLE_WIDTH,
            DIMENSIONS.SCREEN_HEIGHT - 2 * DIMENSIONS.MARGIN,
        )
        pygame.draw.rect(surface, COLORS.FELT_GREEN, felt, border_radius=DIMENSIONS.PANEL_CORNER_RADIUS)

        for sprite in self.bot_cards + self.center_cards + self.player_cards:
            sprite.draw(surface)

        snap = self.snapshot
        deck_text = self._font(22).render(f"Deck: {snap.deck_remaining}", True, COLORS.TEXT_WHITE)
        surface.blit(deck_text, (felt.x + DIMENSIONS.PANEL_PADDING, felt.y + DIMENSIONS.PANEL_PADDING))

        if snap.is_game_over:
            banner = self._font(48).render(f"Game Over! {snap.result_text}", True, COLORS.TEXT_WHITE)
            surface.blit(
                banner,
                banner.get_rect(centerx=DIMENSIONS.TABLE_CENTER_X, centery=self.play_again_button.center_y - 60),
            )
            self.play_again_button.draw(surface)
        elif self.status:
            status = self._font(26).render(self.status, True, COLORS.TEXT_WHITE)
            surface.blit(
                status,
                status.get_rect(centerx=DIMENSIONS.TABLE_CENTER_X, bottom=felt.bottom - DIMENSIONS.PANEL_PADDING),
            )

        self.score_panel.draw(surface)
        self.log_panel.draw(surface)
