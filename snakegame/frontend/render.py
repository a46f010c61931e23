from __future__ import annotations

import pygame

from ..domain import GameState
from .colors import Color, food_appearance, lighten

BACKGROUND = (0, 0, 0)
GRID_LINE = (17, 17, 17)
TEXT = (255, 255, 255)
HEAD_LIGHTEN = 40
HUD_HEIGHT = 28
PANEL_WIDTH = 160
PANEL_BACKGROUND = (12, 12, 12)


class Renderer:
    """Draws GameState snapshots onto a pygame surface."""

    def __init__(self, tile: int, snake_color: Color, food_style: str):
        self.tile = tile
        self.snake_color = snake_color
        self.head_color = lighten(snake_color, HEAD_LIGHTEN)
        self.food_style = food_style
        self._food_key = None
        self._food_look = food_appearance(food_style)
        self.font = pygame.font.SysFont(None, 22)
        self.big_font = pygame.font.SysFont(None, 40)

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(x * self.tile, HUD_HEIGHT + y * self.tile, self.tile, self.tile)

    def draw(self, screen: pygame.Surface, state: GameState, panel_lines: list[str]) -> None:
        screen.fill(BACKGROUND)
        self._draw_grid(screen, state)
        self._draw_food(screen, state)
        self._draw_snake(screen, state)
        self._draw_hud(screen, state)
        if state.is_over:
            self._draw_game_over(screen, state)
        self._draw_panel(screen, state, panel_lines)
        pygame.display.flip()

    def _draw_grid(self, screen: pygame.Surface, state: GameState) -> None:
        bottom = HUD_HEIGHT + state.height * self.tile
        right = state.width * self.tile
        for x in range(state.width + 1):
            pygame.draw.line(screen, GRID_LINE, (x * self.tile, HUD_HEIGHT), (x * self.tile, bottom))
        for y in range(state.height + 1):
            py = HUD_HEIGHT + y * self.tile
            pygame.draw.line(screen, GRID_LINE, (0, py), (right, py))

    def _draw_food(self, screen: pygame.Surface, state: GameState) -> None:
        if state.food is None:
            return
        # "random" picks a new colour per food item, not per frame
        if state.food != self._food_key:
            self._food_key = state.food
            self._food_look = food_appearance(self.food_style)
        color, shape = self._food_look

        rect = self._cell_rect(*state.food)
        if shape == "circle":
            pygame.draw.circle(screen, color, rect.center, self.tile / 2.2)
        elif shape == "diamond":
            pygame.draw.polygon(screen, color, [rect.midtop, rect.midright, rect.midbottom, rect.midleft])
        else:
            pygame.draw.rect(screen, color, rect)

    def _draw_snake(self, screen: pygame.Surface, state: GameState) -> None:
        for idx, (x, y) in enumerate(state.snake):
            color = self.head_color if idx == 0 else self.snake_color
            pygame.draw.rect(screen, color, self._cell_rect(x, y))

    def _draw_hud(self, screen: pygame.Surface, state: GameState) -> None:
        label = f"Score: {state.score}   Best: {state.best_score}   [{state.state.value}]"
        screen.blit(self.font.render(label, True, TEXT), (6, 6))

    def _draw_panel(self, screen: pygame.Surface, state: GameState, lines: list[str]) -> None:
        left = state.width * self.tile
        pygame.draw.rect(screen, PANEL_BACKGROUND, (left, 0, PANEL_WIDTH, screen.get_height()))
        y = HUD_HEIGHT
        for text in lines:
            surf = self.font.render(text, True, TEXT)
            screen.blit(surf, (left + 10, y))
            y += surf.get_height() + 6

    def _draw_game_over(self, screen: pygame.Surface, state: GameState) -> None:
        board = (state.width * self.tile, screen.get_height())
        overlay = pygame.Surface(board, pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 166))
        screen.blit(overlay, (0, 0))

        cx = board[0] // 2
        cy = screen.get_height() // 2
        title = "You Win" if state.end_reason == "board_full" else "Game Over"
        lines = [
            (self.big_font, title),
            (self.font, f"Score: {state.score}"),
            (self.font, "Press Space to play again"),
        ]

        y = cy - 20 * len(lines)
        for font, text in lines:
            surf = font.render(text, True, TEXT)
            screen.blit(surf, surf.get_rect(center=(cx, y)))
            y += surf.get_height() + 8
