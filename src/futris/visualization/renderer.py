from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from futris.game.shapes import ShapeKind, color

EMPTY_COLOR: Tuple[int, int, int] = (20, 20, 26)


def rgb_for_value(v: int) -> Tuple[int, int, int]:
    """Map a grid value (0, a kind id, or a negated kind id for the falling piece) to RGB."""
    if v == 0:
        return EMPTY_COLOR
    r, g, b, _ = color(ShapeKind(abs(v)))
    return int(round(r * 255)), int(round(g * 255)), int(round(b * 255))


class Renderer:
    def __init__(self, cell_size: int = 28, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        return width * self.cell_size + self.margin * 2, height * self.cell_size + self.margin * 3

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, rgb_for_value(int(state[y, x])), rect)
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray, score: int) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 24)
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(state), (self.margin, self.margin * 2))
        text = self._font.render(f"Score: {score}", True, (230, 230, 230))
        screen.blit(text, (self.margin, self.margin // 2))
