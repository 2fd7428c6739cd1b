"""Blocks that scroll towards the player."""

from __future__ import annotations

import pygame

OBSTACLE_SIZE = 30
SPEED = 5
RESET_X = 800
FILL_COLOR = (0, 0, 255)
BORDER_COLOR = (0, 0, 0)


class Obstacle:
    """A square that moves left and reappears on the right edge."""

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.x = x
        self.y = y

    def advance(self, step: int) -> None:
        if not step:
            return
        self.x -= SPEED
        if self.x < -OBSTACLE_SIZE:
            self.x = RESET_X

    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, OBSTACLE_SIZE, OBSTACLE_SIZE)

    def mask(self) -> pygame.mask.Mask:
        return pygame.mask.Mask((OBSTACLE_SIZE, OBSTACLE_SIZE), fill=True)

    def draw(self, surface: pygame.Surface) -> None:
        area = self.rect()
        pygame.draw.rect(surface, FILL_COLOR, area)
        pygame.draw.rect(surface, BORDER_COLOR, area, 1)