"""The animated character that runs and jumps."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import pygame

from .framemanager import Action, FrameManager
from .sprite import Sprite

logger = logging.getLogger(__name__)

GROUND_Y = 400
GRAVITY = 1
JUMP_VELOCITY = -15
OUTLINE_COLOR = (255, 0, 0)
OUTLINE_WIDTH = 2


class Player:
    """A character that jumps under gravity and dies on collision."""

    def __init__(self, sprites: Mapping[Action, Sprite], x: int = 0, y: int = 0) -> None:
        self.x = x
        self.y = y
        self.jumping = False
        self.velocity_y = 0
        self.image: pygame.Surface | None = None
        self._frames = FrameManager(self, sprites)
        self._frames.set_action(Action.WALKING)

    @property
    def action(self) -> Action:
        return self._frames.action

    def advance(self, step: int) -> None:
        if not step or not self.jumping:
            return
        self.velocity_y += GRAVITY
        self.y += self.velocity_y
        ground = GROUND_Y - self.frame_size()[1]
        if self.y >= ground:
            self.jumping = False
            self._frames.set_action(Action.WALKING)
            self.velocity_y = 0
            self.y = ground

    def frame_size(self) -> tuple[int, int]:
        return self._frames.frame_size()

    def jump(self) -> None:
        if not self.jumping:
            self.jumping = True
            self._frames.set_action(Action.JUMPING)
            self.velocity_y = JUMP_VELOCITY

    def handle_collision(self, item: Any, colliding_objects: list) -> None:
        if item is self:
            logger.debug("Collision detected!")
            self._frames.set_action(Action.DEAD)

    def rect(self) -> pygame.Rect:
        return pygame.Rect((self.x, self.y), self.image.get_size())

    def mask(self) -> pygame.mask.Mask:
        """Collision shape taken from the opaque pixels of the current frame."""
        return pygame.mask.from_surface(self.image)

    def tick(self, elapsed_ms: int) -> int:
        return self._frames.tick(elapsed_ms)

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(self.image, (self.x, self.y))
        pygame.draw.rect(surface, OUTLINE_COLOR, self.rect(), OUTLINE_WIDTH)