"""Scene that advances moving items and reports collisions."""

from __future__ import annotations

from typing import Callable, Protocol

import pygame

BACKGROUND = (255, 255, 255)


class SceneItem(Protocol):
    def advance(self, step: int) -> None: ...

    def rect(self) -> pygame.Rect: ...

    def mask(self) -> pygame.mask.Mask: ...

    def draw(self, surface: pygame.Surface) -> None: ...


CollisionCallback = Callable[[SceneItem, list], None]


class GameScene:
    """Holds the moving items of a level and checks them for collisions."""

    def __init__(self, width: int = 800, height: int = 400) -> None:
        self.width = width
        self.height = height
        self.items: list[SceneItem] = []
        self._listeners: list[CollisionCallback] = []

    def add_moving_item(self, item: SceneItem) -> None:
        self.items.append(item)

    def connect_collision(self, callback: CollisionCallback) -> None:
        """Register a callable invoked as ``callback(item, colliding_items)``."""
        self._listeners.append(callback)

    def colliding_items(self, item: SceneItem) -> list[SceneItem]:
        """Items whose shapes overlap the shape of ``item``."""
        rect = item.rect()
        mask = item.mask()
        found = []
        for other in self.items:
            if other is item:
                continue
            other_rect = other.rect()
            if not rect.colliderect(other_rect):
                continue
            offset = (other_rect.x - rect.x, other_rect.y - rect.y)
            if mask.overlap(other.mask(), offset) is not None:
                found.append(other)
        return found

    def advance(self) -> None:
        """Run both advance phases on every item, then look for collisions."""
        for step in (0, 1):
            for item in self.items:
                item.advance(step)
        self.check_collisions()

    def check_collisions(self) -> None:
        for item in self.items:
            colliding = self.colliding_items(item)
            if colliding:
                for listener in self._listeners:
                    listener(item, colliding)

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND)
        for item in self.items:
            item.draw(surface)