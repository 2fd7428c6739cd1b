"""The game loop: a player, scrolling obstacles and keyboard control."""

from __future__ import annotations

import argparse
from typing import Mapping

import pygame

from .framemanager import Action, load_sprites
from .gamescene import GameScene
from .obstacle import Obstacle
from .player import Player
from .sprite import Sprite

SCENE_WIDTH = 800
SCENE_HEIGHT = 400
TICK_MS = 16
PLAYER_X = 50
PLAYER_HEIGHT = 128
OBSTACLE_COUNT = 3
OBSTACLE_SPACING = 300
OBSTACLE_OFFSET = 50


class Game:
    """Owns the scene and forwards input and time to it."""

    def __init__(self, sprites: Mapping[Action, Sprite]) -> None:
        self.scene = GameScene(SCENE_WIDTH, SCENE_HEIGHT)
        self.player = Player(sprites, PLAYER_X, SCENE_HEIGHT - PLAYER_HEIGHT)
        self.scene.add_moving_item(self.player)
        self.obstacles = [
            Obstacle(OBSTACLE_SPACING * index, SCENE_HEIGHT - OBSTACLE_OFFSET)
            for index in range(1, OBSTACLE_COUNT + 1)
        ]
        for obstacle in self.obstacles:
            self.scene.add_moving_item(obstacle)
        self.scene.connect_collision(self.player.handle_collision)

    def handle_key(self, key: int) -> None:
        if key == pygame.K_SPACE:
            self.player.jump()

    def step(self) -> None:
        """Advance the game by one tick."""
        self.scene.advance()
        self.player.tick(TICK_MS)

    def draw(self, surface: pygame.Surface) -> None:
        self.scene.draw(surface)

    def run(self) -> None:
        """Open a window and play until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((SCENE_WIDTH, SCENE_HEIGHT))
            pygame.display.set_caption("JumpAndRun")
            clock = pygame.time.Clock()
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type == pygame.KEYDOWN:
                        self.handle_key(event.key)
                self.step()
                self.draw(screen)
                pygame.display.flip()
                clock.tick(1000 // TICK_MS)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="jumprun", description="A side-scrolling jump game.")
    parser.add_argument(
        "sprites",
        nargs="?",
        default="sprites",
        help="directory holding Idle.png, Walk.png, Run.png, Jump.png and Dead.png",
    )
    args = parser.parse_args(argv)
    Game(load_sprites(args.sprites)).run()
    return 0