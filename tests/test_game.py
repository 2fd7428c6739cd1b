import pygame
import pytest

from jumprun.framemanager import SPRITE_SHEETS, Action
from jumprun.game import Game, main
from jumprun.obstacle import FILL_COLOR, SPEED
from jumprun.sprite import Sprite


def make_sprites(width=64, height=128):
    sprites = {}
    for action, (_, frames, loop) in SPRITE_SHEETS.items():
        sheet = pygame.Surface((frames * width, height), pygame.SRCALPHA)
        sheet.fill((100, 100, 100, 255))
        sprites[action] = Sprite(sheet, frames, loop)
    return sprites


@pytest.fixture
def game():
    return Game(make_sprites())


def test_layout(game):
    assert (game.player.x, game.player.y) == (50, 400 - 128)
    assert [o.x for o in game.obstacles] == [300, 600, 900]
    assert all(o.y == 400 - 50 for o in game.obstacles)
    assert len(game.scene.items) == 1 + len(game.obstacles)


def test_space_makes_player_jump(game):
    game.handle_key(pygame.K_SPACE)
    assert game.player.jumping is True
    assert game.player.action is Action.JUMPING


def test_other_key_ignored(game):
    game.handle_key(pygame.K_a)
    assert game.player.jumping is False


def test_step_scrolls_obstacles(game):
    before = [o.x for o in game.obstacles]
    game.step()
    assert [o.x for o in game.obstacles] == [x - SPEED for x in before]


def test_running_into_obstacle_kills_player(game):
    for _ in range(80):
        game.step()
    assert game.player.action is Action.DEAD


def test_jumping_avoids_first_obstacle(game):
    for _ in range(20):
        game.step()
    game.handle_key(pygame.K_SPACE)
    for _ in range(20):
        game.step()
    assert game.player.action is Action.JUMPING


def test_draw_shows_obstacle(game):
    surface = pygame.Surface((800, 400))
    game.draw(surface)
    assert tuple(surface.get_at((315, 365)))[:3] == FILL_COLOR


def test_main_requires_sprite_sheets(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path)])