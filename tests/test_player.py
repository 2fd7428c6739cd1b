import pygame
import pytest

from jumprun.framemanager import FRAME_DELAY_MS, SPRITE_SHEETS, Action
from jumprun.player import GROUND_Y, JUMP_VELOCITY, OUTLINE_COLOR, Player
from jumprun.sprite import Sprite

WIDTH, HEIGHT = 16, 32


def make_sprites():
    sprites = {}
    for action, (_, frames, loop) in SPRITE_SHEETS.items():
        sheet = pygame.Surface((frames * WIDTH, HEIGHT), pygame.SRCALPHA)
        sheet.fill((0, 200, 0, 255))
        sprites[action] = Sprite(sheet, frames, loop)
    return sprites


@pytest.fixture
def player():
    return Player(make_sprites(), 50, GROUND_Y - HEIGHT)


def test_starts_walking(player):
    assert player.action is Action.WALKING
    assert player.jumping is False
    assert player.frame_size() == (WIDTH, HEIGHT)


def test_jump_sets_velocity_and_action(player):
    player.jump()
    assert player.jumping is True
    assert player.velocity_y == JUMP_VELOCITY
    assert player.action is Action.JUMPING


def test_second_jump_ignored_midair(player):
    player.jump()
    player.advance(1)
    velocity = player.velocity_y
    player.jump()
    assert player.velocity_y == velocity


def test_jump_rises_then_lands_on_ground(player):
    start = player.y
    player.jump()
    player.advance(1)
    assert player.y < start
    for _ in range(100):
        if not player.jumping:
            break
        player.advance(1)
    assert player.jumping is False
    assert player.y == GROUND_Y - HEIGHT
    assert player.velocity_y == 0
    assert player.action is Action.WALKING


def test_phase_zero_does_nothing(player):
    player.jump()
    y = player.y
    player.advance(0)
    assert player.y == y
    assert player.velocity_y == JUMP_VELOCITY


def test_collision_with_self_kills(player):
    player.handle_collision(player, [object()])
    assert player.action is Action.DEAD


def test_collision_of_other_item_ignored(player):
    player.handle_collision(object(), [player])
    assert player.action is Action.WALKING


def test_rect_and_mask_follow_frame(player):
    rect = player.rect()
    assert rect.topleft == (player.x, player.y)
    assert rect.size == player.frame_size()
    assert player.mask().count() == rect.width * rect.height


def test_tick_advances_animation(player):
    assert player.tick(FRAME_DELAY_MS) == 1


def test_draw_outlines_in_red(player):
    surface = pygame.Surface((200, GROUND_Y))
    player.draw(surface)
    assert tuple(surface.get_at((player.x, player.y)))[:3] == OUTLINE_COLOR
    assert tuple(surface.get_at((player.x + WIDTH // 2, player.y + HEIGHT // 2)))[:3] == (0, 200, 0)