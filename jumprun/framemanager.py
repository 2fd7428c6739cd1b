"""Selection and timing of the player's animation frames."""

from __future__ import annotations

import enum
from os import PathLike
from pathlib import Path
from typing import Any, Mapping

from .sprite import Sprite

FRAME_DELAY_MS = 75


class Action(enum.Enum):
    IDLE = "idle"
    WALKING = "walking"
    RUNNING = "running"
    JUMPING = "jumping"
    DEAD = "dead"


SPRITE_SHEETS: dict[Action, tuple[str, int, bool]] = {
    Action.IDLE: ("Idle.png", 5, True),
    Action.WALKING: ("Walk.png", 8, True),
    Action.RUNNING: ("Run.png", 8, True),
    Action.JUMPING: ("Jump.png", 7, True),
    Action.DEAD: ("Dead.png", 8, False),
}


def load_sprites(directory: str | PathLike[str]) -> dict[Action, Sprite]:
    """Load one sprite sheet per action from a directory."""
    base = Path(directory)
    sprites = {}
    for action, (name, frames, loop) in SPRITE_SHEETS.items():
        path = base / name
        if not path.is_file():
            raise FileNotFoundError(f"missing sprite sheet: {path}")
        sprites[action] = Sprite.from_file(path, frames, loop)
    return sprites


class FrameManager:
    """Feeds the frames of the current action to a target's ``image`` attribute."""

    def __init__(self, target: Any, sprites: Mapping[Action, Sprite]) -> None:
        missing = [action.name for action in Action if action not in sprites]
        if missing:
            raise ValueError(f"no sprite for actions: {', '.join(missing)}")
        sizes = {sprite.frame_size() for sprite in sprites.values()}
        if len(sizes) != 1:
            raise ValueError("all sprites must share one frame size")
        self._target = target
        self._sprites = dict(sprites)
        self._size = sizes.pop()
        self._action = Action.IDLE
        self._elapsed = 0
        target.image = self._sprites[self._action].first_frame()

    @property
    def action(self) -> Action:
        return self._action

    def frame_size(self) -> tuple[int, int]:
        return self._size

    def set_action(self, action: Action) -> None:
        """Switch animation, restarting it only when the action changes."""
        if action is not self._action:
            self._action = action
            self._target.image = self._sprites[action].first_frame()

    def update_frame(self) -> None:
        sprite = self._sprites.get(self._action)
        if sprite is not None:
            self._target.image = sprite.next_frame()

    def tick(self, elapsed_ms: int) -> int:
        """Let time pass; returns how many frames were advanced."""
        if elapsed_ms < 0:
            raise ValueError("elapsed time cannot be negative")
        self._elapsed += elapsed_ms
        updates = 0
        while self._elapsed >= FRAME_DELAY_MS:
            self._elapsed -= FRAME_DELAY_MS
            self.update_frame()
            updates += 1
        return updates