"""Sprite sheets split into equally sized animation frames."""

from __future__ import annotations

from os import PathLike

import pygame


class Sprite:
    """An animation cut from a horizontal strip of equally wide frames."""

    def __init__(self, sheet: pygame.Surface, total_frames: int, loop: bool = True) -> None:
        if total_frames <= 0:
            raise ValueError("a sprite needs at least one frame")
        width = sheet.get_width() // total_frames
        height = sheet.get_height()
        if width == 0 or height == 0:
            raise ValueError("sprite sheet is too small for the requested frame count")
        self._frames = [
            sheet.subsurface(pygame.Rect(index * width, 0, width, height)).copy()
            for index in range(total_frames)
        ]
        self._size = (width, height)
        self._current = 0
        self.loop = loop

    @classmethod
    def from_file(
        cls, path: str | PathLike[str], total_frames: int, loop: bool = True
    ) -> "Sprite":
        """Load a sprite sheet image from disk."""
        return cls(pygame.image.load(str(path)), total_frames, loop)

    @property
    def total_frames(self) -> int:
        return len(self._frames)

    @property
    def current_frame(self) -> int:
        return self._current

    def first_frame(self) -> pygame.Surface:
        """Rewind the animation and return its first frame."""
        self._current = 0
        return self._frames[0]

    def next_frame(self) -> pygame.Surface:
        """Step the animation forward; looping sprites wrap, others stop on the last frame."""
        self._current += 1
        if self.loop:
            self._current %= len(self._frames)
        elif self._current >= len(self._frames):
            self._current = len(self._frames) - 1
        return self._frames[self._current]

    def frame_size(self) -> tuple[int, int]:
        return self._size