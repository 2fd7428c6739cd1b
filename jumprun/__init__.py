"""A side-scrolling jump-and-run game with sprite-sheet animation, built on pygame."""

__version__ = "0.1.0"

__all__ = ["sprite", "framemanager", "obstacle", "gamescene", "player", "game"]