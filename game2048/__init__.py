"""Single player 2048 puzzle game: NumPy board logic and a Matplotlib window."""

from .core import Direction
from .envs import GameSession, GameStatus

__all__ = ["Direction", "GameSession", "GameStatus"]
