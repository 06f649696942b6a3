"""Score, lives and level bookkeeping for a game session."""

from __future__ import annotations

from dataclasses import dataclass

BULLET_TIMER_INIT_MAX = 250
INIT_LIVES = 3


@dataclass
class GameInfo:
    """Lives, score and level of the current game."""

    lives: int = INIT_LIVES
    score: int = 0
    level: int = 0

    @property
    def has_lives(self) -> bool:
        """Whether any lives remain."""
        return self.lives > 0

    def lose_life(self) -> int:
        """Take one life away and return how many are left."""
        self.lives -= 1
        return self.lives

    def reset(self) -> None:
        """Restore lives, score and level to their starting values."""
        self.lives = INIT_LIVES
        self.score = 0
        self.level = 0

    def reset_level(self) -> None:
        self.level = 0

    def increase_level(self) -> int:
        """Advance to the next level and return it."""
        self.level += 1
        return self.level