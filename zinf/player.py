"""The player character's state and movement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .level import Direction, Level, Position

PLAYER_INVINCIBILITY_DURATION = 1.5
STARTING_LIVES = 3

_OPPOSITE = {
    Direction.DOWN: Direction.UP,
    Direction.UP: Direction.DOWN,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass
class Player:
    """Position, lives, score and invincibility of the player."""

    position: Position = (0, 0)
    orientation: Direction = Direction.DOWN
    lives: int = STARTING_LIVES
    score: int = 0
    is_invincible: bool = False
    invincibility_timer: float = 0.0
    is_dying: bool = False

    def reset(self) -> None:
        """Restore lives, score and status for a new game."""
        self.lives = STARTING_LIVES
        self.score = 0
        self.is_invincible = False
        self.invincibility_timer = 0.0
        self.is_dying = False

    def set_start_position(self, position: Position) -> None:
        """Place the player at a level's start cell, facing down."""
        self.position = position
        self.orientation = Direction.DOWN

    def update(self, level: Level, dt: float, direction: Optional[Direction] = None) -> None:
        """Advance timers and move one tile in ``direction`` if it is free."""
        if self.is_invincible:
            self.invincibility_timer -= dt
            if self.invincibility_timer <= 0:
                self.is_invincible = False

        if self.is_dying or direction is None:
            return

        self.orientation = direction
        target = direction.step(self.position, 1)
        if not level.is_blocked(*target):
            self.position = target

    def damage(self, old_position: Position) -> None:
        """Lose a life, bounce back to ``old_position`` and turn around."""
        if self.is_invincible or self.is_dying:
            return
        self.lives -= 1
        self.is_invincible = True
        self.invincibility_timer = PLAYER_INVINCIBILITY_DURATION
        self.position = old_position
        self.orientation = _OPPOSITE[self.orientation]
        if self.lives <= 0:
            self.is_dying = True

    def is_dead(self) -> bool:
        """True once lives are gone and the last invincibility has run out."""
        return self.lives <= 0 and not self.is_invincible