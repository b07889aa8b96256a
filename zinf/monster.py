"""Monsters and the pack that moves them around the level."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .level import Direction, Level, Position

MAX_MONSTERS = 20
MONSTER_DEATH_DURATION = 0.5

_MOVE_DELAYS = {2: 0.6, 3: 0.4}
_DEFAULT_MOVE_DELAY = 0.8


@dataclass
class Monster:
    """A single monster on the grid."""

    position: Position
    orientation: Direction = Direction.DOWN
    active: bool = True
    is_dying: bool = False
    death_timer: float = 0.0


class MonsterPack:
    """All monsters of the current level, moved together on a shared timer."""

    def __init__(self) -> None:
        self._monsters: List[Monster] = []
        self._move_timer = 0.0

    def reset(self) -> None:
        """Remove every monster."""
        self._monsters.clear()

    def add(self, position: Position) -> Optional[Monster]:
        """Add a monster at ``position``; returns None once the pack is full."""
        if len(self._monsters) >= MAX_MONSTERS:
            return None
        monster = Monster(position)
        self._monsters.append(monster)
        return monster

    def update(self, level: Level, level_number: int, dt: float, rng=None) -> None:
        """Run death timers and, when the move delay has passed, random moves."""
        rng = rng if rng is not None else random
        move_delay = _MOVE_DELAYS.get(level_number, _DEFAULT_MOVE_DELAY)
        self._move_timer += dt
        can_move = self._move_timer >= move_delay

        for monster in self._monsters:
            if not monster.active:
                continue
            if monster.is_dying:
                monster.death_timer -= dt
                if monster.death_timer <= 0:
                    monster.active = False
            elif can_move:
                direction = Direction(rng.randrange(4))
                target = direction.step(monster.position, 1)
                if level.is_blocked(*target) or self._occupied(target, monster):
                    continue
                monster.position = target
                monster.orientation = direction

        if can_move:
            self._move_timer = 0.0

    def _occupied(self, cell: Position, mover: Monster) -> bool:
        return any(
            other is not mover and other.active and other.position == cell
            for other in self._monsters
        )

    def damage(self, index: int) -> bool:
        """Start the death of the monster at ``index``; True if it was hit."""
        if not 0 <= index < len(self._monsters):
            return False
        monster = self._monsters[index]
        if not monster.active or monster.is_dying:
            return False
        monster.is_dying = True
        monster.death_timer = MONSTER_DEATH_DURATION
        return True

    def any_left(self) -> bool:
        """True while any monster is still active."""
        return any(monster.active for monster in self._monsters)

    def __iter__(self) -> Iterator[Monster]:
        return iter(self._monsters)

    def __len__(self) -> int:
        return len(self._monsters)