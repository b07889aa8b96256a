"""Sword attacks and contact damage between player and monsters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .level import Direction, Position
from .monster import MonsterPack
from .player import Player

ATTACK_DURATION = 0.3
ATTACK_SCORE = 100
DEFAULT_ATTACK_RANGE = 3
SHORT_ATTACK_RANGE = 2


@dataclass(frozen=True)
class Attack:
    """An attack in progress: the way it points and how many tiles it reaches."""

    direction: Direction
    range: int


def attack_range(level_number: int) -> int:
    """Reach of the sword on the given level."""
    return SHORT_ATTACK_RANGE if level_number == 3 else DEFAULT_ATTACK_RANGE


class Combat:
    """Tracks the player's current attack and its remaining time."""

    def __init__(self) -> None:
        self._attack: Optional[Attack] = None
        self._timer = 0.0

    def update(
        self,
        player: Player,
        monsters: MonsterPack,
        level_number: int,
        dt: float,
        attack_pressed: bool,
    ) -> int:
        """Advance the attack timer and start a new attack; returns monsters hit."""
        if self._attack is not None:
            self._timer -= dt
            if self._timer <= 0:
                self._attack = None

        if not attack_pressed or self._attack is not None:
            return 0

        attack = Attack(player.orientation, attack_range(level_number))
        self._attack = attack
        self._timer = ATTACK_DURATION

        hits = 0
        for distance in range(1, attack.range + 1):
            target = attack.direction.step(player.position, distance)
            for index, monster in enumerate(monsters):
                if monster.active and not monster.is_dying and monster.position == target:
                    monsters.damage(index)
                    player.score += ATTACK_SCORE
                    hits += 1
        return hits

    def current_attack(self) -> Optional[Attack]:
        """The attack being shown, or None."""
        return self._attack


def process_collisions(player: Player, monsters: MonsterPack, old_position: Position) -> None:
    """Damage the player if standing on a live monster."""
    if player.is_invincible:
        return
    for monster in monsters:
        if monster.active and not monster.is_dying and monster.position == player.position:
            player.damage(old_position)