"""A single level being played: update order, win and loss detection."""

from __future__ import annotations

import random
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Optional, Union

import pygame

from .combat import Combat, process_collisions
from .level import Direction, Level, load_level
from .monster import MonsterPack
from .player import Player
from .renderer import BLACK, Renderer
from .ui import draw_gameplay_ui

FPS = 60
_HUD_FONT_SIZE = 30

# Checked in this order when several movement keys arrive in one frame.
_MOVE_KEYS = (
    (pygame.K_d, Direction.RIGHT),
    (pygame.K_a, Direction.LEFT),
    (pygame.K_s, Direction.DOWN),
    (pygame.K_w, Direction.UP),
)
_ATTACK_KEY = pygame.K_j


class GameplayResult(IntEnum):
    """How a level ended."""

    CLOSED = -1
    LOST = 0
    WON = 1


class GameplaySession:
    """The state of one level: map, player, monsters and the sword."""

    def __init__(
        self,
        level: Level,
        level_number: int,
        player: Player,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.level = level
        self.level_number = level_number
        self.player = player
        self.monsters = MonsterPack()
        self.combat = Combat()
        self.rng = rng if rng is not None else random.Random()
        for position in level.monster_starts:
            self.monsters.add(position)
        if level.player_start is not None:
            player.set_start_position(level.player_start)

    def step(
        self,
        dt: float,
        direction: Optional[Direction] = None,
        attack_pressed: bool = False,
    ) -> Optional[GameplayResult]:
        """Advance one frame; returns a result once the level is over."""
        old_position = self.player.position
        self.player.update(self.level, dt, direction)
        self.monsters.update(self.level, self.level_number, dt, self.rng)
        self.combat.update(self.player, self.monsters, self.level_number, dt, attack_pressed)
        process_collisions(self.player, self.monsters, old_position)

        if self.player.is_dead():
            return GameplayResult.LOST
        if not self.monsters.any_left():
            return GameplayResult.WON
        return None


def _pick_direction(pressed: set) -> Optional[Direction]:
    return next((direction for key, direction in _MOVE_KEYS if key in pressed), None)


def run_gameplay_screen(
    surface: pygame.Surface,
    clock: pygame.time.Clock,
    renderer: Renderer,
    level_number: int,
    player: Player,
    level_dir: Union[str, PathLike] = ".",
) -> GameplayResult:
    """Play level ``level_number`` until it is won, lost or the window closes."""
    level = load_level(Path(level_dir) / f"nivel{level_number}.txt")
    session = GameplaySession(level, level_number, player)
    font = pygame.font.Font(None, _HUD_FONT_SIZE)
    dt = 0.0

    while True:
        pressed = set()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return GameplayResult.CLOSED
            if event.type == pygame.KEYDOWN:
                pressed.add(event.key)

        result = session.step(dt, _pick_direction(pressed), _ATTACK_KEY in pressed)
        if result is not None:
            return result

        surface.fill(BLACK)
        renderer.draw_level(surface, session.level)
        renderer.draw_monsters(surface, session.monsters)
        renderer.draw_player(surface, session.player)
        renderer.draw_attack(surface, session.player, session.combat.current_attack())
        draw_gameplay_ui(surface, font, session.player, level_number)

        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()
        dt = clock.tick(FPS) / 1000.0