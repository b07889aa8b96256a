"""Drawing of the level, the player, the monsters and the sword."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

import pygame

from .combat import Attack
from .level import MAP_COLS, TILE_SIZE, Direction, Level, OBSTACLE, Position
from .monster import Monster
from .player import Player

HUD_HEIGHT = 60

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (230, 41, 55)
YELLOW: Color = (253, 249, 0)
GREEN: Color = (0, 228, 48)
DARKGRAY: Color = (80, 80, 80)

DYING_TINT: Color = RED

_PLAYER_SPRITES = {
    Direction.DOWN: "Link_front.png",
    Direction.UP: "Link_back.png",
    Direction.LEFT: "Link_left.png",
    Direction.RIGHT: "Link_right.png",
}
_MONSTER_SPRITES = {
    Direction.DOWN: "Enemy_front.png",
    Direction.UP: "Enemy_back.png",
    Direction.LEFT: "Enemy_left.png",
    Direction.RIGHT: "Enemy_right.png",
}
_ATTACK_SPRITES = {
    Direction.DOWN: "Attack_down.png",
    Direction.UP: "Attack_up.png",
    Direction.LEFT: "Attack_left.png",
    Direction.RIGHT: "Attack_right.png",
}
_GROUND_SPRITE = "Ground.png"
_OBSTACLE_SPRITE = "Obstacle.png"


def tile_to_pixel(x: int, y: int) -> Tuple[int, int]:
    """Screen position of the top-left corner of grid cell (x, y)."""
    return (x * TILE_SIZE, y * TILE_SIZE + HUD_HEIGHT)


def attack_cells(position: Position, direction: Direction, attack_range: int) -> List[Position]:
    """Cells covered by a sword reaching ``attack_range`` tiles from ``position``."""
    return [direction.step(position, distance) for distance in range(1, attack_range + 1)]


def player_visible(player: Player) -> bool:
    """Whether the player is drawn this frame; blinks while invincible."""
    if not player.is_invincible:
        return True
    return int(player.invincibility_timer * 10) % 2 != 0


class Renderer:
    """Holds the game's sprites and draws the scene with them."""

    def __init__(self, resource_dir: Union[str, PathLike] = "resources") -> None:
        self._dir = Path(resource_dir)
        self._player = {d: self._load(name) for d, name in _PLAYER_SPRITES.items()}
        self._monster = {d: self._load(name) for d, name in _MONSTER_SPRITES.items()}
        self._attack = {d: self._load(name) for d, name in _ATTACK_SPRITES.items()}
        self._ground = self._load(_GROUND_SPRITE)
        self._obstacle = self._load(_OBSTACLE_SPRITE)
        self._tinted: Dict[Direction, pygame.Surface] = {
            d: self._tint(sprite, DYING_TINT) for d, sprite in self._monster.items()
        }

    def _load(self, name: str) -> pygame.Surface:
        path = self._dir / name
        if not path.is_file():
            raise FileNotFoundError(f"sprite not found: {path}")
        return pygame.image.load(str(path))

    @staticmethod
    def _tint(sprite: pygame.Surface, color: Color) -> pygame.Surface:
        tinted = sprite.copy()
        tinted.fill((*color, 255), special_flags=pygame.BLEND_RGBA_MULT)
        return tinted

    def draw_level(self, surface: pygame.Surface, level: Level) -> None:
        """Draw every tile of the level grid."""
        for y, row in enumerate(level.rows):
            for x, char in enumerate(row[:MAP_COLS]):
                sprite = self._obstacle if char == OBSTACLE else self._ground
                surface.blit(sprite, tile_to_pixel(x, y))

    def draw_player(self, surface: pygame.Surface, player: Player) -> None:
        """Draw the player facing its orientation, blinking while invincible."""
        if player_visible(player):
            surface.blit(self._player[Direction(player.orientation)], tile_to_pixel(*player.position))

    def draw_monsters(self, surface: pygame.Surface, monsters: Iterable[Monster]) -> None:
        """Draw active monsters, tinted red while dying."""
        for monster in monsters:
            if not monster.active:
                continue
            direction = Direction(monster.orientation)
            sprite = self._tinted[direction] if monster.is_dying else self._monster[direction]
            surface.blit(sprite, tile_to_pixel(*monster.position))

    def draw_attack(self, surface: pygame.Surface, player: Player, attack: Optional[Attack]) -> None:
        """Draw the sword over every cell the attack reaches."""
        if attack is None:
            return
        sprite = self._attack[attack.direction]
        for cell in attack_cells(player.position, attack.direction, attack.range):
            surface.blit(sprite, tile_to_pixel(*cell))