"""Level maps: the tile grid, start positions and grid directions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from itertools import islice
from os import PathLike
from pathlib import Path
from typing import Optional, Tuple, Union

MAP_COLS = 24
MAP_ROWS = 16
TILE_SIZE = 50

OBSTACLE = "P"
PLAYER_START = "J"
MONSTER_START = "M"

Position = Tuple[int, int]


class Direction(IntEnum):
    """Facing direction on the grid; values match sprite orientations."""

    DOWN = 0
    UP = 1
    LEFT = 2
    RIGHT = 3

    def step(self, position: Position, distance: int = 1) -> Position:
        """Return the cell ``distance`` tiles away from ``position`` in this direction."""
        dx, dy = _OFFSETS[self]
        x, y = position
        return (x + dx * distance, y + dy * distance)


_OFFSETS = {
    Direction.DOWN: (0, 1),
    Direction.UP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Level:
    """A parsed level grid with the start cells found in it."""

    rows: Tuple[str, ...]
    player_start: Optional[Position] = None
    monster_starts: Tuple[Position, ...] = field(default_factory=tuple)

    def tile(self, x: int, y: int) -> str:
        """Return the tile character at column ``x``, row ``y``."""
        if not (0 <= x < MAP_COLS and 0 <= y < MAP_ROWS):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def is_blocked(self, x: int, y: int) -> bool:
        """True if the cell is outside the map or holds an obstacle."""
        if not (0 <= x < MAP_COLS and 0 <= y < MAP_ROWS):
            return True
        return self.rows[y][x] == OBSTACLE


def parse_level(text: str) -> Level:
    """Build a level from map text; line breaks are ignored."""
    tiles = [char for char in text if char not in "\r\n"]
    needed = MAP_ROWS * MAP_COLS
    if len(tiles) < needed:
        raise ValueError(
            f"level data holds {len(tiles)} tiles, {needed} are needed"
        )
    stream = iter(tiles)
    rows = tuple("".join(islice(stream, MAP_COLS)) for _ in range(MAP_ROWS))

    player_start: Optional[Position] = None
    monster_starts = []
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == PLAYER_START:
                player_start = (x, y)
            elif char == MONSTER_START:
                monster_starts.append((x, y))
    return Level(rows, player_start, tuple(monster_starts))


def load_level(path: Union[str, PathLike]) -> Level:
    """Read and parse a level file."""
    return parse_level(Path(path).read_text(encoding="latin-1"))