"""The status bar shown above the level."""

from __future__ import annotations

from typing import Tuple

import pygame

from .player import Player
from .renderer import DARKGRAY, HUD_HEIGHT, WHITE

_TEXT_Y = 15


def status_texts(player: Player, level_number: int) -> Tuple[str, str, str]:
    """Lives, level and score labels for the status bar."""
    return (
        f"VIDAS: {player.lives}",
        f"NIVEL: {level_number}",
        f"SCORE: {player.score}",
    )


def draw_gameplay_ui(
    surface: pygame.Surface, font: pygame.font.Font, player: Player, level_number: int
) -> None:
    """Draw the status bar across the top of ``surface``."""
    width = surface.get_width()
    pygame.draw.rect(surface, DARKGRAY, pygame.Rect(0, 0, width, HUD_HEIGHT))
    lives, level, score = status_texts(player, level_number)
    positions = (20, width // 2 - 50, width - 200)
    for text, x in zip((lives, level, score), positions):
        surface.blit(font.render(text, True, WHITE), (x, _TEXT_Y))