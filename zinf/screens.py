"""Menu, game over and victory screens with their option lists."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Sequence, Tuple

import pygame

from .renderer import BLACK, GREEN, RED, WHITE, YELLOW, Color

FPS = 60
_OPTION_FONT_SIZE = 50
_OPTION_SPACING = 60
_MARKER_OFFSET = 50


class Choice(IntEnum):
    """What the player picked on a screen."""

    QUIT = 0
    PLAY = 1
    SCOREBOARD = 2


MAIN_MENU_OPTIONS: Tuple[Tuple[str, Choice], ...] = (
    ("Iniciar", Choice.PLAY),
    ("Scoreboard", Choice.SCOREBOARD),
    ("Sair", Choice.QUIT),
)
END_OPTIONS: Tuple[Tuple[str, Choice], ...] = (
    ("Reiniciar", Choice.PLAY),
    ("Sair", Choice.QUIT),
)


class OptionMenu:
    """A vertical list of options with a wrapping cursor."""

    def __init__(self, options: Sequence[Tuple[str, Choice]]) -> None:
        self.options = tuple(options)
        if not self.options:
            raise ValueError("a menu needs at least one option")
        self.current = 0

    def move_up(self) -> None:
        """Move the cursor up, wrapping to the last option."""
        self.current = (self.current - 1) % len(self.options)

    def move_down(self) -> None:
        """Move the cursor down, wrapping to the first option."""
        self.current = (self.current + 1) % len(self.options)

    def selected(self) -> Choice:
        """The choice under the cursor."""
        return self.options[self.current][1]

    def handle_key(self, key: int) -> Optional[Choice]:
        """React to a key; returns the choice when Enter confirms it."""
        if key == pygame.K_DOWN:
            self.move_down()
        elif key == pygame.K_UP:
            self.move_up()
        elif key == pygame.K_RETURN:
            return self.selected()
        return None


def _draw_centered(surface, font, text, y, color) -> int:
    image = font.render(text, True, color)
    x = (surface.get_width() - image.get_width()) // 2
    surface.blit(image, (x, y))
    return x


def _run_option_screen(
    surface: pygame.Surface,
    clock: pygame.time.Clock,
    options: Sequence[Tuple[str, Choice]],
    header: str,
    header_size: int,
    header_color: Color,
    header_offset: int,
) -> Choice:
    menu = OptionMenu(options)
    header_font = pygame.font.Font(None, header_size)
    option_font = pygame.font.Font(None, _OPTION_FONT_SIZE)

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return Choice.QUIT
            if event.type == pygame.KEYDOWN:
                choice = menu.handle_key(event.key)
                if choice is not None:
                    return choice

        surface.fill(BLACK)
        height = surface.get_height()
        _draw_centered(surface, header_font, header, height // 4 + header_offset, header_color)

        initial_y = height // 2
        for index, (label, _) in enumerate(menu.options):
            chosen = index == menu.current
            y = initial_y + index * _OPTION_SPACING
            x = _draw_centered(surface, option_font, label, y, YELLOW if chosen else WHITE)
            if chosen:
                surface.blit(option_font.render("-", True, RED), (x - _MARKER_OFFSET, y))

        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()
        clock.tick(FPS)


def run_menu_screen(surface: pygame.Surface, clock: pygame.time.Clock) -> Choice:
    """Show the title menu until an option is chosen or the window closes."""
    return _run_option_screen(surface, clock, MAIN_MENU_OPTIONS, "ZINF", 160, WHITE, -80)


def run_gameover_screen(surface: pygame.Surface, clock: pygame.time.Clock) -> Choice:
    """Show the defeat screen; PLAY restarts, QUIT leaves."""
    return _run_option_screen(surface, clock, END_OPTIONS, "Você morreu!", 120, RED, 0)


def run_win_screen(surface: pygame.Surface, clock: pygame.time.Clock) -> Choice:
    """Show the victory screen; PLAY restarts, QUIT leaves."""
    return _run_option_screen(surface, clock, END_OPTIONS, "Você venceu!", 120, GREEN, 0)