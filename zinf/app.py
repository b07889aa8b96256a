"""The game window and the flow between its screens."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence

import pygame

from .gameplay import GameplayResult, run_gameplay_screen
from .player import Player
from .renderer import Renderer
from .screens import Choice, run_gameover_screen, run_menu_screen, run_win_screen

TOTAL_LEVELS = 3
SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 860
WINDOW_TITLE = "ZINF - Zelda INF"


class Screen(IntEnum):
    """The screen the game is showing."""

    EXIT = -1
    MENU = 0
    GAMEPLAY = 1
    GAMEOVER = 2
    WIN = 3


@dataclass
class GameFlow:
    """Which screen comes next, the current level and the player."""

    screen: Screen = Screen.MENU
    level: int = 1
    player: Player = field(default_factory=Player)

    def _new_game(self) -> None:
        self.level = 1
        self.player.reset()
        self.screen = Screen.GAMEPLAY

    def _restart_or_exit(self, choice: Choice) -> None:
        if choice == Choice.PLAY:
            self._new_game()
        elif choice == Choice.QUIT:
            self.screen = Screen.EXIT

    def after_menu(self, choice: Choice) -> None:
        """Start a new game, leave, or stay on the menu."""
        self._restart_or_exit(choice)

    def after_gameplay(self, result: GameplayResult) -> None:
        """Go on to the next level, the victory screen or the game over screen."""
        if result == GameplayResult.LOST:
            self.screen = Screen.GAMEOVER
        elif result == GameplayResult.WON:
            self.level += 1
            if self.level > TOTAL_LEVELS:
                self.screen = Screen.WIN
        elif result == GameplayResult.CLOSED:
            self.screen = Screen.EXIT

    def after_gameover(self, choice: Choice) -> None:
        """Restart from the first level or leave."""
        self._restart_or_exit(choice)

    def after_win(self, choice: Choice) -> None:
        """Restart from the first level or leave."""
        self._restart_or_exit(choice)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="zinf", description="A small grid action game.")
    parser.add_argument("--resources", default="resources", help="directory holding the sprites")
    parser.add_argument("--levels", default=".", help="directory holding nivelN.txt files")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until the player leaves."""
    args = _parse_args(argv)
    pygame.init()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(args.resources)
        clock = pygame.time.Clock()
        flow = GameFlow()

        while flow.screen != Screen.EXIT:
            if flow.screen == Screen.MENU:
                flow.after_menu(run_menu_screen(surface, clock))
            elif flow.screen == Screen.GAMEPLAY:
                flow.after_gameplay(
                    run_gameplay_screen(
                        surface, clock, renderer, flow.level, flow.player, args.levels
                    )
                )
            elif flow.screen == Screen.GAMEOVER:
                flow.after_gameover(run_gameover_screen(surface, clock))
            elif flow.screen == Screen.WIN:
                flow.after_win(run_win_screen(surface, clock))
    finally:
        pygame.quit()
    return 0