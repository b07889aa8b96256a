import pygame
import pytest

from zinf.player import Player
from zinf.renderer import BLACK, DARKGRAY, HUD_HEIGHT
from zinf.ui import draw_gameplay_ui, status_texts


@pytest.fixture
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 30)
    pygame.font.quit()


def rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_status_texts_for_new_player():
    assert status_texts(Player(), 1) == ("VIDAS: 3", "NIVEL: 1", "SCORE: 0")


def test_status_texts_follow_player_state():
    player = Player(lives=1, score=300)
    lives, level, score = status_texts(player, 3)
    assert lives == "VIDAS: 1"
    assert level == "NIVEL: 3"
    assert score == "SCORE: 300"


def test_bar_spans_width_and_hud_height(font):
    surface = pygame.Surface((1200, 860))
    surface.fill(BLACK)
    draw_gameplay_ui(surface, font, Player(), 1)
    assert rgb(surface, (5, 5)) == DARKGRAY
    assert rgb(surface, (1199, HUD_HEIGHT - 1)) == DARKGRAY
    assert rgb(surface, (1199, HUD_HEIGHT)) == BLACK
    assert rgb(surface, (5, HUD_HEIGHT + 5)) == BLACK


def test_bar_contains_white_text(font):
    surface = pygame.Surface((1200, 860))
    draw_gameplay_ui(surface, font, Player(), 2)
    bar = [rgb(surface, (x, y)) for x in range(20, 140) for y in range(15, 40)]
    assert max(max(color) for color in bar) == 255