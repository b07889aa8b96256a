import random

import pytest

from zinf.gameplay import GameplayResult, GameplaySession, run_gameplay_screen
from zinf.level import MAP_COLS, MAP_ROWS, Direction, parse_level
from zinf.player import Player


def make_level(cells):
    grid = [["." for _ in range(MAP_COLS)] for _ in range(MAP_ROWS)]
    for (x, y), char in cells.items():
        grid[y][x] = char
    return parse_level("\n".join("".join(row) for row in grid))


def make_session(cells, level_number=1):
    player = Player()
    session = GameplaySession(make_level(cells), level_number, player, random.Random(7))
    return session, player


def test_session_places_player_and_monsters():
    session, player = make_session({(5, 5): "J", (10, 10): "M", (12, 3): "M"})
    assert player.position == (5, 5)
    assert player.orientation == Direction.DOWN
    assert len(session.monsters) == 2
    assert [m.position for m in session.monsters] == [(10, 10), (12, 3)]


def test_level_without_monsters_is_won_at_once():
    session, _ = make_session({(5, 5): "J"})
    assert session.step(0.0) == GameplayResult.WON


def test_running_level_returns_none():
    session, player = make_session({(5, 5): "J", (20, 12): "M"})
    assert session.step(0.0, Direction.RIGHT) is None
    assert player.position == (6, 5)


def test_walking_into_monster_costs_a_life_and_bounces_back():
    session, player = make_session({(5, 5): "J", (6, 5): "M"})
    assert session.step(0.0, Direction.RIGHT) is None
    assert player.lives == 2
    assert player.position == (5, 5)
    assert player.orientation == Direction.LEFT
    assert player.is_invincible


def test_last_life_lost_ends_level_after_invincibility():
    session, player = make_session({(5, 5): "J", (6, 5): "M"})
    player.lives = 1
    assert session.step(0.0, Direction.RIGHT) is None
    assert player.lives == 0
    assert player.is_dying
    assert session.step(2.0) == GameplayResult.LOST


def test_attack_kills_monster_and_wins_level():
    session, player = make_session({(5, 5): "J", (5, 7): "M"})
    assert session.step(0.0, attack_pressed=True) is None
    assert player.score == 100
    monster = next(iter(session.monsters))
    assert monster.is_dying
    assert session.combat.current_attack() is not None
    assert session.combat.current_attack().direction == Direction.DOWN
    assert session.step(0.6) == GameplayResult.WON
    assert not monster.active


def test_attack_out_of_reach_on_level_three():
    session, player = make_session({(5, 5): "J", (5, 8): "M"}, level_number=3)
    session.step(0.0, attack_pressed=True)
    assert player.score == 0
    assert session.monsters.any_left()


def test_run_gameplay_screen_missing_level_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_gameplay_screen(None, None, None, 9, Player(), tmp_path)