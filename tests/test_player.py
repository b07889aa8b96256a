from zinf.level import MAP_COLS, MAP_ROWS, Direction, parse_level
from zinf.player import (
    PLAYER_INVINCIBILITY_DURATION,
    STARTING_LIVES,
    Player,
)


def _level(marks=None):
    rows = [["." for _ in range(MAP_COLS)] for _ in range(MAP_ROWS)]
    for (x, y), char in (marks or {}).items():
        rows[y][x] = char
    return parse_level("\n".join("".join(row) for row in rows))


def test_reset_restores_state():
    player = Player(lives=0, score=500, is_invincible=True, is_dying=True)
    player.reset()
    assert player.lives == 3
    assert player.score == 0
    assert not player.is_invincible
    assert not player.is_dying


def test_set_start_position_faces_down():
    player = Player(orientation=Direction.LEFT)
    player.set_start_position((4, 7))
    assert player.position == (4, 7)
    assert player.orientation == Direction.DOWN


def test_moves_into_free_cell():
    player = Player(position=(5, 5))
    player.update(_level(), 0.016, Direction.RIGHT)
    assert player.position == Direction.RIGHT.step((5, 5), 1)
    assert player.orientation == Direction.RIGHT


def test_blocked_by_obstacle_still_turns():
    player = Player(position=(5, 5))
    player.update(_level({(5, 4): "P"}), 0.016, Direction.UP)
    assert player.position == (5, 5)
    assert player.orientation == Direction.UP


def test_blocked_by_edge():
    player = Player(position=(0, 0))
    player.update(_level(), 0.016, Direction.LEFT)
    assert player.position == (0, 0)


def test_no_key_no_move():
    player = Player(position=(3, 3), orientation=Direction.LEFT)
    player.update(_level(), 0.016, None)
    assert player.position == (3, 3)
    assert player.orientation == Direction.LEFT


def test_dying_player_cannot_move():
    player = Player(position=(3, 3), is_dying=True)
    player.update(_level(), 0.016, Direction.DOWN)
    assert player.position == (3, 3)


def test_damage_effects():
    player = Player(position=(6, 6), orientation=Direction.RIGHT)
    player.damage((5, 6))
    assert player.lives == STARTING_LIVES - 1
    assert player.position == (5, 6)
    assert player.orientation == Direction.LEFT
    assert player.is_invincible
    assert player.invincibility_timer == PLAYER_INVINCIBILITY_DURATION


def test_damage_ignored_while_invincible():
    player = Player(position=(6, 6))
    player.damage((5, 6))
    player.damage((1, 1))
    assert player.lives == STARTING_LIVES - 1
    assert player.position == (5, 6)


def test_invincibility_expires():
    player = Player(position=(6, 6))
    player.damage((5, 6))
    player.update(_level(), PLAYER_INVINCIBILITY_DURATION / 2, None)
    assert player.is_invincible
    player.update(_level(), PLAYER_INVINCIBILITY_DURATION, None)
    assert not player.is_invincible


def test_death_after_last_life():
    player = Player(position=(6, 6))
    level = _level()
    for _ in range(STARTING_LIVES):
        player.damage((6, 6))
        assert not player.is_dead()
        player.update(level, PLAYER_INVINCIBILITY_DURATION, None)
    assert player.is_dying
    assert player.is_dead()