import pytest

from lockerscene.engine import (
    HEIGHT_SCREEN,
    WIDTH_SCREEN,
    EntityId,
    KeyboardState,
    create_engine,
)
from lockerscene.gamelogic import (
    bottom_is_reached,
    colliding_bottom,
    colliding_left,
    colliding_right,
    colliding_top,
    is_even,
    left_side_is_reached,
    move_by_keys,
    move_down,
    move_left,
    move_right,
    move_up,
    right_side_is_reached,
    set_position,
    top_is_reached,
)

PLAYER = EntityId.PLAYER
ENEMY = EntityId.ENEMY


@pytest.fixture
def engine():
    return create_engine(KeyboardState())


def _player(engine):
    return engine.entities[PLAYER]


def _enemy(engine):
    return engine.entities[ENEMY]


@pytest.mark.parametrize("number, expected", [(0, True), (4, True), (7, False), (-3, False)])
def test_is_even(number, expected):
    assert is_even(number) is expected


def test_set_position(engine):
    set_position(engine, PLAYER, 12, 7)
    assert (_player(engine).x, _player(engine).y) == (12, 7)


def test_move_right_without_obstacle(engine):
    set_position(engine, PLAYER, 20, 20)
    engine.clock.delta = 0.5
    move_right(engine, PLAYER)
    player = _player(engine)
    assert player.x == player.x_next
    assert player.x > 20


def test_move_right_stops_at_enemy(engine):
    engine.clock.delta = 1.0
    move_right(engine, PLAYER)
    player, enemy = _player(engine), _enemy(engine)
    assert player.x + player.hit_width / 2 == enemy.x - enemy.hit_width / 2
    assert player.x < player.x_next


def test_move_left_stops_at_enemy(engine):
    set_position(engine, PLAYER, 75, 10)
    engine.clock.delta = 1.0
    move_left(engine, PLAYER)
    player, enemy = _player(engine), _enemy(engine)
    assert player.x - player.hit_width / 2 == enemy.x + enemy.hit_width / 2


def test_move_up_stops_under_enemy(engine):
    set_position(engine, PLAYER, 60, 15)
    engine.clock.delta = 1.0
    move_up(engine, PLAYER)
    player, enemy = _player(engine), _enemy(engine)
    assert player.y - player.hit_height / 2 == enemy.y + enemy.hit_height / 2


def test_move_down_stops_above_enemy(engine):
    set_position(engine, PLAYER, 60, 4)
    engine.clock.delta = 1.0
    move_down(engine, PLAYER)
    player, enemy = _player(engine), _enemy(engine)
    assert player.y + player.hit_height / 2 == enemy.y - enemy.hit_height / 2


def test_colliding_right_reports_enemy(engine):
    _player(engine).x_next = 57
    assert colliding_right(engine, PLAYER) == ENEMY


def test_colliding_functions_report_nothing_when_far(engine):
    set_position(engine, PLAYER, 10, 20)
    player = _player(engine)
    player.x_next, player.y_next = 12, 19
    assert colliding_right(engine, PLAYER) == EntityId.NO_ENTITY
    assert colliding_left(engine, PLAYER) == EntityId.NO_ENTITY
    assert colliding_top(engine, PLAYER) == EntityId.NO_ENTITY
    assert colliding_bottom(engine, PLAYER) == EntityId.NO_ENTITY
    assert (player.x, player.y) == (10, 20)


def test_enemy_collides_with_player_not_itself(engine):
    set_position(engine, PLAYER, 80, 10)
    _enemy(engine).x_next = 75
    assert colliding_right(engine, ENEMY) == PLAYER


def test_move_up_clamps_to_top(engine):
    engine.clock.delta = 100.0
    move_up(engine, PLAYER)
    assert top_is_reached(engine, PLAYER)


def test_move_down_clamps_to_bottom(engine):
    set_position(engine, PLAYER, 10, 20)
    engine.clock.delta = 100.0
    move_down(engine, PLAYER)
    assert bottom_is_reached(engine, PLAYER)
    assert _player(engine).y < HEIGHT_SCREEN


def test_move_left_clamp_is_stable(engine):
    engine.clock.delta = 100.0
    move_left(engine, PLAYER)
    first = _player(engine).x
    move_left(engine, PLAYER)
    assert _player(engine).x == first
    assert first - _player(engine).width / 2 > 0


def test_move_right_clamp_is_stable(engine):
    set_position(engine, PLAYER, 80, 20)
    engine.clock.delta = 100.0
    move_right(engine, PLAYER)
    first = _player(engine).x
    move_right(engine, PLAYER)
    assert _player(engine).x == first
    assert first + _player(engine).width / 2 <= WIDTH_SCREEN + 1


def test_side_checks_false_in_middle(engine):
    set_position(engine, PLAYER, 40, 12)
    assert not left_side_is_reached(engine, PLAYER)
    assert not right_side_is_reached(engine, PLAYER)
    assert not top_is_reached(engine, PLAYER)
    assert not bottom_is_reached(engine, PLAYER)


def test_side_checks_true_at_edges(engine):
    set_position(engine, PLAYER, 0, 0)
    assert left_side_is_reached(engine, PLAYER)
    assert top_is_reached(engine, PLAYER)
    set_position(engine, PLAYER, WIDTH_SCREEN, HEIGHT_SCREEN)
    assert right_side_is_reached(engine, PLAYER)
    assert bottom_is_reached(engine, PLAYER)


def test_move_by_keys_follows_pressed_key(engine):
    set_position(engine, PLAYER, 20, 20)
    engine.clock.delta = 0.1
    engine.keyboard.press("D")
    move_by_keys(engine, PLAYER)
    assert _player(engine).x > 20
    assert _player(engine).y == 20


def test_move_by_keys_without_keys_keeps_position(engine):
    set_position(engine, PLAYER, 20, 20)
    engine.clock.delta = 0.1
    move_by_keys(engine, PLAYER)
    assert (_player(engine).x, _player(engine).y) == (20, 20)


def test_move_by_keys_up_and_left(engine):
    set_position(engine, PLAYER, 20, 20)
    engine.clock.delta = 0.1
    engine.keyboard.press("W")
    engine.keyboard.press("A")
    move_by_keys(engine, PLAYER)
    assert _player(engine).x < 20
    assert _player(engine).y < 20