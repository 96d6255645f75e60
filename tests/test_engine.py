import pytest

from lockerscene.engine import (
    ENEMY_SPRITE_SHEET_SIZE,
    HEIGHT_ENEMY,
    HEIGHT_PLAYER,
    HEIGHT_PLAYER_SPRITE_SHEET,
    MAP_SIZE,
    PLAYER_SPRITE_SHEET_SIZE,
    POSITION_X_ENEMY,
    POSITION_Y_ENEMY,
    SIZE_FRAME,
    TIME_FRAME,
    VELOCITY_PLAYER_X,
    VELOCITY_PLAYER_Y,
    WIDTH_ENEMY,
    WIDTH_PLAYER,
    Clock,
    EntityId,
    KeyboardState,
    TextOrientation,
    create_engine,
)


def test_entity_ids_match_slots():
    engine = create_engine()
    assert [int(e) for e in EntityId] == [0, 1, 2]
    assert TextOrientation.CENTER == 1
    assert engine.entities[int(EntityId.PLAYER)].width == WIDTH_PLAYER
    assert engine.entities[int(EntityId.ENEMY)].width == WIDTH_ENEMY


def test_create_engine_positions_player_and_enemy():
    engine = create_engine()
    player = engine.entities[EntityId.PLAYER]
    enemy = engine.entities[EntityId.ENEMY]
    assert (player.x, player.y) == (39, 10)
    assert (enemy.x, enemy.y) == (POSITION_X_ENEMY, POSITION_Y_ENEMY)


def test_create_engine_sizes_and_velocities():
    engine = create_engine()
    player = engine.entities[EntityId.PLAYER]
    enemy = engine.entities[EntityId.ENEMY]
    assert (player.width, player.height) == (WIDTH_PLAYER, HEIGHT_PLAYER)
    assert (player.hit_width, player.hit_height) == (WIDTH_PLAYER, HEIGHT_PLAYER)
    assert player.sheet_height == HEIGHT_PLAYER_SPRITE_SHEET
    assert (player.velocity_x, player.velocity_y) == (VELOCITY_PLAYER_X, VELOCITY_PLAYER_Y)
    assert (enemy.width, enemy.height) == (WIDTH_ENEMY, HEIGHT_ENEMY)
    assert (enemy.velocity_x, enemy.velocity_y) == (0, 0)
    assert player.printing_index == 0 and enemy.printing_index == 0


def test_buffers_have_their_sizes():
    engine = create_engine()
    assert len(engine.map) == MAP_SIZE
    assert len(engine.player_sprite) == PLAYER_SPRITE_SHEET_SIZE
    assert len(engine.enemy_sprite) == ENEMY_SPRITE_SHEET_SIZE
    assert engine.clock.frame == TIME_FRAME


def test_frame_bytes_starts_with_newline():
    engine = create_engine()
    data = engine.frame_bytes()
    assert len(data) == SIZE_FRAME
    assert data[:1] == b"\n"


def test_frame_bytes_reflects_frame_changes():
    engine = create_engine()
    engine.frame[5] = ord("#")
    assert engine.frame_bytes()[5:6] == b"#"


def test_create_engine_uses_given_keyboard():
    keyboard = KeyboardState()
    engine = create_engine(keyboard)
    assert engine.keyboard is keyboard


def test_keyboard_press_and_release():
    keyboard = KeyboardState()
    keyboard.press("w")
    assert keyboard.is_pressed("W")
    keyboard.release("W")
    assert keyboard.is_pressed("W") is False


def test_keyboard_was_pressed_is_consumed():
    keyboard = KeyboardState()
    keyboard.press("ESCAPE")
    keyboard.release("ESCAPE")
    assert keyboard.was_pressed("ESCAPE") is True
    assert keyboard.was_pressed("ESCAPE") is False


def test_keyboard_unpressed_key():
    keyboard = KeyboardState()
    assert keyboard.is_pressed("A") is False
    assert keyboard.was_pressed("A") is False


def test_clock_delta_from_timer():
    readings = iter([1.0, 1.25])
    clock = Clock(timer=lambda: next(readings))
    clock.start()
    assert clock.update() == pytest.approx(0.25)
    assert clock.delta == pytest.approx(0.25)
    assert clock.current == 1.25
    assert clock.last == 1.0