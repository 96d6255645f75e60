"""Movement, screen bounds and collision between entities."""

from __future__ import annotations

from lockerscene.engine import (
    HEIGHT_SCREEN,
    NUMBER_OF_ENTITIES,
    WIDTH_SCREEN,
    Engine,
    EntityId,
)


def _others(engine: Engine, entity: int):
    for index in range(EntityId.PLAYER, NUMBER_OF_ENTITIES):
        if index != entity:
            yield index, engine.entities[index]


def colliding_right(engine: Engine, entity: int) -> int:
    """Stop the entity against whatever it would hit moving right.

    Returns the id of the entity hit, or ``EntityId.NO_ENTITY``.
    """
    me = engine.entities[entity]
    for index, other in _others(engine, entity):
        if (
            me.x_next + me.hit_width / 2 > other.x - other.hit_width / 2
            and me.x - me.hit_width / 2 < other.x + other.hit_width / 2
            and me.y - me.hit_height / 2 < other.y + other.hit_height / 2
            and me.y + me.hit_height / 2 > other.y - other.hit_height / 2 + 1
        ):
            me.x = (other.x - other.hit_width / 2) - me.hit_width / 2
            return EntityId(index)
    return EntityId.NO_ENTITY


def colliding_left(engine: Engine, entity: int) -> int:
    """Stop the entity against whatever it would hit moving left."""
    me = engine.entities[entity]
    for index, other in _others(engine, entity):
        if (
            me.x_next - me.hit_width / 2 < other.x + other.hit_width / 2
            and me.x + me.hit_width / 2 > other.x - other.hit_width / 2 + 1
            and me.y + me.hit_height / 2 > other.y - other.hit_height / 2 + 1
            and me.y - me.hit_height / 2 < other.y + other.hit_height / 2
        ):
            me.x = (other.x + other.hit_width / 2) + me.hit_width / 2
            return EntityId(index)
    return EntityId.NO_ENTITY


def colliding_top(engine: Engine, entity: int) -> int:
    """Stop the entity against whatever it would hit moving up."""
    me = engine.entities[entity]
    for index, other in _others(engine, entity):
        if (
            me.y_next - me.hit_height / 2 < other.y + other.hit_height / 2
            and me.y + me.hit_height / 2 > other.y - other.hit_height / 2 + 1
            and me.x + me.hit_width / 2 > other.x - other.hit_width / 2 + 1
            and me.x - me.hit_width / 2 < other.x + other.hit_width / 2
        ):
            me.y = (other.y + other.hit_height / 2) + me.hit_height / 2
            return EntityId(index)
    return EntityId.NO_ENTITY


def colliding_bottom(engine: Engine, entity: int) -> int:
    """Stop the entity against whatever it would hit moving down."""
    me = engine.entities[entity]
    for index, other in _others(engine, entity):
        if (
            me.y_next + me.hit_height / 2 > other.y - other.hit_height / 2
            and me.y - me.hit_height / 2 < other.y + other.hit_height / 2
            and me.x - me.hit_width / 2 < other.x + other.hit_width / 2
            and me.x + me.hit_width / 2 > other.x - other.hit_width / 2 + 1
        ):
            me.y = (other.y - other.hit_height / 2) - me.hit_height / 2
            return EntityId(index)
    return EntityId.NO_ENTITY


def set_position(engine: Engine, entity: int, x: float, y: float) -> None:
    me = engine.entities[entity]
    me.x = x
    me.y = y


def top_is_reached(engine: Engine, entity: int) -> bool:
    me = engine.entities[entity]
    return me.y <= me.height // 2


def bottom_is_reached(engine: Engine, entity: int) -> bool:
    me = engine.entities[entity]
    return me.y >= HEIGHT_SCREEN - me.height // 2 - 1


def left_side_is_reached(engine: Engine, entity: int) -> bool:
    me = engine.entities[entity]
    return me.x <= me.width // 2 + 1


def right_side_is_reached(engine: Engine, entity: int) -> bool:
    me = engine.entities[entity]
    return me.x >= WIDTH_SCREEN - me.width // 2 + 1


def is_even(number: int) -> bool:
    return number % 2 == 0


def move_up(engine: Engine, entity: int) -> None:
    me = engine.entities[entity]
    me.y_next = me.y - engine.clock.delta * me.velocity_y
    if me.y_next < me.height // 2:
        me.y = me.height // 2
        return
    if colliding_top(engine, entity):
        return
    me.y = me.y_next


def move_down(engine: Engine, entity: int) -> None:
    me = engine.entities[entity]
    me.y_next = me.y + engine.clock.delta * me.velocity_y
    if me.y_next > HEIGHT_SCREEN - me.height // 2:
        me.y = HEIGHT_SCREEN - me.height // 2 - 1
        return
    if colliding_bottom(engine, entity):
        return
    me.y = me.y_next


def move_left(engine: Engine, entity: int) -> None:
    me = engine.entities[entity]
    me.x_next = me.x - engine.clock.delta * me.velocity_x
    if me.x_next < me.width // 2 + 3:
        me.x = me.width // 2 + 3
        return
    if colliding_left(engine, entity):
        return
    me.x = me.x_next


def move_right(engine: Engine, entity: int) -> None:
    me = engine.entities[entity]
    me.x_next = me.x + engine.clock.delta * me.velocity_x
    if me.x_next > WIDTH_SCREEN - me.width // 2:
        me.x = WIDTH_SCREEN - me.width // 2
        return
    if colliding_right(engine, entity):
        return
    me.x = me.x_next


def move_by_keys(engine: Engine, entity: int) -> None:
    """Move the entity with the W, A, S and D keys."""
    keyboard = engine.keyboard
    if keyboard.is_pressed("W"):
        move_up(engine, entity)
    if keyboard.is_pressed("S"):
        move_down(engine, entity)
    if keyboard.is_pressed("A"):
        move_left(engine, entity)
    if keyboard.is_pressed("D"):
        move_right(engine, entity)