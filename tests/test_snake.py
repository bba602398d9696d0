import pygame

from snakegame.shapes import BLACK, BLUE, CYAN
from snakegame.snake import MOVE_EVERY_N_FRAMES, START_POSITION, Key, Snake


def test_initial_layout():
    snake = Snake()
    assert len(snake.body) == 3
    assert snake.head.position == (START_POSITION, START_POSITION)
    for previous, segment in zip(snake.body, snake.body[1:]):
        assert segment.x == previous.x - snake.segment_size
        assert segment.y == previous.y
    assert snake.head.fill == CYAN
    assert all(segment.fill == BLUE for segment in snake.body[1:])


def test_constructor_places_snake_when_given_coordinates():
    snake = Snake(400.0, 100.0)
    assert snake.head.position == (400.0, 100.0)
    assert snake.body[2].x == 400.0 - 2 * snake.segment_size


def test_place_lays_body_left_of_head():
    snake = Snake()
    snake.place(200.0, 50.0)
    for index, segment in enumerate(snake.body):
        assert segment.position == (200.0 - index * snake.segment_size, 50.0)


def test_move_waits_for_frame_count():
    snake = Snake()
    start = snake.head.position
    for _ in range(MOVE_EVERY_N_FRAMES - 1):
        snake.move()
    assert snake.head.position == start


def test_move_advances_one_segment_and_body_follows():
    snake = Snake()
    before = [segment.position for segment in snake.body]
    for _ in range(MOVE_EVERY_N_FRAMES):
        snake.move()
    assert snake.head.position == (before[0][0] + snake.segment_size, before[0][1])
    assert [segment.position for segment in snake.body[1:]] == before[:-1]


def test_turn_up_from_moving_right():
    snake = Snake()
    snake.update_input({Key.UP})
    assert snake.direction == (0.0, -snake.movement_speed)


def test_alternative_keys_turn():
    snake = Snake()
    snake.update_input({Key.S})
    assert snake.direction == (0.0, snake.movement_speed)


def test_reverse_turn_is_ignored():
    snake = Snake()
    snake.update_input({Key.LEFT})
    assert snake.direction == (snake.movement_speed, 0.0)


def test_second_turn_waits_until_head_moves():
    snake = Snake()
    snake.update_input({Key.UP})
    snake.update_input({Key.RIGHT})
    assert snake.direction == (0.0, -snake.movement_speed)


def test_update_moves_in_chosen_direction():
    snake = Snake()
    start_x, start_y = snake.head.position
    for _ in range(MOVE_EVERY_N_FRAMES):
        snake.update({Key.DOWN}, 800, 600)
    assert snake.head.position == (start_x, start_y + snake.segment_size)


def test_grow_extends_along_tail_direction():
    snake = Snake()
    tail = snake.body[-1].position
    before_tail = snake.body[-2].position
    snake.grow()
    assert len(snake.body) == 4
    new = snake.body[-1]
    assert new.position == (
        tail[0] + (tail[0] - before_tail[0]),
        tail[1] + (tail[1] - before_tail[1]),
    )
    assert new.fill == BLUE


def test_short_snake_never_collides():
    snake = Snake()
    snake.body[2].x, snake.body[2].y = snake.head.position
    assert snake.collides_with_self() is False


def test_straight_snake_does_not_collide():
    snake = Snake()
    snake.grow()
    snake.grow()
    assert snake.collides_with_self() is False


def test_head_on_fourth_segment_collides():
    snake = Snake()
    snake.grow()
    snake.body[3].x, snake.body[3].y = snake.head.position
    assert snake.collides_with_self() is True


def test_wrap_left_edge():
    snake = Snake()
    snake.head.x = -snake.segment_size
    snake.wrap_around(800, 600)
    assert snake.head.x == 800 - snake.segment_size


def test_wrap_right_and_bottom_edges():
    snake = Snake()
    snake.head.x = 790.0
    snake.head.y = 590.0
    snake.wrap_around(800, 600)
    assert snake.head.position == (0.0, 0.0)


def test_wrap_top_edge():
    snake = Snake()
    snake.body[1].y = -10.0
    snake.wrap_around(800, 600)
    assert snake.body[1].y == 600 - snake.segment_size


def test_reset_shape_makes_all_blue():
    snake = Snake()
    snake.head.width = 3.0
    snake.reset_shape()
    assert all(segment.fill == BLUE for segment in snake.body)
    assert all(segment.width == snake.segment_size for segment in snake.body)


def test_render_draws_head_with_outline():
    surface = pygame.Surface((800, 600))
    snake = Snake()
    snake.render(surface)
    x, y = int(snake.head.x), int(snake.head.y)
    half = int(snake.segment_size) // 2
    assert tuple(surface.get_at((x + half, y + half)))[:3] == CYAN
    assert tuple(surface.get_at((x, y)))[:3] == BLACK
    body = snake.body[1]
    assert tuple(surface.get_at((int(body.x) + half, int(body.y) + half)))[:3] == BLUE