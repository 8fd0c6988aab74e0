import random

from src.snake.config import Config, DOWN, LEFT, RIGHT, UP
from src.snake.game import GameState, TickOutcome, advance, new_game_state, spawn_food
from src.snake.grid import Grid

GRID = Grid(20)


def make_state(snake, direction=RIGHT, food=(0, 0), delay=150):
    return GameState(snake=list(snake), food=food, direction=direction,
                     score=0, tick_delay_ms=delay)


def test_grid_bounds():
    assert Grid.from_canvas(400, 20).size == 20
    assert GRID.in_bounds((0, 0))
    assert GRID.in_bounds((19, 19))
    assert not GRID.in_bounds((20, 10))
    assert not GRID.in_bounds((-1, 0))
    assert not GRID.in_bounds((5, 20))


def test_new_game_state_is_fixed_three_cells():
    state = new_game_state(GRID, random.Random(0))
    assert state.snake == [(10, 10), (9, 10), (8, 10)]
    assert state.direction == RIGHT
    assert state.score == 0
    assert state.tick_delay_ms == 150
    assert state.food not in state.snake


def test_move_without_eating_keeps_length():
    state = make_state([(10, 10), (9, 10), (8, 10)], food=(0, 0))
    outcome = advance(state, GRID, random.Random(0))
    assert outcome is TickOutcome.CONTINUED
    assert state.snake == [(11, 10), (10, 10), (9, 10)]
    assert state.score == 0
    assert state.tick_delay_ms == 150


def test_eating_grows_scores_and_speeds_up():
    state = make_state([(10, 10), (9, 10), (8, 10)], food=(11, 10))
    outcome = advance(state, GRID, random.Random(1))
    assert outcome is TickOutcome.ATE
    assert state.snake == [(11, 10), (10, 10), (9, 10), (8, 10)]
    assert state.score == 10
    assert state.tick_delay_ms == 148
    assert state.food not in state.snake


def test_on_eat_hook_does_the_scoring():
    eaten = []
    state = make_state([(10, 10), (9, 10)], food=(11, 10))
    advance(state, GRID, random.Random(1), on_eat=eaten.append)
    assert eaten == [state]
    assert state.score == 0


def test_delay_never_below_floor():
    cfg = Config()
    state = make_state([(1, 1)], direction=RIGHT, food=(2, 1), delay=51)
    rng = random.Random(3)
    for _ in range(5):
        state.food = (state.head[0] + 1, state.head[1])
        if not GRID.in_bounds(state.food):
            break
        advance(state, GRID, rng, cfg)
        assert state.tick_delay_ms >= cfg.min_delay_ms
    assert state.tick_delay_ms == 50


def test_wall_collision():
    state = make_state([(19, 10), (18, 10), (17, 10)], food=(0, 0))
    before = list(state.snake)
    assert advance(state, GRID, random.Random(0)) is TickOutcome.COLLIDED
    assert state.snake == before


def test_wall_collision_every_edge():
    for head, direction in (((0, 5), LEFT), ((5, 0), UP), ((5, 19), DOWN)):
        state = make_state([head], direction=direction, food=(10, 10))
        assert advance(state, GRID, random.Random(0)) is TickOutcome.COLLIDED


def test_self_collision_with_body():
    # head at (5,5) moving down into (5,6)
    snake = [(5, 5), (4, 5), (4, 6), (5, 6), (6, 6)]
    state = make_state(snake, direction=DOWN, food=(0, 0))
    assert advance(state, GRID, random.Random(0)) is TickOutcome.COLLIDED


def test_moving_into_vacating_tail_cell_collides():
    # 2x2 loop: the next head is the current tail
    snake = [(5, 5), (5, 6), (6, 6), (6, 5)]
    state = make_state(snake, direction=RIGHT, food=(0, 0))
    assert advance(state, GRID, random.Random(0)) is TickOutcome.COLLIDED


def test_food_never_on_snake():
    rng = random.Random(1234)
    small = Grid(4)
    snake = [(x, y) for x in range(4) for y in range(4)][:14]
    for _ in range(200):
        assert spawn_food(snake, small, rng) not in snake
