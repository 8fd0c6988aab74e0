import pygame

from src.snake.config import BG, BODY, FOOD, HEAD, SEGMENT_EDGE
from src.snake.game import GameState
from src.snake.render import CellRole, PygameRenderer

TILE = 20


def pixel(r, pos):
    return tuple(r.board.get_at(pos))[:3]


def make_renderer():
    return PygameRenderer(pygame.Surface((200, 200)), None, TILE)


def test_clear_fills_background():
    r = make_renderer()
    r.draw_cell((1, 1), CellRole.BODY)
    r.clear()
    assert pixel(r, (30, 30)) == BG


def test_segments_are_stroked_squares():
    r = make_renderer()
    r.draw_cell((2, 3), CellRole.HEAD)
    r.draw_cell((3, 3), CellRole.BODY)
    assert pixel(r, (2 * TILE + 10, 3 * TILE + 10)) == HEAD
    assert pixel(r, (3 * TILE + 10, 3 * TILE + 10)) == BODY
    assert pixel(r, (2 * TILE, 3 * TILE)) == SEGMENT_EDGE


def test_food_is_an_inscribed_circle():
    r = make_renderer()
    r.draw_cell((4, 4), CellRole.FOOD)
    assert pixel(r, (4 * TILE + 10, 4 * TILE + 10)) == FOOD
    # tile corner lies outside the circle
    assert pixel(r, (4 * TILE, 4 * TILE)) == BG


def test_draw_state_and_display_fields():
    r = make_renderer()
    state = GameState(snake=[(5, 5), (4, 5)], food=(8, 8), direction=(1, 0),
                      score=30, tick_delay_ms=144)
    r.draw_state(state)
    assert pixel(r, (5 * TILE + 10, 5 * TILE + 10)) == HEAD
    assert pixel(r, (4 * TILE + 10, 5 * TILE + 10)) == BODY
    assert pixel(r, (8 * TILE + 10, 8 * TILE + 10)) == FOOD

    r.show_scores(30, 90)
    r.show_message("Game over! Final score: 30")
    assert (r.score, r.high_score) == (30, 90)
    assert r.message.startswith("Game over")
    r.show_message(None)
    assert r.message is None
