from dataclasses import dataclass
from typing import Optional

import pygame # type: ignore

# ----- Colors (board, snake, food) -----
BG           = (0x1a, 0xbc, 0x9c)
HEAD         = (0x34, 0x98, 0xdb)
BODY         = (0x2e, 0xcc, 0x71)
SEGMENT_EDGE = (0x2c, 0x3e, 0x50)
FOOD         = (0xe7, 0x4c, 0x3c)
FOOD_EDGE    = (0xc0, 0x39, 0x2b)
TEXT         = (236, 240, 241)

FOOD_RADIUS_RATIO = 0.8   # food circle vs. half a tile

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
STILL = (0, 0)            # before the first start only

# ----- Keys -----
KEY_BINDINGS = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE, pygame.K_r)
QUIT_KEYS = (pygame.K_ESCAPE,)

# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    canvas_px: int = 400
    tile_px: int = 20
    initial_delay_ms: int = 150
    delay_step_ms: int = 2
    min_delay_ms: int = 50
    food_reward: int = 10
    seed: Optional[int] = None
    scores_path: str = "snake_highscore.json"

    def __post_init__(self):
        if self.canvas_px <= 0 or self.tile_px <= 0:
            raise ValueError("canvas_px and tile_px must be positive")
        if self.canvas_px % self.tile_px:
            raise ValueError(
                f"tile_px={self.tile_px} does not divide canvas_px={self.canvas_px}"
            )
        if self.min_delay_ms > self.initial_delay_ms:
            raise ValueError("min_delay_ms must not exceed initial_delay_ms")

CFG = Config()
