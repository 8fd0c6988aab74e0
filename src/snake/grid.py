# grid.py
from dataclasses import dataclass
from typing import Tuple
import random

Cell = Tuple[int, int]
Direction = Tuple[int, int]   # (dx, dy)


@dataclass(frozen=True)
class Grid:
    """Square board of `size` x `size` tiles."""
    size: int

    @classmethod
    def from_canvas(cls, canvas_px: int, tile_px: int) -> "Grid":
        return cls(canvas_px // tile_px)

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def random_cell(self, rng: random.Random) -> Cell:
        return (rng.randrange(self.size), rng.randrange(self.size))

    def center(self) -> Cell:
        return (self.size // 2, self.size // 2)
