# render.py
from enum import Enum
from typing import List, Optional
import pygame # type: ignore

from .config import (
    BG, HEAD, BODY, SEGMENT_EDGE, FOOD, FOOD_EDGE, TEXT,
    FOOD_RADIUS_RATIO,
)
from .game import GameState
from .grid import Cell


class CellRole(Enum):
    HEAD = "head"
    BODY = "body"
    FOOD = "food"


class PygameRenderer:
    """
    Draws the board onto an off-screen surface and composes it with the
    score line and the message overlay on `present()`.

    `font` may be None (headless tests); text is then skipped.
    """

    def __init__(self, screen: pygame.Surface, font: Optional[pygame.font.Font], tile_px: int):
        self.screen = screen
        self.font = font
        self.tile_px = tile_px
        self.board = pygame.Surface(screen.get_size())
        self.score = 0
        self.high_score = 0
        self.message: Optional[str] = None
        self.clear()

    # ----- render capability -----
    def clear(self) -> None:
        self.board.fill(BG)

    def draw_cell(self, cell: Cell, role: CellRole) -> None:
        gx, gy = cell
        t = self.tile_px
        if role is CellRole.FOOD:
            center = (gx * t + t // 2, gy * t + t // 2)
            radius = max(1, round(t / 2 * FOOD_RADIUS_RATIO))
            pygame.draw.circle(self.board, FOOD, center, radius)
            pygame.draw.circle(self.board, FOOD_EDGE, center, radius, 1)
            return
        rect = pygame.Rect(gx * t, gy * t, t, t)
        pygame.draw.rect(self.board, HEAD if role is CellRole.HEAD else BODY, rect)
        pygame.draw.rect(self.board, SEGMENT_EDGE, rect, 1)

    def draw_state(self, state: GameState) -> None:
        self.clear()
        self.draw_cell(state.food, CellRole.FOOD)
        for i, cell in enumerate(state.snake):
            self.draw_cell(cell, CellRole.HEAD if i == 0 else CellRole.BODY)

    # ----- display surface -----
    def show_scores(self, score: int, high_score: int) -> None:
        self.score = score
        self.high_score = high_score

    def show_message(self, text: Optional[str]) -> None:
        self.message = text

    def present(self) -> None:
        self.screen.blit(self.board, (0, 0))
        if self.font is not None:
            txt = self.font.render(f"Score: {self.score}   High: {self.high_score}", True, TEXT)
            self.screen.blit(txt, (8, 6))
            if self.message:
                self._draw_overlay(self.message.splitlines())
        pygame.display.flip()

    def _draw_overlay(self, lines: List[str]) -> None:
        # Dim with translucent overlay
        width, height = self.screen.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.screen.blit(overlay, (0, 0))

        line_h = self.font.get_linesize() + 8
        top = height // 2 - line_h * (len(lines) - 1) // 2
        for i, line in enumerate(lines):
            surf = self.font.render(line, True, TEXT)
            self.screen.blit(surf, surf.get_rect(center=(width // 2, top + i * line_h)))
