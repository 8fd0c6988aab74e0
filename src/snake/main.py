# main.py
import argparse
import dataclasses
import logging
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame # type: ignore

from .config import CFG, QUIT_KEYS
from .grid import Grid
from .loop import GameLoop
from .render import PygameRenderer
from .scores import JsonHighScoreStore, MemoryHighScoreStore, ScoreTracker
from .timer import FrameTimer

logger = logging.getLogger(__name__)

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for food placement (default: random)")
    parser.add_argument("--scores", default=CFG.scores_path,
                        help="JSON file holding the high score")
    parser.add_argument("--no-save", action="store_true",
                        help="keep the high score in memory only")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = dataclasses.replace(CFG, seed=args.seed, scores_path=args.scores)
    store = MemoryHighScoreStore() if args.no_save else JsonHighScoreStore(cfg.scores_path)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((cfg.canvas_px, cfg.canvas_px))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    timer = FrameTimer(pygame.time.get_ticks)
    game = GameLoop(
        grid=Grid.from_canvas(cfg.canvas_px, cfg.tile_px),
        timer=timer,
        renderer=PygameRenderer(screen, font, cfg.tile_px),
        tracker=ScoreTracker(store, cfg.food_reward),
        cfg=cfg,
    )
    logger.info("Board %dx%d, high score %d", game.grid.size, game.grid.size,
                game.tracker.high_score)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in QUIT_KEYS:
                    running = False
                else:
                    game.handle_key(event.key)

        # 2) update: fire the tick if its delay has elapsed
        timer.run_due()

        # 3) render
        game.renderer.present()
        clock.tick(60)  # movement gated by the timer, not the frame rate

    pygame.quit()

if __name__ == "__main__":
    main()
