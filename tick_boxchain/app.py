"""Box Chain - tap to grow the boxes one by one.

Controls:
  Click / Space   Animate the current box
  Esc             Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_boxchain.config import ChainConfig
from tick_boxchain.stage import Stage
from tick_boxchain.surface import PygameSurface
from tick_boxchain.timers import PygameTimerSource

FPS = 60

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Box Chain - tick-boxchain pygame demo")
    p.add_argument("--width", type=int, default=800, help="Window width (200-3840, default: 800)")
    p.add_argument("--height", type=int, default=400, help="Window height (150-2160, default: 400)")
    p.add_argument("--nodes", type=int, default=5, help="Number of boxes (1-20, default: 5)")
    p.add_argument("--period-ms", type=int, default=50, help="Tick period in ms (10-1000, default: 50)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    args = p.parse_args(argv)
    args.width = max(200, min(3840, args.width))
    args.height = max(150, min(2160, args.height))
    args.nodes = max(1, min(20, args.nodes))
    args.period_ms = max(10, min(1000, args.period_ms))
    return args


def config_from_args(args: argparse.Namespace) -> ChainConfig:
    return ChainConfig(
        width=args.width,
        height=args.height,
        nodes=args.nodes,
        period_ms=args.period_ms,
    )


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = config_from_args(args)

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("Box Chain")
    clock = pygame.time.Clock()

    surface = PygameSurface(screen)
    timers = PygameTimerSource()
    dirty = True

    def request_redraw() -> None:
        nonlocal dirty
        dirty = True

    stage = Stage(timers, request_redraw, config)

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if timers.dispatch(event):
                continue
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    stage.handle_tap()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                stage.handle_tap()

        # --- Render ---
        if dirty:
            stage.render(surface)
            pygame.display.flip()
            dirty = False

    stage.ticker.stop()
    logger.info("quit")
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
