from __future__ import annotations

import argparse
import logging

import pygame

from falling_blocks.game import Engine, GameConfig, TickClock
from .renderer import Renderer


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the arrow keys")
    p.add_argument("--width", type=int, default=15)
    p.add_argument("--height", type=int, default=22)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell_size", type=int, default=20)
    p.add_argument("--log-level", default="INFO")
    return p


def run(config: GameConfig, cell_size: int = 20) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        engine = Engine(config)
        renderer = Renderer(cell_size=cell_size)
        ticks = TickClock(config.tick_unit_ms)

        screen = pygame.display.set_mode(renderer.window_size(engine))
        pygame.display.set_caption("Falling Blocks - Human Play")
        font = pygame.font.SysFont(None, 24)

        # Spawn the first figure
        engine.step(by_timer=False)

        running = True
        while running:
            # Input handling
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and engine.is_over:
                        engine.reset()
                        ticks.reset()
                        engine.step(by_timer=False)
                    else:
                        engine.on_key(pygame.key.name(event.key))

            # Gravity
            if not engine.is_over and ticks.due(pygame.time.get_ticks(), engine.speed_level):
                engine.tick()

            renderer.draw(screen, engine, font)

            if engine.is_over:
                text = font.render("Game Over - Press R to restart, ESC to quit", True, (255, 255, 255))
                rect = text.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2))
                screen.blit(text, rect)

            pygame.display.flip()
            clock.tick(60)
        logger.info(f"Final score: {engine.score}")
    finally:
        pygame.quit()


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = GameConfig(width=args.width, height=args.height, random_seed=args.seed)
    run(config, cell_size=args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
