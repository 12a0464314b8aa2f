"""
Rock Field - rockfield pygame demo

Steer with A/D (or arrows), thrust with W. Each wave of rocks is announced
with a two-second level overlay; press N to call the next wave.
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from rockfield import ArenaConfig, FrameClock, Game, GameConfig
from rockfield.pygame_io import PygameCanvas, read_input

TITLE = "Asteroids"
FPS = 60
BG_COLOR = (0, 0, 0)

logger = logging.getLogger("rock-field")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--width", type=float, default=800.0)
    parser.add_argument("--height", type=float, default=800.0)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = GameConfig(arena=ArenaConfig(width=args.width, height=args.height))
    arena_size = (int(config.arena.width), int(config.arena.height))

    pygame.init()
    screen = pygame.display.set_mode(arena_size, pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()

    # Draw at arena resolution, then stretch to whatever the window is.
    target = pygame.Surface(arena_size)
    canvas = PygameCanvas(target)

    game = Game(config, seed=args.seed)
    logger.info("seed %d", game.seed)
    game.level_up()

    clock = FrameClock()
    running = True
    while running:
        pg_clock.tick(args.fps)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_n:
                    game.level_up()

        frame = clock.tick()
        game.update(read_input(), frame.now, frame.dt)

        target.fill(BG_COLOR)
        game.render(canvas)
        screen.blit(pygame.transform.smoothscale(target, screen.get_size()), (0, 0))
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
