"""
Live particle-life simulation: colored creatures chase, flee, eat, breed and
fade out, one world tick per rendered frame.
"""

from __future__ import annotations
import logging
from typing import Optional

import pygame

import config
from render import renderer
from world.world import World

logger = logging.getLogger("particle_life")


def handle_events(world: World, screen: pygame.Surface, paused: bool):
    """
    Returns (running, paused, screen). A resize reallocates the display
    surface and moves the world walls.
    """
    running = True
    for e in pygame.event.get():
        if e.type == pygame.QUIT:
            running = False
        elif e.type == pygame.KEYDOWN:
            if e.key == pygame.K_ESCAPE:
                running = False
            elif e.key == pygame.K_SPACE:
                paused = not paused
        elif e.type == pygame.VIDEORESIZE:
            w, h = max(1, e.w), max(1, e.h)
            screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
            world.resize(w, h)
    return running, paused, screen


def main(seed: Optional[int] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H), pygame.RESIZABLE)
        pygame.display.set_caption("particle_life")
        clock = pygame.time.Clock()

        world = World.create(config.SCREEN_W, config.SCREEN_H, seed=seed)
        logger.info("started with %d creatures", len(world.creatures))

        running = True
        paused = False
        while running:
            clock.tick(config.FPS)

            running, paused, screen = handle_events(world, screen, paused)
            if not running:
                break

            if not paused:
                world.tick()

            renderer.draw_frame(screen, world.food, world.creatures, world.stats(), paused=paused)
            pygame.display.flip()

        logger.info(
            "stopped after %d ticks: %d births, %d deaths, %d alive",
            world.tick_count, world.births, world.deaths, len(world.creatures),
        )
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
