"""
particle_life module: render/renderer.py

Pygame rendering of food, creatures and the population HUD.
"""

from __future__ import annotations
import pygame

import config
from creature.creature import Creature
from render import colors
from world.stats import PopulationStats


def clear(screen: pygame.Surface) -> None:
    screen.fill(colors.BG)


def draw_food(screen: pygame.Surface, pellets) -> None:
    r = int(config.FOOD_RADIUS)
    for p in pellets:
        pygame.draw.circle(screen, colors.FOOD, (int(p.x), int(p.y)), r)


def draw_creature(screen: pygame.Surface, c: Creature) -> None:
    alpha = max(0.0, min(1.0, c.alpha))
    r = int(config.RADIUS)
    if alpha >= 1.0:
        pygame.draw.circle(screen, c.color, (int(c.x), int(c.y)), r)
        return

    # fading: draw onto a per-pixel-alpha sprite and blend it in
    sprite = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
    pygame.draw.circle(sprite, (*c.color, int(alpha * 255)), (r, r), r)
    screen.blit(sprite, (int(c.x) - r, int(c.y) - r))


def draw_creatures(screen: pygame.Surface, creatures) -> None:
    for c in creatures:
        draw_creature(screen, c)


def draw_hud(screen: pygame.Surface, stats: PopulationStats, paused: bool = False) -> None:
    font = pygame.font.Font(None, 24)

    y = 10
    for line, col in stats.lines():
        txt = font.render(line, True, col)
        screen.blit(txt, (12, y))
        y += 20

    if paused:
        txt = font.render("Paused (space to resume)", True, colors.HUD_DIM)
        screen.blit(txt, (12, y + 6))


def draw_frame(screen: pygame.Surface, food, creatures, stats: PopulationStats, paused: bool = False) -> None:
    clear(screen)
    draw_food(screen, food)
    draw_creatures(screen, creatures)
    draw_hud(screen, stats, paused=paused)
