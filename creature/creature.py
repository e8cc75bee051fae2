"""
particle_life module: creature/creature.py

A creature is a colored point mass with energy and a reproduction cooldown.

Life cycle:
- alive while energy > 0
- fading once energy <= 0: alpha drops every frame, no way back
- dead (removed by the world) once alpha <= 0
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

import config
from creature.kinds import CreatureType
from world import physics

if TYPE_CHECKING:
    from world.food import Food
    from world.world import World


@dataclass(eq=False)
class Creature:
    type: CreatureType
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    speed: float = config.BASE_SPEED
    energy: float = config.START_ENERGY
    cooldown: int = 0
    alpha: float = 1.0

    @staticmethod
    def spawn(
        type: CreatureType,
        x: float,
        y: float,
        speed: float = config.BASE_SPEED,
        rng=random,
    ) -> "Creature":
        """
        New creature heading in a random direction; each velocity component
        lies in [-speed / 2, speed / 2).
        """
        vx = (rng.random() - 0.5) * speed
        vy = (rng.random() - 0.5) * speed
        return Creature(type=type, x=x, y=y, vx=vx, vy=vy, speed=speed)

    @property
    def color(self):
        return self.type.color

    def update(self, w: float, h: float) -> None:
        physics.move(self)
        physics.bounce(self, w, h)

        self.energy -= config.ENERGY_DECAY
        if self.cooldown > 0:
            self.cooldown -= 1

        if self.energy <= 0:
            self.alpha -= config.FADE_STEP

    def interact(self, other: "Creature", world: "World") -> Optional["Creature"]:
        """
        React to ``other`` if it is within sensing range. Only this creature's
        velocity changes; the reverse reaction happens when the world calls
        ``other.interact(self, ...)``.

        Returns the offspring if the pair reproduced.
        """
        if other is self:
            return None

        dx, dy, dist = physics.distance(self.x, self.y, other.x, other.y)
        if dist >= config.SENSE_RADIUS:
            return None

        if dist > 0:
            physics.steer(self, dx, dy, dist, self.type.reaction_to(other.type))

        if self.can_mate_with(other, dist):
            return world.breed(self, other)
        return None

    def can_mate_with(self, other: "Creature", dist: float) -> bool:
        return (
            self.type == other.type
            and dist < config.REPRO_RADIUS
            and self.cooldown == 0
            and other.cooldown == 0
        )

    def eat(self, food: "Food") -> bool:
        """
        Gain energy if ``food`` is touching. The caller removes eaten food.
        """
        _, _, dist = physics.distance(self.x, self.y, food.x, food.y)
        if dist < config.RADIUS + config.FOOD_RADIUS:
            self.energy += config.FOOD_ENERGY
            return True
        return False

    @property
    def fading(self) -> bool:
        # eating after the fade began restores energy, not alpha
        return self.energy <= 0 or self.alpha < 1

    def is_dead(self) -> bool:
        return self.alpha <= 0
