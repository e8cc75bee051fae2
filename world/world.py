"""
particle_life module: world/world.py

World state container (creatures, food, bounds) and the per-frame tick.

A tick runs, in order:
  1. maybe drop one food pellet
  2. each creature eats at most one pellet
  3. each creature moves, bounces, burns energy
  4. each creature reacts to every other creature (both directions of a pair)
  5. faded-out creatures are removed

Drawing and the stats readout are left to whoever drives the ticks.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random
from typing import List, Optional

import config
from creature.creature import Creature
from creature.kinds import ALL_TYPES, CreatureType
from evolution.reproduction import charge_parents, make_offspring
from world.food import FoodField
from world.stats import PopulationStats

logger = logging.getLogger(__name__)


@dataclass
class TickReport:
    births: int = 0
    deaths: int = 0
    eaten: int = 0


def seed_types(n: int) -> List[CreatureType]:
    # first third red, second third green, remainder blue
    out: List[CreatureType] = []
    for i in range(n):
        if i < n / 3:
            out.append(CreatureType.RED)
        elif i < 2 * n / 3:
            out.append(CreatureType.GREEN)
        else:
            out.append(CreatureType.BLUE)
    return out


def _check_bounds(w: float, h: float) -> None:
    if w <= 0 or h <= 0:
        raise ValueError(f"world bounds must be positive, got {w}x{h}")


@dataclass
class World:
    w: float
    h: float
    creatures: List[Creature] = field(default_factory=list)
    food: FoodField = field(default_factory=FoodField)
    rng: random.Random = field(default_factory=random.Random)
    max_creatures: int = config.MAX_CREATURES

    tick_count: int = 0
    births: int = 0
    deaths: int = 0

    @staticmethod
    def create(w: float, h: float, n: int = config.INITIAL_COUNT, seed: Optional[int] = None) -> "World":
        _check_bounds(w, h)
        world = World(w=w, h=h, rng=random.Random(seed))
        for t in seed_types(n):
            world.creatures.append(world.random_creature(t))
        logger.debug("seeded %d creatures in %sx%s world", n, w, h)
        return world

    def random_creature(self, type: CreatureType) -> Creature:
        x = self.rng.random() * self.w
        y = self.rng.random() * self.h
        return Creature.spawn(type, x, y, rng=self.rng)

    @property
    def full(self) -> bool:
        return len(self.creatures) >= self.max_creatures

    def resize(self, w: float, h: float) -> None:
        """
        New bounds take effect for spawning and bouncing; nobody is moved.
        """
        _check_bounds(w, h)
        self.w = w
        self.h = h
        logger.debug("world resized to %sx%s", w, h)

    def breed(self, parent: Creature, mate: Creature) -> Optional[Creature]:
        """
        Add one offspring of ``parent`` and ``mate`` unless the population is
        at its cap. Both parents pay the reproduction cost.
        """
        if self.full:
            return None
        child = make_offspring(parent, mate, self.rng)
        charge_parents(parent, mate)
        self.creatures.append(child)
        return child

    def tick(self) -> TickReport:
        report = TickReport()
        types_before = {c.type for c in self.creatures}

        self.food.maybe_spawn(self.w, self.h, self.rng)

        for c in self.creatures:
            if self.food.feed(c) is not None:
                report.eaten += 1

        for c in self.creatures:
            c.update(self.w, self.h)

        # walk the live list: newborns appended here act and are reacted to
        # in this same pass
        i = 0
        while i < len(self.creatures):
            c = self.creatures[i]
            j = 0
            while j < len(self.creatures):
                if c.interact(self.creatures[j], self) is not None:
                    report.births += 1
                j += 1
            i += 1

        alive = [c for c in self.creatures if not c.is_dead()]
        report.deaths = len(self.creatures) - len(alive)
        self.creatures = alive

        self.tick_count += 1
        self.births += report.births
        self.deaths += report.deaths

        if report.deaths:
            self._log_extinctions(types_before)
        return report

    def _log_extinctions(self, types_before) -> None:
        remaining = {c.type for c in self.creatures}
        for t in ALL_TYPES:
            if t in types_before and t not in remaining:
                logger.debug("%s creatures died out at tick %d", t.value, self.tick_count)
        if not self.creatures:
            logger.info("population extinct at tick %d", self.tick_count)

    def stats(self) -> PopulationStats:
        return PopulationStats.collect(
            self.creatures,
            food=len(self.food),
            births=self.births,
            deaths=self.deaths,
            tick=self.tick_count,
        )
