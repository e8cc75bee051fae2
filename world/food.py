"""
particle_life module: world/food.py

Food system:
- Single pellets dropped at uniformly random spots, one at a time
- Spawning is a per-frame coin flip, skipped while the field is full
- Pellets never age out; they only disappear when eaten
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import TYPE_CHECKING, List, Optional

import config

if TYPE_CHECKING:
    from creature.creature import Creature


@dataclass(eq=False)
class Food:
    x: float
    y: float

    @staticmethod
    def at_random(w: float, h: float, rng=random) -> "Food":
        return Food(x=rng.random() * w, y=rng.random() * h)


@dataclass
class FoodField:
    pellets: List[Food] = field(default_factory=list)
    max_pellets: int = config.MAX_FOOD
    spawn_chance: float = config.FOOD_SPAWN_CHANCE

    def __len__(self) -> int:
        return len(self.pellets)

    def __iter__(self):
        return iter(self.pellets)

    @property
    def full(self) -> bool:
        return len(self.pellets) >= self.max_pellets

    def maybe_spawn(self, w: float, h: float, rng=random) -> Optional[Food]:
        if self.full or rng.random() >= self.spawn_chance:
            return None
        pellet = Food.at_random(w, h, rng)
        self.pellets.append(pellet)
        return pellet

    def feed(self, creature: "Creature") -> Optional[Food]:
        """
        Let ``creature`` eat at most one pellet. Newest pellets are tried
        first; the eaten pellet is removed and returned.
        """
        for i in range(len(self.pellets) - 1, -1, -1):
            if creature.eat(self.pellets[i]):
                return self.pellets.pop(i)
        return None
