"""
particle_life module: evolution/reproduction.py

Live reproduction helpers: build an offspring from a same-type pair and
charge both parents for it.
"""

from __future__ import annotations
import random

import config
from creature.creature import Creature
from evolution.mutate import inherit_type, mutate_speed


def make_offspring(parent: Creature, mate: Creature, rng=random) -> Creature:
    """
    Child appears on top of ``parent``. Its speed starts from the pair's mean
    speed and its type from the parent's, both subject to mutation.
    """
    child_type = inherit_type(parent.type, rng)
    child_speed = mutate_speed((parent.speed + mate.speed) / 2, rng)
    return Creature.spawn(child_type, parent.x, parent.y, speed=child_speed, rng=rng)


def charge_parents(parent: Creature, mate: Creature) -> None:
    for c in (parent, mate):
        c.energy -= config.REPRO_COST
        c.cooldown = config.REPRO_COOLDOWN
