"""
particle_life module: evolution/mutate.py

Mutation operators for offspring traits (type and speed).
"""

from __future__ import annotations
import random

import config
from creature.kinds import ALL_TYPES, CreatureType


def random_type(rng=random) -> CreatureType:
    return ALL_TYPES[int(rng.random() * len(ALL_TYPES))]


def clamp_speed(speed: float) -> float:
    return max(config.MIN_SPEED, min(config.MAX_SPEED, speed))


def mutate_speed(base: float, rng=random) -> float:
    """
    Shift ``base`` by a uniform amount in +/- SPEED_VARIATION / 2, then clamp
    into [MIN_SPEED, MAX_SPEED].
    """
    variation = (rng.random() - 0.5) * config.SPEED_VARIATION
    return clamp_speed(base + variation)


def inherit_type(parent: CreatureType, rng=random, chance: float = config.MUTATION_CHANCE) -> CreatureType:
    """
    Keep the parent's type unless the mutation roll hits, in which case the
    child gets a uniformly random type (possibly the parent's again).
    """
    if rng.random() < chance:
        return random_type(rng)
    return parent
