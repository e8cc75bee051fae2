"""
particle_life module: creature/kinds.py

Creature types, their colors, and who chases or flees whom.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Tuple


class CreatureType(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    @property
    def color(self) -> Tuple[int, int, int]:
        return COLORS[self]

    def reaction_to(self, other: "CreatureType") -> int:
        """
        +1 to chase ``other``, -1 to flee from it, 0 to ignore it.
        """
        return RELATIONS.get((self, other), 0)


COLORS: Dict[CreatureType, Tuple[int, int, int]] = {
    CreatureType.RED: (0xFF, 0x3B, 0x3B),
    CreatureType.GREEN: (0x3B, 0xFF, 0x3B),
    CreatureType.BLUE: (0x3B, 0x3B, 0xFF),
}

CHASE = 1
FLEE = -1

# (self, other) -> reaction; missing pairs are ignored
RELATIONS: Dict[Tuple[CreatureType, CreatureType], int] = {
    (CreatureType.GREEN, CreatureType.RED): FLEE,
    (CreatureType.BLUE, CreatureType.GREEN): CHASE,
}

ALL_TYPES = tuple(CreatureType)
