"""
particle_life module: world/stats.py

Population readout shown in the HUD every frame.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from creature.kinds import ALL_TYPES, CreatureType
from render import colors

NAMES = {
    CreatureType.RED: "Red",
    CreatureType.GREEN: "Green",
    CreatureType.BLUE: "Blue",
}


@dataclass
class PopulationStats:
    counts: Dict[CreatureType, int] = field(default_factory=dict)
    food: int = 0
    total: int = 0
    births: int = 0
    deaths: int = 0
    tick: int = 0

    @staticmethod
    def collect(creatures: Iterable, food: int, births: int = 0, deaths: int = 0, tick: int = 0) -> "PopulationStats":
        counts = {t: 0 for t in ALL_TYPES}
        total = 0
        for c in creatures:
            counts[c.type] += 1
            total += 1
        return PopulationStats(counts=counts, food=food, total=total, births=births, deaths=deaths, tick=tick)

    def lines(self) -> List[Tuple[str, Tuple[int, int, int]]]:
        out = [("Populations:", colors.HUD_TEXT)]
        for t in ALL_TYPES:
            out.append((f"{NAMES[t]}: {self.counts.get(t, 0)}", t.color))
        out.append((f"Food: {self.food}", colors.HUD_TEXT))
        out.append((f"Total: {self.total}", colors.HUD_TEXT))
        out.append((f"Births: {self.births}  Deaths: {self.deaths}", colors.HUD_TEXT))
        return out
