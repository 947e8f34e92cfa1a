"""
Reference: Tile types and day costs of the hex map.
Purpose: Terrain kinds with fixed traversal costs for pathfinding.
Dependencies: enum.
Ext Hooks: Add more kinds (e.g., swamp); keep WATER last so next() wraps to GRASS.
"""

from enum import IntEnum

# Water is a sentinel maximum so a route across it is always the last resort.
WATER_DAYS = 2 ** 31 - 1


class Terrain(IntEnum):
    GRASS = 0
    FOREST = 1
    DESERT = 2
    MOUNTAIN = 3
    WATER = 4

    @property
    def cost(self) -> int:
        return DAY_COSTS[self]

    def next(self) -> "Terrain":
        """Next kind in enumeration order, wrapping after the last."""
        members = list(Terrain)
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def from_name(cls, name):
        """Case-insensitive lookup ('grass', 'Water', ...); None if unknown."""
        try:
            return cls[str(name).upper()]
        except KeyError:
            return None


DAY_COSTS = {
    Terrain.GRASS: 1,
    Terrain.FOREST: 3,
    Terrain.DESERT: 5,
    Terrain.MOUNTAIN: 10,
    Terrain.WATER: WATER_DAYS,
}

MOUNTAIN_DAYS = DAY_COSTS[Terrain.MOUNTAIN]
