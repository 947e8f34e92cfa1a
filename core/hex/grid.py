"""
Reference: Tile creation of the hex map editor (seed tile + breadth-first growth).
Purpose: Hex terrain graph with tile generation, adjacency and cost queries.
Dependencies: core/terrain.py, core/hex/utils.py, utils/dice.py, logging.
Ext Hooks: Procedural terrain tables; weighted day costs.
"""

import logging
from typing import Dict, List, Optional, Tuple

from core.config import HEX_SIZE, MAP_SIZE, MAX_TILES
from core.hex.utils import get_neighbors, same_position
from core.terrain import Terrain, WATER_DAYS
from utils.dice import make_rng, roll_choice

logger = logging.getLogger(__name__)

Position = Tuple[float, float, float]

_KEY_DECIMALS = 4
_KEY_STEP = 10 ** -_KEY_DECIMALS


class Node:
    """One hex tile: fixed position, mutable terrain, cost derived from terrain."""

    def __init__(self, node_id: int, position: Position, terrain: Terrain = Terrain.GRASS):
        self.id = node_id
        self.position = tuple(float(c) for c in position)
        self._neighbors: Dict["Node", None] = {}  # Ordered set
        self.set_terrain(terrain)

    @property
    def terrain(self) -> Terrain:
        return self._terrain

    @property
    def cost(self) -> int:
        return self._cost

    @property
    def neighbors(self) -> Tuple["Node", ...]:
        return tuple(self._neighbors)

    def set_terrain(self, terrain: Terrain):
        self._terrain = Terrain(terrain)
        self._cost = self._terrain.cost

    def add_neighbor(self, other: "Node"):
        # No-op for self and for neighbors already linked
        if other is not self:
            self._neighbors.setdefault(other, None)

    def is_neighbor(self, other: "Node") -> bool:
        return other in self._neighbors

    def to_dict(self):
        return {
            'id': self.id,
            'position': list(self.position),
            'terrain': self._terrain.name.lower(),
            'cost': self._cost if self._cost != WATER_DAYS else None,
            'neighbors': [n.id for n in self._neighbors],
        }

    def __repr__(self):
        return f"Node({self.id}, {self.position[:2]}, {self._terrain.name})"


class TerrainGraph:
    def __init__(self, rng=None):
        self.nodes: List[Node] = []
        self.rng = rng if rng is not None else make_rng()
        self.limit_reached = False
        self._index: Dict[Tuple[float, float], Node] = {}

    @classmethod
    def build(cls, origin: Position = (0.0, 0.0, 0.0), area_size=MAP_SIZE, hex_size=HEX_SIZE,
              max_nodes: int = MAX_TILES, rng=None, terrain: Optional[Terrain] = None) -> "TerrainGraph":
        """
        Grow the grid breadth-first from a seed tile at origin.

        Every node is expanded; new nodes are only created while the graph holds
        fewer than max_nodes, so the limit stops growth but not linking.

        Args:
            origin: Seed tile position (x, y, z).
            area_size: Map box; candidates must fall strictly within +/- area/2.
            hex_size: Tile spacing used for the six neighbor offsets.
            max_nodes: Upper bound on node count; <= 0 gives an empty graph.
            rng: Random source for terrain; pass a seeded one for reproducible maps.
            terrain: Fixed terrain for every tile instead of random kinds.
        """
        graph = cls(rng=rng)
        if max_nodes <= 0:
            graph.limit_reached = True
            return graph

        graph.add_node(origin, terrain)
        i = 0
        while i < len(graph.nodes):
            current = graph.nodes[i]
            for pos in get_neighbors(current.position, hex_size, area_size):
                neighbor = graph.find_node(pos)
                if neighbor is None:
                    if len(graph.nodes) >= max_nodes:
                        graph.limit_reached = True
                        continue
                    neighbor = graph.add_node(pos, terrain)
                graph.link(current, neighbor)
            i += 1

        logger.debug("Built graph: %d nodes (limit %d, reached=%s)",
                     len(graph.nodes), max_nodes, graph.limit_reached)
        return graph

    def add_node(self, position, terrain=None):
        if terrain is None:
            terrain = roll_choice(list(Terrain), self.rng)
        node = Node(len(self.nodes), position, terrain)
        self.nodes.append(node)
        self._index[self._key(node.position)] = node
        return node

    @staticmethod
    def _key(position):
        return round(position[0], _KEY_DECIMALS), round(position[1], _KEY_DECIMALS)

    def link(self, a: Node, b: Node):
        """Add the adjacency from both sides."""
        a.add_neighbor(b)
        b.add_neighbor(a)

    def find_node(self, position) -> Optional[Node]:
        """Node at position (x/y within tolerance), or None."""
        kx, ky = self._key(position)
        for dx in (0, -1, 1):
            for dy in (0, -1, 1):
                key = (round(kx + dx * _KEY_STEP, _KEY_DECIMALS), round(ky + dy * _KEY_STEP, _KEY_DECIMALS))
                node = self._index.get(key)
                if node is not None and same_position(node.position, position):
                    return node
        return None

    def get_node(self, node_id) -> Optional[Node]:
        if isinstance(node_id, int) and 0 <= node_id < len(self.nodes):
            return self.nodes[node_id]
        return None

    def neighbors(self, node: Node) -> Tuple[Node, ...]:
        return node.neighbors

    def cost_to(self, node: Node, neighbor: Node) -> int:
        # Cost belongs to the destination tile; non-adjacent moves get the sentinel
        if node.is_neighbor(neighbor):
            return neighbor.cost
        return WATER_DAYS

    def retype_node(self, node: Node, random: bool = True):
        """Reassign terrain: uniform random kind, or the next kind in order."""
        if random:
            node.set_terrain(roll_choice(list(Terrain), self.rng))
        else:
            node.set_terrain(node.terrain.next())
        logger.debug("Retyped %r", node)

    def get_grid_state(self):
        return {'nodes': [node.to_dict() for node in self.nodes],
                'limit_reached': self.limit_reached}

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def __contains__(self, node):
        return isinstance(node, Node) and self.get_node(node.id) is node
