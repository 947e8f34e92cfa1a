"""
Reference: Tile click flow of the hex map (first click = start, next click = end).
Purpose: Host-side start/end selection and path bookkeeping; no rendering.
Dependencies: core/hex/grid.py, core/pathfinding/a_star.py, core/terrain.py.
Ext Hooks: Multi-waypoint routes.
Client Only: Feeds the renderer with path_nodes().
"""

import logging
from enum import Enum
from core.pathfinding.a_star import find_path, path_cost
from core.terrain import Terrain

logger = logging.getLogger(__name__)


class Selection(Enum):
    REJECTED_WATER = 'rejected_water'
    START_SET = 'start_set'
    RESET = 'reset'
    PATH_FOUND = 'path_found'
    NO_PATH = 'no_path'


class PathSelector:
    """
    Tracks the start/end tiles picked by the user.

    After a path is found the end tile becomes the new start, so the user can
    keep extending the route one click at a time. The replaced path is kept in
    previous_path so the renderer can show already traversed tiles.
    """

    def __init__(self, graph):
        self.graph = graph
        self.start_node = None
        self.end_node = None
        self.current_path = []
        self.previous_path = []

    def select(self, node):
        if node.terrain is Terrain.WATER:
            logger.info("Clicked on water: %r", node)
            return Selection.REJECTED_WATER

        if self.start_node is None:
            self.start_node = node
            return Selection.START_SET

        self.end_node = node
        if self.start_node is self.end_node:
            self.reset()
            return Selection.RESET

        self.previous_path = self.current_path
        self.current_path = find_path(self.graph, self.start_node, self.end_node)
        if not self.current_path:
            logger.info("No valid path from %r to %r", self.start_node, self.end_node)
            return Selection.NO_PATH

        logger.info("Path planned: %d tiles, cost %d", len(self.current_path), path_cost(self.current_path))
        self.start_node = self.end_node
        return Selection.PATH_FOUND

    def retype(self, node):
        """Advance node to the next terrain kind (editor action)."""
        self.graph.retype_node(node, random=False)
        return node.terrain

    def path_nodes(self):
        """Yield the current path without its start tile."""
        for node in self.current_path[1:]:
            yield node

    def reset(self):
        self.start_node = None
        self.end_node = None
        self.current_path = []
        self.previous_path = []
