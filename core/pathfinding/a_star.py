"""
Reference: Day-cost pathfinding between two tiles of the hex map.
Purpose: A* pathfinding over a terrain graph (cost = destination tile's day cost).
Dependencies: core/hex/utils.py (hex_distance), core/terrain.py, heapq.
Ext Hooks: Add dynamic costs (e.g., seasons changing day costs).
Client/Server: Shared logic; server answers path queries, client walks the result.
"""

import heapq
import itertools
import logging
from core.hex.utils import hex_distance
from core.terrain import MOUNTAIN_DAYS

logger = logging.getLogger(__name__)


def straight_line(node, goal):
    """Distance to goal scaled by the most expensive walkable terrain."""
    return hex_distance(node.position, goal.position) * MOUNTAIN_DAYS


def zero_heuristic(node, goal):
    # Plain lowest-cost-first ordering; always yields a cheapest path
    return 0


def find_path(graph, start, goal, heuristic=straight_line):
    """
    A* search from start to goal.

    Frontier entries are (f, insertion order, node) so equal f values pop in
    the order they were pushed; repeated calls on an unchanged graph return the
    same path. Returns [] when goal cannot be reached.
    """
    if start is goal:
        return [start]

    counter = itertools.count()
    g_score = {start: 0}
    came_from = {}
    open_set = [(heuristic(start, goal), next(counter), start)]
    closed = set()

    while open_set:
        _, _, current = heapq.heappop(open_set)
        if current in closed:
            continue  # Stale entry
        if current is goal:
            path = reconstruct_path(came_from, current)
            logger.debug("A* found path: %s", [n.id for n in path])
            return path
        closed.add(current)

        for neighbor in graph.neighbors(current):
            tentative_g_score = g_score[current] + graph.cost_to(current, neighbor)
            if tentative_g_score < g_score.get(neighbor, float('inf')):
                g_score[neighbor] = tentative_g_score
                came_from[neighbor] = current
                closed.discard(neighbor)  # Reopen if a cheaper route turned up
                f_score = tentative_g_score + heuristic(neighbor, goal)
                heapq.heappush(open_set, (f_score, next(counter), neighbor))

    logger.debug("A* exhausted frontier: no path %s -> %s", start.id, goal.id)
    return []  # No path found


def reconstruct_path(came_from, current):
    """Follow predecessors back to the start, then reverse."""
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def iter_path(graph, start, goal, heuristic=straight_line):
    """Lazily yield the nodes of the found path; yields nothing when not found."""
    yield from find_path(graph, start, goal, heuristic)


def path_cost(path):
    """Sum of day costs along path, excluding the start tile."""
    return sum(node.cost for node in path[1:])
