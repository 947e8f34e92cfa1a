"""
Reference: Tile placement of the hex map editor.
Purpose: Hex geometry on world positions (neighbor offsets, bounds, distance).
Dependencies: math, core/config.py.
Ext Hooks: Pointy-top layouts.
"""

import math
from core.config import ROW_SPACING_DIVISOR, POSITION_TOLERANCE


def neighbor_offsets(hex_size):
    # Left/right at full width, four diagonals at half width and one row up/down
    width, height = hex_size[0], hex_size[1]
    row = height / ROW_SPACING_DIVISOR
    return [
        (-width, 0.0),
        (-width / 2, row),
        (-width / 2, -row),
        (width, 0.0),
        (width / 2, row),
        (width / 2, -row),
    ]


def get_neighbors(position, hex_size, area_size):
    """Candidate neighbor positions of position that lie inside the map box."""
    x, y, z = position
    candidates = [(x + dx, y + dy, z) for dx, dy in neighbor_offsets(hex_size)]
    return [pos for pos in candidates if within_bounds(pos, area_size)]


def within_bounds(position, area_size):
    # Strictly inside +/- area/2, box centered on (0, 0) not on the seed tile
    half_x, half_y = area_size[0] / 2, area_size[1] / 2
    return -half_x < position[0] < half_x and -half_y < position[1] < half_y


def same_position(a, b, tolerance=POSITION_TOLERANCE):
    """Approximate equality on x and y only; z is visual layering."""
    return (math.isclose(a[0], b[0], rel_tol=0.0, abs_tol=tolerance)
            and math.isclose(a[1], b[1], rel_tol=0.0, abs_tol=tolerance))


def hex_distance(a, b):
    # Straight-line distance between two world positions
    return math.dist(a, b)
