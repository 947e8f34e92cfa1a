"""
Reference: Map settings of the tile editor (map size, tile limit).
Purpose: Configs for hex grids, pathfinding and the map service.
Dependencies: os.
Ext Hooks: Add map presets.
"""

import os

HEX_SIZE = (1.0, 1.0, 0.0)  # Tile spacing (x, y, z)
MAP_SIZE = (10.0, 10.0, 1.0)  # Bounding box centered on (0, 0)
MAX_TILES = 500  # Cap for oversized maps
ROW_SPACING_DIVISOR = 1.35  # Diagonal rows sit hex_size.y / 1.35 apart
POSITION_TOLERANCE = 1e-5
SERVER_URL = os.environ.get("HEXPATH_SERVER_URL", "http://localhost:5000")
LOG_LEVEL = os.environ.get("HEXPATH_LOG_LEVEL", "INFO")
