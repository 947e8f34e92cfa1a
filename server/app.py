"""
Reference: Map owner of the hex pathfinding demo.
Purpose: Flask server owning one terrain graph and answering map queries.
Dependencies: flask, server/routes/map.py, core/hex/grid.py.
Ext Hooks: Add more blueprints.
Client/Server: Server for graph state and path validation.
"""

import logging
import threading
from flask import Flask
from core.config import LOG_LEVEL
from core.hex.grid import TerrainGraph
from server.routes.map import bp as map_bp
from utils.dice import make_rng
from utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def create_app(graph=None, seed=None):
    """Build the app; a default-sized graph is generated when none is given."""
    app = Flask(__name__)
    if graph is None:
        graph = TerrainGraph.build(rng=make_rng(seed))
    app.config['GRAPH'] = graph
    app.config['GRAPH_LOCK'] = threading.Lock()  # Retype and search must not interleave
    app.register_blueprint(map_bp)
    logger.info("Map server ready with %d nodes", len(graph))
    return app


if __name__ == "__main__":
    configure_logging(LOG_LEVEL)
    create_app().run(debug=True)
