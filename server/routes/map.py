"""
Reference: Graph construction, tile editing and path queries of the hex map.
Purpose: Server-side map routes (build, retype, lookup, path).
Dependencies: core/hex/grid.py, core/pathfinding/a_star.py, utils/dice.py, flask.
Ext Hooks: Multiple named maps per server.
Server Only: Rules enforcement.
"""

import logging
from flask import Blueprint, current_app, request, jsonify
from core.config import HEX_SIZE, MAP_SIZE, MAX_TILES
from core.hex.grid import TerrainGraph
from core.pathfinding.a_star import find_path, path_cost
from core.terrain import Terrain
from utils.dice import make_rng

logger = logging.getLogger(__name__)

bp = Blueprint('map', __name__)


def _json_body(required=False):
    """Request body as a dict; None when it is not a JSON object."""
    data = request.get_json(silent=True)
    if data is None and not required:
        return {}
    if not isinstance(data, dict):
        return None
    return data


def _vector(data, key, default):
    """Read a 2/3-component vector from data; None if malformed."""
    value = data.get(key, default)
    if not isinstance(value, (list, tuple)) or len(value) not in (2, 3):
        return None
    try:
        values = [float(v) for v in value]
    except (TypeError, ValueError):
        return None
    if len(values) == 2:
        values.append(0.0)
    return tuple(values)


def _resolve(graph, data, key):
    node_id = data.get(key)
    if not isinstance(node_id, int) or isinstance(node_id, bool):
        return None, (jsonify({"error": f"Invalid '{key}'"}), 400)
    node = graph.get_node(node_id)
    if node is None:
        return None, (jsonify({"error": f"Unknown node {node_id}"}), 404)
    return node, None


@bp.route("/api/graph", methods=["GET"])
def get_graph():
    with current_app.config['GRAPH_LOCK']:
        return jsonify(current_app.config['GRAPH'].get_grid_state())


@bp.route("/api/graph", methods=["POST"])
def rebuild_graph():
    data = _json_body()
    if data is None:
        return jsonify({"error": "Invalid data"}), 400
    origin = _vector(data, 'origin', (0.0, 0.0, 0.0))
    area = _vector(data, 'area', MAP_SIZE)
    hex_size = _vector(data, 'hex_size', HEX_SIZE)
    max_nodes = data.get('max_nodes', MAX_TILES)
    seed = data.get('seed')
    if origin is None or area is None or hex_size is None or not isinstance(max_nodes, int):
        return jsonify({"error": "Invalid data"}), 400
    if seed is not None and not isinstance(seed, (int, str)):
        return jsonify({"error": "Invalid seed"}), 400

    graph = TerrainGraph.build(origin, area, hex_size, max_nodes, rng=make_rng(seed))
    with current_app.config['GRAPH_LOCK']:
        current_app.config['GRAPH'] = graph
    logger.info("Rebuilt graph with %d nodes", len(graph))
    return jsonify(graph.get_grid_state())


@bp.route("/api/retype", methods=["POST"])
def retype_node():
    data = _json_body()
    if data is None:
        return jsonify({"error": "Invalid data"}), 400
    kind = None
    if 'terrain' in data:
        kind = Terrain.from_name(data['terrain'])
        if kind is None:
            return jsonify({"error": "Unknown terrain"}), 400
    with current_app.config['GRAPH_LOCK']:
        graph = current_app.config['GRAPH']
        node, error = _resolve(graph, data, 'node')
        if error:
            return error
        if kind is not None:
            node.set_terrain(kind)
        else:
            graph.retype_node(node, random=bool(data.get('random', False)))
        return jsonify(node.to_dict())


@bp.route("/api/lookup", methods=["POST"])
def lookup_node():
    data = _json_body()
    if data is None:
        return jsonify({"error": "Invalid data"}), 400
    position = _vector(data, 'position', None)
    if position is None:
        return jsonify({"error": "Invalid data"}), 400
    with current_app.config['GRAPH_LOCK']:
        node = current_app.config['GRAPH'].find_node(position)
        if node is None:
            return jsonify({"error": "No tile at position"}), 404
        return jsonify(node.to_dict())


@bp.route("/api/path", methods=["POST"])
def handle_path():
    data = _json_body(required=True)
    if not data or 'start' not in data or 'goal' not in data:
        return jsonify({"error": "Invalid data"}), 400

    with current_app.config['GRAPH_LOCK']:
        graph = current_app.config['GRAPH']
        start, error = _resolve(graph, data, 'start')
        if error:
            return error
        goal, error = _resolve(graph, data, 'goal')
        if error:
            return error
        path = find_path(graph, start, goal)

    if not path:
        return jsonify({"error": "No valid path", "path": []}), 200
    return jsonify({"path": [node.id for node in path], "cost": path_cost(path)})
