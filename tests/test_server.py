import unittest
from core.hex.grid import TerrainGraph
from core.terrain import Terrain
from server.app import create_app


class TestMapServer(unittest.TestCase):
    def setUp(self):
        graph = TerrainGraph.build((0.0, 0.0, 0.0), (2.5, 2.0, 0.0), (1.0, 1.0, 0.0), 20, terrain=Terrain.GRASS)
        self.app = create_app(graph=graph)
        self.client = self.app.test_client()

    def test_get_graph(self):
        response = self.client.get("/api/graph")
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(len(data['nodes']), 7)
        self.assertFalse(data['limit_reached'])
        self.assertEqual(data['nodes'][0]['terrain'], 'grass')
        self.assertEqual(len(data['nodes'][0]['neighbors']), 6)

    def test_path(self):
        response = self.client.post("/api/path", json={"start": 1, "goal": 4})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"path": [1, 0, 4], "cost": 2})

    def test_path_invalid_data(self):
        response = self.client.post("/api/path", json={"start": 1})
        self.assertEqual(response.status_code, 400)
        response = self.client.post("/api/path", json={"start": "a", "goal": 4})
        self.assertEqual(response.status_code, 400)

    def test_path_unknown_node(self):
        response = self.client.post("/api/path", json={"start": 1, "goal": 99})
        self.assertEqual(response.status_code, 404)

    def test_no_path(self):
        graph = TerrainGraph()
        graph.add_node((0.0, 0.0, 0.0), Terrain.GRASS)
        graph.add_node((5.0, 0.0, 0.0), Terrain.GRASS)
        client = create_app(graph=graph).test_client()
        response = client.post("/api/path", json={"start": 0, "goal": 1})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"error": "No valid path", "path": []})

    def test_retype(self):
        response = self.client.post("/api/retype", json={"node": 0})
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data['terrain'], 'forest')
        self.assertEqual(data['cost'], 3)
        self.assertEqual(self.app.config['GRAPH'].nodes[0].terrain, Terrain.FOREST)

    def test_retype_unknown_node(self):
        response = self.client.post("/api/retype", json={"node": 42})
        self.assertEqual(response.status_code, 404)

    def test_lookup(self):
        response = self.client.post("/api/lookup", json={"position": [1.0, 0.0]})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['id'], 4)
        response = self.client.post("/api/lookup", json={"position": [9.0, 9.0, 0.0]})
        self.assertEqual(response.status_code, 404)
        response = self.client.post("/api/lookup", json={"position": "here"})
        self.assertEqual(response.status_code, 400)

    def test_rebuild(self):
        response = self.client.post("/api/graph", json={"area": [5.0, 5.0], "max_nodes": 20, "seed": 3})
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(len(data['nodes']), 20)
        self.assertTrue(data['limit_reached'])
        self.assertEqual(len(self.app.config['GRAPH']), 20)

    def test_rebuild_same_seed_same_map(self):
        first = self.client.post("/api/graph", json={"area": [6, 6], "max_nodes": 30, "seed": 9}).get_json()
        second = self.client.post("/api/graph", json={"area": [6, 6], "max_nodes": 30, "seed": 9}).get_json()
        self.assertEqual(first, second)

    def test_retype_explicit_terrain(self):
        response = self.client.post("/api/retype", json={"node": 2, "terrain": "Desert"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()['terrain'], 'desert')
        self.assertEqual(response.get_json()['cost'], 5)
        self.assertEqual(self.app.config['GRAPH'].nodes[2].terrain, Terrain.DESERT)

    def test_retype_unknown_terrain(self):
        response = self.client.post("/api/retype", json={"node": 2, "terrain": "lava"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.app.config['GRAPH'].nodes[2].terrain, Terrain.GRASS)

    def test_non_object_body_rejected(self):
        # Valid JSON that is not an object must not reach the handlers
        cases = [
            ("/api/path", ["start", "goal"]),
            ("/api/graph", [1]),
            ("/api/retype", [0]),
            ("/api/lookup", [0.0, 0.0]),
            ("/api/path", "start"),
            ("/api/retype", 0),
        ]
        for endpoint, body in cases:
            response = self.client.post(endpoint, json=body)
            self.assertEqual(response.status_code, 400, f"{endpoint} {body!r}")
            self.assertEqual(response.get_json(), {"error": "Invalid data"})
        self.assertEqual(len(self.app.config['GRAPH']), 7)

    def test_rebuild_invalid(self):
        response = self.client.post("/api/graph", json={"area": [5.0]})
        self.assertEqual(response.status_code, 400)
        response = self.client.post("/api/graph", json={"seed": [1, 2]})
        self.assertEqual(response.status_code, 400)


if __name__ == '__main__':
    unittest.main()
