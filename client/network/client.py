"""
Reference: Map server communication.
Purpose: Wrap network calls with retry/back-off for robustness.
Dependencies: requests, time, logging.
Ext Hooks: Add authentication, encryption.
Client Only: HTTP client with resilience.
"""

import logging
import time
from typing import Optional, Dict, Any, List
import requests

logger = logging.getLogger(__name__)


class NetworkClient:
    def __init__(self, base_url: str, max_retries: int = 3, retry_delay: float = 1.0, backoff_factor: float = 2.0):
        self.base_url = base_url.rstrip('/')
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.backoff_factor = backoff_factor

    def _request_with_retry(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None,
                            timeout: float = 5.0) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}{endpoint}"
        delay = self.retry_delay
        for attempt in range(self.max_retries):
            try:
                if method == 'GET':
                    response = requests.get(url, timeout=timeout)
                else:
                    response = requests.post(url, json=data, timeout=timeout)
                if response.status_code == 200:
                    return response.json()
                if 400 <= response.status_code < 500:
                    # Rejected request; retrying will not change the answer
                    logger.warning("Request rejected (%s): %s", response.status_code, response.text)
                    return None
                logger.warning("Server error %s on attempt %d", response.status_code, attempt + 1)
            except requests.exceptions.RequestException as e:
                logger.warning("Network error on attempt %d: %s", attempt + 1, e)

            if attempt < self.max_retries - 1:
                logger.info("Retrying in %s seconds...", delay)
                time.sleep(delay)
                delay *= self.backoff_factor
        return None

    def post_with_retry(self, endpoint: str, data: Dict[str, Any], timeout: float = 5.0) -> Optional[Dict[str, Any]]:
        """Post with exponential backoff retry."""
        return self._request_with_retry('POST', endpoint, data, timeout)

    def get_with_retry(self, endpoint: str, timeout: float = 5.0) -> Optional[Dict[str, Any]]:
        return self._request_with_retry('GET', endpoint, None, timeout)

    def fetch_graph(self) -> Optional[Dict[str, Any]]:
        return self.get_with_retry("/api/graph")

    def rebuild_graph(self, **params) -> Optional[Dict[str, Any]]:
        """params: origin, area, hex_size, max_nodes, seed."""
        return self.post_with_retry("/api/graph", params)

    def request_path(self, start_id: int, goal_id: int) -> Optional[List[int]]:
        """Node ids of the path; [] when no path exists, None when the server is unreachable."""
        result = self.post_with_retry("/api/path", {"start": start_id, "goal": goal_id})
        if result is None:
            return None
        return result.get("path", [])

    def retype(self, node_id: int, random: bool = False, terrain: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Advance (or randomize) a tile; terrain sets an explicit kind such as 'desert'."""
        data = {"node": node_id, "random": random}
        if terrain is not None:
            data["terrain"] = terrain
        return self.post_with_retry("/api/retype", data)

# Usage: client = NetworkClient(SERVER_URL)
# path = client.request_path(0, 12)
