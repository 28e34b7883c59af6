import threading
from datetime import datetime, timezone
from typing import Any

import pytest

from client_handler import ClientHandler
from managed_exceptions import TransportException
from cluster_nodes.models import NodeSummary
from cluster_nodes.nodes import InputFactory, NodeFactory

_MISSING = object()


class FakeNodeApiClient:
    """Stands in for NodeApiClient; answers from a routing table keyed by host and path."""

    def __init__(self):
        self._lock = threading.Lock()
        self._routes: dict[tuple[str, str | None, str], Any] = {}
        self.calls: list[tuple[str, str, str]] = []
        self.bodies: list[Any] = []

    def respond(self, method: str, path: str, value: Any, host: str | None = None) -> None:
        """Register a value, an exception to raise, or a zero-arg callable for a route."""
        self._routes[(method, host, path)] = value

    def count(self, method: str, path: str) -> int:
        with self._lock:
            return sum(1 for m, _, p in self.calls if m == method and p == path)

    def get(self, node, path, response_type, path_params=(), expect=(200,), timeout=None):
        return self._handle("GET", node, path, path_params)

    def post(self, node, path, body=None, path_params=(), expect=(200,), timeout=None):
        with self._lock:
            self.bodies.append(body)
        return self._handle("POST", node, path, path_params)

    def put(self, node, path, path_params=(), expect=(200,), timeout=None):
        return self._handle("PUT", node, path, path_params)

    def delete(self, node, path, path_params=(), expect=(200,), timeout=None):
        return self._handle("DELETE", node, path, path_params)

    def _handle(self, method, node, path, path_params):
        host = node.transport_address.to_ascii()
        full_path = ClientHandler.format_path(path, path_params)
        with self._lock:
            self.calls.append((method, host, full_path))
            value = self._routes.get((method, host, full_path), _MISSING)
            if value is _MISSING:
                value = self._routes.get((method, None, full_path), _MISSING)
        if value is _MISSING:
            raise TransportException(f"Could not reach {host}{full_path}")
        if isinstance(value, Exception):
            raise value
        if callable(value):
            return value()
        return value


def make_summary(**overrides) -> NodeSummary:
    fields = {
        "node_id": "n1",
        "short_node_id": "ab12",
        "transport_address": "http://10.0.0.1:9000/",
        "last_seen": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "is_master": True,
    }
    fields.update(overrides)
    return NodeSummary(**fields)


@pytest.fixture
def api():
    return FakeNodeApiClient()


@pytest.fixture
def input_factory():
    return InputFactory()


@pytest.fixture
def node_factory(api, input_factory):
    return NodeFactory(api, input_factory)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "logcluster:\n"
        "  console:\n"
        "    cluster:\n"
        "      transport_addresses:\n"
        "        - \"http://10.0.0.1:9000/\"\n"
        "        - \"http://10.0.0.2:9000\"\n"
        "      refresh_interval: 0.05\n"
        "      request_timeout: 2.5\n"
    )
    return path


@pytest.fixture
def summary_factory():
    return make_summary
