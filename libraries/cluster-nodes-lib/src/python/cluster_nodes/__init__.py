"""Cluster node tracking for the log-cluster management console.

Keeps one identity-stable :class:`NodeRecord` per cluster member and
reconciles freshly fetched snapshots into it.

Quick Start::

    from cluster_nodes import ClusterNodesService, NodeRefreshService, create_injector

    injector = create_injector()
    refresh = injector.get(NodeRefreshService)
    refresh.start()

    nodes = injector.get(ClusterNodesService)
    for node in nodes.active():
        print(node, node.hostname, node.throughput())

    refresh.stop()
"""

from .bootstrap import configure_logging, create_injector
from .clients import NodeApiClient
from .configs import ClusterNodesConfig
from .exceptions import (
    ExclusiveInputException,
    NoActiveNodeException,
    UnrecoverableFetchException,
)
from .models import FetchResult, FetchStatus, NodeSnapshot, NodeSummary, TransportEndpoint
from .nodes import (
    CacheState,
    Input,
    InputFactory,
    NodeFactory,
    NodeOrigin,
    NodeRecord,
    UNKNOWN_HOSTNAME,
    UNRESOLVED_SHORT_NODE_ID,
)
from .services import ClusterNodesService, NodeRefreshService

__all__ = [
    # Wiring
    "configure_logging",
    "create_injector",
    "ClusterNodesConfig",
    # Transport
    "NodeApiClient",
    # Nodes
    "CacheState",
    "Input",
    "InputFactory",
    "NodeFactory",
    "NodeOrigin",
    "NodeRecord",
    "UNKNOWN_HOSTNAME",
    "UNRESOLVED_SHORT_NODE_ID",
    # Services
    "ClusterNodesService",
    "NodeRefreshService",
    # Models
    "FetchResult",
    "FetchStatus",
    "NodeSnapshot",
    "NodeSummary",
    "TransportEndpoint",
    # Exceptions
    "ExclusiveInputException",
    "NoActiveNodeException",
    "UnrecoverableFetchException",
]
