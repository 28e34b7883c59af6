from .cluster_nodes_service import ClusterNodesService
from .node_refresh_service import NodeRefreshService

__all__ = [
    "ClusterNodesService",
    "NodeRefreshService",
]
