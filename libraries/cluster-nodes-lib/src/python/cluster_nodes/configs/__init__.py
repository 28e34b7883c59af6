from .cluster_nodes_config import ClusterNodesConfig

__all__ = [
    "ClusterNodesConfig",
]
