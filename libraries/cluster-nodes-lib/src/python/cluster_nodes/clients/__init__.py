from .node_api_client import NodeApiClient

__all__ = [
    "NodeApiClient",
]
