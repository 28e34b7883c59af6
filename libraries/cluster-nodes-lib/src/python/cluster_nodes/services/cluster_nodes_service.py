import logging
import threading
from typing import Iterable, Optional
from injector import inject, singleton
from cluster_nodes.configs import ClusterNodesConfig
from cluster_nodes.exceptions import NoActiveNodeException
from cluster_nodes.nodes import NodeFactory, NodeRecord

@singleton
class ClusterNodesService:
    """
    Registry of the long-lived node records the rest of the console holds.

    Freshly resolved records are never stored next to an existing record of
    the same node; they are merged into it, so references handed out earlier
    keep observing the current state.

    Seeded with one unresolved record per configured transport address.
    """

    @inject
    def __init__(self, config: ClusterNodesConfig, node_factory: NodeFactory):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__lock = threading.Lock()
        self.__nodes: list[NodeRecord] = []
        for transport_address in config.transport_addresses:
            self.merge_node(node_factory.from_transport_address(transport_address))

    def all(self) -> list[NodeRecord]:
        with self.__lock:
            return list(self.__nodes)

    def active(self) -> list[NodeRecord]:
        return [node for node in self.all() if node.is_active()]

    def master(self) -> Optional[NodeRecord]:
        for node in self.active():
            if node.is_master:
                return node
        return None

    def any_active(self) -> NodeRecord:
        nodes = self.all()
        for node in nodes:
            if node.is_active():
                return node
        raise NoActiveNodeException(known_nodes=len(nodes))

    def find(self, node_id: str) -> Optional[NodeRecord]:
        for node in self.all():
            if node.node_id == node_id:
                return node
        return None

    def merge_node(self, resolved: NodeRecord) -> NodeRecord:
        """Merge `resolved` into the held record of the same node, or start holding it."""
        with self.__lock:
            # Linear scan: identity may hold through the node id or the address.
            for node in self.__nodes:
                if node.same_identity_as(resolved):
                    if node is not resolved:
                        node.merge(resolved)
                    return node
            self.__nodes.append(resolved)
        self.__logger.info(f"Now tracking {resolved}")
        return resolved

    def reconcile(self, resolved_nodes: Iterable[NodeRecord]) -> list[NodeRecord]:
        return [self.merge_node(resolved) for resolved in resolved_nodes]
