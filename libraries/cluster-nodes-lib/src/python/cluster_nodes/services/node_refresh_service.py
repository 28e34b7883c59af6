import logging
import threading
from injector import inject, singleton
from managed_exceptions import InvalidArgumentException, TransportException
from prometheus_client import Gauge
from cluster_nodes.clients import NodeApiClient
from cluster_nodes.configs import ClusterNodesConfig
from cluster_nodes.exceptions import NoActiveNodeException
from cluster_nodes.models import NodeSummary, NodeSummaryList
from cluster_nodes.nodes import NodeFactory, NodeRecord
from .cluster_nodes_service import ClusterNodesService

CLUSTER_NODES_GAUGE = Gauge("lcc_cluster_nodes", "Number of tracked cluster nodes", ["state"])

@singleton
class NodeRefreshService:
    """
    Background liveness and discovery loop.

    Each round:
    1. Lists the cluster from any active node and reconciles the listing into
       the registry, so nodes nobody configured become known.
    2. Probes every tracked node on its own address. A successful probe is
       merged into the record and counts as a contact; a failed one is
       recorded as a failure. Probes run last so direct contact decides liveness.
    """

    @inject
    def __init__(self,
                 config: ClusterNodesConfig,
                 cluster_nodes_service: ClusterNodesService,
                 node_factory: NodeFactory,
                 api: NodeApiClient):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__interval = config.refresh_interval
        self.__cluster_nodes_service = cluster_nodes_service
        self.__node_factory = node_factory
        self.__api = api

        self.__stop_event = threading.Event()
        self.__thread: threading.Thread | None = None

    # ── Lifecycle ─────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return self.__thread is not None and self.__thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self.__stop_event.clear()
        self.__thread = threading.Thread(target=self.__loop, name="node-refresh", daemon=True)
        self.__thread.start()
        self.__logger.info(f"Node refresh loop started (interval={self.__interval}s)")

    def stop(self) -> None:
        self.__stop_event.set()
        if self.__thread is not None:
            self.__thread.join(timeout=5.0)
            self.__thread = None

    def __loop(self) -> None:
        while not self.__stop_event.is_set():
            try:
                self.refresh()
            except Exception:
                self.__logger.exception("Node refresh loop error")
            self.__stop_event.wait(self.__interval)

    # ── Refresh ───────────────────────────────────────────────────

    def refresh(self) -> None:
        """Run one discover-and-probe round."""
        self.discover()
        for node in self.__cluster_nodes_service.all():
            self.probe(node)
        self.__update_gauge()

    def probe(self, node: NodeRecord) -> bool:
        try:
            summary = self.__api.get(node, "/system/cluster/node", NodeSummary)
        except TransportException:
            node.mark_failure()
            return False

        try:
            resolved = self.__node_factory.from_summary(summary)
        except InvalidArgumentException as e:
            # An answer we cannot place counts as a failed contact.
            self.__logger.error(f"{node} reported an unusable summary: {e}")
            node.mark_failure()
            return False

        resolved.set_active(True)
        node.merge(resolved)
        # Last contact is not carried by merge.
        node.touch()
        return True

    def discover(self) -> list[NodeRecord]:
        try:
            source = self.__cluster_nodes_service.any_active()
        except NoActiveNodeException as e:
            self.__logger.warning(f"Skipping cluster discovery: {e}")
            return []

        try:
            listing = self.__api.get(source, "/system/cluster/nodes", NodeSummaryList)
        except TransportException:
            self.__logger.error(f"Could not list cluster nodes from {source}", exc_info=True)
            return []

        resolved_nodes: list[NodeRecord] = []
        for summary in listing.nodes:
            try:
                resolved = self.__node_factory.from_summary(summary)
            except InvalidArgumentException as e:
                self.__logger.error(f"Skipping listed node {summary.node_id} from {source}: {e}")
                continue
            resolved.set_active(True)
            resolved_nodes.append(resolved)
        return self.__cluster_nodes_service.reconcile(resolved_nodes)

    def __update_gauge(self) -> None:
        nodes = self.__cluster_nodes_service.all()
        active = sum(1 for node in nodes if node.is_active())
        CLUSTER_NODES_GAUGE.labels(state="active").set(active)
        CLUSTER_NODES_GAUGE.labels(state="inactive").set(len(nodes) - active)
