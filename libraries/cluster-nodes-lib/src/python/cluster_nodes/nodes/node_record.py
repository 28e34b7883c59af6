"""One cluster member as tracked by the management console.

A :class:`NodeRecord` is long-lived and shared: the registry, request
threads and the background refresh loop all hold references to the same
instance.  Freshly fetched snapshots never replace it; they are
:meth:`~NodeRecord.merge`\\ d into it so every holder sees the update.

Identity
    Two records are the same node iff both carry an equal, non-empty node
    id, or their transport addresses are equal.  The rule is not
    transitive across three records (A and B share a node id, B and C
    share an address, A and C share neither); set and dict membership
    relies on it exactly as stated, so it is kept that way.

Remote reads
    Everything fetched from the node itself goes through the
    :class:`~cluster_nodes.clients.NodeApiClient`.  Read accessors degrade
    to a documented default on transport failure and log the error;
    only :class:`ExclusiveInputException` and
    :class:`UnrecoverableFetchException` reach the caller.
"""

from __future__ import annotations

import enum
import logging
import threading
from datetime import datetime
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from managed_exceptions import TransportException

from ..exceptions import ExclusiveInputException, UnrecoverableFetchException
from ..models import (
    BufferInfo,
    BuffersResponse,
    FetchResult,
    InputLaunchRequest,
    InputSummary,
    InputSummaryList,
    InputTypeSummary,
    InputTypesResponse,
    InternalLogger,
    LoggersResponse,
    Metric,
    MetricsList,
    NodeSnapshot,
    NodeSummary,
    ServerThroughput,
    SystemOverview,
    TransportEndpoint,
)
from .activity_tracker import ActivityTracker
from .system_info_cache import CacheState, SystemInfoCache

if TYPE_CHECKING:
    from ..clients import NodeApiClient
    from .input import Input, InputFactory

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNRESOLVED_SHORT_NODE_ID = "unresolved"
"""Short node id of a record built from a bare configured address."""

UNKNOWN_HOSTNAME = "unknown"
"""Hostname reported while the node's system information is unavailable."""


class NodeOrigin(str, enum.Enum):
    """How a record came into existence."""

    DISCOVERED = "discovered"
    CONFIGURED = "configured"


class NodeRecord:
    """Identity-stable, mutable view of one cluster node.

    Use :meth:`from_summary` for nodes resolved from a cluster listing and
    :meth:`from_transport_address` for nodes known only from configuration.

    Parameters:
        origin: Which of the two construction variants produced the record.
        transport_address: Where the node is reachable.
        api: Transport collaborator used for every remote call.
        input_factory: Builds :class:`Input` handles bound to this node.
    """

    def __init__(
        self,
        origin: NodeOrigin,
        transport_address: str | TransportEndpoint,
        api: NodeApiClient,
        input_factory: InputFactory,
        node_id: str | None = None,
        short_node_id: str = UNRESOLVED_SHORT_NODE_ID,
        is_master: bool = False,
        last_seen: datetime | None = None,
    ) -> None:
        self._api = api
        self._input_factory = input_factory

        self._transport_address = TransportEndpoint.parse(transport_address)
        self._from_configuration = origin is NodeOrigin.CONFIGURED

        self._lock = threading.RLock()
        self._node_id = node_id
        self._short_node_id = short_node_id
        self._is_master = is_master
        self._last_seen = last_seen

        self._activity = ActivityTracker()
        self._system_info = SystemInfoCache()

    # ── Construction ──────────────────────────────────────────────

    @classmethod
    def from_summary(
        cls,
        summary: NodeSummary,
        api: NodeApiClient,
        input_factory: InputFactory,
    ) -> NodeRecord:
        """Build a record from a resolved cluster snapshot."""
        return cls(
            NodeOrigin.DISCOVERED,
            summary.transport_address,
            api,
            input_factory,
            node_id=summary.node_id,
            short_node_id=summary.short_node_id,
            is_master=summary.is_master,
            last_seen=summary.last_seen,
        )

    @classmethod
    def from_transport_address(
        cls,
        transport_address: str | TransportEndpoint,
        api: NodeApiClient,
        input_factory: InputFactory,
    ) -> NodeRecord:
        """Build an unresolved record from a configured address."""
        return cls(NodeOrigin.CONFIGURED, transport_address, api, input_factory)

    # ── Attributes ────────────────────────────────────────────────

    @property
    def transport_address(self) -> TransportEndpoint:
        return self._transport_address

    @property
    def node_id(self) -> str | None:
        return self._node_id

    @property
    def short_node_id(self) -> str:
        return self._short_node_id

    @property
    def is_master(self) -> bool:
        return self._is_master

    @property
    def last_seen(self) -> datetime | None:
        return self._last_seen

    @property
    def last_contact(self) -> datetime | None:
        return self._activity.last_contact

    @property
    def is_from_configuration(self) -> bool:
        return self._from_configuration

    @property
    def failure_count(self) -> int:
        return self._activity.failure_count

    @property
    def system_info_state(self) -> CacheState:
        return self._system_info.state

    def snapshot(self) -> NodeSnapshot:
        """Return all fields as one consistent copy (no partial merge visible)."""
        with self._lock:
            return NodeSnapshot(
                transport_address=self._transport_address,
                node_id=self._node_id,
                short_node_id=self._short_node_id,
                is_master=self._is_master,
                last_seen=self._last_seen,
                last_contact=self._activity.last_contact,
                is_from_configuration=self._from_configuration,
                is_active=self._activity.is_active(),
                failure_count=self._activity.failure_count,
            )

    # ── Identity & reconciliation ─────────────────────────────────

    def same_identity_as(self, other: object) -> bool:
        """True if ``other`` refers to the same cluster member."""
        if self is other:
            return True
        if not isinstance(other, NodeRecord):
            return False

        # Both resolved with the same id: same node, wherever it is reachable.
        if self._node_id and other._node_id and self._node_id == other._node_id:
            return True

        return self._transport_address == other._transport_address

    def identity_hash(self) -> int:
        """Hash consistent with :meth:`same_identity_as`.

        Equality may hold through the node id alone or through the
        transport address alone, so no per-record field is shared by every
        pair of equal records; all records fall into one bucket.
        """
        return hash(NodeRecord.__qualname__)

    def merge(self, updated: NodeRecord) -> None:
        """Overwrite this record's resolved fields from ``updated``.

        Copies last seen, master flag, node id, short node id and the
        activity flag.  Transport address, origin, failure count, last
        contact and cached system information are left untouched.
        """
        # Copy the source first so two opposite merges never hold both locks.
        source = updated.snapshot()
        logger.debug("Merging node %s in this node %s", updated, self)
        with self._lock:
            self._last_seen = source.last_seen
            self._is_master = source.is_master
            self._node_id = source.node_id
            self._short_node_id = source.short_node_id
            self.set_active(source.is_active)

    # ── Liveness ──────────────────────────────────────────────────

    def touch(self) -> None:
        """Record a successful contact: update last contact, mark active."""
        self._activity.touch()

    def mark_failure(self) -> None:
        """Record a failed contact: count it, mark inactive."""
        self._activity.mark_failure()
        logger.info("%s failed, marking as inactive.", self)

    def is_active(self) -> bool:
        return self._activity.is_active()

    def set_active(self, active: bool) -> None:
        self._activity.set_active(active)

    # ── System information (lazily cached) ────────────────────────

    def system_information(self) -> FetchResult:
        """Cached system overview, fetched on first use."""
        return self._system_info.get_or_load(self._fetch_system_overview)

    def load_system_information(self) -> FetchResult:
        """Fetch the system overview again and replace the cached copy."""
        return self._system_info.reload(self._fetch_system_overview)

    @property
    def hostname(self) -> str:
        """Hostname reported by the node, :data:`UNKNOWN_HOSTNAME` if unavailable."""
        return self.system_information().map(lambda s: s.hostname).value_or(UNKNOWN_HOSTNAME)

    @property
    def is_processing(self) -> bool:
        """Whether the node processes messages; ``False`` if unavailable."""
        return self.system_information().map(lambda s: s.is_processing).value_or(False)

    def _fetch_system_overview(self) -> FetchResult:
        return self._fetch(
            "system information",
            lambda: self._api.get(self, "/system", SystemOverview),
        )

    # ── Node-scoped reads ─────────────────────────────────────────

    def buffer_info(self) -> BufferInfo | None:
        """Input/output buffer utilization, ``None`` if unavailable."""
        return self._fetch(
            "buffer info",
            lambda: self._api.get(self, "/system/buffers", BuffersResponse),
        ).map(lambda r: r.buffers).value_or(None)

    def all_loggers(self) -> list[InternalLogger]:
        """Internal loggers of the node, empty if unavailable."""
        response: LoggersResponse | None = self._fetch(
            "loggers",
            lambda: self._api.get(self, "/system/loggers", LoggersResponse),
        ).value_or(None)
        if response is None:
            return []
        return [
            InternalLogger(name=name, level=summary.level, syslog_level=summary.level_syslog)
            for name, summary in response.loggers.items()
        ]

    def thread_dump(self) -> str:
        """Thread dump of the node process, empty if unavailable."""
        return self._fetch(
            "thread dump",
            lambda: self._api.get(self, "/system/threaddump", str),
        ).value_or("")

    def throughput(self) -> int:
        """Current message throughput, ``0`` if unavailable."""
        return self._fetch(
            "throughput",
            lambda: self._api.get(self, "/system/throughput", ServerThroughput),
        ).map(lambda r: r.throughput).value_or(0)

    def metrics(self, namespace: str) -> dict[str, Metric]:
        """Metrics below ``namespace`` keyed by full name, empty if unavailable."""
        response: MetricsList | None = self._fetch(
            f"metrics of namespace {namespace}",
            lambda: self._api.get(
                self,
                "/system/metrics/namespace/{0}",
                MetricsList,
                path_params=(namespace,),
                expect=(HTTPStatus.OK, HTTPStatus.NOT_FOUND),
            ),
        ).value_or(None)
        # A 404 means the namespace holds no metrics.
        if response is None:
            return {}
        return response.by_full_name()

    # ── Processing control ────────────────────────────────────────

    def pause(self) -> bool:
        """Pause message processing; ``False`` if the node could not be told."""
        return self._command("pause processing", "/system/processing/pause")

    def resume(self) -> bool:
        """Resume message processing; ``False`` if the node could not be told."""
        return self._command("resume processing", "/system/processing/resume")

    # ── Inputs ────────────────────────────────────────────────────

    def inputs(self) -> list[Input]:
        """All inputs running on this node.

        Raises:
            UnrecoverableFetchException: If the node could not list them.
        """
        return [
            self._input_factory.from_summary(summary, self)
            for summary in self._running_inputs().inputs
        ]

    def number_of_inputs(self) -> int:
        """Number of inputs running on this node.

        Raises:
            UnrecoverableFetchException: If the node could not list them.
        """
        return self._running_inputs().total

    def get_input(self, input_id: str) -> Input | None:
        """A single running input, ``None`` if unavailable."""
        summary: InputSummary | None = self._fetch(
            f"input {input_id}",
            lambda: self._api.get(self, "/system/inputs/{0}", InputSummary, path_params=(input_id,)),
        ).value_or(None)
        if summary is None:
            return None
        return self._input_factory.from_summary(summary, self)

    def launch_input(
        self,
        title: str,
        input_type: str,
        configuration: dict[str, Any],
        creator_user_id: str,
        is_exclusive: bool,
        is_global: bool = False,
    ) -> bool:
        """Start a new input on this node.

        Returns:
            ``True`` if the node accepted the input, ``False`` if the
            request failed.

        Raises:
            ExclusiveInputException: If ``is_exclusive`` and an input of
                the same type already runs here.
            UnrecoverableFetchException: If the exclusivity check could
                not list the running inputs.
        """
        if is_exclusive:
            for running in self.inputs():
                if running.type == input_type:
                    raise ExclusiveInputException(input_type, str(self))

        request = InputLaunchRequest(
            title=title,
            type=input_type,
            configuration=configuration,
            creator_user_id=creator_user_id,
            is_global=is_global,
        )
        try:
            self._api.post(self, "/system/inputs", body=request, expect=(HTTPStatus.ACCEPTED,))
            return True
        except TransportException:
            logger.error("Could not launch input %s on node %s", title, self, exc_info=True)
        return False

    def terminate_input(self, input_id: str) -> bool:
        """Stop an input; ``False`` if the node could not be told."""
        try:
            self._api.delete(self, "/system/inputs/{0}", path_params=(input_id,), expect=(HTTPStatus.ACCEPTED,))
            return True
        except TransportException:
            logger.error("Could not terminate input %s on node %s", input_id, self, exc_info=True)
        return False

    def input_types(self) -> dict[str, str]:
        """Launchable input types (type → display name), empty if unavailable."""
        return self._fetch(
            "input types",
            lambda: self._api.get(self, "/system/inputs/types", InputTypesResponse),
        ).map(lambda r: r.types).value_or({})

    def input_type_information(self, input_type: str) -> InputTypeSummary | None:
        """Details of one input type, ``None`` if unavailable."""
        return self._fetch(
            f"input type {input_type}",
            lambda: self._api.get(self, "/system/inputs/types/{0}", InputTypeSummary, path_params=(input_type,)),
        ).value_or(None)

    def all_input_type_information(self) -> dict[str, InputTypeSummary]:
        """Details of every launchable input type, keyed by type."""
        types: dict[str, InputTypeSummary] = {}
        for input_type in self.input_types():
            info = self.input_type_information(input_type)
            if info is not None:
                types[info.type] = info
        return types

    def _running_inputs(self) -> InputSummaryList:
        try:
            return self._api.get(self, "/system/inputs", InputSummaryList)
        except TransportException as e:
            logger.error("Could not get inputs from node %s", self, exc_info=True)
            raise UnrecoverableFetchException("inputs", str(self)) from e

    # ── Helpers ───────────────────────────────────────────────────

    def _fetch(self, what: str, call: Callable[[], T]) -> FetchResult:
        try:
            return FetchResult.fetched(call())
        except TransportException as e:
            logger.error("Unable to load %s from node %s", what, self, exc_info=True)
            return FetchResult.degraded(str(e))

    def _command(self, what: str, path: str) -> bool:
        try:
            self._api.put(self, path)
            return True
        except TransportException:
            logger.error("Could not %s on node %s", what, self, exc_info=True)
        return False

    # ── Dunder ────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeRecord):
            return NotImplemented
        return self.same_identity_as(other)

    def __hash__(self) -> int:
        return self.identity_hash()

    def __str__(self) -> str:
        if self._node_id is None:
            return f"UnresolvedNode {{'{self._transport_address}'}}"

        parts = [f"'{self._node_id}'", str(self._transport_address)]
        if self._is_master:
            parts.append("master")
        parts.append("active" if self.is_active() else "inactive")
        failures = self.failure_count
        if failures > 0:
            parts.append(f"failed: {failures} times")
        return "Node {" + ", ".join(parts) + "}"

    def __repr__(self) -> str:
        return (
            f"NodeRecord(node_id={self._node_id!r}, "
            f"transport_address={str(self._transport_address)!r}, "
            f"from_configuration={self._from_configuration})"
        )
