"""Node-level errors a caller is expected to handle explicitly."""

from __future__ import annotations

from managed_exceptions import InternalErrorException, ItemAlreadyExistsException, ServiceUnavailableException


class ExclusiveInputException(ItemAlreadyExistsException):
    """Raised when launching an exclusive input type that already runs on the node."""

    def __init__(self, input_type: str, node: str) -> None:
        self.input_type = input_type
        self.node = node
        super().__init__(
            f"Input type '{input_type}' is exclusive and already running on {node}.",
            diagnostic_details={"input_type": input_type, "node": node},
        )


class UnrecoverableFetchException(InternalErrorException):
    """Raised when a read that other operations depend on could not be served."""

    def __init__(self, resource: str, node: str) -> None:
        self.resource = resource
        self.node = node
        super().__init__(
            f"Could not get {resource} from {node}.",
            diagnostic_details={"resource": resource, "node": node},
        )


class NoActiveNodeException(ServiceUnavailableException):
    """Raised when no node of the cluster is currently reachable."""

    def __init__(self, known_nodes: int = 0) -> None:
        self.known_nodes = known_nodes
        super().__init__(
            f"No active node among {known_nodes} known nodes.",
            diagnostic_details={"known_nodes": str(known_nodes)},
        )
