from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Iterable, Optional, Sequence, TypeVar
from client_handler import ClientHandler
from injector import inject, singleton
from pydantic import BaseModel
from cluster_nodes.configs import ClusterNodesConfig

if TYPE_CHECKING:
    from cluster_nodes.nodes.node_record import NodeRecord

T = TypeVar("T")

@singleton
class NodeApiClient(ClientHandler):
    """
    Transport collaborator for node-scoped REST calls.

    Every call takes the `NodeRecord` it targets and is routed to that node's
    transport address. Response bodies are only deserialized for 2xx answers;
    any other expected status (e.g. a tolerated 404) yields `None`.

    Raises:
        TransportException: The node could not be reached or the body could not be parsed.
        UpstreamException: The node answered with a status code outside `expect`.
    """

    @inject
    def __init__(self, config: ClusterNodesConfig) -> None:
        super().__init__(default_timeout=config.request_timeout)

    def get(self, node: "NodeRecord", path: str, response_type: type[T], path_params: Sequence[Any] = (), expect: Iterable[int] = (HTTPStatus.OK,), timeout: Optional[float] = None) -> Optional[T]:
        response = self.invoke("GET", node.transport_address.to_ascii(), path, path_params=path_params, expect=expect, timeout=timeout)
        if not response.is_success:
            return None
        return self.parse(response, response_type)

    def post(self, node: "NodeRecord", path: str, body: Optional[BaseModel] = None, path_params: Sequence[Any] = (), expect: Iterable[int] = (HTTPStatus.OK,), timeout: Optional[float] = None) -> None:
        payload: Optional[dict] = body.model_dump(mode="json", by_alias=True) if body is not None else None
        self.invoke("POST", node.transport_address.to_ascii(), path, path_params=path_params, body=payload, expect=expect, timeout=timeout)

    def put(self, node: "NodeRecord", path: str, path_params: Sequence[Any] = (), expect: Iterable[int] = (HTTPStatus.OK, HTTPStatus.ACCEPTED, HTTPStatus.NO_CONTENT), timeout: Optional[float] = None) -> None:
        self.invoke("PUT", node.transport_address.to_ascii(), path, path_params=path_params, expect=expect, timeout=timeout)

    def delete(self, node: "NodeRecord", path: str, path_params: Sequence[Any] = (), expect: Iterable[int] = (HTTPStatus.OK, HTTPStatus.ACCEPTED, HTTPStatus.NO_CONTENT), timeout: Optional[float] = None) -> None:
        self.invoke("DELETE", node.transport_address.to_ascii(), path, path_params=path_params, expect=expect, timeout=timeout)
