from injector import inject, singleton
from cluster_nodes.clients import NodeApiClient
from cluster_nodes.models import NodeSummary, TransportEndpoint
from .input import InputFactory
from .node_record import NodeRecord

@singleton
class NodeFactory:
    """Builds node records bound to the shared transport and input factory."""

    @inject
    def __init__(self, api: NodeApiClient, input_factory: InputFactory):
        self.__api = api
        self.__input_factory = input_factory

    def from_summary(self, summary: NodeSummary) -> NodeRecord:
        return NodeRecord.from_summary(summary, self.__api, self.__input_factory)

    def from_transport_address(self, transport_address: str | TransportEndpoint) -> NodeRecord:
        return NodeRecord.from_transport_address(transport_address, self.__api, self.__input_factory)
