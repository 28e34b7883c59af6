from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional
from injector import singleton
from cluster_nodes.models import InputSummary

if TYPE_CHECKING:
    from cluster_nodes.nodes.node_record import NodeRecord

class Input:
    """Handle on one input running on a specific node."""

    def __init__(self, summary: InputSummary, node: "NodeRecord"):
        self.__summary = summary
        self.__node = node

    @property
    def node(self) -> "NodeRecord":
        return self.__node

    @property
    def summary(self) -> InputSummary:
        return self.__summary

    @property
    def id(self) -> str:
        return self.__summary.input_id

    @property
    def persist_id(self) -> Optional[str]:
        return self.__summary.persist_id

    @property
    def title(self) -> str:
        return self.__summary.title

    @property
    def type(self) -> str:
        return self.__summary.type

    @property
    def name(self) -> Optional[str]:
        return self.__summary.name

    @property
    def creator_user_id(self) -> Optional[str]:
        return self.__summary.creator_user_id

    @property
    def started_at(self) -> Optional[datetime]:
        return self.__summary.started_at

    @property
    def is_global(self) -> bool:
        return self.__summary.is_global

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self.__summary.attributes)

    def terminate(self) -> bool:
        return self.__node.terminate_input(self.id)

    def __repr__(self) -> str:
        return f"Input(id={self.id!r}, type={self.type!r}, title={self.title!r}, node={self.__node})"

@singleton
class InputFactory:

    def from_summary(self, summary: InputSummary, node: "NodeRecord") -> Input:
        return Input(summary, node)
