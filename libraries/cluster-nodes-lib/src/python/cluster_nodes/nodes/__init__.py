from .activity_tracker import ActivityTracker
from .input import Input, InputFactory
from .node_factory import NodeFactory
from .node_record import NodeOrigin, NodeRecord, UNKNOWN_HOSTNAME, UNRESOLVED_SHORT_NODE_ID
from .system_info_cache import CacheState, SystemInfoCache

__all__ = [
    "ActivityTracker",
    "CacheState",
    "Input",
    "InputFactory",
    "NodeFactory",
    "NodeOrigin",
    "NodeRecord",
    "SystemInfoCache",
    "UNKNOWN_HOSTNAME",
    "UNRESOLVED_SHORT_NODE_ID",
]
