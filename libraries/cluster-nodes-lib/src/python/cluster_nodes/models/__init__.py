from .buffer_info import BufferInfo, BufferUtilization, BuffersResponse
from .fetch_result import FetchResult, FetchStatus
from .input_launch_request import InputLaunchRequest
from .input_summary import InputSummary, InputSummaryList
from .input_type_summary import InputTypeSummary, InputTypesResponse
from .internal_logger import InternalLogger, LoggersResponse, LoggerSummary
from .metric import Metric, MetricsList
from .node_snapshot import NodeSnapshot
from .node_summary import NodeSummary, NodeSummaryList
from .server_throughput import ServerThroughput
from .system_overview import SystemOverview
from .transport_endpoint import TransportEndpoint

__all__ = [
    "BufferInfo",
    "BufferUtilization",
    "BuffersResponse",
    "FetchResult",
    "FetchStatus",
    "InputLaunchRequest",
    "InputSummary",
    "InputSummaryList",
    "InputTypeSummary",
    "InputTypesResponse",
    "InternalLogger",
    "LoggersResponse",
    "LoggerSummary",
    "Metric",
    "MetricsList",
    "NodeSnapshot",
    "NodeSummary",
    "NodeSummaryList",
    "ServerThroughput",
    "SystemOverview",
    "TransportEndpoint"
]
