from managed_exceptions.error_details import ErrorDetails
from managed_exceptions.managed_exception import ManagedException
from managed_exceptions.argumemts.invalid_argument_exception import InvalidArgumentException
from managed_exceptions.argumemts.item_already_exists_exception import ItemAlreadyExistsException
from managed_exceptions.internal.internal_error_exception import InternalErrorException
from managed_exceptions.internal.service_unavailable_exception import ServiceUnavailableException
from managed_exceptions.upstreams.transport_exception import TransportException
from managed_exceptions.upstreams.upstream_exception import UpstreamException

__all__ = [
    "ErrorDetails",
    "ManagedException",
    "InvalidArgumentException",
    "ItemAlreadyExistsException",
    "InternalErrorException",
    "ServiceUnavailableException",
    "TransportException",
    "UpstreamException"
]
