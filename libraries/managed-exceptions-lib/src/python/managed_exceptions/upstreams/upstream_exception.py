from http import HTTPStatus
from managed_exceptions.upstreams.transport_exception import TransportException

class UpstreamException(TransportException):
    """Raised when a remote node answered with a status code the caller did not expect."""

    def __init__(self, http_status: HTTPStatus, message: str, diagnostic_code: str, diagnostic_details: dict[str, str] = {}):
        super().__init__(
            message=message,
            diagnostic_details=diagnostic_details,
            http_status=http_status,
            diagnostic_code=diagnostic_code
        )
