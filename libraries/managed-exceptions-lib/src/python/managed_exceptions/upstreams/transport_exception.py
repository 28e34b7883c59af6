from http import HTTPStatus
from managed_exceptions.error_details import ErrorDetails
from managed_exceptions.managed_exception import ManagedException

class TransportException(ManagedException):
    """Raised when a remote node could not be reached or answered with something unusable."""

    def __init__(self, message: str, diagnostic_details: dict[str, str] = {}, http_status: HTTPStatus = HTTPStatus.BAD_GATEWAY, diagnostic_code: str = "10502"):
        super().__init__(ErrorDetails(
            status_code=http_status,
            diagnostic_code=diagnostic_code,
            diagnostic_details=diagnostic_details,
            message=message
        ))
