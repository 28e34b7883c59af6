from http import HTTPStatus
from managed_exceptions.error_details import ErrorDetails
from managed_exceptions.managed_exception import ManagedException

class InvalidArgumentException(ManagedException):
    """Raised when a caller-supplied value (address, identifier, namespace) cannot be used as given."""

    def __init__(self, message: str, diagnostic_details: dict[str, str] = {}, diagnostic_code: str = "00400"):
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.BAD_REQUEST,
            diagnostic_code=diagnostic_code,
            diagnostic_details=diagnostic_details,
            message=message
        ))
