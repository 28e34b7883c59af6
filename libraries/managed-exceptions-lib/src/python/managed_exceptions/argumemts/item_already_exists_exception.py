from http import HTTPStatus
from managed_exceptions.error_details import ErrorDetails
from managed_exceptions.managed_exception import ManagedException

class ItemAlreadyExistsException(ManagedException):
    """Raised when an operation would create something that is only allowed once."""

    def __init__(self, message: str, diagnostic_details: dict[str, str] = {}, diagnostic_code: str = "00409"):
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.CONFLICT,
            diagnostic_code=diagnostic_code,
            diagnostic_details=diagnostic_details,
            message=message
        ))
