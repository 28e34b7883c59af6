from http import HTTPStatus
from managed_exceptions.error_details import ErrorDetails
from managed_exceptions.managed_exception import ManagedException

class InternalErrorException(ManagedException):
    def __init__(self, message: str, diagnostic_details: dict[str, str] = {}, diagnostic_code: str = "10500"):
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            diagnostic_code=diagnostic_code,
            diagnostic_details=diagnostic_details,
            message=message
        ))
