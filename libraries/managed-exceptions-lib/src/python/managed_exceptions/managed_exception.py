from managed_exceptions.error_details import ErrorDetails

class ManagedException(Exception):
    """Base of every error this console raises on purpose; carries an HTTP status and a diagnostic code."""

    def __init__(self, error: ErrorDetails):
        self.status_code = error.status_code
        self.diagnostic_code = error.diagnostic_code
        # Own copy: subclasses default their details to a shared `{}`.
        self.diagnostic_details = dict(error.diagnostic_details)
        super().__init__(error.message)
