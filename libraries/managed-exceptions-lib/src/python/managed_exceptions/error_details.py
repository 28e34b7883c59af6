from http import HTTPStatus
from pydantic import BaseModel, Field

class ErrorDetails(BaseModel):
    """Everything a managed exception carries, in a form that can be logged or returned as-is."""

    status_code: HTTPStatus
    diagnostic_code: str
    diagnostic_details: dict[str, str] = Field(default_factory=dict)
    message: str
