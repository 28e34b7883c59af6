from pydantic import BaseModel

class ErrorResponse(BaseModel):
    """What a node answered (or what the transport made of it) when a call failed."""

    status_code: int
    diagnostic_code: str
    diagnostic_details: dict[str, str]
    message: str
