from typing import Any, Optional
from pydantic import BaseModel, Field

class InputTypeSummary(BaseModel):
    name: str
    type: str
    is_exclusive: bool = False
    requested_configuration: dict[str, Any] = Field(default_factory=dict)
    link_to_docs: Optional[str] = None

class InputTypesResponse(BaseModel):
    types: dict[str, str] = Field(default_factory=dict)
