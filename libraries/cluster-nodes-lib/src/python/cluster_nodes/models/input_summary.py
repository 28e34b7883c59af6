from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

class InputSummary(BaseModel):
    """Description of one running input as reported by its node."""

    model_config = ConfigDict(populate_by_name=True)

    input_id: str
    persist_id: Optional[str] = None
    title: str
    type: str
    name: Optional[str] = None
    creator_user_id: Optional[str] = None
    started_at: Optional[datetime] = None
    is_global: bool = Field(default=False, alias="global")
    attributes: dict[str, Any] = Field(default_factory=dict)
    static_fields: dict[str, str] = Field(default_factory=dict)

class InputSummaryList(BaseModel):
    inputs: list[InputSummary] = Field(default_factory=list)
    total: int = 0
