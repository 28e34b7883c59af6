from typing import Any
from pydantic import BaseModel, ConfigDict, Field

class InputLaunchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    type: str
    configuration: dict[str, Any] = Field(default_factory=dict)
    creator_user_id: str
    is_global: bool = Field(default=False, alias="global")
