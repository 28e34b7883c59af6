from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class NodeSummary(BaseModel):
    """Resolved attributes of one node as reported by the cluster."""

    model_config = ConfigDict(populate_by_name=True)

    node_id: str
    short_node_id: str
    transport_address: str
    last_seen: Optional[datetime] = None
    is_master: bool = False
    hostname: Optional[str] = None

class NodeSummaryList(BaseModel):
    nodes: list[NodeSummary] = Field(default_factory=list)
    total: int = 0
