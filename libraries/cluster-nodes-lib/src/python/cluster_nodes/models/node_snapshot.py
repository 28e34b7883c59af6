from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict
from .transport_endpoint import TransportEndpoint

class NodeSnapshot(BaseModel):
    """Consistent copy of a node record's fields, taken under the record's lock."""

    model_config = ConfigDict(frozen=True)

    transport_address: TransportEndpoint
    node_id: Optional[str]
    short_node_id: str
    is_master: bool
    last_seen: Optional[datetime]
    last_contact: Optional[datetime]
    is_from_configuration: bool
    is_active: bool
    failure_count: int
