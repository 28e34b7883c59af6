from datetime import datetime
from typing import Optional
from pydantic import BaseModel

class SystemOverview(BaseModel):
    """Payload of the ``/system`` resource, cached per node."""

    facility: Optional[str] = None
    codename: Optional[str] = None
    server_id: Optional[str] = None
    version: Optional[str] = None
    started_at: Optional[datetime] = None
    hostname: str
    is_processing: bool = False
    lifecycle: Optional[str] = None
    lb_status: Optional[str] = None
    timezone: Optional[str] = None
