from typing import Any
from pydantic import BaseModel, Field

class Metric(BaseModel):
    full_name: str
    name: str
    type: str
    metric: dict[str, Any] = Field(default_factory=dict)

class MetricsList(BaseModel):
    metrics: list[Metric] = Field(default_factory=list)
    total: int = 0

    def by_full_name(self) -> dict[str, Metric]:
        return {metric.full_name: metric for metric in self.metrics}
