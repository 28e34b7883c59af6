"""Result of a remote read that may have degraded instead of failing."""

from __future__ import annotations

import enum
import time
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class FetchStatus(str, enum.Enum):
    """Outcome of a remote read."""

    FETCHED = "fetched"
    DEGRADED = "degraded"


class FetchResult(BaseModel, Generic[T]):
    """Either a fetched value or a degraded marker carrying the error.

    Read accessors that must not raise return one of these; the call site
    decides which default stands in for a degraded read::

        hostname = node.system_information().map(lambda s: s.hostname).value_or("unknown")
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: FetchStatus = FetchStatus.FETCHED
    """Whether the value was fetched or the read degraded."""

    value: T | None = None
    """The fetched value (``None`` when degraded)."""

    error: str | None = None
    """Error message if the read degraded."""

    timestamp: float = Field(default_factory=time.time)
    """Epoch timestamp when the result was produced."""

    @property
    def is_success(self) -> bool:
        """Check if the value was fetched."""
        return self.status == FetchStatus.FETCHED

    @property
    def is_degraded(self) -> bool:
        return self.status == FetchStatus.DEGRADED

    def value_or(self, default: Any) -> Any:
        """Return the fetched value, or ``default`` when degraded."""
        return self.value if self.is_success else default

    def map(self, func: Any) -> FetchResult:
        """Apply ``func`` to a fetched value; degraded results pass through."""
        if not self.is_success:
            return self
        return FetchResult.fetched(func(self.value))

    @staticmethod
    def fetched(value: Any) -> FetchResult:
        """Create a successful result."""
        return FetchResult(status=FetchStatus.FETCHED, value=value)

    @staticmethod
    def degraded(error: str) -> FetchResult:
        """Create a degraded result."""
        return FetchResult(status=FetchStatus.DEGRADED, error=error)
