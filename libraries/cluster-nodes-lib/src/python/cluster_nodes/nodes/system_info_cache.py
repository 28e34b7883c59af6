"""Lazily filled cache of a node's system overview.

State machine::

    EMPTY --(successful fetch, under lock)--> POPULATED
    POPULATED --(explicit reload succeeds)--> POPULATED (payload replaced)

A failed fetch leaves the state untouched.  There is no TTL; a populated
payload is served until somebody reloads it.
"""

from __future__ import annotations

import enum
import logging
import threading
from typing import Callable

from ..models import FetchResult, SystemOverview

logger = logging.getLogger(__name__)


class CacheState(str, enum.Enum):
    """Fill state of a :class:`SystemInfoCache`."""

    EMPTY = "empty"
    POPULATED = "populated"


class SystemInfoCache:
    """Holds at most one :class:`SystemOverview`, replaced wholesale."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state = CacheState.EMPTY
        self._value: SystemOverview | None = None

    @property
    def state(self) -> CacheState:
        return self._state

    def get_or_load(
        self, loader: Callable[[], FetchResult]
    ) -> FetchResult:
        """Return the cached payload, fetching it first if the cache is empty.

        Concurrent first accesses are serialized so only one of them calls
        ``loader``; the others observe the populated cache.
        """
        if self._state is CacheState.POPULATED:
            return FetchResult.fetched(self._value)

        with self._lock:
            if self._state is CacheState.POPULATED:
                return FetchResult.fetched(self._value)
            result = loader()
            if result.is_success:
                self._populate(result.value)
            return result

    def reload(self, loader: Callable[[], FetchResult]) -> FetchResult:
        """Fetch unconditionally and replace the payload on success.

        A failed reload keeps the previously cached payload.
        """
        with self._lock:
            result = loader()
            if result.is_success:
                self._populate(result.value)
            elif self._state is CacheState.POPULATED:
                logger.debug("Reload failed, keeping previously cached system information")
            return result

    def _populate(self, value: SystemOverview) -> None:
        # Value first: readers check the state without taking the lock.
        self._value = value
        self._state = CacheState.POPULATED
