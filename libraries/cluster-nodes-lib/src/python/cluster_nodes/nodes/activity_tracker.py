"""Liveness and failure bookkeeping of a single node.

A node is *active* iff the last call to :meth:`ActivityTracker.set_active`
said so.  ``touch`` and ``mark_failure`` both funnel through that single
write, so concurrent probes resolve last-writer-wins.  The failure counter
is an independent cell: a tally for diagnostics and back-off decisions by
callers, never reset and never acted upon here.
"""

from __future__ import annotations

import threading
from datetime import datetime, timezone

from ..utils import AtomicBoolean, AtomicCounter


class ActivityTracker:
    """Atomic liveness flag, failure tally and last-contact timestamp."""

    def __init__(self) -> None:
        self._active = AtomicBoolean(False)
        self._failure_count = AtomicCounter(0)
        self._contact_lock = threading.Lock()
        self._last_contact: datetime | None = None

    @property
    def last_contact(self) -> datetime | None:
        return self._last_contact

    @property
    def failure_count(self) -> int:
        return self._failure_count.get()

    def is_active(self) -> bool:
        return self._active.get()

    def set_active(self, active: bool) -> None:
        self._active.set(active)

    def touch(self) -> datetime:
        """Record a successful contact and mark active.

        Returns:
            The recorded last-contact timestamp (never earlier than the
            previous one, even if the wall clock stepped back).
        """
        now = datetime.now(timezone.utc)
        with self._contact_lock:
            if self._last_contact is None or now > self._last_contact:
                self._last_contact = now
            contact = self._last_contact
        self.set_active(True)
        return contact

    def mark_failure(self) -> int:
        """Record a failed contact and mark inactive.

        Returns:
            The failure count after this failure.
        """
        failures = self._failure_count.increment_and_get()
        self.set_active(False)
        return failures
