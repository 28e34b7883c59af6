"""Single-cell atomic primitives.

Each cell owns its own lock, so reads and writes of one cell are atomic
while two different cells are never updated as a unit.
"""

from __future__ import annotations

import threading


class AtomicBoolean:
    """A boolean that can be read and written atomically from any thread."""

    def __init__(self, initial: bool = False) -> None:
        self._lock = threading.Lock()
        self._value = initial

    def get(self) -> bool:
        with self._lock:
            return self._value

    def set(self, value: bool) -> None:
        with self._lock:
            self._value = value


class AtomicCounter:
    """A non-negative integer counter that only grows."""

    def __init__(self, initial: int = 0) -> None:
        if initial < 0:
            raise ValueError("initial must be non-negative")
        self._lock = threading.Lock()
        self._value = initial

    def get(self) -> int:
        with self._lock:
            return self._value

    def increment_and_get(self, amount: int = 1) -> int:
        if amount < 0:
            raise ValueError("amount must be non-negative")
        with self._lock:
            self._value += amount
            return self._value
