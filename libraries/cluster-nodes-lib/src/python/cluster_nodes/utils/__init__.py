from .atomics import AtomicBoolean, AtomicCounter

__all__ = [
    "AtomicBoolean",
    "AtomicCounter",
]
