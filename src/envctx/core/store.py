"""
Context store for loaded entries.

A growable, lock-guarded sequence of key/value pairs. Lookups are
first-wins: a key appended later never shadows an earlier one.
"""

import threading
from typing import NamedTuple

from envctx.exceptions import AllocationError
from envctx.utils.logging import get_logger

logger = get_logger("envctx.store")

DEFAULT_INITIAL_CAPACITY = 10


class Entry(NamedTuple):
    """One key/value pair held by the store."""

    key: str
    value: str


class ContextStore:
    """
    Ordered, thread-safe container of Entries.

    The backing sequence is created lazily by ``init()`` (the loader calls it
    on every load, later calls are no-ops) and doubles in size whenever it is
    full. Duplicate keys are kept; ``get`` returns the earliest one.

    A failed grow leaves the previous backing sequence in place, so the store
    stays usable at its old capacity.

    Every public method takes the same re-entrant lock. ``append`` holds it
    across the capacity check, the grow and the write, so concurrent loaders
    cannot write past a capacity they both observed.
    """

    def __init__(self, initial_capacity: int = DEFAULT_INITIAL_CAPACITY, max_capacity: int | None = None):
        if initial_capacity <= 0:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")
        if max_capacity is not None and max_capacity < initial_capacity:
            raise ValueError(f"max_capacity ({max_capacity}) is smaller than initial_capacity ({initial_capacity})")
        self.initial_capacity = initial_capacity
        self.max_capacity = max_capacity
        self._entries: list[Entry | None] | None = None
        self._count = 0
        self._capacity = 0
        self._lock = threading.RLock()

    # --- lifecycle -----------------------------------------------------------

    def init(self, initial_capacity: int | None = None) -> None:
        """Allocate the backing sequence if it does not exist yet."""
        capacity = self.initial_capacity if initial_capacity is None else initial_capacity

        with self._lock:
            if self._entries is not None:
                return
            if capacity <= 0:
                raise ValueError(f"initial_capacity must be positive, got {capacity}")
            self._entries = self._allocate(capacity, current=0)
            self._count = 0
            self._capacity = capacity
            logger.debug(f"Initialized store with capacity {capacity}")

    def ensure_capacity(self) -> None:
        """Double the capacity when the store is full."""
        with self._lock:
            if self._entries is None:
                self.init()
                return
            if self._count < self._capacity:
                return

            new_capacity = self._capacity * 2
            grown = self._allocate(new_capacity, current=self._capacity)
            grown[: self._count] = self._entries[: self._count]
            self._entries = grown
            self._capacity = new_capacity
            logger.debug(f"Grew store capacity to {new_capacity}")

    def clear(self) -> None:
        """Drop every entry and return to the uninitialized state."""
        with self._lock:
            self._entries = None
            self._count = 0
            self._capacity = 0

    def _allocate(self, capacity: int, current: int) -> list[Entry | None]:
        """Build a new backing sequence; the caller swaps it in on success."""
        if self.max_capacity is not None and capacity > self.max_capacity:
            logger.error(f"Store capacity limit reached: {capacity} requested, limit is {self.max_capacity}")
            raise AllocationError(
                f"Cannot grow store to {capacity} entries (limit {self.max_capacity})",
                capacity=current,
                requested=capacity,
            )
        try:
            return [None] * capacity
        except MemoryError as e:
            logger.error(f"Failed to allocate store with capacity {capacity}")
            raise AllocationError(
                f"Out of memory allocating store with capacity {capacity}",
                capacity=current,
                requested=capacity,
            ) from e

    # --- access --------------------------------------------------------------

    def append(self, key: str, value: str) -> None:
        """Append an entry after the last one, growing the store if needed."""
        with self._lock:
            self.ensure_capacity()
            self._entries[self._count] = Entry(str(key), str(value))
            self._count += 1

    def get(self, key: str) -> str | None:
        """Return the value of the first entry named ``key``, or None."""
        with self._lock:
            for i in range(self._count):
                entry = self._entries[i]
                if entry.key == key:
                    return entry.value
            return None

    def entries(self) -> list[Entry]:
        """Snapshot of all entries in insertion order, duplicates included."""
        with self._lock:
            if self._entries is None:
                return []
            return list(self._entries[: self._count])

    def keys(self) -> list[str]:
        """Distinct keys in order of first appearance."""
        return list(self.as_dict())

    def as_dict(self) -> dict[str, str]:
        """First-wins view of the store as a plain dict."""
        result: dict[str, str] = {}
        for entry in self.entries():
            result.setdefault(entry.key, entry.value)
        return result

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    @property
    def capacity(self) -> int:
        with self._lock:
            return self._capacity

    @property
    def initialized(self) -> bool:
        with self._lock:
            return self._entries is not None

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __repr__(self) -> str:
        return f"ContextStore(count={self.count}, capacity={self.capacity})"
