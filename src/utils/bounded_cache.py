"""Bounded FIFO memoization cache."""
import threading
from collections import OrderedDict
from typing import Any, Hashable, Optional


class BoundedCache:
    """
    Insertion-ordered cache holding at most ``capacity`` entries.

    When full, the oldest inserted entry is evicted before a new key is
    stored. Reads never change eviction order.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"Cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict = OrderedDict()
        self._lock = threading.Lock()

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: Hashable, default: Optional[Any] = None) -> Any:
        return self._entries.get(key, default)

    def put(self, key: Hashable, value: Any) -> None:
        """Store a value, evicting the oldest entry if the cache is full."""
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.capacity:
                self._entries.popitem(last=False)
            self._entries[key] = value

    def keys(self):
        return list(self._entries.keys())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
