"""Thread-safe rolling history of CPU load samples."""
import threading
from collections import deque
from typing import List

DEFAULT_CAPACITY = 10


class LoadHistory:
    """Fixed-size, newest-first buffer of load samples shared between threads."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """Initialize an empty history with thread safety."""
        if capacity <= 0:
            raise ValueError(f"history capacity must be positive, got {capacity}")
        self._lock = threading.Lock()
        self.capacity = capacity
        self._samples = deque(maxlen=capacity)

    def push(self, sample: float):
        """Insert a sample at the front, evicting the oldest when full."""
        with self._lock:
            self._samples.appendleft(sample)

    def average(self) -> float:
        """Mean over all slots; slots not yet filled count as zero."""
        with self._lock:
            return sum(self._samples) / self.capacity

    def samples(self) -> List[float]:
        """Copy of the stored samples, newest first."""
        with self._lock:
            return list(self._samples)

    def __len__(self) -> int:
        with self._lock:
            return len(self._samples)
