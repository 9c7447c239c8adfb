# ltprime/search/frontier.py
# Fixed-capacity ring of extendable LTPs.
#
# Live entries run from the processed cursor to the free cursor. During an
# order the first `boundary` of them are the tails being expanded and the rest
# are the children appended for the next order.

from typing import Iterable

import numpy as np

from ..errors import BufferOverflowError


class FrontierRing:
    def __init__(self, capacity: int, seed: Iterable[int] = ()):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = int(capacity)
        self._slots = np.zeros(self.capacity, dtype=np.uint64)
        self._start = 0
        self._size = 0
        self.peak = 0
        for value in seed:
            self.append(value)

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, k: int) -> int:
        """k-th live entry counted from the processed cursor."""
        if not 0 <= k < self._size:
            raise IndexError(f"ring index {k} out of range (live={self._size})")
        return int(self._slots[(self._start + k) % self.capacity])

    def __iter__(self):
        for k in range(self._size):
            yield self[k]

    @property
    def processed(self) -> int:
        return self._start

    @property
    def free(self) -> int:
        return (self._start + self._size) % self.capacity

    def append(self, value: int) -> None:
        if self._size == self.capacity:
            raise BufferOverflowError(
                f"frontier ring full ({self.capacity} live entries), cannot store {value}"
            )
        self._slots[self.free] = value
        self._size += 1
        if self._size > self.peak:
            self.peak = self._size

    def release(self, count: int) -> None:
        """Advance the processed cursor past `count` consumed entries."""
        if not 0 <= count <= self._size:
            raise IndexError(f"cannot release {count} of {self._size} live entries")
        self._start = (self._start + count) % self.capacity
        self._size -= count

    def __repr__(self):
        return (f"FrontierRing(capacity={self.capacity}, live={self._size}, "
                f"processed={self.processed}, free={self.free})")
