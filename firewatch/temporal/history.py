"""
Bounded history of fire masks.

Masks are copied into a preallocated ring buffer, so a stored snapshot
never aliases the live mask that was pushed.
"""

import numpy as np
from typing import Iterator, List, Optional

from ..core.constants import DEFAULT_HISTORY_SIZE


class HistoryBuffer:
    """
    Fixed-capacity FIFO of mask snapshots.

    The growth baseline is the area of the oldest retained mask, so with
    the default capacity of 10 the current frame is compared against a
    mask up to 9 frames old rather than against the previous frame.

    Args:
        capacity: Maximum number of masks retained

    Example:
        history = HistoryBuffer(10)
        history.push(fire_mask)
        baseline = history.baseline()
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._capacity = int(capacity)
        self._arena: Optional[np.ndarray] = None
        self._areas = np.zeros(self._capacity, dtype=np.int64)
        self._start = 0
        self._length = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return self._length == self._capacity

    def __len__(self) -> int:
        return self._length

    def _slot(self, offset: int) -> int:
        return (self._start + offset) % self._capacity

    def push(self, mask: np.ndarray) -> None:
        """
        Append a copy of the mask, evicting the oldest when full.

        Args:
            mask: Binary mask (H, W)

        Raises:
            ValueError: If the mask shape differs from stored masks
        """
        if self._arena is None:
            self._arena = np.zeros((self._capacity,) + mask.shape, dtype=mask.dtype)
        elif mask.shape != self._arena.shape[1:]:
            raise ValueError(f"Mask shape {mask.shape} does not match history shape {self._arena.shape[1:]}")

        if self._length < self._capacity:
            slot = self._slot(self._length)
            self._length += 1
        else:
            # Overwrite the front, which becomes the new back
            slot = self._start
            self._start = self._slot(1)

        np.copyto(self._arena[slot], mask)
        self._areas[slot] = np.count_nonzero(mask)

    def baseline(self) -> int:
        """Area of the oldest retained mask, or 0 with fewer than 2 masks."""
        if self._length < 2:
            return 0
        return int(self._areas[self._start])

    def front(self) -> Optional[np.ndarray]:
        """Oldest retained mask (read-only view), or None when empty."""
        if self._length == 0:
            return None
        return self._view(self._start)

    def areas(self) -> List[int]:
        """Areas of retained masks, oldest first."""
        return [int(self._areas[self._slot(i)]) for i in range(self._length)]

    def clear(self) -> None:
        """Drop all snapshots; the next push may use a new mask shape."""
        self._arena = None
        self._start = 0
        self._length = 0
        self._areas[:] = 0

    def _view(self, slot: int) -> np.ndarray:
        view = self._arena[slot].view()
        view.flags.writeable = False
        return view

    def __iter__(self) -> Iterator[np.ndarray]:
        """Iterate over retained masks, oldest first."""
        for i in range(self._length):
            yield self._view(self._slot(i))

    def __repr__(self) -> str:
        return f"HistoryBuffer(capacity={self._capacity}, length={self._length})"
