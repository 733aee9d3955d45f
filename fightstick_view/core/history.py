"""
Bounded rolling history of Snapshots

=============================================================================
RING BUFFER LAYOUT
=============================================================================

The history is a fixed array of slots plus a head index and a length.
Nothing is ever shifted; eviction just advances the head:

    capacity = 4, after pushing A B C D:

        slots: [A][B][C][D]      head = 0, length = 4
                ^head

    push E (full, so A is evicted):

        slots: [E][B][C][D]      head = 1, length = 4
                   ^head

    chronological order = slots[head], slots[head+1], ... (mod capacity)
                        = B C D E

Both push and eviction are O(1).

=============================================================================
INVARIANT
=============================================================================

    1 <= len(history) <= capacity

The buffer is seeded with a zero Snapshot on creation and on every reset(),
so latest() always has something to return.

=============================================================================
"""

from typing import Iterator, List, Optional

from .snapshot import Snapshot


class HistoryEmptyError(RuntimeError):
    """Raised if the history is read while empty (should never happen)."""


class HistoryBuffer:
    """Fixed-capacity FIFO of Snapshots, oldest evicted first."""

    DEFAULT_CAPACITY = 24

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._slots: List[Optional[Snapshot]] = [None] * capacity
        self._head = 0
        self._length = 0
        self.reset()

    def push(self, snapshot: Snapshot):
        """
        Append a snapshot, evicting the oldest entry if already full.

        A clone is stored so the caller may keep mutating its working copy.
        """
        stored = snapshot.clone()
        if self._length < self.capacity:
            self._slots[(self._head + self._length) % self.capacity] = stored
            self._length += 1
        else:
            # Overwrite the oldest slot and move the head past it
            self._slots[self._head] = stored
            self._head = (self._head + 1) % self.capacity

    def latest(self) -> Snapshot:
        """Most recently pushed snapshot."""
        if self._length == 0:
            raise HistoryEmptyError("history buffer is empty")
        return self._slots[(self._head + self._length - 1) % self.capacity]

    def iter_chronological_reverse(self) -> Iterator[Snapshot]:
        """
        Newest to oldest.

        The order is captured when this is called, so pushing while
        iterating does not change what the iterator yields.
        """
        entries = self._ordered()
        entries.reverse()
        return iter(entries)

    def reset(self):
        """Drop all history and reseed with a single zero snapshot."""
        self._slots = [None] * self.capacity
        self._head = 0
        self._length = 0
        self.push(Snapshot.zero())

    def is_full(self) -> bool:
        return self._length == self.capacity

    def _ordered(self) -> List[Snapshot]:
        return [self._slots[(self._head + i) % self.capacity]
                for i in range(self._length)]

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self._ordered())

    def __len__(self) -> int:
        return self._length

    def __repr__(self):
        return f"HistoryBuffer(len={self._length}, capacity={self.capacity})"
