"""Decrease-key priority queues used as the search frontier.

The engine only needs three operations: insert a value with a priority, pop a
value with the minimum priority, and lower the priority of a value that is
still queued. ``Frontier`` captures that contract; ``HeapFrontier`` implements
it on top of ``heapq``.

``heapq`` cannot reorder an entry in place, so ``HeapFrontier`` lowers a
priority by pushing a fresh heap entry for the same handle and marking the old
entry stale. Stale entries are discarded when they reach the top of the heap.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Any, Generic, List, Optional, Protocol, Tuple, TypeVar

from pathfind.types import Cost

T = TypeVar("T")


class FrontierHandle(Generic[T]):
    """Stable reference to one queued value.

    A handle stays valid until its value is popped. Afterwards it can no longer
    be used to change the priority.

    Attributes:
        priority: Current priority of the value.
        value: The queued value.
        popped: True once the value has left the frontier.
    """

    __slots__ = ("priority", "value", "popped", "_seq", "_entry")

    def __init__(self, priority: Cost, value: T, seq: int) -> None:
        self.priority = priority
        self.value = value
        self.popped = False
        self._seq = seq
        self._entry: Optional[List[Any]] = None

    def __repr__(self) -> str:
        state = "popped" if self.popped else "queued"
        return f"FrontierHandle(priority={self.priority}, value={self.value!r}, {state})"


class Frontier(Protocol[T]):
    """Minimum-priority queue with decrease-key through stable handles."""

    def insert(self, priority: Cost, value: T) -> Any: ...

    def pop_min(self) -> T: ...

    def decrease_priority(self, handle: Any, new_priority: Cost) -> None: ...

    def __len__(self) -> int: ...


class HeapFrontier(Generic[T]):
    """Binary-heap frontier with lazy invalidation of superseded entries.

    Ties between equal priorities are broken by insertion order, so the pop
    order is fully deterministic for a given sequence of operations. A value
    keeps its original insertion rank when its priority is lowered.
    """

    def __init__(self) -> None:
        # Each heap entry: [priority, seq, handle-or-None]
        self._heap: List[List[Any]] = []
        self._counter = count()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def insert(self, priority: Cost, value: T) -> FrontierHandle[T]:
        """Queue ``value`` with ``priority`` and return its handle."""
        handle: FrontierHandle[T] = FrontierHandle(priority, value, next(self._counter))
        self._push(handle)
        self._size += 1
        return handle

    def pop_min(self) -> T:
        """Remove and return a value with the minimum priority.

        Raises:
            IndexError: If the frontier is empty.
        """
        handle = self._pop_handle()
        return handle.value

    def pop_min_with_priority(self) -> Tuple[Cost, T]:
        """Like ``pop_min`` but also return the priority the value had."""
        handle = self._pop_handle()
        return handle.priority, handle.value

    def peek_priority(self) -> Cost:
        """Return the minimum priority without removing anything.

        Raises:
            IndexError: If the frontier is empty.
        """
        self._drop_stale()
        if not self._heap:
            raise IndexError("peek at empty frontier")
        return self._heap[0][0]

    def decrease_priority(self, handle: FrontierHandle[T], new_priority: Cost) -> None:
        """Lower the priority of a queued value.

        Args:
            handle: Handle returned by ``insert`` for this frontier.
            new_priority: New priority, not greater than the current one.

        Raises:
            ValueError: If the value was already popped or if ``new_priority``
                is greater than the current priority.
        """
        if handle.popped or handle._entry is None:
            raise ValueError(f"Cannot decrease priority of a popped entry: {handle!r}")
        if new_priority > handle.priority:
            raise ValueError(
                f"New priority {new_priority} is greater than current "
                f"priority {handle.priority}"
            )
        if new_priority == handle.priority:
            return

        # Invalidate the superseded entry; it is skipped when popped
        handle._entry[-1] = None
        handle.priority = new_priority
        self._push(handle)

    def _push(self, handle: FrontierHandle[T]) -> None:
        entry = [handle.priority, handle._seq, handle]
        handle._entry = entry
        heappush(self._heap, entry)

    def _drop_stale(self) -> None:
        heap = self._heap
        while heap and heap[0][-1] is None:
            heappop(heap)

    def _pop_handle(self) -> FrontierHandle[T]:
        self._drop_stale()
        if not self._heap:
            raise IndexError("pop from empty frontier")
        handle = heappop(self._heap)[-1]
        handle.popped = True
        handle._entry = None
        self._size -= 1
        return handle
