"""Min-priority queue of vertices keyed by tentative travel time.

Built on heapq. Decreasing a key pushes a fresh entry and marks the old
one stale; stale entries are discarded when they reach the top.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Tuple

from ..domain.models import Vertex


class TravelTimeQueue:
    """Priority queue supporting push, decrease-key and pop-min."""

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, Vertex]] = []
        self._entries: Dict[Vertex, Tuple[int, int, Vertex]] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, vertex: Vertex, minutes: int) -> None:
        """Insert a vertex, or lower its key if already queued.

        Raising a key is ignored; Dijkstra never needs it.
        """
        current = self._entries.get(vertex)
        if current is not None and current[0] <= minutes:
            return
        entry = (minutes, next(self._counter), vertex)
        self._entries[vertex] = entry
        heapq.heappush(self._heap, entry)

    decrease_key = push

    def pop(self) -> Tuple[Vertex, int]:
        """Remove and return the vertex with the smallest travel time.

        Raises:
            IndexError: If the queue is empty.
        """
        while self._heap:
            entry = heapq.heappop(self._heap)
            minutes, _, vertex = entry
            if self._entries.get(vertex) is entry:
                del self._entries[vertex]
                return vertex, minutes
        raise IndexError("pop from an empty TravelTimeQueue")
