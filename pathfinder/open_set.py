from __future__ import annotations

import heapq
from typing import Iterator

from .core import SearchNode


class OpenSet:
    """Binary min-heap of nodes keyed by `f`.

    Equal `f` values come out in no particular order. After lowering a
    node's `f` in place call `rebuild`, which re-heapifies the whole list.
    """

    def __init__(self) -> None:
        self._heap: list[SearchNode] = []

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, node)

    def pop_min(self) -> SearchNode:
        return heapq.heappop(self._heap)

    def peek(self) -> SearchNode | None:
        return self._heap[0] if self._heap else None

    def rebuild(self) -> None:
        heapq.heapify(self._heap)

    def drain(self) -> list[SearchNode]:
        nodes = self._heap
        self._heap = []
        return nodes

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self._heap)
