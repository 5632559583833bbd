from __future__ import annotations

import logging

from .core import SearchNode

logger = logging.getLogger(__name__)


class NodePool:
    """Arena of SearchNode records addressed by slot.

    Records are never freed; released slots go on a LIFO free list and are
    handed out again by `acquire` before the arena grows.
    """

    def __init__(self, *, grow_by: int = 1000, reserve: int = 0):
        grow_by = int(grow_by)
        if grow_by <= 0:
            raise ValueError("grow_by must be > 0")
        self.grow_by = grow_by
        self._nodes: list[SearchNode] = []
        self._free: list[int] = []
        if int(reserve) > 0:
            self._grow(int(reserve))

    def _grow(self, count: int) -> None:
        base = len(self._nodes)
        self._nodes.extend(SearchNode(slot=base + i) for i in range(count))
        # Reversed so the lowest new slot is popped first.
        self._free.extend(range(base + count - 1, base - 1, -1))
        logger.debug("node pool grew to %d records", len(self._nodes))

    def acquire(self) -> SearchNode:
        if not self._free:
            self._grow(self.grow_by)
        node = self._nodes[self._free.pop()]
        node.live = True
        return node

    def release(self, node: SearchNode) -> None:
        if not node.live:
            return
        node.reset()
        self._free.append(node.slot)

    def node(self, slot: int) -> SearchNode:
        return self._nodes[slot]

    @property
    def capacity(self) -> int:
        return len(self._nodes)

    @property
    def available(self) -> int:
        return len(self._free)

    @property
    def in_use(self) -> int:
        return len(self._nodes) - len(self._free)
