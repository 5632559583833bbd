from __future__ import annotations

import logging
from typing import Any, Hashable

from .config import DEFAULT_CONFIG, EngineConfig
from .core import NO_SLOT, DestinationCost, PathResult, SearchNode, SearchResult
from .membership import MembershipIndex
from .open_set import OpenSet
from .pool import NodePool

logger = logging.getLogger(__name__)


class SearchEngine:
    """A* expansion loop shared by the generic, cached and grid engines.

    One call to `step` is one iteration of the loop: pop the cheapest open
    node, close it, stop if it is the goal, otherwise expand it. Blocking
    searches simply call `step` until it stops returning SEARCHING, so both
    modes visit nodes in the same order.

    Subclasses provide `_key` (membership key of a node) and `_expand`
    (feed a node's neighbors through `_relax`).

    The start node is seeded with g = destination_cost(start, goal) and
    h = 0. `SearchResult.cost` subtracts that seed again.
    """

    def __init__(self, *, config: EngineConfig | None = None):
        self.config = config if config is not None else DEFAULT_CONFIG
        self._pool = NodePool(
            grow_by=self.config.pool_grow_by, reserve=self.config.pool_reserve
        )
        self._open = OpenSet()
        # Closed nodes are kept only so their slots can be released.
        self._closed: list[SearchNode] = []
        self._members = MembershipIndex()
        self._current: SearchNode | None = None
        self._goal: Any = None
        self._destination_cost: DestinationCost | None = None
        self._seed_g = 0.0
        self._status = PathResult.NOT_FOUND
        self.expansions = 0

    # -- per-search state -------------------------------------------------

    def _clear_lists(self) -> None:
        for node in self._open.drain():
            self._pool.release(node)
        for node in self._closed:
            self._pool.release(node)
        self._closed = []
        self._members.clear()
        self._current = None
        self.expansions = 0

    def reset(self) -> None:
        """Drop the current search and return its nodes to the pool."""
        self._clear_lists()
        self._goal = None
        self._destination_cost = None
        self._status = PathResult.NOT_FOUND

    def _begin(
        self,
        start: Any,
        goal: Any,
        destination_cost: DestinationCost,
        *,
        index: int = 0,
    ) -> None:
        self._clear_lists()
        self._goal = goal
        self._destination_cost = destination_cost

        node = self._pool.acquire()
        node.state = start
        node.parent = NO_SLOT
        node.index = int(index)
        node.g = float(destination_cost(start, goal))
        node.h = 0.0
        node.f = node.g + node.h
        self._seed_g = node.g

        self._open.push(node)
        self._members.mark_open(self._key(node), node.slot)
        self._status = PathResult.SEARCHING
        logger.debug("search initialized: start=%r goal=%r", start, goal)

    def _key(self, node: SearchNode) -> Hashable:
        raise NotImplementedError

    def _expand(self, node: SearchNode) -> None:
        raise NotImplementedError

    # -- loop -------------------------------------------------------------

    def step(self) -> PathResult:
        """Run one iteration of the search loop.

        Returns SEARCHING while work remains. Once FOUND or NOT_FOUND has
        been returned, further calls return the same value. Calling this
        before any search was initialized returns NOT_FOUND.
        """

        if self._status != PathResult.SEARCHING:
            return self._status

        if not self._open:
            self._status = PathResult.NOT_FOUND
            logger.debug("search exhausted after %d expansions", self.expansions)
            return self._status

        node = self._open.pop_min()
        self._members.mark_closed(self._key(node))
        self._closed.append(node)
        self._current = node
        self.expansions += 1

        if node.state == self._goal:
            self._status = PathResult.FOUND
            logger.debug(
                "path found after %d expansions (g=%.4f)", self.expansions, node.g
            )
            return self._status

        self._expand(node)
        return PathResult.SEARCHING

    def _run(self) -> SearchResult:
        while self.step() == PathResult.SEARCHING:
            pass
        return self.result()

    def _relax(
        self, state: Any, key: Hashable, move_cost: float, *, index: int = 0
    ) -> None:
        current = self._current
        if self._status != PathResult.SEARCHING or current is None:
            return
        destination_cost = self._destination_cost
        if destination_cost is None:
            return

        entry = self._members.entry(key)
        if entry.on_closed:
            return
        g = current.g + float(move_cost)

        if entry.slot != NO_SLOT:
            node = self._pool.node(entry.slot)
            if g < node.g:
                node.g = g
                node.f = node.g + node.h
                node.parent = current.slot
                self._open.rebuild()
            return

        node = self._pool.acquire()
        node.state = state
        node.index = int(index)
        node.parent = current.slot
        node.g = g
        node.h = float(destination_cost(state, self._goal))
        node.f = node.g + node.h
        self._open.push(node)
        entry.slot = node.slot
        entry.on_open = True

    # -- results ----------------------------------------------------------

    def get_path(self) -> list[Any]:
        """States from the most recently expanded node back to the start.

        After FOUND this is the complete path, goal first. It may be called
        at any point of a step-wise search.
        """

        path: list[Any] = []
        node = self._current
        while node is not None:
            path.append(node.state)
            node = self._pool.node(node.parent) if node.parent != NO_SLOT else None
        return path

    def result(self) -> SearchResult:
        if self._status != PathResult.FOUND or self._current is None:
            return SearchResult(result=self._status, expansions=self.expansions)
        return SearchResult(
            result=self._status,
            path=tuple(self.get_path()),
            cost=self._current.g - self._seed_g,
            expansions=self.expansions,
        )

    @property
    def status(self) -> PathResult:
        return self._status

    def open_states(self) -> list[Any]:
        return [node.state for node in self._open]

    def closed_states(self) -> list[Any]:
        return [node.state for node in self._closed]

    @property
    def pool_capacity(self) -> int:
        return self._pool.capacity

    @property
    def nodes_in_use(self) -> int:
        return self._pool.in_use
