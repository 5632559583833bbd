from __future__ import annotations

from typing import Any

from .cache import NeighborCache
from .config import EngineConfig
from .core import DestinationCost, GetNeighborsIndexed, SearchNode, SearchResult
from .engine import SearchEngine


class AStarGenericCached(SearchEngine):
    """A* over caller-defined states with a per-origin neighbor cache.

    Every state needs a unique integer index. The neighbor function is
    called as ``get_neighbors(state, add_neighbor)`` and must call
    ``add_neighbor(neighbor, neighbor_index, move_cost)`` for each reachable
    neighbor. The first expansion of an origin records what it reported;
    later expansions of that origin, in this or any later search, replay
    the record instead of calling the neighbor function. Call
    `clear_cache_index` when an origin's out-edges change.
    """

    def __init__(self, *, config: EngineConfig | None = None):
        super().__init__(config=config)
        self._get_neighbors: GetNeighborsIndexed | None = None
        self._cache = NeighborCache()

    def find_path(
        self,
        start: Any,
        start_index: int,
        goal: Any,
        destination_cost: DestinationCost,
        get_neighbors: GetNeighborsIndexed,
    ) -> SearchResult:
        self.initialize_step(start, start_index, goal, destination_cost, get_neighbors)
        return self._run()

    def initialize_step(
        self,
        start: Any,
        start_index: int,
        goal: Any,
        destination_cost: DestinationCost,
        get_neighbors: GetNeighborsIndexed,
    ) -> None:
        self._get_neighbors = get_neighbors
        self._begin(start, goal, destination_cost, index=int(start_index))

    def clear_cache(self) -> None:
        self._cache.clear()

    def clear_cache_index(self, index: int) -> None:
        self._cache.clear_index(int(index))

    def cache_stats(self) -> dict[str, int]:
        return self._cache.stats()

    def _key(self, node: SearchNode) -> int:
        return node.index

    def _expand(self, node: SearchNode) -> None:
        cached = self._cache.lookup(node.index)
        if cached is not None:
            for neighbor in cached:
                self._relax(
                    neighbor.state, neighbor.index, neighbor.cost, index=neighbor.index
                )
            return

        entry = self._cache.begin(node.index)

        def add_neighbor(neighbor: Any, neighbor_index: int, move_cost: float) -> None:
            neighbor_index = int(neighbor_index)
            self._relax(neighbor, neighbor_index, move_cost, index=neighbor_index)
            entry.record(neighbor, neighbor_index, move_cost)

        if self._get_neighbors is None:
            return
        self._get_neighbors(node.state, add_neighbor)
        entry.populated = True
