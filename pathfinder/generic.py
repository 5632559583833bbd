from __future__ import annotations

from typing import Any, Hashable

from .config import EngineConfig
from .core import DestinationCost, GetNeighbors, SearchNode, SearchResult
from .engine import SearchEngine


class AStarGeneric(SearchEngine):
    """A* over caller-defined states.

    States must be hashable and comparable with `==`. The neighbor function
    is called as ``get_neighbors(state, add_neighbor)`` and must call
    ``add_neighbor(neighbor, move_cost)`` once per directly reachable state.
    Neighbors are enumerated afresh on every expansion; use
    AStarGenericCached when edge costs rarely change.
    """

    def __init__(self, *, config: EngineConfig | None = None):
        super().__init__(config=config)
        self._get_neighbors: GetNeighbors | None = None

    def find_path(
        self,
        start: Hashable,
        goal: Hashable,
        destination_cost: DestinationCost,
        get_neighbors: GetNeighbors,
    ) -> SearchResult:
        """Search until the goal is reached or every reachable state is closed."""
        self.initialize_step(start, goal, destination_cost, get_neighbors)
        return self._run()

    def initialize_step(
        self,
        start: Hashable,
        goal: Hashable,
        destination_cost: DestinationCost,
        get_neighbors: GetNeighbors,
    ) -> None:
        self._get_neighbors = get_neighbors
        self._begin(start, goal, destination_cost)

    def add_neighbor(self, neighbor: Hashable, move_cost: float) -> None:
        """Relax one neighbor of the node being expanded; a no-op otherwise."""
        self._relax(neighbor, neighbor, move_cost)

    def _key(self, node: SearchNode) -> Any:
        return node.state

    def _expand(self, node: SearchNode) -> None:
        if self._get_neighbors is None:
            return
        self._get_neighbors(node.state, self.add_neighbor)
