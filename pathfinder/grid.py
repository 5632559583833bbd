from __future__ import annotations

import logging

from .cache import NeighborCache
from .config import EngineConfig
from .core import (
    Coord,
    DestinationCost,
    MoveBlocked,
    MoveCost,
    SearchNode,
    SearchResult,
)
from .engine import SearchEngine

logger = logging.getLogger(__name__)

# Scan order of the 8 surrounding tiles: row by row, left to right.
NEIGHBOR_OFFSETS_8: tuple[Coord, ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


def grid_index(pos: Coord, width: int) -> int:
    """Row-major index of an (x, y) tile."""
    return int(pos[1]) * int(width) + int(pos[0])


class AStarTile8DirCached(SearchEngine):
    """A* for tile maps with movement to the 8 surrounding tiles.

    Positions are (x, y). Move costs are cached per origin tile, addressed
    by ``y * map_width + x``. Changing the map width drops the whole cache.

    Tiles with x outside [0, map_width) are never visited, nor y outside
    [0, map_height) when a height is given; such tiles would share an index
    with a tile inside the map.

    Blocking is only evaluated while an origin's cache entry is being
    filled. A cache hit replays the recorded edges without calling
    `move_blocked`, so after blocking changes the affected tiles must be
    invalidated with `clear_cache_position` (or the whole cache cleared).
    The same holds when switching between the blocked and unblocked forms
    of `find_path` on one engine.
    """

    def __init__(
        self,
        *,
        map_width: int = 0,
        map_height: int | None = None,
        config: EngineConfig | None = None,
    ):
        super().__init__(config=config)
        self._cache = NeighborCache()
        self.map_width = 0
        self.map_height: int | None = None
        self._move_cost: MoveCost | None = None
        self._move_blocked: MoveBlocked | None = None
        self._cache_blocked: bool | None = None
        if int(map_width) > 0:
            self.set_map_width(int(map_width))
        if map_height is not None:
            self.set_map_height(map_height)

    def set_map_width(self, width: int) -> None:
        width = int(width)
        if width <= 0:
            raise ValueError("map width must be > 0")
        if width != self.map_width:
            self.map_width = width
            self.clear_cache()

    def set_map_height(self, height: int | None) -> None:
        if height is not None and int(height) <= 0:
            raise ValueError("map height must be > 0")
        self.map_height = None if height is None else int(height)

    def index_of(self, pos: Coord) -> int:
        return grid_index(pos, self.map_width)

    def in_bounds(self, pos: Coord) -> bool:
        x, y = int(pos[0]), int(pos[1])
        if x < 0 or x >= self.map_width:
            return False
        if self.map_height is not None and (y < 0 or y >= self.map_height):
            return False
        return True

    def find_path(
        self,
        start: Coord,
        goal: Coord,
        move_cost: MoveCost,
        destination_cost: DestinationCost,
        move_blocked: MoveBlocked | None = None,
    ) -> SearchResult:
        """Search from `start` to `goal`.

        Without `move_blocked` every surrounding tile is considered
        reachable and only `move_cost` is consulted.
        """

        self.initialize_step(start, goal, move_cost, destination_cost, move_blocked)
        return self._run()

    def initialize_step(
        self,
        start: Coord,
        goal: Coord,
        move_cost: MoveCost,
        destination_cost: DestinationCost,
        move_blocked: MoveBlocked | None = None,
    ) -> None:
        if self.map_width <= 0:
            raise ValueError("map width must be set before searching")

        start = (int(start[0]), int(start[1]))
        goal = (int(goal[0]), int(goal[1]))
        self._move_cost = move_cost
        self._move_blocked = move_blocked
        self._note_cache_mode(move_blocked is not None)

        if not self.in_bounds(start) or not self.in_bounds(goal):
            self.reset()
            logger.debug("start %r or goal %r lies outside the map", start, goal)
            return

        self._begin(start, goal, destination_cost, index=self.index_of(start))

    def _note_cache_mode(self, blocked: bool) -> None:
        if self._cache_blocked is not None and self._cache_blocked != blocked:
            if len(self._cache) > 0:
                logger.warning(
                    "grid search %s move_blocked reuses %d cache entries filled %s it; "
                    "cached edges are not re-checked",
                    "with" if blocked else "without",
                    len(self._cache),
                    "without" if blocked else "with",
                )
        self._cache_blocked = blocked

    def clear_cache(self) -> None:
        self._cache.clear()

    def clear_cache_index(self, index: int) -> None:
        self._cache.clear_index(int(index))

    def clear_cache_position(self, pos: Coord) -> None:
        self._cache.clear_index(self.index_of(pos))

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

        move_cost = self._move_cost
        move_blocked = self._move_blocked
        if move_cost is None:
            return

        entry = self._cache.begin(node.index)
        x, y = node.state
        for dx, dy in NEIGHBOR_OFFSETS_8:
            pos = (x + dx, y + dy)
            if not self.in_bounds(pos):
                continue
            if move_blocked is not None and move_blocked(node.state, pos):
                continue
            cost = float(move_cost(node.state, pos))
            index = self.index_of(pos)
            self._relax(pos, index, cost, index=index)
            entry.record(pos, index, cost)
        entry.populated = True
