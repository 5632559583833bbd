from __future__ import annotations

import hashlib
import weakref

import numpy as np

from pathfinder.generic import AStarGeneric
from pathfinder.grid import AStarTile8DirCached
from tilemap.costs import SQRT2, GridCosts, octile_distance

# Fingerprint of the cost grid each reused engine last searched.
_ENGINE_GRIDS: weakref.WeakKeyDictionary[AStarTile8DirCached, str] = (
    weakref.WeakKeyDictionary()
)


def _grid_fingerprint(grid: GridCosts) -> str:
    h = hashlib.blake2b(digest_size=16)
    h.update(repr(grid.cost.shape).encode())
    h.update(np.ascontiguousarray(grid.cost).tobytes())
    return h.hexdigest()


def astar_path(
    cost: np.ndarray,
    *,
    start: tuple[int, int],
    goal: tuple[int, int],
    diag: bool = True,
    engine: AStarTile8DirCached | None = None,
) -> list[tuple[int, int]]:
    """A* path on a 2D cost grid.

    start/goal are (y, x). Cells with non-finite cost are treated as blocked.
    Diagonal steps cost sqrt(2) times the entered cell. Returns the path from
    start to goal, or [] when there is none.

    Pass a long-lived `engine` to keep its neighbor cache between calls.
    The cache is dropped whenever the engine is handed a grid whose costs
    differ from the one it last searched.
    """

    grid = GridCosts(cost, diagonal=SQRT2)
    sy, sx = int(start[0]), int(start[1])
    gy, gx = int(goal[0]), int(goal[1])
    s = (sx, sy)
    g = (gx, gy)
    if not grid.is_passable(s) or not grid.is_passable(g):
        return []

    # Scaled so the estimate never exceeds the cheapest possible route.
    cmin = grid.min_cost()

    def h(node: tuple[int, int], target: tuple[int, int]) -> float:
        return cmin * octile_distance(node, target, diagonal=SQRT2)

    if bool(diag):
        if engine is None:
            engine = AStarTile8DirCached()
        fingerprint = _grid_fingerprint(grid)
        if _ENGINE_GRIDS.get(engine) != fingerprint:
            engine.clear_cache()
            _ENGINE_GRIDS[engine] = fingerprint
        engine.set_map_width(grid.width)
        engine.set_map_height(grid.height)
        res = engine.find_path(s, g, grid.move_cost, h, grid.move_blocked)
    else:
        res = AStarGeneric().find_path(s, g, h, grid.neighbors4)

    if not res.found:
        return []
    return [(int(y), int(x)) for (x, y) in res.start_to_goal()]
