from __future__ import annotations

import logging
import time

from pathfinder import AStarGeneric, AStarGenericCached, AStarTile8DirCached
from tilemap.costs import GridCosts, octile_distance
from tilemap.textmap import random_tile_map, wall_mask


def _timeit(label: str, fn) -> float:
    t0 = time.perf_counter()
    fn()
    t1 = time.perf_counter()
    ms = (t1 - t0) * 1000.0
    print(f"{label}: {ms:.2f} ms")
    return ms


def main() -> None:
    """Quick CPU benchmark of the three engines on one random map.

    The cached engines are timed twice: the first run fills the neighbor
    cache, the second replays it.
    """

    logging.basicConfig(level=logging.INFO)

    width = 256
    height = 256
    tiles = random_tile_map(seed=0, width=width, height=height, density=0.2)
    grid = GridCosts.from_walls(wall_mask(tiles))
    start = (1, 1)
    goal = (width - 2, height - 2)

    generic = AStarGeneric()
    cached = AStarGenericCached()
    tile = AStarTile8DirCached(map_width=width, map_height=height)

    def run_generic() -> None:
        res = generic.find_path(start, goal, octile_distance, grid.neighbors8)
        print(f"  {res.result.name} expansions={res.expansions} cost={res.cost}")

    def run_cached() -> None:
        res = cached.find_path(
            start, grid.index(start), goal, octile_distance, grid.neighbors8_indexed
        )
        print(f"  {res.result.name} expansions={res.expansions} cost={res.cost}")

    def run_tile() -> None:
        res = tile.find_path(
            start, goal, grid.move_cost, octile_distance, grid.move_blocked
        )
        print(f"  {res.result.name} expansions={res.expansions} cost={res.cost}")

    _timeit(f"Generic {width}x{height}", run_generic)
    _timeit(f"Generic cached {width}x{height} (cold)", run_cached)
    _timeit(f"Generic cached {width}x{height} (warm)", run_cached)
    _timeit(f"Tile 8-dir cached {width}x{height} (cold)", run_tile)
    _timeit(f"Tile 8-dir cached {width}x{height} (warm)", run_tile)


if __name__ == "__main__":
    main()
