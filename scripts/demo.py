from __future__ import annotations

import logging
import sys

import numpy as np

from pathfinder import AStarGeneric, PathResult
from tilemap.costs import GridCosts, manhattan_distance
from tilemap.textmap import load_text_map, random_tile_map, render_path, wall_mask

MAP_WIDTH = 80
MAP_HEIGHT = 25


def main() -> None:
    """Search between two random tiles of an 80x25 text map and print it.

    Usage: python scripts/demo.py [map.txt] [seed]
    Without a map file a random one is generated.
    """

    logging.basicConfig(level=logging.INFO)

    seed = int(sys.argv[2]) if len(sys.argv) > 2 else None
    rng = np.random.default_rng(seed)

    if len(sys.argv) > 1 and sys.argv[1] != "-":
        tiles = load_text_map(sys.argv[1], width=MAP_WIDTH, height=MAP_HEIGHT)
    else:
        tiles = random_tile_map(
            seed=int(rng.integers(0, 2**31)),
            width=MAP_WIDTH,
            height=MAP_HEIGHT,
            density=0.25,
        )

    start = (int(rng.integers(1, MAP_WIDTH - 1)), int(rng.integers(1, MAP_HEIGHT - 1)))
    goal = (int(rng.integers(1, MAP_WIDTH - 1)), int(rng.integers(1, MAP_HEIGHT - 1)))

    grid = GridCosts.from_walls(wall_mask(tiles))
    res = AStarGeneric().find_path(start, goal, manhattan_distance, grid.neighbors8)

    if res.result == PathResult.FOUND:
        print("Found path ", end="")
    else:
        print("Could not find path ", end="")
    print(f"({start[0]},{start[1]}) to ({goal[0]},{goal[1]})")
    print(render_path(tiles, res.path), end="")


if __name__ == "__main__":
    main()
